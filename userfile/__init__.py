"""
userfile: manage a list of user records kept as one JSON array in a file.
"""

__version__ = "0.1.0"
