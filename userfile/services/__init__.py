"""
High-level use cases for userfile.

command_service turns flag values into validated arguments; record_service
runs one operation against the backing file. The CLI calls these instead of
touching the JSON file directly.
"""
