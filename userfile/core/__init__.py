"""
Core utilities shared across the userfile package.

This package hosts:
- configuration helpers (env vars, file permissions, encoding)
- the error taxonomy raised by services and repositories
- logging setup used by the command-line entry point
"""
