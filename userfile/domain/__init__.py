"""Domain types for userfile."""
