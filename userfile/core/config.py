"""
Configuration helpers for userfile.

Exposes a Settings object that reads environment variables so that
repositories/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import codecs
import logging
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    log_level: int
    file_mode: int
    encoding: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _octal(value: str | None, default: int) -> int:
        try:
            mode = int((value or "").strip(), 8)
        except (TypeError, ValueError):
            return default
        return mode if 0 <= mode <= 0o7777 else default

    def _level(value: str | None, default: int = logging.WARNING) -> int:
        name = (value or "").strip().upper()
        level = logging.getLevelName(name) if name else None
        return level if isinstance(level, int) else default

    def _encoding(value: str | None, default: str = "utf-8") -> str:
        name = (value or "").strip()
        if not name:
            return default
        try:
            return codecs.lookup(name).name
        except LookupError:
            return default

    return Settings(
        log_level=_level(os.getenv("USERFILE_LOG_LEVEL")),
        file_mode=_octal(os.getenv("USERFILE_FILE_MODE"), 0o666),
        encoding=_encoding(os.getenv("USERFILE_ENCODING")),
    )
