"""
JSON-file persistence for the record collection.

The backing file holds one JSON array. It is opened read-write (and created
when missing) for the duration of a single operation; there is no locking, so
two processes working on the same file at once may overwrite each other.
"""

from __future__ import annotations

from contextlib import contextmanager
import json
import logging
import os
from typing import BinaryIO, Iterator, Sequence

from userfile.core.config import get_settings
from userfile.core.errors import CorruptStoreError, FileAccessError, StoreWriteError
from userfile.domain.records import Record, RecordFormatError, dump_records, records_from_json

log = logging.getLogger(__name__)


@contextmanager
def open_store(path: str | os.PathLike[str]) -> Iterator[BinaryIO]:
    """Open (or create) the backing file for reading and writing; always closes it."""
    settings = get_settings()
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, settings.file_mode)
    except OSError as exc:
        raise FileAccessError(f"cannot open {os.fspath(path)}: {exc.strerror or exc}") from exc
    fh = os.fdopen(fd, "r+b")
    log.debug("opened store %s", os.fspath(path))
    try:
        yield fh
    finally:
        fh.close()


def read_raw(fh: BinaryIO) -> bytes:
    """Entire file content, untouched."""
    try:
        fh.seek(0)
        return fh.read()
    except OSError as exc:
        raise FileAccessError(f"cannot read store: {exc}") from exc


def read_records(fh: BinaryIO) -> list[Record]:
    """
    Decode the stored collection.

    An empty file is an empty collection. Only the first JSON value is
    decoded; anything after it is ignored.
    """
    raw = read_raw(fh)
    if not raw:
        return []
    try:
        text = raw.decode(get_settings().encoding)
    except UnicodeDecodeError as exc:
        raise CorruptStoreError(f"store is not valid text: {exc}") from exc
    stripped = text.lstrip()
    try:
        data, _end = json.JSONDecoder().raw_decode(stripped)
    except json.JSONDecodeError as exc:
        raise CorruptStoreError(f"store is not valid JSON: {exc}") from exc
    try:
        return records_from_json(data)
    except RecordFormatError as exc:
        raise CorruptStoreError(f"store has an invalid record: {exc}") from exc


def write_records(fh: BinaryIO, records: Sequence[Record]) -> None:
    """Replace the file content with the encoded collection."""
    try:
        payload = dump_records(records).encode(get_settings().encoding)
    except (TypeError, ValueError) as exc:
        raise StoreWriteError(f"cannot encode records: {exc}") from exc
    try:
        fh.truncate(0)
        fh.seek(0)
        fh.write(payload)
        fh.flush()
    except OSError as exc:
        raise StoreWriteError(f"cannot write store: {exc}") from exc
    log.debug("wrote %d record(s), %d bytes", len(records), len(payload))
