"""Run one operation against the backing file."""
from __future__ import annotations

import logging
from typing import BinaryIO, Callable, Dict, Mapping

from userfile.core.config import get_settings
from userfile.core.errors import InvalidRecordFormatError
from userfile.domain.records import RecordFormatError, dump_record, find_index, parse_record
from userfile.repositories.json_storage import open_store, read_raw, read_records, write_records
from userfile.services.command_service import ADD, FIND_BY_ID, LIST, REMOVE, validate_arguments

log = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Item with id {id} not found"


def perform(args: Mapping[str, str], writer: BinaryIO) -> None:
    """
    Validate ``args`` and execute its operation, writing any output to ``writer``.

    ``writer`` is a binary sink: ``list`` copies the file bytes to it as they
    are. The file is opened only after validation succeeds and is closed
    whatever the outcome.
    """
    validate_arguments(args)
    operation = args["operation"]
    handler = _HANDLERS[operation]
    log.debug("running %s on %s", operation, args["fileName"])
    with open_store(args["fileName"]) as fh:
        handler(fh, args, writer)


def _emit(writer: BinaryIO, text: str) -> None:
    writer.write(text.encode(get_settings().encoding))


def _list(fh: BinaryIO, args: Mapping[str, str], writer: BinaryIO) -> None:
    raw = read_raw(fh)
    if raw:
        writer.write(raw)


def _add(fh: BinaryIO, args: Mapping[str, str], writer: BinaryIO) -> None:
    try:
        record = parse_record(args["item"])
    except RecordFormatError as exc:
        raise InvalidRecordFormatError(f"invalid item: {exc}") from exc
    records = read_records(fh)
    records.append(record)
    write_records(fh, records)


def _find_by_id(fh: BinaryIO, args: Mapping[str, str], writer: BinaryIO) -> None:
    records = read_records(fh)
    index = find_index(records, args["id"])
    if index is None:
        log.info("no record with id %s", args["id"])
        return
    _emit(writer, dump_record(records[index]))


def _remove(fh: BinaryIO, args: Mapping[str, str], writer: BinaryIO) -> None:
    records = read_records(fh)
    index = find_index(records, args["id"])
    if index is None:
        log.info("no record with id %s to remove", args["id"])
        _emit(writer, NOT_FOUND_MESSAGE.format(id=args["id"]))
        return
    del records[index]
    write_records(fh, records)


_HANDLERS: Dict[str, Callable[[BinaryIO, Mapping[str, str], BinaryIO], None]] = {
    LIST: _list,
    ADD: _add,
    FIND_BY_ID: _find_by_id,
    REMOVE: _remove,
}
