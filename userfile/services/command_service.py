"""Argument map and validation for a single invocation."""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from userfile.core.errors import (
    MissingFileNameError,
    MissingIdError,
    MissingItemError,
    MissingOperationError,
    UnknownOperationError,
)

ADD = "add"
LIST = "list"
FIND_BY_ID = "findById"
REMOVE = "remove"

ALLOWED_OPERATIONS = (ADD, LIST, FIND_BY_ID, REMOVE)

Arguments = Dict[str, str]


def build_arguments(
    operation: Optional[str] = None,
    file_name: Optional[str] = None,
    item: Optional[str] = None,
    record_id: Optional[str] = None,
) -> Arguments:
    return {
        "operation": operation or "",
        "fileName": file_name or "",
        "item": item or "",
        "id": record_id or "",
    }


def validate_arguments(args: Mapping[str, str]) -> None:
    """
    Check the flag combination; the first failing rule raises.

    Order: file name, operation present, operation known, then the
    operation-specific item/id requirement.
    """
    if not args.get("fileName"):
        raise MissingFileNameError()

    operation = args.get("operation") or ""
    if not operation:
        raise MissingOperationError()
    if operation not in ALLOWED_OPERATIONS:
        raise UnknownOperationError(operation)

    if operation == ADD:
        if not args.get("item"):
            raise MissingItemError()
    elif operation in (REMOVE, FIND_BY_ID):
        if not args.get("id"):
            raise MissingIdError()
