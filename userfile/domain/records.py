"""Domain helpers for user records: decoding, encoding and lookups."""
from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any, Iterable, Mapping, Optional, Sequence

RECORD_FIELDS = ("id", "email", "age")
_COMPACT = (",", ":")


class RecordFormatError(ValueError):
    """Raised when a JSON value does not have the shape of a record."""


@dataclass(frozen=True)
class Record:
    """One user entry. Empty strings and zero age mean "not set"."""

    id: str = ""
    email: str = ""
    age: int = 0

    @classmethod
    def from_mapping(cls, data: Any) -> "Record":
        """
        Build a record from a decoded JSON object.

        Keys match field names case-insensitively, an exact-case key winning
        over other spellings. Unknown keys are ignored, null values count as
        absent and a null object is an empty record. A known key holding the
        wrong JSON type is rejected.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise RecordFormatError(f"expected a JSON object, got {_json_type(data)}")
        values: dict[str, Any] = {}
        for key in ("id", "email"):
            value = _field(data, key)
            if value is None:
                continue
            if not isinstance(value, str):
                raise RecordFormatError(f"field {key!r} must be a string, got {_json_type(value)}")
            values[key] = value
        age = _field(data, "age")
        if age is not None:
            # bool is an int subclass but not a JSON number
            if isinstance(age, bool) or not isinstance(age, int):
                raise RecordFormatError(f"field 'age' must be an integer, got {_json_type(age)}")
            values["age"] = age
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form with empty fields omitted, keys in id/email/age order."""
        out: dict[str, Any] = {}
        if self.id:
            out["id"] = self.id
        if self.email:
            out["email"] = self.email
        if self.age:
            out["age"] = self.age
        return out


def _field(data: Mapping[str, Any], name: str) -> Any:
    if name in data:
        return data[name]
    value = None
    for key, candidate in data.items():
        if isinstance(key, str) and key.casefold() == name:
            value = candidate
    return value


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def parse_record(text: str) -> Record:
    """Decode a JSON object string into a Record."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordFormatError(f"invalid JSON: {exc}") from exc
    return Record.from_mapping(data)


def records_from_json(data: Any) -> list[Record]:
    """Convert a decoded JSON array into records; null is an empty collection."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise RecordFormatError(f"expected a JSON array, got {_json_type(data)}")
    out: list[Record] = []
    for index, item in enumerate(data):
        try:
            out.append(Record.from_mapping(item))
        except RecordFormatError as exc:
            raise RecordFormatError(f"element {index}: {exc}") from exc
    return out


def dump_record(record: Record) -> str:
    return json.dumps(record.to_dict(), ensure_ascii=False, separators=_COMPACT)


def dump_records(records: Iterable[Record]) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False, separators=_COMPACT)


def find_index(records: Sequence[Record], record_id: str) -> Optional[int]:
    """Position of the first record whose id matches, or None."""
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    return None
