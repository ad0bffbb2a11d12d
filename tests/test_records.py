from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userfile.domain.records import (  # noqa: E402
    Record,
    RecordFormatError,
    dump_record,
    dump_records,
    find_index,
    parse_record,
    records_from_json,
)


def test_parse_record_reads_all_fields():
    rec = parse_record('{"id":"1","email":"a@b.com","age":30}')
    assert rec == Record(id="1", email="a@b.com", age=30)


def test_parse_record_ignores_unknown_fields_and_nulls():
    rec = parse_record('{"id":"7","name":"Bob","email":null,"extra":{"x":1}}')
    assert rec == Record(id="7")


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"id":1}',
        '{"email":["a"]}',
        '{"age":"30"}',
        '{"age":30.5}',
        '{"age":true}',
        '["id","1"]',
        '"just a string"',
    ],
)
def test_parse_record_rejects_wrong_shapes(text):
    with pytest.raises(RecordFormatError):
        parse_record(text)


def test_dump_record_omits_empty_fields():
    assert dump_record(Record(id="1")) == '{"id":"1"}'
    assert dump_record(Record(email="x@y.z", age=0)) == '{"email":"x@y.z"}'
    assert dump_record(Record()) == "{}"


def test_dump_records_is_compact_and_ordered():
    out = dump_records([Record(id="1", email="a@b.com", age=30), Record(id="2")])
    assert out == '[{"id":"1","email":"a@b.com","age":30},{"id":"2"}]'
    assert dump_records([]) == "[]"


def test_dump_record_keeps_non_ascii_text():
    assert dump_record(Record(id="ç", email="josé@ex.com")) == '{"id":"ç","email":"josé@ex.com"}'


def test_records_from_json_round_trip():
    records = [Record(id="1", email="a@b.com", age=30), Record(email="only@mail"), Record(age=5)]
    assert records_from_json(json.loads(dump_records(records))) == records


def test_records_from_json_null_and_bad_elements():
    assert records_from_json(None) == []
    with pytest.raises(RecordFormatError):
        records_from_json({"id": "1"})
    with pytest.raises(RecordFormatError) as exc:
        records_from_json([{"id": "1"}, 3])
    assert "element 1" in str(exc.value)


def test_find_index_returns_first_match():
    records = [Record(id="a"), Record(id="b", age=1), Record(id="b", age=2)]
    assert find_index(records, "b") == 1
    assert find_index(records, "z") is None
    assert find_index([], "a") is None


def test_parse_record_case_insensitive_keys():
    assert parse_record('{"ID":"1","eMail":"a@b.com","Age":30}') == Record(id="1", email="a@b.com", age=30)
    assert parse_record('{"ID":"upper","id":"exact"}') == Record(id="exact")
    with pytest.raises(RecordFormatError):
        parse_record('{"AGE":"thirty"}')


def test_null_decodes_to_empty_record():
    assert parse_record("null") == Record()
    assert records_from_json([None, {"id": "1"}]) == [Record(), Record(id="1")]
