"""Tests for record data models."""

import json
from pathlib import Path

import pytest

from marcrank import ParseError, load_records
from marcrank.models import Field, Record, Subfield


@pytest.mark.unit
def test_record_from_dict() -> None:
    """Test parsing control and data fields."""
    record = Record.from_dict(
        {
            "leader": "00000cam^a2200301#i^4500",
            "fields": [
                {"tag": "008", "value": "850506s1983"},
                {"tag": "LOW", "ind1": "1", "subfields": [{"code": "a", "value": "FENNI"}]},
            ],
        }
    )

    assert record.leader == "00000cam^a2200301#i^4500"
    assert len(record.fields) == 2
    assert record.fields[0].is_control
    assert record.fields[0].value == "850506s1983"
    assert not record.fields[1].is_control
    assert record.fields[1].ind1 == "1"
    assert record.fields[1].subfields == (Subfield("a", "FENNI"),)


@pytest.mark.unit
def test_record_without_leader_or_fields() -> None:
    """Test missing leader and fields produce an empty record."""
    record = Record.from_dict({})

    assert record.leader is None
    assert list(record) == []


@pytest.mark.unit
def test_record_iterates_fields_in_order() -> None:
    """Test iteration yields fields in record order, duplicates kept."""
    record = Record(
        fields=(Field("CAT", subfields=()), Field("LOW", subfields=()), Field("CAT", subfields=())),
    )
    assert [f.tag for f in record] == ["CAT", "LOW", "CAT"]


@pytest.mark.unit
def test_record_round_trip() -> None:
    """Test to_dict output parses back to an equal record."""
    record = Record(
        leader="00000cam^a22003017i^4500",
        fields=(
            Field("005", value="20141219114925.0"),
            Field("CAT", subfields=(Subfield("a", "KVP1008"), Subfield("c", "20131219"))),
        ),
    )
    assert Record.from_dict(record.to_dict()) == record


@pytest.mark.unit
@pytest.mark.parametrize(
    "data",
    [
        {"value": "x"},
        {"tag": "", "value": "x"},
        {"tag": "245"},
        {"tag": "245", "value": None, "subfields": None},
    ],
    ids=["no_tag", "empty_tag", "no_content", "null_content"],
)
def test_field_from_dict_rejects_malformed(data: dict) -> None:
    """Test malformed fields raise ValueError."""
    with pytest.raises(ValueError):
        Field.from_dict(data)


@pytest.mark.unit
@pytest.mark.parametrize(
    "subfield",
    [{"code": "b", "value": None}, {"code": None, "value": "helka"}, {"code": "b"}, {"code": "b", "value": 7}, "b"],
    ids=["null_value", "null_code", "missing_value", "number_value", "not_an_object"],
)
def test_field_from_dict_rejects_non_string_subfields(subfield: object) -> None:
    """Test null or non-string subfield content is not turned into text."""
    with pytest.raises(ValueError):
        Field.from_dict({"tag": "SID", "subfields": [subfield]})


@pytest.mark.unit
def test_null_subfield_is_a_parse_error(tmp_path: Path) -> None:
    """Test a record with a null owner code fails to load instead of counting 'NONE'."""
    path = tmp_path / "record.json"
    path.write_text(
        json.dumps(
            {
                "fields": [
                    {"tag": "LOW", "subfields": [{"code": "a", "value": "FENNI"}]},
                    {"tag": "SID", "subfields": [{"code": "b", "value": None}]},
                ]
            }
        ),
        encoding="utf-8",
    )

    with pytest.raises(ParseError):
        load_records(path)


@pytest.mark.unit
def test_record_is_immutable() -> None:
    """Test records cannot be modified after construction."""
    record = Record(leader="x")
    with pytest.raises(AttributeError):
        record.leader = "y"  # type: ignore[misc]
