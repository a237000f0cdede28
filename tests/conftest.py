"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from marcrank.models import Field, Record, Subfield  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DEFAULT_LEADER = "00000cam^a22003017i^4500"
DEFAULT_008 = "850506s1983^^^^xxu|||||||||||||||||eng||"

FieldSpec = tuple[str, ...]


def _build_field(spec: FieldSpec) -> Field:
    """Build a field from ``(tag, value)`` or ``(tag, code, value, code, value, ...)``."""
    tag, *rest = spec
    if len(rest) == 1:
        return Field(tag=tag, value=rest[0])
    if not rest or len(rest) % 2:
        raise ValueError(f"Bad field spec: {spec!r}")
    subfields = tuple(Subfield(code=c, value=v) for c, v in zip(rest[::2], rest[1::2], strict=True))
    return Field(tag=tag, subfields=subfields)


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory for test records.

    Fields are given as tuples: ``("008", "...")`` for control fields and
    ``("LOW", "a", "FENNI")`` for data fields.
    """

    def _factory(*fields: FieldSpec, leader: str | None = DEFAULT_LEADER) -> Record:
        return Record(leader=leader, fields=tuple(_build_field(spec) for spec in fields))

    return _factory


@pytest.fixture
def cat_fields() -> list[FieldSpec]:
    """CAT change log mixing batch loads, conversions and a human cataloger."""
    return [
        ("CAT", "a", "LOAD-HELKA", "b", "", "c", "20140812", "l", "FIN01", "h", "2333"),
        ("CAT", "a", "LOAD-HELKA", "b", "", "c", "20111215", "l", "FIN01", "h", "0529"),
        ("CAT", "a", "LOAD-FIX", "b", "30", "c", "20141219", "l", "FIN01", "h", "1145"),
        ("CAT", "a", "CONV-ISBD", "b", "", "c", "20120401", "l", "FIN01", "h", "2007"),
        ("CAT", "a", "KVP1008", "b", "30", "c", "20131219", "l", "FIN01"),
        ("CAT", "a", "KVP1008", "b", "30", "c", "20131215", "l", "FIN01"),
    ]


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixture files."""
    return FIXTURES_DIR
