"""Extractors reading fixed positions of the leader and control fields.

These extractors never raise on missing data: a missing field yields a string
of ``|`` (the MARC "no attempt to code" character) and a too-short value
yields ``UNDEFINED``.
"""

from collections.abc import Callable

from marcrank.extract._helpers import first_field
from marcrank.models import UNDEFINED, Record, Undefined

__all__ = [
    "encoding_level",
    "controlfield_position",
    "cataloging_source_from_008",
    "publication_year",
    "record_age",
]

# Leader/17 encoding level → points. '#' is full level (blank in MARC).
_ENCODING_LEVEL_POINTS: dict[str, int | None] = {
    "#": 4,
    "u": None,
    "z": None,
    "1": 3,
    "2": 3,
    "4": 3,
    "5": 2,
    "7": 2,
    "3": 1,
    "8": 1,
}

# 008/39 cataloging source: national bibliography > cooperative > other > unknown > not coded
_CATALOGING_SOURCE_POINTS: dict[str, int] = {
    "#": 4,
    "c": 3,
    "d": 2,
    "u": 1,
    "|": 0,
}


def encoding_level(record: Record) -> int | Undefined | None:
    """Score the encoding level in leader position 17.

    Parameters
    ----------
    record : Record
        Record to score.

    Returns
    -------
    int | Undefined | None
        4 for full level ('#'), 3 for '1', '2', '4', 2 for '5', '7', 1 for
        '3', '8'. None for unusable ('u', 'z') or unknown levels.
        UNDEFINED if the leader is missing or shorter than 17 characters.
    """
    leader = record.leader
    if leader is None or len(leader) < 17:
        return UNDEFINED

    return _ENCODING_LEVEL_POINTS.get(leader[17:18])


def controlfield_position(tag: str, index: int, count: int = 1) -> Callable[[Record], str | Undefined]:
    """Build an extractor for ``count`` characters at ``index`` of a control field.

    Only the first field with *tag* is read.

    Parameters
    ----------
    tag : str
        Control field tag (e.g., '008').
    index : int
        0-based start position.
    count : int, optional
        Number of characters, by default 1.

    Returns
    -------
    Callable[[Record], str | Undefined]
        Extractor returning the substring, ``'|' * count`` if the field is
        missing, or UNDEFINED if the value is shorter than *index*.

    Raises
    ------
    TypeError
        If *index* or *count* is not an integer.
    ValueError
        If *index* is negative or *count* is not positive.
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"index must be an integer, got {index!r}")
    if not isinstance(count, int) or isinstance(count, bool):
        raise TypeError(f"count must be an integer, got {count!r}")
    if index < 0:
        raise ValueError(f"index must be >= 0, got {index}")
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    placeholder = "|" * count

    def extract(record: Record) -> str | Undefined:
        field = first_field(record, tag)
        if field is None:
            return placeholder
        if field.value is None or len(field.value) < index:
            return UNDEFINED
        return field.value[index : index + count]

    return extract


_SOURCE_008 = controlfield_position("008", 39)
_DATE1_008 = controlfield_position("008", 7, 4)
_ENTERED_008 = controlfield_position("008", 0, 6)


def cataloging_source_from_008(record: Record) -> int:
    """Score the cataloging source in 008/39 (0-4)."""
    value = _SOURCE_008(record)
    if value is UNDEFINED:
        return 0
    return _CATALOGING_SOURCE_POINTS.get(value, 0)


def publication_year(record: Record) -> str | Undefined:
    """Return the publication year (008/07-10)."""
    return _DATE1_008(record)


def record_age(record: Record) -> str | Undefined:
    """Return the date entered on file (008/00-05), YYMMDD."""
    return _ENTERED_008(record)
