"""Generic extractors over data field content."""

from collections.abc import Callable, Iterable

from marcrank.extract._helpers import as_tuple, code_tuple, fields_with_tag, subfield_values
from marcrank.models import Record

__all__ = ["specific_field_value", "field_count", "field_length"]


def specific_field_value(
    tag: str,
    subfield_codes: str | Iterable[str],
    lookup_values: str | Iterable[str],
) -> Callable[[Record], int]:
    """Build an extractor testing for a specific subfield value.

    Example: ``specific_field_value("040", ["a", "d"], "FI-NL")`` scores
    records whose 040 $a or $d is ``FI-NL``.

    Parameters
    ----------
    tag : str
        Field tag.
    subfield_codes : str | Iterable[str]
        Subfield codes to inspect, e.g. ``"ad"`` or ``["a", "d"]``.
    lookup_values : str | Iterable[str]
        Value or values to look for. Matching is exact.

    Returns
    -------
    Callable[[Record], int]
        Extractor returning 1 on a match, else 0.
    """
    codes = code_tuple(subfield_codes)
    values = frozenset(as_tuple(lookup_values))

    def extract(record: Record) -> int:
        for field in fields_with_tag(record, tag):
            if any(value in values for value in subfield_values(field, codes)):
                return 1
        return 0

    return extract


def field_count(tag: str, subfield_codes: str | Iterable[str] | None = None) -> Callable[[Record], int]:
    """Build an extractor counting fields, or their subfields, with *tag*.

    Parameters
    ----------
    tag : str
        Field tag.
    subfield_codes : str | Iterable[str] | None, optional
        If given, count subfields with these codes instead of fields. A
        string holds one code per character.

    Returns
    -------
    Callable[[Record], int]
        Counting extractor.
    """
    codes = code_tuple(subfield_codes) if subfield_codes is not None else None

    def extract(record: Record) -> int:
        if codes is None:
            return sum(1 for _ in fields_with_tag(record, tag))
        return sum(len(subfield_values(field, codes)) for field in fields_with_tag(record, tag))

    return extract


def field_length(tag: str) -> Callable[[Record], int]:
    """Build an extractor summing the content length of all fields with *tag*.

    Data fields contribute the length of every subfield value, control fields
    the length of their value. Records without the field score 0.
    """

    def extract(record: Record) -> int:
        length = 0
        for field in fields_with_tag(record, tag):
            if field.subfields is not None:
                length += sum(len(sub.value) for sub in field.subfields)
            else:
                length += len(field.value or "")
        return length

    return extract
