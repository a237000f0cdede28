"""Record accessor helpers shared by the extractors."""

from collections.abc import Hashable, Iterable, Iterator
from typing import TypeVar

from marcrank.models import Field, Record

T = TypeVar("T", bound=Hashable)


def fields_with_tag(record: Record, tag: str) -> Iterator[Field]:
    """Yield fields of *record* with *tag*, in record order."""
    return (f for f in record.fields if f.tag == tag)


def first_field(record: Record, tag: str) -> Field | None:
    """Return the first field with *tag*, or None."""
    return next(fields_with_tag(record, tag), None)


def subfield_values(field: Field, codes: str | Iterable[str]) -> list[str]:
    """Return values of subfields whose code is in *codes*.

    Parameters
    ----------
    field : Field
        Field to inspect. Control fields have no subfields.
    codes : str | Iterable[str]
        Subfield codes. A string is read as one code per character.

    Returns
    -------
    list[str]
        Matching values in field order.
    """
    if field.subfields is None:
        return []
    wanted = code_tuple(codes)
    return [sub.value for sub in field.subfields if sub.code in wanted]


def first_subfield_value(field: Field, code: str) -> str | None:
    """Return the value of the first subfield with *code*, or None."""
    values = subfield_values(field, code)
    return values[0] if values else None


def unique(items: Iterable[T]) -> list[T]:
    """De-duplicate *items* keeping first-seen order."""
    return list(dict.fromkeys(items))


def as_tuple(value: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize a single string or a collection of strings to a tuple."""
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def code_tuple(codes: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize subfield codes; ``"ad"`` and ``["a", "d"]`` are the same."""
    return tuple(codes)
