"""Local owner extractors.

Local owners are the organizations holding a record, recorded in ``LOW $a``
(upper-case codes) and ``SID $b`` (lower-case codes). They serve as a proxy for
cataloging authority.
"""

from collections.abc import Callable

from marcrank.extract._helpers import first_subfield_value, unique
from marcrank.extract.controlfields import controlfield_position
from marcrank.extract.fields import specific_field_value
from marcrank.models import Record

__all__ = [
    "local_owner_list",
    "local_owner_count",
    "specific_local_owner",
    "specific_single_local_owner",
    "non_finnish_helka",
]

# tag → subfield holding the organization code
_OWNER_SUBFIELDS = {"LOW": "a", "SID": "b"}

_LANGUAGE_008 = controlfield_position("008", 35, 3)


def local_owner_list(record: Record) -> list[str]:
    """Collect upper-cased local owner codes, de-duplicated in record order."""
    owners: list[str] = []
    for field in record.fields:
        code = _OWNER_SUBFIELDS.get(field.tag)
        if code is None:
            continue
        value = first_subfield_value(field, code)
        if value is not None:
            owners.append(value.upper())
    return unique(owners)


def local_owner_count(record: Record) -> int:
    """Count distinct local owners."""
    return len(local_owner_list(record))


def specific_local_owner(owner: str) -> Callable[[Record], int]:
    """Build an extractor testing whether *owner* holds the record.

    ``LOW $a`` is matched against the upper-cased code and ``SID $b`` against
    the lower-cased code.
    """
    if not isinstance(owner, str) or not owner:
        raise ValueError(f"owner must be a non-empty string, got {owner!r}")

    in_low = specific_field_value("LOW", "a", owner.upper())
    in_sid = specific_field_value("SID", "b", owner.lower())

    def extract(record: Record) -> int:
        return in_low(record) or in_sid(record)

    return extract


def specific_single_local_owner(owner: str) -> Callable[[Record], int]:
    """Build an extractor scoring 1 if *owner* is the only local owner."""
    if not isinstance(owner, str) or not owner:
        raise ValueError(f"owner must be a non-empty string, got {owner!r}")

    expected = [owner.upper()]

    def extract(record: Record) -> int:
        return 1 if local_owner_list(record) == expected else 0

    return extract


_has_helka = specific_local_owner("HELKA")


def non_finnish_helka(record: Record) -> int:
    """Score 1 for records held by HELKA whose language (008/35-37) is not Finnish."""
    language = _LANGUAGE_008(record)
    if isinstance(language, str) and language.lower() == "fin":
        return 0
    return _has_helka(record)
