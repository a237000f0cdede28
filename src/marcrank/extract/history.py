"""Extractors over record history: change log entries and reprint notes."""

import re
from collections.abc import Callable
from dataclasses import dataclass

from marcrank.errors import MissingChangeDataError
from marcrank.extract._helpers import fields_with_tag, first_field, first_subfield_value, subfield_values
from marcrank.extract.controlfields import publication_year
from marcrank.models import Record, ReprintInfo

__all__ = [
    "ChangeEntry",
    "change_log",
    "latest_change",
    "latest_change_by_human",
    "is_human_user",
    "reprint_info",
    "MACHINE_USER_PREFIXES",
]

# Usernames of batch loads and conversions in the CAT change log
MACHINE_USER_PREFIXES: tuple[str, ...] = ("LOAD-", "CONV-")

# "Lisäpainokset" (additional printings) general note
_REPRINT_NOTE = re.compile(r"^Lisäp", re.IGNORECASE)

_LEADING_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True, slots=True)
class ChangeEntry:
    """Single CAT change log entry.

    Attributes
    ----------
    user : str | None
        Cataloger username ($a).
    date : str
        Change date YYYYMMDD ($c), '0000' if absent.
    time : str
        Change time HHMM ($h), '0000' if absent.
    """

    user: str | None
    date: str
    time: str

    @property
    def timestamp(self) -> str:
        """Concatenated date and time."""
        return self.date + self.time

    def sort_key(self) -> tuple[int, int]:
        """Numeric (date, time) key."""
        return (_as_int(self.date), _as_int(self.time))


def _as_int(value: str) -> int:
    """Parse the leading digits of *value*; 0 if there are none."""
    match = _LEADING_DIGITS.match(value.strip())
    return int(match.group()) if match else 0


def change_log(record: Record) -> list[ChangeEntry]:
    """Collect the CAT change log of *record* in record order."""
    return [
        ChangeEntry(
            user=first_subfield_value(field, "a"),
            date=first_subfield_value(field, "c") or "0000",
            time=first_subfield_value(field, "h") or "0000",
        )
        for field in fields_with_tag(record, "CAT")
    ]


def is_human_user(user: str | None, machine_prefixes: tuple[str, ...] = MACHINE_USER_PREFIXES) -> bool:
    """Return False for usernames of automated loads and conversions."""
    if user is None:
        return True
    return not user.startswith(machine_prefixes)


def latest_change(is_human: Callable[[str | None], bool] | None = None) -> Callable[[Record], str]:
    """Build an extractor returning the latest change timestamp (YYYYMMDDHHmm).

    Parameters
    ----------
    is_human : Callable[[str | None], bool] | None, optional
        Predicate on the CAT username. Entries failing it are ignored.
        If None, all entries count.

    Returns
    -------
    Callable[[Record], str]
        Extractor returning the date and time of the most recent qualifying
        CAT entry, falling back to the first 12 characters of field 005.

    Raises
    ------
    TypeError
        If *is_human* is not callable.
    """
    if is_human is not None and not callable(is_human):
        raise TypeError(f"is_human must be callable, got {is_human!r}")

    def extract(record: Record) -> str:
        entries = change_log(record)
        if is_human is not None:
            entries = [entry for entry in entries if is_human(entry.user)]

        if entries:
            # stable: the first of equal entries wins
            latest = sorted(entries, key=ChangeEntry.sort_key, reverse=True)[0]
            return latest.timestamp

        f005 = first_field(record, "005")
        if f005 is None or f005.value is None:
            raise MissingChangeDataError(
                "Record has no qualifying CAT entries and no 005 field",
                tag="005",
            )
        return f005.value[:12]

    return extract


def latest_change_by_human(*machine_prefixes: str) -> Callable[[Record], str]:
    """Build a latest change extractor ignoring automated users.

    Parameters
    ----------
    *machine_prefixes : str
        Username prefixes of automated users. Defaults to
        ``MACHINE_USER_PREFIXES``.
    """
    if not all(isinstance(prefix, str) for prefix in machine_prefixes):
        raise TypeError(f"username prefixes must be strings, got {machine_prefixes!r}")

    prefixes = machine_prefixes or MACHINE_USER_PREFIXES
    return latest_change(lambda user: is_human_user(user, prefixes))


def reprint_info(record: Record) -> ReprintInfo:
    """Collect publication year and reprint notes (500 $a)."""
    notes = [
        value
        for field in fields_with_tag(record, "500")
        for value in subfield_values(field, "a")
        if _REPRINT_NOTE.search(value)
    ]
    return ReprintInfo(year=publication_year(record), reprint_notes=tuple(notes))
