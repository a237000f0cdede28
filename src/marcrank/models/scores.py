"""Score values produced by extractors.

A score is one of:

- ``int``: directly comparable rank value
- ``str``: positional data or timestamps, compared lexically
- ``None``: value present but invalid, always worst-ranked
- ``UNDEFINED``: no opinion (e.g. leader too short)
- ``ReprintInfo``: publication year plus reprint notes
- ``list[str]``: collected identifiers (local owner list)

Each extractor declares the ``ScoreKind`` it produces and each normalizer the
kinds it accepts, so mismatched pairs are rejected when a configuration is
resolved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = [
    "Undefined",
    "UNDEFINED",
    "ReprintInfo",
    "ScoreKind",
    "Score",
    "score_to_json",
]


class Undefined(Enum):
    """Sentinel type for the "no opinion" score."""

    UNDEFINED = "undefined"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined.UNDEFINED


@dataclass(frozen=True, slots=True)
class ReprintInfo:
    """Publication year and reprint notes of a record.

    Attributes
    ----------
    year : str | Undefined
        Publication year from 008/07-10.
    reprint_notes : tuple[str, ...]
        General notes (500/a) announcing additional printings.
    """

    year: str | Undefined
    reprint_notes: tuple[str, ...] = ()

    def mentions(self, year: Any) -> bool:
        """Return True if any reprint note contains *year*."""
        if not isinstance(year, str) or not year:
            return False
        return any(year in note for note in self.reprint_notes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "year": self.year if isinstance(self.year, str) else None,
            "reprint_notes": list(self.reprint_notes),
        }


class ScoreKind(Enum):
    """Shape of the scores an extractor produces."""

    NUMBER = "number"
    OPTIONAL_NUMBER = "optional_number"
    TEXT = "text"
    LIST = "list"
    REPRINT = "reprint"


Score = int | str | ReprintInfo | Undefined | list[str] | None


def score_to_json(score: Score) -> Any:
    """Convert a score to a JSON-serializable value.

    ``UNDEFINED`` becomes the string ``"undefined"`` so that it stays
    distinguishable from ``None`` in reports.
    """
    if score is UNDEFINED:
        return UNDEFINED.value
    if isinstance(score, ReprintInfo):
        return score.to_dict()
    return score
