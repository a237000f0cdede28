"""Pairwise normalizers.

A normalizer turns a pair of raw scores ``(own, other)`` into a number that
can be summed. It is applied to both records with swapped arguments, so each
side is scored against the opposing record's raw value.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from marcrank.models import UNDEFINED, ReprintInfo, Score, ScoreKind

__all__ = [
    "Normalizer",
    "NormalizerSpec",
    "lexical",
    "not_null",
    "invert",
    "reprint",
    "build_normalizer_registry",
]

Normalizer = Callable[[Score, Score], int]

_ALL_KINDS = frozenset(ScoreKind)


def lexical(own: Score, other: Score) -> int:
    """Score 1 if *own* orders after *other*, else 0.

    Numbers compare numerically and strings by code point. UNDEFINED on either
    side scores 0; a present value always beats None.
    """
    if own is UNDEFINED or other is UNDEFINED or own is None:
        return 0
    if other is None:
        return 1
    return 1 if own > other else 0  # type: ignore[operator]


def not_null(own: Score, other: Score) -> int:
    """Score 1 only when *own* is present and *other* is None."""
    if other is None:
        return 0 if own is None else 1
    return 0


def invert(own: Score, other: Score) -> int:
    """Score 0 regardless of input; marks a feature that must not count."""
    return 0


def reprint(own: Score, other: Score) -> int:
    """Score 1 for the original edition whose notes mention the other's year.

    A record whose year appears in the other record's reprint notes is the
    reprint and scores 0.
    """
    if not isinstance(own, ReprintInfo) or not isinstance(other, ReprintInfo):
        raise TypeError(f"reprint expects ReprintInfo scores, got {own!r} and {other!r}")

    if other.mentions(own.year):
        return 0
    if own.mentions(other.year):
        return 1
    return 0


@dataclass(frozen=True, slots=True)
class NormalizerSpec:
    """Registry entry for one normalizer.

    Attributes
    ----------
    name : str
        Name used in configurations.
    function : Normalizer
        The normalizer.
    accepts : frozenset[ScoreKind]
        Score kinds the normalizer can consume.
    """

    name: str
    function: Normalizer
    accepts: frozenset[ScoreKind]


_BUILTIN_NORMALIZERS: tuple[NormalizerSpec, ...] = (
    NormalizerSpec(
        "lexical",
        lexical,
        frozenset({ScoreKind.NUMBER, ScoreKind.OPTIONAL_NUMBER, ScoreKind.TEXT}),
    ),
    NormalizerSpec("notNull", not_null, _ALL_KINDS),
    NormalizerSpec("invert", invert, _ALL_KINDS),
    NormalizerSpec("reprint", reprint, frozenset({ScoreKind.REPRINT})),
)


def build_normalizer_registry(
    extra: Mapping[str, NormalizerSpec] | None = None,
) -> Mapping[str, NormalizerSpec]:
    """Build an immutable name → normalizer mapping.

    Parameters
    ----------
    extra : Mapping[str, NormalizerSpec] | None, optional
        Additional entries. Entries with a built-in name replace the built-in.

    Returns
    -------
    Mapping[str, NormalizerSpec]
        Read-only registry.
    """
    registry = {spec.name: spec for spec in _BUILTIN_NORMALIZERS}
    if extra:
        registry.update(extra)
    return MappingProxyType(registry)
