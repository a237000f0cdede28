"""Pairwise normalization of two feature vectors."""

from collections.abc import Callable, Sequence
from typing import Any

from marcrank.models import Score

__all__ = ["normalize_vectors"]


def normalize_vectors(
    vector1: Sequence[Score],
    vector2: Sequence[Score],
    normalizers: Sequence[Callable[[Any, Any], Any] | None],
) -> tuple[list[Any], list[Any]]:
    """Normalize two feature vectors against each other.

    Element ``i`` of each result depends only on the raw ``vector1[i]`` and
    ``vector2[i]``: ``out1[i] = normalizers[i](vector1[i], vector2[i])`` and
    ``out2[i] = normalizers[i](vector2[i], vector1[i])``. The inputs are not
    modified, so the order in which features are normalized has no effect.

    Parameters
    ----------
    vector1 : Sequence[Score]
        Raw feature vector of the first record.
    vector2 : Sequence[Score]
        Raw feature vector of the second record.
    normalizers : Sequence[Callable | None]
        One normalizer per feature. A non-callable entry passes both raw
        values through unchanged.

    Returns
    -------
    tuple[list, list]
        Normalized vectors, same length and order as the inputs.

    Raises
    ------
    ValueError
        If the three sequences differ in length.
    """
    if not len(vector1) == len(vector2) == len(normalizers):
        raise ValueError(
            "Vectors and normalizers must have equal length, got "
            f"{len(vector1)}, {len(vector2)} and {len(normalizers)}"
        )

    out1: list[Any] = []
    out2: list[Any] = []
    for own1, own2, normalizer in zip(vector1, vector2, normalizers, strict=True):
        if not callable(normalizer):
            out1.append(own1)
            out2.append(own2)
            continue
        out1.append(normalizer(own1, own2))
        out2.append(normalizer(own2, own1))

    return out1, out2
