"""Ranking of record pairs.

A ``Ranker`` is built once from resolved features and reused for any number of
record pairs. It holds no mutable state, so one instance may be shared between
threads.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any

from marcrank.extract import Extractor
from marcrank.models import Record, Score, score_to_json
from marcrank.normalize import normalize_vectors
from marcrank.ranking.resolver import ResolvedFeatures

__all__ = ["generate_feature_vector", "RankResult", "Ranker", "rank_records"]


def generate_feature_vector(record: Record, extractors: Iterable[Extractor]) -> list[Score]:
    """Apply each extractor to *record*, preserving extractor order."""
    return [extractor(record) for extractor in extractors]


@dataclass(frozen=True, slots=True)
class RankResult:
    """Outcome of ranking one record pair, with the per-feature breakdown.

    Attributes
    ----------
    labels : tuple[str, ...]
        Feature labels.
    raw1 : tuple[Score, ...]
        Raw feature vector of the first record.
    raw2 : tuple[Score, ...]
        Raw feature vector of the second record.
    normalized1 : tuple[int, ...]
        Normalized feature vector of the first record.
    normalized2 : tuple[int, ...]
        Normalized feature vector of the second record.
    score : int
        ``sum(normalized1) - sum(normalized2)``. Positive prefers the first
        record, negative the second, zero is a tie.
    """

    labels: tuple[str, ...]
    raw1: tuple[Score, ...]
    raw2: tuple[Score, ...]
    normalized1: tuple[int, ...]
    normalized2: tuple[int, ...]
    score: int

    @property
    def preferred(self) -> int | None:
        """1 or 2 for the preferred record, None on a tie."""
        if self.score > 0:
            return 1
        if self.score < 0:
            return 2
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "score": self.score,
            "preferred": self.preferred,
            "features": [
                {
                    "feature": label,
                    "raw": [score_to_json(a), score_to_json(b)],
                    "normalized": [n1, n2],
                }
                for label, a, b, n1, n2 in zip(
                    self.labels, self.raw1, self.raw2, self.normalized1, self.normalized2, strict=True
                )
            ],
        }


class Ranker:
    """Ranking function over record pairs.

    Calling ``ranker(record1, record2)`` returns the signed preference score.

    Attributes
    ----------
    features : ResolvedFeatures
        Resolved features the ranker was built from.
    """

    __slots__ = ("features",)

    def __init__(self, features: ResolvedFeatures) -> None:
        """Initialize ranker from resolved features.

        Parameters
        ----------
        features : ResolvedFeatures
            Output of ``resolve_features``.
        """
        self.features = features

    def __call__(self, record1: Record, record2: Record) -> int:
        return self.explain(record1, record2).score

    def __len__(self) -> int:
        return len(self.features)

    def explain(self, record1: Record, record2: Record) -> RankResult:
        """Rank a pair and keep the raw and normalized vectors.

        Raises
        ------
        RecordDataError
            If an extractor cannot score one of the records.
        """
        extractors = self.features.extractors
        raw1 = generate_feature_vector(record1, extractors)
        raw2 = generate_feature_vector(record2, extractors)

        normalized1, normalized2 = normalize_vectors(raw1, raw2, self.features.normalizers)

        return RankResult(
            labels=self.features.labels,
            raw1=tuple(raw1),
            raw2=tuple(raw2),
            normalized1=tuple(normalized1),
            normalized2=tuple(normalized2),
            score=sum(normalized1) - sum(normalized2),
        )

    def sort(self, records: Sequence[Record]) -> list[int]:
        """Order record indices from most to least preferred.

        Ties keep input order. The first index is the merge master.
        """
        return rank_records(records, self)


def rank_records(records: Sequence[Record], ranker: Ranker) -> list[int]:
    """Return indices of *records* ordered best-first by *ranker*.

    Parameters
    ----------
    records : Sequence[Record]
        Records describing the same work.
    ranker : Ranker
        Pairwise ranking function.

    Returns
    -------
    list[int]
        Indices into *records*; ties keep input order.
    """

    def compare(i: int, j: int) -> int:
        return -ranker(records[i], records[j])

    return sorted(range(len(records)), key=cmp_to_key(compare))
