"""Shared data types for marcrank.

This package contains the record model consumed by extractors and the score
types flowing from extractors to normalizers.
"""

from marcrank.models.records import Field, Record, Subfield
from marcrank.models.scores import (
    UNDEFINED,
    ReprintInfo,
    Score,
    ScoreKind,
    Undefined,
    score_to_json,
)

__all__ = [
    # Record models
    "Record",
    "Field",
    "Subfield",
    # Scores
    "UNDEFINED",
    "Undefined",
    "ReprintInfo",
    "Score",
    "ScoreKind",
    "score_to_json",
]
