"""Pairwise score normalization.

This module provides the named normalizers and the pure function applying
them to a pair of feature vectors.
"""

from marcrank.normalize.normalizers import (
    Normalizer,
    NormalizerSpec,
    build_normalizer_registry,
    invert,
    lexical,
    not_null,
    reprint,
)
from marcrank.normalize.vectors import normalize_vectors

__all__ = [
    "Normalizer",
    "NormalizerSpec",
    "build_normalizer_registry",
    "lexical",
    "not_null",
    "invert",
    "reprint",
    "normalize_vectors",
]
