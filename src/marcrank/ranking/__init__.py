"""Configuration, resolution and pairwise ranking.

This package turns a validated configuration into a reusable ``Ranker``.
"""

from marcrank.ranking.config import (
    BareExtractor,
    ExtractorRef,
    FeatureConfig,
    ParameterizedExtractor,
    RankingConfig,
    default_config,
    load_config,
    validate_configuration,
)
from marcrank.ranking.ranker import RankResult, Ranker, generate_feature_vector, rank_records
from marcrank.ranking.resolver import (
    ResolvedFeature,
    ResolvedFeatures,
    resolve_feature,
    resolve_features,
)

__all__ = [
    # Configuration
    "BareExtractor",
    "ParameterizedExtractor",
    "ExtractorRef",
    "FeatureConfig",
    "RankingConfig",
    "validate_configuration",
    "load_config",
    "default_config",
    # Resolution
    "ResolvedFeature",
    "ResolvedFeatures",
    "resolve_feature",
    "resolve_features",
    # Ranking
    "generate_feature_vector",
    "RankResult",
    "Ranker",
    "rank_records",
]
