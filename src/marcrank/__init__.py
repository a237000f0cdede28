"""Preferred-record selection for duplicate MARC records.

This package provides:
- Data models (marcrank.models): records and score types
- Extractors (marcrank.extract): feature extraction rules
- Normalizers (marcrank.normalize): pairwise score normalization
- Ranking (marcrank.ranking): configuration, resolution and ranking
- Audit (marcrank.audit): JSONL event logging
- CLI (marcrank.cli): command-line interface
- Public API (marcrank.api): high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from marcrank.api import (
    ParseError,
    create_ranker,
    load_record,
    load_records,
    rank_pair,
)
from marcrank.errors import ConfigurationError, MarcRankError, RecordDataError
from marcrank.models import Record
from marcrank.ranking import Ranker, RankingConfig, RankResult

__all__ = [
    "__version__",
    "__license__",
    "Record",
    "RankingConfig",
    "Ranker",
    "RankResult",
    "create_ranker",
    "load_record",
    "load_records",
    "rank_pair",
    "MarcRankError",
    "ConfigurationError",
    "RecordDataError",
    "ParseError",
]
