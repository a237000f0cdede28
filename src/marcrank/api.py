"""Public API for ranking MARC records.

This module provides the main public API for marcrank, enabling:
- Building a reusable ranker from a configuration
- Loading records from JSON files
- Ranking a pair of record files
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from marcrank.errors import MarcRankError
from marcrank.models import Record
from marcrank.ranking import (
    Ranker,
    RankingConfig,
    RankResult,
    default_config,
    load_config,
    resolve_features,
)

if TYPE_CHECKING:
    from marcrank.audit import AuditLogger
    from marcrank.extract import ExtractorSpec
    from marcrank.normalize import NormalizerSpec

__all__ = [
    "create_ranker",
    "load_record",
    "load_records",
    "rank_pair",
    "ParseError",
]


class ParseError(MarcRankError):
    """Raised when a record file cannot be parsed."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        """
        super().__init__(message)
        self.file = file


def _as_config(configuration: RankingConfig | Mapping[str, Any] | str | Path | None) -> RankingConfig:
    if configuration is None:
        return default_config()
    if isinstance(configuration, RankingConfig):
        return configuration
    if isinstance(configuration, str | Path):
        return load_config(configuration)
    return RankingConfig.from_dict(configuration)


def create_ranker(
    configuration: RankingConfig | Mapping[str, Any] | str | Path | None = None,
    *,
    extractors: Mapping[str, ExtractorSpec] | None = None,
    normalizers: Mapping[str, NormalizerSpec] | None = None,
    audit_logger: AuditLogger | None = None,
) -> Ranker:
    """Build a ranker from a configuration.

    Parameters
    ----------
    configuration : RankingConfig | Mapping | str | Path | None, optional
        Validated config, raw config data, path to a JSON config file, or
        None for the bundled default configuration.
    extractors : Mapping[str, ExtractorSpec] | None, optional
        Extractor registry, by default the built-in extractors.
    normalizers : Mapping[str, NormalizerSpec] | None, optional
        Normalizer registry, by default the built-in normalizers.
    audit_logger : AuditLogger | None, optional
        Logger receiving a configuration_resolved event.

    Returns
    -------
    Ranker
        Reusable ranking function.

    Raises
    ------
    ConfigurationError
        If the configuration is invalid or cannot be resolved.

    Examples
    --------
        >>> from marcrank import create_ranker
        >>> ranker = create_ranker({"features": [
        ...     {"extractor": "encodingLevel", "normalizer": "notNull"},
        ...     {"extractor": "recordAge", "normalizer": "lexical"},
        ... ]})
        >>> ranker(record1, record2)
        1
    """
    try:
        config = _as_config(configuration)
        features = resolve_features(config, extractors=extractors, normalizers=normalizers)
    except MarcRankError as e:
        if audit_logger is not None:
            audit_logger.error(type(e).__name__, str(e))
        raise

    if audit_logger is not None:
        audit_logger.configuration_resolved(list(features.labels))

    return Ranker(features)


def load_records(path: str | Path) -> list[Record]:
    """Load records from a JSON file holding one record or an array of records.

    Parameters
    ----------
    path : str | Path
        Path to JSON file.

    Returns
    -------
    list[Record]
        Parsed records in file order.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    ParseError
        If the file is not valid JSON or a record is malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse {file_path.name}: {e}", file=str(file_path)) from e

    items = data if isinstance(data, list) else [data]
    records: list[Record] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ParseError(
                f"Failed to parse {file_path.name}: record {index} is not an object",
                file=str(file_path),
            )
        try:
            records.append(Record.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(
                f"Failed to parse {file_path.name}: record {index}: {e}",
                file=str(file_path),
            ) from e
    return records


def load_record(path: str | Path) -> Record:
    """Load a single record from a JSON file.

    Raises
    ------
    ParseError
        If the file does not hold exactly one record.
    """
    records = load_records(path)
    if len(records) != 1:
        raise ParseError(f"Expected one record in {Path(path).name}, found {len(records)}", file=str(path))
    return records[0]


def rank_pair(
    path1: str | Path,
    path2: str | Path,
    configuration: RankingConfig | Mapping[str, Any] | str | Path | None = None,
    *,
    audit_logger: AuditLogger | None = None,
) -> RankResult:
    """Rank two record files against each other.

    Parameters
    ----------
    path1 : str | Path
        First record file.
    path2 : str | Path
        Second record file.
    configuration : RankingConfig | Mapping | str | Path | None, optional
        Configuration, see ``create_ranker``.
    audit_logger : AuditLogger | None, optional
        Logger receiving configuration_resolved and pair_ranked events.

    Returns
    -------
    RankResult
        Score and per-feature breakdown. Positive scores prefer *path1*.
    """
    ranker = create_ranker(configuration, audit_logger=audit_logger)
    record1 = load_record(path1)
    record2 = load_record(path2)

    try:
        result = ranker.explain(record1, record2)
    except MarcRankError as e:
        if audit_logger is not None:
            audit_logger.error(type(e).__name__, str(e))
        raise

    if audit_logger is not None:
        audit_logger.pair_ranked((Path(path1).name, Path(path2).name), result.score, result.to_dict())
    return result
