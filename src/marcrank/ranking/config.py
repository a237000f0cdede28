"""Ranking configuration dataclasses and schema validation.

A configuration is an ordered list of features. Feature order defines the
position in the feature vector and is otherwise inert.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache
from importlib.resources import files
from pathlib import Path
from typing import Any

import jsonschema

from marcrank.errors import InvalidConfigurationError

__all__ = [
    "BareExtractor",
    "ParameterizedExtractor",
    "ExtractorRef",
    "FeatureConfig",
    "RankingConfig",
    "configuration_schema",
    "validate_configuration",
    "load_config",
    "default_config",
]

_SCHEMAS = files("marcrank") / "schemas"


@dataclass(frozen=True, slots=True)
class BareExtractor:
    """Reference to an extractor by name only."""

    name: str

    def to_dict(self) -> str:
        """Convert to JSON representation."""
        return self.name


@dataclass(frozen=True, slots=True)
class ParameterizedExtractor:
    """Reference to an extractor factory with its parameters.

    Attributes
    ----------
    name : str
        Registry name of the factory.
    parameters : tuple[Any, ...]
        Positional arguments for the factory.
    """

    name: str
    parameters: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON representation."""
        return {"name": self.name, "parameters": list(self.parameters)}


ExtractorRef = BareExtractor | ParameterizedExtractor


@dataclass(frozen=True, slots=True)
class FeatureConfig:
    """One configured feature.

    Attributes
    ----------
    extractor : ExtractorRef
        Extractor producing the raw score.
    normalizer : str | None
        Normalizer name; None passes the raw score through.
    """

    extractor: ExtractorRef
    normalizer: str | None

    @property
    def label(self) -> str:
        """Readable feature name, e.g. ``specificLocalOwner(FENNI)/lexical``."""
        ref = self.extractor
        name = ref.name
        if isinstance(ref, ParameterizedExtractor):
            name += "(" + ", ".join(str(p) for p in ref.parameters) + ")"
        return f"{name}/{self.normalizer or '-'}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeatureConfig":
        """Build from an already validated feature object."""
        raw = data["extractor"]
        extractor: ExtractorRef
        if isinstance(raw, str):
            extractor = BareExtractor(raw)
        else:
            extractor = ParameterizedExtractor(raw["name"], tuple(raw.get("parameters", ())))
        return cls(extractor=extractor, normalizer=data.get("normalizer"))

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON representation."""
        data: dict[str, Any] = {"extractor": self.extractor.to_dict()}
        if self.normalizer is not None:
            data["normalizer"] = self.normalizer
        return data


@dataclass(frozen=True, slots=True)
class RankingConfig:
    """Validated ranking configuration.

    Attributes
    ----------
    features : tuple[FeatureConfig, ...]
        Features in vector order. Duplicates are allowed.
    """

    features: tuple[FeatureConfig, ...]

    def __len__(self) -> int:
        return len(self.features)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RankingConfig":
        """Validate *data* against the configuration schema and build a config.

        Raises
        ------
        InvalidConfigurationError
            If *data* violates the schema.
        """
        validate_configuration(data)
        return cls(features=tuple(FeatureConfig.from_dict(item) for item in data["features"]))

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON representation."""
        return {"features": [feature.to_dict() for feature in self.features]}


@cache
def configuration_schema() -> dict[str, Any]:
    """Load the bundled configuration JSON schema."""
    return json.loads((_SCHEMAS / "configuration.schema.json").read_text(encoding="utf-8"))


def validate_configuration(data: Any) -> None:
    """Validate raw configuration data against the schema.

    All violations are collected, not just the first one.

    Parameters
    ----------
    data : Any
        Decoded configuration JSON.

    Raises
    ------
    InvalidConfigurationError
        If validation fails. ``errors`` lists every violation with its path.
    """
    validator = jsonschema.Draft202012Validator(configuration_schema())
    violations = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if violations:
        raise InvalidConfigurationError(
            [f"{'/'.join(str(p) for p in v.absolute_path) or '<root>'}: {v.message}" for v in violations]
        )


def load_config(path: str | Path) -> RankingConfig:
    """Load and validate a configuration JSON file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    InvalidConfigurationError
        If the file is not valid JSON or violates the schema.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration not found: {path}")

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidConfigurationError([f"{config_path.name}: {e}"]) from e

    return RankingConfig.from_dict(data)


def default_config() -> RankingConfig:
    """Return the bundled default configuration."""
    data = json.loads((_SCHEMAS / "default_configuration.json").read_text(encoding="utf-8"))
    return RankingConfig.from_dict(data)
