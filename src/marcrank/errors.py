"""Exception types raised by marcrank.

Configuration errors are raised once, while a configuration is resolved into a
ranker. Record data errors are raised while a record pair is being ranked.
"""

__all__ = [
    "MarcRankError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "UnknownExtractorError",
    "UnknownNormalizerError",
    "ExtractorParametersError",
    "IncompatibleFeatureError",
    "RecordDataError",
    "MissingChangeDataError",
]


class MarcRankError(Exception):
    """Base class for all marcrank errors."""


class ConfigurationError(MarcRankError):
    """Raised when a ranking configuration cannot be resolved.

    Attributes
    ----------
    name : str | None
        Offending extractor or normalizer name, if any.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration does not match the configuration schema."""

    def __init__(self, errors: list[str]) -> None:
        """Initialize with the list of schema violations.

        Parameters
        ----------
        errors : list[str]
            Human-readable violations, one per failing schema location.
        """
        super().__init__("Invalid configuration: " + "; ".join(errors))
        self.errors = errors


class UnknownExtractorError(ConfigurationError):
    """Raised when a feature references an extractor missing from the registry."""


class UnknownNormalizerError(ConfigurationError):
    """Raised when a feature references a normalizer missing from the registry."""


class ExtractorParametersError(ConfigurationError):
    """Raised when extractor parameters do not fit the extractor."""


class IncompatibleFeatureError(ConfigurationError):
    """Raised when a normalizer cannot consume the scores of its extractor."""


class RecordDataError(MarcRankError):
    """Raised when a record lacks data an extractor cannot do without.

    Attributes
    ----------
    tag : str | None
        Tag of the missing field, if any.
    """

    def __init__(self, message: str, tag: str | None = None) -> None:
        super().__init__(message)
        self.tag = tag


class MissingChangeDataError(RecordDataError):
    """Raised when a record has neither usable CAT entries nor a 005 field."""
