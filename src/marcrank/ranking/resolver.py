"""Resolution of a ranking configuration into extractor and normalizer lists.

Resolution runs once per configuration. Every configuration problem (unknown
names, unfitting parameters, normalizers that cannot read the extractor's
scores) is reported here, before any record is ranked.
"""

import inspect
from collections.abc import Mapping
from dataclasses import dataclass

from marcrank.errors import (
    ExtractorParametersError,
    IncompatibleFeatureError,
    UnknownExtractorError,
    UnknownNormalizerError,
)
from marcrank.extract import Extractor, ExtractorSpec, build_extractor_registry
from marcrank.models import ScoreKind
from marcrank.normalize import Normalizer, NormalizerSpec, build_normalizer_registry
from marcrank.ranking.config import BareExtractor, FeatureConfig, RankingConfig

__all__ = ["ResolvedFeature", "ResolvedFeatures", "resolve_feature", "resolve_features"]

# Raw scores that can be summed without a normalizer
_PASS_THROUGH_KINDS = frozenset({ScoreKind.NUMBER})


@dataclass(frozen=True, slots=True)
class ResolvedFeature:
    """A feature bound to callable extractor and normalizer.

    Attributes
    ----------
    label : str
        Readable feature name.
    extractor : Extractor
        Bound extractor.
    normalizer : Normalizer | None
        Normalizer, or None for pass-through.
    kind : ScoreKind
        Kind of the raw scores.
    """

    label: str
    extractor: Extractor
    normalizer: Normalizer | None
    kind: ScoreKind


@dataclass(frozen=True, slots=True)
class ResolvedFeatures:
    """Resolved features in configuration order."""

    features: tuple[ResolvedFeature, ...]

    def __len__(self) -> int:
        return len(self.features)

    @property
    def extractors(self) -> tuple[Extractor, ...]:
        """Extractors in feature order."""
        return tuple(f.extractor for f in self.features)

    @property
    def normalizers(self) -> tuple[Normalizer | None, ...]:
        """Normalizers in feature order, parallel to ``extractors``."""
        return tuple(f.normalizer for f in self.features)

    @property
    def labels(self) -> tuple[str, ...]:
        """Feature labels in feature order."""
        return tuple(f.label for f in self.features)


def _lookup(registry: Mapping[str, ExtractorSpec], name: str) -> ExtractorSpec:
    spec = registry.get(name)
    if spec is None:
        valid = ", ".join(sorted(registry))
        raise UnknownExtractorError(f"Unknown extractor: {name!r}. Valid extractors: {valid}", name=name)
    return spec


def _bind_extractor(spec: ExtractorSpec, parameters: tuple[object, ...]) -> Extractor:
    """Return the bound extractor for *spec* called with *parameters*."""
    if not spec.parameterized:
        if parameters:
            raise ExtractorParametersError(
                f"Extractor {spec.name!r} doesn't expect parameters, got {list(parameters)!r}",
                name=spec.name,
            )
        return spec.function

    try:
        inspect.signature(spec.function).bind(*parameters)
    except TypeError as e:
        raise ExtractorParametersError(
            f"Invalid parameters for extractor {spec.name!r}: {e}",
            name=spec.name,
        ) from e

    try:
        extractor = spec.function(*parameters)
    except (TypeError, ValueError) as e:
        raise ExtractorParametersError(
            f"Invalid parameters for extractor {spec.name!r}: {e}",
            name=spec.name,
        ) from e

    if not callable(extractor):
        raise ExtractorParametersError(
            f"Extractor factory {spec.name!r} did not return a function",
            name=spec.name,
        )
    return extractor  # type: ignore[no-any-return]


def resolve_feature(
    feature: FeatureConfig,
    extractors: Mapping[str, ExtractorSpec],
    normalizers: Mapping[str, NormalizerSpec],
) -> ResolvedFeature:
    """Resolve a single feature against the registries.

    Raises
    ------
    UnknownExtractorError
        If the extractor name is not registered.
    ExtractorParametersError
        If the parameters do not fit the extractor.
    UnknownNormalizerError
        If the normalizer name is not registered.
    IncompatibleFeatureError
        If the normalizer cannot consume the extractor's scores.
    """
    ref = feature.extractor
    spec = _lookup(extractors, ref.name)
    parameters = () if isinstance(ref, BareExtractor) else ref.parameters
    extractor = _bind_extractor(spec, parameters)

    if feature.normalizer is None:
        if spec.kind not in _PASS_THROUGH_KINDS:
            raise IncompatibleFeatureError(
                f"Extractor {spec.name!r} produces {spec.kind.value} scores and needs a normalizer",
                name=spec.name,
            )
        return ResolvedFeature(label=feature.label, extractor=extractor, normalizer=None, kind=spec.kind)

    normalizer_spec = normalizers.get(feature.normalizer)
    if normalizer_spec is None:
        valid = ", ".join(sorted(normalizers))
        raise UnknownNormalizerError(
            f"Unknown normalizer: {feature.normalizer!r}. Valid normalizers: {valid}",
            name=feature.normalizer,
        )

    if spec.kind not in normalizer_spec.accepts:
        raise IncompatibleFeatureError(
            f"Normalizer {normalizer_spec.name!r} cannot consume {spec.kind.value} scores "
            f"of extractor {spec.name!r}",
            name=normalizer_spec.name,
        )

    return ResolvedFeature(
        label=feature.label,
        extractor=extractor,
        normalizer=normalizer_spec.function,
        kind=spec.kind,
    )


def resolve_features(
    config: RankingConfig,
    extractors: Mapping[str, ExtractorSpec] | None = None,
    normalizers: Mapping[str, NormalizerSpec] | None = None,
) -> ResolvedFeatures:
    """Resolve every feature of *config*, in order.

    Parameters
    ----------
    config : RankingConfig
        Validated configuration.
    extractors : Mapping[str, ExtractorSpec] | None, optional
        Extractor registry, by default a freshly built built-in registry.
    normalizers : Mapping[str, NormalizerSpec] | None, optional
        Normalizer registry, by default a freshly built built-in registry.

    Returns
    -------
    ResolvedFeatures
        Parallel extractor and normalizer lists.
    """
    if extractors is None:
        extractors = build_extractor_registry()
    if normalizers is None:
        normalizers = build_normalizer_registry()

    return ResolvedFeatures(
        features=tuple(resolve_feature(feature, extractors, normalizers) for feature in config.features)
    )
