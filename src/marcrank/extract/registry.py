"""Registry of named extractors.

Configurations refer to extractors by name. Plain extractors are functions
``Record -> Score``; parameterized extractors are factories that take the
configured parameters and return such a function.

New extractors are added by passing ``extra`` to ``build_extractor_registry``;
each call returns an independent immutable mapping.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from marcrank.extract.controlfields import (
    cataloging_source_from_008,
    controlfield_position,
    encoding_level,
    publication_year,
    record_age,
)
from marcrank.extract.fields import field_count, field_length, specific_field_value
from marcrank.extract.history import latest_change, latest_change_by_human, reprint_info
from marcrank.extract.owners import (
    local_owner_count,
    local_owner_list,
    non_finnish_helka,
    specific_local_owner,
    specific_single_local_owner,
)
from marcrank.models import Record, Score, ScoreKind

__all__ = ["Extractor", "ExtractorSpec", "build_extractor_registry"]

Extractor = Callable[[Record], Score]


@dataclass(frozen=True, slots=True)
class ExtractorSpec:
    """Registry entry for one extractor.

    Attributes
    ----------
    name : str
        Name used in configurations.
    function : Callable[..., Any]
        The extractor, or the factory building it if ``parameterized``.
    kind : ScoreKind
        Shape of the scores the (bound) extractor produces.
    parameterized : bool
        Whether ``function`` is a factory taking configuration parameters.
    """

    name: str
    function: Callable[..., Any]
    kind: ScoreKind
    parameterized: bool = False


_BUILTIN_EXTRACTORS: tuple[ExtractorSpec, ...] = (
    ExtractorSpec("encodingLevel", encoding_level, ScoreKind.OPTIONAL_NUMBER),
    ExtractorSpec("catalogingSourceFrom008", cataloging_source_from_008, ScoreKind.NUMBER),
    ExtractorSpec("publicationYear", publication_year, ScoreKind.TEXT),
    ExtractorSpec("recordAge", record_age, ScoreKind.TEXT),
    ExtractorSpec("controlfieldPosition", controlfield_position, ScoreKind.TEXT, parameterized=True),
    ExtractorSpec("nonFinnishHELKA", non_finnish_helka, ScoreKind.NUMBER),
    ExtractorSpec(
        "specificSingleLocalOwner", specific_single_local_owner, ScoreKind.NUMBER, parameterized=True
    ),
    ExtractorSpec("localOwnerList", local_owner_list, ScoreKind.LIST),
    ExtractorSpec("localOwnerCount", local_owner_count, ScoreKind.NUMBER),
    ExtractorSpec("specificLocalOwner", specific_local_owner, ScoreKind.NUMBER, parameterized=True),
    ExtractorSpec("specificFieldValue", specific_field_value, ScoreKind.NUMBER, parameterized=True),
    ExtractorSpec("fieldCount", field_count, ScoreKind.NUMBER, parameterized=True),
    ExtractorSpec("fieldLength", field_length, ScoreKind.NUMBER, parameterized=True),
    ExtractorSpec("reprintInfo", reprint_info, ScoreKind.REPRINT),
    ExtractorSpec("latestChange", latest_change, ScoreKind.TEXT, parameterized=True),
    ExtractorSpec("latestChangeByHuman", latest_change_by_human, ScoreKind.TEXT, parameterized=True),
)


def build_extractor_registry(
    extra: Mapping[str, ExtractorSpec] | None = None,
) -> Mapping[str, ExtractorSpec]:
    """Build an immutable name → extractor mapping.

    Parameters
    ----------
    extra : Mapping[str, ExtractorSpec] | None, optional
        Additional entries. Entries with a built-in name replace the built-in.

    Returns
    -------
    Mapping[str, ExtractorSpec]
        Read-only registry.
    """
    registry = {spec.name: spec for spec in _BUILTIN_EXTRACTORS}
    if extra:
        registry.update(extra)
    return MappingProxyType(registry)
