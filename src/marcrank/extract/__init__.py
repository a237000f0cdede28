"""Feature extractors for MARC records.

Every extractor is a pure function of one record to one score. The modules
group them by the part of the record they read:

- controlfields: leader and fixed-position control field data
- owners: local owner organizations (LOW, SID)
- fields: generic data field tests and counts
- history: change log (CAT, 005) and reprint notes (500)
"""

from marcrank.extract.controlfields import (
    cataloging_source_from_008,
    controlfield_position,
    encoding_level,
    publication_year,
    record_age,
)
from marcrank.extract.fields import field_count, field_length, specific_field_value
from marcrank.extract.history import (
    MACHINE_USER_PREFIXES,
    ChangeEntry,
    change_log,
    is_human_user,
    latest_change,
    latest_change_by_human,
    reprint_info,
)
from marcrank.extract.owners import (
    local_owner_count,
    local_owner_list,
    non_finnish_helka,
    specific_local_owner,
    specific_single_local_owner,
)
from marcrank.extract.registry import Extractor, ExtractorSpec, build_extractor_registry

__all__ = [
    # Registry
    "Extractor",
    "ExtractorSpec",
    "build_extractor_registry",
    # Control fields
    "encoding_level",
    "controlfield_position",
    "cataloging_source_from_008",
    "publication_year",
    "record_age",
    # Local owners
    "local_owner_list",
    "local_owner_count",
    "specific_local_owner",
    "specific_single_local_owner",
    "non_finnish_helka",
    # Fields
    "specific_field_value",
    "field_count",
    "field_length",
    # History
    "ChangeEntry",
    "change_log",
    "is_human_user",
    "latest_change",
    "latest_change_by_human",
    "reprint_info",
    "MACHINE_USER_PREFIXES",
]
