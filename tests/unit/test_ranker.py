"""Tests for feature vector generation and pairwise ranking."""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

import pytest

from marcrank.errors import MissingChangeDataError
from marcrank.extract import (
    cataloging_source_from_008,
    encoding_level,
    latest_change,
    local_owner_count,
    record_age,
    specific_local_owner,
)
from marcrank.models import UNDEFINED, Record
from marcrank.ranking import Ranker, RankingConfig, generate_feature_vector, rank_records, resolve_features

F008_1985 = "850506s1983^^^^xxu|||||||||||||||||eng||"
F008_1987 = "870506s1983^^^^xxu|||||||||||||||||eng||"
LEADER_FULL = "00000cam^a2200301#i^4500"
LEADER_UNUSABLE = "00000cam^a2200301ui^4500"

MakeRecord = Callable[..., Record]


@pytest.fixture
def record1(make_record: MakeRecord, cat_fields: list) -> Record:
    """Full-level record with a rich change log and local owners."""
    return make_record(
        ("005", "20141219114925.0"),
        ("008", F008_1985),
        *cat_fields,
        ("LOW", "a", "FENNI"),
        ("SID", "b", "viola"),
        ("500", "a", "ORG_X"),
        leader=LEADER_FULL,
    )


@pytest.fixture
def record2(make_record: MakeRecord) -> Record:
    """Unusable-level record without change log."""
    return make_record(
        ("005", "20131219114925.0"),
        ("008", F008_1987),
        leader=LEADER_UNUSABLE,
    )


def _ranker(*features: dict) -> Ranker:
    return Ranker(resolve_features(RankingConfig.from_dict({"features": list(features)})))


# ========== generate_feature_vector ==========


@pytest.mark.unit
def test_generate_feature_vector(record1: Record) -> None:
    """Test vector follows extractor order and length."""
    extractors = [
        encoding_level,
        cataloging_source_from_008,
        record_age,
        local_owner_count,
        latest_change(),
        specific_local_owner("FENNI"),
        specific_local_owner("VIOLA"),
    ]

    vector = generate_feature_vector(record1, extractors)

    assert vector == [4, 0, "850506", 2, "201412191145", 1, 1]


@pytest.mark.unit
def test_generate_feature_vector_allows_duplicates(record2: Record) -> None:
    """Test the same extractor may appear several times."""
    vector = generate_feature_vector(record2, [encoding_level, record_age, encoding_level])
    assert vector == [None, "870506", None]


@pytest.mark.unit
def test_generate_feature_vector_does_not_mutate_record(record1: Record) -> None:
    """Test extraction leaves the record unchanged."""
    before = record1.to_dict()
    generate_feature_vector(record1, [encoding_level, latest_change(), local_owner_count])
    assert record1.to_dict() == before


# ========== Ranker ==========


@pytest.mark.unit
def test_ranker_end_to_end(record1: Record, record2: Record) -> None:
    """Test raw vectors, normalized vectors and final score."""
    ranker = _ranker(
        {"extractor": "encodingLevel", "normalizer": "notNull"},
        {"extractor": "recordAge", "normalizer": "lexical"},
        {"extractor": {"name": "latestChange", "parameters": []}, "normalizer": "lexical"},
    )

    result = ranker.explain(record1, record2)

    assert result.raw1 == (4, "850506", "201412191145")
    assert result.raw2 == (None, "870506", "201312191149")
    assert result.normalized1 == (1, 0, 1)
    assert result.normalized2 == (0, 1, 0)
    assert result.score == 1
    assert result.preferred == 1
    assert ranker(record1, record2) == 1
    assert ranker(record2, record1) == -1


@pytest.mark.unit
def test_ranker_tie(record1: Record) -> None:
    """Test identical records tie."""
    ranker = _ranker({"extractor": "recordAge", "normalizer": "lexical"})

    result = ranker.explain(record1, record1)

    assert result.score == 0
    assert result.preferred is None


@pytest.mark.unit
def test_ranker_pass_through_feature(make_record: MakeRecord) -> None:
    """Test raw numeric scores are summed when no normalizer is configured."""
    ranker = _ranker({"extractor": "localOwnerCount"})
    many = make_record(("LOW", "a", "A"), ("LOW", "a", "B"), ("SID", "b", "c"))
    one = make_record(("LOW", "a", "A"))

    assert ranker(many, one) == 2


@pytest.mark.unit
def test_ranker_undefined_scores_have_no_opinion(make_record: MakeRecord) -> None:
    """Test a too-short leader neither wins nor loses on encoding level."""
    ranker = _ranker({"extractor": "encodingLevel", "normalizer": "lexical"})
    short = make_record(leader="00000")
    full = make_record(leader=LEADER_FULL)

    assert ranker.explain(short, full).raw1 == (UNDEFINED,)
    assert ranker(short, full) == 0


@pytest.mark.unit
def test_ranker_propagates_record_data_errors(make_record: MakeRecord) -> None:
    """Test missing change data surfaces as an explicit error."""
    ranker = _ranker({"extractor": "latestChange", "normalizer": "lexical"})

    with pytest.raises(MissingChangeDataError):
        ranker(make_record(("005", "20141219114925.0")), make_record())


@pytest.mark.unit
def test_ranker_is_reusable_across_threads(record1: Record, record2: Record) -> None:
    """Test one ranker serves concurrent comparisons."""
    ranker = _ranker(
        {"extractor": "encodingLevel", "normalizer": "notNull"},
        {"extractor": "recordAge", "normalizer": "lexical"},
        {"extractor": "latestChange", "normalizer": "lexical"},
    )
    pairs = [(record1, record2), (record2, record1)] * 50

    with ThreadPoolExecutor(max_workers=4) as pool:
        scores = list(pool.map(lambda pair: ranker(*pair), pairs))

    assert scores == [ranker(a, b) for a, b in pairs]
    assert scores == [1, -1] * 50


@pytest.mark.unit
def test_rank_result_to_dict(record1: Record, record2: Record) -> None:
    """Test serialized breakdown."""
    ranker = _ranker(
        {"extractor": "encodingLevel", "normalizer": "notNull"},
        {"extractor": "reprintInfo", "normalizer": "reprint"},
    )

    data = ranker.explain(record1, record2).to_dict()

    assert data["score"] == 1
    assert data["preferred"] == 1
    assert data["features"][0] == {"feature": "encodingLevel/notNull", "raw": [4, None], "normalized": [1, 0]}
    assert data["features"][1]["raw"][0] == {"year": "1983", "reprint_notes": []}


# ========== Sorting ==========


@pytest.mark.unit
def test_rank_records_best_first(make_record: MakeRecord) -> None:
    """Test records are ordered by preference, ties keep input order."""
    ranker = _ranker({"extractor": "encodingLevel", "normalizer": "lexical"})
    levels = ["7", "#", "u", "7", "1"]
    records = [make_record(leader=LEADER_FULL[:17] + level + LEADER_FULL[18:]) for level in levels]

    assert rank_records(records, ranker) == [1, 4, 0, 3, 2]
    assert ranker.sort(records) == [1, 4, 0, 3, 2]


@pytest.mark.unit
def test_rank_records_empty() -> None:
    """Test empty input."""
    ranker = _ranker({"extractor": "recordAge", "normalizer": "lexical"})
    assert rank_records([], ranker) == []
