# portal/tests/test_scoring.py
import logging

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from portal.scoring import (
    DRABBLE_SHORT_TRAZOS,
    DRABBLE_TRAZOS,
    TRAZOS_VALUES,
    ActivityType,
    compute_trazos,
    resolve_activity_type,
)


@pytest.mark.parametrize(
    "words, expected",
    [
        (0, 300),
        (299, 300),     # below the first range -> fallback
        (300, 300),
        (499, 300),
        (500, 400),
        (999, 400),
        (1000, 500),
        (1499, 500),
        (1500, 600),
        (1999, 600),
        (2000, 300),    # above the last range -> fallback
        (10000, 300),
    ],
)
def test_narrativa_word_ranges(words, expected):
    assert compute_trazos("narrativa", words) == expected


@pytest.mark.parametrize("words, expected", [(0, 150), (149, 150), (150, 200), (199, 200), (200, 200), (1000, 200)])
def test_drabble_only_short_pieces_score_150(words, expected):
    assert compute_trazos("drabble", words) == expected


@pytest.mark.parametrize("responses, expected", [(0, 100), (4, 100), (5, 150), (9, 150), (10, 150), (50, 150)])
def test_hilo_by_responses(responses, expected):
    assert compute_trazos("hilo", 0, responses) == expected


@pytest.mark.parametrize(
    "responses, expected",
    [(0, 250), (4, 250), (5, 400), (9, 400), (10, 550), (14, 550), (15, 700), (19, 700), (20, 700), (100, 700)],
)
def test_rol_by_responses(responses, expected):
    assert compute_trazos("rol", 0, responses) == expected


@pytest.mark.parametrize(
    "activity_type, expected",
    [
        ("microcuento", 100),
        ("encuesta", 100),
        ("collage", 150),
        ("poemas", 150),
        ("pinturas", 200),
        ("interpretacion", 200),
        ("otro", 100),
    ],
)
def test_flat_types_ignore_words_and_responses(activity_type, expected):
    assert compute_trazos(activity_type, 0) == expected
    assert compute_trazos(activity_type, 5000, 40) == expected


def test_missing_responses_counts_as_zero():
    assert compute_trazos("rol", 0, None) == 250
    assert compute_trazos("hilo", 0) == 100


def test_enum_members_are_accepted_directly():
    assert compute_trazos(ActivityType.NARRATIVA, 750) == 400


def test_unknown_type_scores_like_otro_and_logs(caplog):
    with caplog.at_level(logging.WARNING, logger="portal.scoring"):
        assert compute_trazos("narativa", 750) == 100
    assert resolve_activity_type("narativa") is ActivityType.OTRO
    assert any("narativa" in r.getMessage() for r in caplog.records)


def test_known_type_does_not_log(caplog):
    with caplog.at_level(logging.WARNING, logger="portal.scoring"):
        compute_trazos("poemas", 10)
    assert caplog.records == []


def test_trazos_values_cover_the_rubric():
    assert TRAZOS_VALUES == {100, 150, 200, 250, 300, 400, 500, 550, 600, 700}
    assert {DRABBLE_SHORT_TRAZOS, DRABBLE_TRAZOS} == {150, 200}
    assert compute_trazos("drabble", 149) == DRABBLE_SHORT_TRAZOS
    assert compute_trazos("drabble", 150) == DRABBLE_TRAZOS


@given(
    activity_type=st.one_of(st.sampled_from([t.value for t in ActivityType]), st.text(max_size=12)),
    words=st.integers(min_value=0, max_value=100_000),
    responses=st.integers(min_value=0, max_value=1_000),
)
@settings(max_examples=200)
def test_score_is_deterministic_and_in_rubric(activity_type, words, responses):
    first = compute_trazos(activity_type, words, responses)
    second = compute_trazos(activity_type, words, responses)
    assert first == second
    assert first in TRAZOS_VALUES
