# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and answer sets

SCL-90 ANSWER SETS:
- All answers keyed "1".."90" (string keys, as they arrive over HTTP)
- Factor ranges: somatization 1-12, obsessive 13-22, interpersonal 23-31,
  depression 32-44, anxiety 45-54, hostility 55-60, phobic 61-67,
  paranoid 68-73, psychoticism 74-83, additional 84-90
"""

import pytest
from fastapi.testclient import TestClient

from psyscore.main import app
from psyscore.models.scoring import ItemMetadata, OptionSpec


def make_scl90_answers(value=1, overrides=None):
    """Build a full SCL-90 answer set with every item = value, then apply overrides."""
    answers = {str(i): value for i in range(1, 91)}
    for ordinal, override in (overrides or {}).items():
        answers[str(ordinal)] = override
    return answers


def five_point_options():
    return [OptionSpec(value=v, label=str(v)) for v in range(1, 6)]


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SCL-90 FIXTURES
# =============================================================================

@pytest.fixture
def scl90_all_ones():
    """Scenario A: every item answered 1."""
    return make_scl90_answers(1)


@pytest.fixture
def scl90_all_fives():
    """Scenario B: every item answered 5."""
    return make_scl90_answers(5)


@pytest.fixture
def scl90_incomplete():
    """89 answers — item 90 missing."""
    answers = make_scl90_answers(1)
    del answers["90"]
    return answers


# =============================================================================
# GENERIC SCALE FIXTURES
# =============================================================================

@pytest.fixture
def weighted_questions():
    """Scenario C: three items weighted 1, 2, 1, none reverse scored."""
    return {
        "q1": ItemMetadata(id="q1", order_num=1, weight=1.0),
        "q2": ItemMetadata(id="q2", order_num=2, weight=2.0),
        "q3": ItemMetadata(id="q3", order_num=3, weight=1.0),
    }


@pytest.fixture
def weighted_answers():
    return {"q1": 2, "q2": 3, "q3": 4}


@pytest.fixture
def tagged_questions():
    """Six five-point items tagged across two dimensions; q6 reverse scored."""
    return {
        "q1": ItemMetadata(order_num=1, dimension="mood", options=five_point_options()),
        "q2": ItemMetadata(order_num=2, dimension="mood", options=five_point_options()),
        "q3": ItemMetadata(order_num=3, dimension="mood", options=five_point_options()),
        "q4": ItemMetadata(order_num=4, dimension="sleep", options=five_point_options()),
        "q5": ItemMetadata(order_num=5, dimension="sleep", options=five_point_options()),
        "q6": ItemMetadata(
            order_num=6, dimension="sleep", reverse_scored=True, options=five_point_options()
        ),
    }


@pytest.fixture
def tagged_answers():
    return {"q1": 1, "q2": 2, "q3": 2, "q4": 3, "q5": 4, "q6": 2}


@pytest.fixture
def severity_levels():
    """Ascending, non-overlapping interpretation levels."""
    return {
        "levels": [
            {"level": "normal", "range_min": 0, "range_max": 9,
             "description": "Within normal range", "suggestions": ["Keep it up"]},
            {"level": "mild", "range_min": 10, "range_max": 14,
             "description": "Mild distress", "suggestions": ["Monitor mood"]},
            {"level": "moderate", "range_min": 15, "range_max": 19,
             "description": "Moderate distress", "suggestions": ["Talk to a counsellor"]},
            {"level": "severe", "range_min": 20,
             "description": "Severe distress", "suggestions": ["Seek professional help"]},
        ]
    }
