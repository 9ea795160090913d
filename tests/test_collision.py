import math
import re

import pytest

from memorable_ids.core.collision import (
    SCENARIO_SAMPLE_SIZES,
    CollisionAnalysis,
    calculate_collision_probability,
    calculate_combinations,
    get_collision_analysis,
)
from memorable_ids.core.dictionary import Vocabulary
from memorable_ids.core.errors import InvalidConfiguration

# ── calculate_combinations ───────────────────────────────────

def test_combinations_per_component_count() -> None:
    assert calculate_combinations(1) == 78
    assert calculate_combinations(2) == 78 * 68 == 5304
    assert calculate_combinations(3) == 78 * 68 * 40 == 212160
    assert calculate_combinations(4) == 78 * 68 * 40 * 27
    assert calculate_combinations(5) == 78 * 68 * 40 * 27 * 26

def test_combinations_defaults() -> None:
    assert calculate_combinations() == 5304

def test_combinations_suffix_range() -> None:
    assert calculate_combinations(2, 1000) == 5304000
    assert calculate_combinations(2, 0) == 0
    assert calculate_combinations(5, 10**12) == 78 * 68 * 40 * 27 * 26 * 10**12

def test_combinations_custom_vocabulary() -> None:
    vocab = Vocabulary(adjectives=("a", "b"), nouns=("c", "d", "e"))
    assert calculate_combinations(2, vocabulary=vocab) == 6
    assert calculate_combinations(1, 10, vocabulary=vocab) == 20

@pytest.mark.parametrize("components", [0, 6, -1])
def test_combinations_invalid_components(components: int) -> None:
    with pytest.raises(InvalidConfiguration):
        calculate_combinations(components)

# ── calculate_collision_probability ──────────────────────────

@pytest.mark.parametrize("total", [2, 100, 5304, 10**9])
def test_probability_bounds(total: int) -> None:
    assert calculate_collision_probability(total, total) == 1.0
    assert calculate_collision_probability(total, total + 50) == 1.0
    assert calculate_collision_probability(total, 0) == 0.0
    assert calculate_collision_probability(total, 1) == 0.0
    assert calculate_collision_probability(total, -1) == 0.0

def test_probability_returns_float() -> None:
    assert isinstance(calculate_collision_probability(100, 100), float)
    assert isinstance(calculate_collision_probability(100, 0), float)

def test_probability_uses_birthday_approximation() -> None:
    expected = 1 - math.exp(-(100 * 100) / (2 * 5304))
    assert calculate_collision_probability(5304, 100) == expected
    assert 0.6 < calculate_collision_probability(5304, 100) < 0.62

def test_probability_known_values() -> None:
    assert calculate_collision_probability(212160, 10000) == 1 - math.exp(-(10000**2) / (2 * 212160))
    assert 0.0 < calculate_collision_probability(10**9, 10) < 0.001

def test_probability_monotonic() -> None:
    total = calculate_combinations(2)
    previous = 0.0
    for size in range(0, total + 10, 37):
        current = calculate_collision_probability(total, size)
        assert current >= previous
        assert 0.0 <= current <= 1.0
        previous = current

# ── get_collision_analysis ───────────────────────────────────

def test_analysis_default() -> None:
    analysis = get_collision_analysis()
    assert isinstance(analysis, CollisionAnalysis)
    assert analysis.total_combinations == 5304
    assert [s.sample_size for s in analysis.scenarios] == [50, 100, 200, 500, 1000, 2000]

def test_analysis_filters_unrealistic_sizes() -> None:
    for components in range(1, 6):
        for suffix_range in (1, 26, 1000):
            analysis = get_collision_analysis(components, suffix_range)
            for scenario in analysis.scenarios:
                assert scenario.sample_size < 0.8 * analysis.total_combinations

def test_analysis_is_ascending() -> None:
    analysis = get_collision_analysis(3, 1000)
    sizes = [s.sample_size for s in analysis.scenarios]
    assert sizes == sorted(sizes)
    assert len(sizes) == len(set(sizes))
    assert sizes == list(SCENARIO_SAMPLE_SIZES)
    probabilities = [s.probability for s in analysis.scenarios]
    assert probabilities == sorted(probabilities)

def test_analysis_labels() -> None:
    analysis = get_collision_analysis(2, 1000)
    assert analysis.total_combinations == 5304000
    for scenario in analysis.scenarios:
        assert re.fullmatch(r"\d+\.\d{2}%", scenario.percentage_label)
        assert abs(float(scenario.percentage_label[:-1]) - scenario.probability * 100) < 0.01

def test_analysis_one_component() -> None:
    analysis = get_collision_analysis(1)
    assert analysis.total_combinations == 78
    assert [s.sample_size for s in analysis.scenarios] == [50]

def test_analysis_zero_suffix_range_has_no_scenarios() -> None:
    analysis = get_collision_analysis(2, 0)
    assert analysis.total_combinations == 0
    assert analysis.scenarios == []

def test_analysis_to_dict() -> None:
    data = get_collision_analysis(1).to_dict()
    assert data["total_combinations"] == 78
    assert data["scenarios"][0]["sample_size"] == 50
    assert data["scenarios"][0]["percentage_label"].endswith("%")
