"""Combination counts and collision estimates for memorable identifiers."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from memorable_ids.core.dictionary import CATEGORY_ORDER, DEFAULT_VOCABULARY, Vocabulary
from memorable_ids.core.generator import GenerateConfig

SCENARIO_SAMPLE_SIZES: Tuple[int, ...] = (50, 100, 200, 500, 1000, 2000, 5000, 10000, 20000, 50000)

# Sample sizes at or above this share of the space are not worth reporting
REALISTIC_FRACTION = 0.8


@dataclass(frozen=True)
class CollisionScenario:
    sample_size: int
    probability: float
    percentage_label: str


@dataclass(frozen=True)
class CollisionAnalysis:
    total_combinations: int
    scenarios: List[CollisionScenario] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def calculate_combinations(
    components: int = 2,
    suffix_range: int = 1,
    vocabulary: Optional[Vocabulary] = None,
) -> int:
    """Number of distinct identifiers for ``components`` words and a suffix range.

    ``calculate_combinations(2)`` is 78 * 68 = 5304 with the shipped
    vocabulary; ``calculate_combinations(2, 1000)`` adds a 3-digit suffix.
    """
    GenerateConfig(components=components).validate()
    vocab = vocabulary if vocabulary is not None else DEFAULT_VOCABULARY
    total = 1
    for category in CATEGORY_ORDER[:components]:
        total *= vocab.size(category)
    return total * suffix_range


def calculate_collision_probability(total_combinations: int, sample_size: int) -> float:
    """Birthday paradox approximation: 1 - e^(-n^2 / 2N)."""
    if sample_size >= total_combinations:
        return 1.0
    if sample_size <= 1:
        return 0.0
    exponent = -(sample_size * sample_size) / (2 * total_combinations)
    return 1.0 - math.exp(exponent)


def get_collision_analysis(
    components: int = 2,
    suffix_range: int = 1,
    vocabulary: Optional[Vocabulary] = None,
) -> CollisionAnalysis:
    total = calculate_combinations(components, suffix_range, vocabulary)
    scenarios: List[CollisionScenario] = []
    for size in SCENARIO_SAMPLE_SIZES:
        if size >= total * REALISTIC_FRACTION:
            continue
        probability = calculate_collision_probability(total, size)
        scenarios.append(
            CollisionScenario(
                sample_size=size,
                probability=probability,
                percentage_label=f"{probability * 100:.2f}%",
            )
        )
    return CollisionAnalysis(total_combinations=total, scenarios=scenarios)
