"""Human-readable identifiers built from random words, e.g. 'cute-rabbit-042'."""
from __future__ import annotations

from memorable_ids.core.collision import (
    CollisionAnalysis,
    CollisionScenario,
    calculate_collision_probability,
    calculate_combinations,
    get_collision_analysis,
)
from memorable_ids.core.dictionary import (
    DEFAULT_VOCABULARY,
    Vocabulary,
    WordCategory,
    all_words,
    random_word,
    size_of,
    stats,
    words_for,
)
from memorable_ids.core.errors import InvalidConfiguration
from memorable_ids.core.generator import GenerateConfig, generate, generate_many
from memorable_ids.core.parser import ParsedIdentifier, parse
from memorable_ids.core.suffixes import (
    SUFFIX_GENERATORS,
    SuffixGenerator,
    default_suffix,
    get_suffix_generator,
    suffix_generators,
    suffix_range,
)

__version__ = "1.0.0"

__all__ = [
    "CollisionAnalysis",
    "CollisionScenario",
    "DEFAULT_VOCABULARY",
    "GenerateConfig",
    "InvalidConfiguration",
    "ParsedIdentifier",
    "SUFFIX_GENERATORS",
    "SuffixGenerator",
    "Vocabulary",
    "WordCategory",
    "__version__",
    "all_words",
    "calculate_collision_probability",
    "calculate_combinations",
    "default_suffix",
    "generate",
    "generate_many",
    "get_collision_analysis",
    "get_suffix_generator",
    "parse",
    "random_word",
    "size_of",
    "stats",
    "suffix_generators",
    "suffix_range",
    "words_for",
]
