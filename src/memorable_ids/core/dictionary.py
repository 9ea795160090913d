"""Word lists used to build memorable identifiers.

Five categories, one per identifier position::

    0 adjective   cute
    1 noun        rabbit
    2 verb        swim
    3 adverb      merrily
    4 preposition under
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from memorable_ids.core.errors import InvalidConfiguration


class WordCategory(Enum):
    ADJECTIVE = "adjectives"
    NOUN = "nouns"
    VERB = "verbs"
    ADVERB = "adverbs"
    PREPOSITION = "prepositions"


# Definition order is position order
CATEGORY_ORDER: Tuple[WordCategory, ...] = tuple(WordCategory)
MAX_COMPONENTS = len(CATEGORY_ORDER)

ADJECTIVES: Tuple[str, ...] = (
    "cute", "dapper", "large", "small", "long", "short", "thick", "narrow",
    "deep", "flat", "whole", "low", "high", "near", "far", "fast",
    "quick", "slow", "early", "late", "bright", "dark", "cloudy", "warm",
    "cool", "cold", "windy", "noisy", "loud", "quiet", "dry", "clear",
    "hard", "soft", "heavy", "light", "strong", "weak", "tidy", "clean",
    "dirty", "empty", "full", "close", "thirsty", "hungry", "fat", "old",
    "fresh", "dead", "healthy", "sweet", "sour", "bitter", "salty", "good",
    "bad", "great", "important", "useful", "expensive", "cheap", "free", "difficult",
    "able", "rich", "afraid", "brave", "fine", "sad", "proud", "comfortable",
    "happy", "clever", "interesting", "famous", "exciting", "funny",
)

NOUNS: Tuple[str, ...] = (
    "rabbit", "badger", "fox", "chicken", "bat", "deer", "snake", "hare",
    "hedgehog", "platypus", "mole", "mouse", "otter", "rat", "squirrel", "stoat",
    "weasel", "crow", "dove", "duck", "goose", "hawk", "heron", "kingfisher",
    "owl", "peacock", "pheasant", "pigeon", "robin", "rook", "sparrow", "starling",
    "swan", "ant", "bee", "butterfly", "dragonfly", "fly", "moth", "spider",
    "pike", "salmon", "trout", "frog", "newt", "toad", "crab", "lobster",
    "clam", "cockle", "mussel", "oyster", "snail", "cow", "dog", "donkey",
    "goat", "horse", "pig", "sheep", "ferret", "gerbil", "guinea-pig", "parrot",
    "book", "table", "chair", "lamp",
)

VERBS: Tuple[str, ...] = (
    "sing", "play", "knit", "flounder", "dance", "listen", "run", "talk",
    "cuddle", "sit", "kiss", "hug", "whimper", "hide", "fight", "whisper",
    "cry", "snuggle", "walk", "drive", "loiter", "feel", "jump", "hop",
    "go", "marry", "engage", "sleep", "eat", "drink", "read", "write",
    "swim", "fly", "climb", "build", "create", "explore", "discover", "learn",
)

ADVERBS: Tuple[str, ...] = (
    "jovially", "merrily", "cordially", "carefully", "correctly", "eagerly", "easily", "fast",
    "loudly", "patiently", "quickly", "quietly", "slowly", "gently", "firmly", "softly",
    "boldly", "bravely", "calmly", "clearly", "closely", "deeply", "directly", "exactly",
    "fairly", "freely", "fully",
)

PREPOSITIONS: Tuple[str, ...] = (
    "in", "on", "at", "by", "for", "with", "from", "to",
    "of", "about", "under", "over", "through", "between", "among", "during",
    "before", "after", "above", "below", "beside", "behind", "beyond", "within",
    "without", "across",
)


@dataclass(frozen=True)
class Vocabulary:
    adjectives: Tuple[str, ...] = ADJECTIVES
    nouns: Tuple[str, ...] = NOUNS
    verbs: Tuple[str, ...] = VERBS
    adverbs: Tuple[str, ...] = ADVERBS
    prepositions: Tuple[str, ...] = PREPOSITIONS

    def __post_init__(self) -> None:
        # Accept any sequence but store tuples so nothing can mutate the lists
        for category in CATEGORY_ORDER:
            object.__setattr__(self, category.value, tuple(getattr(self, category.value)))

    def words(self, category: WordCategory) -> Tuple[str, ...]:
        return getattr(self, category.value)

    def size(self, category: WordCategory) -> int:
        return len(self.words(category))

    def require(self, count: int) -> None:
        """Raise if any of the first ``count`` categories has no words."""
        for category in CATEGORY_ORDER[:count]:
            if not self.words(category):
                raise InvalidConfiguration(
                    f"Vocabulary has no {category.value}; cannot build identifiers "
                    f"with {count} components"
                )


DEFAULT_VOCABULARY = Vocabulary()


def _resolve(vocabulary: Optional[Vocabulary]) -> Vocabulary:
    return vocabulary if vocabulary is not None else DEFAULT_VOCABULARY


def words_for(category: WordCategory, vocabulary: Optional[Vocabulary] = None) -> Tuple[str, ...]:
    return _resolve(vocabulary).words(category)


def size_of(category: WordCategory, vocabulary: Optional[Vocabulary] = None) -> int:
    return _resolve(vocabulary).size(category)


def stats(vocabulary: Optional[Vocabulary] = None) -> Dict[str, int]:
    """Word counts keyed by category name, in position order."""
    vocab = _resolve(vocabulary)
    return {category.value: vocab.size(category) for category in CATEGORY_ORDER}


def all_words(vocabulary: Optional[Vocabulary] = None) -> Dict[str, Any]:
    """Every word list plus the ``stats`` summary."""
    vocab = _resolve(vocabulary)
    result: Dict[str, Any] = {category.value: list(vocab.words(category)) for category in CATEGORY_ORDER}
    result["stats"] = stats(vocab)
    return result


def random_word(
    category: WordCategory,
    rng: Optional[random.Random] = None,
    vocabulary: Optional[Vocabulary] = None,
) -> str:
    words = words_for(category, vocabulary)
    if not words:
        raise InvalidConfiguration(f"Vocabulary has no {category.value}")
    return (rng or random).choice(words)


def parse_category(name: str) -> WordCategory:
    """Look up a category by plural or singular name, e.g. ``nouns`` or ``noun``."""
    key = name.strip().lower()
    for category in CATEGORY_ORDER:
        if key in (category.value, category.name.lower()):
            return category
    valid = ", ".join(c.value for c in CATEGORY_ORDER)
    raise InvalidConfiguration(f"Unknown word category '{name}'. Valid categories: {valid}")
