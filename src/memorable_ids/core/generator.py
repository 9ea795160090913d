"""Memorable identifier generation.

Produces identifiers like 'cute-rabbit', 'large-fox-swim' or 'quick-mouse-042'.
"""
from __future__ import annotations

import inspect
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from memorable_ids.core.dictionary import (
    CATEGORY_ORDER,
    DEFAULT_VOCABULARY,
    MAX_COMPONENTS,
    Vocabulary,
    random_word,
)
from memorable_ids.core.errors import InvalidConfiguration
from memorable_ids.core.suffixes import SuffixGenerator

logger = logging.getLogger("memorable_ids.generator")


@dataclass(frozen=True)
class GenerateConfig:
    components: int = 2
    suffix: Optional[SuffixGenerator] = None
    separator: str = "-"

    def validate(self) -> None:
        if not isinstance(self.components, int) or not 1 <= self.components <= MAX_COMPONENTS:
            raise InvalidConfiguration(f"Components must be between 1 and {MAX_COMPONENTS}")


def _takes_no_arguments(func: object) -> bool:
    if not callable(func):
        return False
    try:
        inspect.signature(func).bind()
    except TypeError:
        return False
    except ValueError:
        # No introspectable signature (some builtins); assume it is usable
        return True
    return True


def generate(
    config: Optional[GenerateConfig] = None,
    *,
    rng: Optional[random.Random] = None,
    vocabulary: Optional[Vocabulary] = None,
) -> str:
    """Generate a memorable identifier like 'cute-rabbit'.

    One word is drawn per position: adjective, noun, verb, adverb,
    preposition, in that order. If ``config.suffix`` is a zero-argument
    callable its return value is appended as the last part unless it is
    ``None``. Errors raised by the suffix generator are not caught.
    """
    config = config or GenerateConfig()
    config.validate()
    vocab = vocabulary if vocabulary is not None else DEFAULT_VOCABULARY
    vocab.require(config.components)

    parts: List[str] = [
        random_word(category, rng=rng, vocabulary=vocab)
        for category in CATEGORY_ORDER[: config.components]
    ]

    if _takes_no_arguments(config.suffix):
        suffix_value = config.suffix()
        if suffix_value is not None:
            parts.append(suffix_value)

    identifier = config.separator.join(parts)
    logger.debug("Generated identifier %s (components=%d)", identifier, config.components)
    return identifier


def generate_many(
    count: int,
    config: Optional[GenerateConfig] = None,
    *,
    rng: Optional[random.Random] = None,
    vocabulary: Optional[Vocabulary] = None,
) -> List[str]:
    """Generate ``count`` independent identifiers. Duplicates are possible."""
    if count < 0:
        raise InvalidConfiguration("Count must not be negative")
    config = config or GenerateConfig()
    return [generate(config, rng=rng, vocabulary=vocabulary) for _ in range(count)]
