"""Built-in suffix generators.

Each generator takes no arguments and returns a string. ``suffix_generators``
binds the whole set to a caller-supplied random source and clock so tests can
make them deterministic.
"""
from __future__ import annotations

import random
import string
import time
from typing import Callable, Dict, Optional

from memorable_ids.core.errors import InvalidConfiguration

SuffixGenerator = Callable[[], Optional[str]]

# Distinct values each built-in generator can produce
SUFFIX_RANGES: Dict[str, int] = {
    "number": 1000,
    "number4": 10000,
    "hex": 256,
    "timestamp": 10000,
    "letter": 26,
}


def _epoch_millis() -> int:
    return int(time.time() * 1000)


def suffix_generators(
    rng: Optional[random.Random] = None,
    clock: Optional[Callable[[], int]] = None,
) -> Dict[str, SuffixGenerator]:
    source = rng or random
    now_ms = clock or _epoch_millis

    def number() -> str:
        return f"{source.randrange(1000):03d}"

    def number4() -> str:
        return f"{source.randrange(10000):04d}"

    def hex_() -> str:
        return f"{source.randrange(256):02x}"

    def timestamp() -> str:
        return str(now_ms())[-4:]

    def letter() -> str:
        return source.choice(string.ascii_lowercase)

    return {
        "number": number,
        "number4": number4,
        "hex": hex_,
        "timestamp": timestamp,
        "letter": letter,
    }


SUFFIX_GENERATORS: Dict[str, SuffixGenerator] = suffix_generators()


def default_suffix() -> str:
    """Random 3-digit number, 000-999."""
    return SUFFIX_GENERATORS["number"]()


def get_suffix_generator(name: str, rng: Optional[random.Random] = None) -> SuffixGenerator:
    key = name.strip().lower()
    if key not in SUFFIX_RANGES:
        valid = ", ".join(SUFFIX_RANGES)
        raise InvalidConfiguration(f"Unknown suffix generator '{name}'. Valid names: {valid}")
    if rng is None:
        return SUFFIX_GENERATORS[key]
    return suffix_generators(rng)[key]


def suffix_range(name: Optional[str]) -> int:
    """Multiplier for ``calculate_combinations``; 1 when there is no suffix."""
    if not name:
        return 1
    key = name.strip().lower()
    if key not in SUFFIX_RANGES:
        valid = ", ".join(SUFFIX_RANGES)
        raise InvalidConfiguration(f"Unknown suffix generator '{name}'. Valid names: {valid}")
    return SUFFIX_RANGES[key]
