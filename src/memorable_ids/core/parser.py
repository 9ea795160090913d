from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

# ASCII digits only; str.isdigit and \d also accept other Unicode digits
_NUMERIC_SUFFIX = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ParsedIdentifier:
    components: List[str] = field(default_factory=list)
    suffix: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _split(identifier: str, separator: str) -> List[str]:
    if separator:
        return identifier.split(separator)
    return list(identifier) or [""]


def parse(identifier: str, separator: str = "-") -> ParsedIdentifier:
    """Split an identifier back into word components and a numeric suffix.

    Only an all-digit last part counts as a suffix, so ``cute-rabbit-042``
    parses to ``(["cute", "rabbit"], "042")`` while hex or letter suffixes
    stay in ``components``. Never raises.
    """
    parts = _split(identifier, separator)
    last = parts[-1]
    if _NUMERIC_SUFFIX.fullmatch(last):
        return ParsedIdentifier(components=parts[:-1], suffix=last)
    return ParsedIdentifier(components=parts, suffix=None)
