from __future__ import annotations

import os
from dataclasses import dataclass

from memorable_ids.core.generator import GenerateConfig
from memorable_ids.core.suffixes import get_suffix_generator

@dataclass
class Settings:
    log_level: str
    log_dir: str | None
    components: int
    separator: str
    suffix: str | None
    log_generated: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            log_level=os.getenv("MEMORABLE_IDS_LOG_LEVEL", "warning"),
            log_dir=os.getenv("MEMORABLE_IDS_LOG_DIR") or None,
            components=int(os.getenv("MEMORABLE_IDS_COMPONENTS", "2")),
            separator=os.getenv("MEMORABLE_IDS_SEPARATOR", "-"),
            suffix=os.getenv("MEMORABLE_IDS_SUFFIX") or None,
            log_generated=os.getenv("MEMORABLE_IDS_LOG_GENERATED", "false").lower() in {"1", "true", "yes"},
        )

    def generate_config(self) -> GenerateConfig:
        """Build a validated GenerateConfig from these settings."""
        suffix = get_suffix_generator(self.suffix) if self.suffix else None
        config = GenerateConfig(components=self.components, suffix=suffix, separator=self.separator)
        config.validate()
        return config
