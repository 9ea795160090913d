"""Centralized logging configuration for memorable-ids.

Library modules only create ``memorable_ids.*`` loggers and log at DEBUG;
nothing is emitted until an application (the CLI) calls ``setup_logging``.

Log directory structure (only when a log directory is configured)::

    <log_dir>/
    ├── memorable-ids.log     # All Python logger output (rotating)
    └── generated.log         # One JSON record per issued identifier
"""
from __future__ import annotations

import json
import logging
import logging.handlers
import os
import time
from typing import Any, Optional

from memorable_ids.core.generator import GenerateConfig

# Dedicated logger for the issued-identifier audit trail
generated_logger = logging.getLogger("memorable_ids._generated")


def setup_logging(log_level: str = "warning", log_dir: Optional[str] = None) -> None:
    """Configure the logging system with a stdout handler and, optionally, log files.

    This should be called once at application startup.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    # ── Root logger: stdout + rotating file ──────────────────
    root = logging.getLogger()
    root.setLevel(level)

    # Clear any existing handlers (avoid duplicate output on re-init)
    root.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    stdout_handler.setFormatter(fmt)
    root.addHandler(stdout_handler)

    if not log_dir:
        generated_logger.handlers.clear()
        generated_logger.propagate = False
        return

    os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, "memorable-ids.log"),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    _setup_jsonl_logger(generated_logger, os.path.join(log_dir, "generated.log"))

    logging.getLogger("memorable_ids").info(
        "Logging initialized: log_dir=%s, level=%s", log_dir, log_level
    )


def _setup_jsonl_logger(logger_instance: logging.Logger, path: str) -> None:
    """Configure a logger to write raw JSONL messages to a rotating file."""
    logger_instance.setLevel(logging.INFO)
    logger_instance.propagate = False  # Don't bubble up to root
    logger_instance.handlers.clear()

    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    # Raw formatter: message is already JSON
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger_instance.addHandler(handler)


def log_generated(identifier: str, config: GenerateConfig) -> None:
    """Record an issued identifier in the generated-identifiers log."""
    record: dict[str, Any] = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "id": identifier,
        "components": config.components,
        "separator": config.separator,
    }
    if config.suffix is not None:
        record["suffix"] = getattr(config.suffix, "__name__", repr(config.suffix))
    generated_logger.info(json.dumps(record))
