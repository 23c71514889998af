"""
Configuration for rendering snapshots and for the command line.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger("memory_reading")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ParserConfig:
    """Configuration options for presenting a parsed snapshot."""

    max_lines: int = 400
    max_text_length: int = 80
    include_regionless: bool = False
    debug: bool = False

    def __post_init__(self):
        if self.max_lines < 1:
            raise ValueError(f"max_lines must be positive, got {self.max_lines}")
        if self.max_text_length < 4:
            raise ValueError(f"max_text_length must be at least 4, got {self.max_text_length}")


def setup_logging(level: int = logging.INFO, debug: bool = False) -> None:
    """Configure logging for the memory reading parser."""
    if debug:
        level = logging.DEBUG

    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
