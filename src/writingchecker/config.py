# ───────────────────────── src/writingchecker/config.py ─────────────────────────
"""
Configuration management for the writing checker.

This module centralizes the runtime settings shared by the command line tool,
the spelling corrector and the logging setup.

Key Components:
    - Config: Main configuration dataclass with validation
    - load_config: Build a Config from a JSON file

Spell Checking Guide:
    The spelling check is driven by a frequency model trained from a plain
    text corpus (``training.txt`` by default). Any text works; the corrector
    only counts runs of ASCII letters.

    1. **Training Corpus Size**:
       - Larger corpora give better frequency rankings
       - Words absent from the corpus are reported as misspellings
       - A missing corpus disables the spelling check entirely

    2. **Performance Considerations**:
       - Correcting an unknown word at distance 2 is quadratic in word length
       - The result cache makes repeated misspellings nearly free
       - Memory usage: roughly 100 bytes per cached word

Examples:
    Check a manuscript against a project-specific corpus:
    >>> config = Config(training_file="corpus/novels.txt", cache_size=50000)

    Run only the regex checks:
    >>> config = Config(enable_spell_check=False)
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


def _default_weasel_paths() -> List[str]:
    home = os.environ.get("HOME", "")
    return [f"{home}/.config/writing-checker/weasels", "weasels.txt"]


@dataclass
class Config:
    """Configuration settings for the writing checker.

    Attributes:
        training_file: Corpus used to train the spelling model
            (default: "training.txt").
        weasel_paths: Candidate files for a custom weasel word list. The first
            one that exists replaces the built-in list.
        enable_spell_check: Run the spelling check when a corpus is available
            (default: True).
        min_word_length: Words shorter than this are never spell checked
            (default: 2, so "a" and "I" are skipped).
        fix_encoding: Repair mojibake and similar damage with ftfy before
            training or scanning (default: True).
        cache_size: Maximum number of word corrections to memoize. 0 disables
            the cache (default: 10000).
        log_file: Path to the error log file (default: "writingchecker_error.log").
        log_level: Logging level name (default: "ERROR").
        max_log_size: Maximum log file size in bytes (default: 10MB).
        log_backup_count: Number of backup log files to keep (default: 3).

    Examples:
        >>> config = Config()
        >>> config.min_word_length
        2
    """

    # Spell checking
    training_file: str = "training.txt"
    enable_spell_check: bool = True
    min_word_length: int = 2
    cache_size: int = 10000

    # Weasel word list
    weasel_paths: List[str] = field(default_factory=_default_weasel_paths)

    # Text input
    fix_encoding: bool = True

    # Logging configuration
    log_file: str = "writingchecker_error.log"
    log_level: str = "ERROR"
    max_log_size: int = 10 * 1024 * 1024  # 10MB
    log_backup_count: int = 3

    def __post_init__(self) -> None:
        """Validate configuration after initialization.

        Raises:
            ValueError: If any configuration values are invalid.
        """
        if self.min_word_length < 1:
            raise ValueError("min_word_length must be at least 1")
        if self.cache_size < 0:
            raise ValueError("cache_size cannot be negative")

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_levels:
            raise ValueError(
                f"log_level must be one of {valid_levels}, got '{self.log_level}'"
            )
        self.log_level = self.log_level.upper()

        if self.max_log_size <= 0:
            raise ValueError("max_log_size must be positive")
        if self.log_backup_count < 0:
            raise ValueError("log_backup_count cannot be negative")


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from file or use defaults.

    Args:
        config_path: Optional path to a JSON configuration file whose keys
            match the Config attributes

    Returns:
        Configuration object

    Raises:
        RuntimeError: If config file cannot be loaded
    """
    if config_path:
        try:
            config_file = Path(config_path)
            if not config_file.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")

            with open(config_file, "r", encoding="utf-8") as f:
                config_data = json.load(f)

            return Config(**config_data)

        except Exception as e:
            raise RuntimeError(f"Failed to load config from {config_path}: {e}")

    return Config()
