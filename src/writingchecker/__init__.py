# ───────────────────────── src/writingchecker/__init__.py ─────────────────────────
"""
writing-checker: A command line proofreader for plain text files.

Flags weasel words, passive voice and duplicated words, and suggests spelling
corrections learned from a training corpus.
"""

__version__ = "1.0.0"
__author__ = "writing-checker Team"

from .checks import Match, WritingChecker
from .config import Config
from .speller import Corrector, FrequencyModel

# Public API exports
__all__ = [
    "FrequencyModel",
    "Corrector",
    "WritingChecker",
    "Match",
    "Config",
    "__version__",
]
