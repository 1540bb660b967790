# ───────────────────────── src/writingchecker/checks.py ─────────────────────────
"""
Line-oriented writing checks.

Each check scans text one line at a time and returns a list of Match records:

    - check_weasel_words(): vague qualifiers such as "very" or "several"
    - check_passive_voice(): "to be" followed by a past participle
    - check_duplicates(): the same word twice in a row, ignoring case
    - check_spelling(): words the trained Corrector would change

Example Workflow:
    >>> checker = WritingChecker()
    >>> matches = checker.check_duplicates("the the end", "notes.txt")
    >>> matches[0].matched_text
    'the the'
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .config import Config
from .speller import Corrector
from .wordlists import (
    DEFAULT_WEASEL_WORDS,
    IRREGULAR_PARTICIPLES,
    SPELL_WORD_PATTERN,
    WORD_PATTERN,
    compile_passive_pattern,
    compile_weasel_pattern,
)

logger = logging.getLogger(__name__)


@dataclass
class Match:
    """A single finding on one line of a file."""

    line_num: int
    line: str
    matched_text: str
    file: str


class WritingChecker:
    """Runs the style and spelling checks over text.

    Attributes:
        weasel_words (list): Active weasel word list.
        passive_irregulars (list): Irregular past participles for the passive
            voice check.
        min_word_length (int): Shorter words are skipped by the spelling check.
    """

    def __init__(
        self,
        weasel_words: Optional[Iterable[str]] = None,
        passive_irregulars: Optional[Iterable[str]] = None,
        min_word_length: int = 2,
    ):
        self.weasel_words = list(
            DEFAULT_WEASEL_WORDS if weasel_words is None else weasel_words
        )
        self.passive_irregulars = list(
            IRREGULAR_PARTICIPLES if passive_irregulars is None else passive_irregulars
        )
        self.min_word_length = min_word_length
        self._passive_pattern = compile_passive_pattern(self.passive_irregulars)

    @classmethod
    def from_config(cls, config: Config) -> "WritingChecker":
        return cls(min_word_length=config.min_word_length)

    def load_custom_weasels(self, paths: Iterable[str]) -> Optional[str]:
        """Replace the weasel word list with the first readable file in paths.

        Each non-blank line of the file, stripped, becomes one entry.

        Args:
            paths: Candidate files, in priority order.

        Returns:
            The path that was loaded, or None if none could be read.
        """
        for path in paths:
            if not Path(path).exists():
                continue
            try:
                content = Path(path).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Could not read weasel list {path}: {e}")
                continue
            self.weasel_words = [
                line.strip() for line in content.splitlines() if line.strip()
            ]
            logger.info(f"Loaded {len(self.weasel_words)} custom weasel words from {path}")
            return path
        return None

    def check_weasel_words(self, content: str, filename: str) -> List[Match]:
        if not self.weasel_words:
            return []
        pattern = compile_weasel_pattern(self.weasel_words)
        return self._scan(pattern, content, filename)

    def check_passive_voice(self, content: str, filename: str) -> List[Match]:
        return self._scan(self._passive_pattern, content, filename)

    def check_duplicates(self, content: str, filename: str) -> List[Match]:
        """Find a word immediately repeated, e.g. "the the".

        Comparison ignores case; only words on the same line are compared.
        """
        matches = []
        for line_num, line in enumerate(content.splitlines(), 1):
            words = WORD_PATTERN.findall(line)
            for first, second in zip(words, words[1:]):
                if first.lower() == second.lower():
                    matches.append(
                        Match(line_num, line, f"{first} {second}", filename)
                    )
        return matches

    def check_spelling(
        self, content: str, filename: str, corrector: Corrector
    ) -> List[Match]:
        """Report every word the corrector would change.

        Words are lowercased before correction; the report shows the word as
        written and the suggestion, e.g. ``'Speling' -> 'spelling'``.

        Args:
            content: Text to check.
            filename: Name recorded in each match.
            corrector: Corrector over a trained model.

        Returns:
            One match per suggested correction, in reading order.
        """
        matches = []
        for line_num, line in enumerate(content.splitlines(), 1):
            for found in SPELL_WORD_PATTERN.finditer(line):
                original_word = found.group()
                lower_word = original_word.lower()

                if len(lower_word) < self.min_word_length:
                    continue

                suggestion = corrector.correct(lower_word)
                if suggestion != lower_word:
                    matches.append(
                        Match(
                            line_num,
                            line,
                            f"'{original_word}' -> '{suggestion}'",
                            filename,
                        )
                    )
        return matches

    @staticmethod
    def _scan(pattern, content: str, filename: str) -> List[Match]:
        matches = []
        for line_num, line in enumerate(content.splitlines(), 1):
            for found in pattern.finditer(line):
                matches.append(Match(line_num, line, found.group(), filename))
        return matches
