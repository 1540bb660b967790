# ───────────────────────── src/writingchecker/speller.py ─────────────────────────
"""
Frequency-based spelling correction.

This module implements a unigram spelling corrector. A FrequencyModel counts
words in a training corpus; a Corrector proposes, for any word it has not seen,
the most frequent known word reachable within one or two single-character
edits.

Module Architecture:
    - FrequencyModel: Word counts built from training text
    - Edit generation: deletions, transpositions, alterations, insertions
    - LRUCache: Memoizes corrections for repeated misspellings
    - Corrector: Ranks candidates and tracks statistics

Correction Order:
    1. A known word is returned unchanged
    2. Known words at edit distance 1, highest count wins
    3. Known words at edit distance 2, highest count wins
    4. Otherwise the word is returned unchanged

    Ties on count are broken by picking the alphabetically first candidate,
    so results never depend on iteration order.

Usage Examples:
    >>> model = FrequencyModel()
    >>> model.train("spelling is hard, spelling bees are harder. spell it.")
    >>> corrector = Corrector(model)
    >>> corrector.correct("speling")
    'spelling'
    >>> corrector.correct("hard")
    'hard'

Performance Characteristics:
    - Distance 1: O(n * 26) candidates for a word of length n
    - Distance 2: every distance-1 candidate is re-expanded, so the work
      grows with the square of that number (roughly 54n candidates squared)
    - Corrections are cached; a repeated misspelling costs one dict lookup

Input Assumptions:
    The corrector does not fold case. Callers lowercase words before calling
    correct(). Positional edits slice Python strings by codepoint, so
    non-ASCII input is never split inside a character; it simply rarely
    matches the ASCII-only vocabulary.

Thread Safety:
    - FrequencyModel: safe to share read-only once training is finished
    - Corrector: NOT thread-safe (cache and statistics), create one per thread
"""

import logging
import re
from collections import Counter, OrderedDict
from typing import Dict, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# Maximal runs of lowercase ASCII letters; everything else splits tokens.
TOKEN_PATTERN = re.compile(r"[a-z]+")


def tokenize(text: str) -> List[str]:
    """Split text into lowercase ASCII word tokens.

    Args:
        text: Arbitrary text. It is lowercased before matching, so digits,
            apostrophes, punctuation and non-ASCII letters act as separators.

    Returns:
        Tokens in order of appearance, duplicates included.

    Examples:
        >>> tokenize("Don't panic: 42 towels!")
        ['don', 't', 'panic', 'towels']
    """
    return TOKEN_PATTERN.findall(text.lower())


class FrequencyModel:
    """Word occurrence counts learned from training text.

    Counts only ever grow: training again adds to the existing totals and
    nothing is ever removed. Every key is a non-empty run of lowercase ASCII
    letters.

    Attributes:
        counts (Counter): Mapping of word to number of occurrences.
        generation (int): Incremented on every train() call. Correctors use it
            to notice that cached corrections may be stale.

    Examples:
        >>> model = FrequencyModel()
        >>> model.train("the cat sat")
        >>> model.train("the dog sat")
        >>> dict(model.counts)
        {'the': 2, 'cat': 1, 'sat': 2, 'dog': 1}
    """

    def __init__(self):
        self.counts: Counter = Counter()
        self.generation = 0

    def train(self, text: str) -> None:
        """Count every word token in text.

        Args:
            text: Corpus text. Empty or letter-free text is a no-op.
        """
        tokens = tokenize(text)
        self.counts.update(tokens)
        self.generation += 1
        logger.debug(
            f"Trained on {len(tokens)} tokens, vocabulary now {len(self.counts)} words"
        )

    def count(self, word: str) -> int:
        """Return the number of times word was seen, 0 if never."""
        return self.counts.get(word, 0)

    def known(self, words: Iterable[str]) -> Iterator[str]:
        """Yield the members of words that are in the vocabulary."""
        return (w for w in words if w in self.counts)

    @property
    def total_words(self) -> int:
        return sum(self.counts.values())

    def __contains__(self, word: object) -> bool:
        return word in self.counts

    def __len__(self) -> int:
        return len(self.counts)


# ============================================================================
# EDIT GENERATION
# ============================================================================


def deletions(word: str) -> List[str]:
    """Remove one character at each position (n candidates)."""
    return [word[:i] + word[i + 1 :] for i in range(len(word))]


def transpositions(word: str) -> List[str]:
    """Swap each pair of adjacent characters (n-1 candidates)."""
    return [
        word[:i] + word[i + 1] + word[i] + word[i + 2 :]
        for i in range(len(word) - 1)
    ]


def alterations(word: str, alphabet: str = ALPHABET) -> List[str]:
    """Replace each character with each letter (n * 26 candidates).

    No-op replacements (a letter replaced by itself) are kept.
    """
    return [
        word[:i] + c + word[i + 1 :] for i in range(len(word)) for c in alphabet
    ]


def insertions(word: str, alphabet: str = ALPHABET) -> List[str]:
    """Insert each letter before each position and at the end ((n+1) * 26)."""
    return [word[:i] + c + word[i:] for i in range(len(word) + 1) for c in alphabet]


def edits1(word: str, alphabet: str = ALPHABET) -> List[str]:
    """All strings one edit away from word.

    The list is not deduplicated: the same string may be produced by more
    than one edit (for example deleting either "l" of "hello").

    Args:
        word: Source word.
        alphabet: Letters used for alteration and insertion.

    Returns:
        Deletions, then transpositions, then alterations, then insertions.

    Examples:
        >>> len(edits1("ab"))  # 2 + 1 + 52 + 78
        133
        >>> edits1("")[:3]
        ['a', 'b', 'c']
    """
    return (
        deletions(word)
        + transpositions(word)
        + alterations(word, alphabet)
        + insertions(word, alphabet)
    )


def edits2(word: str, alphabet: str = ALPHABET) -> Iterator[str]:
    """All strings two edits away from word.

    Every distance-1 candidate is expanded again, whether or not it is a
    known word. Strings at distance 0 and 1 reappear among the results.
    """
    return (e2 for e1 in edits1(word, alphabet) for e2 in edits1(e1, alphabet))


# ============================================================================
# CORRECTION
# ============================================================================


class LRUCache:
    """LRU (Least Recently Used) cache for word corrections.

    Uses an OrderedDict to keep entries in access order. When the cache grows
    past maxsize the least recently used entry is evicted.

    Examples:
        >>> cache = LRUCache(maxsize=2)
        >>> cache.set("teh", "the")
        >>> cache.set("adn", "and")
        >>> cache.get("teh")
        'the'
        >>> cache.set("fro", "for")  # Evicts "adn"
        >>> cache.get("adn") is None
        True

    Note:
        This implementation is not thread-safe.
    """

    def __init__(self, maxsize: int = 10000):
        """Initialize the cache.

        Args:
            maxsize: Maximum number of entries to keep.

        Raises:
            ValueError: If maxsize is less than 1.
        """
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.cache: OrderedDict = OrderedDict()
        self.maxsize = maxsize

    def get(self, key: str) -> Optional[str]:
        """Return the cached value and mark it recently used, or None."""
        if key in self.cache:
            self.cache.move_to_end(key)
            return self.cache[key]
        return None

    def set(self, key: str, value: str) -> None:
        """Store a value, evicting the least recently used entry if full."""
        if key in self.cache:
            self.cache.move_to_end(key)
        self.cache[key] = value

        if len(self.cache) > self.maxsize:
            self.cache.popitem(last=False)

    def clear(self) -> None:
        self.cache.clear()

    def __len__(self) -> int:
        return len(self.cache)


class Corrector:
    """Spelling corrector ranking edit candidates by corpus frequency.

    The model is borrowed, never modified. Corrections are memoized in an
    LRU cache; the cache is dropped automatically when the model is trained
    again, so cached answers always match what a fresh computation would give.

    Attributes:
        model (FrequencyModel): Trained word counts.
        alphabet (str): Letters used for alterations and insertions.
        cache (LRUCache): Memoized corrections, None when caching is disabled.
        stats (dict): Cumulative correction statistics.

    Examples:
        >>> model = FrequencyModel()
        >>> model.train("spelling " * 5 + "spell " * 2)
        >>> corrector = Corrector(model)
        >>> corrector.correct("speling")
        'spelling'
        >>> corrector.correct("zzzzzzz")
        'zzzzzzz'
        >>> corrector.get_statistics()["corrections_made"]
        1

    Thread Safety:
        This class is NOT thread-safe. Share the model, not the corrector.
    """

    def __init__(
        self,
        model: FrequencyModel,
        cache_size: int = 10000,
        alphabet: str = ALPHABET,
    ):
        """Initialize the corrector.

        Args:
            model: Trained frequency model.
            cache_size: Number of corrections to memoize. 0 disables caching.
            alphabet: Letters used for alterations and insertions.

        Raises:
            ValueError: If cache_size is negative.
        """
        if cache_size < 0:
            raise ValueError("cache_size cannot be negative")
        self.model = model
        self.alphabet = alphabet
        self.cache = LRUCache(maxsize=cache_size) if cache_size else None
        self._cache_generation = model.generation

        self.stats = {
            "words_processed": 0,
            "corrections_made": 0,
            "cache_hits": 0,
            "cache_misses": 0,
        }

    def correct(self, word: str) -> str:
        """Return the most probable spelling of word.

        Args:
            word: A lowercase word. Case is not folded here.

        Returns:
            word itself when it is known or when no known word lies within two
            edits; otherwise the highest-count known candidate from the
            nearest distance.

        Examples:
            >>> model = FrequencyModel()
            >>> model.train("the the the then")
            >>> Corrector(model).correct("teh")
            'the'
            >>> Corrector(model).correct("")
            ''
            >>> model.train("a")
            >>> Corrector(model).correct("")
            'a'
        """
        self.stats["words_processed"] += 1

        if word in self.model:
            return word

        if self.cache is None:
            corrected = self._compute(word)
        else:
            if self._cache_generation != self.model.generation:
                logger.debug("Model retrained, dropping cached corrections")
                self.cache.clear()
                self._cache_generation = self.model.generation

            cached = self.cache.get(word)
            if cached is not None:
                self.stats["cache_hits"] += 1
                corrected = cached
            else:
                self.stats["cache_misses"] += 1
                corrected = self._compute(word)
                self.cache.set(word, corrected)

        if corrected != word:
            self.stats["corrections_made"] += 1
        return corrected

    def _compute(self, word: str) -> str:
        candidates = edits1(word, self.alphabet)
        best = self._best_known(candidates)
        if best is not None:
            return best

        best = self._best_known(
            e2 for e1 in candidates for e2 in edits1(e1, self.alphabet)
        )
        if best is not None:
            logger.debug(f"Corrected {word!r} to {best!r} at distance 2")
            return best

        return word

    def _best_known(self, candidates: Iterable[str]) -> Optional[str]:
        """Pick the known candidate with the highest count.

        Equal counts go to the alphabetically first candidate.
        """
        counts = self.model.counts
        best = None
        best_count = -1
        for candidate in candidates:
            n = counts.get(candidate)
            if n is None:
                continue
            if n > best_count or (n == best_count and candidate < best):
                best = candidate
                best_count = n
        return best

    def get_statistics(self) -> Dict[str, float]:
        """Return correction counters plus derived rates.

        Returns:
            Dictionary containing words_processed, corrections_made,
            cache_hits, cache_misses, correction_rate and cache_hit_rate.
            Rates are 0.0 when nothing has been processed.
        """
        stats = self.stats.copy()

        if stats["words_processed"] > 0:
            stats["correction_rate"] = (
                stats["corrections_made"] / stats["words_processed"]
            )
        else:
            stats["correction_rate"] = 0.0

        lookups = stats["cache_hits"] + stats["cache_misses"]
        stats["cache_hit_rate"] = stats["cache_hits"] / lookups if lookups else 0.0

        return stats

    def reset_statistics(self) -> None:
        """Reset all counters to zero. The cache is kept."""
        self.stats = {
            "words_processed": 0,
            "corrections_made": 0,
            "cache_hits": 0,
            "cache_misses": 0,
        }

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()


def benchmark_correction(
    corrector: Corrector, words: Iterable[str]
) -> Dict[str, float]:
    """Time a correction pass over words.

    Args:
        corrector: Corrector to exercise. Its statistics are updated as usual.
        words: Words to correct, already lowercased.

    Returns:
        Dictionary containing:
            - words (int): Number of words corrected
            - elapsed (float): Wall time in seconds
            - words_per_second (float): Throughput, 0.0 if nothing ran
            - memory_usage (float): Resident memory growth in MB

    Examples:
        >>> results = benchmark_correction(corrector, ["teh", "speling"] * 100)
        >>> print(f"{results['words_per_second']:.0f} words/s")
    """
    import os
    import time

    import psutil

    process = psutil.Process(os.getpid())
    base_memory = process.memory_info().rss / 1024 / 1024  # MB

    count = 0
    start_time = time.perf_counter()
    for word in words:
        corrector.correct(word)
        count += 1
    elapsed = time.perf_counter() - start_time

    peak_memory = process.memory_info().rss / 1024 / 1024

    return {
        "words": count,
        "elapsed": elapsed,
        "words_per_second": count / elapsed if elapsed > 0 else 0.0,
        "memory_usage": peak_memory - base_memory,
    }
