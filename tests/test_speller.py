# ───────────────────────── tests/test_speller.py ─────────────────────────
"""
Tests for the frequency model and spelling corrector.
"""

import pytest

from writingchecker.speller import (
    ALPHABET,
    Corrector,
    FrequencyModel,
    LRUCache,
    alterations,
    benchmark_correction,
    deletions,
    edits1,
    edits2,
    insertions,
    tokenize,
    transpositions,
)


def trained(text: str) -> FrequencyModel:
    model = FrequencyModel()
    model.train(text)
    return model


class TestTokenize:
    """Test training tokenization."""

    def test_non_letters_split_tokens(self):
        """Digits, apostrophes and punctuation are separators."""
        assert tokenize("Don't panic: 42 towels!") == ["don", "t", "panic", "towels"]

    def test_non_ascii_letters_split_tokens(self):
        """Only ASCII letters survive in tokens."""
        assert tokenize("ÉCOLE café") == ["cole", "caf"]

    def test_empty_text(self):
        assert tokenize("") == []
        assert tokenize("123 --- !!!") == []


class TestFrequencyModel:
    """Test the frequency model."""

    def test_training_accumulates(self):
        """Repeated training adds counts across calls."""
        model = FrequencyModel()
        model.train("the cat sat")
        model.train("the dog sat")

        assert dict(model.counts) == {"the": 2, "cat": 1, "sat": 2, "dog": 1}

    def test_case_is_folded(self):
        model = trained("The THE the tHe")
        assert model.count("the") == 4
        assert "The" not in model

    def test_empty_training_is_noop(self):
        model = FrequencyModel()
        model.train("")
        model.train("... 1234 ...")

        assert len(model) == 0
        assert model.total_words == 0

    def test_lookups(self):
        model = trained("a rose is a rose is a rose")

        assert "rose" in model
        assert "tulip" not in model
        assert model.count("rose") == 3
        assert model.count("tulip") == 0
        assert len(model) == 3
        assert model.total_words == 8
        assert list(model.known(["rose", "tulip", "is"])) == ["rose", "is"]

    def test_generation_advances_on_train(self):
        model = FrequencyModel()
        start = model.generation
        model.train("one")
        model.train("two")
        assert model.generation == start + 2


class TestEdits:
    """Test single-edit candidate generation."""

    def test_deletions(self):
        assert deletions("abc") == ["bc", "ac", "ab"]
        assert deletions("") == []

    def test_transpositions(self):
        assert transpositions("abc") == ["bac", "acb"]
        assert transpositions("a") == []
        assert transpositions("") == []

    def test_alterations(self):
        results = alterations("abc")

        assert len(results) == 3 * 26
        # Replacing a letter with itself is kept, once per position
        assert results.count("abc") == 3
        assert "xbc" in results
        assert "abz" in results

    def test_insertions(self):
        assert insertions("") == list(ALPHABET)

        results = insertions("ab")
        assert len(results) == 3 * 26
        assert "zab" in results
        assert "azb" in results
        assert "abz" in results

    def test_edits1_counts(self):
        """Deletions + transpositions + alterations + insertions."""
        assert len(edits1("ab")) == 2 + 1 + 52 + 78
        assert len(edits1("spelling")) == 8 + 7 + 8 * 26 + 9 * 26

    def test_edits1_empty_word(self):
        assert edits1("") == list(ALPHABET)

    def test_edits2_is_not_deduplicated(self):
        """Every distance-1 candidate is re-expanded independently."""
        expected = sum(len(edits1(e1)) for e1 in edits1("a"))

        assert len(list(edits2("a"))) == expected == 8996

    def test_edits2_revisits_original(self):
        assert "ab" in set(edits2("ab"))

    def test_edits_slice_by_character(self):
        """Non-ASCII characters are never split."""
        assert deletions("né") == ["é", "n"]
        assert transpositions("né") == ["én"]


class TestLRUCache:
    """Test the LRU cache implementation."""

    def test_basic_operations(self):
        cache = LRUCache(maxsize=3)

        cache.set("key1", "value1")
        assert cache.get("key1") == "value1"
        assert cache.get("nonexistent") is None

        cache.set("key2", "value2")
        cache.set("key3", "value3")
        cache.set("key4", "value4")  # Should evict key1

        assert cache.get("key1") is None
        assert cache.get("key4") == "value4"
        assert len(cache) == 3

    def test_lru_ordering(self):
        cache = LRUCache(maxsize=3)

        cache.set("a", "1")
        cache.set("b", "2")
        cache.set("c", "3")

        # Access 'a' to make it most recently used
        cache.get("a")
        cache.set("d", "4")

        assert cache.get("a") == "1"
        assert cache.get("b") is None

    def test_invalid_size(self):
        with pytest.raises(ValueError, match="maxsize must be at least 1"):
            LRUCache(maxsize=0)


class TestCorrector:
    """Test the Corrector class."""

    def test_worked_example(self):
        """A single missing letter is restored."""
        model = trained("spelling " * 5 + "spell " * 2)

        assert Corrector(model).correct("speling") == "spelling"

    def test_known_words_unchanged(self):
        """Known words are returned as-is, however rare."""
        model = trained("rare common common common cmmon")
        corrector = Corrector(model)

        for word in model.counts:
            assert corrector.correct(word) == word

    def test_fallback_returns_input(self):
        corrector = Corrector(trained("apple banana cherry"))
        assert corrector.correct("zzzzzz") == "zzzzzz"

    def test_empty_word(self):
        corrector = Corrector(trained("hello world"))
        assert corrector.correct("") == ""

    def test_empty_word_reaches_one_letter_words(self):
        """Insertions into the empty string produce every one-letter word."""
        assert Corrector(trained("a the")).correct("") == "a"

    def test_empty_model(self):
        corrector = Corrector(FrequencyModel())
        assert corrector.correct("anything") == "anything"

    def test_higher_count_wins(self):
        """Among candidates at the same distance, the most frequent wins."""
        model = trained("cat cat cat bat")
        assert Corrector(model).correct("hat") == "cat"

        model = trained("cat bat bat bat")
        assert Corrector(model).correct("hat") == "bat"

    def test_distance_one_takes_precedence(self):
        """A rare distance-1 word beats a frequent distance-2 word."""
        model = trained("cot " + "cart " * 100)
        assert Corrector(model).correct("cxt") == "cot"

    def test_distance_two(self):
        model = trained("cart cart cart")
        assert Corrector(model).correct("cxt") == "cart"

    def test_distance_two_highest_count(self):
        model = trained("cart " * 2 + "curt " * 5)
        assert Corrector(model).correct("cxt") == "curt"

    def test_ties_break_alphabetically(self):
        model = trained("mat cat bat")
        assert Corrector(model).correct("hat") == "bat"

    def test_case_is_not_folded(self):
        """Uppercase input is not lowercased by the corrector."""
        corrector = Corrector(trained("the"))
        assert corrector.correct("THE") == "THE"

    def test_non_ascii_word(self):
        corrector = Corrector(trained("cafe"))
        assert corrector.correct("café") == "cafe"

    def test_model_is_not_modified(self):
        model = trained("spelling spell")
        before = dict(model.counts)

        corrector = Corrector(model)
        corrector.correct("speling")
        corrector.correct("qqqq")

        assert dict(model.counts) == before

    def test_cache_hits(self):
        corrector = Corrector(trained("spelling"), cache_size=100)

        corrector.correct("speling")
        corrector.correct("speling")
        stats = corrector.get_statistics()

        assert stats["cache_misses"] == 1
        assert stats["cache_hits"] == 1
        assert stats["words_processed"] == 2
        assert stats["corrections_made"] == 2
        assert stats["cache_hit_rate"] == 0.5

    def test_retraining_invalidates_cache(self):
        """Cached corrections never go stale after more training."""
        model = trained("spell")
        corrector = Corrector(model)
        assert corrector.correct("spel") == "spell"

        model.train("spelt spelt")
        assert corrector.correct("spel") == "spelt"

    def test_cache_disabled(self):
        corrector = Corrector(trained("spelling"), cache_size=0)

        assert corrector.cache is None
        assert corrector.correct("speling") == "spelling"
        assert corrector.get_statistics()["cache_hit_rate"] == 0.0
        corrector.clear_cache()

    def test_negative_cache_size(self):
        with pytest.raises(ValueError, match="cache_size cannot be negative"):
            Corrector(FrequencyModel(), cache_size=-1)

    def test_statistics(self):
        corrector = Corrector(trained("the cat"))

        stats = corrector.get_statistics()
        assert stats["words_processed"] == 0
        assert stats["correction_rate"] == 0.0

        corrector.correct("the")
        corrector.correct("teh")
        stats = corrector.get_statistics()
        assert stats["words_processed"] == 2
        assert stats["corrections_made"] == 1
        assert stats["correction_rate"] == 0.5

    def test_reset_statistics(self):
        corrector = Corrector(trained("the"))
        corrector.correct("teh")

        corrector.reset_statistics()
        stats = corrector.get_statistics()
        assert stats["words_processed"] == 0
        assert stats["corrections_made"] == 0
        # The cache survives a statistics reset
        assert len(corrector.cache) == 1

    def test_clear_cache(self):
        corrector = Corrector(trained("the"))
        corrector.correct("teh")
        corrector.clear_cache()
        assert len(corrector.cache) == 0


class TestBenchmark:
    """Test the correction benchmark helper."""

    def test_benchmark_results(self):
        corrector = Corrector(trained("the spelling"))

        results = benchmark_correction(corrector, ["teh", "speling", "the", "teh"])

        assert results["words"] == 4
        assert results["elapsed"] >= 0
        assert results["words_per_second"] >= 0
        assert "memory_usage" in results
        assert corrector.get_statistics()["words_processed"] == 4


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
