"""
Unit tests cho core/tokenization/counter.py.

Test cac phan:
- FrequencyMap: increment, freeze, Mapping protocol, thread-safety
- count(): dem tan suat cho token stream
- merge() / merge_all(): giao hoan, ket hop, phan tu don vi
- count_words(): end-to-end cho mot document
"""

import itertools
import threading

import pytest

from core.tokenization.counter import (
    FrequencyMap,
    count,
    count_words,
    merge,
    merge_all,
)
from core.tokenization.scanner import tokenize

SENTENCE = (
    "The quick brown fox jumps over the lazy dog. "
    "The dog barked and the fox ran away."
)

EXPECTED_SENTENCE = {
    "the": 4,
    "quick": 1,
    "brown": 1,
    "fox": 2,
    "jumps": 1,
    "over": 1,
    "lazy": 1,
    "dog": 2,
    "barked": 1,
    "and": 1,
    "ran": 1,
    "away": 1,
}


# ============================================================================
# FREQUENCY MAP TESTS
# ============================================================================


class TestFrequencyMap:
    """Test FrequencyMap class."""

    def test_empty_map(self):
        freq = FrequencyMap()
        assert len(freq) == 0
        assert dict(freq) == {}
        assert freq.total() == 0

    def test_increment_defaults_to_zero(self):
        freq = FrequencyMap()
        freq.increment("a")
        freq.increment("a")
        freq.increment("b", 3)
        assert freq["a"] == 2
        assert freq["b"] == 3

    def test_init_from_mapping(self):
        freq = FrequencyMap({"x": 2, "y": 1})
        assert freq == {"x": 2, "y": 1}

    def test_missing_key_raises(self):
        with pytest.raises(KeyError):
            FrequencyMap()["nope"]

    def test_get_and_contains(self):
        freq = FrequencyMap({"x": 1})
        assert "x" in freq
        assert "y" not in freq
        assert freq.get("y", 0) == 0

    def test_rejects_empty_word(self):
        with pytest.raises(ValueError):
            FrequencyMap().increment("")

    def test_rejects_non_positive_amount(self):
        freq = FrequencyMap()
        with pytest.raises(ValueError):
            freq.increment("a", 0)
        with pytest.raises(ValueError):
            freq.increment("a", -1)
        assert "a" not in freq

    def test_freeze_blocks_increment(self):
        freq = FrequencyMap({"a": 1}).freeze()
        assert freq.frozen is True
        with pytest.raises(TypeError):
            freq.increment("a")
        assert freq["a"] == 1

    def test_no_item_assignment(self):
        """Mapping protocol khong co __setitem__."""
        freq = FrequencyMap()
        with pytest.raises(TypeError):
            freq["a"] = 1  # type: ignore[index]

    def test_as_dict_is_read_only(self):
        freq = FrequencyMap({"a": 1})
        view = freq.as_dict()
        with pytest.raises(TypeError):
            view["a"] = 5  # type: ignore[index]

    def test_equality(self):
        assert FrequencyMap({"a": 1}) == FrequencyMap({"a": 1})
        assert FrequencyMap({"a": 1}) == {"a": 1}
        assert FrequencyMap({"a": 1}) != {"a": 2}
        assert FrequencyMap() != [1, 2]

    def test_total(self):
        assert FrequencyMap({"a": 3, "b": 4}).total() == 7

    def test_concurrent_increments_no_lost_updates(self):
        """Nhieu threads increment cung key -> khong mat update."""
        freq = FrequencyMap()
        errors = []

        def worker():
            try:
                for _ in range(1000):
                    freq.increment("shared")
                    freq.increment(f"own-{threading.get_ident()}")
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert errors == []
        assert freq["shared"] == 8000
        assert freq.total() == 16000

    def test_reads_while_other_threads_increment(self):
        """Doc/merge map dang bi increment -> khong RuntimeError, khong mat update."""
        shared = FrequencyMap()
        stop = threading.Event()
        errors = []

        def writer(prefix):
            try:
                for i in range(2000):
                    shared.increment(f"{prefix}-{i}")
            except Exception as e:
                errors.append(e)

        def reader():
            try:
                while not stop.is_set():
                    merge(shared, FrequencyMap())
                    list(shared)
                    shared.total()
                    repr(shared)
            except Exception as e:
                errors.append(e)

        readers = [threading.Thread(target=reader) for _ in range(2)]
        writers = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for t in readers + writers:
            t.start()
        for t in writers:
            t.join(timeout=30)
        stop.set()
        for t in readers:
            t.join(timeout=30)

        assert errors == []
        assert len(shared) == 8000
        assert merge(shared, FrequencyMap()).total() == 8000

    def test_freeze_while_other_threads_increment(self):
        """Sau khi freeze() tra ve, counts khong doi va increment raise TypeError."""
        freq = FrequencyMap()
        started = threading.Event()
        rejected = []

        def worker():
            started.set()
            while True:
                try:
                    freq.increment("a")
                except TypeError:
                    rejected.append(True)
                    return

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        started.wait(timeout=10)
        freq.freeze()
        snapshot = freq.total()
        for t in threads:
            t.join(timeout=30)

        assert len(rejected) == 4
        assert freq.total() == snapshot
        with pytest.raises(TypeError):
            freq.increment("b")


# ============================================================================
# COUNT TESTS
# ============================================================================


class TestCount:
    """Test count() va count_words()."""

    def test_count_tokens(self):
        assert count(["a", "b", "a"]) == {"a": 2, "b": 1}

    def test_count_empty(self):
        assert count([]) == {}

    def test_count_consumes_generator_once(self):
        tokens = (t for t in ["x", "y", "x"])
        assert count(tokens) == {"x": 2, "y": 1}

    def test_end_to_end_sentence(self):
        freq = count_words(SENTENCE)
        assert freq == EXPECTED_SENTENCE
        assert freq.total() == 17

    def test_empty_text(self):
        assert count_words("") == {}

    def test_single_word(self):
        assert count_words("hello") == {"hello": 1}

    def test_mixed_capitalization(self):
        assert count_words("The the tHe") == {"the": 3}

    def test_multiple_spaces(self):
        text = (
            "The    quick   brown      fox jumps over  the lazy dog.   "
            "The dog barked   and the    fox ran away."
        )
        assert count_words(text) == EXPECTED_SENTENCE

    def test_leading_trailing_spaces(self):
        assert count_words("     " + SENTENCE + "     ") == EXPECTED_SENTENCE

    def test_special_chars(self):
        text = SENTENCE[:-1] + "!@#$%^&*()_+-={}[]|\\:;\"'<>,.?/"
        assert count_words(text) == EXPECTED_SENTENCE

    def test_hyphens(self):
        assert count_words("self-driving well-being co-worker") == {
            "self-driving": 1,
            "well-being": 1,
            "co-worker": 1,
        }

    def test_non_ascii(self):
        assert count_words("résumé über café") == {
            "résumé": 1,
            "über": 1,
            "café": 1,
        }

    def test_counts_always_positive(self):
        freq = count(tokenize("a b c a b a"))
        assert all(n >= 1 for n in freq.values())


# ============================================================================
# MERGE TESTS
# ============================================================================


class TestMerge:
    """Test merge() va merge_all()."""

    def test_merge_sums_per_key(self):
        a = FrequencyMap({"x": 1, "y": 2})
        b = FrequencyMap({"y": 3, "z": 4})
        assert merge(a, b) == {"x": 1, "y": 5, "z": 4}

    def test_merge_does_not_mutate_inputs(self):
        a = FrequencyMap({"x": 1})
        b = FrequencyMap({"x": 2})
        merge(a, b)
        assert a == {"x": 1}
        assert b == {"x": 2}

    def test_merge_accepts_frozen_inputs(self):
        a = FrequencyMap({"x": 1}).freeze()
        b = FrequencyMap({"x": 2}).freeze()
        result = merge(a, b)
        assert result == {"x": 3}
        assert result.frozen is False

    def test_empty_map_is_identity(self):
        a = count_words(SENTENCE)
        assert merge(a, FrequencyMap()) == a
        assert merge(FrequencyMap(), a) == a

    def test_commutative(self):
        a = count_words("one two two three")
        b = count_words("two three three four")
        assert merge(a, b) == merge(b, a)

    def test_associative(self):
        a = count_words("alpha beta")
        b = count_words("beta gamma gamma")
        c = count_words("gamma delta alpha")
        assert merge(merge(a, b), c) == merge(a, merge(b, c))

    def test_invariant_under_partitioning_and_order(self):
        """Moi cach chia nhom + thu tu deu cho cung ket qua."""
        docs = ["a b c", "b c d", "c d e e", "", "A-b c'd"]
        maps = [count_words(d) for d in docs]
        expected = count_words(" ".join(docs))

        for perm in itertools.permutations(maps):
            assert merge_all(perm) == expected

        # Chia thanh 2 nhom o moi vi tri roi merge ket qua
        for split in range(len(maps) + 1):
            left = merge_all(maps[:split])
            right = merge_all(maps[split:])
            assert merge(left, right) == expected

    def test_merge_all_empty(self):
        assert merge_all([]) == {}

    def test_merge_all_matches_pairwise_fold(self):
        maps = [count_words(t) for t in ["x y", "y z", "z z x"]]
        folded = FrequencyMap()
        for m in maps:
            folded = merge(folded, m)
        assert merge_all(maps) == folded
