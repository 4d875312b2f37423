"""
Tests for Transition Table Builders
===================================
Tests for the normal, headplus, pruned and reverse strategies in
conlangkit/generators/tables.py.
"""

import pytest

from conlangkit.config import WordgenConfig
from conlangkit.generators.tables import (
    Strategy,
    TransitionTable,
    build_table,
    build_append,
    build_head_weighted,
    build_pruned,
    build_reverse_frequency,
    sliding_keys,
)


class TestSlidingKeys:
    """Tests for the sliding window."""

    def test_windows_and_terminal_fragment(self):
        """Test that every k-gram is followed by a shorter fragment."""
        assert list(sliding_keys("kalita", 3)) == ["kal", "ali", "lit", "ita", "ta"]

    def test_word_of_exact_depth(self):
        """Test a word exactly as long as the depth."""
        assert list(sliding_keys("aba", 3)) == ["aba", "ba"]

    def test_depth_two(self):
        """Test that depth 2 ends in a one-character fragment."""
        assert list(sliding_keys("abc", 2)) == ["ab", "bc", "c"]


class TestAppendStrategy:
    """Tests for the normal (raw frequency) strategy."""

    def test_small_corpus(self, config):
        """Test the three-word corpus table."""
        table = build_append(["aba", "abc", "aab"], config)
        assert table.weights == {
            "aba": 1, "ba": 1,
            "abc": 1, "bc": 1,
            "aab": 1, "ab": 1,
        }

    def test_counts_accumulate(self, config):
        """Test that repeated k-grams add up."""
        table = build_append(["abab", "abab", "abc"], config)
        assert table["aba"] == 2
        assert table["bab"] == 2
        assert table["abc"] == 1

    def test_head_table(self, config):
        """Test the word openings of length max(2, k-1)."""
        table = build_append(["aba", "abc", "aab"], config)
        assert table.heads == {"ab": 2, "aa": 1}

    def test_head_length_grows_with_depth(self):
        """Test that a depth of 4 records three-character openings."""
        cfg = WordgenConfig(depth=4, min_length=3, max_length=10, retry_count=5)
        table = build_append(["kalita", "kalo"], cfg)
        assert table.heads == {"kal": 2}

    def test_short_words_contribute_nothing(self, config):
        """Test that words under three characters are skipped."""
        table = build_append(["ab", "a", ""], config)
        assert table.is_empty
        assert table.heads == {}

    def test_words_shorter_than_depth_skipped(self):
        """Test that words shorter than the depth add no keys."""
        cfg = WordgenConfig(depth=5, min_length=3, max_length=10, retry_count=5)
        table = build_append(["abc", "abcd", "abcde"], cfg)
        assert table.weights == {"abcde": 1, "bcde": 1}

    def test_empty_training_set(self, config):
        """Test that no words give an empty table."""
        table = build_append([], config)
        assert len(table) == 0
        assert table.start_items() == []

    def test_key_lengths_and_origin(self, config, corpus):
        """Test key lengths and that full keys come from training words."""
        table = build_append(corpus, config)
        for key in table.weights:
            assert len(key) <= config.depth
            assert len(key) >= config.depth - 1
            if len(key) == config.depth:
                assert any(key in word for word in corpus)


class TestHeadWeightedStrategy:
    """Tests for the headplus strategy."""

    def test_start_distribution_boosted(self, config):
        """Test that word-initial k-grams get the opening count on top."""
        table = build_head_weighted(["abc", "abd", "xyz"], config)
        assert table.strategy == Strategy.HEAD_WEIGHTED
        assert table.starts == {"abc": 3, "abd": 3, "xyz": 2}

    def test_weights_match_normal_table(self, config, corpus):
        """Test that only the start distribution differs from normal."""
        normal = build_append(corpus, config)
        head = build_head_weighted(corpus, config)
        assert head.weights == normal.weights
        assert head.heads == normal.heads

    def test_inner_kgrams_keep_normal_weight(self, config):
        """Test that k-grams never opening a word are not boosted."""
        table = build_head_weighted(["kalita"], config)
        assert table.starts["kal"] == 2
        assert table.starts["ali"] == 1
        assert table.starts["ita"] == 1

    def test_boost_applied_once_per_opening_kgram(self, config):
        """Test that repeated words do not stack the boost."""
        table = build_head_weighted(["abc", "abc", "abc"], config)
        assert table.starts["abc"] == 3 + 3

    def test_zero_boost(self, corpus):
        """Test that a zero boost leaves the plain distribution."""
        cfg = WordgenConfig(depth=3, min_length=3, max_length=10, retry_count=5, head_boost=0)
        table = build_head_weighted(corpus, cfg)
        plain = {k: w for k, w in table.weights.items() if len(k) == 3}
        assert table.starts == plain

    def test_start_items_use_override(self, config):
        """Test that start_items reads the boosted distribution."""
        table = build_head_weighted(["abc", "abd", "xyz"], config)
        assert dict(table.start_items()) == {"abc": 3, "abd": 3, "xyz": 2}


class TestPrunedStrategy:
    """Tests for the pruned strategy."""

    def test_max_prefix_bonus(self, config):
        """Test that k-grams behind the most frequent 2-gram get +1."""
        table = build_pruned(["abc", "abd", "xyz"], config)
        assert table.weights == {
            "abc": 2, "bc": 1,
            "abd": 2, "bd": 1,
            "xyz": 1, "yz": 1,
        }

    def test_bonus_once_per_key(self, config):
        """Test that a recurring max prefix adds its bonus only once."""
        table = build_pruned(["abc", "abc", "abc", "xyz"], config)
        assert table["abc"] == 3 + 1
        assert table["bc"] == 3 + 1
        assert table["xyz"] == 1

    def test_min_prefixes_have_no_effect_by_default(self, config):
        """Test that rarest prefixes are only recorded."""
        pruned = build_pruned(["abc", "abd", "xyz"], config)
        assert pruned["xyz"] == 1
        assert pruned["bc"] == 1

    def test_prune_rare_prefixes(self):
        """Test that the first occurrence behind a rarest prefix is dropped."""
        cfg = WordgenConfig(
            depth=3, min_length=3, max_length=10, retry_count=5,
            prune_rare_prefixes=True,
        )
        table = build_pruned(["abc", "abd", "xyz"], cfg)
        assert table.weights == {"abc": 2, "abd": 2}

    def test_prune_drops_only_first_discovery(self):
        """Test that later occurrences behind a rare prefix are kept."""
        cfg = WordgenConfig(
            depth=3, min_length=3, max_length=10, retry_count=5,
            prune_rare_prefixes=True,
        )
        # Both 2-grams occur twice, so each is rarest and most frequent at once
        table = build_pruned(["xyz", "xyz"], cfg)
        assert table.weights == {"xyz": 2, "yz": 2}

        unpruned = build_pruned(["xyz", "xyz"], WordgenConfig(
            depth=3, min_length=3, max_length=10, retry_count=5,
        ))
        assert unpruned.weights == {"xyz": 3, "yz": 3}

    def test_uniform_frequencies_bonus_everything(self, config):
        """Test that with min == max every key gets the bonus."""
        table = build_pruned(["abc", "xyz"], config)
        assert all(weight == 2 for weight in table.weights.values())

    def test_words_shorter_than_depth_skipped(self, config):
        """Test that short words add no keys."""
        table = build_pruned(["ab", "a"], config)
        assert table.is_empty

    def test_empty_training_set(self, config):
        """Test that no words give an empty table."""
        assert build_pruned([], config).is_empty


class TestReverseFrequencyStrategy:
    """Tests for the reverse strategy."""

    def test_inversion(self, config):
        """Test ceil(peak - count) with peak = max + 1."""
        table = build_reverse_frequency(["abab", "abab", "abc"], config)
        assert table.weights == {"aba": 1, "bab": 1, "ab": 1, "abc": 2, "bc": 2}

    def test_strictly_antitone(self, config, corpus):
        """Test that rarer k-grams always weigh more."""
        raw = build_append(corpus + ["kala", "kali", "kalo"], config).weights
        inverted = build_reverse_frequency(corpus + ["kala", "kali", "kalo"], config).weights
        assert raw.keys() == inverted.keys()
        for a in raw:
            for b in raw:
                if raw[a] < raw[b]:
                    assert inverted[a] > inverted[b]

    def test_weights_positive(self, config, corpus):
        """Test that the most frequent key keeps weight 1."""
        table = build_reverse_frequency(corpus, config)
        assert min(table.weights.values()) == 1

    def test_no_head_table(self, config, corpus):
        """Test that the reverse strategy keeps no head table."""
        table = build_reverse_frequency(corpus, config)
        assert table.heads == {}
        assert table.starts is None

    def test_empty_training_set(self, config):
        """Test that no words give an empty table without error."""
        assert build_reverse_frequency([], config).is_empty


class TestBuildTable:
    """Tests for strategy dispatch and the table container."""

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_dispatch(self, strategy, config, corpus):
        """Test that every strategy builds a table tagged with itself."""
        table = build_table(strategy, corpus, config)
        assert isinstance(table, TransitionTable)
        assert table.strategy == strategy
        assert table.depth == 3
        assert len(table) > 0

    def test_accepts_iterables(self, config):
        """Test that a generator of words is accepted."""
        table = build_table(Strategy.APPEND, (w for w in ["aba", "abc"]), config)
        assert "aba" in table

    def test_continuations_in_insertion_order(self, config):
        """Test prefix lookups."""
        table = build_append(["abab", "abc"], config)
        assert table.continuations("ab") == [("aba", 1), ("ab", 1), ("abc", 1)]
        assert table.continuations("zz") == []

    def test_top_orders_by_weight(self, config):
        """Test that the heaviest entries come first."""
        table = build_append(["abab", "abab", "abc"], config)
        top = table.top(2)
        assert [w for _, w in top] == [2, 2]
        assert len(table.top()) == len(table)

    def test_top_zero_is_empty(self, config):
        """Test that a limit of 0 returns no entries."""
        table = build_append(["abab", "abc"], config)
        assert table.top(0) == []


class TestStrategyNames:
    """Tests for Strategy.from_name."""

    @pytest.mark.parametrize("name,expected", [
        ("normal", Strategy.APPEND),
        ("append", Strategy.APPEND),
        ("headplus", Strategy.HEAD_WEIGHTED),
        ("HEAD_WEIGHTED", Strategy.HEAD_WEIGHTED),
        ("pruned", Strategy.PRUNED),
        ("reverse", Strategy.REVERSE_FREQUENCY),
        ("reverse_frequency", Strategy.REVERSE_FREQUENCY),
    ])
    def test_known_names(self, name, expected):
        """Test resolution from values and member names."""
        assert Strategy.from_name(name) == expected

    def test_unknown_name(self):
        """Test that unknown names list the available strategies."""
        with pytest.raises(ValueError, match="headplus"):
            Strategy.from_name("markov")

    def test_every_strategy_has_description(self):
        """Test descriptions."""
        for strategy in Strategy:
            assert strategy.description
