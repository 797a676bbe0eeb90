"""Tests for ranged sampling and sample history."""

import random
from collections import Counter

from random_words.core.sampler import SampleHistory, Sampler
from random_words.models.preferences import RangeSelection
from random_words.models.word_models import SampleResult, TaggedWord


def sample_of(*pairs: tuple[str, str]) -> SampleResult:
    return SampleResult(tuple(TaggedWord(word, name) for word, name in pairs))


class TestComputePool:
    """Test pool construction from ranged slices."""

    def test_full_range_keeps_order(self):
        words = [f"w{i}" for i in range(10)]
        pool = Sampler().compute_pool({"a": RangeSelection()}, {"a": words})
        assert [t.word for t in pool] == words
        assert {t.list_name for t in pool} == {"a"}

    def test_range_slices_with_floor(self):
        words = [str(i) for i in range(10)]
        active = {"a": RangeSelection(lower=0.25, upper=0.75)}
        pool = Sampler().compute_pool(active, {"a": words})
        # floor(2.5) = 2, floor(7.5) = 7
        assert [t.word for t in pool] == ["2", "3", "4", "5", "6"]

    def test_lists_in_iteration_order(self):
        active = {"b": RangeSelection(), "a": RangeSelection()}
        pool = Sampler().compute_pool(active, {"a": ["x"], "b": ["y", "z"]})
        assert [(t.word, t.list_name) for t in pool] == [
            ("y", "b"),
            ("z", "b"),
            ("x", "a"),
        ]

    def test_empty_and_missing_lists_contribute_nothing(self):
        active = {
            "empty": RangeSelection(),
            "missing": RangeSelection(),
            "narrow": RangeSelection(lower=0.5, upper=0.5),
        }
        pool = Sampler().compute_pool(active, {"empty": [], "narrow": ["a", "b"]})
        assert pool == []


class TestSampleUniform:
    """Test uniform sampling over the pool."""

    def test_count_above_pool_returns_everything_once(self):
        pool = [TaggedWord(str(i), "a") for i in range(5)]
        result = Sampler(random.Random(1)).sample_uniform(pool, 10)
        assert len(result) == 5
        assert sorted(result.words) == ["0", "1", "2", "3", "4"]

    def test_no_repeats(self):
        pool = [TaggedWord(str(i), "a") for i in range(50)]
        result = Sampler(random.Random(2)).sample_uniform(pool, 20)
        assert len(set(result.words)) == 20

    def test_empty_pool(self):
        assert not Sampler().sample_uniform([], 3)

    def test_pool_not_mutated(self):
        pool = [TaggedWord(str(i), "a") for i in range(5)]
        before = list(pool)
        Sampler(random.Random(3)).sample_uniform(pool, 5)
        assert pool == before

    def test_seeded_rng_is_reproducible(self):
        pool = [TaggedWord(str(i), "a") for i in range(30)]
        first = Sampler(random.Random(42)).sample_uniform(pool, 4)
        second = Sampler(random.Random(42)).sample_uniform(pool, 4)
        assert first == second


class TestSampleFair:
    """Test per-list fair sampling."""

    def test_unequal_lists_drawn_evenly(self):
        active = {"big": RangeSelection(), "small": RangeSelection()}
        all_words = {"big": [f"b{i}" for i in range(1000)], "small": ["s0", "s1"]}
        result = Sampler(random.Random(7)).sample_fair(active, all_words, 4000)
        counts = Counter(t.list_name for t in result)
        assert 1700 < counts["small"] < 2300
        assert 1700 < counts["big"] < 2300

    def test_draws_respect_ranges(self):
        active = {"a": RangeSelection(lower=0.0, upper=0.5)}
        result = Sampler(random.Random(5)).sample_fair(
            active, {"a": ["in1", "in2", "out1", "out2"]}, 50
        )
        assert set(result.words) <= {"in1", "in2"}

    def test_lists_with_empty_slices_skipped(self):
        active = {"a": RangeSelection(lower=0.5, upper=0.5), "b": RangeSelection()}
        result = Sampler(random.Random(9)).sample_fair(
            active, {"a": ["x", "y"], "b": ["z"]}, 10
        )
        assert result.list_names == {"b"}

    def test_no_eligible_lists(self):
        assert not Sampler().sample_fair({"a": RangeSelection()}, {"a": []}, 3)

    def test_sample_dispatch(self):
        active = {"a": RangeSelection()}
        sampler = Sampler(random.Random(4))
        assert len(sampler.sample(active, {"a": ["x"]}, 3, fair=True)) == 3
        assert len(sampler.sample(active, {"a": ["x"]}, 3, fair=False)) == 1


class TestSampleHistory:
    """Test back-then-branch history."""

    A = sample_of(("a", "l"))
    B = sample_of(("b", "l"))
    C = sample_of(("c", "l"))
    D = sample_of(("d", "l"))

    def history_of(self, *results: SampleResult) -> SampleHistory:
        history = SampleHistory()
        for result in results:
            history.push(result)
        return history

    def test_back_then_branch(self):
        history = self.history_of(self.A, self.B, self.C)
        assert history.back() == self.B
        assert history.back() == self.A
        assert history.back() is None
        assert history.current == self.A

        history.push(self.D)
        assert history.entries == [self.A, self.D]
        assert history.current == self.D

    def test_back_does_not_mutate(self):
        history = self.history_of(self.A, self.B)
        history.back()
        assert history.entries == [self.A, self.B]
        assert history.forward() == self.B
        assert history.forward() is None

    def test_push_ignores_empty_and_repeats(self):
        history = self.history_of(self.A, SampleResult(), self.A)
        assert history.entries == [self.A]
        assert not history.can_go_back

    def test_clear(self):
        history = self.history_of(self.A, self.B)
        history.clear()
        assert history.current is None
        assert len(history) == 0

    def test_drop_list_removes_emptied_entries(self):
        mixed = sample_of(("x", "gone"), ("y", "kept"))
        only_gone = sample_of(("z", "gone"))
        history = self.history_of(self.A, mixed, only_gone)

        history.drop_list("gone")

        assert history.entries == [self.A, sample_of(("y", "kept"))]
        assert history.current == sample_of(("y", "kept"))

    def test_drop_list_everything(self):
        history = self.history_of(sample_of(("z", "gone")))
        history.drop_list("gone")
        assert history.current is None
        assert history.cursor == -1

    def test_rename_list(self):
        history = self.history_of(sample_of(("w", "old")))
        history.rename_list("old", "new")
        assert history.current == sample_of(("w", "new"))
