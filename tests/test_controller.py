"""Tests for the drill controller state handling."""

import random
from unittest.mock import MagicMock

import pytest

from random_words.core.controller import DrillController
from random_words.core.sampler import Sampler
from random_words.core.word_store import WordStore
from random_words.exceptions import ConfigurationError, ListNotFoundError
from random_words.models.preferences import Preferences, RangeSelection, Theme
from random_words.utils.preferences_store import PreferencesStore


def make_controller(tmp_path, preferences: Preferences | None = None):
    store = WordStore(tmp_path / "data")
    store.save("animals", ["cat", "dog", "emu", "fox"])
    store.save("colors", ["red", "blue"])
    prefs_store = PreferencesStore(tmp_path / "data" / "preferences.json")
    if preferences is not None:
        prefs_store.save(preferences)
    controller = DrillController(
        store, prefs_store, sampler=Sampler(random.Random(0)), on_tick=MagicMock()
    )
    return controller, store, prefs_store


class TestSelection:
    """Test list selection and ranges."""

    def test_select_gives_full_range_and_persists(self, tmp_path):
        controller, _, prefs_store = make_controller(tmp_path)
        controller.select_list("animals")

        assert controller.selected_lists == ["animals"]
        assert controller.ranges["animals"] == RangeSelection()
        assert prefs_store.load().selected_lists == ["animals"]
        assert controller.current.list_names == {"animals"}

    def test_select_unknown_list(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        with pytest.raises(ListNotFoundError):
            controller.select_list("nothing")

    def test_deselect_removes_range(self, tmp_path):
        controller, _, prefs_store = make_controller(tmp_path)
        controller.select_list("animals")
        controller.deselect_list("animals")
        assert controller.selected_lists == []
        assert "animals" not in controller.ranges
        assert prefs_store.load().list_ranges == {}
        assert not controller.current

    def test_toggle(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        assert controller.toggle_list("colors") is True
        assert controller.toggle_list("colors") is False

    def test_set_range_clamps(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        controller.select_list("animals")
        controller.set_range("animals", upper=0.5)
        selection = controller.set_range("animals", lower=0.9)
        assert selection == RangeSelection(lower=0.5, upper=0.5)

    def test_set_range_applies_to_pool(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        controller.select_list("animals")
        controller.set_range("animals", lower=0.5)
        assert [t.word for t in controller.pool] == ["emu", "fox"]

    def test_set_range_requires_selection(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        with pytest.raises(ConfigurationError):
            controller.set_range("animals", lower=0.5)

    def test_load_words_skips_missing_lists(self, tmp_path):
        prefs = Preferences(selected_lists=["animals", "vanished"])
        controller, _, prefs_store = make_controller(tmp_path, prefs)
        controller.load_words()
        assert controller.selected_lists == ["animals"]
        assert set(controller.all_words) == {"animals"}
        assert prefs_store.load().selected_lists == ["animals"]


class TestSettings:
    """Test preference changes through the controller."""

    def test_word_count_resamples(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        controller.select_list("animals")
        controller.set_word_count(3)
        assert len(controller.current) == 3

    def test_invalid_values_raise_configuration_error(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        with pytest.raises(ConfigurationError):
            controller.set_word_count(0)
        with pytest.raises(ConfigurationError):
            controller.set_interval(120)
        assert controller.preferences.words_displayed == 1

    def test_interval_updates_timer(self, tmp_path):
        controller, _, prefs_store = make_controller(tmp_path)
        controller.set_interval(0)
        assert controller.timer.interval == 0
        assert prefs_store.load().is_manual

    def test_fair_and_theme(self, tmp_path):
        controller, _, prefs_store = make_controller(tmp_path)
        controller.set_fair_distribution(True)
        controller.set_theme("Dark")
        loaded = prefs_store.load()
        assert loaded.fair_distribution is True
        assert loaded.theme is Theme.DARK


class TestDrilling:
    """Test sampling, history and the timer hooks."""

    def test_history_back_and_branch(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        controller.select_list("animals")
        controller.select_list("colors")
        controller.load_words()
        first = controller.current
        controller.resample()
        controller.resample()

        while controller.go_back() is not None:
            pass
        assert controller.current == first
        assert controller.is_paused

        controller.resample()
        assert not controller.is_paused
        assert not controller.history.can_go_forward

    def test_deselect_keeps_history(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        controller.select_list("colors")
        colors_only = controller.current
        controller.select_list("animals")
        controller.deselect_list("colors")

        assert "colors" not in controller.current.list_names
        while controller.go_back() is not None:
            pass
        assert controller.current == colors_only
        assert controller.current.list_names == {"colors"}

    def test_keep_current_adds_to_own_vocab(self, tmp_path):
        controller, store, _ = make_controller(tmp_path)
        controller.select_list("colors")
        shown = controller.current.words

        added = controller.keep_current()

        assert added == shown
        assert store.load("ownVocab") == shown

    def test_keep_current_reloads_selected_own_vocab(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        controller.select_list("colors")
        controller.select_list("ownVocab")
        controller.deselect_list("colors")
        assert controller.all_words["ownVocab"] == []

        controller.select_list("colors")
        shown = [t.word for t in controller.current if t.list_name == "colors"]
        controller.keep_current()
        assert controller.all_words["ownVocab"] == shown

    def test_locate_current_pauses(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        controller.select_list("animals")
        located = controller.locate_current()
        assert located.list_name == "animals"
        assert located.word in ["cat", "dog", "emu", "fox"]
        assert controller.is_paused

    def test_locate_with_nothing_shown(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        assert controller.locate_current() is None

    def test_locate_follows_word_to_another_list(self, tmp_path):
        controller, store, _ = make_controller(tmp_path)
        store.save("animals", ["cat"])
        controller.select_list("animals")
        store.save("animals", ["dog"])
        store.save("pets", ["cat"])

        located = controller.locate_current()

        assert located.word == "cat"
        assert located.list_name == "pets"

    def test_start_arms_timer_and_stop_cancels(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        controller.start()
        assert controller.timer.is_running
        controller.toggle_pause()
        assert not controller.timer.is_running
        controller.toggle_pause()
        assert controller.timer.is_running
        controller.stop()
        assert not controller.timer.is_running

    def test_resample_rearms_while_running(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        controller.start()
        try:
            controller.pause()
            controller.resample()
            assert controller.timer.is_running
        finally:
            controller.stop()


class TestListManagement:
    """Test list lifecycle events reaching the drill state."""

    def test_delete_removes_selection_and_range_at_once(self, tmp_path):
        controller, store, prefs_store = make_controller(tmp_path)
        controller.select_list("animals")
        controller.select_list("colors")
        controller.resample()

        store.delete_list("animals")

        assert controller.selected_lists == ["colors"]
        assert "animals" not in controller.ranges
        assert "animals" not in controller.all_words
        assert "animals" not in controller.current.list_names
        for entry in controller.history.entries:
            assert "animals" not in entry.list_names
        assert prefs_store.load().selected_lists == ["colors"]

    def test_import_selects_with_full_range(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        source = tmp_path / "myWords.csv"
        source.write_text("one\ntwo\nthree\n", encoding="utf-8")

        name = controller.import_list(source)

        assert name == "myWords"
        assert "myWords" in controller.selected_lists
        assert controller.ranges["myWords"] == RangeSelection(lower=0.0, upper=1.0)
        assert controller.all_words["myWords"] == ["one", "two", "three"]

    def test_reimport_resets_range(self, tmp_path):
        controller, _, _ = make_controller(tmp_path)
        source = tmp_path / "myWords.csv"
        source.write_text("one\ntwo", encoding="utf-8")
        controller.import_list(source)
        controller.set_range("myWords", upper=0.5)
        controller.import_list(source)
        assert controller.ranges["myWords"] == RangeSelection()
        assert controller.selected_lists.count("myWords") == 1

    def test_rename_carries_selection(self, tmp_path):
        controller, store, _ = make_controller(tmp_path)
        controller.select_list("animals")
        controller.set_range("animals", upper=0.5)

        controller.rename_list("animals", "beasts")

        assert controller.selected_lists == ["beasts"]
        assert controller.ranges["beasts"] == RangeSelection(upper=0.5)
        assert controller.current.list_names <= {"beasts"}
        assert store.load("beasts") == ["cat", "dog", "emu", "fox"]

    def test_rename_with_padded_name_moves_selection(self, tmp_path):
        controller, store, prefs_store = make_controller(tmp_path)
        controller.select_list("animals")

        assert controller.rename_list(" animals ", "beasts") == "beasts"

        assert controller.selected_lists == ["beasts"]
        assert "animals" not in controller.ranges
        assert controller.current.list_names <= {"beasts"}
        assert prefs_store.load().selected_lists == ["beasts"]
        assert not store.exists("animals")

    def test_create_and_delete_through_controller(self, tmp_path):
        controller, store, _ = make_controller(tmp_path)
        controller.create_list("fresh")
        controller.select_list("fresh")
        controller.delete_list("fresh")
        assert not store.exists("fresh")
        assert controller.selected_lists == []
