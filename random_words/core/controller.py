"""Drill controller: the single owner of the application state"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import (
    ConfigurationError,
    ListNotFoundError,
    RandomWordsError,
)
from ..logging_config import get_logger
from ..models.preferences import Preferences, RangeSelection, Theme
from ..models.word_models import SampleResult, TaggedWord
from .interfaces import PreferencesStoreInterface, WordStoreInterface
from .sampler import SampleHistory, Sampler
from .text_processor import TextProcessor
from .timer import ResampleTimer

logger = get_logger(__name__)


class DrillController:
    """Holds selection, ranges, loaded words, the current sample and history.

    All state changes go through this object on one thread. The resample
    timer calls ``on_tick``; pass a callback that enqueues work when the
    controller is driven from an event loop.
    """

    def __init__(
        self,
        store: WordStoreInterface,
        preferences_store: PreferencesStoreInterface,
        sampler: Sampler | None = None,
        on_tick: Callable[[], None] | None = None,
    ):
        self.store = store
        self.preferences_store = preferences_store
        self.sampler = sampler or Sampler()
        self.preferences: Preferences = preferences_store.load()
        self.all_words: dict[str, list[str]] = {}
        self.history = SampleHistory()
        self.current = SampleResult()
        self.timer = ResampleTimer(
            self.preferences.switch_interval, on_tick or self._on_tick
        )
        self._running = False
        self._paused = False
        store.subscribe(self.on_list_deleted)

    # ---- state views ----

    @property
    def selected_lists(self) -> list[str]:
        return list(self.preferences.selected_lists)

    @property
    def ranges(self) -> dict[str, RangeSelection]:
        return dict(self.preferences.list_ranges)

    @property
    def active_ranges(self) -> dict[str, RangeSelection]:
        """Ranges of the selected lists, in selection order"""
        return {
            name: self.preferences.list_ranges.get(name, RangeSelection())
            for name in self.preferences.selected_lists
        }

    @property
    def pool(self) -> list[TaggedWord]:
        return self.sampler.compute_pool(self.active_ranges, self.all_words)

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def is_running(self) -> bool:
        return self._running

    # ---- persistence ----

    def save_preferences(self) -> None:
        self.preferences_store.save(self.preferences)

    def _update_preferences(self, **changes: Any) -> None:
        data = {**self.preferences.model_dump(), **changes}
        try:
            self.preferences = Preferences.model_validate(data)
        except ValidationError as e:
            field, value = next(iter(changes.items()))
            reason = e.errors()[0].get("msg", str(e))
            raise ConfigurationError(field, value, reason) from e
        self.save_preferences()

    # ---- loading ----

    def _load_list(self, name: str) -> bool:
        try:
            self.all_words[name] = self.store.load(name)
            return True
        except ListNotFoundError:
            logger.warning(f"List '{name}' no longer exists; deselecting it")
            self._forget(name, scrub_history=True)
            return False
        except RandomWordsError as e:
            logger.error(f"Skipping list '{name}': {e}")
            self.all_words.pop(name, None)
            return False

    def load_words(self) -> None:
        """Reload every selected list, clear history and draw a fresh sample"""
        self.all_words.clear()
        for name in self.selected_lists:
            self._load_list(name)
        logger.debug(
            f"Loaded {sum(len(w) for w in self.all_words.values())} words "
            f"from {len(self.all_words)} list(s)"
        )
        self.history.clear()
        self.current = SampleResult()
        self.save_preferences()
        self.resample()

    def reload_list(self, name: str) -> None:
        if name in self.preferences.selected_lists:
            self._load_list(name)

    # ---- selection ----

    def select_list(self, name: str) -> None:
        """Select a list; a list without a range gets the full range"""
        if not self.store.exists(name):
            raise ListNotFoundError(name)
        if name in self.preferences.selected_lists:
            return
        self.preferences.selected_lists.append(name)
        self.preferences.list_ranges.setdefault(name, RangeSelection())
        self._load_list(name)
        self.save_preferences()
        self.resample()

    def deselect_list(self, name: str) -> None:
        if name not in self.preferences.selected_lists:
            return
        self._forget(name)
        self.save_preferences()
        self.resample()

    def toggle_list(self, name: str) -> bool:
        """Flip selection; returns whether the list is now selected"""
        if name in self.preferences.selected_lists:
            self.deselect_list(name)
            return False
        self.select_list(name)
        return True

    def set_range(
        self, name: str, lower: float | None = None, upper: float | None = None
    ) -> RangeSelection:
        """Move range bounds; lower never passes upper"""
        if name not in self.preferences.selected_lists:
            raise ConfigurationError("range", name, "list is not selected")
        selection = self.preferences.list_ranges.get(name, RangeSelection())
        if lower is not None:
            selection = selection.with_lower(lower)
        if upper is not None:
            selection = selection.with_upper(upper)
        self.preferences.list_ranges[name] = selection
        self.save_preferences()
        self.resample()
        return selection

    # ---- settings ----

    def set_interval(self, seconds: float) -> None:
        self._update_preferences(switch_interval=seconds)
        self.timer.set_interval(self.preferences.switch_interval)
        self._rearm()

    def set_word_count(self, count: int) -> None:
        self._update_preferences(words_displayed=count)
        self.resample()

    def set_fair_distribution(self, fair: bool) -> None:
        self._update_preferences(fair_distribution=fair)
        self.resample()

    def set_theme(self, theme: Theme | str) -> None:
        self._update_preferences(theme=theme)

    # ---- timer ----

    def _on_tick(self) -> None:
        self.resample()

    def _rearm(self) -> None:
        if self._running and not self._paused:
            self.timer.start()

    def start(self) -> None:
        """Begin automatic resampling (no-op in manual mode)"""
        self._running = True
        self._paused = False
        self.timer.start()

    def stop(self) -> None:
        self._running = False
        self.timer.stop()

    def pause(self) -> None:
        self._paused = True
        self.timer.pause()

    def resume(self) -> None:
        self._paused = False
        if self._running:
            self.timer.resume()

    def toggle_pause(self) -> bool:
        """Returns whether the drill is paused afterwards"""
        if self._paused:
            self.resume()
        else:
            self.pause()
        return self._paused

    # ---- sampling ----

    def resample(self, record_history: bool = True) -> SampleResult:
        """Draw a new sample; also restarts the timer period"""
        self._paused = False
        self._rearm()
        result = self.sampler.sample(
            self.active_ranges,
            self.all_words,
            self.preferences.words_displayed,
            fair=self.preferences.fair_distribution,
        )
        self.current = result
        if record_history:
            self.history.push(result)
        return result

    def go_back(self) -> SampleResult | None:
        self.pause()
        previous = self.history.back()
        if previous is not None:
            self.current = previous
        return previous

    def go_forward(self) -> SampleResult | None:
        self.pause()
        following = self.history.forward()
        if following is not None:
            self.current = following
        return following

    def keep_current(self) -> list[str]:
        """Add the shown words to the own vocabulary, then move on"""
        if not self.current:
            return []
        added = self.store.add_to_own_vocab(self.current.words)
        self.reload_list(self.store.own_vocab_name)
        self.resample()
        return added

    def locate_current(self) -> TaggedWord | None:
        """The first shown word together with the list that now holds it

        The list the word was drawn from is re-read first. If the word has
        since been removed from it, the other lists are searched, selected
        ones first. None when nothing is shown.
        """
        if not self.current:
            return None
        self.pause()
        located = self.current.entries[0]
        names = dict.fromkeys(
            [located.list_name, *self.preferences.selected_lists]
            + self.store.list_names()
        )
        found = self.store.find_list_containing(located.word, names)
        if found is None or found == located.list_name:
            return located
        logger.debug(f"'{located.word}' is no longer in '{located.list_name}'")
        return TaggedWord(located.word, found)

    # ---- list management ----

    def import_list(self, path: Path | str) -> str:
        """Import a file and select it with the full range"""
        name = self.store.import_file(path)
        if name not in self.preferences.selected_lists:
            self.preferences.selected_lists.append(name)
        self.preferences.list_ranges[name] = RangeSelection()
        self._load_list(name)
        self.save_preferences()
        self.resample()
        return name

    def create_list(self, name: str) -> str:
        return self.store.create(name)

    def rename_list(self, old: str, new: str) -> str:
        """Rename a list, carrying over its selection and range"""
        new = self.store.rename(old, new)
        old = TextProcessor.clean_list_name(old) or old
        if old == new:
            return new
        prefs = self.preferences
        if old in prefs.selected_lists:
            prefs.selected_lists[prefs.selected_lists.index(old)] = new
            prefs.list_ranges[new] = prefs.list_ranges.pop(old, RangeSelection())
            if old in self.all_words:
                self.all_words[new] = self.all_words.pop(old)
            self.current = self.current.renamed_list(old, new)
            self.history.rename_list(old, new)
            self.save_preferences()
        return new

    def delete_list(self, name: str) -> None:
        """Delete a list; the store's notification cleans up the state"""
        self.store.delete_list(name)

    def _forget(self, name: str, scrub_history: bool = False) -> None:
        prefs = self.preferences
        if name in prefs.selected_lists:
            prefs.selected_lists.remove(name)
        prefs.list_ranges.pop(name, None)
        self.all_words.pop(name, None)
        self.current = self.current.without_list(name)
        if scrub_history:
            self.history.drop_list(name)

    def on_list_deleted(self, name: str) -> None:
        """Drop every reference to a deleted list in one step"""
        self._forget(name, scrub_history=True)
        self.save_preferences()
        logger.info(f"Removed '{name}' from the drill selection")
