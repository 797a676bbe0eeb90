"""Factory functions for creating configured instances"""

from collections.abc import Callable

from ..config.settings import AppSettings, settings
from ..models.word_models import SortMode
from .container import DIContainer, setup_default_container
from .controller import DrillController
from .interfaces import PreferencesStoreInterface, WordStoreInterface
from .list_editor import ListEditor
from .sampler import Sampler


class DrillControllerFactory:
    """Factory for creating DrillController instances"""

    @staticmethod
    def create_from_container(
        container: DIContainer, on_tick: Callable[[], None] | None = None
    ) -> DrillController:
        """Create controller from DI container"""
        return DrillController(
            store=container.require(WordStoreInterface),
            preferences_store=container.require(PreferencesStoreInterface),
            sampler=container.require(Sampler),
            on_tick=on_tick,
        )


def create_word_store(
    app_settings: AppSettings | None = None, container: DIContainer | None = None
) -> WordStoreInterface:
    """Convenience function to create the configured word store"""
    container = container or setup_default_container(app_settings or settings)
    return container.require(WordStoreInterface)


def create_list_editor(
    name: str,
    sort_mode: SortMode | str | None = None,
    app_settings: AppSettings | None = None,
    container: DIContainer | None = None,
) -> ListEditor:
    """Open an editor on a list; the sort mode defaults to the configured one"""
    app_settings = app_settings or settings
    mode = SortMode.parse(sort_mode or app_settings.drill.default_sort_mode)
    return ListEditor(create_word_store(app_settings, container), name, mode)


def create_drill_controller(
    app_settings: AppSettings | None = None,
    container: DIContainer | None = None,
    on_tick: Callable[[], None] | None = None,
) -> DrillController:
    """Convenience function to create a drill controller"""
    container = container or setup_default_container(app_settings or settings)
    return DrillControllerFactory.create_from_container(container, on_tick)
