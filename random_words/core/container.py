"""Dependency injection container wiring the store, preferences and sampler"""

from collections.abc import Callable
from typing import Any, TypeVar, cast

from ..config.settings import AppSettings
from .interfaces import (
    PreferencesStoreInterface,
    TextProcessorInterface,
    WordStoreInterface,
)

T = TypeVar("T")


class DIContainer:
    """Maps interfaces to instances, per-lookup factories or lazy singletons"""

    def __init__(self) -> None:
        self._instances: dict[type, Any] = {}
        self._factories: dict[type, Callable[[], Any]] = {}
        self._lazy: set[type] = set()

    def register_instance(self, interface: type[Any], instance: Any) -> None:
        self._factories.pop(interface, None)
        self._lazy.discard(interface)
        self._instances[interface] = instance

    def register_factory(
        self, interface: type[Any], factory: Callable[[], Any]
    ) -> None:
        """Call the factory on every lookup"""
        self._instances.pop(interface, None)
        self._lazy.discard(interface)
        self._factories[interface] = factory

    def register_singleton(
        self, interface: type[Any], factory: Callable[[], Any]
    ) -> None:
        """Call the factory on first lookup and keep the result"""
        self._instances.pop(interface, None)
        self._lazy.add(interface)
        self._factories[interface] = factory

    def get(self, interface: type[Any]) -> Any | None:
        if interface in self._instances:
            return self._instances[interface]
        factory = self._factories.get(interface)
        if factory is None:
            return None
        instance = factory()
        if interface in self._lazy:
            self._instances[interface] = instance
        return instance

    def require(self, interface: type[T]) -> T:
        """Like get(), but a missing registration is an error"""
        instance = self.get(interface)
        if instance is None:
            raise RuntimeError(f"No {interface.__name__} registered in the container")
        return cast(T, instance)

    def has(self, interface: type[Any]) -> bool:
        return interface in self._instances or interface in self._factories

    def clear(self) -> None:
        self._instances.clear()
        self._factories.clear()
        self._lazy.clear()


def setup_default_container(app_settings: AppSettings) -> DIContainer:
    """Setup container with file-backed implementations for the given settings"""
    from ..models.preferences import Preferences
    from ..utils.preferences_store import PreferencesStore
    from .sampler import Sampler
    from .text_processor import TextProcessor
    from .word_store import WordStore

    container = DIContainer()
    storage = app_settings.storage
    drill = app_settings.drill

    container.register_singleton(TextProcessorInterface, lambda: TextProcessor())
    container.register_singleton(
        WordStoreInterface,
        lambda: WordStore(
            data_dir=storage.data_dir,
            bundled_dir=storage.bundled_dir,
            text_processor=container.get(TextProcessorInterface),
            suffix=storage.list_suffix,
            own_vocab_name=storage.own_vocab_name,
        ),
    )
    container.register_singleton(
        PreferencesStoreInterface,
        lambda: PreferencesStore(
            app_settings.preferences_path,
            defaults=Preferences(
                switch_interval=drill.default_interval,
                words_displayed=drill.default_words_displayed,
                fair_distribution=drill.default_fair_distribution,
            ),
        ),
    )
    container.register_factory(Sampler, lambda: Sampler())

    return container
