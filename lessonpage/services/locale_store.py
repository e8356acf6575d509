"""Locale store — the single holder of the selected language."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from lessonpage.i18n import ensure_supported

_log = logging.getLogger(__name__)

LocaleListener = Callable[[str], None]


class ConfigurationError(RuntimeError):
    pass


class LocaleStore:
    """Holds the current language code and notifies listeners when it changes."""

    def __init__(self, default: str):
        self._language = ensure_supported(default)
        self._listeners: list[LocaleListener] = []

    def get_language(self) -> str:
        return self._language

    def set_language(self, locale: str) -> None:
        ensure_supported(locale)
        if locale == self._language:
            return
        previous, self._language = self._language, locale
        _log.info("Language changed from %s to %s", previous, locale)
        for listener in list(self._listeners):
            listener(locale)

    def subscribe(self, listener: LocaleListener) -> Callable[[], None]:
        """Call *listener* with the new code after every change; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


_installed: LocaleStore | None = None


def install_locale_store(store: LocaleStore) -> None:
    """Install *store* as the application's locale store."""
    global _installed
    _installed = store


def current_locale_store() -> LocaleStore:
    """Return the installed store; raises ConfigurationError when none was installed."""
    if _installed is None:
        raise ConfigurationError(
            "No LocaleStore installed: call install_locale_store() at application start"
        )
    return _installed


@contextmanager
def locale_store_scope(store: LocaleStore | None) -> Iterator[LocaleStore | None]:
    """Install *store* for the duration of the block, then restore the previous one.

    ``None`` runs the block with no store installed.
    """
    global _installed
    previous, _installed = _installed, store
    try:
        yield store
    finally:
        _installed = previous
