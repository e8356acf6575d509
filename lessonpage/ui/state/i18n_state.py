"""i18n state — the session's selected locale and reactive translations dict."""

import reflex as rx

from lessonpage.i18n import ensure_supported, get_translations
from lessonpage.services.locale_store import current_locale_store


def _resolve_locale(selected: str) -> str:
    """The session's pick, else the language held by the application store."""
    return selected or current_locale_store().get_language()


class I18nState(rx.State):
    # "" until the session picks a language through the switcher
    selected: str = ""

    @rx.var
    def locale(self) -> str:
        return _resolve_locale(self.selected)

    @rx.var
    def translations(self) -> dict[str, str]:
        return get_translations(_resolve_locale(self.selected))

    def _apply_locale(self, locale: str):
        self.selected = ensure_supported(locale)
