"""Language switcher state — dropdown status and language selection."""

import logging

import reflex as rx

from lessonpage.i18n import UnknownLanguageError
from lessonpage.services.dropdown import Dropdown, DropdownStatus
from lessonpage.services.language_switcher import LanguageSwitcher
from lessonpage.services.locale_store import LocaleStore
from lessonpage.ui.state.i18n_state import I18nState

_log = logging.getLogger(__name__)


class LanguageSwitcherState(rx.State):
    dropdown: str = DropdownStatus.CLOSED.value

    @rx.var
    def is_open(self) -> bool:
        return self.dropdown == DropdownStatus.OPEN.value

    def toggle_menu(self):
        self.dropdown = Dropdown(self.dropdown).toggle().value

    def dismiss_menu(self):
        self.dropdown = Dropdown(self.dropdown).dismiss().value

    async def select_language(self, code: str):
        i18n = await self.get_state(I18nState)
        # The session's locale cell, with I18nState re-deriving on every change.
        store = LocaleStore(i18n.locale)
        store.subscribe(i18n._apply_locale)
        switcher = LanguageSwitcher(store, status=self.dropdown)
        try:
            switcher.select(code)
        except UnknownLanguageError:
            _log.warning("Ignoring unsupported locale %r", code)
            return
        self.dropdown = switcher.dropdown.status.value
