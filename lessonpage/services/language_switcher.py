"""Language switcher — catalog entries, dropdown and the only locale writer."""

from dataclasses import dataclass
from typing import Any

from lessonpage.i18n import LANGUAGES
from lessonpage.models.language import Language
from lessonpage.services.dropdown import Dropdown, DropdownStatus
from lessonpage.services.locale_store import LocaleStore


@dataclass(frozen=True)
class SwitcherEntry:
    code: str
    label: str
    # bool for a plain code, a reactive var when *current* is one
    selected: Any


def switcher_entries(current: Any, languages: tuple[Language, ...] = LANGUAGES) -> list[SwitcherEntry]:
    """One entry per cataloged language, in catalog order."""
    return [
        SwitcherEntry(code=lang.code, label=lang.label, selected=current == lang.code)
        for lang in languages
    ]


class LanguageSwitcher:
    def __init__(
        self,
        store: LocaleStore,
        languages: tuple[Language, ...] = LANGUAGES,
        status: str = DropdownStatus.CLOSED,
    ):
        self.store = store
        self._languages = languages
        self.dropdown = Dropdown(status)

    def entries(self) -> list[SwitcherEntry]:
        return switcher_entries(self.store.get_language(), self._languages)

    def toggle(self) -> None:
        self.dropdown.toggle()

    def select(self, code: str) -> None:
        """Write *code* to the store and close the panel.

        The store rejects uncataloged codes before the dropdown moves, so a
        failed selection leaves both untouched.
        """
        self.store.set_language(code)
        self.dropdown.select()

    def dismiss(self) -> None:
        self.dropdown.dismiss()
