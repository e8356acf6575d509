"""Language switcher — toggle button, scrim and language list."""

import reflex as rx

from lessonpage.services.language_switcher import SwitcherEntry, switcher_entries
from lessonpage.ui.state.i18n_state import I18nState
from lessonpage.ui.state.switcher_state import LanguageSwitcherState

_t = I18nState.translations


def _language_entry(entry: SwitcherEntry) -> rx.Component:
    selected = entry.selected
    return rx.el.button(
        rx.hstack(
            rx.text(entry.label, size="2", flex="1"),
            rx.cond(selected, rx.icon("circle_check", size=14), rx.fragment()),
            align="center",
            width="100%",
        ),
        on_click=LanguageSwitcherState.select_language(entry.code),
        width="100%",
        padding="12px 16px",
        text_align="left",
        cursor="pointer",
        font_weight=rx.cond(selected, "bold", "normal"),
        color=rx.cond(selected, "var(--accent-11)", "var(--gray-12)"),
        background=rx.cond(selected, "var(--accent-3)", "transparent"),
        _hover={"background": "var(--gray-3)"},
    )


def language_switcher() -> rx.Component:
    return rx.box(
        rx.button(
            rx.icon("globe", size=16),
            rx.text(I18nState.locale, text_transform="uppercase"),
            rx.icon(
                "chevron-down",
                size=14,
                transform=rx.cond(LanguageSwitcherState.is_open, "rotate(180deg)", "none"),
            ),
            on_click=LanguageSwitcherState.toggle_menu,
            title=_t["switcher.label"],
            variant="soft",
            color_scheme="gray",
        ),
        rx.cond(
            LanguageSwitcherState.is_open,
            rx.fragment(
                rx.box(
                    on_click=LanguageSwitcherState.dismiss_menu,
                    position="fixed",
                    inset="0",
                    z_index="10",
                ),
                rx.box(
                    *[_language_entry(entry) for entry in switcher_entries(I18nState.locale)],
                    position="absolute",
                    right="0",
                    margin_top="8px",
                    width="192px",
                    background="var(--color-panel-solid)",
                    border="1px solid var(--gray-4)",
                    border_radius="8px",
                    box_shadow="0 8px 24px rgba(0,0,0,0.15)",
                    overflow="hidden",
                    z_index="20",
                ),
            ),
            rx.fragment(),
        ),
        position="relative",
    )
