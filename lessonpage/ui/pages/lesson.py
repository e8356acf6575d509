"""Lesson page — localized header, dispatched blocks and footer."""

import reflex as rx

from lessonpage.config import settings
from lessonpage.content import get_lesson
from lessonpage.services.page_composer import compose_page
from lessonpage.ui.components.blocks import block_dispatcher, reveal
from lessonpage.ui.components.language_switcher import language_switcher
from lessonpage.ui.state.i18n_state import I18nState

_t = I18nState.translations


def lesson_page() -> rx.Component:
    # Single-lesson display: the configured lesson, else the first in the catalog.
    lesson = get_lesson(settings.lesson_id or None)
    view = compose_page(lesson, I18nState.locale, _t, block_dispatcher)
    return rx.box(
        rx.vstack(
            rx.text(_t["app.name"], size="2", weight="bold", color="gray"),
            rx.hstack(
                rx.heading(view.title, size="8", weight="bold"),
                rx.spacer(),
                language_switcher(),
                align="start",
                width="100%",
            ),
            rx.text(view.description, size="5", color="gray", max_width="48rem"),
            spacing="3",
            width="100%",
            padding_bottom="24px",
            margin_bottom="32px",
            border_bottom="1px solid var(--gray-5)",
        ),
        rx.vstack(
            *[reveal(rendered) for rendered in view.blocks],
            spacing="9",
            width="100%",
        ),
        rx.el.footer(
            rx.text(view.footer, size="2", weight="medium", color="gray"),
            margin_top="96px",
            padding_top="32px",
            border_top="1px solid var(--gray-5)",
            text_align="center",
        ),
        max_width="1400px",
        margin_x="auto",
        padding="48px",
        padding_bottom="96px",
    )
