"""Page composition — localized header/footer plus dispatched blocks."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from lessonpage.i18n import get_translations
from lessonpage.models.lesson import LessonContent, lesson_key
from lessonpage.services.block_dispatcher import BlockDispatcher, RenderedBlock
from lessonpage.services.locale_store import current_locale_store


@dataclass(frozen=True)
class PageView:
    title: Any
    description: Any
    footer: Any
    blocks: list[RenderedBlock]


def compose_page(
    lesson: LessonContent,
    lang: Any,
    t: Mapping[str, Any] | Any,
    dispatcher: BlockDispatcher,
) -> PageView:
    """Assemble the page for *lesson*.

    *lang* and *t* are either plain values or reactive vars; both only need
    to support ``t[key]``.
    """
    return PageView(
        title=t[lesson_key(lesson.id, "title")],
        description=t[lesson_key(lesson.id, "description")],
        footer=t["page.footer"],
        blocks=dispatcher.dispatch(lesson.blocks, lang),
    )


def render_current_page(lesson: LessonContent, dispatcher: BlockDispatcher) -> PageView:
    """Compose *lesson* in the language held by the installed locale store."""
    lang = current_locale_store().get_language()
    return compose_page(lesson, lang, get_translations(lang), dispatcher)
