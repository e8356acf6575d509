"""Lesson catalog loader."""

import json
import logging
from pathlib import Path

from lessonpage.models.lesson import LessonContent

_log = logging.getLogger(__name__)

_cache: list[LessonContent] = []
_dir = Path(__file__).parent
LESSONS_PATH = _dir / "lessons.json"


class LessonNotFoundError(LookupError):
    pass


def load_lessons(path: Path = LESSONS_PATH) -> list[LessonContent]:
    """Parse the lesson catalog at *path* into validated models (uncached)."""
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return [LessonContent.model_validate(item) for item in raw]


def get_lessons() -> list[LessonContent]:
    """Return the packaged lessons, loading them into the module cache once."""
    if not _cache:
        _cache.extend(load_lessons())
        _log.debug("Loaded %d lesson(s) from %s", len(_cache), LESSONS_PATH)
    return list(_cache)


def get_lesson(lesson_id: str | None = None) -> LessonContent:
    """Return the lesson with *lesson_id*, or the first lesson when no id is given."""
    lessons = get_lessons()
    if not lesson_id:
        if not lessons:
            raise LessonNotFoundError("The lesson catalog is empty")
        return lessons[0]
    for lesson in lessons:
        if lesson.id == lesson_id:
            return lesson
    raise LessonNotFoundError(f"Lesson '{lesson_id}' not found")
