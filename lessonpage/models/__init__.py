from lessonpage.models.block import Block, BlockType, CommandLabPayload, CommandStep
from lessonpage.models.language import Language
from lessonpage.models.lesson import LessonContent, lesson_key

__all__ = [
    "Block",
    "BlockType",
    "CommandLabPayload",
    "CommandStep",
    "Language",
    "LessonContent",
    "lesson_key",
]
