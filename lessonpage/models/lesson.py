from pydantic import BaseModel, ConfigDict, field_validator

from lessonpage.models.block import Block


def lesson_key(lesson_id: str, field: str) -> str:
    """Translation key under which a lesson's localized *field* is published."""
    return f"lesson.{lesson_id}.{field}"


class LessonContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: dict[str, str]
    description: dict[str, str]
    blocks: tuple[Block, ...] = ()

    @field_validator("blocks")
    @classmethod
    def _unique_block_ids(cls, blocks: tuple[Block, ...]) -> tuple[Block, ...]:
        seen: set[str] = set()
        for block in blocks:
            if block.id in seen:
                raise ValueError(f"Duplicate block id '{block.id}'")
            seen.add(block.id)
        return blocks

    def strings(self, locale: str) -> dict[str, str]:
        """Return this lesson's title/description as translation entries for *locale*.

        Fields not localized for *locale* are left out rather than guessed.
        """
        result = {}
        if locale in self.title:
            result[lesson_key(self.id, "title")] = self.title[locale]
        if locale in self.description:
            result[lesson_key(self.id, "description")] = self.description[locale]
        return result
