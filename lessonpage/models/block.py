import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BlockType(enum.StrEnum):
    COMMAND_LAB = "command_lab"


class Block(BaseModel):
    """One unit of lesson content.

    ``type`` is kept as a plain string so that blocks of types nobody has
    registered a renderer for still load; the dispatcher skips them.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    payload: dict[str, Any] = Field(default_factory=dict)


class CommandStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    instruction: dict[str, str]
    command: str
    output: str = ""


class CommandLabPayload(BaseModel):
    """Payload of a ``command_lab`` block."""

    model_config = ConfigDict(frozen=True)

    title: dict[str, str]
    steps: tuple[CommandStep, ...] = ()
