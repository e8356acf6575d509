"""Registered block renderers and the reveal wrapper for dispatched blocks."""

import reflex as rx

from lessonpage.config import settings
from lessonpage.models.block import BlockType
from lessonpage.services.block_dispatcher import BlockDispatcher, RenderedBlock
from lessonpage.ui.components.command_lab import command_lab

block_dispatcher = BlockDispatcher(reveal_step_ms=settings.reveal_step_ms)
block_dispatcher.register(BlockType.COMMAND_LAB, command_lab)


def reveal(rendered: RenderedBlock) -> rx.Component:
    return rx.box(
        rx.box(rendered.content, width="100%", overflow_x="auto"),
        id=f"block-{rendered.block_id}",
        class_name="reveal",
        animation_delay=f"{rendered.delay_ms}ms",
        width="100%",
    )
