"""Block dispatcher — maps a block's type tag to the renderer registered for it."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from lessonpage.models.block import Block

_log = logging.getLogger(__name__)

# renderer(block, lang) -> renderable unit; lang is a code or a reactive var
BlockRenderer = Callable[[Block, Any], Any]


@dataclass(frozen=True)
class RenderedBlock:
    block_id: str
    block_type: str
    index: int
    delay_ms: int
    content: Any


class BlockDispatcher:
    """Renderer registry keyed by block type tag.

    New block types are supported by registering a renderer; an existing
    registration can never be replaced.
    """

    def __init__(self, reveal_step_ms: int = 100):
        if reveal_step_ms < 0:
            raise ValueError("reveal_step_ms must be >= 0")
        self.reveal_step_ms = reveal_step_ms
        self._renderers: dict[str, BlockRenderer] = {}

    @property
    def registered_types(self) -> list[str]:
        return list(self._renderers)

    def register(self, block_type: str, renderer: BlockRenderer) -> None:
        tag = str(block_type)
        if tag in self._renderers:
            raise ValueError(f"A renderer for block type '{tag}' is already registered")
        self._renderers[tag] = renderer

    def renderer(self, block_type: str) -> Callable[[BlockRenderer], BlockRenderer]:
        """Decorator form of :meth:`register`."""

        def decorator(fn: BlockRenderer) -> BlockRenderer:
            self.register(block_type, fn)
            return fn

        return decorator

    def renderer_for(self, block_type: str) -> BlockRenderer | None:
        return self._renderers.get(str(block_type))

    def dispatch(self, blocks: Iterable[Block], lang: Any) -> list[RenderedBlock]:
        """Render *blocks* in sequence order, skipping types with no renderer.

        Each unit's reveal delay is proportional to the block's position in
        *blocks*, so delays never decrease along the output.
        """
        rendered = []
        for index, block in enumerate(blocks):
            renderer = self._renderers.get(block.type)
            if renderer is None:
                _log.debug("No renderer for block '%s' of type '%s'; skipped", block.id, block.type)
                continue
            rendered.append(
                RenderedBlock(
                    block_id=block.id,
                    block_type=block.type,
                    index=index,
                    delay_ms=index * self.reveal_step_ms,
                    content=renderer(block, lang),
                )
            )
        return rendered
