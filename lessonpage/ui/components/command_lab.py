"""Command lab exercise — renders a ``command_lab`` block for a language."""

import reflex as rx

from lessonpage.models.block import Block, CommandLabPayload, CommandStep
from lessonpage.ui.components.localized import localized
from lessonpage.ui.state.i18n_state import I18nState

_t = I18nState.translations


def _step(number: int, step: CommandStep, lang: rx.Var[str] | str) -> rx.Component:
    return rx.vstack(
        rx.text(_t["command_lab.step"], f" {number}", size="1", weight="bold", color="gray"),
        rx.text(localized(step.instruction, lang), size="3"),
        rx.code(f"$ {step.command}", variant="soft", size="3"),
        *(
            [
                rx.text(_t["command_lab.output"], size="1", color="gray"),
                rx.code(step.output, variant="ghost", size="2", white_space="pre"),
            ]
            if step.output
            else []
        ),
        spacing="1",
        width="100%",
    )


def command_lab(block: Block, lang: rx.Var[str] | str) -> rx.Component:
    payload = CommandLabPayload.model_validate(block.payload)
    return rx.card(
        rx.vstack(
            rx.hstack(
                rx.icon("terminal", size=18),
                rx.badge(_t["command_lab.badge"]),
                spacing="2",
                align="center",
            ),
            rx.heading(localized(payload.title, lang), size="5"),
            *[_step(i, step, lang) for i, step in enumerate(payload.steps, start=1)],
            spacing="4",
            width="100%",
        ),
        id=f"command-lab-{block.id}",
        width="100%",
    )
