"""Open/closed state machine for the language switcher panel."""

import enum


class DropdownStatus(enum.StrEnum):
    CLOSED = "closed"
    OPEN = "open"


class DropdownEvent(enum.StrEnum):
    TOGGLE = "toggle"
    SELECT = "select"
    DISMISS = "dismiss"


_TRANSITIONS: dict[tuple[DropdownStatus, DropdownEvent], DropdownStatus] = {
    (DropdownStatus.CLOSED, DropdownEvent.TOGGLE): DropdownStatus.OPEN,
    (DropdownStatus.OPEN, DropdownEvent.TOGGLE): DropdownStatus.CLOSED,
    (DropdownStatus.CLOSED, DropdownEvent.SELECT): DropdownStatus.CLOSED,
    (DropdownStatus.OPEN, DropdownEvent.SELECT): DropdownStatus.CLOSED,
    # The scrim only exists while open; dismissing a closed panel changes nothing.
    (DropdownStatus.CLOSED, DropdownEvent.DISMISS): DropdownStatus.CLOSED,
    (DropdownStatus.OPEN, DropdownEvent.DISMISS): DropdownStatus.CLOSED,
}


def transition(status: str, event: str) -> DropdownStatus:
    """Return the status reached from *status* on *event*.

    Accepts plain strings so Reflex state fields can be passed directly.
    """
    return _TRANSITIONS[(DropdownStatus(status), DropdownEvent(event))]


class Dropdown:
    def __init__(self, status: str = DropdownStatus.CLOSED):
        self.status = DropdownStatus(status)

    @property
    def is_open(self) -> bool:
        return self.status == DropdownStatus.OPEN

    def toggle(self) -> DropdownStatus:
        self.status = transition(self.status, DropdownEvent.TOGGLE)
        return self.status

    def select(self) -> DropdownStatus:
        self.status = transition(self.status, DropdownEvent.SELECT)
        return self.status

    def dismiss(self) -> DropdownStatus:
        self.status = transition(self.status, DropdownEvent.DISMISS)
        return self.status
