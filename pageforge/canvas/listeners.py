"""Global pointer listener registry.

The page-level counterpart of document `mousemove`/`mouseup` listeners: the
UI forwards every pointer move and release here, and only registered
handlers see them.
"""

from dataclasses import dataclass
from typing import Callable, Literal

PointerKind = Literal["move", "up"]


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position in canvas coordinates."""

    x: float
    y: float


PointerHandler = Callable[[PointerEvent], None]


class PointerListeners:
    """Registry of move/up handlers."""

    KINDS: tuple[str, ...] = ("move", "up")

    def __init__(self):
        self._handlers: dict[str, list[PointerHandler]] = {kind: [] for kind in self.KINDS}

    def add(self, kind: PointerKind, handler: PointerHandler) -> Callable[[], None]:
        """
        Register a handler.

        Returns:
            Function that removes the handler again
        """
        if kind not in self._handlers:
            raise ValueError(f"Unknown pointer event kind: {kind!r}")
        self._handlers[kind].append(handler)

        def remove() -> None:
            if handler in self._handlers[kind]:
                self._handlers[kind].remove(handler)

        return remove

    def dispatch(self, kind: PointerKind, x: float, y: float) -> int:
        """
        Deliver a pointer event to the handlers registered for `kind`.

        Returns:
            Number of handlers called
        """
        event = PointerEvent(x=x, y=y)
        # Handlers may deregister themselves while running
        handlers = list(self._handlers.get(kind, ()))
        for handler in handlers:
            handler(event)
        return len(handlers)

    def count(self, kind: PointerKind | None = None) -> int:
        """Number of registered handlers (of one kind, or all)."""
        if kind is not None:
            return len(self._handlers.get(kind, ()))
        return sum(len(handlers) for handlers in self._handlers.values())
