"""Canvas engine: pointer dragging, selection and hit testing.

State machine:

    IDLE --pointer_down on element--> DRAGGING --pointer up--> IDLE

Selection is orthogonal to the drag state. A pointer-down on an element
selects it and starts a drag session; the element only moves if the pointer
moves before it is released. A pointer-down on empty canvas clears the
selection.

Move/up handlers are registered on the global PointerListeners only while a
drag session is active and removed when it ends.

The engine never edits the elements it reads. Position changes go out
through the `on_element_update(element_id, partial_update)` callback, and
the owner replaces the element by id.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from pageforge.elements import BaseElement, Position

from .listeners import PointerEvent, PointerListeners

logger = logging.getLogger(__name__)

ElementUpdateCallback = Callable[[str, dict[str, Any]], None]


class DragState(str, Enum):
    """Drag states of the canvas engine."""
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class DragSession:
    """An active drag: which element, and where it was grabbed."""

    element_id: str
    offset_x: float
    offset_y: float


def clamp_position(x: float, y: float) -> Position:
    """Clamp a candidate position to the canvas (no negative coordinates)."""
    return Position(x=max(0.0, x), y=max(0.0, y))


def element_at(elements: Sequence[BaseElement], x: float, y: float) -> Optional[BaseElement]:
    """
    Find the topmost element under a canvas point.

    Later elements are drawn on top, so the sequence is searched backwards.

    Args:
        elements: Elements in z-order
        x: Canvas x coordinate
        y: Canvas y coordinate

    Returns:
        Topmost element containing the point, or None
    """
    for element in reversed(elements):
        if element.contains(x, y):
            return element
    return None


class CanvasEngine:
    """
    Pointer interaction over a document's elements.

    Args:
        get_elements: Returns the current elements in z-order
        on_element_update: Mutation channel, called as (element_id, partial_update)
        listeners: Global pointer listener registry (a private one if omitted)
    """

    def __init__(
        self,
        get_elements: Callable[[], Sequence[BaseElement]],
        on_element_update: ElementUpdateCallback,
        listeners: PointerListeners | None = None,
    ):
        self._get_elements = get_elements
        self._on_element_update = on_element_update
        self.listeners = listeners or PointerListeners()

        self._state = DragState.IDLE
        self._selected_id: str | None = None
        self._drag: DragSession | None = None
        self._unsubscribers: list[Callable[[], None]] = []

    # --- State ---

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state == DragState.DRAGGING

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def drag(self) -> DragSession | None:
        return self._drag

    def selected_element(self) -> Optional[BaseElement]:
        """Get the selected element, if it still exists."""
        if self._selected_id is None:
            return None
        for element in self._get_elements():
            if element.id == self._selected_id:
                return element
        return None

    # --- Selection ---

    def select(self, element_id: str | None) -> None:
        """Select an element by id (None clears the selection)."""
        self._selected_id = element_id

    def clear_selection(self) -> None:
        """Clear the selection."""
        self._selected_id = None

    def click(self, x: float, y: float) -> str | None:
        """
        Handle a click without drag intent.

        Selects the topmost element under the point, or clears the selection
        when the click lands on empty canvas.

        Returns:
            Selected element id or None
        """
        hit = element_at(self._get_elements(), x, y)
        self._selected_id = hit.id if hit else None
        return self._selected_id

    def forget(self, element_id: str) -> None:
        """Drop selection and any drag session of a deleted element."""
        if self._drag and self._drag.element_id == element_id:
            self._end_drag()
        if self._selected_id == element_id:
            self._selected_id = None

    # --- Pointer input ---

    def pointer_down(
        self, x: float, y: float, element_id: str | None = None
    ) -> str | None:
        """
        Handle a pointer press on the canvas.

        Args:
            x: Canvas x coordinate
            y: Canvas y coordinate
            element_id: Element grabbed by its drag handle (skips hit testing)

        Returns:
            Id of the element now being dragged, or None on empty canvas
        """
        if self._drag is not None:
            # A lost pointer-up must not leave the previous session's handlers behind
            self._end_drag()

        if element_id is not None:
            hit = next((e for e in self._get_elements() if e.id == element_id), None)
        else:
            hit = element_at(self._get_elements(), x, y)
        if hit is None:
            self._selected_id = None
            return None

        self._selected_id = hit.id
        self._drag = DragSession(
            element_id=hit.id,
            offset_x=x - hit.position.x,
            offset_y=y - hit.position.y,
        )
        self._state = DragState.DRAGGING
        self._unsubscribers = [
            self.listeners.add("move", self._on_pointer_move),
            self.listeners.add("up", self._on_pointer_up),
        ]
        logger.debug(f"Drag start on {hit.id} at ({x}, {y})")
        return hit.id

    def _on_pointer_move(self, event: PointerEvent) -> None:
        drag = self._drag
        if drag is None:
            return
        position = clamp_position(event.x - drag.offset_x, event.y - drag.offset_y)
        self._on_element_update(drag.element_id, {"position": position})

    def _on_pointer_up(self, event: PointerEvent) -> None:
        if self._drag is not None:
            logger.debug(f"Drag end on {self._drag.element_id} at ({event.x}, {event.y})")
        self._end_drag()

    def _end_drag(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._drag = None
        self._state = DragState.IDLE
