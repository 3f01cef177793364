"""Canvas interaction: drag state machine, selection and hit testing."""

from .engine import CanvasEngine, DragSession, DragState, clamp_position, element_at
from .listeners import PointerEvent, PointerListeners

__all__ = [
    "CanvasEngine",
    "DragSession",
    "DragState",
    "PointerEvent",
    "PointerListeners",
    "clamp_position",
    "element_at",
]
