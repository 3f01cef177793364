"""Designer sessions."""

from .manager import SessionManager, session_manager
from .session import DesignerSession, NotifyCallback

__all__ = ["DesignerSession", "NotifyCallback", "SessionManager", "session_manager"]
