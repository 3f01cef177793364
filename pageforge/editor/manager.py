"""Session manager for tracking open designer sessions."""

import logging
from datetime import datetime, timedelta

from pageforge.gateway import DocumentGateway
from pageforge.media import MediaDirectory

from .session import DesignerSession, NotifyCallback

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages all open designer sessions (one per browser tab)."""

    # Sessions without activity are removed after this
    SESSION_TIMEOUT_SECONDS = 3600

    def __init__(self):
        self._sessions: dict[str, DesignerSession] = {}
        self._session_timeout = timedelta(seconds=self.SESSION_TIMEOUT_SECONDS)

    def register(
        self,
        session_id: str,
        gateway: DocumentGateway,
        media_directory: MediaDirectory,
        notify: NotifyCallback | None = None,
        user_id: str | None = None,
    ) -> DesignerSession:
        """Register a new session or return the existing one."""
        session = self._sessions.get(session_id)
        if session is not None:
            if notify is not None:
                session.notify = notify
            session.update_activity()
            logger.debug(f"Reusing designer session: {session_id}")
            return session

        session = DesignerSession(
            session_id,
            gateway,
            media_directory,
            notify=notify,
            user_id=user_id,
        )
        self._sessions[session_id] = session
        logger.info(f"Registered designer session: {session_id}, total sessions: {len(self._sessions)}")
        return session

    def unregister(self, session_id: str) -> None:
        """Remove a session."""
        if self._sessions.pop(session_id, None) is not None:
            logger.info(f"Unregistered designer session: {session_id}")

    def get(self, session_id: str) -> DesignerSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def get_all(self) -> list[DesignerSession]:
        """Get all sessions, most recently active first."""
        return sorted(self._sessions.values(), key=lambda s: s.last_activity, reverse=True)

    def cleanup_inactive(self) -> int:
        """
        Remove sessions that have been inactive too long.

        Returns:
            Number of sessions removed
        """
        now = datetime.now()
        inactive = [
            sid for sid, session in self._sessions.items()
            if now - session.last_activity > self._session_timeout
        ]
        for sid in inactive:
            logger.info(f"Removing inactive designer session: {sid}")
            del self._sessions[sid]
        return len(inactive)


# Global singleton instance
session_manager = SessionManager()
