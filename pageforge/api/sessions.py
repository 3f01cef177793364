"""Designer session API endpoints."""

from fastapi import APIRouter, HTTPException

from pageforge.editor import session_manager

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("")
async def list_sessions() -> dict:
    """List open designer sessions, most recently active first."""
    return {"sessions": [s.to_summary() for s in session_manager.get_all()]}


@router.get("/{session_id}")
async def get_session(session_id: str) -> dict:
    """Get a designer session summary."""
    session = session_manager.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return session.to_summary()
