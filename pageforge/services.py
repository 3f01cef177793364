"""Process-wide service instances (backend, gateway, media directory)."""

from pageforge.gateway import DocumentGateway, PersistenceBackend, create_backend
from pageforge.media import MediaDirectory

_backend: PersistenceBackend | None = None
_gateway: DocumentGateway | None = None
_media_directory: MediaDirectory | None = None


def configure_services(backend: PersistenceBackend) -> None:
    """Replace the shared backend (and everything built on it)."""
    global _backend, _gateway, _media_directory
    _backend = backend
    _gateway = DocumentGateway(backend)
    _media_directory = MediaDirectory(backend)


def get_backend() -> PersistenceBackend:
    if _backend is None:
        configure_services(create_backend())
    return _backend


def get_gateway() -> DocumentGateway:
    if _gateway is None:
        configure_services(get_backend())
    return _gateway


def get_media_directory() -> MediaDirectory:
    if _media_directory is None:
        configure_services(get_backend())
    return _media_directory


async def close_services() -> None:
    """Close the shared backend's connections."""
    global _backend, _gateway, _media_directory
    if _backend is not None:
        await _backend.aclose()
    _backend = _gateway = _media_directory = None
