"""Test fixtures for Pageforge.

Every fixture works against the in-memory backend; no server or hosted
database is needed.
"""

from typing import Generator

import pytest

from pageforge.gateway import DocumentGateway, InMemoryBackend
from pageforge.media import MediaDirectory, ResolvedMedia, Track, Video

ALBUM_ID = "album-1"
OTHER_ALBUM_ID = "album-2"
USER_ID = "user-1"


@pytest.fixture
def backend() -> InMemoryBackend:
    """In-memory store seeded with one artist, two albums, tracks and a video."""
    store = InMemoryBackend()
    store.seed("albums", [
        {"id": ALBUM_ID, "title": "Night Drive", "user_id": USER_ID},
        {"id": OTHER_ALBUM_ID, "title": "Daylight", "user_id": USER_ID},
    ])
    store.seed("tracks", [
        {"id": "track-1", "album_id": ALBUM_ID, "title": "Opening",
         "file_url": "https://cdn.example.com/opening.mp3"},
        {"id": "track-2", "album_id": ALBUM_ID, "title": "Closing",
         "file_url": "https://cdn.example.com/closing.mp3"},
    ])
    store.seed("videos", [
        {"id": "video-1", "user_id": USER_ID, "title": "Live at the Club",
         "file_url": "https://cdn.example.com/live.mp4"},
    ])
    return store


@pytest.fixture
def gateway(backend) -> DocumentGateway:
    return DocumentGateway(backend)


@pytest.fixture
def media_directory(backend) -> MediaDirectory:
    return MediaDirectory(backend)


@pytest.fixture
def media() -> ResolvedMedia:
    """Resolved listings matching the seeded backend."""
    return ResolvedMedia.from_lists(
        tracks=[
            Track("track-1", "Opening", "https://cdn.example.com/opening.mp3"),
            Track("track-2", "Closing", "https://cdn.example.com/closing.mp3"),
        ],
        videos=[Video("video-1", "Live at the Club", "https://cdn.example.com/live.mp4")],
    )


@pytest.fixture
def test_client(backend) -> Generator:
    """TestClient for the API and public pages, without the designer UI."""
    from starlette.testclient import TestClient

    from pageforge.app import create_app
    from pageforge.services import configure_services

    configure_services(backend)
    app = create_app()
    with TestClient(app) as client:
        yield client


@pytest.fixture
def api_client(test_client):
    """Alias for test_client."""
    return test_client
