"""Media lookups used to resolve and pick track/video references.

Tracks belong to an album; videos belong to the album's owner, so video
lookups go through the album record first.
"""

import logging

from pageforge.errors import GatewayError
from pageforge.gateway.backends import PersistenceBackend

from .models import Album, ResolvedMedia, Track, Video

logger = logging.getLogger(__name__)


class MediaDirectory:
    """Read-only media queries against the persistence backend."""

    TRACKS_TABLE = "tracks"
    VIDEOS_TABLE = "videos"
    ALBUMS_TABLE = "albums"

    def __init__(self, backend: PersistenceBackend):
        self._backend = backend

    async def list_tracks(self, album_id: str) -> list[Track]:
        """List the tracks of an album."""
        rows = await self._backend.select(self.TRACKS_TABLE, {"album_id": album_id})
        return [Track.from_record(row) for row in rows]

    async def list_videos(self, owner_id: str) -> list[Video]:
        """List the videos uploaded by a user."""
        rows = await self._backend.select(self.VIDEOS_TABLE, {"user_id": owner_id})
        return [Video.from_record(row) for row in rows]

    async def get_album(self, album_id: str) -> Album | None:
        """Get an album by id."""
        row = await self._backend.select_one(self.ALBUMS_TABLE, {"id": album_id})
        return Album.from_record(row) if row else None

    async def album_owner(self, album_id: str) -> str | None:
        """Get the user id owning an album."""
        album = await self.get_album(album_id)
        return album.user_id if album else None

    async def list_albums(self, user_id: str) -> list[Album]:
        """List a user's albums ordered by title."""
        rows = await self._backend.select(
            self.ALBUMS_TABLE, {"user_id": user_id}, order="title"
        )
        return [Album.from_record(row) for row in rows]

    async def resolve_for_album(self, album_id: str) -> ResolvedMedia:
        """
        Fetch everything needed to render an album's landing page.

        Lookup failures are logged and yield empty listings: elements then
        render their "not found" placeholders instead of failing the page.

        Args:
            album_id: Album whose tracks (and owner's videos) to load

        Returns:
            ResolvedMedia indexed by id
        """
        tracks: list[Track] = []
        videos: list[Video] = []

        try:
            tracks = await self.list_tracks(album_id)
        except GatewayError as e:
            logger.warning(f"Error fetching tracks for album {album_id}: {e}")

        try:
            owner_id = await self.album_owner(album_id)
            if owner_id:
                videos = await self.list_videos(owner_id)
        except GatewayError as e:
            logger.warning(f"Error fetching videos for album {album_id}: {e}")

        return ResolvedMedia.from_lists(tracks, videos)
