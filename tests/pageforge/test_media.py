"""Tests for the media directory."""

import pytest

from pageforge.errors import GatewayError
from pageforge.gateway import InMemoryBackend
from pageforge.media import MediaDirectory, ResolvedMedia, Track


class TestMediaDirectory:
    """Tests for MediaDirectory lookups."""

    @pytest.mark.asyncio
    async def test_list_tracks(self, media_directory):
        tracks = await media_directory.list_tracks("album-1")
        assert [t.title for t in tracks] == ["Opening", "Closing"]

    @pytest.mark.asyncio
    async def test_album_owner_and_videos(self, media_directory):
        assert await media_directory.album_owner("album-1") == "user-1"
        assert await media_directory.album_owner("nope") is None
        videos = await media_directory.list_videos("user-1")
        assert videos[0].id == "video-1"

    @pytest.mark.asyncio
    async def test_list_albums_sorted_by_title(self, media_directory):
        albums = await media_directory.list_albums("user-1")
        assert [a.title for a in albums] == ["Daylight", "Night Drive"]

    @pytest.mark.asyncio
    async def test_resolve_for_album(self, media_directory):
        resolved = await media_directory.resolve_for_album("album-1")
        assert set(resolved.tracks) == {"track-1", "track-2"}
        assert resolved.video("video-1").title == "Live at the Club"

    @pytest.mark.asyncio
    async def test_resolve_failure_gives_empty_listing(self):
        class Unreachable(InMemoryBackend):
            async def select(self, table, filters=None, order=None, limit=None):
                raise GatewayError("timeout")

        resolved = await MediaDirectory(Unreachable()).resolve_for_album("album-1")
        assert resolved.tracks == {}
        assert resolved.videos == {}


class TestResolvedMedia:
    """Tests for reference resolution."""

    def test_empty_and_missing_ids(self):
        media = ResolvedMedia.from_lists(tracks=[Track("t1", "One")])
        assert media.track("") is None
        assert media.track("t2") is None
        assert media.track("t1").title == "One"
