"""Media data models (read-only views of the external media collaborator)."""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional


@dataclass(frozen=True)
class Track:
    """An album track."""

    id: str
    title: str
    file_url: str = ""

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Track":
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            file_url=data.get("file_url") or "",
        )

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {"id": self.id, "title": self.title, "file_url": self.file_url}


@dataclass(frozen=True)
class Video:
    """A video owned by an artist."""

    id: str
    title: str
    file_url: str = ""

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Video":
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            file_url=data.get("file_url") or "",
        )

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {"id": self.id, "title": self.title, "file_url": self.file_url}


@dataclass(frozen=True)
class Album:
    """An album as needed by the designer's album picker."""

    id: str
    title: str
    user_id: str | None = None
    artwork_url: str | None = None

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Album":
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            user_id=data.get("user_id"),
            artwork_url=data.get("artwork_url"),
        )

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "id": self.id,
            "title": self.title,
            "user_id": self.user_id,
            "artwork_url": self.artwork_url,
        }


@dataclass
class ResolvedMedia:
    """Media listings used to resolve element references at render time."""

    tracks: dict[str, Track] = field(default_factory=dict)
    videos: dict[str, Video] = field(default_factory=dict)

    @classmethod
    def from_lists(
        cls,
        tracks: Iterable[Track] = (),
        videos: Iterable[Video] = (),
    ) -> "ResolvedMedia":
        """Index track and video lists by id."""
        return cls(
            tracks={track.id: track for track in tracks},
            videos={video.id: video for video in videos},
        )

    def track(self, track_id: str | None) -> Optional[Track]:
        """Resolve a track reference (None when empty or missing)."""
        if not track_id:
            return None
        return self.tracks.get(track_id)

    def video(self, video_id: str | None) -> Optional[Video]:
        """Resolve a video reference (None when empty or missing)."""
        if not video_id:
            return None
        return self.videos.get(video_id)

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "tracks": [track.to_dict() for track in self.tracks.values()],
            "videos": [video.to_dict() for video in self.videos.values()],
        }
