"""Media collaborator interface (tracks, videos, albums)."""

from .directory import MediaDirectory
from .models import Album, ResolvedMedia, Track, Video

__all__ = [
    "Album",
    "MediaDirectory",
    "ResolvedMedia",
    "Track",
    "Video",
]
