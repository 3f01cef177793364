"""
Media player elements.

Both hold a reference into a media listing owned by an external collaborator
and are resolved at render time:
- MusicPlayerElement: `trackId` into the album's tracks
- VideoElement: `videoId` into the album owner's videos

References are kept verbatim even when they no longer resolve.
"""

from typing import Literal

from pydantic import Field

from .base import BaseElement, ElementProperties


class MusicPlayerProperties(ElementProperties):
    """Track reference of a music player."""
    track_id: str = Field(default='', alias='trackId')


class VideoProperties(ElementProperties):
    """Video reference of a video player."""
    video_id: str = Field(default='', alias='videoId')


class MusicPlayerElement(BaseElement):
    """Audio player for one album track."""

    element_type: Literal['music_player'] = Field(default='music_player', alias='type')
    properties: MusicPlayerProperties = Field(default_factory=MusicPlayerProperties)


class VideoElement(BaseElement):
    """Video player for one of the album owner's videos."""

    element_type: Literal['video'] = Field(default='video', alias='type')
    properties: VideoProperties = Field(default_factory=VideoProperties)
