"""Media frame types: frame kinds, flags and the frame record itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

__all__ = ["FrameType", "FrameFlags", "MediaFrame"]

_END_OF_FRAME = 0x0001
_DISCARDABLE = 0x0002


class FrameType(IntEnum):
    """Kind of media carried by a frame; the value is its wire byte."""

    AUDIO = 0x00
    VIDEO_KEY = 0x01
    VIDEO_DELTA = 0x02


@dataclass(frozen=True)
class FrameFlags:
    """Per-frame flag bits."""

    end_of_frame: bool = False
    discardable: bool = False

    def to_u16(self) -> int:
        """Pack the flags into their 16-bit wire form."""
        value = 0
        if self.end_of_frame:
            value |= _END_OF_FRAME
        if self.discardable:
            value |= _DISCARDABLE
        return value

    @classmethod
    def from_u16(cls, value: int) -> FrameFlags:
        """Unpack flags from their 16-bit wire form; unknown bits are ignored."""
        return cls(
            end_of_frame=bool(value & _END_OF_FRAME),
            discardable=bool(value & _DISCARDABLE),
        )


@dataclass
class MediaFrame:
    """A media frame with its metadata.

    Wire layout (42-byte header, big-endian): version (1), frame type (1),
    user id (8), stream id (4), timestamp in microseconds (8), sequence (8),
    payload length (4), flags (2), reserved zeros (6), then the payload.
    """

    HEADER_SIZE: ClassVar[int] = 42
    VERSION: ClassVar[int] = 1

    version: int
    user_id: int
    stream_id: int
    frame_type: FrameType
    timestamp: int
    sequence: int
    flags: FrameFlags = field(default_factory=FrameFlags)
    payload: bytes = b""