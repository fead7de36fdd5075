"""Media stream configuration and per-stream receive state."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["StreamConfig", "MediaStream"]


@dataclass
class StreamConfig:
    """Configuration of one media stream."""

    user_id: int
    stream_id: int
    max_bitrate: int
    is_audio: bool


@dataclass
class MediaStream:
    """Receive state of one media stream."""

    config: StreamConfig
    next_sequence: int = 0
    frames_received: int = 0
    bytes_received: int = 0

    @property
    def user_id(self) -> int:
        """The participant who publishes this stream."""
        return self.config.user_id

    @property
    def stream_id(self) -> int:
        """The subscriber-chosen stream identifier."""
        return self.config.stream_id