"""Binary framing for audio and video media frames, with per-stream receive state."""

__version__ = "0.1.0"
__all__ = ["codec", "frame", "stream"]