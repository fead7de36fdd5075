"""Encoding and decoding of media frames to and from their wire form."""

from __future__ import annotations

import struct

from mediawire.frame import FrameFlags, FrameType, MediaFrame

__all__ = [
    "CodecError",
    "InsufficientData",
    "InvalidFormat",
    "UnsupportedVersion",
    "InvalidFrameType",
    "encode_frame",
    "decode_frame",
]

_HEADER = struct.Struct(">BBQIQQIH6x")
_MAX_PAYLOAD = 0xFFFFFFFF


class CodecError(Exception):
    """Base class for codec failures."""


class InsufficientData(CodecError):
    """The buffer holds fewer bytes than the frame needs."""

    def __init__(self) -> None:
        super().__init__("Insufficient data")


class InvalidFormat(CodecError):
    """The frame cannot be represented in the wire format."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid frame format: {detail}")
        self.detail = detail


class UnsupportedVersion(CodecError):
    """The frame carries a protocol version this codec does not speak."""

    def __init__(self, version: int) -> None:
        super().__init__(f"Unsupported version: {version}")
        self.version = version


class InvalidFrameType(CodecError):
    """The frame-type byte names no known frame type."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Invalid frame type: {value}")
        self.value = value


def encode_frame(frame: MediaFrame) -> bytes:
    """Encode a frame into its wire bytes."""
    payload = bytes(frame.payload)
    if len(payload) > _MAX_PAYLOAD:
        raise InvalidFormat(f"payload of {len(payload)} bytes exceeds 32-bit length")
    try:
        header = _HEADER.pack(
            frame.version,
            int(frame.frame_type),
            frame.user_id,
            frame.stream_id,
            frame.timestamp,
            frame.sequence,
            len(payload),
            frame.flags.to_u16(),
        )
    except struct.error as exc:
        raise InvalidFormat(str(exc)) from exc
    return header + payload


def decode_frame(data: bytes | bytearray | memoryview) -> MediaFrame:
    """Decode one frame from the start of ``data``; trailing bytes are ignored."""
    view = memoryview(data).cast("B")
    if len(view) < MediaFrame.HEADER_SIZE:
        raise InsufficientData()

    (
        version,
        type_byte,
        user_id,
        stream_id,
        timestamp,
        sequence,
        payload_len,
        flag_bits,
    ) = _HEADER.unpack_from(view)

    if version != MediaFrame.VERSION:
        raise UnsupportedVersion(version)
    try:
        frame_type = FrameType(type_byte)
    except ValueError:
        raise InvalidFrameType(type_byte) from None

    end = MediaFrame.HEADER_SIZE + payload_len
    if len(view) < end:
        raise InsufficientData()

    return MediaFrame(
        version=version,
        user_id=user_id,
        stream_id=stream_id,
        frame_type=frame_type,
        timestamp=timestamp,
        sequence=sequence,
        flags=FrameFlags.from_u16(flag_bits),
        payload=bytes(view[MediaFrame.HEADER_SIZE:end]),
    )