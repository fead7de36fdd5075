# mediawire

A small library with no dependencies. It packs audio and video frames into a
compact binary format and reads them back out.

## Frame layout

Every frame starts with a 42-byte header (`MediaFrame.HEADER_SIZE`). The header
is big-endian throughout, and the payload follows it.

| Field          | Size    |
|----------------|---------|
| Version        | 1 byte  |
| Frame type     | 1 byte  |
| User ID        | 8 bytes |
| Stream ID      | 4 bytes |
| Timestamp (µs) | 8 bytes |
| Sequence       | 8 bytes |
| Payload length | 4 bytes |
| Flags          | 2 bytes |
| Reserved       | 6 bytes |

The frame types are:

- `FrameType.AUDIO` (0x00)
- `FrameType.VIDEO_KEY` (0x01)
- `FrameType.VIDEO_DELTA` (0x02)

`FrameFlags` holds two flags:

- `end_of_frame` is bit 0.
- `discardable` is bit 1.

`FrameFlags.to_u16()` packs the flags into the 16-bit wire value.
`FrameFlags.from_u16(value)` unpacks them and ignores any unknown bits.

## Installation

```
pip install mediawire
```

## Usage

```python
from mediawire.frame import FrameFlags, FrameType, MediaFrame
from mediawire.codec import decode_frame, encode_frame

frame = MediaFrame(
    version=MediaFrame.VERSION,
    user_id=42,
    stream_id=7,
    frame_type=FrameType.VIDEO_KEY,
    timestamp=1_700_000_000_000_000,
    sequence=1,
    flags=FrameFlags(end_of_frame=True),
    payload=b"\x01\x02\x03",
)

data = encode_frame(frame)
assert len(data) == MediaFrame.HEADER_SIZE + 3

decoded = decode_frame(data)
assert decoded.payload == b"\x01\x02\x03"
```

`decode_frame` accepts `bytes`, `bytearray` or `memoryview`. It decodes one
frame from the start of the buffer and ignores any bytes after that frame.

## Errors

All errors are subclasses of `mediawire.codec.CodecError`.

`decode_frame` raises:

- `InsufficientData` when there are too few bytes for the header or for the
  payload length the header declares.
- `UnsupportedVersion` when the version byte is not `MediaFrame.VERSION` (1).
- `InvalidFrameType` when the frame-type byte is not a known `FrameType`.

`encode_frame` raises `InvalidFormat` when the frame cannot be written in the
wire format. That happens when a field does not fit its header width, or when
the payload is longer than a 32-bit length allows.

## Stream bookkeeping

```python
from mediawire.stream import MediaStream, StreamConfig

stream = MediaStream(StreamConfig(user_id=42, stream_id=7, max_bitrate=2_000_000, is_audio=False))
stream.user_id            # 42
stream.stream_id          # 7
stream.next_sequence      # 0
stream.frames_received    # 0
stream.bytes_received     # 0
```

`MediaStream` only holds these counters; it does not update them on its own.

## What this package does not do

mediawire covers only framing. It does not:

- open network connections or carry frames over any transport;
- encrypt payloads;
- provide any command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```