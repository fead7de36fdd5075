import dataclasses

import pytest

from mediawire.frame import FrameFlags, FrameType, MediaFrame


def test_frame_type_wire_values():
    assert [int(t) for t in FrameType] == [0x00, 0x01, 0x02]
    assert FrameType(0x01) is FrameType.VIDEO_KEY


def test_default_flags_are_clear():
    flags = FrameFlags()
    assert flags.to_u16() == 0
    assert not flags.end_of_frame
    assert not flags.discardable


def test_end_of_frame_bit():
    assert FrameFlags(end_of_frame=True).to_u16() == 0x0001


def test_discardable_bit():
    assert FrameFlags(discardable=True).to_u16() == 0x0002


@pytest.mark.parametrize("eof", [False, True])
@pytest.mark.parametrize("disc", [False, True])
def test_flags_round_trip(eof, disc):
    flags = FrameFlags(end_of_frame=eof, discardable=disc)
    assert FrameFlags.from_u16(flags.to_u16()) == flags


def test_from_u16_ignores_unknown_bits():
    flags = FrameFlags.from_u16(0xFFFC)
    assert flags == FrameFlags()


def test_from_u16_keeps_known_bits_among_unknown():
    flags = FrameFlags.from_u16(0xFFFF)
    assert flags.end_of_frame and flags.discardable


def test_flags_are_immutable():
    flags = FrameFlags()
    with pytest.raises(dataclasses.FrozenInstanceError):
        flags.end_of_frame = True
    assert flags.end_of_frame is False
    assert flags.to_u16() == 0


def test_media_frame_defaults_and_constants():
    frame = MediaFrame(
        version=MediaFrame.VERSION,
        user_id=7,
        stream_id=9,
        frame_type=FrameType.AUDIO,
        timestamp=100,
        sequence=5,
    )
    assert frame.version == 1
    assert MediaFrame.HEADER_SIZE == 42
    assert frame.payload == b""
    assert frame.flags == FrameFlags()