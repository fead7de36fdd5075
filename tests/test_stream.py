from mediawire.stream import MediaStream, StreamConfig


def make_config():
    return StreamConfig(user_id=42, stream_id=7, max_bitrate=500_000, is_audio=True)


def test_new_stream_counters_start_at_zero():
    stream = MediaStream(make_config())
    assert (stream.next_sequence, stream.frames_received, stream.bytes_received) == (0, 0, 0)


def test_ids_come_from_config():
    config = make_config()
    stream = MediaStream(config)
    assert stream.user_id == config.user_id
    assert stream.stream_id == config.stream_id


def test_ids_follow_config_changes():
    stream = MediaStream(make_config())
    stream.config.stream_id = 11
    assert stream.stream_id == 11


def test_counters_are_mutable_state():
    stream = MediaStream(make_config())
    stream.frames_received += 2
    stream.bytes_received += 1500
    stream.next_sequence = 3
    assert stream.frames_received == 2
    assert stream.bytes_received == 1500
    assert stream.next_sequence == 3
    assert stream.config == make_config()