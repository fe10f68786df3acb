import mmap

import pytest

import flvbuild
import flvparse
from flvparse import (
    AvcPacketType, BadSignature, CodecId, FrameType, ParseError, SoundFormat,
    TagType, Truncated, decode,
)
from flvparse.header import decode_file_header
from flvparse.reader import Reader
from flvparse.script import EcmaArray


def test_file_header():
    hdr = decode_file_header(Reader(flvbuild.file_header()))
    assert hdr.signature == b"FLV"
    assert hdr.version == 1
    assert hdr.flags == 0b00000101
    assert hdr.has_audio
    assert hdr.has_video
    assert hdr.data_offset == 9


@pytest.mark.parametrize("flags,has_audio,has_video", [
    (0b000, False, False),
    (0b001, False, True),
    (0b100, True, False),
    (0b11111010, False, False),
])
def test_file_header_flags(flags, has_audio, has_video):
    hdr = decode_file_header(Reader(flvbuild.file_header(flags=flags)))
    assert (hdr.has_audio, hdr.has_video) == (has_audio, has_video)


def test_bad_signature():
    with pytest.raises(BadSignature) as exc:
        decode(flvbuild.file_header(signature=b"FLX") + b"\x00" * 4)
    assert exc.value.signature == b"FLX"


@pytest.mark.parametrize("data", [b"", b"FLV", b"FLV\x01\x05\x00\x00\x00"])
def test_short_input_fails_at_file_header(data):
    with pytest.raises(Truncated) as exc:
        decode(data)
    assert exc.value.needed == 9


def test_errors_share_a_base():
    assert issubclass(Truncated, ParseError)
    assert issubclass(ParseError, ValueError)


def test_sample_file(sample_flv):
    flv = decode(sample_flv)
    assert flv.header.has_audio and flv.header.has_video
    assert flv.header.data_offset == 9
    assert flv.body.first_previous_tag_size == 0
    assert [size for tag, size in flv.body.tags] == [11 + 1030, 11 + 48, 11 + 7]
    assert flv.is_valid, flv.notes

    (script, _), (video, _), (audio, _) = flv.body.tags
    assert script.header.tag_type is TagType.SCRIPT
    assert script.data.name == "onMetaData"
    assert isinstance(script.data.value, EcmaArray)
    assert script.data.value.properties[0].name == "duration"

    assert video.data.header.frame_type is FrameType.KEY
    assert video.data.header.codec_id is CodecId.AVC
    assert video.data.body.length == 47
    assert video.data.avc_packet(sample_flv).packet_type is AvcPacketType.SEQUENCE_HEADER

    assert audio.data.header.sound_format is SoundFormat.AAC
    assert audio.data.body.length == 6
    assert audio.data.body.tobytes(sample_flv) == bytes(range(6))


def test_decode_is_idempotent(sample_flv):
    assert decode(sample_flv) == decode(sample_flv)


def test_accepts_other_buffers(sample_flv, tmp_path):
    expected = decode(sample_flv)
    assert decode(bytearray(sample_flv)) == expected
    assert decode(memoryview(sample_flv)) == expected

    path = tmp_path / "sample.flv"
    path.write_bytes(sample_flv)
    with open(path, "rb") as f:
        with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as m:
            assert decode(m).body.count(TagType.AUDIO) == 1


def test_truncated_file_keeps_complete_tags(sample_flv):
    flv = decode(sample_flv[:-5])
    assert len(flv.body.tags) == 2
    assert not flv.is_valid


def test_empty_audio_tag_ends_the_stream():
    good = flvbuild.tag(8, flvbuild.audio_payload(7))
    flv = decode(flvbuild.flv(good, flvbuild.tag(8, b""), good))
    assert len(flv.body.tags) == 1
    assert flv.body.tags[0][1] == 11 + 7
    assert [note for note in flv.notes if "Incomplete tag" in note]


def test_ecma_count_mismatch_is_only_noted():
    payload = flvbuild.script_payload(
        "onMetaData", flvbuild.amf_ecma_array(("duration", flvbuild.amf_number(1.0)), count=0))
    flv = decode(flvbuild.flv(flvbuild.tag(18, payload)))
    assert len(flv.body.tags) == 1
    assert len(flv.notes) == 1


def test_load(sample_flv, tmp_path):
    path = tmp_path / "sample.flv"
    path.write_bytes(sample_flv)
    flv, data = flvparse.load(str(path))
    assert data == sample_flv
    assert flv == decode(sample_flv)
