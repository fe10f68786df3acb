# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

import enum
from dataclasses import dataclass

from . import reader
from .errors import Truncated
from .reader import Span

class _WithUnknown(enum.Enum):
    """ Unmapped codes fall back to UNKNOWN instead of failing """
    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN

class FrameType(_WithUnknown):
    KEY = 1
    INTER = 2
    DISPOSABLE_INTER = 3
    GENERATED_KEY = 4
    VIDEO_INFO_COMMAND = 5
    UNKNOWN = -1

class CodecId(_WithUnknown):
    # 0 (RGB), 1 (JPEG), 8 (H.263) and 9 (MPEG-4 Part 2) are left as UNKNOWN
    SORENSON_H263 = 2
    SCREEN_VIDEO = 3
    VP6 = 4
    VP6_ALPHA = 5
    SCREEN_VIDEO_V2 = 6
    AVC = 7
    UNKNOWN = -1

class AvcPacketType(_WithUnknown):
    SEQUENCE_HEADER = 0
    NALU = 1
    END_OF_SEQUENCE = 2
    UNKNOWN = -1

VIDEO_TAG_HEADER = reader.make_byte_fmt(
    ["FrameType", "UI4"],
    ["CodecID",   "UI4"],
)

AVC_PACKET_HEADER = [
    ["AVCPacketType",   "UI8"],
    ["CompositionTime", "SI24"],
]
AVC_PACKET_HEADER_SIZE = 4

@dataclass(frozen=True)
class VideoTagHeader:
    frame_type: FrameType
    codec_id: CodecId

@dataclass(frozen=True)
class AvcVideoPacket:
    packet_type: AvcPacketType
    # milliseconds, only nonzero for NALU packets
    composition_time: int
    avc_data: Span

@dataclass(frozen=True)
class VideoTag:
    header: VideoTagHeader
    body: Span

    def avc_packet(self, buf):
        """
        Second decode of the body, meaningful only when
        codec_id is AVC
        """
        f = reader.Reader(buf, self.body.offset, self.body.offset + self.body.length)
        return decode_avc_packet(f, self.body.length)

def decode_video_tag_header(f, size):
    if size < 1:
        raise Truncated(1, f.tell())

    frame_type, codec_id = reader.parse_byte_fmt(f, VIDEO_TAG_HEADER)
    return VideoTagHeader(FrameType(frame_type), CodecId(codec_id))

def decode_video_tag(f, size):
    header = decode_video_tag_header(f, size)
    return VideoTag(header, reader.take_span(f, size - 1))

def decode_avc_packet(f, size):
    if size < AVC_PACKET_HEADER_SIZE:
        raise Truncated(AVC_PACKET_HEADER_SIZE, f.tell())
    reader.check_available(f, size)

    packet_type, composition_time = reader.parse_fields(f, AVC_PACKET_HEADER)
    return AvcVideoPacket(
        AvcPacketType(packet_type),
        composition_time,
        reader.take_span(f, size - AVC_PACKET_HEADER_SIZE),
    )
