# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

import enum
from dataclasses import dataclass

from . import reader
from .errors import Truncated, UnknownSoundFormat, UnknownAacPacketType
from .reader import Span

class SoundFormat(enum.Enum):
    PCM_PLATFORM_ENDIAN = 0
    ADPCM = 1
    MP3 = 2
    PCM_LITTLE_ENDIAN = 3
    NELLYMOSER_16KHZ_MONO = 4
    NELLYMOSER_8KHZ_MONO = 5
    NELLYMOSER = 6
    PCM_A_LAW = 7
    PCM_MU_LAW = 8
    RESERVED = 9
    AAC = 10
    SPEEX = 11
    # 12 and 13 are not assigned
    MP3_8KHZ = 14
    DEVICE_SPECIFIC = 15

class SoundRate(enum.Enum):
    RATE_5_5KHZ = 0
    RATE_11KHZ = 1
    RATE_22KHZ = 2
    RATE_44KHZ = 3

class SoundSize(enum.Enum):
    BITS_8 = 0
    BITS_16 = 1

class SoundType(enum.Enum):
    MONO = 0
    STEREO = 1

class AacPacketType(enum.Enum):
    SEQUENCE_HEADER = 0
    RAW = 1

AUDIO_TAG_HEADER = reader.make_byte_fmt(
    ["SoundFormat", "UI4"],
    ["SoundRate",   "UI2"],
    ["SoundSize",   "UI1"],
    ["SoundType",   "UI1"],
)

@dataclass(frozen=True)
class AudioTagHeader:
    sound_format: SoundFormat
    sound_rate: SoundRate
    sound_size: SoundSize
    sound_type: SoundType

@dataclass(frozen=True)
class AacAudioPacket:
    packet_type: AacPacketType
    aac_data: Span

@dataclass(frozen=True)
class AudioTag:
    header: AudioTagHeader
    body: Span

    def aac_packet(self, buf):
        """
        Second decode of the body, meaningful only when
        sound_format is AAC
        """
        f = reader.Reader(buf, self.body.offset, self.body.offset + self.body.length)
        return decode_aac_packet(f, self.body.length)

def decode_audio_tag_header(f, size):
    if size < 1:
        raise Truncated(1, f.tell())

    sound_format, sound_rate, sound_size, sound_type = reader.parse_byte_fmt(f, AUDIO_TAG_HEADER)
    try:
        sound_format = SoundFormat(sound_format)
    except ValueError:
        raise UnknownSoundFormat(sound_format) from None

    return AudioTagHeader(
        sound_format,
        SoundRate(sound_rate),
        SoundSize(sound_size),
        SoundType(sound_type),
    )

def decode_audio_tag(f, size):
    header = decode_audio_tag_header(f, size)
    return AudioTag(header, reader.take_span(f, size - 1))

def decode_aac_packet(f, size):
    if size < 1:
        raise Truncated(1, f.tell())
    reader.check_available(f, size)

    val = reader.parse_byte(f)
    try:
        packet_type = AacPacketType(val)
    except ValueError:
        raise UnknownAacPacketType(val) from None

    return AacAudioPacket(packet_type, reader.take_span(f, size - 1))
