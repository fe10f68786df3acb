# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

from .audio import (
    AacAudioPacket, AacPacketType, AudioTag, AudioTagHeader,
    SoundFormat, SoundRate, SoundSize, SoundType,
)
from .container import Container, decode, load
from .errors import (
    BadSignature, InvalidUtf8, MissingObjectTerminator, NestingTooDeep,
    ParseError, Truncated, UnknownAacPacketType, UnknownScriptValueType,
    UnknownSoundFormat, UnknownTagType,
)
from .header import FileHeader
from .reader import Span
from .script import ScriptTag
from .tags import Body, Tag, TagHeader, TagType
from .video import (
    AvcPacketType, AvcVideoPacket, CodecId, FrameType, VideoTag, VideoTagHeader,
)

__version__ = "0.1.0"
