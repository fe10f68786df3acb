# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

# FLV specification: http://download.macromedia.com/f4v/video_file_format_spec_v10_1.pdf

import enum
import logging
from dataclasses import dataclass
from typing import Tuple, Union

from . import reader
from .audio import AudioTag, decode_audio_tag
from .errors import Truncated, UnknownTagType
from .script import ScriptTag, check_script_tag, decode_script_tag
from .video import VideoTag, decode_video_tag

logger = logging.getLogger(__name__)

class TagType(enum.Enum):
    AUDIO = 8
    VIDEO = 9
    SCRIPT = 18

FLV_TAG_HEADER = [
    ["TagType",   "UI8"],
    ["DataSize",  "UI24"],
    ["Timestamp", "UI24"],
    ["TimestampExtended", "UI8"],
    ["StreamID",  "UI24"],
]
TAG_HEADER_SIZE = 11

@dataclass(frozen=True)
class TagHeader:
    tag_type: TagType
    data_size: int
    # milliseconds, TimestampExtended is the upper byte
    timestamp: int
    stream_id: int
    # position of the tag in the input
    offset: int

@dataclass(frozen=True)
class Tag:
    header: TagHeader
    data: Union[AudioTag, VideoTag, ScriptTag]

@dataclass(frozen=True)
class Body:
    first_previous_tag_size: int
    # (Tag, PreviousTagSize) pairs in stream order
    tags: Tuple[Tuple[Tag, int], ...]

    def count(self, tag_type):
        return sum(1 for tag, size in self.tags if tag.header.tag_type is tag_type)

tag_decoders = {
    TagType.AUDIO:  decode_audio_tag,
    TagType.VIDEO:  decode_video_tag,
    TagType.SCRIPT: decode_script_tag,
}

def decode_tag_header(f):
    offset = f.tell()
    typ, data_size, timestamp, timestamp_ext, stream_id = reader.parse_fields(f, FLV_TAG_HEADER)
    try:
        tag_type = TagType(typ)
    except ValueError:
        raise UnknownTagType(typ) from None

    return TagHeader(tag_type, data_size, (timestamp_ext << 24) | timestamp, stream_id, offset)

def decode_tag_data(f, tag_type, size, notes=None):
    """ Decode exactly size bytes of payload with the decoder for tag_type """
    window = f.window(size)
    data = tag_decoders[tag_type](window, size)

    if notes is not None:
        # only script data can stop short of its DataSize
        if window.remaining():
            notes.append("%s data at offset %d leaves %d bytes of DataSize unused"
                         % (tag_type.name.capitalize(), f.tell(), window.remaining()))
        if tag_type is TagType.SCRIPT:
            check_script_tag(data, notes)
    f.seek(f.tell() + size)
    return data

def decode_tag(f, notes=None):
    header = decode_tag_header(f)
    return Tag(header, decode_tag_data(f, header.tag_type, header.data_size, notes))

def decode_body(f, notes=None):
    if notes is None:
        notes = []

    first_size = reader.parse_int32(f)
    if first_size != 0:
        notes.append("Attribute value PreviousTagSize0 is not 0")

    tags = []
    while f.remaining():
        start = f.tell()
        tag_notes = []
        # :TRICKY: running out of bytes means the file is still being
        # written (or was cut), which is not an error
        try:
            tag = decode_tag(f, tag_notes)
            tag_size = reader.parse_int32(f)
        except Truncated as exc:
            f.seek(start)
            logger.debug("Dropping incomplete tag at offset %d: %s", start, exc)
            notes.append("Incomplete tag at offset %d is dropped (%d bytes left)" % (start, f.remaining()))
            break
        notes.extend(tag_notes)

        hdr = tag.header
        logger.debug("%s tag #%d: offset=%d, size=%d, timestamp=%d",
                     hdr.tag_type.name, len(tags) + 1, hdr.offset, hdr.data_size, hdr.timestamp)
        if hdr.stream_id != 0:
            notes.append("Attribute value StreamID is not 0 (tag at offset %d)" % hdr.offset)
        if tag_size != TAG_HEADER_SIZE + hdr.data_size:
            notes.append("Attribute PreviousTagSize' value is bad: %d instead of %d (tag at offset %d)"
                         % (tag_size, TAG_HEADER_SIZE + hdr.data_size, hdr.offset))

        tags.append((tag, tag_size))

    return Body(first_size, tuple(tags))
