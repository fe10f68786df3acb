# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

from dataclasses import dataclass

from . import reader
from .errors import BadSignature, Truncated

FLV_SIGNATURE = b"FLV"
FILE_HEADER_SIZE = 9

FLV_FILE_HEADER = [
    ["Version",    "UI8"],
    ["TypeFlags",  "UI8"],
    ["DataOffset", "UI32"],
]

FLAG_AUDIO = 0x04
FLAG_VIDEO = 0x01

@dataclass(frozen=True)
class FileHeader:
    signature: bytes
    version: int
    flags: int
    has_audio: bool
    has_video: bool
    # length of this header, 9 for FLV version 1
    data_offset: int

def decode_file_header(f, notes=None):
    if f.remaining() < FILE_HEADER_SIZE:
        raise Truncated(FILE_HEADER_SIZE, f.tell())

    signature = bytes(reader.check_read(f, len(FLV_SIGNATURE)))
    if signature != FLV_SIGNATURE:
        raise BadSignature(signature)

    version, flags, data_offset = reader.parse_fields(f, FLV_FILE_HEADER)
    if notes is not None:
        if flags & ~(FLAG_AUDIO | FLAG_VIDEO):
            notes.append("Attribute value TypeFlagsReserved is not 0")
        if data_offset != FILE_HEADER_SIZE:
            notes.append("Attribute DataOffset' value is bad: %d" % data_offset)

    return FileHeader(
        signature,
        version,
        flags,
        bool(flags & FLAG_AUDIO),
        bool(flags & FLAG_VIDEO),
        data_offset,
    )
