# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

# SCRIPTDATA values are AMF0, see "Action Message Format -- AMF 0"
# and the SCRIPTDATA section of video_file_format_spec_v10_1.pdf

from dataclasses import dataclass
from typing import Tuple

from . import reader
from .errors import (
    InvalidUtf8, MissingObjectTerminator, NestingTooDeep,
    UnknownScriptValueType,
)

OBJECT_END_MARKER = b"\x00\x00\x09"
STRING_MARKER = 2

# how many Object/ECMA array/Strict array levels may be nested
MAX_DEPTH = 64

@dataclass(frozen=True)
class Number:
    value: float

@dataclass(frozen=True)
class Boolean:
    value: bool

@dataclass(frozen=True)
class String:
    value: str

@dataclass(frozen=True)
class Property:
    name: str
    value: object

@dataclass(frozen=True)
class Object:
    properties: Tuple[Property, ...]

@dataclass(frozen=True)
class MovieClip:
    pass

@dataclass(frozen=True)
class Null:
    pass

@dataclass(frozen=True)
class Undefined:
    pass

@dataclass(frozen=True)
class Reference:
    index: int

@dataclass(frozen=True)
class EcmaArray:
    # advisory, not checked against len(properties)
    count: int
    properties: Tuple[Property, ...]

@dataclass(frozen=True)
class StrictArray:
    values: tuple

@dataclass(frozen=True)
class Date:
    # milliseconds since the Unix epoch
    millis: float
    # local offset from UTC in minutes, negative west of Greenwich
    tz_offset: int

@dataclass(frozen=True)
class LongString:
    value: str

@dataclass(frozen=True)
class ScriptTag:
    name: str
    value: object

def as_python(value):
    """
    Plain Python view of a script data value: objects and ECMA arrays
    become dicts, strict arrays lists, markers None
    """
    if isinstance(value, (Object, EcmaArray)):
        return {prop.name: as_python(prop.value) for prop in value.properties}
    if isinstance(value, StrictArray):
        return [as_python(v) for v in value.values]
    if isinstance(value, Date):
        return value
    if isinstance(value, (MovieClip, Null, Undefined)):
        return None
    if isinstance(value, Reference):
        return value
    return value.value

def _decode_text(f, ln):
    offset = f.tell()
    dat = reader.check_read(f, ln)
    try:
        return str(dat, "utf-8")
    except UnicodeDecodeError:
        raise InvalidUtf8(offset) from None

def parse_string(f):
    return _decode_text(f, reader.parse_short(f))

def parse_long_string(f):
    return _decode_text(f, reader.parse_int32(f))

def parse_properties(f, depth):
    props = []
    while True:
        if f.remaining() < len(OBJECT_END_MARKER):
            raise MissingObjectTerminator(f.end)
        if f.peek(len(OBJECT_END_MARKER)) == OBJECT_END_MARKER:
            f.seek(f.tell() + len(OBJECT_END_MARKER))
            return tuple(props)

        name = parse_string(f)
        props.append(Property(name, decode_script_value(f, depth)))

def _number(f, depth):
    return Number(reader.parse_double(f))

def _boolean(f, depth):
    return Boolean(reader.parse_byte(f) != 0)

def _string(f, depth):
    return String(parse_string(f))

def _enter(depth):
    """ Depth of the children of a container at depth """
    if depth >= MAX_DEPTH:
        raise NestingTooDeep(MAX_DEPTH)
    return depth + 1

def _object(f, depth):
    return Object(parse_properties(f, _enter(depth)))

def _movie_clip(f, depth):
    return MovieClip()

def _null(f, depth):
    return Null()

def _undefined(f, depth):
    return Undefined()

def _reference(f, depth):
    return Reference(reader.parse_short(f))

def _ecma_array(f, depth):
    depth = _enter(depth)
    count = reader.parse_int32(f)
    return EcmaArray(count, parse_properties(f, depth))

def _strict_array(f, depth):
    depth = _enter(depth)
    count = reader.parse_int32(f)
    return StrictArray(tuple(decode_script_value(f, depth) for i in range(count)))

def _date(f, depth):
    millis = reader.parse_double(f)
    return Date(millis, reader.parse_sshort(f))

def _long_string(f, depth):
    return LongString(parse_long_string(f))

value_types = {
    0:  _number,
    1:  _boolean,
    2:  _string,
    3:  _object,
    4:  _movie_clip,
    5:  _null,
    6:  _undefined,
    7:  _reference,
    8:  _ecma_array,
    # 9 is the object end marker, only valid inside property lists
    10: _strict_array,
    11: _date,
    12: _long_string,
}

def decode_script_value(f, depth=0):
    marker = reader.parse_byte(f)
    parse_value = value_types.get(marker)
    if parse_value is None:
        raise UnknownScriptValueType(marker)
    return parse_value(f, depth)

def walk(value):
    yield value
    if isinstance(value, (Object, EcmaArray)):
        for prop in value.properties:
            yield from walk(prop.value)
    elif isinstance(value, StrictArray):
        for v in value.values:
            yield from walk(v)

def check_script_tag(tag, notes):
    for value in walk(tag.value):
        if isinstance(value, EcmaArray) and value.count != len(value.properties):
            notes.append("ECMA array of %r announces %d properties, %d found"
                         % (tag.name, value.count, len(value.properties)))

def decode_script_tag(f, size):
    # the name is always a String, its type byte is checked here
    # rather than going through decode_script_value()
    marker = reader.parse_byte(f)
    if marker != STRING_MARKER:
        raise UnknownScriptValueType(marker, STRING_MARKER)

    name = parse_string(f)
    return ScriptTag(name, decode_script_value(f))
