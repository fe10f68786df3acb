# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

import collections
import re
import struct

from .errors import Truncated

class Span(collections.namedtuple("Span", ["offset", "length"])):
    """ Borrowed byte range of the input buffer """
    __slots__ = ()

    def view(self, buf):
        return memoryview(buf).cast("B")[self.offset:self.offset + self.length]

    def tobytes(self, buf):
        return bytes(self.view(buf))

class Reader:
    """
    Read-only file-like cursor over a buffer, limited by [pos, end).
    Reads return memoryview slices, nothing is copied.
    """
    def __init__(self, buf, pos=0, end=None):
        self.buf = memoryview(buf).cast("B")
        self.pos = pos
        self.end = len(self.buf) if end is None else end

    def tell(self):
        return self.pos

    def seek(self, pos):
        assert 0 <= pos <= self.end
        self.pos = pos

    def remaining(self):
        return self.end - self.pos

    def read(self, ln):
        ln = min(ln, self.remaining())
        dat = self.buf[self.pos:self.pos + ln]
        self.pos += ln
        return dat

    def peek(self, ln):
        return self.buf[self.pos:self.pos + min(ln, self.remaining())]

    def window(self, ln):
        """ Child reader which sees exactly ln bytes from the current position """
        check_available(self, ln)
        return Reader(self.buf, self.pos, self.pos + ln)

def check_available(f, ln):
    if f.remaining() < ln:
        raise Truncated(ln, f.tell())

def check_read(f, ln):
    check_available(f, ln)
    return f.read(ln)

def check_parse(f, fmt):
    ln = struct.calcsize(fmt)
    dat = check_read(f, ln)
    return struct.unpack(fmt, dat)

def make_parse_int(struct_name):
    fmt = ">" + struct_name
    def do(f):
        return check_parse(f, fmt)[0]
    return do

parse_byte   = make_parse_int("B")
parse_short  = make_parse_int("H")
parse_sshort = make_parse_int("h")
parse_int32  = make_parse_int("L")
parse_double = make_parse_int("d")

def parse_int24(f):
    h = parse_byte(f)
    l = parse_short(f)
    return (h << 16) + l

def parse_sint24(f):
    val = parse_int24(f)
    if val & 0x800000:
        val -= 1 << 24
    return val

def take_span(f, ln):
    """ Skip ln bytes, returning where they are instead of what they are """
    check_available(f, ln)
    span = Span(f.tell(), ln)
    f.seek(f.tell() + ln)
    return span

elementary_types = {
    "UI8":  parse_byte,
    "UI16": parse_short,
    "SI16": parse_sshort,
    "UI24": parse_int24,
    "SI24": parse_sint24,
    "UI32": parse_int32,
    "DOUBLE": parse_double,
}

def get_name_type(fmt):
    return fmt[:2]

def get_struct(fmt):
    return fmt[2]

def parse_fields(f, fmt_lst):
    """ Values of a flat field list, in declaration order """
    res = []
    for fmt in fmt_lst:
        name, typ = get_name_type(fmt)
        res.append(elementary_types[typ](f))
    return res

# :TRICKY: not pretty ("#byte#"), but bit fields are described
# the same way as the other fields
def make_byte_fmt(*lst):
    return ["-", "#byte#", lst]

def split_byte(num, widths):
    """ Unsigned fields of one byte, the first width being the most significant bits """
    assert sum(widths) <= 8
    res = []
    for sz in reversed(widths):
        mask = (1 << sz) - 1
        res.append(mask & num)
        num >>= sz
    res.reverse()
    return res

def parse_byte_fmt(f, fmt):
    widths = []
    for bfmt in get_struct(fmt):
        bname, btyp = get_name_type(bfmt)
        m = re.match("UI([1-7])$", btyp)
        assert m
        widths.append(int(m.group(1)))

    return split_byte(parse_byte(f), widths)
