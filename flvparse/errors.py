# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

class ParseError(ValueError):
    """ Any failure that ends the current decode call """

class BadSignature(ParseError):
    def __init__(self, signature):
        self.signature = bytes(signature)
        super().__init__("Bad file signature: %r" % (self.signature,))

class Truncated(ParseError):
    def __init__(self, needed, offset=None):
        self.needed = needed
        self.offset = offset
        if offset is None:
            msg = "Input is truncated: %d bytes needed" % needed
        else:
            msg = "Input is truncated: %d bytes needed at offset %d" % (needed, offset)
        super().__init__(msg)

class UnknownTagType(ParseError):
    def __init__(self, value):
        self.value = value
        super().__init__("Unknown tag type: %d" % value)

class UnknownSoundFormat(ParseError):
    def __init__(self, value):
        self.value = value
        super().__init__("Unknown sound format: %d" % value)

class UnknownAacPacketType(ParseError):
    def __init__(self, value):
        self.value = value
        super().__init__("Unknown AAC packet type: %d" % value)

class UnknownScriptValueType(ParseError):
    def __init__(self, value, expected=None):
        self.value = value
        self.expected = expected
        msg = "Unknown script data value type: %d" % value
        if expected is not None:
            msg = "Script data value type %d where %d is required" % (value, expected)
        super().__init__(msg)

class InvalidUtf8(ParseError):
    def __init__(self, offset):
        self.offset = offset
        super().__init__("Script data string at offset %d is not valid UTF-8" % offset)

class MissingObjectTerminator(ParseError):
    def __init__(self, offset):
        self.offset = offset
        super().__init__("Object end marker is missing (input ends at offset %d)" % offset)

class NestingTooDeep(ParseError):
    def __init__(self, depth):
        self.depth = depth
        super().__init__("Script data values are nested deeper than %d levels" % depth)
