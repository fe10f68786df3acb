# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

import logging
from dataclasses import dataclass
from typing import Tuple

from . import reader
from .header import FileHeader, decode_file_header
from .tags import Body, decode_body

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Container:
    header: FileHeader
    body: Body
    # findings which do not prevent decoding, e.g. a nonzero StreamID
    notes: Tuple[str, ...] = ()

    @property
    def is_valid(self):
        return not self.notes

def decode(buf):
    """
    Decode a whole FLV file held in buf (bytes, bytearray, memoryview, mmap).
    Payloads in the result are Spans into buf, so keep buf around to look at them.
    """
    f = reader.Reader(buf)
    notes = []
    header = decode_file_header(f, notes)
    body = decode_body(f, notes)
    logger.debug("Decoded %d tags, %d notes", len(body.tags), len(notes))
    return Container(header, body, tuple(notes))

def load(path):
    """ Read the file at path and decode it, returning (Container, data) """
    with open(path, 'rb') as f:
        s = f.read()
    return decode(s), s
