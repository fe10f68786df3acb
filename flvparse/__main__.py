#!/usr/bin/env python3
# coding: utf-8

# Copyright (c) 2013-2014 Bradbury Lab
# Author: Ilya Murav'jov <muravyev@bradburylab.com>
#
# This software is licensed under the
# GNU General Public License version 3 (see the file LICENSE).

import argparse
import logging
import pprint
import sys

from .container import decode, load
from .errors import ParseError
from .script import ScriptTag, as_python
from .tags import TagType

def print_header(hdr):
    print("FLV File Header")
    print("  Signature (3B)   %s" % " ".join("%x" % c for c in hdr.signature))
    print("  Version (1B)     %d" % hdr.version)
    print("  Flags (1B)       {:04b} {:04b}".format(hdr.flags >> 4, hdr.flags & 0x0f))
    print("  DataOffset (4B)  %d" % hdr.data_offset)

def print_tags(body):
    print("FLV File Body")
    row = "  {:>6}  {:<8}  {:>13}  {:>14}  {:>13}"
    print(row.format("Index", "TagType", "DataSize (3B)", "Timestamp (4B)", "StreamID (3B)"))
    for idx, (tag, tag_size) in enumerate(body.tags, 1):
        hdr = tag.header
        print(row.format(idx, hdr.tag_type.name.capitalize(), hdr.data_size, hdr.timestamp, hdr.stream_id))
        if isinstance(tag.data, ScriptTag):
            pprint.pprint({tag.data.name: as_python(tag.data.value)})

def print_counts(body):
    print("Total tag number   %d" % len(body.tags))
    for tag_type in (TagType.SCRIPT, TagType.VIDEO, TagType.AUDIO):
        print("%-18s %d" % (tag_type.name.capitalize() + " tag number", body.count(tag_type)))

def print_container(flv, print_body=False):
    print_header(flv.header)
    if print_body:
        print_tags(flv.body)
    print_counts(flv.body)

    print("###")
    if flv.is_valid:
        print("Data is valid with respect to the FLV format.")
    else:
        print("Data is not valid with respect to the FLV format:")
        for note in flv.notes:
            print("\t", note)

def parse_n_print(s, print_body=False):
    flv = decode(s)
    print_container(flv, print_body)
    return flv

def make_arg_parser():
    parser = argparse.ArgumentParser(prog="flvparse", description="Show the structure of an FLV file.")
    parser.add_argument("-i", "--input", help="the FLV file to parse (standard input if omitted)")
    parser.add_argument("-p", "--print", dest="print_body", action="store_true",
                        help="print every tag, not only the totals")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="more logging, repeat for debug output")
    return parser

def main(argv=None):
    args = make_arg_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.input:
            flv, _ = load(args.input)
        else:
            # :TRICKY: sys.stdin is a text stream, the bytes are under it
            flv = decode(sys.stdin.buffer.read())
        print_container(flv, args.print_body)
    except (ParseError, OSError) as exc:
        logging.getLogger("flvparse").error("%s", exc)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
