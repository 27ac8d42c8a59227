# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""The id3v2 command: print the ID3v2 tags of audio files."""

import sys
import warnings
from contextlib import contextmanager
from optparse import OptionParser

import id3v2
from id3v2.errors import *
from id3v2.id3 import frame_name

@contextmanager
def print_warnings(filename, options):
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always", id3v2.Warning)
        try:
            yield None
        finally:
            if not options.quiet and len(ws) > 0:
                for w in ws:
                    print(filename + ":warning: " + str(w.message),
                          file=sys.stderr)
            sys.stderr.flush()

def label(frameid, options):
    if options.names:
        return "{0} ({1})".format(frameid, frame_name(frameid))
    return frameid

def print_tag(filename, options, out=None):
    if out is None:
        out = sys.stdout
    data = id3v2.fileutil.read_tag_data(filename)
    header = id3v2.header(data)
    flags = [name for name in header.flags._fields if getattr(header.flags, name)]
    print("{0}: ID3v2.{1}.{2} tag, {3} bytes{4}".format(
            filename, header.version[0], header.version[1], header.size,
            " ({0})".format(", ".join(flags)) if flags else ""),
          file=out)
    if options.raw:
        region = data[id3v2.tags.HEADER_SIZE:]
        for frame in id3v2.read_frames(header, region):
            print("    {0}: {1} bytes{2}".format(
                    label(frame.frameid, options), frame.size,
                    " [{0}]".format(frame.flags) if any(frame.flags) else ""),
                  file=out)
    else:
        frames = id3v2.frames(data, strict_unsync=options.strict_unsync)
        for frameid in sorted(frames):
            print("    {0}: {1}".format(label(frameid, options), frames[frameid]),
                  file=out)

def main(argv=None):
    parser = OptionParser(usage="%prog [options] FILE...",
                          version="%prog " + id3v2.versionstr)
    parser.add_option("-r", "--raw", action="store_true", default=False,
                      help="list frames in file order with their flags")
    parser.add_option("-s", "--strict-unsync", action="store_true", default=False,
                      help="only remove zero bytes that follow 0xFF in unsynchronised frames")
    parser.add_option("-n", "--names", action="store_true", default=False,
                      help="print frame descriptions")
    parser.add_option("-q", "--quiet", action="store_true", default=False,
                      help="suppress warnings")
    (options, args) = parser.parse_args(argv)
    if not args:
        parser.error("no files given")

    status = 0
    for filename in args:
        with print_warnings(filename, options):
            try:
                print_tag(filename, options)
            except (Error, ValueError, OSError) as e:
                print("{0}: error: {1}".format(filename, e), file=sys.stderr)
                status = 1
    return status

if __name__ == "__main__":
    sys.exit(main())
