# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Decoding of ID3v2.3 and ID3v2.4 tags from in-memory byte buffers."""

import collections
from warnings import warn

from id3v2.errors import *
from id3v2.conversion import *
from id3v2.payload import decode_payload

import id3v2.fileutil as fileutil

HEADER_SIZE = 10
FRAME_HEADER_SIZE = 10

_TAG_UNSYNCHRONISED = 0x80
_TAG_EXTENDED_HEADER = 0x40
_TAG_EXPERIMENTAL = 0x20
_TAG_FOOTER = 0x10
_TAG_UNKNOWN_MASK = 0xFF & ~(_TAG_UNSYNCHRONISED | _TAG_EXTENDED_HEADER
                         | _TAG_EXPERIMENTAL | _TAG_FOOTER)

_FRAME_TAG_ALTER_PRESERVATION = 1 << 15
_FRAME_FILE_ALTER_PRESERVATION = 1 << 14
_FRAME_READ_ONLY = 1 << 13
_FRAME_GROUPING_IDENTITY = 0x0010
_FRAME_COMPRESSION = 0x0008
_FRAME_ENCRYPTION = 0x0004
_FRAME_UNSYNCHRONISATION = 0x0002
_FRAME_DATA_LENGTH_INDICATOR = 0x0001

_header_flag_bits = (
    ("unsynchronized", _TAG_UNSYNCHRONISED),
    ("extended_header", _TAG_EXTENDED_HEADER),
    ("experimental", _TAG_EXPERIMENTAL),
    )

_frame_flag_bits = (
    ("tag_alter_preservation", _FRAME_TAG_ALTER_PRESERVATION),
    ("file_alter_preservation", _FRAME_FILE_ALTER_PRESERVATION),
    ("read_only", _FRAME_READ_ONLY),
    ("grouping_identity", _FRAME_GROUPING_IDENTITY),
    ("compression", _FRAME_COMPRESSION),
    ("encryption", _FRAME_ENCRYPTION),
    ("unsynchronisation", _FRAME_UNSYNCHRONISATION),
    ("data_length_indicator", _FRAME_DATA_LENGTH_INDICATOR),
    )

class HeaderFlags(collections.namedtuple(
        "HeaderFlags", [name for name, bit in _header_flag_bits])):
    __slots__ = ()

    @classmethod
    def read(cls, byte):
        return cls(*(byte & bit != 0 for name, bit in _header_flag_bits))

class FrameHeaderFlags(collections.namedtuple(
        "FrameHeaderFlags", [name for name, bit in _frame_flag_bits])):
    __slots__ = ()

    @classmethod
    def read(cls, doublebyte):
        if not isinstance(doublebyte, int):
            doublebyte = Int8.decode(doublebyte)
        return cls(*(doublebyte & bit != 0 for name, bit in _frame_flag_bits))

    def __str__(self):
        return ", ".join(name for name in self._fields if getattr(self, name))

TagHeader = collections.namedtuple("TagHeader", "version flags size")
TagHeader.__doc__ = """The main tag header.

version is a (major, minor) tuple, flags is a HeaderFlags, and size is the
length in bytes of the frame region following the 10-byte header.
"""

Frame = collections.namedtuple("Frame", "frameid size flags data")
Frame.__doc__ = "A raw frame: 4-character id, declared size, FrameHeaderFlags and payload."

Tag = collections.namedtuple("Tag", "header frames")

# Frame size decoders, by major version.
_frame_size_decoders = {
    3: Int8.decode,
    4: Syncsafe.decode,
    }

def read_flags(byte):
    "Decode the flag byte of the main tag header."
    return HeaderFlags.read(byte)

def unpacked_size(quadbyte):
    "Decode a 4-byte syncsafe size field."
    if len(quadbyte) != 4:
        raise ValueError("Syncsafe size field must be 4 bytes long")
    return Syncsafe.decode(quadbyte)

def decode_header(data):
    """Read the main ID3 header from data. Extended headers are not supported.

    Returns a TagHeader. Raises MalformedHeaderError if data does not start
    with an ID3v2 header, and UnsupportedFeatureError if the tag has an
    extended header.
    """
    if len(data) < HEADER_SIZE:
        raise MalformedHeaderError("Tag header too short ({0} bytes)".format(len(data)))
    if data[0:3] != b"ID3":
        raise MalformedHeaderError("ID3v2 header not found")
    version = (data[3], data[4])
    flags = read_flags(data[5])
    if data[5] & _TAG_UNKNOWN_MASK:
        warn("Unknown ID3v2.{0} flags: 0x{1:02X}"
             .format(version[0], data[5] & _TAG_UNKNOWN_MASK), TagWarning)
    if flags.extended_header:
        raise UnsupportedFeatureError("extended header")
    return TagHeader(version=version, flags=flags, size=unpacked_size(data[6:10]))

header = decode_header

def _frame_size_decoder(header):
    major = header.version[0]
    try:
        return _frame_size_decoders[major]
    except KeyError:
        raise UnsupportedVersionError("ID3v2.{0} not supported".format(major)) from None

def read_frames(header, region):
    """Yield the raw frames of region in file order.

    region is the header.size bytes following the tag header. Reading
    stops at the first padding byte or at the end of region.
    """
    decode_size = None
    offset = 0
    while offset < len(region) and region[offset] != 0:
        if decode_size is None:
            decode_size = _frame_size_decoder(header)
        if len(region) - offset < FRAME_HEADER_SIZE:
            raise FrameError("Truncated frame header at offset {0}".format(offset))
        frameheader = region[offset:offset + FRAME_HEADER_SIZE]
        try:
            frameid = bytes(frameheader[0:4]).decode("ASCII")
        except UnicodeDecodeError:
            raise FrameError("Invalid frame id {0!r}".format(bytes(frameheader[0:4]))) from None
        size = decode_size(frameheader[4:8])
        flags = FrameHeaderFlags.read(frameheader[8:10])
        offset += FRAME_HEADER_SIZE
        if len(region) - offset < size:
            raise FrameError("Frame {0} needs {1} bytes, only {2} left"
                             .format(frameid, size, len(region) - offset))
        data = bytes(region[offset:offset + size])
        offset += size
        yield Frame(frameid=frameid, size=size, flags=flags, data=data)

def _frame_payload(frame, strict_unsync):
    data = frame.data
    if frame.flags.compression or frame.flags.encryption:
        warn("Frame {0} is {1}; decoding it as-is"
             .format(frame.frameid, "compressed" if frame.flags.compression else "encrypted"),
             UnsupportedFrameWarning)
    if frame.flags.unsynchronisation:
        if frame.flags.data_length_indicator:
            data = data[4:]
        if strict_unsync:
            data = Unsync.decode(data)
        else:
            # Drops every zero byte, not just those following 0xFF.
            data = strip_zero_bytes(data)
    return data

def decode_frames(header, region, *, strict_unsync=False):
    """Decode all frames of region into a dictionary of frame id to text.

    For example:

        {"TIT2": "Anesthetize",
         "TPE1": "Porcupine Tree",
         "TALB": "Fear of a Blank Planet"}

    When a frame id occurs more than once, the last frame wins.
    Unsynchronized frames have every zero byte removed from their payload
    unless strict_unsync is set, in which case only the zero bytes
    inserted after 0xFF by the unsynchronization scheme are removed.
    """
    result = dict()
    for frame in read_frames(header, region):
        value = decode_payload(frame.frameid, _frame_payload(frame, strict_unsync))
        if frame.frameid in result:
            warn("Frame {0} duplicated, only the last instance is kept"
                 .format(frame.frameid), DuplicateFrameWarning)
        result[frame.frameid] = strip_zero_bytes(value)
    return result

def _frame_region(header, data):
    end = HEADER_SIZE + header.size
    if len(data) < end:
        raise MalformedHeaderError("Tag declares {0} bytes of frames, only {1} present"
                                   .format(header.size, len(data) - HEADER_SIZE))
    return data[HEADER_SIZE:end]

def frames(data, *, strict_unsync=False):
    """Read all ID3 frames from data, which starts with the tag header.

    Returns a dictionary of 4-character frame id to frame content.
    """
    return decode_tag(data, strict_unsync=strict_unsync).frames

def decode_tag(data, *, strict_unsync=False):
    "Decode the tag at the start of data into a Tag(header, frames) pair."
    h = decode_header(data)
    return Tag(h, decode_frames(h, _frame_region(h, data), strict_unsync=strict_unsync))

def read_tag(filename, *, strict_unsync=False):
    "Read the tag at the start of filename (a file name or binary file object)."
    return decode_tag(fileutil.read_tag_data(filename), strict_unsync=strict_unsync)
