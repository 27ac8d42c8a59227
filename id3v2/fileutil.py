# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""File reading utilities."""

from contextlib import contextmanager

from id3v2.errors import *
from id3v2.conversion import Syncsafe

def xread(file, length):
    "Read exactly length bytes from file; raise EOFError if file ends sooner."
    data = file.read(length)
    if len(data) != length:
        raise EOFError
    return data

@contextmanager
def opened(filename, mode):
    "Open filename, or do nothing if filename is already an open file object"
    if isinstance(filename, str):
        file = open(filename, mode)
        try:
            yield file
        finally:
            if not file.closed:
                file.close()
    else:
        yield filename

def read_tag_data(filename):
    """Return the ID3v2 tag at the start of filename as raw bytes.

    Only the 10-byte header and the frame region it declares are read.
    """
    with opened(filename, "rb") as file:
        try:
            header = xread(file, 10)
        except EOFError:
            raise MalformedHeaderError("File too short for an ID3v2 header") from None
        if header[0:3] != b"ID3":
            raise MalformedHeaderError("ID3v2 header not found")
        size = Syncsafe.decode(header[6:10])
        try:
            return header + xread(file, size)
        except EOFError:
            raise MalformedHeaderError("File ends inside the tag") from None
