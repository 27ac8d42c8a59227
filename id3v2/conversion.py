# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

from warnings import warn

from id3v2.errors import *

class Unsync:
    "Reversal of the ID3v2 unsynchronization scheme."
    @staticmethod
    def gen_decode(iterable):
        "A generator for de-unsynchronizing a byte iterable."
        sync = False
        for b in iterable:
            if sync and b & 0xE0:
                warn("Invalid unsynched data", Warning)
            if not (sync and b == 0x00):
                yield b
            sync = (b == 0xFF)

    @staticmethod
    def decode(data):
        "Remove the zero byte following each 0xFF in data."
        return bytes(Unsync.gen_decode(data))

class Syncsafe:
    """Conversion from syncsafe integers.
    Syncsafe integers are big-endian 7-bit byte sequences.
    """
    @staticmethod
    def decode(data):
        "Decodes a syncsafe integer, using the low 7 bits of each byte"
        value = 0
        for b in data:
            if b > 127:  # iTunes bug
                warn("Invalid syncsafe integer byte 0x{0:02X}".format(b), Warning)
            value <<= 7
            value += b & 0x7F
        return value

class Int8:
    """Conversion from binary integer values of any length."""

    @staticmethod
    def decode(data):
        "Decodes an 8-bit big-endian integer of any length"
        value = 0
        for b in data:
            value <<= 8
            value += b
        return value

def strip_zero_bytes(data):
    """Remove every zero byte from data, wherever it occurs.

    Text input has its NUL characters removed instead.
    """
    if isinstance(data, str):
        return data.replace("\x00", "")
    return bytes(data).replace(b"\x00", b"")
