# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Payload decoders for ID3v2 frames."""

import abc
from abc import abstractmethod
from warnings import warn

from id3v2.errors import *
from id3v2.specs import read_standard_payload, read_user_url

known_frames = { }

def frameclass(*frameids):
    """Register the decorated class as the payload decoder of frameids.

    @frameclass("WXXX")
    class UserURLFrame(Frame):
        ...
    """
    def register(cls):
        assert issubclass(cls, Frame)
        for frameid in frameids:
            assert frameid not in known_frames
            known_frames[frameid] = cls
        return cls
    return register

class Frame(metaclass=abc.ABCMeta):
    @classmethod
    @abstractmethod
    def _from_data(cls, frameid, data):
        "Decode the raw payload data of a frame into text."

class TextFrame(Frame):
    "Any frame whose payload is an encoding byte followed by text."
    @classmethod
    def _from_data(cls, frameid, data):
        return read_standard_payload(data)

@frameclass("WXXX")
class UserURLFrame(Frame):
    "User defined URL link frame; decodes to the link, dropping the description."
    @classmethod
    def _from_data(cls, frameid, data):
        return read_user_url(data)

@frameclass("TXXX", "APIC")
class UnimplementedFrame(Frame):
    # TODO: decode TXXX through specs.read_user_text once callers can get
    # at the description too.
    @classmethod
    def _from_data(cls, frameid, data):
        return ""

def frame_class(frameid):
    "Return the payload decoder class for frameid."
    return known_frames.get(frameid, TextFrame)

def decode_payload(key, payload):
    """Decode the payload of the frame identified by key into a string.

    Raises UnsupportedEncodingError if the payload's text encoding is not
    supported.
    """
    if len(payload) == 0:
        warn("Frame {0} is empty".format(key), EmptyFrameWarning)
        return ""
    return frame_class(key)._from_data(key, payload)
