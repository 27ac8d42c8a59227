# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Decoding of the encoded text fields found in ID3v2 frame payloads.

Every text-bearing frame starts with an encoding byte:

    0  ISO-8859-1
    1  UTF-16 with a leading byte order mark
    2  UTF-16BE without a byte order mark (not supported)
    3  UTF-8

Bytes that are invalid in the declared encoding decode to U+FFFD.
"""

from id3v2.errors import *

ENCODING_LATIN1 = 0
ENCODING_UTF16 = 1
ENCODING_UTF16BE = 2
ENCODING_UTF8 = 3

# (codec, terminator) for each encoding byte.
_encodings = (('iso-8859-1', b"\x00"),
              ('utf-16', b"\x00\x00"),
              ('utf-16-be', b"\x00\x00"),
              ('utf-8', b"\x00"))

_byte_order_marks = {
    b"\xff\xfe": 'utf-16-le',
    b"\xfe\xff": 'utf-16-be',
    }

def bom_to_codec(bom):
    "Return the codec name selected by a UTF-16 byte order mark."
    try:
        return _byte_order_marks[bytes(bom)]
    except KeyError:
        raise UnsupportedEncodingError(
            "Invalid UTF-16 byte order mark {0!r}".format(bytes(bom))) from None

def read_utf16(data, bom=None):
    """Decode UTF-16 text.

    Without bom, data must start with its own 2-byte byte order mark;
    empty data decodes to the empty string.
    """
    if bom is None:
        if len(data) == 0:
            return ""
        bom, data = data[:2], data[2:]
    return bytes(data).decode(bom_to_codec(bom), "replace")

def read_standard_payload(payload):
    "Decode the payload of a plain text frame."
    encoding, rest = payload[0], payload[1:]
    if encoding == ENCODING_LATIN1:
        return bytes(rest).decode(_encodings[encoding][0], "replace")
    if encoding == ENCODING_UTF16:
        return read_utf16(rest)
    if encoding == ENCODING_UTF16BE:
        raise UnsupportedEncodingError("UTF-16 without a byte order mark is not supported")
    if encoding == ENCODING_UTF8:
        return bytes(rest).decode(_encodings[encoding][0], "replace")
    # Not an encoding byte; the payload is plain text.
    return bytes(payload).decode('iso-8859-1')

def _find_terminator(content, term):
    "Return the index of the first terminator in content, or len(content)."
    if len(term) == 1:
        index = content.find(term)
        return len(content) if index < 0 else index
    for i in range(0, len(content) - 1, 2):
        if content[i:i+2] == term:
            return i
    return len(content)

def split_null_terminated(payload):
    """Split an encoded payload at its first string terminator.

    Returns (codec, description, rest, bom), where description and rest
    are still raw bytes and bom is None unless the encoding is UTF-16.
    """
    if len(payload) < 1:
        raise FrameError("Missing text encoding byte")
    encoding, content = payload[0], bytes(payload[1:])
    if encoding == ENCODING_UTF16:
        if len(content) < 2:
            raise UnsupportedEncodingError("Missing UTF-16 byte order mark")
        bom, content = content[:2], content[2:]
        codec = bom_to_codec(bom)
    elif encoding in (ENCODING_LATIN1, ENCODING_UTF8):
        bom = None
        codec = _encodings[encoding][0]
    else:
        raise UnsupportedEncodingError(
            "Unsupported text encoding (encoding was {0})".format(encoding))
    term = _encodings[encoding][1]
    index = _find_terminator(content, term)
    return (codec, content[:index], content[index + len(term):], bom)

def extract_null_terminated(payload):
    """Decode a [encoding][description][terminator][value] payload.

    Returns (description, value, bom); bom is the UTF-16 byte order mark
    of the payload, or None for the single-byte encodings.
    """
    codec, description, value, bom = split_null_terminated(payload)
    return (description.decode(codec, "replace"), value.decode(codec, "replace"), bom)

def read_user_url(payload):
    "Return the link of a WXXX payload. The link itself is always ISO-8859-1."
    codec, description, link, bom = split_null_terminated(payload)
    return link.decode('iso-8859-1')

def read_user_text(payload):
    "Return the value of a TXXX payload."
    description, text, bom = extract_null_terminated(payload)
    return text
