# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import id3v2.conversion
import id3v2.fileutil
import id3v2.payload
import id3v2.specs
import id3v2.tags

from id3v2.errors import *
from id3v2.conversion import strip_zero_bytes
from id3v2.specs import extract_null_terminated, read_utf16, read_user_url, read_user_text
from id3v2.payload import decode_payload
from id3v2.tags import (HeaderFlags, FrameHeaderFlags, TagHeader, Frame, Tag,
                        read_flags, unpacked_size, header, frames,
                        decode_header, decode_frames, read_frames,
                        decode_tag, read_tag)

version = (0, 2, 0)
versionstr = ".".join((str(v) for v in version))
