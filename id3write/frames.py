# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Class definitions for ID3v2 text frames, and the frame writer."""

import abc
import re
from abc import abstractmethod

from id3write.errors import *
from id3write.conversion import Syncsafe, Int8
from id3write.specs import encode_text
from id3write.fileutil import checked_write

FRAME_HEADER_SIZE = 10

_frame_id_pattern = re.compile(b"^[A-Z][A-Z0-9]{3}$")

def is_frame_id(data):
    if isinstance(data, str):
        try:
            data = data.encode("ASCII")
        except UnicodeEncodeError:
            return False
    return _frame_id_pattern.match(data) is not None

def encode_frame_header(version, frameid, size):
    """Return the 10-byte header of a frame with a body of size bytes.

    ID3v2.3 stores frame sizes as plain 32-bit integers; only ID3v2.4
    uses syncsafe integers here.  Frame flags are always zero.
    """
    if not is_frame_id(frameid):
        raise FrameError("Invalid ID3v2.{0} frame id {1!r}".format(version, frameid))
    if isinstance(frameid, str):
        frameid = frameid.encode("ASCII")
    data = bytearray(frameid)
    if version == 3:
        data.extend(Int8.encode(size, width=4))
    elif version == 4:
        data.extend(Syncsafe.encode(size, width=4))
    else:
        raise TagError("Unsupported ID3 version: 2.{0}".format(version))
    data.extend(Int8.encode(0, width=2))
    assert len(data) == FRAME_HEADER_SIZE
    return bytes(data)

def write_frame(file, version, frameid, body):
    "Write a complete frame to file; return the number of bytes written."
    header = encode_frame_header(version, frameid, len(body))
    checked_write(file, header)
    checked_write(file, body)
    return len(header) + len(body)


class Frame(metaclass=abc.ABCMeta):
    frameid = None

    @abstractmethod
    def _to_data(self, encoding): pass

    def _write(self, file, version, encoding):
        return write_frame(file, version, self.frameid, self._to_data(encoding))

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

class TextFrame(Frame):
    "A text information frame holding a single string."
    def __init__(self, frameid, text):
        if not is_frame_id(frameid) or not frameid.startswith("T"):
            raise FrameError("Invalid text frame id {0!r}".format(frameid))
        self.frameid = frameid
        self.text = text

    def _to_data(self, encoding):
        return encode_text(self.text, encoding=encoding)

    def __repr__(self):
        return "{0}({1!r}, {2!r})".format(type(self).__name__, self.frameid, self.text)

class TXXX(Frame):
    "User defined text information frame"
    frameid = "TXXX"

    def __init__(self, description, value):
        self.description = description
        self.value = value

    def _to_data(self, encoding):
        return encode_text(self.description, self.value, encoding=encoding)

    def __repr__(self):
        return "TXXX(description={0!r}, value={1!r})".format(self.description, self.value)
