# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Writing ID3v2 tags to a stream.

A tag is written in two phases.  start() emits the tag header with a
placeholder where the tag size belongs, and remembers its position; frames
are then appended one by one.  finish() seeks back to the placeholder,
fills in the final size, and returns to where the stream was.

    with open("tag.id3", "wb") as file:
        tag = start(file, version=4)
        tag.write_all({"title": "Foobar", "mood": "cheerful"})
        tag.finish()
"""

import abc
import io

from warnings import warn

from id3write.errors import *
from id3write.conversion import Syncsafe
from id3write.frames import Frame
from id3write.specs import UTF16BOM, UTF8, validate_encoding
from id3write.resolver import default_resolver
from id3write.metadata import default_conv, normalize_key, iter_metadata

import id3write.fileutil as fileutil

TAG_HEADER_SIZE = 10

default_version = 4

class TagWriter(metaclass=abc.ABCMeta):
    """A single ID3v2 tag being written to a stream.

    A writer is good for exactly one tag; it cannot be restarted once
    finish() has been called.  Streams that cannot seek get the whole tag
    buffered in memory and written out by finish().
    """
    version = None
    default_encoding = None
    magic = b"ID3"

    resolver = default_resolver
    metadata_conv = default_conv

    def __init__(self, file, magic=None, encoding=None):
        if magic is not None:
            self.magic = magic
        if isinstance(self.magic, str):
            self.magic = self.magic.encode("ASCII")
        if len(self.magic) != 3:
            raise TagError("Tag identifier must be 3 bytes long: {0!r}"
                           .format(self.magic))
        if encoding is None:
            encoding = self.default_encoding
        self.encoding = validate_encoding(encoding)
        self.file = file
        self.size_offset = None
        self.length = 0
        self.finished = False
        self.buffered = not fileutil.is_seekable(file)
        self._out = io.BytesIO() if self.buffered else file

    def __repr__(self):
        if self.finished:
            state = "finished"
        elif self.size_offset is None:
            state = "not started"
        else:
            state = "{0} bytes of frames".format(self.length)
        return "<{0}: ID3v2.{1} tag, {2}>".format(type(self).__name__,
                                                  self.version, state)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None and not self.finished:
            self.finish()
        return False

    def _check_active(self):
        if self.finished:
            raise TagError("Tag has already been finished")
        if self.size_offset is None:
            raise TagError("Tag has not been started")

    def start(self):
        "Write the tag header, reserving room for the tag size."
        if self.finished or self.size_offset is not None:
            raise TagError("Tag has already been started")
        header = bytearray(self.magic)
        header.append(self.version)
        header.append(0)    # revision
        header.append(0)    # flags
        fileutil.checked_write(self._out, header)
        self.size_offset = fileutil.checked_tell(self._out)
        fileutil.checked_write(self._out, bytes(4))
        self.length = 0
        return self

    def write_frame(self, frame):
        "Append frame to the tag; return the number of bytes written."
        assert isinstance(frame, Frame)
        self._check_active()
        length = frame._write(self._out, self.version, self.encoding)
        self.length += length
        return length

    def write_entry(self, key, value):
        """Append a frame storing value under the metadata key.

        Generic keys such as "title" are first translated to their
        frame ids; keys without a dedicated text frame go into TXXX.
        """
        key = normalize_key(key, self.version, self.metadata_conv)
        frame = self.resolver.resolve(key, value, self.version)
        return self.write_frame(frame)

    def write_all(self, metadata):
        """Append a frame for each entry in metadata.

        metadata is either a mapping or a sequence of (key, value) pairs.
        Any error aborts the operation; frames already written are left in
        the stream.
        """
        self._check_active()
        for (key, value) in iter_metadata(metadata):
            self.write_entry(key, value)

    def finish(self):
        """Fill in the tag size reserved by start().

        The stream position is restored afterwards.  Returns the size of
        the complete tag, including the header.
        """
        self._check_active()
        self.finished = True
        if self.length > Syncsafe.limit(4):
            warn("ID3v2 tag size {0} exceeds syncsafe range".format(self.length),
                 TagWarning)
        pos = fileutil.checked_tell(self._out)
        fileutil.checked_seek(self._out, self.size_offset)
        fileutil.checked_write(self._out, Syncsafe.encode(self.length, width=4))
        fileutil.checked_seek(self._out, pos)
        if self.buffered:
            fileutil.checked_write(self.file, self._out.getvalue())
            self._out.close()
        return self.length + TAG_HEADER_SIZE

class Tag23Writer(TagWriter):
    version = 3
    default_encoding = UTF16BOM

class Tag24Writer(TagWriter):
    version = 4
    default_encoding = UTF8


_tag_versions = {
    3: Tag23Writer,
    4: Tag24Writer,
    }

def writer_class(version):
    "Return the TagWriter subclass producing ID3v2.<version> tags."
    try:
        return _tag_versions[version]
    except KeyError:
        raise TagError("Unsupported ID3 version: 2.{0}".format(version)) from None

def start(file, version=None, magic=None, encoding=None):
    "Start writing a new tag to file; return its TagWriter."
    if version is None:
        version = default_version
    return writer_class(version)(file, magic=magic, encoding=encoding).start()

def write_simple(filename, metadata, version=None, magic=None, encoding=None):
    """Write a complete tag holding metadata to filename.

    filename may also be an open binary file, positioned where the tag
    is to begin.  Returns the size of the tag.
    """
    with fileutil.opened(filename, "wb") as file:
        tag = start(file, version=version, magic=magic, encoding=encoding)
        tag.write_all(metadata)
        return tag.finish()

def encode_tag(metadata, version=None, magic=None, encoding=None):
    "Return a complete tag holding metadata as a byte string."
    file = io.BytesIO()
    write_simple(file, metadata, version=version, magic=magic, encoding=encoding)
    return file.getvalue()
