# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Selection of the frame that carries a metadata entry."""

from id3write import id3
from id3write.conversion import Int8
from id3write.frames import TextFrame, TXXX
from id3write.specs import is_ascii

def frame_key(frameid):
    "Return frameid as a big-endian 32-bit integer."
    return Int8.decode(frameid.encode("ASCII"))

def is_candidate(key):
    "Return true if key may name a known text frame."
    return len(key) == 4 and key[0] == "T" and is_ascii(key)

class FrameTable:
    """An immutable list of frame ids valid in the given ID3 versions.

    >>> table = FrameTable("v2.4", ("TDRC", "TSOA"), versions=(4,))
    >>> table.match("TSOA")
    'TSOA'
    >>> table.match("TYER") is None
    True
    """
    def __init__(self, name, frameids, versions=(3, 4)):
        self.name = name
        self.versions = frozenset(versions)
        keys = []
        for frameid in frameids:
            key = frame_key(frameid)
            if key in keys:
                raise ValueError("Duplicate frame id {0} in {1} table"
                                 .format(frameid, name))
            keys.append(key)
        self._keys = tuple(keys)
        self._frameids = tuple(frameids)

    def applies(self, version):
        return version in self.versions

    def match(self, key):
        "Return the frame id matching key, or None."
        if not is_candidate(key):
            return None
        value = frame_key(key)
        for (k, frameid) in zip(self._keys, self._frameids):
            if k == value:
                return frameid
        return None

    def __contains__(self, key):
        return self.match(key) is not None

    def __len__(self):
        return len(self._keys)

    def __repr__(self):
        return "<FrameTable {0}: {1} frames>".format(self.name, len(self))

class Resolver:
    """An ordered chain of frame tables.

    Tables are consulted in order, skipping those that do not apply to the
    tag version; the first table containing the key determines the frame.
    Keys that no table knows are stored in a TXXX frame.
    """
    def __init__(self, *tables):
        self.tables = tuple(tables)

    def lookup(self, key, version):
        "Return the known frame id for key, or None if it has none."
        for table in self.tables:
            if table.applies(version):
                frameid = table.match(key)
                if frameid is not None:
                    return frameid
        return None

    def resolve(self, key, value, version):
        "Return the frame that stores value under key."
        frameid = self.lookup(key, version)
        if frameid is None:
            return TXXX(key, value)
        return TextFrame(frameid, value)

    def __repr__(self):
        return "<Resolver: {0}>".format(", ".join(t.name for t in self.tables))

default_resolver = Resolver(FrameTable("common", id3.common_frames, versions=(3, 4)),
                            FrameTable("v2.3", id3.v23_frames, versions=(3,)),
                            FrameTable("v2.4", id3.v24_frames, versions=(4,)))
