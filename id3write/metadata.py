# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Normalization of generic metadata keys to native ID3 frame ids."""

import collections.abc

from id3write import id3

class MetadataConv:
    """A table of (native key, generic key) pairs.

    Generic keys are matched case-insensitively; when a generic key appears
    more than once, the first pair wins.

    >>> conv = MetadataConv(("TIT2", "title"))
    >>> conv.convert("Title")
    'TIT2'
    >>> conv.convert("comment")
    'comment'
    """
    def __init__(self, *pairs, versions=(3, 4)):
        self.versions = tuple(versions)
        self._map = dict()
        for (native, generic) in pairs:
            self._map.setdefault(generic.lower(), native)

    def applies(self, version):
        return version in self.versions

    def convert(self, key):
        return self._map.get(key.lower(), key)

    def __repr__(self):
        return "<MetadataConv for ID3v2.{0}: {1} keys>".format(
            "/".join(str(v) for v in self.versions), len(self._map))

default_conv = (MetadataConv(*id3.v34_metadata_conv, versions=(3, 4)),
                MetadataConv(*id3.v4_metadata_conv, versions=(4,)))

def normalize_key(key, version, convs=default_conv):
    "Return the native key for key in an ID3v2.<version> tag."
    for conv in convs:
        if conv.applies(version):
            key = conv.convert(key)
    return key

def iter_metadata(metadata):
    "Iterate over the (key, value) pairs of a mapping or a sequence of pairs."
    if isinstance(metadata, collections.abc.Mapping):
        return iter(metadata.items())
    return iter(metadata)

def normalize_metadata(metadata, version, convs=default_conv):
    """Generate (native key, value) pairs for metadata.

    Order and duplicate entries are preserved.
    """
    for (key, value) in iter_metadata(metadata):
        yield (normalize_key(key, version, convs), value)
