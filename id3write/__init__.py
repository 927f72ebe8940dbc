# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import id3write.frames
import id3write.tags
import id3write.id3

from id3write.errors import *
from id3write.specs import ISO8859, UTF16BOM, UTF8, encode_text
from id3write.frames import Frame, TextFrame, TXXX, write_frame
from id3write.resolver import FrameTable, Resolver
from id3write.metadata import MetadataConv, normalize_metadata
from id3write.tags import (start, write_simple, encode_tag,
                           TagWriter, Tag23Writer, Tag24Writer)

version = (0, 1, 0)
versionstr = ".".join((str(v) for v in version))
