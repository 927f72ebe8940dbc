# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Text encodings of ID3v2 text frames."""

from warnings import warn

from id3write.errors import *
from id3write.fileutil import scratch_buffer

ISO8859 = 0
UTF16BOM = 1
UTF8 = 3

BOM = b"\xFF\xFE"  # 0xFEFF, little-endian

_encodings = {ISO8859: ('iso-8859-1', b"\x00"),
              UTF16BOM: ('utf-16-le', b"\x00\x00"),
              UTF8: ('utf-8', b"\x00")}

def encoding_name(encoding):
    if encoding == UTF16BOM:
        return "utf-16"
    return _encodings[encoding][0]

def validate_encoding(encoding):
    if isinstance(encoding, str):
        value = encoding.lower().replace("-", "").replace("_", "")
        for enc in _encodings:
            if encoding_name(enc).replace("-", "") == value:
                return enc
        raise ValueError("Unknown encoding {0!r}".format(encoding))
    if not isinstance(encoding, int):
        raise TypeError("Not an encoding")
    if encoding not in _encodings:
        raise ValueError("Invalid encoding 0x{0:X}".format(encoding))
    return encoding

def is_ascii(value):
    return all(ord(c) < 128 for c in value)

def negotiate_encoding(strings, requested):
    """Return the encoding to use for strings when requested is asked for.

    UTF-16 is only worth its size when some string is outside ASCII;
    otherwise the single-byte encoding is used instead.
    """
    if requested == UTF16BOM and all(is_ascii(s) for s in strings):
        return ISO8859
    return requested

def _encode_strings(strings, encoding):
    codec, term = _encodings[encoding]
    return [s.encode(codec) + term for s in strings]

def encode_text(str1, str2=None, encoding=UTF16BOM):
    """Encode one or two strings as the payload of a text frame.

    The result starts with the encoding marker byte, followed by a BOM for
    UTF-16, followed by each string with its own null terminator.  When
    str2 is given, it immediately follows the terminator of str1.
    """
    strings = [str1] if str2 is None else [str1, str2]
    for s in strings:
        if not isinstance(s, str):
            raise TypeError("Not a string: {0!r}".format(s))
    encoding = negotiate_encoding(strings, validate_encoding(encoding))
    try:
        fields = _encode_strings(strings, encoding)
    except UnicodeEncodeError:
        if encoding != ISO8859:
            raise
        warn("Text is not representable in {0}; using {1}".format(
                encoding_name(ISO8859), encoding_name(UTF16BOM)),
             EncodingFallbackWarning)
        encoding = UTF16BOM
        fields = _encode_strings(strings, encoding)

    with scratch_buffer() as buffer:
        buffer.write(bytes([encoding]))
        if encoding == UTF16BOM:
            buffer.write(BOM)
        for field in fields:
            buffer.write(field)
        return buffer.getvalue()
