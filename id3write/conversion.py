# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Syncsafe:
    """Conversion to/from syncsafe integers.
    Syncsafe integers are big-endian 7-bit byte sequences.
    """
    @staticmethod
    def decode(data):
        "Decodes a syncsafe integer"
        value = 0
        for b in data:
            if b > 127:
                raise ValueError("Invalid syncsafe integer")
            value <<= 7
            value += b
        return value

    @staticmethod
    def encode(i, *, width=4):
        """Encodes a nonnegative integer into a syncsafe field of width bytes.

        Only the low 7 * width bits of i are kept; the top bit of every
        resulting byte is clear.
        """
        if i < 0:
            raise ValueError("value is negative")
        assert width > 0
        return bytes((i >> (7 * (width - 1 - n))) & 0x7F for n in range(width))

    @staticmethod
    def limit(width=4):
        "Returns the largest value that fits in a syncsafe field of width bytes."
        return (1 << (7 * width)) - 1

class Int8:
    """Conversion to/from binary integer values of any length."""

    @staticmethod
    def decode(data):
        "Decodes an 8-bit big-endian integer of any length"
        value = 0
        for b in data:
            value <<= 8
            value += b
        return value

    @staticmethod
    def encode(i, *, width=-1):
        "Encodes a nonnegative integer into a big-endian byte string of given length"
        assert width != 0
        if i is None:
            i = 0
        if i < 0: raise ValueError("Nonnegative integer expected")
        data = bytearray()
        while i:
            data.append(i & 255)
            i >>= 8
        if width > 0 and len(data) > width:
            raise ValueError("Integer too large")
        if len(data) < abs(width):
            data.extend([0] * (abs(width) - len(data)))
        return bytes(data[::-1])
