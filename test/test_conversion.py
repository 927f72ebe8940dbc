# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import random

from id3write.conversion import *

class SyncsafeTestCase(unittest.TestCase):
    def testEncode(self):
        self.assertEqual(Syncsafe.encode(0), b"\x00\x00\x00\x00")
        self.assertEqual(Syncsafe.encode(127), b"\x00\x00\x00\x7F")
        self.assertEqual(Syncsafe.encode(128), b"\x00\x00\x01\x00")
        self.assertEqual(Syncsafe.encode(200), b"\x00\x00\x01\x48")
        self.assertEqual(Syncsafe.encode((1 << 28) - 1), b"\x7F\x7F\x7F\x7F")
        self.assertEqual(Syncsafe.encode(200, width=2), b"\x01\x48")

    def testRoundtrip(self):
        values = [0, 1, 127, 128, 255, 256, 16383, 16384, 
                  (1 << 21) - 1, 1 << 21, (1 << 28) - 1]
        values.extend(random.randint(0, (1 << 28) - 1) for i in range(500))
        for value in values:
            data = Syncsafe.encode(value)
            self.assertEqual(len(data), 4)
            self.assertTrue(all(b & 0x80 == 0 for b in data))
            self.assertEqual(Syncsafe.decode(data), value)

    def testOverflowIsMasked(self):
        # Sizes beyond 28 bits are the caller's problem; only the low bits survive.
        self.assertEqual(Syncsafe.encode(1 << 28), b"\x00\x00\x00\x00")
        self.assertEqual(Syncsafe.encode((1 << 28) + 5), b"\x00\x00\x00\x05")

    def testInvalid(self):
        self.assertRaises(ValueError, Syncsafe.encode, -1)
        self.assertRaises(ValueError, Syncsafe.decode, b"\x80\x00\x00\x00")

    def testLimit(self):
        self.assertEqual(Syncsafe.limit(), (1 << 28) - 1)
        self.assertEqual(Syncsafe.limit(1), 127)

class Int8TestCase(unittest.TestCase):
    def testEncode(self):
        self.assertEqual(Int8.encode(200, width=4), b"\x00\x00\x00\xC8")
        self.assertEqual(Int8.encode(0, width=2), b"\x00\x00")
        self.assertEqual(Int8.encode(0x54495432, width=4), b"TIT2")
        self.assertRaises(ValueError, Int8.encode, 1 << 32, width=4)
        self.assertRaises(ValueError, Int8.encode, -1, width=4)

    def testDecode(self):
        self.assertEqual(Int8.decode(b"\x00\x00\x00\xC8"), 200)
        self.assertEqual(Int8.decode(b"TXXX"), 0x54585858)

suite = unittest.TestSuite()
suite.addTest(unittest.TestLoader().loadTestsFromTestCase(SyncsafeTestCase))
suite.addTest(unittest.TestLoader().loadTestsFromTestCase(Int8TestCase))

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
