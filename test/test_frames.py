# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import io

from id3write.errors import *
from id3write.specs import ISO8859, UTF16BOM, UTF8
from id3write.frames import *

class FrameTestCase(unittest.TestCase):
    def testHeaderSizeField(self):
        self.assertEqual(encode_frame_header(3, "TIT2", 200),
                         b"TIT2\x00\x00\x00\xC8\x00\x00")
        self.assertEqual(encode_frame_header(4, "TIT2", 200),
                         b"TIT2\x00\x00\x01\x48\x00\x00")
        self.assertEqual(encode_frame_header(3, b"TXXX", 5),
                         encode_frame_header(4, b"TXXX", 5))

    def testInvalidHeader(self):
        for frameid in ("tit2", "TIT", "TIT22", "T\xc9T2", "", b"TI\x00X"):
            self.assertRaises(FrameError, encode_frame_header, 4, frameid, 0)
        self.assertRaises(TagError, encode_frame_header, 2, "TIT2", 0)

    def testWriteFrame(self):
        for version, size in ((3, b"\x00\x00\x00\xC8"), (4, b"\x00\x00\x01\x48")):
            file = io.BytesIO()
            body = bytes(range(200))
            self.assertEqual(write_frame(file, version, "TALB", body), 210)
            self.assertEqual(file.getvalue(), b"TALB" + size + b"\x00\x00" + body)

    def testTextFrame(self):
        frame = TextFrame("TIT2", "Foobar")
        self.assertEqual(frame._to_data(UTF16BOM), b"\x00Foobar\x00")
        self.assertEqual(frame._to_data(UTF8), b"\x03Foobar\x00")
        self.assertEqual(frame, TextFrame("TIT2", "Foobar"))
        self.assertNotEqual(frame, TextFrame("TIT2", "Foo"))
        self.assertRaises(FrameError, TextFrame, "WOAR", "http://example.com")
        self.assertRaises(FrameError, TextFrame, "TIT", "Foobar")

    def testTXXX(self):
        frame = TXXX("custom-key", "hello")
        self.assertEqual(frame.frameid, "TXXX")
        self.assertEqual(frame._to_data(ISO8859),
                         b"\x00custom-key\x00hello\x00")
        file = io.BytesIO()
        self.assertEqual(frame._write(file, 4, ISO8859), 28)
        self.assertEqual(file.getvalue(),
                         b"TXXX\x00\x00\x00\x12\x00\x00"
                         b"\x00custom-key\x00hello\x00")
        self.assertEqual(frame, TXXX("custom-key", "hello"))
        self.assertNotEqual(frame, TextFrame("TXXX", "hello"))

suite = unittest.TestLoader().loadTestsFromTestCase(FrameTestCase)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
