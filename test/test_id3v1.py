# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import random
import io
import os
import tempfile
import warnings

import id3stack
from id3stack.errors import *
from id3stack.id3v1 import Tag1

from tagdata import tag1

class ID3v1TestCase(unittest.TestCase):
    def testDecodeV11(self):
        t = Tag1.decode(tag1(b"Title", b"Artist", b"Album", b"2009",
                             b"Comment", track=7, genre=13))
        self.assertEqual(t.title, "Title")
        self.assertEqual(t.artist, "Artist")
        self.assertEqual(t.album, "Album")
        self.assertEqual(t.year, "2009")
        self.assertEqual(t.comment, "Comment")
        self.assertEqual(t.track, 7)
        self.assertEqual(t.genre, 13)
        self.assertEqual(t.genre_name, "Pop")
        self.assertEqual(t.version, "ID3v1.1")

    def testDecodeV10(self):
        comment = b"A thirty character comment..."
        t = Tag1.decode(tag1(b"Title", comment=comment + b"!", genre=255))
        self.assertEqual(t.comment, (comment + b"!").decode("ascii"))
        self.assertEqual(t.track, 0)
        self.assertEqual(t.genre_name, "")
        self.assertEqual(t.version, "ID3v1")

    def testTrimming(self):
        t = Tag1.decode(tag1(b"  Title \x01", b"Artist\x00garbage"))
        self.assertEqual(t.title, "Title")
        self.assertEqual(t.artist, "Artist")
        self.assertEqual(t.album, "")

    def testLatin1(self):
        t = Tag1.decode(tag1(b"Caf\xe9"))
        self.assertEqual(t.title, "Caf\xe9")

    def testNoTag(self):
        self.assertRaises(NoTagError, Tag1.decode, b"TAG")
        self.assertRaises(NoTagError, Tag1.decode, b"XYZ" + b"\x00" * 125)
        self.assertRaises(NoTagError, Tag1.read, io.BytesIO(b"TAG" * 10))
        self.assertRaises(NoTagError, Tag1.read, io.BytesIO(b"\x00" * 512))

    def testEncodeTruncates(self):
        t = Tag1(title="T" * 40, artist="A" * 31, album="B" * 30, year="20091",
                 comment="C" * 30, track=3, genre=17)
        data = t.encode()
        self.assertEqual(len(data), 128)
        t2 = Tag1.decode(data)
        self.assertEqual(t2.title, "T" * 30)
        self.assertEqual(t2.artist, "A" * 30)
        self.assertEqual(t2.album, "B" * 30)
        self.assertEqual(t2.year, "2009")
        self.assertEqual(t2.comment, "C" * 28)
        self.assertEqual(t2.track, 3)
        self.assertEqual(t2.genre_name, "Rock")

    def testEncodeInvalid(self):
        self.assertRaises(ValueError, Tag1(track=256).encode)
        self.assertRaises(ValueError, Tag1(genre=300).encode)

    def testRoundTrip(self):
        t = Tag1(title="Title", artist="Artist", album="Album", year="2009",
                 comment="Comment", track=13, genre=143)
        self.assertEqual(Tag1.decode(t.encode()), t)
        t = Tag1(title="Title", comment="A" * 30, genre=None)
        t2 = Tag1.decode(t.encode())
        self.assertEqual(t2.comment, "A" * 30)
        self.assertEqual(t2.genre, 255)

class ID3v1FileOpTestCase(unittest.TestCase):
    def testAddDeleteTag(self):
        """Add/delete random tags to a file, verify integrity."""
        origdata = bytearray(random.randint(0, 255) for i in range(512))
        origdata[-128:-125] = b'\xFF\xFF\xFF'
        data = bytearray(origdata)
        file = io.BytesIO(data)
        try:
            self.assertRaises(NoTagError, Tag1.read, file)
            tag = Tag1()
            tag.title = "Title"
            tag.artist = "Artist"
            tag.album = "Album"
            tag.year = "2009"
            tag.comment = "Comment"
            tag.track = 13
            tag.genre = 143
            tag.write(file)
            tag.write(file)
            self.assertEqual(len(file.getvalue()), len(origdata) + 128)
            tag2 = Tag1.read(file)
            self.assertEqual(tag, tag2)
            Tag1.delete(file)
            self.assertEqual(file.getvalue(), origdata)
            Tag1.delete(file)
            self.assertEqual(file.getvalue(), origdata)
        finally:
            file.close()

    def testFilename(self):
        file = tempfile.NamedTemporaryFile(prefix="id3stacktest-", suffix=".mp3", delete=False)
        try:
            file.write(b"\xFF\xFB" * 100)
            file.close()
            Tag1(title="On disk", genre=0).write(file.name)
            self.assertEqual(os.path.getsize(file.name), 200 + 128)
            t = Tag1.read(file.name)
            self.assertEqual(t.title, "On disk")
            self.assertEqual(t.genre_name, "Blues")
            Tag1.delete(file.name)
            self.assertEqual(os.path.getsize(file.name), 200)
        finally:
            os.unlink(file.name)

suite = unittest.TestSuite([
        unittest.TestLoader().loadTestsFromTestCase(ID3v1TestCase),
        unittest.TestLoader().loadTestsFromTestCase(ID3v1FileOpTestCase)])

if __name__ == "__main__":
    warnings.simplefilter("always", id3stack.Warning)
    unittest.main(defaultTest="suite")
