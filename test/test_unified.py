# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import io
import os
import tempfile
import warnings

import id3stack
from id3stack.errors import *
from id3stack.frames import *
from id3stack.unified import UnifiedTag

from tagdata import *

AUDIO = b"\xFF\xFB\x90\x00" * 64

class UnifiedTestCase(unittest.TestCase):
    def testNewestEditionWins(self):
        v22 = id3stack.Tag22.decode(tag(2, frame22("TT2", text("Old title")),
                                           frame22("TAL", text("Old album"))))
        v24 = id3stack.Tag24.decode(tag(4, frame24("TIT2", text("New title"))))
        u = UnifiedTag(v22=v22, v24=v24)
        self.assertEqual(u.title, "New title")
        # v2.4 has no album, so v2.2 answers
        self.assertEqual(u.album, "Old album")
        self.assertEqual(u.framed_tags, [v24, v22])

    def testV1Fallback(self):
        data = (tag(3, frame23("TIT2", text("Title")))
                + AUDIO
                + tag1(b"V1 title", b"V1 artist", b"V1 album", b"1998",
                       b"V1 comment", track=5, genre=8))
        u = id3stack.decode(data)
        self.assertIsNotNone(u.v1)
        self.assertIsNotNone(u.v23)
        self.assertIsNone(u.v22)
        self.assertIsNone(u.v24)
        self.assertEqual(u.title, "Title")
        self.assertEqual(u.album, "V1 album")
        self.assertEqual(u.artists, ["V1 artist"])
        self.assertEqual(u.album_artists, ["V1 artist"])
        self.assertEqual(u.year, "1998")
        self.assertEqual(u.track_number_and_position, (5, 0))
        self.assertEqual(u.genres, ["Jazz"])
        self.assertEqual(u.comment, "V1 comment")

    def testOnlyV1(self):
        u = id3stack.decode(AUDIO + tag1(b"Title", genre=255))
        self.assertEqual(u.title, "Title")
        self.assertEqual(u.genres, [])
        self.assertEqual(u.track_number_and_position, (0, 0))
        self.assertEqual(u.frames(), [])

    def testNoTags(self):
        u = id3stack.decode(AUDIO)
        self.assertFalse(u)
        self.assertEqual(repr(u), "<UnifiedTag: no tags>")
        self.assertEqual(u.title, "")
        self.assertEqual(u.album, "")
        self.assertEqual(u.artists, [])
        self.assertEqual(u.album_artists, [])
        self.assertEqual(u.year, "")
        self.assertEqual(u.track_number_and_position, (0, 0))
        self.assertEqual(u.disc_number_and_position, (0, 0))
        self.assertEqual(u.genres, [])
        self.assertEqual(u.pictures, [])
        self.assertEqual(u.comment, "")
        self.assertFalse(u.compilation)
        u = id3stack.decode(b"")
        self.assertFalse(u)

    def testEachEdition(self):
        for version, frame, tid, pid in ((2, frame22, "TT2", "PIC"),
                                         (3, frame23, "TIT2", "APIC"),
                                         (4, frame24, "TIT2", "APIC")):
            pic = (b"\x00PNG\x03\x00data" if version == 2
                   else b"\x00image/png\x00\x03\x00data")
            u = id3stack.decode(tag(version, frame(tid, text("Title")),
                                    frame(pid, pic)) + AUDIO)
            self.assertEqual(u.title, "Title")
            self.assertEqual(len(u.pictures), 1)
            self.assertEqual(u.pictures[0].data, b"data")
            self.assertEqual([f.frameid for f in u.frames()], [tid, pid])
            self.assertEqual(len(u.frames(tid)), 1)

    def testZeroTrackFallsBack(self):
        v23 = id3stack.Tag23.decode(tag(3, frame23("TRCK", text("3/12")),
                                           frame23("TPOS", text("1/2"))))
        v24 = id3stack.Tag24.decode(tag(4, frame24("TRCK", text("0/5")),
                                           frame24("TPOS", text("0/3"))))
        u = UnifiedTag(v23=v23, v24=v24)
        self.assertEqual(v24.track_number_and_position, (0, 5))
        self.assertEqual(u.track_number_and_position, (3, 12))
        self.assertEqual(u.disc_number_and_position, (1, 2))
        data = tag(4, frame24("TRCK", text("0/5"))) + AUDIO + tag1(b"Title", track=7)
        self.assertEqual(id3stack.decode(data).track_number_and_position, (7, 0))
        u = UnifiedTag(v24=v24)
        self.assertEqual(u.track_number_and_position, (0, 0))

    def testFramesNewestFirst(self):
        v23 = id3stack.Tag23.decode(tag(3, frame23("TIT2", text("three"))))
        v24 = id3stack.Tag24.decode(tag(4, frame24("TIT2", text("four"))))
        u = UnifiedTag(v23=v23, v24=v24)
        self.assertEqual([f.text for f in u.frames("TIT2")], ["four", "three"])

    def testOversizeFrameIsFatal(self):
        frame = frame23("TIT2", text("Title"))
        data = tag(3, frame, size=syncsafe(len(frame) - 1)) + AUDIO
        with self.assertRaises(ReadError) as cm:
            id3stack.decode(data)
        self.assertEqual(cm.exception.version, "ID3v2.3")
        self.assertIsInstance(cm.exception.__cause__, FrameError)

    def testTruncatedSourceIsFatal(self):
        data = tag(4, frame24("TIT2", text("A long title")), padding=100)
        with self.assertRaises(ReadError) as cm:
            id3stack.decode(data[:25])
        self.assertEqual(cm.exception.version, "ID3v2.4")
        self.assertIsInstance(cm.exception.__cause__, EOFError)

    def testTrailingJunkKeepsAllEditions(self):
        data = (tag(3, frame23("TIT2", text("Title")), b"\xFF" * 12)
                + AUDIO + tag1(b"V1 title", b"V1 artist"))
        with self.assertWarns(TagWarning):
            u = id3stack.decode(data)
        self.assertEqual(u.v23.title, "Title")
        self.assertEqual(u.v1.artist, "V1 artist")
        self.assertEqual(u.title, "Title")
        self.assertEqual(u.artists, ["V1 artist"])

    def testReadFilename(self):
        file = tempfile.NamedTemporaryFile(prefix="id3stacktest-", suffix=".mp3", delete=False)
        try:
            file.write(tag(4, frame24("TIT2", text("On disk"))) + AUDIO
                       + tag1(b"V1", genre=0))
            file.close()
            u = id3stack.read(file.name)
            self.assertEqual(u.title, "On disk")
            self.assertEqual(u.genres, ["Blues"])
            self.assertEqual(repr(u), "<UnifiedTag: ID3v1, ID3v2.4>")
        finally:
            os.unlink(file.name)

    def testReadOpenFile(self):
        file = io.BytesIO(tag(3, frame23("TPE1", text("A/B"))) + AUDIO)
        u = UnifiedTag.read(file)
        self.assertEqual(u.artists, ["A", "B"])
        self.assertFalse(file.closed)

suite = unittest.TestLoader().loadTestsFromTestCase(UnifiedTestCase)

if __name__ == "__main__":
    warnings.simplefilter("always", id3stack.Warning)
    unittest.main(defaultTest="suite")
