# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Readers for the three framed ID3v2 editions.

Tag22, Tag23 and Tag24 each parse one edition in a single forward
scan: the 10-byte header, an optional extended header, then frames
until the declared frame area is exhausted or padding begins.  The
result is a read-only mapping from frame ids to tuples of frames.
"""

import abc
import collections.abc
import io
import re

from abc import abstractmethod
from warnings import warn

from id3stack.errors import *
from id3stack.conversion import *
from id3stack.friendly import split_values, parse_number_pair, parse_genres

import id3stack.frames as Frames
import id3stack.fileutil as fileutil
import id3stack.id3 as id3

_TAG22_UNSYNCHRONISED = 0x80
_TAG22_COMPRESSED = 0x40
_TAG22_UNKNOWN_MASK = 0x3F

_TAG23_UNSYNCHRONISED = 0x80
_TAG23_EXTENDED_HEADER = 0x40
_TAG23_EXPERIMENTAL = 0x20
_TAG23_UNKNOWN_MASK = 0x1F

_EXT23_CRC_PRESENT = 0x8000

_FRAME23_FORMAT_COMPRESSED = 0x0080
_FRAME23_FORMAT_ENCRYPTED = 0x0040
_FRAME23_FORMAT_GROUP = 0x0020
_FRAME23_FORMAT_UNKNOWN_MASK = 0x001F

_FRAME23_STATUS_DISCARD_ON_TAG_ALTER = 0x8000
_FRAME23_STATUS_DISCARD_ON_FILE_ALTER = 0x4000
_FRAME23_STATUS_READ_ONLY = 0x2000
_FRAME23_STATUS_UNKNOWN_MASK = 0x1F00

_TAG24_UNSYNCHRONISED = 0x80
_TAG24_EXTENDED_HEADER = 0x40
_TAG24_EXPERIMENTAL = 0x20
_TAG24_FOOTER = 0x10
_TAG24_UNKNOWN_MASK = 0x0F

_EXT24_UPDATE = 0x40
_EXT24_CRC_PRESENT = 0x20
_EXT24_RESTRICTIONS = 0x10

_FRAME24_FORMAT_GROUP = 0x0040
_FRAME24_FORMAT_COMPRESSED = 0x0008
_FRAME24_FORMAT_ENCRYPTED = 0x0004
_FRAME24_FORMAT_UNSYNCHRONISED = 0x0002
_FRAME24_FORMAT_DATA_LENGTH_INDICATOR = 0x0001
_FRAME24_FORMAT_UNKNOWN_MASK = 0x00B0

_FRAME24_STATUS_DISCARD_ON_TAG_ALTER = 0x4000
_FRAME24_STATUS_DISCARD_ON_FILE_ALTER = 0x2000
_FRAME24_STATUS_READ_ONLY = 0x1000
_FRAME24_STATUS_UNKNOWN_MASK = 0x8F00

def read_tag(filename):
    "Read the ID3v2 tag at the start of filename, whatever its version."
    with fileutil.opened(filename, "rb") as file:
        cls = detect_tag(file)
        return cls.read(file)

def decode_tag(data):
    return read_tag(io.BytesIO(data))

def detect_tag(filename):
    """Return the class of the ID3v2 tag at the start of filename:
    Tag22, Tag23, or Tag24.  The file position is left unchanged."""
    with fileutil.opened(filename, "rb") as file:
        offset = file.tell()
        header = file.read(10)
        file.seek(offset)
        if len(header) < 10 or header[0:3] != b"ID3":
            raise NoTagError("ID3v2 tag not found")
        if header[3] not in _tag_versions:
            raise TagError("Unknown ID3 version: 2.{0}.{1}"
                           .format(*header[3:5]))
        return _tag_versions[header[3]]


class Tag(collections.abc.Mapping, metaclass=abc.ABCMeta):
    """An ID3v2 tag: a read-only mapping from frame ids to tuples of
    frames, in the order they appear in the file."""

    # Decode the tag size as a plain 32-bit integer instead of a
    # syncsafe one, reproducing what some legacy readers do.
    PLAIN_SIZE_WORKAROUND = False

    version = None
    declared_frames = {}
    _frame_header_size = None
    _frameid_width = None

    # Frame ids behind the friendly accessors
    _friendly_ids = {}

    def __init__(self):
        self.flags = set()
        self.size = 0
        self._frames = tuple()
        self._index = dict()

    # Mapping methods
    def __getitem__(self, frameid):
        return self._index[frameid]
    def __iter__(self):
        return iter(self._index)
    def __len__(self):
        return len(self._index)

    def frames(self, frameid=None):
        """Return a tuple of all frames, or of all frames with the given
        id, in file order."""
        if frameid is None:
            return self._frames
        return self._index.get(frameid, tuple())

    def __repr__(self):
        return "<{0}: ID3v2.{1} tag{2} with {3} frames>".format(
            type(self).__name__,
            self.version,
            ("({0})".format(", ".join(sorted(self.flags)))
             if len(self.flags) > 0 else ""),
            len(self._frames))

    @property
    def unsynchronised(self):
        return "unsynchronisation" in self.flags
    @property
    def extended_header(self):
        return "extended_header" in self.flags
    @property
    def experimental(self):
        return "experimental" in self.flags
    @property
    def footer(self):
        return "footer" in self.flags
    @property
    def compressed(self):
        return "compression" in self.flags

    # Reading tags
    @classmethod
    def read(cls, filename):
        """Read a tag from the current position of a file.

        Raises NoTagError if there is no tag of this version there,
        TagError or FrameError if the tag is malformed, and EOFError if
        the file ends inside the tag.
        """
        with fileutil.opened(filename, "rb") as file:
            tag = cls()
            remaining = tag._read_header(file)
            frames = []
            for (frameid, bflags, data) in tag._read_frames(file, remaining):
                frames.append(tag._frame_from_data(frameid, bflags, data))
            tag._set_frames(frames)
            return tag

    @classmethod
    def decode(cls, data):
        return cls.read(io.BytesIO(data))

    def _set_frames(self, frames):
        self._frames = tuple(frames)
        index = dict()
        for frame in self._frames:
            index.setdefault(frame.frameid, []).append(frame)
        self._index = dict((key, tuple(value)) for (key, value) in index.items())

    def _read_header(self, file):
        """Read the tag header and any extended header.
        Returns the number of bytes left in the frame area."""
        header = file.read(10)
        if len(header) < 10:
            raise NoTagError("ID3v2 header not found")
        if header[0:3] != b"ID3":
            raise NoTagError("ID3v2 header not found")
        if header[3] != self.version:
            raise NoTagError("Not an ID3v2.{0} tag".format(self.version))
        self._interpret_tag_flags(header[5])
        if self.PLAIN_SIZE_WORKAROUND:
            self.size = Int8.decode(header[6:10])
        else:
            self.size = Syncsafe.decode(header[6:10])
        remaining = self.size
        if "extended_header" in self.flags:
            remaining -= self._read_extended_header(file)
            if remaining < 0:
                raise TagError("Extended header is larger than the tag")
        return remaining

    def _read_frames(self, file, remaining):
        hsize = self._frame_header_size
        while remaining >= hsize:
            header = fileutil.xread(file, hsize)
            remaining -= hsize
            if header[0] == 0:
                # Padding
                break
            rawid = header[0:self._frameid_width]
            if not self._is_frame_id(rawid):
                warn("Invalid ID3v2.{0} frame id {1!r}; ignoring the rest of the tag"
                     .format(self.version, rawid), TagWarning)
                break
            frameid = rawid.decode("ASCII")
            (size, bflags) = self._decode_frame_header(header)
            if size > remaining:
                raise FrameError("Frame {0} is {1} bytes long, but only {2} "
                                 "bytes remain in the tag"
                                 .format(frameid, size, remaining))
            data = fileutil.xread(file, size)
            remaining -= size
            yield (frameid, bflags, data)

    def _frame_from_data(self, frameid, bflags, data):
        try:
            (flags, extras, body) = self._interpret_frame_flags(frameid, bflags, data)
        except FrameError as e:
            warn("Could not decode {0} frame: {1}".format(frameid, e),
                 ErrorFrameWarning)
            return Frames.ErrorFrame(frameid, data, e, size=len(data))
        declared = self.declared_frames.get(frameid)
        frametype = declared.type if declared else None
        return Frames.decode_frame(frameid, frametype, body, flags=flags,
                                   size=len(data), **extras)

    @classmethod
    def _is_frame_id(cls, data):
        return (len(data) == cls._frameid_width
                and re.match(b"^[A-Z0-9]+$", data) is not None)

    @abstractmethod
    def _interpret_tag_flags(self, bflags): pass

    def _read_extended_header(self, file):
        raise TagError("ID3v2.{0} tags have no extended header".format(self.version))

    @abstractmethod
    def _decode_frame_header(self, header): pass

    @abstractmethod
    def _interpret_frame_flags(self, frameid, bflags, data): pass

    # Friendly accessors
    def _friendly_frames(self, name, cls):
        frameid = self._friendly_ids.get(name)
        return [frame for frame in self._index.get(frameid, ())
                if isinstance(frame, cls)]

    def _friendly_text(self, name):
        for frame in self._friendly_frames(name, Frames.TextFrame):
            return " / ".join(value for value in frame.values if value)
        return ""

    def _friendly_texts(self, name):
        return [frame.text for frame in self._friendly_frames(name, Frames.TextFrame)]

    @property
    def title(self):
        return self._friendly_text("title")

    @property
    def album(self):
        return self._friendly_text("album")

    @property
    def artists(self):
        return split_values(self._friendly_texts("artists"))

    @property
    def album_artists(self):
        return split_values(self._friendly_texts("album_artists"))

    @property
    def composers(self):
        return split_values(self._friendly_texts("composers"))

    @property
    def year(self):
        return self._friendly_text("year")

    @property
    def track_number_and_position(self):
        return parse_number_pair(self._friendly_text("track"))

    @property
    def disc_number_and_position(self):
        return parse_number_pair(self._friendly_text("disc"))

    @property
    def genres(self):
        genres = []
        for text in self._friendly_texts("genres"):
            for genre in parse_genres(text):
                if genre not in genres:
                    genres.append(genre)
        return genres

    @property
    def comment(self):
        for frame in self._friendly_frames("comment", Frames.CommentFrame):
            return frame.text
        return ""

    @property
    def lyrics(self):
        for frame in self._friendly_frames("lyrics", Frames.LyricsFrame):
            return frame.text
        return ""

    @property
    def pictures(self):
        return self._friendly_frames("pictures", Frames.PictureFrame)

    @property
    def compilation(self):
        for frame in self._friendly_frames("compilation", Frames.CompilationFrame):
            return frame.compilation
        return False


class Tag22(Tag):
    version = 2
    declared_frames = id3.frames22
    _frame_header_size = 6
    _frameid_width = 3
    _friendly_ids = {
        "title": "TT2", "artists": "TP1", "album": "TAL",
        "album_artists": "TP2", "year": "TYE", "track": "TRK",
        "disc": "TPA", "genres": "TCO", "composers": "TCM",
        "comment": "COM", "lyrics": "ULT", "pictures": "PIC",
        "compilation": "TCP",
        }

    def _interpret_tag_flags(self, bflags):
        if bflags & _TAG22_UNSYNCHRONISED:
            self.flags.add("unsynchronisation")
        if bflags & _TAG22_COMPRESSED: # Compression bit is ill-defined in standard
            self.flags.add("compression")
        if bflags & _TAG22_UNKNOWN_MASK:
            warn("Unknown ID3v2.2 flags 0x{0:02X}".format(bflags), TagWarning)

    def _decode_frame_header(self, header):
        # No frame flags in v2.2
        return (Int8.decode(header[3:6]), 0)

    def _interpret_frame_flags(self, frameid, bflags, data):
        return (Frames.NO_FLAGS, {}, data)


class Tag23(Tag):
    version = 3
    declared_frames = id3.frames23
    _frame_header_size = 10
    _frameid_width = 4
    _friendly_ids = {
        "title": "TIT2", "artists": "TPE1", "album": "TALB",
        "album_artists": "TPE2", "year": "TYER", "track": "TRCK",
        "disc": "TPOS", "genres": "TCON", "composers": "TCOM",
        "comment": "COMM", "lyrics": "USLT", "pictures": "APIC",
        "compilation": "TCMP",
        }

    def _interpret_tag_flags(self, bflags):
        if bflags & _TAG23_UNSYNCHRONISED:
            self.flags.add("unsynchronisation")
        if bflags & _TAG23_EXTENDED_HEADER:
            self.flags.add("extended_header")
        if bflags & _TAG23_EXPERIMENTAL:
            self.flags.add("experimental")
        if bflags & _TAG23_UNKNOWN_MASK:
            warn("Unknown ID3v2.3 flags 0x{0:02X}".format(bflags), TagWarning)

    def _read_extended_header(self, file):
        size = Int8.decode(fileutil.xread(file, 4))
        if size != 6 and size != 10:
            warn("Unexpected size of ID3v2.3 extended header: {0}".format(size),
                 TagWarning)
        data = fileutil.xread(file, size)
        ext_flags = Int8.decode(data[0:2])
        if ext_flags & _EXT23_CRC_PRESENT:
            self.flags.add("ext:crc_present")
            self.crc32 = Int8.decode(data[6:10])
        return 4 + size

    def _decode_frame_header(self, header):
        return (Int8.decode(header[4:8]), Int8.decode(header[8:10]))

    def _interpret_frame_flags(self, frameid, bflags, data):
        extras = {}
        # Frame format flags
        if bflags & _FRAME23_FORMAT_UNKNOWN_MASK:
            warn("Unknown ID3v2.3 frame format flags on {0}: 0x{1:04X}"
                 .format(frameid, bflags), FrameWarning)
        compressed = bool(bflags & _FRAME23_FORMAT_COMPRESSED)
        encrypted = bool(bflags & _FRAME23_FORMAT_ENCRYPTED)
        grouping = bool(bflags & _FRAME23_FORMAT_GROUP)
        prefix = 4 * compressed + encrypted + grouping
        if len(data) < prefix:
            raise FrameError("Frame {0} is too short for its flags".format(frameid))
        if compressed:
            extras["data_length"] = Int8.decode(data[0:4])
            data = data[4:]
        if encrypted:
            # Encryption method
            data = data[1:]
        if grouping:
            extras["group"] = data[0]
            data = data[1:]
        # Frame status flags
        if bflags & _FRAME23_STATUS_UNKNOWN_MASK:
            warn("Unknown ID3v2.3 frame status flags on {0}: 0x{1:04X}"
                 .format(frameid, bflags), FrameWarning)
        flags = Frames.FrameFlags(
            discard_on_tag_alter=bool(bflags & _FRAME23_STATUS_DISCARD_ON_TAG_ALTER),
            discard_on_file_alter=bool(bflags & _FRAME23_STATUS_DISCARD_ON_FILE_ALTER),
            read_only=bool(bflags & _FRAME23_STATUS_READ_ONLY),
            grouping=grouping,
            compressed=compressed,
            encrypted=encrypted,
            data_length_indicator=compressed)
        return (flags, extras, data)


class Tag24(Tag):
    # Older versions of iTunes stored frame sizes as straight 8bit
    # integers, not syncsafe.  (This is known to be fixed in iTunes 8.2.)
    ITUNES_WORKAROUND = False

    version = 4
    declared_frames = id3.frames24
    _frame_header_size = 10
    _frameid_width = 4
    _friendly_ids = {
        "title": "TIT2", "artists": "TPE1", "album": "TALB",
        "album_artists": "TPE2", "year": "TDRC", "track": "TRCK",
        "disc": "TPOS", "genres": "TCON", "composers": "TCOM",
        "comment": "COMM", "lyrics": "USLT", "pictures": "APIC",
        "compilation": "TCMP",
        }

    @property
    def year(self):
        # TDRC holds a timestamp; the year is its first four characters
        return self._friendly_text("year")[:4]

    def _interpret_tag_flags(self, bflags):
        if bflags & _TAG24_UNSYNCHRONISED:
            self.flags.add("unsynchronisation")
        if bflags & _TAG24_EXTENDED_HEADER:
            self.flags.add("extended_header")
        if bflags & _TAG24_EXPERIMENTAL:
            self.flags.add("experimental")
        if bflags & _TAG24_FOOTER:
            self.flags.add("footer")
        if bflags & _TAG24_UNKNOWN_MASK:
            warn("Unknown ID3v2.4 flags 0x{0:02X}".format(bflags), TagWarning)

    def __read_extended_header_flag_data(self, data):
        # 1-byte length + data
        if len(data) < 1:
            raise TagError("Truncated extended header field")
        length = data[0]
        if length & 128:
            raise TagError("Invalid size of extended header field")
        return (data[1:1+length], data[1+length:])

    def _read_extended_header(self, file):
        size = Syncsafe.decode(fileutil.xread(file, 4))
        if size < 6:
            raise TagError("Invalid size of ID3v2.4 extended header: {0}".format(size))
        data = fileutil.xread(file, size - 4)

        numflags = data[0]
        if numflags != 1:
            warn("Unexpected number of ID3v2.4 extended flag bytes: {0}"
                 .format(numflags), TagWarning)
        flags = data[1]
        data = data[1+numflags:]
        if flags & _EXT24_UPDATE:
            self.flags.add("ext:update")
            (dummy, data) = self.__read_extended_header_flag_data(data)
        if flags & _EXT24_CRC_PRESENT:
            self.flags.add("ext:crc_present")
            (crc32, data) = self.__read_extended_header_flag_data(data)
            self.crc32 = Syncsafe.decode(crc32)
        if flags & _EXT24_RESTRICTIONS:
            self.flags.add("ext:restrictions")
            (self.restrictions, data) = self.__read_extended_header_flag_data(data)
        return size

    def _decode_frame_header(self, header):
        if self.ITUNES_WORKAROUND:
            size = Int8.decode(header[4:8])
        else:
            size = Syncsafe.decode(header[4:8])
        return (size, Int8.decode(header[8:10]))

    def _interpret_frame_flags(self, frameid, bflags, data):
        extras = {}
        # Frame format flags
        if bflags & _FRAME24_FORMAT_UNKNOWN_MASK:
            warn("Unknown ID3v2.4 frame format flags on {0}: 0x{1:04X}"
                 .format(frameid, bflags), FrameWarning)
        grouping = bool(bflags & _FRAME24_FORMAT_GROUP)
        encrypted = bool(bflags & _FRAME24_FORMAT_ENCRYPTED)
        indicator = bool(bflags & _FRAME24_FORMAT_DATA_LENGTH_INDICATOR)
        prefix = grouping + encrypted + 4 * indicator
        if len(data) < prefix:
            raise FrameError("Frame {0} is too short for its flags".format(frameid))
        if grouping:
            extras["group"] = data[0]
            data = data[1:]
        if encrypted:
            # Encryption method
            data = data[1:]
        if indicator:
            extras["data_length"] = Syncsafe.decode(data[0:4])
            data = data[4:]
        # Frame status flags
        if bflags & _FRAME24_STATUS_UNKNOWN_MASK:
            warn("Unknown ID3v2.4 frame status flags on {0}: 0x{1:04X}"
                 .format(frameid, bflags), FrameWarning)
        flags = Frames.FrameFlags(
            discard_on_tag_alter=bool(bflags & _FRAME24_STATUS_DISCARD_ON_TAG_ALTER),
            discard_on_file_alter=bool(bflags & _FRAME24_STATUS_DISCARD_ON_FILE_ALTER),
            read_only=bool(bflags & _FRAME24_STATUS_READ_ONLY),
            grouping=grouping,
            compressed=bool(bflags & _FRAME24_FORMAT_COMPRESSED),
            encrypted=encrypted,
            unsynchronised=bool(bflags & _FRAME24_FORMAT_UNSYNCHRONISED),
            data_length_indicator=indicator)
        return (flags, extras, data)


_tag_versions = {
    2: Tag22,
    3: Tag23,
    4: Tag24,
    }
