# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""ID3v1 and ID3v1.1 tags: a fixed 128-byte trailer at the end of the file.

    offset  length  field
         0       3  "TAG"
         3      30  title
        33      30  artist
        63      30  album
        93       4  year
        97      30  comment (28 bytes in ID3v1.1)
       125       1  zero in ID3v1.1
       126       1  track number in ID3v1.1
       127       1  genre index
"""

from id3stack.errors import *
from id3stack import fileutil
from id3stack import id3

_TAG_SIZE = 128

def _decode_field(data):
    text = data.partition(b"\x00")[0].decode("iso-8859-1")
    return text.strip("\x00\x01 ")

def _encode_field(value, length):
    data = value.encode("iso-8859-1", errors="replace")[:length]
    return data + b"\x00" * (length - len(data))

class Tag1:
    def __init__(self, title="", artist="", album="", year="", comment="",
                 track=0, genre=None):
        self.title = title
        self.artist = artist
        self.album = album
        self.year = year
        self.comment = comment
        self.track = track
        self.genre = genre

    @property
    def version(self):
        return "ID3v1.1" if self.track else "ID3v1"

    @property
    def genre_name(self):
        "The name of the genre, or \"\" if the index is unknown."
        if self.genre is None:
            return ""
        return id3.genre_name(self.genre) or ""

    def __eq__(self, other):
        return (isinstance(other, type(self))
                and self.title == other.title
                and self.artist == other.artist
                and self.album == other.album
                and self.year == other.year
                and self.comment == other.comment
                and self.track == other.track
                and self.genre == other.genre)

    __hash__ = None

    def __repr__(self):
        return ("Tag1(title={0!r}, artist={1!r}, album={2!r}, year={3!r}, "
                "comment={4!r}, track={5!r}, genre={6!r})"
                .format(self.title, self.artist, self.album, self.year,
                        self.comment, self.track, self.genre))

    @classmethod
    def decode(cls, data):
        if len(data) != _TAG_SIZE or data[0:3] != b"TAG":
            raise NoTagError("ID3v1 tag not found")
        tag = cls()
        tag.title = _decode_field(data[3:33])
        tag.artist = _decode_field(data[33:63])
        tag.album = _decode_field(data[63:93])
        tag.year = _decode_field(data[93:97])
        if data[125] == 0:
            # ID3v1.1
            tag.comment = _decode_field(data[97:125])
            tag.track = data[126]
        else:
            tag.comment = _decode_field(data[97:127])
            tag.track = 0
        tag.genre = data[127]
        return tag

    @classmethod
    def read(cls, filename):
        "Read the ID3v1 tag at the end of filename."
        with fileutil.opened(filename, "rb") as file:
            if fileutil.file_size(file) < _TAG_SIZE:
                raise NoTagError("File too short for an ID3v1 tag")
            file.seek(-_TAG_SIZE, 2)
            return cls.decode(fileutil.xread(file, _TAG_SIZE))

    def encode(self):
        data = bytearray(b"TAG")
        data.extend(_encode_field(self.title, 30))
        data.extend(_encode_field(self.artist, 30))
        data.extend(_encode_field(self.album, 30))
        data.extend(_encode_field(self.year, 4))
        if self.track:
            if self.track not in range(1, 256):
                raise ValueError("Invalid ID3v1.1 track number: {0}".format(self.track))
            data.extend(_encode_field(self.comment, 28))
            data.append(0)
            data.append(self.track)
        else:
            data.extend(_encode_field(self.comment, 30))
        genre = 255 if self.genre is None else self.genre
        if genre not in range(256):
            raise ValueError("Invalid ID3v1 genre index: {0}".format(genre))
        data.append(genre)
        assert len(data) == _TAG_SIZE
        return bytes(data)

    def write(self, filename):
        "Write the tag to the end of filename, replacing any existing ID3v1 tag."
        with fileutil.opened(filename, "rb+") as file:
            length = _TAG_SIZE if self._present(file) else 0
            fileutil.replace_tail(file, length, self.encode())

    @classmethod
    def delete(cls, filename):
        "Remove the ID3v1 tag from the end of filename, if there is one."
        with fileutil.opened(filename, "rb+") as file:
            if cls._present(file):
                fileutil.replace_tail(file, _TAG_SIZE, bytes())

    @staticmethod
    def _present(file):
        if fileutil.file_size(file) < _TAG_SIZE:
            return False
        file.seek(-_TAG_SIZE, 2)
        return file.read(3) == b"TAG"
