# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""A single view over every ID3 tag present in a file.

A file may carry an ID3v1 trailer and an ID3v2 header at the same
time.  UnifiedTag reads all of them, and its accessors answer from the
newest edition that has a non-empty value, falling back towards ID3v1.
"""

from id3stack.errors import *
from id3stack.id3v1 import Tag1
from id3stack.tags import Tag22, Tag23, Tag24
from id3stack import fileutil

_editions = (
    ("v1", "ID3v1", Tag1),
    ("v22", "ID3v2.2", Tag22),
    ("v23", "ID3v2.3", Tag23),
    ("v24", "ID3v2.4", Tag24),
    )

class UnifiedTag:
    def __init__(self, v1=None, v22=None, v23=None, v24=None):
        self.v1 = v1
        self.v22 = v22
        self.v23 = v23
        self.v24 = v24

    @classmethod
    def read(cls, filename):
        """Read all ID3 tags from filename (a path or a seekable file).

        Missing editions are left as None.  Any other failure is
        raised as ReadError naming the edition that could not be parsed.
        """
        tag = cls()
        with fileutil.opened(filename, "rb") as file:
            for (attr, version, tagcls) in _editions:
                file.seek(0)
                try:
                    setattr(tag, attr, tagcls.read(file))
                except NoTagError:
                    pass
                except (Error, EOFError) as e:
                    raise ReadError(version, str(e) or type(e).__name__) from e
        return tag

    @property
    def framed_tags(self):
        "The ID3v2 tags present, newest first."
        return [t for t in (self.v24, self.v23, self.v22) if t is not None]

    def __bool__(self):
        return self.v1 is not None or len(self.framed_tags) > 0

    def __repr__(self):
        present = [version for (attr, version, tagcls) in _editions
                   if getattr(self, attr) is not None]
        return "<UnifiedTag: {0}>".format(", ".join(present) or "no tags")

    def frames(self, frameid=None):
        """Return the frames of all ID3v2 tags, newest edition first,
        optionally restricted to one frame id."""
        frames = []
        for tag in self.framed_tags:
            frames.extend(tag.frames(frameid))
        return frames

    def _lookup(self, name, v1value=None, empty="", present=None):
        if present is None:
            present = lambda value: value and value != empty
        for tag in self.framed_tags:
            value = getattr(tag, name)
            if present(value):
                return value
        if self.v1 is not None and v1value is not None:
            value = v1value(self.v1)
            if value is not None and present(value):
                return value
        return empty

    @property
    def title(self):
        return self._lookup("title", lambda v1: v1.title)

    @property
    def album(self):
        return self._lookup("album", lambda v1: v1.album)

    @property
    def artists(self):
        return self._lookup("artists", 
                            lambda v1: [v1.artist] if v1.artist else [], [])

    @property
    def album_artists(self):
        return self._lookup("album_artists",
                            lambda v1: [v1.artist] if v1.artist else [], [])

    @property
    def composers(self):
        return self._lookup("composers", empty=[])

    @property
    def year(self):
        return self._lookup("year", lambda v1: v1.year)

    @property
    def track_number_and_position(self):
        return self._lookup("track_number_and_position",
                            lambda v1: (v1.track, 0), (0, 0),
                            present=lambda value: value[0] != 0)

    @property
    def disc_number_and_position(self):
        return self._lookup("disc_number_and_position", empty=(0, 0),
                            present=lambda value: value[0] != 0)

    @property
    def genres(self):
        return self._lookup("genres",
                            lambda v1: [v1.genre_name] if v1.genre_name else [], [])

    @property
    def comment(self):
        return self._lookup("comment", lambda v1: v1.comment)

    @property
    def lyrics(self):
        return self._lookup("lyrics")

    @property
    def pictures(self):
        return self._lookup("pictures", empty=[])

    @property
    def compilation(self):
        return self._lookup("compilation", empty=False)
