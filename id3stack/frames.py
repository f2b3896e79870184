# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Class definitions for ID3v2 frames.

Every frame read from a tag is an instance of exactly one of the
classes below.  The class is chosen by the frame registry in
id3stack.id3; ids missing from the registry decode as UnknownFrame.
"""

import abc
import collections
from warnings import warn

from id3stack.errors import *
from id3stack.specs import *
from id3stack import imaging

FrameFlags = collections.namedtuple(
    "FrameFlags",
    "discard_on_tag_alter discard_on_file_alter read_only grouping "
    "compressed encrypted unsynchronised data_length_indicator",
    defaults=(False,) * 8)

NO_FLAGS = FrameFlags()

class Frame(metaclass=abc.ABCMeta):
    _framespec = tuple()

    def __init__(self, frameid=None, flags=None, size=None,
                 group=None, data_length=None, **kwargs):
        self.frameid = frameid if frameid else type(self).__name__
        self.flags = flags if flags else NO_FLAGS
        self.size = size
        self.group = group
        self.data_length = data_length
        assert len(self._framespec) > 0
        for spec in self._framespec:
            setattr(self, spec.name, kwargs.get(spec.name, spec.default))

    def __eq__(self, other):
        return (isinstance(other, type(self))
                and self.frameid == other.frameid
                and self.flags == other.flags
                and self._framespec == other._framespec
                and all(getattr(self, spec.name, None) ==
                        getattr(other, spec.name, None)
                        for spec in self._framespec))

    __hash__ = None

    @classmethod
    def _from_data(cls, frameid, data, **kwargs):
        kwargs.setdefault("size", len(data))
        frame = cls(frameid=frameid, **kwargs)
        for spec in frame._framespec:
            try:
                val, data = spec.read(frame, data)
                setattr(frame, spec.name, val)
            except EOFError:
                if not spec._optional:
                    raise
        return frame

    def __repr__(self):
        stype = type(self).__name__
        args = []
        if stype != self.frameid:
            args.append("frameid={0!r}".format(self.frameid))
        if self.flags != NO_FLAGS:
            args.append("flags={0!r}".format(self.flags))
        for spec in self._framespec:
            if isinstance(spec, BinaryDataSpec):
                data = getattr(self, spec.name)
                args.append("{0}=<{1} bytes of binary data {2!r}{3}>".format(
                        spec.name, len(data),
                        data[:20], "..." if len(data) > 20 else ""))
            else:
                args.append("{0}={1!r}".format(spec.name, getattr(self, spec.name)))
        return "{0}({1})".format(stype, ", ".join(args))

    def _str_fields(self):
        fields = []
        for spec in self._framespec:
            fields.append(spec.to_str(getattr(self, spec.name, None)))
        return ", ".join(fields)

    def __str__(self):
        flag = " "
        if isinstance(self, UnknownFrame): flag = "?"
        if isinstance(self, ErrorFrame): flag = "!"
        return "{0}{1}({2})".format(flag, self.frameid, self._str_fields())

class UnknownFrame(Frame):
    "A frame kept as its raw, undecoded body."
    _framespec = (BinaryDataSpec("data"),)

class ErrorFrame(UnknownFrame):
    "A frame whose body does not match the layout of its declared type."
    def __init__(self, frameid, data, exception, **kwargs):
        super().__init__(frameid=frameid, data=bytes(data), **kwargs)
        self.exception = exception

    def _str_fields(self):
        strs = ["ERROR"]
        if self.exception:
            strs.append(str(self.exception))
        strs.append(repr(self.data))
        return ", ".join(strs)

class TextFrame(Frame):
    _framespec = (optionalspec(EncodingSpec("encoding"), 0),
                  EncodedFullTextSpec("text"))

    @property
    def values(self):
        "The individual strings of a multi-valued text frame."
        return self.text.split("\x00")

    def _str_fields(self):
        return "{0} {1!r}".format(EncodingSpec("encoding").to_str(self.encoding),
                                  self.text)

class CompilationFrame(TextFrame):
    "iTunes compilation flag (TCMP); the text is \"1\" for compilations."
    @property
    def compilation(self):
        return self.text.strip() == "1"

class UserTextFrame(Frame):
    _framespec = (EncodingSpec("encoding"),
                  EncodedDescriptionSpec("description"),
                  EncodedFullTextSpec("value"))

class URLFrame(Frame):
    _framespec = (URLStringSpec("url"), )
    def _str_fields(self):
        return repr(self.url)

class UserURLFrame(Frame):
    _framespec = (EncodingSpec("encoding"),
                  EncodedDescriptionSpec("description"),
                  URLStringSpec("url"))

class UniqueFileIDFrame(Frame):
    _framespec = (NullTerminatedStringSpec("owner"), BinaryDataSpec("data"))

class CommentFrame(Frame):
    _framespec = (EncodingSpec("encoding"),
                  CommentLanguageSpec("lang"),
                  EncodedDescriptionSpec("description"),
                  EncodedFullTextSpec("text"))

class LyricsFrame(CommentFrame):
    pass

class TermsOfUseFrame(Frame):
    _framespec = (EncodingSpec("encoding"),
                  LanguageSpec("lang"),
                  EncodedFullTextSpec("text"))

class PopularimeterFrame(Frame):
    _framespec = (NullTerminatedStringSpec("email"),
                  optionalspec(ByteSpec("rating"), 0),
                  optionalspec(CounterSpec("count"), 0))

class CreditsFrame(Frame):
    "Involved people list; people holds the strings in on-disk order."
    _framespec = (EncodingSpec("encoding"),
                  SequenceSpec("people", EncodedStringSpec("person")))

picture_types = (
    "Other", "32x32 icon", "Other icon", "Front Cover", "Back Cover",
    "Leaflet", "Media", "Lead artist", "Artist", "Conductor",
    "Band/Orchestra", "Composer", "Lyricist/text writer",
    "Recording Location", "Recording", "Performance", "Screen capture",
    "A bright coloured fish", "Illustration", "Band/artist",
    "Publisher/Studio")

class PictureFrame(Frame):
    _framespec = (EncodingSpec("encoding"),
                  NullTerminatedStringSpec("mime"),
                  ByteSpec("type"),
                  EncodedDescriptionSpec("description"),
                  BinaryDataSpec("data"))

    @property
    def type_name(self):
        if self.type in range(len(picture_types)):
            return picture_types[self.type]
        return "Unknown"

    def image(self):
        "Decode the picture into a PIL image; see id3stack.imaging."
        return imaging.decode_image(self.data, self.mime)

    def _str_fields(self):
        return "{0}, {1!r}, {2}, {3!r}, <{4} bytes of {5} data>".format(
            EncodingSpec("encoding").to_str(self.encoding),
            self.mime, self.type_name, self.description,
            len(self.data), self.mime)

class PictureFrame22(PictureFrame):
    "ID3v2.2 picture, with a three-letter image format in place of a MIME type."
    _framespec = (EncodingSpec("encoding"),
                  SimpleStringSpec("format", 3),
                  ByteSpec("type"),
                  EncodedDescriptionSpec("description"),
                  BinaryDataSpec("data"))

    @property
    def mime(self):
        return self.format


def decode_frame(frameid, frametype, data, flags=NO_FLAGS, **kwargs):
    """Decode a frame body into an instance of frametype.

    frametype may be None for undeclared frame ids.  A body that does
    not fit its declared layout is returned as an ErrorFrame with an
    ErrorFrameWarning; compressed, encrypted and unsynchronised bodies
    are kept opaque.
    """
    if frametype is None:
        frametype = UnknownFrame
    if frametype is not UnknownFrame and (flags.compressed or flags.encrypted
                                          or flags.unsynchronised):
        warn("Frame {0} is compressed, encrypted or unsynchronised; "
             "keeping its data opaque".format(frameid), OpaqueFrameWarning)
        frametype = UnknownFrame
    try:
        return frametype._from_data(frameid, data, flags=flags, **kwargs)
    except (FrameError, ValueError, EOFError) as e:
        warn("Could not decode {0} frame: {1}".format(frameid, e),
             ErrorFrameWarning)
        kwargs.setdefault("size", len(data))
        return ErrorFrame(frameid, data, e, flags=flags, **kwargs)
