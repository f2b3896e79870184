# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Field readers for ID3v2 frame bodies.

A frame class lists its fields as a tuple of Spec objects in
_framespec.  Each spec consumes the front of the body and returns
(value, rest); the frame applies them in order.  Running out of data
is signalled by EOFError, which is fatal unless the spec is optional.
"""

import abc

from abc import abstractmethod

from id3stack.conversion import *
from id3stack.errors import *
from id3stack import textcodec

# The idea for the Spec system comes from Mutagen.

def optionalspec(spec, default=None):
    spec._optional = True
    spec.default = default
    return spec

class Spec(metaclass=abc.ABCMeta):
    def __init__(self, name):
        self.name = name

    _optional = False
    default = None
        
    @abstractmethod
    def read(self, frame, data): pass

    def to_str(self, value):
        return "{0}={1}".format(self.name, repr(value))

class ByteSpec(Spec):
    def read(self, frame, data):
        if len(data) < 1:
            raise EOFError()
        return data[0], data[1:]

class CounterSpec(Spec):
    "A big-endian integer filling the rest of the frame, of any width."
    def read(self, frame, data):
        if len(data) == 0:
            raise EOFError()
        return Int8.decode(data), bytes()

class BinaryDataSpec(Spec):
    def read(self, frame, data):
        return bytes(data), bytes()
    def to_str(self, value):
        return '{0}={1}{2}'.format(self.name, value[0:16], "..." if len(value) > 16 else "")

class SimpleStringSpec(Spec):
    def __init__(self, name, length):
        super().__init__(name)
        self.length = length
    def read(self, frame, data):
        if len(data) < self.length:
            raise EOFError()
        return data[:self.length].decode('iso-8859-1'), data[self.length:]

class LanguageSpec(SimpleStringSpec):
    def __init__(self, name):
        super().__init__(name, 3)

class CommentLanguageSpec(LanguageSpec):
    """Language code followed by a description/text pair.

    Some taggers write a terminator straight after the language code
    and only then the real description.  That stray terminator is
    skipped when what follows still holds a terminated, non-empty
    description and a non-empty text.
    """
    def read(self, frame, data):
        lang, data = super().read(frame, data)
        width = textcodec.ENCODINGS[frame.encoding].width
        if data[:width] == b"\x00" * width:
            rest = data[width:]
            index = textcodec.find_terminator(rest, width)
            if index > 0 and rest[index + width:].strip(b"\x00"):
                data = rest
        return lang, data
    
class NullTerminatedStringSpec(Spec):
    def read(self, frame, data):
        rawstr, sep, data = data.partition(b"\x00")
        return rawstr.decode('iso-8859-1'), data

class URLStringSpec(Spec):
    def read(self, frame, data):
        rawstr, sep, data = data.partition(b"\x00")
        if len(rawstr) == 0 and len(data) > 0:
            # iTunes prepends an extra null byte to WFED frames (encoding spec?)
            rawstr, sep, data = data.partition(b"\x00")
        return rawstr.decode('iso-8859-1'), data

class EncodingSpec(ByteSpec):
    "EncodingSpec must be the first spec."
    def read(self, frame, data):
        enc, data = super().read(frame, data)
        if enc & 0xFC:
            raise FrameError("Invalid encoding 0x{0:02X}".format(enc))
        return enc, data
    def to_str(self, value):
        if value is None:
            return "<undef>"
        return textcodec.encoding(value).name

class EncodedStringSpec(Spec):
    """A terminated string in the frame's encoding.
    An unterminated string extends to the end of the frame."""
    def read(self, frame, data):
        width = textcodec.ENCODINGS[frame.encoding].width
        index = textcodec.find_terminator(data, width)
        if index < 0:
            return textcodec.decode_text(data, frame.encoding), bytes()
        return (textcodec.decode_text(data[:index], frame.encoding),
                data[index + width:])

class EncodedDescriptionSpec(EncodedStringSpec):
    """A terminated description in front of a value.
    Without a terminator the description is empty and the whole
    remainder is left for the value."""
    def read(self, frame, data):
        width = textcodec.ENCODINGS[frame.encoding].width
        if textcodec.find_terminator(data, width) < 0:
            return "", data
        return super().read(frame, data)

class EncodedFullTextSpec(EncodedStringSpec):
    """The rest of the frame as one string, trailing terminators removed.
    Terminated values are decoded one by one, each with its own byte
    order mark, and joined with NUL."""
    def read(self, frame, data):
        values = []
        while True:
            value, data = super().read(frame, data)
            values.append(value)
            if not data:
                break
        return "\x00".join(values).rstrip("\x00"), bytes()

class SequenceSpec(Spec):
    """Recognizes a sequence of values, all of the same spec."""
    def __init__(self, name, spec):
        super().__init__(name)
        self.spec = spec

    def read(self, frame, data):
        "Returns a list of values, eats all of data."
        seq = []
        while data:
            elem, data = self.spec.read(frame, data)
            seq.append(elem)
        return seq, data
