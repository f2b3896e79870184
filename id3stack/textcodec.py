# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Decoding of the four string encodings used inside ID3v2 frames.

Every text-bearing frame starts with an encoding selector byte:

    0  ISO-8859-1
    1  UTF-16 with byte order mark
    2  UTF-16BE without byte order mark
    3  UTF-8

Decoding never fails: malformed sequences become U+FFFD, and a UTF-16
string with an odd number of bytes is realigned before decoding.
"""

import collections

Encoding = collections.namedtuple("Encoding", "name width codec")

ISO_8859_1 = Encoding("ISO-8859-1", 1, "iso-8859-1")
UTF_16 = Encoding("UTF-16", 2, "utf-16")
UTF_16BE = Encoding("UTF-16BE", 2, "utf-16-be")
UTF_8 = Encoding("UTF-8", 1, "utf-8")

ENCODINGS = (ISO_8859_1, UTF_16, UTF_16BE, UTF_8)

def encoding(selector):
    "Return the Encoding for a selector byte, or raise ValueError."
    if selector not in range(len(ENCODINGS)):
        raise ValueError("Invalid text encoding 0x{0:02X}".format(selector))
    return ENCODINGS[selector]

def _align(data):
    # A stray zero byte in front means the string starts one byte late;
    # anything else leaves a dangling byte at the end.
    if len(data) & 1:
        if data[0] == 0:
            return data[1:]
        return data[:-1]
    return data

def decode_text(data, encoding):
    """Decode data using the given Encoding (or selector byte).

    Never raises on truncated or malformed input.
    """
    if isinstance(encoding, int):
        encoding = ENCODINGS[encoding]
    data = bytes(data)
    if encoding.width == 1:
        return data.decode(encoding.codec, errors="replace")
    if encoding is UTF_16:
        if data[:2] == b"\xFE\xFF":
            return _align(data[2:]).decode("utf-16-be", errors="replace")
        if data[:2] == b"\xFF\xFE":
            data = data[2:]
        return _align(data).decode("utf-16-le", errors="replace")
    return _align(data).decode(encoding.codec, errors="replace")

def find_terminator(data, width, start=0):
    """Return the index of the first aligned run of width zero bytes
    at or after start, or -1 if there is none."""
    if width == 1:
        return data.find(b"\x00", start)
    for i in range(start, len(data) - 1, 2):
        if data[i] == 0 and data[i + 1] == 0:
            return i
    return -1
