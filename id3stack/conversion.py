# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Syncsafe:
    """Decoding of syncsafe integers.
    Syncsafe integers are big-endian 7-bit byte sequences.
    """
    @staticmethod
    def decode(data):
        "Decodes a syncsafe integer, ignoring the top bit of each byte"
        value = 0
        for b in data:
            value <<= 7
            value += b & 0x7F
        return value

class Int8:
    """Decoding of big-endian integer values of any length."""

    @staticmethod
    def decode(data):
        "Decodes an 8-bit big-endian integer of any length"
        value = 0
        for b in data:
            value <<= 8
            value += b
        return value
