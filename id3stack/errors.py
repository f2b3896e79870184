# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Error(Exception): pass

class Warning(Error, UserWarning): pass

class FrameWarning(Warning): pass
class ErrorFrameWarning(FrameWarning): pass
class OpaqueFrameWarning(FrameWarning): pass

class TagWarning(Warning): pass

class NoTagError(Error): pass
class TagError(Error, ValueError): pass
class FrameError(Error): pass

class UnsupportedImageError(Error): pass

class ReadError(Error):
    """A tag edition was present but could not be parsed.

    version names the edition ("ID3v1", "ID3v2.2", ...); the underlying
    exception is available as __cause__.
    """
    def __init__(self, version, message):
        super().__init__("{0}: {1}".format(version, message))
        self.version = version
