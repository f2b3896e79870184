# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""File manipulation utilities."""

import os

from contextlib import contextmanager

def xread(file, length):
    "Read exactly length bytes from file; raise EOFError if file ends sooner."
    data = file.read(length)
    if len(data) != length:
        raise EOFError("Expected {0} bytes, got {1}".format(length, len(data)))
    return data

@contextmanager
def opened(filename, mode):
    "Open filename, or do nothing if filename is already an open file object"
    if isinstance(filename, (str, bytes, os.PathLike)):
        file = open(filename, mode)
        try: 
            yield file
        finally: 
            if not file.closed:
                file.close()
    else:
        yield filename

def file_size(file):
    "Return the size of an open seekable file, leaving the position at its end."
    return file.seek(0, os.SEEK_END)

def replace_tail(filename, length, chunk):
    """Replace the last length bytes of the file with chunk.

    With length == 0 the chunk is appended; with an empty chunk the
    file is truncated.  Works on filenames and open file objects alike.
    """
    with opened(filename, "rb+") as file:
        size = file_size(file)
        if length > size:
            raise ValueError("Cannot replace {0} bytes of a {1}-byte file"
                             .format(length, size))
        file.seek(size - length)
        file.truncate()
        file.write(chunk)
