# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Decoding of attached pictures into PIL images."""

from io import BytesIO

from PIL import Image, UnidentifiedImageError

from id3stack.errors import *

# Asserted picture types (MIME types, or ID3v2.2 image formats) and the
# Pillow format each one is decoded with.
_formats = {
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
    "image/png": "PNG",
    "JPG": "JPEG",
    "PNG": "PNG",
    }

def decode_image(data, mime):
    """Decode picture data of the given MIME type (or v2.2 format).

    Returns a loaded PIL.Image.Image.  Raises UnsupportedImageError for
    other types, or when the data is not a valid image of the asserted
    type.
    """
    format = _formats.get(mime.strip()) or _formats.get(mime.strip().lower())
    if format is None:
        raise UnsupportedImageError("Unsupported picture type {0!r}".format(mime))
    try:
        image = Image.open(BytesIO(data), formats=[format])
        image.load()
    except (UnidentifiedImageError, OSError, EOFError, SyntaxError, ValueError) as e:
        raise UnsupportedImageError("Invalid {0} data: {1}".format(mime, e)) from e
    return image
