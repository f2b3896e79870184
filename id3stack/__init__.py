# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import io

import id3stack.frames
import id3stack.tags
import id3stack.id3

from id3stack.errors import *
from id3stack.tags import read_tag, decode_tag, detect_tag, Tag22, Tag23, Tag24
from id3stack.id3v1 import Tag1
from id3stack.unified import UnifiedTag

def read(filename):
    "Read every ID3 tag in filename (a path or a seekable binary file)."
    return UnifiedTag.read(filename)

def decode(data):
    return UnifiedTag.read(io.BytesIO(data))
