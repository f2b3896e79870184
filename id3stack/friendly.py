# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Interpretation of text frame values: multi-valued strings, number
pairs like "3/12", and ID3v1-style genre references."""

from id3stack import id3

def split_values(texts):
    """Split each text on "/" and NUL, strip whitespace and drop empty
    values.  Returns one flat list in order."""
    values = []
    for text in texts:
        for part in text.replace("\x00", "/").split("/"):
            part = part.strip()
            if part:
                values.append(part)
    return values

def _number(text):
    text = text.strip()
    if text.isdigit():
        return int(text)
    return None

def parse_number_pair(text):
    """Parse "N/M" into (N, M).  A missing or non-numeric total is 0;
    a non-numeric number gives (0, 0)."""
    if not text:
        return (0, 0)
    number, sep, total = text.partition("/")
    number = _number(number)
    if number is None:
        return (0, 0)
    return (number, _number(total) or 0)

_special_genres = {"RX": "Remix", "CR": "Cover"}

def _resolve_genre(ref):
    ref = ref.strip()
    if ref in _special_genres:
        return _special_genres[ref]
    if ref.isdigit():
        return id3.genre_name(int(ref))
    return None

def _parse_genre_value(value):
    value = value.strip()
    if not value:
        return []
    resolved = _resolve_genre(value)
    if resolved is not None:
        return [resolved]
    if value.isdigit():
        return [value]

    genres = []
    i = 0
    while i < len(value):
        if value.startswith("((", i):
            # Escaped parenthesis; the rest is literal text
            text = "(" + value[i + 2:]
            genres.append(text.strip())
            break
        if value[i] == "(":
            end = value.find(")", i)
            if end < 0:
                genres.append(value[i:].strip())
                break
            resolved = _resolve_genre(value[i + 1:end])
            i = end + 1
            # Text after a reference refines it
            next = value.find("(", i)
            if next < 0:
                next = len(value)
            refinement = value[i:next].strip()
            i = next
            if resolved is not None:
                genres.append(resolved)
            elif refinement:
                genres.append(refinement)
        else:
            next = value.find("(", i)
            if next < 0:
                next = len(value)
            genres.append(value[i:next].strip())
            i = next
    return [g for g in genres if g]

def parse_genres(text):
    """Resolve a content type string into a list of genre names.

    >>> parse_genres("(13)Pop")
    ['Pop']
    >>> parse_genres("Miscellaneous(31)Ska")
    ['Miscellaneous', 'Trance']
    >>> parse_genres("(4)(17)")
    ['Disco', 'Rock']
    """
    genres = []
    for value in text.split("\x00"):
        for genre in _parse_genre_value(value):
            if genre not in genres:
                genres.append(genre)
    return genres
