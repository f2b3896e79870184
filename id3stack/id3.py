# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Frames declared by the various ID3 versions, and the ID3v1 genre list.

Each framed edition has its own table mapping frame ids to a
DeclaredFrame; the type is the frame class used to decode the body.
Frames listed with UnknownFrame are recognized but kept opaque.
"""

import collections
import types

from id3stack.frames import *

DeclaredFrame = collections.namedtuple("DeclaredFrame", "frameid description type")

def _table(*entries):
    table = {}
    for (frameid, description, type) in entries:
        assert frameid not in table
        table[frameid] = DeclaredFrame(frameid, description, type)
    return types.MappingProxyType(table)

# ID3v2.2
frames22 = _table(
    ("BUF", "Recommended buffer size", UnknownFrame),
    ("CNT", "Play counter", UnknownFrame),
    ("COM", "Comments", CommentFrame),
    ("CRA", "Audio encryption", UnknownFrame),
    ("CRM", "Encrypted meta frame", UnknownFrame),
    ("ETC", "Event timing codes", UnknownFrame),
    ("EQU", "Equalization", UnknownFrame),
    ("GEO", "General encapsulated object", UnknownFrame),
    ("IPL", "Involved people list", CreditsFrame),
    ("LNK", "Linked information", UnknownFrame),
    ("MCI", "Music CD Identifier", UnknownFrame),
    ("MLL", "MPEG location lookup table", UnknownFrame),
    ("PIC", "Attached picture", PictureFrame22),
    ("POP", "Popularimeter", PopularimeterFrame),
    ("REV", "Reverb", UnknownFrame),
    ("RVA", "Relative volume adjustment", UnknownFrame),
    ("SLT", "Synchronized lyric/text", UnknownFrame),
    ("STC", "Synced tempo codes", UnknownFrame),
    ("TAL", "Album/Movie/Show title", TextFrame),
    ("TBP", "BPM (Beats Per Minute)", TextFrame),
    ("TCM", "Composer", TextFrame),
    ("TCO", "Content type", TextFrame),
    ("TCR", "Copyright message", TextFrame),
    ("TDA", "Date", TextFrame),
    ("TDY", "Playlist delay", TextFrame),
    ("TEN", "Encoded by", TextFrame),
    ("TFT", "File type", TextFrame),
    ("TIM", "Time", TextFrame),
    ("TKE", "Initial key", TextFrame),
    ("TLA", "Language(s)", TextFrame),
    ("TLE", "Length", TextFrame),
    ("TMT", "Media type", TextFrame),
    ("TOA", "Original artist(s)/performer(s)", TextFrame),
    ("TOF", "Original filename", TextFrame),
    ("TOL", "Original Lyricist(s)/text writer(s)", TextFrame),
    ("TOR", "Original release year", TextFrame),
    ("TOT", "Original album/Movie/Show title", TextFrame),
    ("TP1", "Lead artist(s)/Lead performer(s)/Soloist(s)/Performing group", TextFrame),
    ("TP2", "Band/Orchestra/Accompaniment", TextFrame),
    ("TP3", "Conductor/Performer refinement", TextFrame),
    ("TP4", "Interpreted, remixed, or otherwise modified by", TextFrame),
    ("TPA", "Part of a set", TextFrame),
    ("TPB", "Publisher", TextFrame),
    ("TRC", "ISRC (International Standard Recording Code)", TextFrame),
    ("TRD", "Recording dates", TextFrame),
    ("TRK", "Track number/Position in set", TextFrame),
    ("TSI", "Size", TextFrame),
    ("TSS", "Software/hardware and settings used for encoding", TextFrame),
    ("TT1", "Content group description", TextFrame),
    ("TT2", "Title/Songname/Content description", TextFrame),
    ("TT3", "Subtitle/Description refinement", TextFrame),
    ("TXT", "Lyricist/text writer", TextFrame),
    ("TXX", "User defined text information frame", UserTextFrame),
    ("TYE", "Year", TextFrame),
    ("UFI", "Unique file identifier", UniqueFileIDFrame),
    ("ULT", "Unsychronized lyric/text transcription", LyricsFrame),
    ("WAF", "Official audio file webpage", URLFrame),
    ("WAR", "Official artist/performer webpage", URLFrame),
    ("WAS", "Official audio source webpage", URLFrame),
    ("WCM", "Commercial information", URLFrame),
    ("WCP", "Copyright/Legal information", URLFrame),
    ("WPB", "Publishers official webpage", URLFrame),
    ("WXX", "User defined URL link frame", UserURLFrame),
    # iTunes extensions
    ("TCP", "Part of a compilation", CompilationFrame),
    ("WFD", "Podcast URL", URLFrame),
    )

# ID3v2.3
frames23 = _table(
    ("AENC", "Audio encryption", UnknownFrame),
    ("APIC", "Attached picture", PictureFrame),
    ("COMM", "Comments", CommentFrame),
    ("COMR", "Commercial frame", UnknownFrame),
    ("ENCR", "Encryption method registration", UnknownFrame),
    ("EQUA", "Equalization", UnknownFrame),
    ("ETCO", "Event timing codes", UnknownFrame),
    ("GEOB", "General encapsulated object", UnknownFrame),
    ("GRID", "Group identification registration", UnknownFrame),
    ("IPLS", "Involved people list", CreditsFrame),
    ("LINK", "Linked information", UnknownFrame),
    ("MCDI", "Music CD identifier", UnknownFrame),
    ("MLLT", "MPEG location lookup table", UnknownFrame),
    ("OWNE", "Ownership frame", UnknownFrame),
    ("PRIV", "Private frame", UnknownFrame),
    ("PCNT", "Play counter", UnknownFrame),
    ("POPM", "Popularimeter", PopularimeterFrame),
    ("POSS", "Position synchronisation frame", UnknownFrame),
    ("RBUF", "Recommended buffer size", UnknownFrame),
    ("RVAD", "Relative volume adjustment", UnknownFrame),
    ("RVRB", "Reverb", UnknownFrame),
    ("SYLT", "Synchronized lyric/text", UnknownFrame),
    ("SYTC", "Synchronized tempo codes", UnknownFrame),
    ("TALB", "Album/Movie/Show title", TextFrame),
    ("TBPM", "BPM (beats per minute)", TextFrame),
    ("TCOM", "Composer", TextFrame),
    ("TCON", "Content type", TextFrame),
    ("TCOP", "Copyright message", TextFrame),
    ("TDAT", "Date", TextFrame),
    ("TDLY", "Playlist delay", TextFrame),
    ("TENC", "Encoded by", TextFrame),
    ("TEXT", "Lyricist/Text writer", TextFrame),
    ("TFLT", "File type", TextFrame),
    ("TIME", "Time", TextFrame),
    ("TIT1", "Content group description", TextFrame),
    ("TIT2", "Title/songname/content description", TextFrame),
    ("TIT3", "Subtitle/Description refinement", TextFrame),
    ("TKEY", "Initial key", TextFrame),
    ("TLAN", "Language(s)", TextFrame),
    ("TLEN", "Length", TextFrame),
    ("TMED", "Media type", TextFrame),
    ("TOAL", "Original album/movie/show title", TextFrame),
    ("TOFN", "Original filename", TextFrame),
    ("TOLY", "Original lyricist(s)/text writer(s)", TextFrame),
    ("TOPE", "Original artist(s)/performer(s)", TextFrame),
    ("TORY", "Original release year", TextFrame),
    ("TOWN", "File owner/licensee", TextFrame),
    ("TPE1", "Lead performer(s)/Soloist(s)", TextFrame),
    ("TPE2", "Band/orchestra/accompaniment", TextFrame),
    ("TPE3", "Conductor/performer refinement", TextFrame),
    ("TPE4", "Interpreted, remixed, or otherwise modified by", TextFrame),
    ("TPOS", "Part of a set", TextFrame),
    ("TPUB", "Publisher", TextFrame),
    ("TRCK", "Track number/Position in set", TextFrame),
    ("TRDA", "Recording dates", TextFrame),
    ("TRSN", "Internet radio station name", TextFrame),
    ("TRSO", "Internet radio station owner", TextFrame),
    ("TSIZ", "Size", TextFrame),
    ("TSRC", "ISRC (international standard recording code)", TextFrame),
    ("TSSE", "Software/Hardware and settings used for encoding", TextFrame),
    ("TYER", "Year", TextFrame),
    ("TXXX", "User defined text information frame", UserTextFrame),
    ("UFID", "Unique file identifier", UniqueFileIDFrame),
    ("USER", "Terms of use", TermsOfUseFrame),
    ("USLT", "Unsychronized lyric/text transcription", LyricsFrame),
    ("WCOM", "Commercial information", URLFrame),
    ("WCOP", "Copyright/Legal information", URLFrame),
    ("WOAF", "Official audio file webpage", URLFrame),
    ("WOAR", "Official artist/performer webpage", URLFrame),
    ("WOAS", "Official audio source webpage", URLFrame),
    ("WORS", "Official internet radio station homepage", URLFrame),
    ("WPAY", "Payment", URLFrame),
    ("WPUB", "Publishers official webpage", URLFrame),
    ("WXXX", "User defined URL link frame", UserURLFrame),
    # iTunes extensions
    ("TCMP", "Part of a compilation", CompilationFrame),
    ("WFED", "Podcast URL", URLFrame),
    )

# ID3v2.4
frames24 = _table(
    ("AENC", "Audio encryption", UnknownFrame),
    ("APIC", "Attached picture", PictureFrame),
    ("ASPI", "Audio seek point index", UnknownFrame),
    ("COMM", "Comments", CommentFrame),
    ("COMR", "Commercial frame", UnknownFrame),
    ("ENCR", "Encryption method registration", UnknownFrame),
    ("EQU2", "Equalisation (2)", UnknownFrame),
    ("ETCO", "Event timing codes", UnknownFrame),
    ("GEOB", "General encapsulated object", UnknownFrame),
    ("GRID", "Group identification registration", UnknownFrame),
    ("LINK", "Linked information", UnknownFrame),
    ("MCDI", "Music CD identifier", UnknownFrame),
    ("MLLT", "MPEG location lookup table", UnknownFrame),
    ("OWNE", "Ownership frame", UnknownFrame),
    ("PRIV", "Private frame", UnknownFrame),
    ("PCNT", "Play counter", UnknownFrame),
    ("POPM", "Popularimeter", PopularimeterFrame),
    ("POSS", "Position synchronisation frame", UnknownFrame),
    ("RBUF", "Recommended buffer size", UnknownFrame),
    ("RVA2", "Relative volume adjustment (2)", UnknownFrame),
    ("RVRB", "Reverb", UnknownFrame),
    ("SEEK", "Seek frame", UnknownFrame),
    ("SIGN", "Signature frame", UnknownFrame),
    ("SYLT", "Synchronised lyric/text", UnknownFrame),
    ("SYTC", "Synchronised tempo codes", UnknownFrame),
    ("TALB", "Album/Movie/Show title", TextFrame),
    ("TBPM", "BPM (beats per minute)", TextFrame),
    ("TCOM", "Composer", TextFrame),
    ("TCON", "Content type", TextFrame),
    ("TCOP", "Copyright message", TextFrame),
    ("TDEN", "Encoding time", TextFrame),
    ("TDLY", "Playlist delay", TextFrame),
    ("TDOR", "Original release time", TextFrame),
    ("TDRC", "Recording time", TextFrame),
    ("TDRL", "Release time", TextFrame),
    ("TDTG", "Tagging time", TextFrame),
    ("TENC", "Encoded by", TextFrame),
    ("TEXT", "Lyricist/Text writer", TextFrame),
    ("TFLT", "File type", TextFrame),
    ("TIPL", "Involved people list", CreditsFrame),
    ("TIT1", "Content group description", TextFrame),
    ("TIT2", "Title/songname/content description", TextFrame),
    ("TIT3", "Subtitle/Description refinement", TextFrame),
    ("TKEY", "Initial key", TextFrame),
    ("TLAN", "Language(s)", TextFrame),
    ("TLEN", "Length", TextFrame),
    ("TMCL", "Musician credits list", CreditsFrame),
    ("TMED", "Media type", TextFrame),
    ("TMOO", "Mood", TextFrame),
    ("TOAL", "Original album/movie/show title", TextFrame),
    ("TOFN", "Original filename", TextFrame),
    ("TOLY", "Original lyricist(s)/text writer(s)", TextFrame),
    ("TOPE", "Original artist(s)/performer(s)", TextFrame),
    ("TOWN", "File owner/licensee", TextFrame),
    ("TPE1", "Lead performer(s)/Soloist(s)", TextFrame),
    ("TPE2", "Band/orchestra/accompaniment", TextFrame),
    ("TPE3", "Conductor/performer refinement", TextFrame),
    ("TPE4", "Interpreted, remixed, or otherwise modified by", TextFrame),
    ("TPOS", "Part of a set", TextFrame),
    ("TPRO", "Produced notice", TextFrame),
    ("TPUB", "Publisher", TextFrame),
    ("TRCK", "Track number/Position in set", TextFrame),
    ("TRSN", "Internet radio station name", TextFrame),
    ("TRSO", "Internet radio station owner", TextFrame),
    ("TSOA", "Album sort order", TextFrame),
    ("TSOP", "Performer sort order", TextFrame),
    ("TSOT", "Title sort order", TextFrame),
    ("TSRC", "ISRC (international standard recording code)", TextFrame),
    ("TSSE", "Software/Hardware and settings used for encoding", TextFrame),
    ("TSST", "Set subtitle", TextFrame),
    ("TXXX", "User defined text information frame", UserTextFrame),
    ("UFID", "Unique file identifier", UniqueFileIDFrame),
    ("USER", "Terms of use", TermsOfUseFrame),
    ("USLT", "Unsynchronised lyric/text transcription", LyricsFrame),
    ("WCOM", "Commercial information", URLFrame),
    ("WCOP", "Copyright/Legal information", URLFrame),
    ("WOAF", "Official audio file webpage", URLFrame),
    ("WOAR", "Official artist/performer webpage", URLFrame),
    ("WOAS", "Official audio source webpage", URLFrame),
    ("WORS", "Official Internet radio station homepage", URLFrame),
    ("WPAY", "Payment", URLFrame),
    ("WPUB", "Publishers official webpage", URLFrame),
    ("WXXX", "User defined URL link frame", UserURLFrame),
    # iTunes extensions
    ("TCMP", "Part of a compilation", CompilationFrame),
    ("WFED", "Podcast URL", URLFrame),
    )

# ID3v1 genre list
genres = (
    "Blues", "Classic Rock", "Country", "Dance", "Disco", "Funk", "Grunge",
    "Hip-Hop", "Jazz", "Metal", "New Age", "Oldies", "Other", "Pop", "R&B",
    "Rap", "Reggae", "Rock", "Techno", "Industrial", "Alternative", "Ska",
    "Death Metal", "Pranks", "Soundtrack", "Euro-Techno", "Ambient",
    "Trip-Hop", "Vocal", "Jazz+Funk", "Fusion", "Trance", "Classical",
    "Instrumental", "Acid", "House", "Game", "Sound Clip", "Gospel", "Noise",
    "AlternRock", "Bass", "Soul", "Punk", "Space", "Meditative",
    "Instrumental Pop", "Instrumental Rock", "Ethnic", "Gothic", "Darkwave",
    "Techno-Industrial", "Electronic", "Pop-Folk", "Eurodance", "Dream",
    "Southern Rock", "Comedy", "Cult", "Gangsta", "Top 40", "Christian Rap",
    "Pop/Funk", "Jungle", "Native American", "Cabaret", "New Wave",
    "Psychadelic", "Rave", "Showtunes", "Trailer", "Lo-Fi", "Tribal",
    "Acid Punk", "Acid Jazz", "Polka", "Retro", "Musical", "Rock & Roll",
    "Hard Rock",
    # 80-125: Winamp extensions
    "Folk", "Folk-Rock", "National Folk", "Swing", "Fast Fusion", "Bebob",
    "Latin", "Revival", "Celtic", "Bluegrass", "Avantgarde", "Gothic Rock",
    "Progressive Rock", "Psychedelic Rock", "Symphonic Rock", "Slow Rock",
    "Big Band", "Chorus", "Easy Listening", "Acoustic", "Humour", "Speech",
    "Chanson", "Opera", "Chamber Music", "Sonata", "Symphony", "Booty Bass",
    "Primus", "Porn Groove", "Satire", "Slow Jam", "Club", "Tango", "Samba",
    "Folklore", "Ballad", "Power Ballad", "Rhythmic Soul", "Freestyle",
    "Duet", "Punk Rock", "Drum Solo", "A capella", "Euro-House",
    "Dance Hall",
    # 126-147: Even more esoteric Winamp extensions
    "Goa", "Drum & Bass", "Club House", "Hardcore", "Terror", "Indie",
    "BritPop", "", "Polsk Punk", "Beat", "Christian Gangsta Rap",
    "Heavy Metal", "Black Metal", "Crossover", "Contemporary Christian",
    "Christian Rock", "Merengue", "Salsa", "Thrash Metal", "Anime", "JPop",
    "Synthpop",
    # 148-191: Winamp 5.6 extensions
    "Abstract", "Art Rock", "Baroque", "Bhangra", "Big Beat", "Breakbeat",
    "Chillout", "Downtempo", "Dub", "EBM", "Eclectic", "Electro",
    "Electroclash", "Emo", "Experimental", "Garage", "Global", "IDM",
    "Illbient", "Industro-Goth", "Jam Band", "Krautrock", "Leftfield",
    "Lounge", "Math Rock", "New Romantic", "Nu-Breakz", "Post-Punk",
    "Post-Rock", "Psytrance", "Shoegaze", "Space Rock", "Trop Rock",
    "World Music", "Neoclassical", "Audiobook", "Audio Theatre",
    "Neue Deutsche Welle", "Podcast", "Indie Rock", "G-Funk", "Dubstep",
    "Garage Rock", "Psybient")

def genre_name(index):
    "Return the name of an ID3v1 genre index, or None if it has no name."
    if index in range(len(genres)) and genres[index]:
        return genres[index]
    return None
