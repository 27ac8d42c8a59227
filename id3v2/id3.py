# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Descriptions of the frames defined in ID3v2.3 and ID3v2.4.
"""

FRAME_NAMES = {
    # 4.2.1. Identification frames
    "UFID": "Unique file identifier",
    "TIT1": "Content group description",
    "TIT2": "Title/songname/content description",
    "TIT3": "Subtitle/Description refinement",
    "TALB": "Album/Movie/Show title",
    "TOAL": "Original album/movie/show title",
    "TRCK": "Track number/Position in set",
    "TPOS": "Part of a set",
    "TSST": "Set subtitle",
    "TSRC": "ISRC (international standard recording code)",

    # 4.2.2. Involved persons frames
    "TPE1": "Lead performer(s)/Soloist(s)",
    "TPE2": "Band/orchestra/accompaniment",
    "TPE3": "Conductor/performer refinement",
    "TPE4": "Interpreted, remixed, or otherwise modified by",
    "TOPE": "Original artist(s)/performer(s)",
    "TEXT": "Lyricist/Text writer",
    "TOLY": "Original lyricist(s)/text writer(s)",
    "TCOM": "Composer",
    "TMCL": "Musician credits list",
    "TIPL": "Involved people list",
    "TENC": "Encoded by",

    # 4.2.3. Derived and subjective properties frames
    "TBPM": "BPM (beats per minute)",
    "TLEN": "Length",
    "TKEY": "Initial key",
    "TLAN": "Language(s)",
    "TCON": "Content type",
    "TFLT": "File type",
    "TMED": "Media type",
    "TMOO": "Mood",

    # 4.2.4. Rights and license frames
    "TCOP": "Copyright message",
    "TPRO": "Produced notice",
    "TPUB": "Publisher",
    "TOWN": "File owner/licensee",
    "TRSN": "Internet radio station name",
    "TRSO": "Internet radio station owner",

    # 4.2.5. Other text frames
    "TOFN": "Original filename",
    "TDLY": "Playlist delay",
    "TDEN": "Encoding time",
    "TDOR": "Original release time",
    "TDRC": "Recording time",
    "TDRL": "Release time",
    "TDTG": "Tagging time",
    "TSSE": "Software/Hardware and settings used for encoding",
    "TSOA": "Album sort order",
    "TSOP": "Performer sort order",
    "TSOT": "Title sort order",

    # 4.2.6. User defined information frame
    "TXXX": "User defined text information frame",

    # 4.3. URL link frames
    "WCOM": "Commercial information",
    "WCOP": "Copyright/Legal information",
    "WOAF": "Official audio file webpage",
    "WOAR": "Official artist/performer webpage",
    "WOAS": "Official audio source webpage",
    "WORS": "Official Internet radio station homepage",
    "WPAY": "Payment",
    "WPUB": "Publishers official webpage",
    "WXXX": "User defined URL link frame",

    # 4.4.-4.21. Binary frames
    "MCDI": "Music CD identifier",
    "ETCO": "Event timing codes",
    "MLLT": "MPEG location lookup table",
    "SYTC": "Synchronised tempo codes",
    "USLT": "Unsynchronised lyric/text transcription",
    "SYLT": "Synchronised lyric/text",
    "COMM": "Comments",
    "RVA2": "Relative volume adjustment (2)",
    "EQU2": "Equalisation (2)",
    "RVRB": "Reverb",
    "APIC": "Attached picture",
    "GEOB": "General encapsulated object",
    "PCNT": "Play counter",
    "POPM": "Popularimeter",
    "RBUF": "Recommended buffer size",
    "AENC": "Audio encryption",
    "LINK": "Linked information",
    "POSS": "Position synchronisation frame",
    "USER": "Terms of use",
    "OWNE": "Ownership frame",
    "COMR": "Commercial frame",
    "ENCR": "Encryption method registration",
    "GRID": "Group identification registration",
    "PRIV": "Private frame",
    "SIGN": "Signature frame",
    "SEEK": "Seek frame",
    "ASPI": "Audio seek point index",

    # ID3v2.3 only
    "TYER": "Year",
    "TDAT": "Date",
    "TIME": "Time",
    "TORY": "Original release year",
    "TRDA": "Recording dates",
    "TSIZ": "Size",
    "IPLS": "Involved people list",
    "EQUA": "Equalisation",
    "RVAD": "Relative volume adjustment",

    # Nonstandard frames
    "TCMP": "iTunes: Part of a compilation",
    "TDES": "iTunes: Podcast description",
    "TGID": "iTunes: Podcast identifier",
    "WFED": "iTunes: Podcast feed URL",
    "TCAT": "iTunes: Podcast category",
    "TKWD": "iTunes: Podcast keywords",
    "PCST": "iTunes: Podcast flag",
    }

def frame_name(frameid):
    "Return a description of frameid, or the id itself if it is unknown."
    return FRAME_NAMES.get(frameid, frameid)
