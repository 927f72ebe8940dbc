# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Text frames defined in the various ID3 versions, and the generic
metadata key names that map onto them.
"""

# Text frames shared by ID3v2.3 and ID3v2.4
common_frames = (
    # Identification frames
    "TIT1",  # Content group description
    "TIT2",  # Title/songname/content description
    "TIT3",  # Subtitle/Description refinement
    "TALB",  # Album/Movie/Show title
    "TOAL",  # Original album/movie/show title
    "TRCK",  # Track number/Position in set
    "TPOS",  # Part of a set
    "TSRC",  # ISRC (international standard recording code)

    # Involved persons frames
    "TPE1",  # Lead performer(s)/Soloist(s)
    "TPE2",  # Band/orchestra/accompaniment
    "TPE3",  # Conductor/performer refinement
    "TPE4",  # Interpreted, remixed, or otherwise modified by
    "TOPE",  # Original artist(s)/performer(s)
    "TEXT",  # Lyricist/Text writer
    "TOLY",  # Original lyricist(s)/text writer(s)
    "TCOM",  # Composer
    "TENC",  # Encoded by

    # Derived and subjective properties frames
    "TBPM",  # BPM (beats per minute)
    "TLEN",  # Length
    "TKEY",  # Initial key
    "TLAN",  # Language(s)
    "TCON",  # Content type
    "TFLT",  # File type
    "TMED",  # Media type

    # Rights and license frames
    "TCOP",  # Copyright message
    "TPUB",  # Publisher
    "TOWN",  # File owner/licensee
    "TRSN",  # Internet radio station name
    "TRSO",  # Internet radio station owner

    # Other text frames
    "TOFN",  # Original filename
    "TDLY",  # Playlist delay
    "TSSE",  # Software/Hardware and settings used for encoding
    )

# Text frames retired by ID3v2.4
v23_frames = (
    "TDAT",  # Date
    "TIME",  # Time
    "TORY",  # Original release year
    "TRDA",  # Recording dates
    "TSIZ",  # Size
    "TYER",  # Year
    )

# Text frames introduced by ID3v2.4
v24_frames = (
    "TDEN",  # Encoding time
    "TDOR",  # Original release time
    "TDRC",  # Recording time
    "TDRL",  # Release time
    "TDTG",  # Tagging time
    "TIPL",  # Involved people list
    "TMCL",  # Musician credits list
    "TMOO",  # Mood
    "TPRO",  # Produced notice
    "TSOA",  # Album sort order
    "TSOP",  # Performer sort order
    "TSOT",  # Title sort order
    "TSST",  # Set subtitle
    )

# (frame id, generic key) pairs applied to both ID3v2.3 and ID3v2.4 tags
v34_metadata_conv = (
    ("TALB", "album"),
    ("TCOM", "composer"),
    ("TCON", "genre"),
    ("TCOP", "copyright"),
    ("TENC", "encoded_by"),
    ("TIT2", "title"),
    ("TLAN", "language"),
    ("TPE1", "artist"),
    ("TPE2", "album_artist"),
    ("TPE3", "performer"),
    ("TPOS", "disc"),
    ("TPUB", "publisher"),
    ("TRCK", "track"),
    ("TSSE", "encoder"),
    )

# Additional pairs applied to ID3v2.4 tags only
v4_metadata_conv = (
    ("TDRL", "date"),
    ("TDRC", "date"),
    ("TDEN", "creation_time"),
    ("TSOA", "album-sort"),
    ("TSOP", "artist-sort"),
    ("TSOT", "title-sort"),
    )
