#!/usr/bin/env python3

from setuptools import setup

setup(
    name="id3write",
    version="0.1.0",
    packages=["id3write"],
    license="BSD",
    description="ID3v2.3/ID3v2.4 tag writer in pure Python 3",
    long_description="""
Writes ID3v2.3 and ID3v2.4 tags holding textual metadata to the start of
an audio stream.  Generic metadata keys such as "title" or "artist" are
mapped to their dedicated text frames; everything else is stored in
user-defined TXXX frames.  The tag size is reserved up front and filled
in once all frames are written, so tags can be streamed straight into
the output file.
""",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
