#!/usr/bin/env python3

from setuptools import setup

setup(
    name="id3stack",
    version="0.1.0",
    author="Karoly Lorentey",
    author_email="karoly@lorentey.hu",
    packages=["id3stack"],
    install_requires=["Pillow"],
    extras_require={"test": ["pytest"]},
    license="BSD",
    description="Multi-version ID3 tag decoder in pure Python 3",
    long_description="""
ID3 tags come in four mutually incompatible layouts: the fixed
ID3v1 trailer at the end of the file, and the framed ID3v2.2, ID3v2.3
and ID3v2.4 headers at its start.  id3stack reads all of them and
presents the common fields (title, artists, album, year, track,
genres, pictures) through a single object, falling back from the
newest edition present to the oldest.
""",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
