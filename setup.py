#!/usr/bin/env python3

from setuptools import setup

setup(
    name="id3v2",
    version="0.2.0",
    author="Karoly Lorentey",
    author_email="karoly@lorentey.hu",
    packages=["id3v2"],
    entry_points = {
        'console_scripts': ['id3v2 = id3v2.commandline:main']
    },
    test_suite = "test.alltests.suite",
    python_requires=">=3.6",
    license="BSD",
    description="ID3v2.3/ID3v2.4 tag reading in pure Python 3",
    long_description="""
Decodes the ID3v2 tag at the start of an MP3 file: the tag header
(version, flags, size) and its frames, collapsed into a dictionary of
frame id to text. Handles syncsafe integers, frame flags,
unsynchronisation, and the ISO-8859-1, UTF-16 and UTF-8 text encodings.
Tags are only read, never written.
""",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
