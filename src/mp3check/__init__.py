"""mp3check - audit an MP3 library against folder and tag conventions."""

__version__ = "0.1.0"
