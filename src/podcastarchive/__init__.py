"""Podcast Archive - serve a folder of audio files as a podcast feed."""

__version__ = "0.1.0"
