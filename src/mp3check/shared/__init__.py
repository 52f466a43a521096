# Where: mp3check.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of shared types across features.

"""Shared cross-cutting types exposed at the package level."""

from .track_metadata import TrackMetadata

__all__ = ["TrackMetadata"]
