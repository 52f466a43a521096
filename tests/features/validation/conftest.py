"""Shared fixtures for validation tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mp3check.features.validation import FileRuleEngine, TrackMetadata

from validation_fakes import FakeTagStore


@pytest.fixture
def make_metadata() -> Callable[..., TrackMetadata]:
    """Factory for metadata that passes every rule of an artist folder."""

    def _make(title: str = "Song", artist: str = "John Doe", **overrides: object) -> TrackMetadata:
        metadata = TrackMetadata(title=title, performers=[artist], genres=["Rock"])
        for key, value in overrides.items():
            setattr(metadata, key, value)
        return metadata

    return _make


@pytest.fixture
def engine() -> FileRuleEngine:
    """Rule engine for ``.mp3`` files."""
    return FileRuleEngine()


@pytest.fixture
def tag_store() -> FakeTagStore:
    """Empty in-memory tag store."""
    return FakeTagStore()


@pytest.fixture
def add_track(tag_store: FakeTagStore) -> Callable[[Path, TrackMetadata], Path]:
    """Create an empty file on disk and register its tags in the fake store."""

    def _add(path: Path, metadata: TrackMetadata) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        tag_store.tags[path] = metadata
        return path

    return _add
