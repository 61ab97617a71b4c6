"""Tests for the bundled example shapes."""

from __future__ import annotations

from shapecast.examples import playlist, preferences


class TestPreferences:
    def test_defaults(self) -> None:
        assert preferences(None) == {"language": "english", "items_per_page": 10}

    def test_keeps_valid_values(self) -> None:
        assert preferences({"language": "spanish", "items_per_page": 25}) == {
            "language": "spanish",
            "items_per_page": 25,
        }


class TestPlaylist:
    def test_defaults(self) -> None:
        assert playlist({}) == {
            "version": 1,
            "name": "",
            "visibility": "private",
            "tracks": [],
            "tags": set(),
            "owner": None,
        }

    def test_repairs_nested_data(self) -> None:
        raw = {
            "version": 7,
            "name": "Road trip",
            "visibility": "secret",
            "tracks": [
                {"title": "Intro", "duration": 61.5, "explicit": "no"},
                "garbage",
            ],
            "tags": ["rock", "rock", 5, None],
            "owner": {"id": "u1", "password": "hunter2"},
        }

        assert playlist(raw) == {
            "version": 1,
            "name": "Road trip",
            "visibility": "private",
            "tracks": [
                {"title": "Intro", "artist": None, "duration": 61.5, "explicit": False},
                {"title": "Untitled", "artist": None, "duration": 0, "explicit": False},
            ],
            "tags": {"rock"},
            "owner": {"id": "u1", "display_name": None},
        }
