"""Shared fixtures: a mocked MusicClient and sample service payloads."""

from unittest.mock import AsyncMock

import pytest

from core.client import MusicClient


@pytest.fixture
def client():
    """A MusicClient whose every method is an AsyncMock."""
    return AsyncMock(spec=MusicClient)


@pytest.fixture
def image_json():
    return {"url": "https://i.scdn.co/image/ab67616d0000b273", "height": 640, "width": 640}


@pytest.fixture
def album_json(image_json):
    return {
        "id": "4aawyAB9vmqN3uQ7FjRGTy",
        "name": "Global Warming",
        "artists": [{"id": "0TnOYISbd1XYRBk9myaseg", "name": "Pitbull"}],
        "release_date": "2012-11-16",
        "total_tracks": 18,
        "album_type": "album",
        "external_urls": {"spotify": "https://open.spotify.com/album/4aawyAB9vmqN3uQ7FjRGTy"},
        "images": [image_json],
    }


@pytest.fixture
def track_json(album_json):
    return {
        "id": "11dFghVXANMlKmJXsNCbNl",
        "name": "Cut To The Feeling",
        "type": "track",
        "uri": "spotify:track:11dFghVXANMlKmJXsNCbNl",
        "artists": [
            {"id": "6sFIWsNpZYqfjUpaCgueju", "name": "Carly Rae Jepsen"},
            {"id": "1", "name": "Guest"},
        ],
        "album": album_json,
        "duration_ms": 207959,
        "explicit": False,
        "preview_url": None,
        "external_urls": {"spotify": "https://open.spotify.com/track/11dFghVXANMlKmJXsNCbNl"},
    }


@pytest.fixture
def artist_json(image_json):
    return {
        "id": "0TnOYISbd1XYRBk9myaseg",
        "name": "Pitbull",
        "genres": ["dance pop", "miami hip hop"],
        "popularity": 83,
        "followers": {"total": 10000000},
        "external_urls": {"spotify": "https://open.spotify.com/artist/0TnOYISbd1XYRBk9myaseg"},
        "images": [image_json],
    }


@pytest.fixture
def playlist_json(image_json):
    return {
        "id": "3cEYpjA9oz9GiPac4AsH4n",
        "name": "Spotify Web API Testing playlist",
        "description": "A playlist for testing pourposes",
        "owner": {"id": "jmperezperez", "display_name": "JMPerez²"},
        "public": True,
        "collaborative": False,
        "tracks": {"total": 5},
        "external_urls": {"spotify": "https://open.spotify.com/playlist/3cEYpjA9oz9GiPac4AsH4n"},
        "images": [image_json],
    }


@pytest.fixture
def make_page():
    """Wrap items in a paging object."""

    def make(items, limit=20, offset=0, total=None):
        return {
            "href": "https://api.spotify.com/v1/page",
            "items": items,
            "limit": limit,
            "next": None,
            "offset": offset,
            "previous": None,
            "total": len(items) if total is None else total,
        }

    return make
