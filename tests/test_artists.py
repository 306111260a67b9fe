"""Tests for core/artists.py."""

import asyncio

from core import artists
from core.client import MusicServiceError
from core.result import Err


class TestArtist:
    def test_get_artist(self, client, artist_json):
        client.get_artist.return_value = artist_json
        summary = asyncio.run(artists.get_artist(client, "0TnOYISbd1XYRBk9myaseg")).unwrap()
        assert summary.followers == 10000000
        assert summary.external_url == "https://open.spotify.com/artist/0TnOYISbd1XYRBk9myaseg"

    def test_blank_id(self, client):
        assert asyncio.run(artists.get_artist(client, "")) == Err("Artist ID must not be empty")

    def test_several(self, client, artist_json):
        client.get_artists.return_value = [artist_json, None]
        assert len(asyncio.run(artists.get_several_artists(client, ["a", "b"])).unwrap()) == 1

    def test_several_cap(self, client):
        result = asyncio.run(artists.get_several_artists(client, ["a"] * 51))
        assert result == Err("Maximum 50 artist IDs allowed")


class TestArtistAlbums:
    def test_page(self, client, album_json, make_page):
        client.get_artist_albums.return_value = make_page([album_json], total=31)

        page = asyncio.run(
            artists.get_artist_albums(client, "x", include_groups=["album", "single"], market="US")
        ).unwrap()

        assert page.total == 31
        client.get_artist_albums.assert_awaited_once_with("x", ["album", "single"], "US", 20, 0)

    def test_unknown_group(self, client):
        result = asyncio.run(artists.get_artist_albums(client, "x", include_groups=["album", "remix"]))
        assert result == Err("Invalid include group: remix. Must be one of: album, single, appears_on, compilation")
        client.get_artist_albums.assert_not_awaited()


class TestTopTracks:
    def test_market_required(self, client):
        result = asyncio.run(artists.get_artist_top_tracks(client, "x", None))
        assert result == Err("Market parameter is required for top tracks")

    def test_id_checked_before_market(self, client):
        result = asyncio.run(artists.get_artist_top_tracks(client, "", None))
        assert result == Err("Artist ID must not be empty")

    def test_market_must_be_valid(self, client):
        result = asyncio.run(artists.get_artist_top_tracks(client, "x", "usa"))
        assert result == Err("Market must be a valid ISO 3166-1 alpha-2 country code")

    def test_durations_rendered(self, client, track_json):
        client.get_artist_top_tracks.return_value = [track_json]
        top = asyncio.run(artists.get_artist_top_tracks(client, "x", "US")).unwrap()
        assert top[0].duration == "3:27"
        assert top[0].album == "Global Warming"

    def test_failure(self, client):
        client.get_artist_top_tracks.side_effect = MusicServiceError("Not found", 404)
        result = asyncio.run(artists.get_artist_top_tracks(client, "x", "US"))
        assert result == Err("Failed to get artist top tracks: Not found")
