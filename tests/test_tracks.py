"""Tests for core/tracks.py."""

import asyncio

from core import tracks
from core.client import MusicServiceError
from core.result import Err, Ok


class TestCatalogue:
    def test_get_track(self, client, track_json):
        client.get_track.return_value = track_json

        summary = asyncio.run(tracks.get_track(client, "11dFghVXANMlKmJXsNCbNl")).unwrap()

        assert summary.name == "Cut To The Feeling"
        assert summary.album == "Global Warming"
        assert summary.duration_ms == 207959

    def test_blank_id(self, client):
        assert asyncio.run(tracks.get_track(client, "")) == Err("Track ID must not be empty")

    def test_several_tracks_cap(self, client):
        result = asyncio.run(tracks.get_several_tracks(client, ["t"] * 51))
        assert result == Err("Maximum 50 track IDs allowed")
        client.get_tracks.assert_not_awaited()

    def test_several_tracks_drop_unknown(self, client, track_json):
        client.get_tracks.return_value = [None, track_json]
        result = asyncio.run(tracks.get_several_tracks(client, ["x", "11dFghVXANMlKmJXsNCbNl"]))
        assert len(result.unwrap()) == 1


class TestLibrary:
    def test_saved_tracks(self, client, track_json, make_page):
        client.get_saved_tracks.return_value = make_page(
            [{"added_at": "2024-01-01T00:00:00Z", "track": track_json}], limit=1, offset=3, total=9
        )

        page = asyncio.run(tracks.get_saved_tracks(client, limit=1, offset=3)).unwrap()

        assert (page.limit, page.offset, page.total) == (1, 3, 9)
        assert page.items[0].track.id == "11dFghVXANMlKmJXsNCbNl"

    def test_saved_tracks_bad_offset(self, client):
        assert asyncio.run(tracks.get_saved_tracks(client, offset=-1)) == Err("Offset must be non-negative")

    def test_save_fifty(self, client):
        assert asyncio.run(tracks.save_tracks(client, ["t"] * 50)) == Ok(None)

    def test_remove_failure(self, client):
        client.remove_saved_tracks.side_effect = MusicServiceError("Bad request", 400)
        assert asyncio.run(tracks.remove_saved_tracks(client, ["t"])) == Err("Failed to remove tracks: Bad request")

    def test_check(self, client):
        client.check_saved_tracks.return_value = [False]
        assert asyncio.run(tracks.check_saved_tracks(client, ["t"])) == Ok([{"id": "t", "saved": False}])

    def test_check_failure(self, client):
        client.check_saved_tracks.side_effect = MusicServiceError("boom")
        assert asyncio.run(tracks.check_saved_tracks(client, ["t"])) == Err("Failed to check tracks: boom")
