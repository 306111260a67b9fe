"""Tests for core/player.py."""

import asyncio

from core import player
from core.client import MusicServiceError
from core.models import IdlePlayer, StatusMessage
from core.result import Err, Ok

DEVICE_JSON = {
    "id": "74ASZWbe4lXaubB36ztrGX",
    "name": "Kitchen speaker",
    "type": "Speaker",
    "is_active": True,
    "is_private_session": False,
    "is_restricted": False,
    "volume_percent": 59,
}


class TestReading:
    def test_idle_playback_state(self, client):
        client.get_playback_state.return_value = None
        result = asyncio.run(player.get_playback_state(client))
        assert result == Ok(IdlePlayer(message="No active playback found"))

    def test_playback_state(self, client, track_json):
        client.get_playback_state.return_value = {
            "is_playing": True,
            "shuffle_state": False,
            "repeat_state": "off",
            "progress_ms": 1000,
            "device": DEVICE_JSON,
            "item": track_json,
            "currently_playing_type": "track",
            "context": {"type": "album", "href": "h", "uri": "spotify:album:4aawyAB9vmqN3uQ7FjRGTy"},
        }

        state = asyncio.run(player.get_playback_state(client, market="US")).unwrap()

        assert state.is_playing
        assert state.device.name == "Kitchen speaker"
        assert state.item.name == "Cut To The Feeling"
        assert state.context.type == "album"

    def test_bad_additional_type(self, client):
        result = asyncio.run(player.get_playback_state(client, additional_types=["track", "ad"]))
        assert result == Err("Invalid additional type: ad. Must be 'track' or 'episode'")

    def test_nothing_playing(self, client):
        client.get_currently_playing.return_value = {"is_playing": False, "item": None}
        result = asyncio.run(player.get_currently_playing_track(client))
        assert result == Ok(IdlePlayer(message="No track currently playing"))

    def test_currently_playing(self, client, track_json):
        client.get_currently_playing.return_value = {"is_playing": True, "item": track_json, "progress_ms": 5}
        current = asyncio.run(player.get_currently_playing_track(client)).unwrap()
        assert current.item.id == "11dFghVXANMlKmJXsNCbNl"

    def test_devices(self, client):
        client.get_available_devices.return_value = {"devices": [DEVICE_JSON]}
        devices = asyncio.run(player.get_available_devices(client)).unwrap()
        assert devices.devices[0].volume_percent == 59

    def test_recently_played(self, client, track_json):
        client.get_recently_played.return_value = {
            "items": [{"track": track_json, "played_at": "2024-06-01T12:00:00Z", "context": None}],
            "limit": 1,
            "next": None,
            "cursors": {"after": "1717243200000", "before": "1717243200000"},
            "href": "h",
        }

        history = asyncio.run(player.get_recently_played_tracks(client, limit=1, after=0)).unwrap()

        assert history.items[0].played_at == "2024-06-01T12:00:00Z"
        assert history.cursors["after"] == "1717243200000"
        client.get_recently_played.assert_awaited_once_with(1, None, 0)

    def test_recently_played_one_cursor(self, client):
        result = asyncio.run(player.get_recently_played_tracks(client, before=1, after=2))
        assert result == Err("Cannot provide both before and after")

    def test_queue(self, client, track_json):
        client.get_queue.return_value = {"currently_playing": track_json, "queue": [track_json]}
        queue = asyncio.run(player.get_user_queue(client)).unwrap()
        assert queue.currently_playing.name == "Cut To The Feeling"
        assert len(queue.queue) == 1


class TestStartResume:
    def test_resume_active_device(self, client):
        result = asyncio.run(player.start_resume_playback(client))
        assert result == Ok(StatusMessage(message="Playback started successfully"))
        client.start_playback.assert_awaited_once_with(
            device_id=None, context_uri=None, uris=None, offset=None, position_ms=None
        )

    def test_context_with_offset(self, client):
        asyncio.run(
            player.start_resume_playback(
                client, context_uri="spotify:album:4aawyAB9vmqN3uQ7FjRGTy", offset={"position": 5}
            )
        )
        assert client.start_playback.await_args.kwargs["offset"] == {"position": 5}

    def test_context_and_uris_exclusive(self, client):
        result = asyncio.run(
            player.start_resume_playback(
                client, context_uri="spotify:album:4aawyAB9vmqN3uQ7FjRGTy", uris=["spotify:track:a"]
            )
        )
        assert result == Err("Cannot provide both context_uri and uris")

    def test_empty_uris(self, client):
        result = asyncio.run(player.start_resume_playback(client, uris=[]))
        assert result == Err("URIs array must not be empty if provided")

    def test_offset_position_and_uri(self, client):
        result = asyncio.run(
            player.start_resume_playback(
                client,
                context_uri="spotify:playlist:37i9dQZF1DXcBWIGoYBM5M",
                offset={"position": 1, "uri": "spotify:track:a"},
            )
        )
        assert result == Err("Offset can only have either position or uri, not both")

    def test_negative_position(self, client):
        result = asyncio.run(player.start_resume_playback(client, position_ms=-5))
        assert result == Err("Position must be non-negative")

    def test_blank_device(self, client):
        result = asyncio.run(player.start_resume_playback(client, device_id=" "))
        assert result == Err("Device ID must not be empty if provided")

    def test_no_active_device(self, client):
        client.start_playback.side_effect = MusicServiceError("Player command failed: No active device found", 404)
        result = asyncio.run(player.start_resume_playback(client))
        assert result == Err("Failed to start/resume playback: Player command failed: No active device found")


class TestControl:
    def test_pause(self, client):
        assert asyncio.run(player.pause_playback(client)) == Ok(StatusMessage("Playback paused successfully"))

    def test_skip(self, client):
        assert asyncio.run(player.skip_to_next(client, "dev")).unwrap().message == "Skipped to next track successfully"
        assert (
            asyncio.run(player.skip_to_previous(client)).unwrap().message
            == "Skipped to previous track successfully"
        )
        client.skip_to_next.assert_awaited_once_with("dev")

    def test_seek(self, client):
        result = asyncio.run(player.seek_to_position(client, 25000))
        assert result.unwrap().message == "Seeked to position 25000ms successfully"

    def test_seek_negative(self, client):
        assert asyncio.run(player.seek_to_position(client, -1)) == Err("Position must be non-negative")

    def test_repeat(self, client):
        assert asyncio.run(player.set_repeat_mode(client, "context")).unwrap().message == (
            "Repeat mode set to 'context' successfully"
        )

    def test_repeat_invalid(self, client):
        result = asyncio.run(player.set_repeat_mode(client, "all"))
        assert result == Err("Invalid repeat state: all. Must be 'track', 'context' or 'off'")

    def test_volume(self, client):
        assert asyncio.run(player.set_playback_volume(client, 40)).unwrap().message == "Volume set to 40% successfully"
        client.set_volume.assert_awaited_once_with(40, None)

    def test_volume_out_of_range(self, client):
        assert asyncio.run(player.set_playback_volume(client, 101)) == Err("Volume must be between 0 and 100")
        client.set_volume.assert_not_awaited()

    def test_shuffle(self, client):
        assert asyncio.run(player.toggle_playback_shuffle(client, True)).unwrap().message == (
            "Shuffle enabled successfully"
        )
        assert asyncio.run(player.toggle_playback_shuffle(client, False)).unwrap().message == (
            "Shuffle disabled successfully"
        )

    def test_shuffle_failure(self, client):
        client.set_shuffle.side_effect = MusicServiceError("Restriction violated", 403)
        result = asyncio.run(player.toggle_playback_shuffle(client, True))
        assert result == Err("Failed to toggle shuffle: Restriction violated")


class TestTransferAndQueue:
    def test_transfer_and_play(self, client):
        result = asyncio.run(player.transfer_playback(client, ["dev"], play=True))
        assert result.unwrap().message == "Playback transferred and started successfully"

    def test_transfer(self, client):
        result = asyncio.run(player.transfer_playback(client, ["dev"]))
        assert result.unwrap().message == "Playback transferred successfully"

    def test_transfer_one_device_only(self, client):
        result = asyncio.run(player.transfer_playback(client, ["a", "b"]))
        assert result == Err("Maximum 1 device IDs allowed")

    def test_transfer_needs_device(self, client):
        assert asyncio.run(player.transfer_playback(client, [])) == Err("At least one device ID is required")

    def test_enqueue(self, client):
        result = asyncio.run(player.add_item_to_playback_queue(client, "spotify:track:a"))
        assert result == Ok(StatusMessage("Item added to queue successfully"))

    def test_enqueue_blank(self, client):
        assert asyncio.run(player.add_item_to_playback_queue(client, "")) == Err("URI must not be empty")
