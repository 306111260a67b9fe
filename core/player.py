# =============================================================================
# core/player.py  -  Playback state and playback control
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Read-side:  playback state, currently playing item, devices, recently
#               played tracks, the queue.
#   Write-side: start/resume, pause, skip, seek, repeat, volume, shuffle,
#               transfer, enqueue.
#
# IDLE PLAYER:
#   The service answers 204 No Content when nothing is playing.  The read
#   operations turn that into IdlePlayer(message, is_playing=False) instead
#   of an error.
#
# DEVICE TARGETING:
#   Every control command accepts an optional device_id.  Omitted means "the
#   active device"; supplied-but-blank is a validation error.
# =============================================================================

from typing import Any, Awaitable, Optional, Sequence

from core.client import MusicClient
from core.mappers import (
    to_context,
    to_device,
    to_playback_item,
    to_track_summary,
)
from core.models import (
    CurrentlyPlaying,
    DeviceList,
    IdlePlayer,
    PlaybackState,
    PlayHistoryEntry,
    Queue,
    RecentlyPlayed,
    StatusMessage,
)
from core.result import Err, Result, attempt
from core.validation import (
    check_batch,
    check_choices,
    check_context_uri,
    check_item_uris,
    check_limit,
    check_market,
    check_non_negative,
    check_optional_id,
    check_volume,
    first_failure,
    require_id,
)

ADDITIONAL_TYPES = ("track", "episode")
REPEAT_STATES = ("track", "context", "off")
MAX_TRANSFER_DEVICES = 1


def _check_additional_types(additional_types: Optional[Sequence[str]]) -> Err | None:
    return check_choices(
        additional_types,
        ADDITIONAL_TYPES,
        "Invalid additional type: {value}. Must be 'track' or 'episode'",
    )


async def _command(verb: str, call: Awaitable[Any], message: str) -> Result[StatusMessage]:
    """Run a control command whose only output is a confirmation message."""
    return await attempt(verb, call, lambda _: StatusMessage(message=message))


# =============================================================================
# Reading
# =============================================================================
def _to_playback_state(body: Optional[dict[str, Any]]) -> PlaybackState | IdlePlayer:
    if not body:
        return IdlePlayer(message="No active playback found")
    return PlaybackState(
        is_playing=bool(body.get("is_playing")),
        shuffle_state=body.get("shuffle_state"),
        repeat_state=body.get("repeat_state"),
        timestamp=body.get("timestamp"),
        progress_ms=body.get("progress_ms"),
        device=to_device(body["device"]) if body.get("device") else None,
        item=to_playback_item(body.get("item")),
        currently_playing_type=body.get("currently_playing_type"),
        actions=body.get("actions"),
        context=to_context(body.get("context")),
    )


def _to_currently_playing(body: Optional[dict[str, Any]]) -> CurrentlyPlaying | IdlePlayer:
    # An ad break or a private session reports a body with no item.
    if not body or not body.get("item"):
        return IdlePlayer(message="No track currently playing")
    return CurrentlyPlaying(
        is_playing=bool(body.get("is_playing")),
        progress_ms=body.get("progress_ms"),
        timestamp=body.get("timestamp"),
        currently_playing_type=body.get("currently_playing_type"),
        context=to_context(body.get("context")),
        item=to_playback_item(body["item"]),
        actions=body.get("actions"),
    )


async def get_playback_state(
    client: MusicClient,
    market: Optional[str] = None,
    additional_types: Optional[Sequence[str]] = None,
) -> Result[PlaybackState | IdlePlayer]:
    failure = first_failure(check_market(market), _check_additional_types(additional_types))
    if failure:
        return failure
    return await attempt(
        "get playback state",
        client.get_playback_state(market, additional_types),
        _to_playback_state,
    )


async def get_currently_playing_track(
    client: MusicClient,
    market: Optional[str] = None,
    additional_types: Optional[Sequence[str]] = None,
) -> Result[CurrentlyPlaying | IdlePlayer]:
    failure = first_failure(check_market(market), _check_additional_types(additional_types))
    if failure:
        return failure
    return await attempt(
        "get currently playing track",
        client.get_currently_playing(market, additional_types),
        _to_currently_playing,
    )


async def get_available_devices(client: MusicClient) -> Result[DeviceList]:
    return await attempt(
        "get available devices",
        client.get_available_devices(),
        lambda body: DeviceList(devices=[to_device(device) for device in (body or {}).get("devices") or []]),
    )


def _to_recently_played(body: dict[str, Any]) -> RecentlyPlayed:
    return RecentlyPlayed(
        items=[
            PlayHistoryEntry(
                track=to_track_summary(entry.get("track") or {}),
                played_at=entry.get("played_at"),
                context=to_context(entry.get("context")),
            )
            for entry in body.get("items") or []
        ],
        limit=body.get("limit"),
        next=body.get("next"),
        cursors=body.get("cursors"),
        href=body.get("href"),
    )


async def get_recently_played_tracks(
    client: MusicClient,
    limit: int = 20,
    before: Optional[int] = None,
    after: Optional[int] = None,
) -> Result[RecentlyPlayed]:
    """Recently played tracks, paged by a Unix-millisecond cursor.

    At most one of `before` / `after` may be given.
    """
    failure = first_failure(
        check_limit(limit),
        Err("Cannot provide both before and after") if before is not None and after is not None else None,
        check_non_negative(before, "Before timestamp must be non-negative"),
        check_non_negative(after, "After timestamp must be non-negative"),
    )
    if failure:
        return failure
    return await attempt(
        "get recently played tracks",
        client.get_recently_played(limit, before, after),
        _to_recently_played,
    )


async def get_user_queue(client: MusicClient) -> Result[Queue]:
    def shape(body: dict[str, Any]) -> Queue:
        body = body or {}
        return Queue(
            currently_playing=to_playback_item(body.get("currently_playing")),
            queue=[to_playback_item(item) for item in body.get("queue") or [] if item],
        )

    return await attempt("get user queue", client.get_queue(), shape)


# =============================================================================
# Control
# =============================================================================
async def start_resume_playback(
    client: MusicClient,
    device_id: Optional[str] = None,
    context_uri: Optional[str] = None,
    uris: Optional[Sequence[str]] = None,
    offset: Optional[dict[str, Any]] = None,
    position_ms: Optional[int] = None,
) -> Result[StatusMessage]:
    """Start or resume playback.

    Play either a context (album, playlist, ...) or an explicit list of
    track/episode URIs, never both.  `offset` picks the starting item inside
    a context by {"position": n} or {"uri": "..."}.
    """
    offset = offset or None
    failure = first_failure(
        check_optional_id(device_id),
        check_context_uri(context_uri),
        Err("URIs array must not be empty if provided") if uris is not None and len(uris) == 0 else None,
        check_item_uris(uris),
        Err("Cannot provide both context_uri and uris") if context_uri is not None and uris is not None else None,
    )
    if failure:
        return failure

    if offset is not None:
        failure = first_failure(
            Err("Offset can only have either position or uri, not both")
            if offset.get("position") is not None and offset.get("uri") is not None
            else None,
            check_non_negative(offset.get("position"), "Offset position must be non-negative"),
        )
        if failure:
            return failure

    failure = check_non_negative(position_ms, "Position must be non-negative")
    if failure:
        return failure

    return await _command(
        "start/resume playback",
        client.start_playback(
            device_id=device_id,
            context_uri=context_uri,
            uris=uris,
            offset=offset,
            position_ms=position_ms,
        ),
        "Playback started successfully",
    )


async def pause_playback(client: MusicClient, device_id: Optional[str] = None) -> Result[StatusMessage]:
    failure = check_optional_id(device_id)
    if failure:
        return failure
    return await _command("pause playback", client.pause_playback(device_id), "Playback paused successfully")


async def skip_to_next(client: MusicClient, device_id: Optional[str] = None) -> Result[StatusMessage]:
    failure = check_optional_id(device_id)
    if failure:
        return failure
    return await _command(
        "skip to next track", client.skip_to_next(device_id), "Skipped to next track successfully"
    )


async def skip_to_previous(client: MusicClient, device_id: Optional[str] = None) -> Result[StatusMessage]:
    failure = check_optional_id(device_id)
    if failure:
        return failure
    return await _command(
        "skip to previous track", client.skip_to_previous(device_id), "Skipped to previous track successfully"
    )


async def seek_to_position(
    client: MusicClient, position_ms: int, device_id: Optional[str] = None
) -> Result[StatusMessage]:
    failure = first_failure(
        check_non_negative(position_ms, "Position must be non-negative"),
        check_optional_id(device_id),
    )
    if failure:
        return failure
    return await _command(
        "seek to position",
        client.seek_to_position(position_ms, device_id),
        f"Seeked to position {position_ms}ms successfully",
    )


async def set_repeat_mode(
    client: MusicClient, state: str, device_id: Optional[str] = None
) -> Result[StatusMessage]:
    failure = first_failure(
        check_choices([state], REPEAT_STATES, "Invalid repeat state: {value}. Must be 'track', 'context' or 'off'"),
        check_optional_id(device_id),
    )
    if failure:
        return failure
    return await _command(
        "set repeat mode",
        client.set_repeat_mode(state, device_id),
        f"Repeat mode set to '{state}' successfully",
    )


async def set_playback_volume(
    client: MusicClient, volume_percent: int, device_id: Optional[str] = None
) -> Result[StatusMessage]:
    failure = first_failure(check_volume(volume_percent), check_optional_id(device_id))
    if failure:
        return failure
    return await _command(
        "set playback volume",
        client.set_volume(volume_percent, device_id),
        f"Volume set to {volume_percent}% successfully",
    )


async def toggle_playback_shuffle(
    client: MusicClient, state: bool, device_id: Optional[str] = None
) -> Result[StatusMessage]:
    failure = check_optional_id(device_id)
    if failure:
        return failure
    return await _command(
        "toggle shuffle",
        client.set_shuffle(state, device_id),
        f"Shuffle {'enabled' if state else 'disabled'} successfully",
    )


async def transfer_playback(
    client: MusicClient, device_ids: Sequence[str], play: Optional[bool] = None
) -> Result[StatusMessage]:
    """Move playback to another device, optionally starting it there."""
    failure = check_batch(device_ids, "device", MAX_TRANSFER_DEVICES)
    if failure:
        return failure
    return await _command(
        "transfer playback",
        client.transfer_playback(device_ids, play),
        "Playback transferred and started successfully" if play is True else "Playback transferred successfully",
    )


async def add_item_to_playback_queue(
    client: MusicClient, uri: str, device_id: Optional[str] = None
) -> Result[StatusMessage]:
    failure = first_failure(require_id(uri, "URI"), check_optional_id(device_id))
    if failure:
        return failure
    return await _command(
        "add item to queue", client.add_to_queue(uri, device_id), "Item added to queue successfully"
    )
