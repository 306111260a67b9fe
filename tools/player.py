# =============================================================================
# tools/player.py  -  Playback tools
# =============================================================================
# Playback commands return {"message": "..."} JSON text.  The playback
# reads return {"message", "is_playing": false} when nothing is playing.
# =============================================================================

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field

from core import player
from tools.envelope import OutputKind, create_resource_uri
from tools.params import DeviceId, Market
from tools.registry import REGISTRY

AdditionalTypes = Annotated[
    Optional[list[str]],
    Field(description="Item types besides tracks to report: 'track' and/or 'episode'"),
]


class PlaybackOffset(BaseModel):
    """Where to start inside a context: by position OR by item URI."""

    position: Optional[int] = Field(default=None, description="Zero-based position in the context")
    uri: Optional[str] = Field(default=None, description="URI of the item to start from")


# =============================================================================
# Reading
# =============================================================================
@REGISTRY.tool(title="Get Playback State")
async def get_playback_state(client, market: Market = None, additional_types: AdditionalTypes = None):
    """Get the current playback state: device, progress, shuffle/repeat and the playing item."""
    return await player.get_playback_state(client, market, additional_types)


@REGISTRY.tool(title="Get Currently Playing Track")
async def get_currently_playing_track(
    client, market: Market = None, additional_types: AdditionalTypes = None
):
    """Get the item currently playing on the user's account."""
    return await player.get_currently_playing_track(client, market, additional_types)


@REGISTRY.tool(title="Get Available Devices")
async def get_available_devices(client):
    """List the devices available for playback."""
    return await player.get_available_devices(client)


@REGISTRY.tool(
    title="Get Recently Played Tracks",
    output=OutputKind.RESOURCE,
    resource_uri=lambda args: create_resource_uri("player:recently-played"),
)
async def get_recently_played_tracks(
    client,
    limit: Annotated[int, Field(ge=1, le=50, description="Maximum number of items to return (1-50)")] = 20,
    before: Annotated[
        Optional[int], Field(description="Unix timestamp in ms; return items played before it")
    ] = None,
    after: Annotated[
        Optional[int], Field(description="Unix timestamp in ms; return items played after it")
    ] = None,
):
    """Get tracks from the current user's recently played history."""
    return await player.get_recently_played_tracks(client, limit, before, after)


@REGISTRY.tool(title="Get User Queue")
async def get_user_queue(client):
    """Get the currently playing item and the user's playback queue."""
    return await player.get_user_queue(client)


# =============================================================================
# Control
# =============================================================================
@REGISTRY.tool(title="Start/Resume Playback")
async def start_resume_playback(
    client,
    device_id: DeviceId = None,
    context_uri: Annotated[
        Optional[str],
        Field(description="Album, artist, playlist, show or episode URI to play"),
    ] = None,
    uris: Annotated[Optional[list[str]], Field(description="Track or episode URIs to play")] = None,
    offset: Annotated[
        Optional[PlaybackOffset], Field(description="Where to start inside the context")
    ] = None,
    position_ms: Annotated[
        Optional[int], Field(description="Position in ms to start the first item from")
    ] = None,
):
    """Start a new context or resume current playback on the user's active device."""
    if isinstance(offset, BaseModel):
        offset = offset.model_dump(exclude_none=True)
    return await player.start_resume_playback(client, device_id, context_uri, uris, offset, position_ms)


@REGISTRY.tool(title="Pause Playback")
async def pause_playback(client, device_id: DeviceId = None):
    """Pause playback on the user's account."""
    return await player.pause_playback(client, device_id)


@REGISTRY.tool(title="Skip to Next")
async def skip_to_next(client, device_id: DeviceId = None):
    """Skip to the next item in the user's queue."""
    return await player.skip_to_next(client, device_id)


@REGISTRY.tool(title="Skip to Previous")
async def skip_to_previous(client, device_id: DeviceId = None):
    """Skip to the previous item in the user's queue."""
    return await player.skip_to_previous(client, device_id)


@REGISTRY.tool(title="Seek to Position")
async def seek_to_position(
    client,
    position_ms: Annotated[int, Field(description="Position in milliseconds to seek to")],
    device_id: DeviceId = None,
):
    """Seek to a position in the currently playing item."""
    return await player.seek_to_position(client, position_ms, device_id)


@REGISTRY.tool(title="Set Repeat Mode")
async def set_repeat_mode(
    client,
    state: Annotated[
        Literal["track", "context", "off"],
        Field(description="'track' repeats the item, 'context' the context, 'off' disables repeat"),
    ],
    device_id: DeviceId = None,
):
    """Set the repeat mode for the user's playback."""
    return await player.set_repeat_mode(client, state, device_id)


@REGISTRY.tool(title="Set Playback Volume")
async def set_playback_volume(
    client,
    volume_percent: Annotated[int, Field(description="Volume to set, 0-100")],
    device_id: DeviceId = None,
):
    """Set the volume for the user's playback device."""
    return await player.set_playback_volume(client, volume_percent, device_id)


@REGISTRY.tool(title="Toggle Playback Shuffle")
async def toggle_playback_shuffle(
    client,
    state: Annotated[bool, Field(description="true to shuffle, false to play in order")],
    device_id: DeviceId = None,
):
    """Turn shuffle on or off for the user's playback."""
    return await player.toggle_playback_shuffle(client, state, device_id)


@REGISTRY.tool(title="Transfer Playback")
async def transfer_playback(
    client,
    device_ids: Annotated[
        list[str], Field(description="ID of the device to transfer to (exactly one)")
    ],
    play: Annotated[
        Optional[bool], Field(description="true starts playback on the new device")
    ] = None,
):
    """Transfer playback to a new device."""
    return await player.transfer_playback(client, device_ids, play)


@REGISTRY.tool(title="Add Item to Playback Queue")
async def add_item_to_playback_queue(
    client,
    uri: Annotated[str, Field(description="URI of the track or episode to add")],
    device_id: DeviceId = None,
):
    """Add an item to the end of the user's playback queue."""
    return await player.add_item_to_playback_queue(client, uri, device_id)
