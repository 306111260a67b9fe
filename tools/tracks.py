# =============================================================================
# tools/tracks.py  -  Track tools
# =============================================================================

from typing import Annotated

from pydantic import Field

from core import tracks
from tools.envelope import OutputKind, create_resource_uri
from tools.params import Limit, Market, Offset
from tools.registry import REGISTRY

TrackIds = Annotated[list[str], Field(description="Spotify track IDs (maximum 50)")]


@REGISTRY.tool(title="Get Track")
async def get_track(
    client,
    track_id: Annotated[str, Field(description="Spotify track ID")],
    market: Market = None,
):
    """Get a single track by ID from Spotify."""
    return await tracks.get_track(client, track_id, market)


@REGISTRY.tool(title="Get Several Tracks")
async def get_several_tracks(client, track_ids: TrackIds, market: Market = None):
    """Get multiple tracks by their IDs from Spotify."""
    return await tracks.get_several_tracks(client, track_ids, market)


@REGISTRY.tool(title="Get Saved Tracks")
async def get_saved_tracks(client, limit: Limit = 20, offset: Offset = 0, market: Market = None):
    """Get the tracks saved in the current user's 'Your Music' library."""
    return await tracks.get_saved_tracks(client, limit, offset, market)


@REGISTRY.tool(
    title="Save Tracks",
    confirmation=lambda args: f"Successfully saved {len(args['track_ids'])} track(s) to library",
)
async def save_tracks(client, track_ids: TrackIds):
    """Save one or more tracks to the current user's library."""
    return await tracks.save_tracks(client, track_ids)


@REGISTRY.tool(
    title="Remove Saved Tracks",
    confirmation=lambda args: f"Successfully removed {len(args['track_ids'])} track(s) from library",
)
async def remove_saved_tracks(client, track_ids: TrackIds):
    """Remove one or more tracks from the current user's library."""
    return await tracks.remove_saved_tracks(client, track_ids)


@REGISTRY.tool(
    title="Check Saved Tracks",
    output=OutputKind.RESOURCE,
    resource_uri=lambda args: create_resource_uri("me:tracks:check", query={"ids": ",".join(args["track_ids"])}),
)
async def check_saved_tracks(client, track_ids: TrackIds):
    """Check whether tracks are saved in the current user's library."""
    return await tracks.check_saved_tracks(client, track_ids)
