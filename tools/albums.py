# =============================================================================
# tools/albums.py  -  Album tools
# =============================================================================
# get_album, get_several_albums, get_album_tracks, get_saved_albums,
# save_albums, remove_saved_albums, check_saved_albums
# =============================================================================

from typing import Annotated

from pydantic import Field

from core import albums
from tools.envelope import OutputKind, create_resource_uri
from tools.params import Limit, Market, Offset
from tools.registry import REGISTRY

AlbumId = Annotated[str, Field(description="Spotify album ID")]
AlbumIds = Annotated[list[str], Field(description="Spotify album IDs")]


@REGISTRY.tool(title="Get Album")
async def get_album(client, album_id: AlbumId, market: Market = None):
    """Get a single album by ID from Spotify."""
    return await albums.get_album(client, album_id, market)


@REGISTRY.tool(title="Get Several Albums")
async def get_several_albums(
    client,
    album_ids: Annotated[list[str], Field(description="Spotify album IDs (maximum 20)")],
    market: Market = None,
):
    """Get multiple albums by their IDs from Spotify."""
    return await albums.get_several_albums(client, album_ids, market)


@REGISTRY.tool(
    title="Get Album Tracks",
    output=OutputKind.RESOURCE,
    resource_uri=lambda args: create_resource_uri("album", args["album_id"], relation="tracks"),
)
async def get_album_tracks(
    client,
    album_id: AlbumId,
    limit: Limit = 20,
    offset: Offset = 0,
    market: Market = None,
):
    """Get the tracks of an album from Spotify."""
    return await albums.get_album_tracks(client, album_id, limit, offset, market)


@REGISTRY.tool(title="Get Saved Albums")
async def get_saved_albums(client, limit: Limit = 20, offset: Offset = 0, market: Market = None):
    """Get the albums saved in the current user's 'Your Music' library."""
    return await albums.get_saved_albums(client, limit, offset, market)


@REGISTRY.tool(
    title="Save Albums",
    confirmation=lambda args: f"Successfully saved {len(args['album_ids'])} album(s) to library",
)
async def save_albums(client, album_ids: AlbumIds):
    """Save one or more albums (maximum 50) to the current user's library."""
    return await albums.save_albums(client, album_ids)


@REGISTRY.tool(
    title="Remove Saved Albums",
    confirmation=lambda args: f"Successfully removed {len(args['album_ids'])} album(s) from library",
)
async def remove_saved_albums(client, album_ids: AlbumIds):
    """Remove one or more albums (maximum 50) from the current user's library."""
    return await albums.remove_saved_albums(client, album_ids)


@REGISTRY.tool(
    title="Check Saved Albums",
    output=OutputKind.RESOURCE,
    resource_uri=lambda args: create_resource_uri("me:albums:check", query={"ids": ",".join(args["album_ids"])}),
)
async def check_saved_albums(client, album_ids: AlbumIds):
    """Check whether albums (maximum 50) are saved in the current user's library."""
    return await albums.check_saved_albums(client, album_ids)
