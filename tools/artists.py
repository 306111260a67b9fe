# =============================================================================
# tools/artists.py  -  Artist tools
# =============================================================================

from typing import Annotated, Optional

from pydantic import Field

from core import artists
from tools.envelope import OutputKind, create_resource_uri
from tools.params import Limit, Market, Offset
from tools.registry import REGISTRY

ArtistId = Annotated[str, Field(description="Spotify artist ID")]


@REGISTRY.tool(
    title="Get Artist",
    output=OutputKind.RESOURCE,
    resource_uri=lambda args: create_resource_uri("artist", args["artist_id"]),
)
async def get_artist(client, artist_id: ArtistId):
    """Get a single artist by ID from Spotify."""
    return await artists.get_artist(client, artist_id)


@REGISTRY.tool(title="Get Several Artists")
async def get_several_artists(
    client,
    artist_ids: Annotated[list[str], Field(description="Spotify artist IDs (maximum 50)")],
):
    """Get multiple artists by their IDs from Spotify."""
    return await artists.get_several_artists(client, artist_ids)


@REGISTRY.tool(title="Get Artist Albums")
async def get_artist_albums(
    client,
    artist_id: ArtistId,
    include_groups: Annotated[
        Optional[list[str]],
        Field(description="Filter by album type: album, single, appears_on, compilation"),
    ] = None,
    market: Market = None,
    limit: Limit = 20,
    offset: Offset = 0,
):
    """Get an artist's albums, singles and compilations."""
    return await artists.get_artist_albums(client, artist_id, include_groups, market, limit, offset)


@REGISTRY.tool(title="Get Artist's Top Tracks")
async def get_artist_top_tracks(
    client,
    artist_id: ArtistId,
    market: Annotated[str, Field(description="ISO 3166-1 alpha-2 country code (required)")],
):
    """Get an artist's top tracks in a given market."""
    return await artists.get_artist_top_tracks(client, artist_id, market)
