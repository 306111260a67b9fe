# =============================================================================
# tools/search.py  -  Search tools
# =============================================================================
# One tool per result kind, all returning a resource block addressed as
# spotify:search:<kind>s?q=<query>.
# =============================================================================

from typing import Annotated

from pydantic import Field

from core import search
from tools.envelope import OutputKind, create_resource_uri
from tools.params import Limit, Market, Offset
from tools.registry import REGISTRY

Query = Annotated[str, Field(description="Search query; field filters such as artist: or year: are allowed")]


def _search_uri(kind: str):
    return lambda args: create_resource_uri(f"search:{kind}s", query={"q": args["query"]})


@REGISTRY.tool(title="Search Tracks", output=OutputKind.RESOURCE, resource_uri=_search_uri("track"))
async def search_tracks(client, query: Query, limit: Limit = 20, offset: Offset = 0, market: Market = None):
    """Search for tracks on Spotify."""
    return await search.search_tracks(client, query, limit, offset, market)


@REGISTRY.tool(title="Search Albums", output=OutputKind.RESOURCE, resource_uri=_search_uri("album"))
async def search_albums(client, query: Query, limit: Limit = 20, offset: Offset = 0, market: Market = None):
    """Search for albums on Spotify."""
    return await search.search_albums(client, query, limit, offset, market)


@REGISTRY.tool(title="Search Artists", output=OutputKind.RESOURCE, resource_uri=_search_uri("artist"))
async def search_artists(client, query: Query, limit: Limit = 20, offset: Offset = 0, market: Market = None):
    """Search for artists on Spotify."""
    return await search.search_artists(client, query, limit, offset, market)


@REGISTRY.tool(title="Search Playlists", output=OutputKind.RESOURCE, resource_uri=_search_uri("playlist"))
async def search_playlists(client, query: Query, limit: Limit = 20, offset: Offset = 0, market: Market = None):
    """Search for playlists on Spotify."""
    return await search.search_playlists(client, query, limit, offset, market)


@REGISTRY.tool(title="Search Shows", output=OutputKind.RESOURCE, resource_uri=_search_uri("show"))
async def search_shows(client, query: Query, limit: Limit = 20, offset: Offset = 0, market: Market = None):
    """Search for podcast shows on Spotify."""
    return await search.search_shows(client, query, limit, offset, market)


@REGISTRY.tool(title="Search Episodes", output=OutputKind.RESOURCE, resource_uri=_search_uri("episode"))
async def search_episodes(client, query: Query, limit: Limit = 20, offset: Offset = 0, market: Market = None):
    """Search for podcast episodes on Spotify."""
    return await search.search_episodes(client, query, limit, offset, market)


@REGISTRY.tool(title="Search Audiobooks", output=OutputKind.RESOURCE, resource_uri=_search_uri("audiobook"))
async def search_audiobooks(client, query: Query, limit: Limit = 20, offset: Offset = 0, market: Market = None):
    """Search for audiobooks on Spotify.  Audiobooks are only offered in some markets."""
    return await search.search_audiobooks(client, query, limit, offset, market)
