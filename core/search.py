# =============================================================================
# core/search.py  -  Catalogue search
# =============================================================================
#
# One search entry point per result kind.  Each returns the reshaped items of
# the kind's result page, dropping null entries (the service pads playlist
# results with nulls for playlists it can no longer show).
# =============================================================================

from typing import Any, Callable, Optional

from core.client import MusicClient
from core.mappers import (
    to_album_summary,
    to_artist_summary,
    to_audiobook_hit,
    to_episode_hit,
    to_playlist_hit,
    to_show_hit,
    to_track_summary,
)
from core.result import Result, attempt
from core.validation import check_limit, check_market, check_offset, first_failure, require_id

# kind -> reshaping function for one result item
SEARCH_KINDS: dict[str, Callable[[dict[str, Any]], Any]] = {
    "track": to_track_summary,
    "album": to_album_summary,
    "artist": to_artist_summary,
    "playlist": to_playlist_hit,
    "show": to_show_hit,
    "episode": to_episode_hit,
    "audiobook": to_audiobook_hit,
}


async def search(
    client: MusicClient,
    kind: str,
    query: str,
    limit: int = 20,
    offset: int = 0,
    market: Optional[str] = None,
) -> Result[list[Any]]:
    """Search the catalogue for one kind of item.

    Args:
        kind: One of SEARCH_KINDS ("track", "album", ...).
        query: Free-text query; the service's field filters
            (artist:, year:, ...) pass through untouched.
    """
    reshape = SEARCH_KINDS[kind]
    failure = first_failure(
        require_id(query, "Search query"),
        check_limit(limit),
        check_offset(offset),
        check_market(market),
    )
    if failure:
        return failure

    def shape(body: dict[str, Any]) -> list[Any]:
        page = (body or {}).get(f"{kind}s") or {}
        return [reshape(item) for item in page.get("items") or [] if item is not None]

    return await attempt(f"search {kind}s", client.search(query, kind, limit, offset, market), shape)


async def search_tracks(client, query, limit=20, offset=0, market=None):
    return await search(client, "track", query, limit, offset, market)


async def search_albums(client, query, limit=20, offset=0, market=None):
    return await search(client, "album", query, limit, offset, market)


async def search_artists(client, query, limit=20, offset=0, market=None):
    return await search(client, "artist", query, limit, offset, market)


async def search_playlists(client, query, limit=20, offset=0, market=None):
    return await search(client, "playlist", query, limit, offset, market)


async def search_shows(client, query, limit=20, offset=0, market=None):
    return await search(client, "show", query, limit, offset, market)


async def search_episodes(client, query, limit=20, offset=0, market=None):
    return await search(client, "episode", query, limit, offset, market)


async def search_audiobooks(client, query, limit=20, offset=0, market=None):
    return await search(client, "audiobook", query, limit, offset, market)
