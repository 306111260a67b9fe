# =============================================================================
# core/artists.py  -  Artist operations
# =============================================================================

from typing import Optional, Sequence

from core.client import MusicClient
from core.mappers import to_album_summary, to_artist_summary, to_page, to_top_track
from core.models import AlbumSummary, ArtistSummary, Page, TopTrack
from core.result import Err, Result, attempt
from core.validation import (
    check_batch,
    check_choices,
    check_limit,
    check_market,
    check_offset,
    first_failure,
    require_id,
)

MAX_ARTISTS_PER_LOOKUP = 50
INCLUDE_GROUPS = ("album", "single", "appears_on", "compilation")


async def get_artist(client: MusicClient, artist_id: str) -> Result[ArtistSummary]:
    failure = require_id(artist_id, "Artist ID")
    if failure:
        return failure
    return await attempt("get artist", client.get_artist(artist_id), to_artist_summary)


async def get_several_artists(
    client: MusicClient, artist_ids: Sequence[str]
) -> Result[list[ArtistSummary]]:
    """Look up to 50 artists; unknown IDs come back as null and are dropped."""
    failure = check_batch(artist_ids, "artist", MAX_ARTISTS_PER_LOOKUP)
    if failure:
        return failure
    return await attempt(
        "get artists",
        client.get_artists(artist_ids),
        lambda artists: [to_artist_summary(artist) for artist in artists if artist is not None],
    )


async def get_artist_albums(
    client: MusicClient,
    artist_id: str,
    include_groups: Optional[Sequence[str]] = None,
    market: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
) -> Result[Page[AlbumSummary]]:
    failure = first_failure(
        require_id(artist_id, "Artist ID"),
        check_choices(
            include_groups,
            INCLUDE_GROUPS,
            "Invalid include group: {value}. Must be one of: " + ", ".join(INCLUDE_GROUPS),
        ),
        check_market(market),
        check_limit(limit),
        check_offset(offset),
    )
    if failure:
        return failure
    return await attempt(
        "get artist albums",
        client.get_artist_albums(artist_id, include_groups, market, limit, offset),
        lambda body: to_page(body, to_album_summary),
    )


async def get_artist_top_tracks(
    client: MusicClient, artist_id: str, market: Optional[str]
) -> Result[list[TopTrack]]:
    """An artist's top tracks in one market.  The market is mandatory here."""
    failure = first_failure(
        require_id(artist_id, "Artist ID"),
        None if market else Err("Market parameter is required for top tracks"),
        check_market(market),
    )
    if failure:
        return failure
    return await attempt(
        "get artist top tracks",
        client.get_artist_top_tracks(artist_id, market),
        lambda tracks: [to_top_track(track) for track in tracks],
    )
