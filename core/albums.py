# =============================================================================
# core/albums.py  -  Album catalogue and library operations
# =============================================================================
#
# Each function validates its arguments, makes one remote call through
# result.attempt() and returns a Result.  Nothing here formats responses;
# that is the tools/ layer's job.
#
#   get_album              -> AlbumSummary
#   get_several_albums     -> list[AlbumSummary]        (max 20 IDs)
#   get_album_tracks       -> list[TrackSummary]        (album = "Unknown Album")
#   get_saved_albums       -> Page[SavedAlbum]
#   save_albums            -> None                      (max 50 IDs)
#   remove_saved_albums    -> None                      (max 50 IDs)
#   check_saved_albums     -> list[{"id", "saved"}]     (max 50 IDs)
# =============================================================================

from typing import Any, Optional, Sequence

from core.client import MusicClient
from core.mappers import to_album_summary, to_page, to_track_summary
from core.models import AlbumSummary, Page, SavedAlbum, TrackSummary
from core.result import Result, attempt
from core.validation import (
    check_batch,
    check_limit,
    check_market,
    check_offset,
    first_failure,
    require_id,
)

MAX_ALBUMS_PER_LOOKUP = 20
MAX_ALBUMS_PER_LIBRARY_CHANGE = 50


async def get_album(
    client: MusicClient, album_id: str, market: Optional[str] = None
) -> Result[AlbumSummary]:
    failure = first_failure(require_id(album_id, "Album ID"), check_market(market))
    if failure:
        return failure
    return await attempt("get album", client.get_album(album_id, market), to_album_summary)


async def get_several_albums(
    client: MusicClient, album_ids: Sequence[str], market: Optional[str] = None
) -> Result[list[AlbumSummary]]:
    failure = first_failure(
        check_batch(album_ids, "album", MAX_ALBUMS_PER_LOOKUP),
        check_market(market),
    )
    if failure:
        return failure
    return await attempt(
        "get albums",
        client.get_albums(album_ids, market),
        lambda albums: [to_album_summary(album) for album in albums if album is not None],
    )


async def get_album_tracks(
    client: MusicClient,
    album_id: str,
    limit: int = 20,
    offset: int = 0,
    market: Optional[str] = None,
) -> Result[list[TrackSummary]]:
    """List an album's tracks.

    The album-tracks endpoint returns simplified tracks without album
    context, so every entry carries UNKNOWN_ALBUM.
    """
    failure = first_failure(
        require_id(album_id, "Album ID"),
        check_limit(limit),
        check_offset(offset),
        check_market(market),
    )
    if failure:
        return failure
    return await attempt(
        "get album tracks",
        client.get_album_tracks(album_id, limit, offset, market),
        lambda body: [to_track_summary(track) for track in body.get("items") or []],
    )


def _to_saved_album(entry: dict[str, Any]) -> SavedAlbum:
    return SavedAlbum(added_at=entry.get("added_at"), album=to_album_summary(entry.get("album") or {}))


async def get_saved_albums(
    client: MusicClient, limit: int = 20, offset: int = 0, market: Optional[str] = None
) -> Result[Page[SavedAlbum]]:
    failure = first_failure(check_limit(limit), check_offset(offset), check_market(market))
    if failure:
        return failure
    return await attempt(
        "get saved albums",
        client.get_saved_albums(limit, offset, market),
        lambda body: to_page(body, _to_saved_album),
    )


async def save_albums(client: MusicClient, album_ids: Sequence[str]) -> Result[None]:
    failure = check_batch(album_ids, "album", MAX_ALBUMS_PER_LIBRARY_CHANGE)
    if failure:
        return failure
    return await attempt("save albums", client.save_albums(album_ids), lambda _: None)


async def remove_saved_albums(client: MusicClient, album_ids: Sequence[str]) -> Result[None]:
    failure = check_batch(album_ids, "album", MAX_ALBUMS_PER_LIBRARY_CHANGE)
    if failure:
        return failure
    return await attempt("remove albums", client.remove_saved_albums(album_ids), lambda _: None)


async def check_saved_albums(
    client: MusicClient, album_ids: Sequence[str]
) -> Result[list[dict[str, Any]]]:
    """Pair each requested ID with whether it is in the user's library."""
    failure = check_batch(album_ids, "album", MAX_ALBUMS_PER_LIBRARY_CHANGE)
    if failure:
        return failure
    return await attempt(
        "check albums",
        client.check_saved_albums(album_ids),
        lambda flags: [{"id": album_id, "saved": bool(saved)} for album_id, saved in zip(album_ids, flags)],
    )
