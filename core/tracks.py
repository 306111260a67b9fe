# =============================================================================
# core/tracks.py  -  Track catalogue and library operations
# =============================================================================
#
# Mirrors core/albums.py for tracks.  Lookups and library changes both
# accept up to 50 IDs.
# =============================================================================

from typing import Any, Optional, Sequence

from core.client import MusicClient
from core.mappers import to_page, to_track_summary
from core.models import Page, SavedTrack, TrackSummary
from core.result import Result, attempt
from core.validation import (
    check_batch,
    check_limit,
    check_market,
    check_offset,
    first_failure,
    require_id,
)

MAX_TRACKS_PER_REQUEST = 50


async def get_track(
    client: MusicClient, track_id: str, market: Optional[str] = None
) -> Result[TrackSummary]:
    failure = first_failure(require_id(track_id, "Track ID"), check_market(market))
    if failure:
        return failure
    return await attempt("get track", client.get_track(track_id, market), to_track_summary)


async def get_several_tracks(
    client: MusicClient, track_ids: Sequence[str], market: Optional[str] = None
) -> Result[list[TrackSummary]]:
    failure = first_failure(
        check_batch(track_ids, "track", MAX_TRACKS_PER_REQUEST),
        check_market(market),
    )
    if failure:
        return failure
    return await attempt(
        "get tracks",
        client.get_tracks(track_ids, market),
        lambda tracks: [to_track_summary(track) for track in tracks if track is not None],
    )


def _to_saved_track(entry: dict[str, Any]) -> SavedTrack:
    return SavedTrack(added_at=entry.get("added_at"), track=to_track_summary(entry.get("track") or {}))


async def get_saved_tracks(
    client: MusicClient, limit: int = 20, offset: int = 0, market: Optional[str] = None
) -> Result[Page[SavedTrack]]:
    failure = first_failure(check_limit(limit), check_offset(offset), check_market(market))
    if failure:
        return failure
    return await attempt(
        "get saved tracks",
        client.get_saved_tracks(limit, offset, market),
        lambda body: to_page(body, _to_saved_track),
    )


async def save_tracks(client: MusicClient, track_ids: Sequence[str]) -> Result[None]:
    failure = check_batch(track_ids, "track", MAX_TRACKS_PER_REQUEST)
    if failure:
        return failure
    return await attempt("save tracks", client.save_tracks(track_ids), lambda _: None)


async def remove_saved_tracks(client: MusicClient, track_ids: Sequence[str]) -> Result[None]:
    failure = check_batch(track_ids, "track", MAX_TRACKS_PER_REQUEST)
    if failure:
        return failure
    return await attempt("remove tracks", client.remove_saved_tracks(track_ids), lambda _: None)


async def check_saved_tracks(
    client: MusicClient, track_ids: Sequence[str]
) -> Result[list[dict[str, Any]]]:
    failure = check_batch(track_ids, "track", MAX_TRACKS_PER_REQUEST)
    if failure:
        return failure
    return await attempt(
        "check tracks",
        client.check_saved_tracks(track_ids),
        lambda flags: [{"id": track_id, "saved": bool(saved)} for track_id, saved in zip(track_ids, flags)],
    )
