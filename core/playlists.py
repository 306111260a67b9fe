# =============================================================================
# core/playlists.py  -  Playlist operations
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reading playlists, creating and editing them, and mutating their items.
#
# ITEM MUTATIONS:
#   - add_items_to_playlist inserts up to 100 track/episode URIs.
#   - update_playlist_items EITHER replaces the contents with `uris` OR moves
#     a block of items (range_start / insert_before / range_length).  The two
#     modes are mutually exclusive.
#   - remove_playlist_items takes EITHER plain `uris` (every occurrence) OR
#     `tracks` entries of {"uri", "positions"} (specific occurrences).
#
# SNAPSHOT TOKENS:
#   Callers may pass the playlist's snapshot_id for optimistic concurrency.
#   It is forwarded untouched; staleness is the service's concern.  When the
#   client does not hand back a snapshot after an insertion, the fixed
#   SNAPSHOT_UNAVAILABLE sentinel is returned in its place.
#
# VISIBILITY:
#   Collaborative playlists must be private.  An explicit public=True next to
#   collaborative=True is rejected; an omitted public flag is sent as False.
# =============================================================================

from typing import Any, Optional, Sequence

from core.client import MusicClient, MusicServiceError
from core.mappers import (
    is_track_item,
    to_created_playlist,
    to_images,
    to_page,
    to_playlist_item,
    to_playlist_summary,
)
from core.models import (
    SNAPSHOT_UNAVAILABLE,
    CoverImages,
    CoverUpload,
    CreatedPlaylist,
    Page,
    PlaylistItem,
    PlaylistSummary,
    RemovedItems,
    SnapshotResult,
    SnapshotWithCount,
)
from core.result import Err, Result, attempt
from core.validation import (
    check_item_count,
    check_item_uri,
    check_item_uris,
    check_limit,
    check_market,
    check_non_negative,
    check_offset,
    check_positive,
    decode_cover_image,
    first_failure,
    require_id,
    resolve_public_flag,
)

MAX_ITEMS_PER_CHANGE = 100
PLAYLIST_OFFSET_MESSAGE = "Offset must be a non-negative number"


# =============================================================================
# Reading
# =============================================================================
async def get_playlist(
    client: MusicClient, playlist_id: str, market: Optional[str] = None
) -> Result[PlaylistSummary]:
    failure = first_failure(require_id(playlist_id, "Playlist ID"), check_market(market))
    if failure:
        return failure
    return await attempt("get playlist", client.get_playlist(playlist_id, market), to_playlist_summary)


async def get_playlist_items(
    client: MusicClient,
    playlist_id: str,
    limit: int = 20,
    offset: int = 0,
    market: Optional[str] = None,
) -> Result[list[PlaylistItem]]:
    """List a playlist's tracks.  Episodes and unavailable entries are skipped."""
    failure = first_failure(
        require_id(playlist_id, "Playlist ID"),
        check_limit(limit),
        check_offset(offset),
        check_market(market),
    )
    if failure:
        return failure
    return await attempt(
        "get playlist items",
        client.get_playlist_items(playlist_id, limit, offset, market),
        lambda body: [to_playlist_item(item) for item in body.get("items") or [] if is_track_item(item)],
    )


async def get_current_user_playlists(
    client: MusicClient, limit: int = 20, offset: int = 0
) -> Result[Page[PlaylistSummary]]:
    failure = first_failure(check_limit(limit), check_offset(offset, PLAYLIST_OFFSET_MESSAGE))
    if failure:
        return failure
    return await attempt(
        "get current user playlists",
        client.get_current_user_playlists(limit, offset),
        lambda body: to_page(body, to_playlist_summary),
    )


async def get_user_playlists(
    client: MusicClient, user_id: str, limit: int = 20, offset: int = 0
) -> Result[Page[PlaylistSummary]]:
    failure = first_failure(
        require_id(user_id, "User ID"),
        check_limit(limit),
        check_offset(offset, PLAYLIST_OFFSET_MESSAGE),
    )
    if failure:
        return failure
    return await attempt(
        "get user playlists",
        client.get_user_playlists(user_id, limit, offset),
        lambda body: to_page(body, to_playlist_summary),
    )


async def get_playlist_cover_image(client: MusicClient, playlist_id: str) -> Result[CoverImages]:
    failure = require_id(playlist_id, "Playlist ID")
    if failure:
        return failure
    return await attempt(
        "get playlist cover image",
        client.get_playlist_cover_image(playlist_id),
        lambda images: CoverImages(images=to_images(images)),
    )


# =============================================================================
# Creating and editing
# =============================================================================
def _profile_id(profile: Optional[dict[str, Any]]) -> str:
    user_id = (profile or {}).get("id")
    if not user_id:
        raise MusicServiceError("Current user profile has no ID")
    return user_id


async def create_playlist(
    client: MusicClient,
    name: str,
    public: Optional[bool] = None,
    collaborative: Optional[bool] = None,
    description: Optional[str] = None,
) -> Result[CreatedPlaylist]:
    """Create a playlist owned by the current user.

    Two remote calls: the user's profile (for the owner ID), then the
    creation itself.  Playlists are public unless stated otherwise.
    """
    failure = require_id(name, "Playlist name")
    if failure:
        return failure

    visibility = resolve_public_flag(public, collaborative, default=True)
    if isinstance(visibility, Err):
        return visibility

    owner = await attempt("create playlist", client.get_current_user_profile(), _profile_id)
    if isinstance(owner, Err):
        return owner

    return await attempt(
        "create playlist",
        client.create_playlist(
            owner.value, name, visibility.value, bool(collaborative), description
        ),
        to_created_playlist,
    )


async def change_playlist_details(
    client: MusicClient,
    playlist_id: str,
    name: Optional[str] = None,
    public: Optional[bool] = None,
    collaborative: Optional[bool] = None,
    description: Optional[str] = None,
) -> Result[None]:
    failure = first_failure(
        require_id(playlist_id, "Playlist ID"),
        None
        if any(value is not None for value in (name, public, collaborative, description))
        else Err("At least one field must be provided to update"),
    )
    if failure:
        return failure

    visibility = resolve_public_flag(public, collaborative)
    if isinstance(visibility, Err):
        return visibility

    return await attempt(
        "update playlist details",
        client.change_playlist_details(playlist_id, name, visibility.value, collaborative, description),
        lambda _: None,
    )


async def add_custom_playlist_cover_image(
    client: MusicClient, playlist_id: str, image_base64: str
) -> Result[CoverUpload]:
    """Upload a base64-encoded JPEG (at most 256 KiB decoded) as the cover."""
    failure = require_id(playlist_id, "Playlist ID")
    if failure:
        return failure

    decoded = decode_cover_image(image_base64)
    if isinstance(decoded, Err):
        return decoded

    return await attempt(
        "upload playlist cover image",
        client.upload_playlist_cover_image(playlist_id, image_base64),
        lambda _: CoverUpload(success=True, message="Successfully uploaded playlist cover image"),
    )


# =============================================================================
# Item mutations
# =============================================================================
async def add_items_to_playlist(
    client: MusicClient,
    playlist_id: str,
    uris: Sequence[str],
    position: Optional[int] = None,
) -> Result[SnapshotWithCount]:
    failure = first_failure(
        require_id(playlist_id, "Playlist ID"),
        check_item_count(uris, "add", MAX_ITEMS_PER_CHANGE),
        check_item_uris(uris),
        check_non_negative(position, "Position must be a non-negative number"),
    )
    if failure:
        return failure

    def shape(body: Optional[dict[str, Any]]) -> SnapshotWithCount:
        snapshot = (body or {}).get("snapshot_id") or SNAPSHOT_UNAVAILABLE
        return SnapshotWithCount(snapshot_id=snapshot, items_added=len(uris))

    return await attempt("add items to playlist", client.add_playlist_items(playlist_id, uris, position), shape)


async def update_playlist_items(
    client: MusicClient,
    playlist_id: str,
    uris: Optional[Sequence[str]] = None,
    range_start: Optional[int] = None,
    insert_before: Optional[int] = None,
    range_length: Optional[int] = None,
    snapshot_id: Optional[str] = None,
) -> Result[SnapshotResult]:
    """Replace a playlist's items, or reorder a block of them."""
    has_uris = bool(uris)
    has_range = range_start is not None or insert_before is not None

    failure = first_failure(
        require_id(playlist_id, "Playlist ID"),
        None if has_uris or has_range else Err("Either uris or range parameters must be provided"),
        Err("Cannot provide both uris and range parameters") if has_uris and has_range else None,
    )
    if failure:
        return failure

    if has_uris:
        failure = first_failure(
            check_item_count(uris, "set", MAX_ITEMS_PER_CHANGE),
            check_item_uris(uris),
        )
    else:
        failure = first_failure(
            None
            if range_start is not None and insert_before is not None
            else Err("Both range_start and insert_before are required for reordering"),
            check_non_negative(range_start, "range_start must be a non-negative number"),
            check_non_negative(insert_before, "insert_before must be a non-negative number"),
            check_positive(range_length, "range_length must be a positive number"),
        )
    if failure:
        return failure

    return await attempt(
        "update playlist items",
        client.update_playlist_items(
            playlist_id,
            uris=uris if has_uris else None,
            range_start=range_start,
            insert_before=insert_before,
            range_length=range_length,
            snapshot_id=snapshot_id,
        ),
        lambda body: SnapshotResult(snapshot_id=(body or {}).get("snapshot_id")),
    )


def _check_tracks(tracks: Sequence[dict[str, Any]]) -> Err | None:
    # Pinned and unpinned removals go to different endpoints.
    if len({bool(track.get("positions")) for track in tracks}) > 1:
        return Err("Cannot mix tracks with and without positions in one request")
    for track in tracks:
        failure = check_item_uri(track.get("uri") or "")
        if failure:
            return failure
        if any(position < 0 for position in track.get("positions") or ()):
            return Err("All positions must be non-negative")
    return None


async def remove_playlist_items(
    client: MusicClient,
    playlist_id: str,
    uris: Optional[Sequence[str]] = None,
    tracks: Optional[Sequence[dict[str, Any]]] = None,
    snapshot_id: Optional[str] = None,
) -> Result[RemovedItems]:
    """Remove items by URI, or specific occurrences by URI plus positions."""
    failure = first_failure(
        require_id(playlist_id, "Playlist ID"),
        None if uris is not None or tracks is not None else Err("Either uris or tracks must be provided"),
        Err("Cannot provide both uris and tracks parameters") if uris is not None and tracks is not None else None,
    )
    if failure:
        return failure

    if uris is not None:
        failure = first_failure(check_item_count(uris, "remove", MAX_ITEMS_PER_CHANGE), check_item_uris(uris))
        removed = len(uris)
    else:
        failure = first_failure(check_item_count(tracks, "remove", MAX_ITEMS_PER_CHANGE), _check_tracks(tracks))
        removed = len(tracks)
    if failure:
        return failure

    return await attempt(
        "remove items from playlist",
        client.remove_playlist_items(playlist_id, uris=uris, tracks=tracks, snapshot_id=snapshot_id),
        lambda body: RemovedItems(snapshot_id=(body or {}).get("snapshot_id"), items_removed=removed),
    )
