# =============================================================================
# core/mappers.py  -  Response reshaping
# =============================================================================
#
# Turns the music service's JSON (as returned by the client) into the
# dataclasses in core/models.py.  Every function tolerates empty lists and
# missing optional keys: `artists: []` becomes "", `images: []` stays [].
# =============================================================================

from typing import Any, Callable, Optional

from core.models import (
    UNKNOWN_ALBUM,
    AlbumRef,
    AlbumSummary,
    AudiobookHit,
    ArtistRef,
    ArtistSummary,
    CreatedPlaylist,
    Device,
    EpisodeHit,
    ImageInfo,
    Page,
    PlaybackContext,
    PlaybackItem,
    PlaylistHit,
    PlaylistItem,
    PlaylistSummary,
    PlaylistTrack,
    ShowHit,
    TopTrack,
    TrackSummary,
)

Json = dict[str, Any]

# Width the search hits aim for when picking a single image.
PREFERRED_IMAGE_WIDTH = 300


# -----------------------------------------------------------------------------
# Small helpers
# -----------------------------------------------------------------------------
def join_artists(artists: Optional[list[Json]]) -> str:
    return ", ".join(artist.get("name", "") for artist in artists or [])


def external_url(obj: Json) -> Optional[str]:
    return (obj.get("external_urls") or {}).get("spotify")


def to_images(images: Optional[list[Json]]) -> list[ImageInfo]:
    return [
        ImageInfo(url=image.get("url"), height=image.get("height"), width=image.get("width"))
        for image in images or []
    ]


def best_image(images: Optional[list[Json]]) -> Optional[str]:
    """Pick the rendition whose width is closest to PREFERRED_IMAGE_WIDTH.

    Images without a width only win when no image has one.
    """
    if not images:
        return None
    sized = [image for image in images if image.get("width")]
    if not sized:
        return images[0].get("url")
    chosen = min(sized, key=lambda image: abs(image["width"] - PREFERRED_IMAGE_WIDTH))
    return chosen.get("url")


def format_duration(milliseconds: int) -> str:
    """Render a duration as "m:ss" (e.g. 195000 -> "3:15")."""
    seconds = milliseconds // 1000
    return f"{seconds // 60}:{seconds % 60:02d}"


def owner_name(owner: Optional[Json]) -> str:
    owner = owner or {}
    return owner.get("display_name") or owner.get("id") or ""


def to_page(body: Json, item: Callable[[Json], Any]) -> Page:
    """Pass a paging object through, reshaping each non-null item."""
    return Page(
        href=body.get("href"),
        items=[item(entry) for entry in body.get("items") or [] if entry is not None],
        limit=body.get("limit", 0),
        next=body.get("next"),
        offset=body.get("offset", 0),
        previous=body.get("previous"),
        total=body.get("total", 0),
    )


# -----------------------------------------------------------------------------
# Catalogue objects
# -----------------------------------------------------------------------------
def to_track_summary(track: Json, album_name: Optional[str] = None) -> TrackSummary:
    """Reshape a track object.

    Track listings nested under an album lookup carry no album context;
    those get `album_name` if the caller knows it, else UNKNOWN_ALBUM.
    """
    album = track.get("album") or {}
    return TrackSummary(
        id=track.get("id"),
        name=track.get("name", ""),
        artists=join_artists(track.get("artists")),
        album=album.get("name") or album_name or UNKNOWN_ALBUM,
        duration_ms=track.get("duration_ms", 0),
        preview_url=track.get("preview_url"),
        external_url=external_url(track),
    )


def to_album_summary(album: Json) -> AlbumSummary:
    return AlbumSummary(
        id=album.get("id"),
        name=album.get("name", ""),
        artists=join_artists(album.get("artists")),
        release_date=album.get("release_date"),
        total_tracks=album.get("total_tracks", 0),
        album_type=album.get("album_type"),
        external_url=external_url(album),
        images=to_images(album.get("images")),
    )


def to_artist_summary(artist: Json) -> ArtistSummary:
    return ArtistSummary(
        id=artist.get("id"),
        name=artist.get("name", ""),
        genres=list(artist.get("genres") or []),
        popularity=artist.get("popularity"),
        followers=(artist.get("followers") or {}).get("total", 0),
        external_url=external_url(artist),
        images=to_images(artist.get("images")),
    )


def to_top_track(track: Json) -> TopTrack:
    return TopTrack(
        id=track.get("id"),
        name=track.get("name", ""),
        artists=join_artists(track.get("artists")),
        album=(track.get("album") or {}).get("name") or UNKNOWN_ALBUM,
        duration=format_duration(track.get("duration_ms", 0)),
        popularity=track.get("popularity"),
        external_url=external_url(track),
    )


def to_artist_refs(artists: Optional[list[Json]]) -> list[ArtistRef]:
    return [ArtistRef(id=artist.get("id"), name=artist.get("name", "")) for artist in artists or []]


# -----------------------------------------------------------------------------
# Playlists
# -----------------------------------------------------------------------------
def to_playlist_summary(playlist: Json) -> PlaylistSummary:
    return PlaylistSummary(
        id=playlist.get("id"),
        name=playlist.get("name", ""),
        description=playlist.get("description"),
        owner=owner_name(playlist.get("owner")),
        public=playlist.get("public"),
        collaborative=bool(playlist.get("collaborative")),
        total_tracks=(playlist.get("tracks") or {}).get("total", 0),
        external_url=external_url(playlist),
        images=to_images(playlist.get("images")),
    )


def to_created_playlist(playlist: Json) -> CreatedPlaylist:
    return CreatedPlaylist(
        id=playlist.get("id"),
        name=playlist.get("name", ""),
        description=playlist.get("description"),
        public=playlist.get("public"),
        collaborative=bool(playlist.get("collaborative")),
        owner=owner_name(playlist.get("owner")),
        total_tracks=(playlist.get("tracks") or {}).get("total", 0),
        external_url=external_url(playlist),
    )


def is_track_item(item: Json) -> bool:
    track = item.get("track")
    return bool(track) and track.get("type") == "track"


def to_playlist_item(item: Json) -> PlaylistItem:
    track = item["track"]
    album = track.get("album") or {}
    return PlaylistItem(
        track=PlaylistTrack(
            id=track.get("id"),
            name=track.get("name", ""),
            artists=to_artist_refs(track.get("artists")),
            album=AlbumRef(
                id=album.get("id"),
                name=album.get("name") or UNKNOWN_ALBUM,
                release_date=album.get("release_date"),
            ),
            duration_ms=track.get("duration_ms", 0),
            explicit=bool(track.get("explicit")),
            external_url=external_url(track),
        ),
        added_at=item.get("added_at"),
        added_by=(item.get("added_by") or {}).get("id") or "spotify",
    )


# -----------------------------------------------------------------------------
# Player
# -----------------------------------------------------------------------------
def to_device(device: Json) -> Device:
    return Device(
        id=device.get("id"),
        name=device.get("name", ""),
        type=device.get("type", ""),
        is_active=bool(device.get("is_active")),
        is_private_session=bool(device.get("is_private_session")),
        is_restricted=bool(device.get("is_restricted")),
        volume_percent=device.get("volume_percent"),
    )


def to_context(context: Optional[Json]) -> Optional[PlaybackContext]:
    if not context:
        return None
    return PlaybackContext(type=context.get("type"), href=context.get("href"), uri=context.get("uri"))


def to_playback_item(item: Optional[Json]) -> Optional[PlaybackItem]:
    if not item:
        return None
    album = item.get("album")
    show = item.get("show")
    return PlaybackItem(
        id=item.get("id"),
        name=item.get("name", ""),
        type=item.get("type", ""),
        uri=item.get("uri"),
        duration_ms=item.get("duration_ms"),
        artists=to_artist_refs(item["artists"]) if "artists" in item else None,
        album=(
            {"id": album.get("id"), "name": album.get("name"), "images": album.get("images") or []}
            if album else None
        ),
        show={"id": show.get("id"), "name": show.get("name")} if show else None,
    )


# -----------------------------------------------------------------------------
# Search hits
# -----------------------------------------------------------------------------
def to_playlist_hit(playlist: Json) -> PlaylistHit:
    return PlaylistHit(
        id=playlist.get("id"),
        name=playlist.get("name", ""),
        owner=owner_name(playlist.get("owner")),
        total_tracks=(playlist.get("tracks") or {}).get("total", 0),
        external_url=external_url(playlist),
        image=best_image(playlist.get("images")),
    )


def to_show_hit(show: Json) -> ShowHit:
    return ShowHit(
        id=show.get("id"),
        name=show.get("name", ""),
        publisher=show.get("publisher"),
        description=show.get("description"),
        total_episodes=show.get("total_episodes"),
        external_url=external_url(show),
        image=best_image(show.get("images")),
    )


def to_episode_hit(episode: Json) -> EpisodeHit:
    return EpisodeHit(
        id=episode.get("id"),
        name=episode.get("name", ""),
        release_date=episode.get("release_date"),
        duration_ms=episode.get("duration_ms"),
        description=episode.get("description"),
        external_url=external_url(episode),
        image=best_image(episode.get("images")),
    )


def to_audiobook_hit(audiobook: Json) -> AudiobookHit:
    return AudiobookHit(
        id=audiobook.get("id"),
        name=audiobook.get("name", ""),
        description=audiobook.get("description"),
        authors=[author.get("name", "") for author in audiobook.get("authors") or []],
        narrators=[narrator.get("name", "") for narrator in audiobook.get("narrators") or []],
        publisher=audiobook.get("publisher"),
        total_chapters=audiobook.get("total_chapters"),
        explicit=bool(audiobook.get("explicit")),
        external_url=external_url(audiobook),
        images=to_images(audiobook.get("images")),
    )
