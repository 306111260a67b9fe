# =============================================================================
# core/models.py  -  Data Models (the shapes tools return)
# =============================================================================
#
# These dataclasses are the reshaped forms of the music service's JSON.
# Operations in core/ build them from raw response bodies (see
# core/mappers.py) and the tools/ layer serializes them to JSON.
#
# CONVENTIONS SHARED BY EVERY MODEL:
#   - external_urls.spotify is flattened to a single `external_url` string.
#   - Artist lists are flattened to a comma-joined display string, except
#     where a model needs artist IDs (PlaylistTrack, PlaybackItem).
#   - Image lists pass through as ImageInfo entries, except search hits
#     which carry one best-size image URL.
#
# The models carry no behavior.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

UNKNOWN_ALBUM = "Unknown Album"

# Returned by add_items_to_playlist when the client gives back no snapshot.
SNAPSHOT_UNAVAILABLE = "not-available-due-to-sdk-limitation"


# -----------------------------------------------------------------------------
# Shared pieces
# -----------------------------------------------------------------------------
@dataclass
class ImageInfo:
    """One artwork rendition."""

    url: str
    height: Optional[int] = None
    width: Optional[int] = None


@dataclass
class Page(Generic[T]):
    """A paginated listing, passed through from the service field-for-field."""

    href: Optional[str]
    items: list[T]
    limit: int
    next: Optional[str]
    offset: int
    previous: Optional[str]
    total: int


@dataclass
class StatusMessage:
    """Confirmation payload for player commands."""

    message: str


# -----------------------------------------------------------------------------
# Tracks, albums, artists
# -----------------------------------------------------------------------------
@dataclass
class TrackSummary:
    id: str
    name: str
    artists: str                       # "Artist A, Artist B"
    album: str                         # UNKNOWN_ALBUM when the endpoint omits it
    duration_ms: int
    preview_url: Optional[str]
    external_url: Optional[str]


@dataclass
class AlbumSummary:
    id: str
    name: str
    artists: str
    release_date: Optional[str]
    total_tracks: int
    album_type: Optional[str]
    external_url: Optional[str]
    images: list[ImageInfo] = field(default_factory=list)


@dataclass
class SavedAlbum:
    added_at: Optional[str]
    album: AlbumSummary


@dataclass
class SavedTrack:
    added_at: Optional[str]
    track: TrackSummary


@dataclass
class ArtistSummary:
    id: str
    name: str
    genres: list[str]
    popularity: Optional[int]
    followers: int
    external_url: Optional[str]
    images: list[ImageInfo] = field(default_factory=list)


@dataclass
class TopTrack:
    """An artist's top track, with duration rendered as "m:ss"."""

    id: str
    name: str
    artists: str
    album: str
    duration: str
    popularity: Optional[int]
    external_url: Optional[str]


# -----------------------------------------------------------------------------
# Playlists
# -----------------------------------------------------------------------------
@dataclass
class PlaylistSummary:
    id: str
    name: str
    description: Optional[str]
    owner: str                         # display name, falling back to the user ID
    public: Optional[bool]
    collaborative: bool
    total_tracks: int
    external_url: Optional[str]
    images: list[ImageInfo] = field(default_factory=list)


@dataclass
class CreatedPlaylist:
    id: str
    name: str
    description: Optional[str]
    public: Optional[bool]
    collaborative: bool
    owner: str
    total_tracks: int
    external_url: Optional[str]


@dataclass
class ArtistRef:
    id: Optional[str]
    name: str


@dataclass
class AlbumRef:
    id: Optional[str]
    name: str
    release_date: Optional[str]


@dataclass
class PlaylistTrack:
    id: Optional[str]
    name: str
    artists: list[ArtistRef]
    album: AlbumRef
    duration_ms: int
    explicit: bool
    external_url: Optional[str]


@dataclass
class PlaylistItem:
    track: PlaylistTrack
    added_at: Optional[str]
    added_by: str                      # user ID, or "spotify" for generated playlists


@dataclass
class SnapshotResult:
    snapshot_id: Optional[str]


@dataclass
class SnapshotWithCount:
    snapshot_id: Optional[str]
    items_added: int


@dataclass
class RemovedItems:
    snapshot_id: Optional[str]
    items_removed: int


@dataclass
class CoverImages:
    images: list[ImageInfo]


@dataclass
class CoverUpload:
    success: bool
    message: str


# -----------------------------------------------------------------------------
# Player
# -----------------------------------------------------------------------------
@dataclass
class Device:
    id: Optional[str]
    name: str
    type: str
    is_active: bool
    is_private_session: bool
    is_restricted: bool
    volume_percent: Optional[int]


@dataclass
class DeviceList:
    devices: list[Device]


@dataclass
class PlaybackContext:
    type: Optional[str]
    href: Optional[str]
    uri: Optional[str]


@dataclass
class PlaybackItem:
    """The track or episode being played.

    Tracks fill `artists` and `album`; episodes fill `show`.
    """

    id: Optional[str]
    name: str
    type: str
    uri: Optional[str]
    duration_ms: Optional[int] = None
    artists: Optional[list[ArtistRef]] = None
    album: Optional[dict[str, Any]] = None
    show: Optional[dict[str, Any]] = None


@dataclass
class PlaybackState:
    is_playing: bool
    shuffle_state: Optional[bool]
    repeat_state: Optional[str]
    timestamp: Optional[int]
    progress_ms: Optional[int]
    device: Optional[Device]
    item: Optional[PlaybackItem]
    currently_playing_type: Optional[str]
    actions: Optional[dict[str, Any]]
    context: Optional[PlaybackContext]


@dataclass
class CurrentlyPlaying:
    is_playing: bool
    progress_ms: Optional[int]
    timestamp: Optional[int]
    currently_playing_type: Optional[str]
    context: Optional[PlaybackContext]
    item: PlaybackItem
    actions: Optional[dict[str, Any]]


@dataclass
class IdlePlayer:
    """Returned when nothing is playing."""

    message: str
    is_playing: bool = False


@dataclass
class PlayHistoryEntry:
    track: TrackSummary
    played_at: Optional[str]
    context: Optional[PlaybackContext]


@dataclass
class RecentlyPlayed:
    items: list[PlayHistoryEntry]
    limit: Optional[int]
    next: Optional[str]
    cursors: Optional[dict[str, Any]]
    href: Optional[str]


@dataclass
class Queue:
    currently_playing: Optional[PlaybackItem]
    queue: list[PlaybackItem]


# -----------------------------------------------------------------------------
# Search hits
# -----------------------------------------------------------------------------
@dataclass
class PlaylistHit:
    id: str
    name: str
    owner: str
    total_tracks: int
    external_url: Optional[str]
    image: Optional[str]               # best-size image URL


@dataclass
class ShowHit:
    id: str
    name: str
    publisher: Optional[str]
    description: Optional[str]
    total_episodes: Optional[int]
    external_url: Optional[str]
    image: Optional[str]


@dataclass
class EpisodeHit:
    id: str
    name: str
    release_date: Optional[str]
    duration_ms: Optional[int]
    description: Optional[str]
    external_url: Optional[str]
    image: Optional[str]


@dataclass
class AudiobookHit:
    id: str
    name: str
    description: Optional[str]
    authors: list[str]
    narrators: list[str]
    publisher: Optional[str]
    total_chapters: Optional[int]
    explicit: bool
    external_url: Optional[str]
    images: list[ImageInfo] = field(default_factory=list)
