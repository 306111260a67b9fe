# =============================================================================
# core/client.py  -  Remote music-service interface
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares the one-method-per-capability interface that domain operations
#   call.  Production code uses SpotipyClient (core/spotify.py); tests use
#   unittest.mock.AsyncMock(spec=MusicClient).
#
# CONTRACT:
#   - Every method is a coroutine returning the service's JSON body as plain
#     dicts/lists, or None when the endpoint answers 204 No Content.
#   - Failures are raised, never returned.  Adapters raise MusicServiceError;
#     the operations in core/ catch any exception through result.attempt().
#   - Optional arguments left as None are omitted from the remote request.
# =============================================================================

from typing import Any, Optional, Protocol, Sequence

Json = dict[str, Any]


class MusicServiceError(Exception):
    """A failed remote call.

    str(error) is the service's own message; `status` is the HTTP status
    when one is known.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class MusicClient(Protocol):
    # --- Albums ---------------------------------------------------------------
    async def get_album(self, album_id: str, market: Optional[str] = None) -> Json: ...

    async def get_albums(
        self, album_ids: Sequence[str], market: Optional[str] = None
    ) -> list[Optional[Json]]: ...

    async def get_album_tracks(
        self, album_id: str, limit: int, offset: int, market: Optional[str] = None
    ) -> Json: ...

    async def get_saved_albums(self, limit: int, offset: int, market: Optional[str] = None) -> Json: ...

    async def save_albums(self, album_ids: Sequence[str]) -> None: ...

    async def remove_saved_albums(self, album_ids: Sequence[str]) -> None: ...

    async def check_saved_albums(self, album_ids: Sequence[str]) -> list[bool]: ...

    # --- Tracks ---------------------------------------------------------------
    async def get_track(self, track_id: str, market: Optional[str] = None) -> Json: ...

    async def get_tracks(
        self, track_ids: Sequence[str], market: Optional[str] = None
    ) -> list[Optional[Json]]: ...

    async def get_saved_tracks(self, limit: int, offset: int, market: Optional[str] = None) -> Json: ...

    async def save_tracks(self, track_ids: Sequence[str]) -> None: ...

    async def remove_saved_tracks(self, track_ids: Sequence[str]) -> None: ...

    async def check_saved_tracks(self, track_ids: Sequence[str]) -> list[bool]: ...

    # --- Artists --------------------------------------------------------------
    async def get_artist(self, artist_id: str) -> Json: ...

    async def get_artists(self, artist_ids: Sequence[str]) -> list[Optional[Json]]: ...

    async def get_artist_albums(
        self,
        artist_id: str,
        include_groups: Optional[Sequence[str]],
        market: Optional[str],
        limit: int,
        offset: int,
    ) -> Json: ...

    async def get_artist_top_tracks(self, artist_id: str, market: str) -> list[Json]: ...

    # --- Playlists ------------------------------------------------------------
    async def get_playlist(self, playlist_id: str, market: Optional[str] = None) -> Json: ...

    async def get_playlist_items(
        self, playlist_id: str, limit: int, offset: int, market: Optional[str] = None
    ) -> Json: ...

    async def get_current_user_playlists(self, limit: int, offset: int) -> Json: ...

    async def get_user_playlists(self, user_id: str, limit: int, offset: int) -> Json: ...

    async def get_current_user_profile(self) -> Json: ...

    async def create_playlist(
        self,
        user_id: str,
        name: str,
        public: Optional[bool],
        collaborative: Optional[bool],
        description: Optional[str],
    ) -> Json: ...

    async def change_playlist_details(
        self,
        playlist_id: str,
        name: Optional[str],
        public: Optional[bool],
        collaborative: Optional[bool],
        description: Optional[str],
    ) -> None: ...

    async def add_playlist_items(
        self, playlist_id: str, uris: Sequence[str], position: Optional[int] = None
    ) -> Optional[Json]: ...

    async def update_playlist_items(
        self,
        playlist_id: str,
        uris: Optional[Sequence[str]] = None,
        range_start: Optional[int] = None,
        insert_before: Optional[int] = None,
        range_length: Optional[int] = None,
        snapshot_id: Optional[str] = None,
    ) -> Json: ...

    async def remove_playlist_items(
        self,
        playlist_id: str,
        uris: Optional[Sequence[str]] = None,
        tracks: Optional[Sequence[Json]] = None,
        snapshot_id: Optional[str] = None,
    ) -> Json: ...

    async def get_playlist_cover_image(self, playlist_id: str) -> list[Json]: ...

    async def upload_playlist_cover_image(self, playlist_id: str, image_base64: str) -> None: ...

    # --- Player ---------------------------------------------------------------
    async def get_playback_state(
        self, market: Optional[str] = None, additional_types: Optional[Sequence[str]] = None
    ) -> Optional[Json]: ...

    async def get_currently_playing(
        self, market: Optional[str] = None, additional_types: Optional[Sequence[str]] = None
    ) -> Optional[Json]: ...

    async def get_available_devices(self) -> Json: ...

    async def start_playback(
        self,
        device_id: Optional[str] = None,
        context_uri: Optional[str] = None,
        uris: Optional[Sequence[str]] = None,
        offset: Optional[Json] = None,
        position_ms: Optional[int] = None,
    ) -> None: ...

    async def pause_playback(self, device_id: Optional[str] = None) -> None: ...

    async def skip_to_next(self, device_id: Optional[str] = None) -> None: ...

    async def skip_to_previous(self, device_id: Optional[str] = None) -> None: ...

    async def seek_to_position(self, position_ms: int, device_id: Optional[str] = None) -> None: ...

    async def set_repeat_mode(self, state: str, device_id: Optional[str] = None) -> None: ...

    async def set_volume(self, volume_percent: int, device_id: Optional[str] = None) -> None: ...

    async def set_shuffle(self, state: bool, device_id: Optional[str] = None) -> None: ...

    async def transfer_playback(self, device_ids: Sequence[str], play: Optional[bool] = None) -> None: ...

    async def get_recently_played(
        self, limit: int, before: Optional[int] = None, after: Optional[int] = None
    ) -> Json: ...

    async def get_queue(self) -> Json: ...

    async def add_to_queue(self, uri: str, device_id: Optional[str] = None) -> None: ...

    # --- Search ---------------------------------------------------------------
    async def search(
        self, query: str, kind: str, limit: int, offset: int, market: Optional[str] = None
    ) -> Json: ...
