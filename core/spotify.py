# =============================================================================
# core/spotify.py  -  spotipy-backed MusicClient
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Adapts the synchronous spotipy SDK to the async MusicClient interface.
#   Each method runs one spotipy call in a worker thread (asyncio.to_thread)
#   and returns the response body.  SpotifyException is re-raised as
#   MusicServiceError carrying the service's own message.
#
# AUTH:
#   With SPOTIFY_ACCESS_TOKEN set, the token is used as-is.  Otherwise
#   spotipy's SpotifyOAuth manager runs the authorization-code flow once and
#   keeps the refresh token in SPOTIFY_CACHE_PATH.
# =============================================================================

import asyncio
import functools
import logging
from typing import Any, Callable, Optional, Sequence

import spotipy
from spotipy.cache_handler import CacheFileHandler
from spotipy.oauth2 import SpotifyOAuth

from core.client import MusicServiceError
from core.config import Settings

logger = logging.getLogger(__name__)


def _joined(values: Optional[Sequence[str]]) -> Optional[str]:
    return ",".join(values) if values else None


class SpotipyClient:
    """MusicClient implementation over a spotipy.Spotify instance."""

    def __init__(self, sp: spotipy.Spotify):
        self._sp = sp

    async def _call(self, method: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            return await asyncio.to_thread(functools.partial(method, *args, **kwargs))
        except spotipy.SpotifyException as exc:
            logger.warning("spotipy %s failed (HTTP %s): %s", method.__name__, exc.http_status, exc.msg)
            raise MusicServiceError(exc.msg or str(exc), exc.http_status) from exc

    # --- Albums ---------------------------------------------------------------
    async def get_album(self, album_id, market=None):
        return await self._call(self._sp.album, album_id, market=market)

    async def get_albums(self, album_ids, market=None):
        body = await self._call(self._sp.albums, list(album_ids), market=market)
        return body["albums"]

    async def get_album_tracks(self, album_id, limit, offset, market=None):
        return await self._call(self._sp.album_tracks, album_id, limit=limit, offset=offset, market=market)

    async def get_saved_albums(self, limit, offset, market=None):
        return await self._call(self._sp.current_user_saved_albums, limit=limit, offset=offset, market=market)

    async def save_albums(self, album_ids):
        await self._call(self._sp.current_user_saved_albums_add, list(album_ids))

    async def remove_saved_albums(self, album_ids):
        await self._call(self._sp.current_user_saved_albums_delete, list(album_ids))

    async def check_saved_albums(self, album_ids):
        return await self._call(self._sp.current_user_saved_albums_contains, list(album_ids))

    # --- Tracks ---------------------------------------------------------------
    async def get_track(self, track_id, market=None):
        return await self._call(self._sp.track, track_id, market=market)

    async def get_tracks(self, track_ids, market=None):
        body = await self._call(self._sp.tracks, list(track_ids), market=market)
        return body["tracks"]

    async def get_saved_tracks(self, limit, offset, market=None):
        return await self._call(self._sp.current_user_saved_tracks, limit=limit, offset=offset, market=market)

    async def save_tracks(self, track_ids):
        await self._call(self._sp.current_user_saved_tracks_add, list(track_ids))

    async def remove_saved_tracks(self, track_ids):
        await self._call(self._sp.current_user_saved_tracks_delete, list(track_ids))

    async def check_saved_tracks(self, track_ids):
        return await self._call(self._sp.current_user_saved_tracks_contains, list(track_ids))

    # --- Artists --------------------------------------------------------------
    async def get_artist(self, artist_id):
        return await self._call(self._sp.artist, artist_id)

    async def get_artists(self, artist_ids):
        body = await self._call(self._sp.artists, list(artist_ids))
        return body["artists"]

    async def get_artist_albums(self, artist_id, include_groups, market, limit, offset):
        return await self._call(
            self._sp.artist_albums,
            artist_id,
            include_groups=_joined(include_groups),
            country=market,
            limit=limit,
            offset=offset,
        )

    async def get_artist_top_tracks(self, artist_id, market):
        body = await self._call(self._sp.artist_top_tracks, artist_id, country=market)
        return body["tracks"]

    # --- Playlists ------------------------------------------------------------
    async def get_playlist(self, playlist_id, market=None):
        return await self._call(self._sp.playlist, playlist_id, market=market)

    async def get_playlist_items(self, playlist_id, limit, offset, market=None):
        return await self._call(
            self._sp.playlist_items, playlist_id, limit=limit, offset=offset, market=market
        )

    async def get_current_user_playlists(self, limit, offset):
        return await self._call(self._sp.current_user_playlists, limit=limit, offset=offset)

    async def get_user_playlists(self, user_id, limit, offset):
        return await self._call(self._sp.user_playlists, user_id, limit=limit, offset=offset)

    async def get_current_user_profile(self):
        return await self._call(self._sp.current_user)

    async def create_playlist(self, user_id, name, public, collaborative, description):
        # spotipy sends its own defaults (public=True, "") for omitted values.
        return await self._call(
            self._sp.user_playlist_create,
            user_id,
            name,
            public=True if public is None else public,
            collaborative=bool(collaborative),
            description=description or "",
        )

    async def change_playlist_details(self, playlist_id, name, public, collaborative, description):
        await self._call(
            self._sp.playlist_change_details,
            playlist_id,
            name=name,
            public=public,
            collaborative=collaborative,
            description=description,
        )

    async def add_playlist_items(self, playlist_id, uris, position=None):
        return await self._call(self._sp.playlist_add_items, playlist_id, list(uris), position=position)

    async def update_playlist_items(
        self, playlist_id, uris=None, range_start=None, insert_before=None, range_length=None, snapshot_id=None
    ):
        if range_start is not None:
            return await self._call(
                self._sp.playlist_reorder_items,
                playlist_id,
                range_start,
                insert_before,
                range_length=range_length or 1,
                snapshot_id=snapshot_id,
            )
        return await self._call(self._sp.playlist_replace_items, playlist_id, list(uris or []))

    async def remove_playlist_items(self, playlist_id, uris=None, tracks=None, snapshot_id=None):
        if uris:
            return await self._call(
                self._sp.playlist_remove_all_occurrences_of_items,
                playlist_id,
                list(uris),
                snapshot_id=snapshot_id,
            )

        tracks = list(tracks or [])
        if tracks and all(track.get("positions") for track in tracks):
            return await self._call(
                self._sp.playlist_remove_specific_occurrences_of_items,
                playlist_id,
                tracks,
                snapshot_id=snapshot_id,
            )
        return await self._call(
            self._sp.playlist_remove_all_occurrences_of_items,
            playlist_id,
            [track["uri"] for track in tracks],
            snapshot_id=snapshot_id,
        )

    async def get_playlist_cover_image(self, playlist_id):
        return await self._call(self._sp.playlist_cover_image, playlist_id)

    async def upload_playlist_cover_image(self, playlist_id, image_base64):
        await self._call(self._sp.playlist_upload_cover_image, playlist_id, image_base64)

    # --- Player ---------------------------------------------------------------
    async def get_playback_state(self, market=None, additional_types=None):
        return await self._call(
            self._sp.current_playback, market=market, additional_types=_joined(additional_types)
        )

    async def get_currently_playing(self, market=None, additional_types=None):
        return await self._call(
            self._sp.currently_playing, market=market, additional_types=_joined(additional_types)
        )

    async def get_available_devices(self):
        return await self._call(self._sp.devices)

    async def start_playback(self, device_id=None, context_uri=None, uris=None, offset=None, position_ms=None):
        await self._call(
            self._sp.start_playback,
            device_id=device_id,
            context_uri=context_uri,
            uris=list(uris) if uris else None,
            offset=offset,
            position_ms=position_ms,
        )

    async def pause_playback(self, device_id=None):
        await self._call(self._sp.pause_playback, device_id=device_id)

    async def skip_to_next(self, device_id=None):
        await self._call(self._sp.next_track, device_id=device_id)

    async def skip_to_previous(self, device_id=None):
        await self._call(self._sp.previous_track, device_id=device_id)

    async def seek_to_position(self, position_ms, device_id=None):
        await self._call(self._sp.seek_track, position_ms, device_id=device_id)

    async def set_repeat_mode(self, state, device_id=None):
        await self._call(self._sp.repeat, state, device_id=device_id)

    async def set_volume(self, volume_percent, device_id=None):
        await self._call(self._sp.volume, volume_percent, device_id=device_id)

    async def set_shuffle(self, state, device_id=None):
        await self._call(self._sp.shuffle, state, device_id=device_id)

    async def transfer_playback(self, device_ids, play=None):
        # The service accepts exactly one target device.
        await self._call(self._sp.transfer_playback, device_ids[0], force_play=bool(play))

    async def get_recently_played(self, limit, before=None, after=None):
        return await self._call(self._sp.current_user_recently_played, limit=limit, after=after, before=before)

    async def get_queue(self):
        return await self._call(self._sp.queue)

    async def add_to_queue(self, uri, device_id=None):
        await self._call(self._sp.add_to_queue, uri, device_id=device_id)

    # --- Search ---------------------------------------------------------------
    async def search(self, query, kind, limit, offset, market=None):
        return await self._call(self._sp.search, query, limit=limit, offset=offset, type=kind, market=market)


def create_spotify_client(settings: Settings) -> SpotipyClient:
    """Build the production client from settings.

    A pre-issued access token wins over the OAuth flow.
    """
    if settings.access_token:
        logger.info("Using pre-issued Spotify access token")
        return SpotipyClient(spotipy.Spotify(auth=settings.access_token))

    auth_manager = SpotifyOAuth(
        client_id=settings.client_id,
        client_secret=settings.client_secret,
        redirect_uri=settings.redirect_uri,
        scope=settings.scope_string,
        cache_handler=CacheFileHandler(cache_path=settings.cache_path),
        open_browser=settings.open_browser,
    )
    return SpotipyClient(spotipy.Spotify(auth_manager=auth_manager))
