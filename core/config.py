# =============================================================================
# core/config.py  -  Settings loaded from the environment
# =============================================================================
#
# main.py calls dotenv.load_dotenv() first, so a local .env file works the
# same as exported variables.  Nothing here reads the environment at import
# time; Settings.from_env() does it on demand.
#
#   SPOTIFY_CLIENT_ID       required unless SPOTIFY_ACCESS_TOKEN is set
#   SPOTIFY_CLIENT_SECRET   optional
#   SPOTIFY_REDIRECT_URI    http://127.0.0.1:8888/callback
#   SPOTIFY_SCOPES          space- or comma-separated scope list
#   SPOTIFY_CACHE_PATH      .spotify_token_cache
#   SPOTIFY_ACCESS_TOKEN    pre-issued bearer token (skips the OAuth flow)
#   SPOTIFY_OPEN_BROWSER    true/1/yes to open the consent page automatically
#   LOG_LEVEL               INFO
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_REDIRECT_URI = "http://127.0.0.1:8888/callback"
DEFAULT_CACHE_PATH = ".spotify_token_cache"

# Everything the tool catalogue needs: library, playlists, playback.
DEFAULT_SCOPES = (
    "user-library-read",
    "user-library-modify",
    "playlist-read-private",
    "playlist-read-collaborative",
    "playlist-modify-public",
    "playlist-modify-private",
    "ugc-image-upload",
    "user-read-playback-state",
    "user-modify-playback-state",
    "user-read-currently-playing",
    "user-read-recently-played",
)

_TRUTHY = {"true", "1", "yes"}


class ConfigError(ValueError):
    """Raised at start-up when the environment cannot produce usable settings."""


@dataclass(frozen=True)
class Settings:
    client_id: Optional[str]
    client_secret: Optional[str] = None
    redirect_uri: str = DEFAULT_REDIRECT_URI
    scopes: tuple[str, ...] = DEFAULT_SCOPES
    cache_path: str = DEFAULT_CACHE_PATH
    access_token: Optional[str] = None
    open_browser: bool = False
    log_level: str = "INFO"

    @property
    def scope_string(self) -> str:
        return " ".join(self.scopes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from `environ` (os.environ when omitted).

        Raises:
            ConfigError: SPOTIFY_CLIENT_ID is missing and no access token is set.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = env.get(name)
            return value.strip() if value and value.strip() else None

        client_id = get("SPOTIFY_CLIENT_ID")
        access_token = get("SPOTIFY_ACCESS_TOKEN")
        if client_id is None and access_token is None:
            raise ConfigError(
                "SPOTIFY_CLIENT_ID is not set (set it, or SPOTIFY_ACCESS_TOKEN, in the environment or .env)"
            )

        raw_scopes = get("SPOTIFY_SCOPES")
        scopes = (
            tuple(scope for scope in raw_scopes.replace(",", " ").split() if scope)
            if raw_scopes
            else DEFAULT_SCOPES
        )

        return cls(
            client_id=client_id,
            client_secret=get("SPOTIFY_CLIENT_SECRET"),
            redirect_uri=get("SPOTIFY_REDIRECT_URI") or DEFAULT_REDIRECT_URI,
            scopes=scopes,
            cache_path=get("SPOTIFY_CACHE_PATH") or DEFAULT_CACHE_PATH,
            access_token=access_token,
            open_browser=(get("SPOTIFY_OPEN_BROWSER") or "").lower() in _TRUTHY,
            log_level=(get("LOG_LEVEL") or "INFO").upper(),
        )
