# =============================================================================
# main.py  -  Entry Point for the Spotify MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (SPOTIFY_CLIENT_ID, SPOTIFY_CLIENT_SECRET, ...)
#   2. Builds Settings from the environment (core/config.py)
#   3. Configures stderr logging (stdout carries the MCP stream)
#   4. Creates the spotipy-backed MusicClient (core/spotify.py)
#   5. Binds every tool to a FastMCP server and serves it over stdio
#
# FIRST RUN:
#   Without SPOTIFY_ACCESS_TOKEN, spotipy runs the OAuth authorization-code
#   flow once: open the printed URL, approve, paste the redirect URL back.
#   The refresh token is cached in SPOTIFY_CACHE_PATH for later runs.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

from core.config import ConfigError, Settings
from core.spotify import create_spotify_client
from tools.logging_utils import configure_logging
from tools.mcp_server import build_server


def main() -> int:
    # Load environment variables from .env file.  This must happen BEFORE
    # Settings.from_env() reads them.
    load_dotenv()

    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    logging.info("Starting Spotify MCP server")

    client = create_spotify_client(settings)
    mcp = build_server(client)
    mcp.run()
    return 0


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
