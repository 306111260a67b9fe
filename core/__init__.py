# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the music-service logic: validation rules, the
# Result type, the reshaped output models, the remote-client interface and
# one module of domain operations per capability family.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or the MCP protocol types.  An
#   operation takes a MusicClient and plain arguments and returns a Result.
#   The only module that touches the network SDK is core/spotify.py, and the
#   operations never import it; they receive the client as an argument.
#
#   That keeps every operation testable with an AsyncMock client and no
#   network access.
# =============================================================================
