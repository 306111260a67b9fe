# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the MCP tool layer.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP protocol and core/.
#   Each family module (albums.py, playlists.py, ...) declares ToolDefinitions:
#     1. A name, title and description the client model reads
#     2. Typed, Annotated parameters (pydantic Field constraints become the
#        JSON input schema FastMCP publishes and enforces)
#     3. A handler that calls one core/ operation and returns its Result
#     4. The output kind: a text block, a resource block, or a fixed
#        confirmation sentence
#
# envelope.py turns a Result into the protocol response; registry.py holds
# the definitions; mcp_server.py binds them all to a FastMCP server.
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate domain rules (that's core/validation.py)
#   - They do NOT call the music service directly (core/ does, via the
#     MusicClient they are handed)
# =============================================================================
