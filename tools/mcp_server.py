# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Binds every ToolDefinition in the registry to a FastMCP server instance.
#
# HOW IT WORKS (the flow):
#   1. An MCP client lists tools; FastMCP publishes each tool's JSON schema,
#      generated from the handler's Annotated parameters
#   2. The client calls a tool by name (e.g. "save_albums")
#   3. FastMCP validates the input against the schema (type mismatches and
#      missing fields are rejected here, before any of our code runs)
#   4. The bound function runs ToolDefinition.invoke(): core/ validation,
#      the remote call, and the envelope
#   5. The envelope becomes the protocol response:
#        - error envelope   -> ToolError("Error: ...")  (isError: true)
#        - success envelope -> ToolResult with one TextContent or
#                              EmbeddedResource block
#
# WHY THE WRAPPER:
#   Handlers take the MusicClient as their first argument.  The client is
#   not caller input, so the bound function presents the handler's
#   signature minus `client` and supplies the client itself.
#
# RUNNING THIS SERVER:
#   python main.py   (stdio transport; see main.py for configuration)
# =============================================================================

import inspect
import logging
import typing
from typing import Any, Awaitable, Callable, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import EmbeddedResource, TextContent, TextResourceContents

# Importing the family modules registers their tools on REGISTRY.
from tools import albums, artists, player, playlists, search, tracks  # noqa: F401
from core.client import MusicClient
from tools.envelope import CallResponse, ResourceBlock
from tools.registry import REGISTRY, ToolDefinition, ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "spotify-mcp"


def to_tool_result(response: CallResponse) -> ToolResult:
    """Translate an envelope into FastMCP's return (or raise) convention."""
    if response.is_error:
        raise ToolError(response.content[0].text)

    blocks = []
    for block in response.content:
        if isinstance(block, ResourceBlock):
            blocks.append(
                EmbeddedResource(
                    type="resource",
                    resource=TextResourceContents(uri=block.uri, mimeType=block.mime_type, text=block.text),
                )
            )
        else:
            blocks.append(TextContent(type="text", text=block.text))
    return ToolResult(content=blocks)


def _bind(definition: ToolDefinition, client: MusicClient) -> Callable[..., Awaitable[ToolResult]]:
    """Build the function FastMCP registers for one definition.

    Parameters become keyword-only so FastMCP always passes them by name.
    """
    hints = typing.get_type_hints(definition.handler, include_extras=True)
    parameters = [
        parameter.replace(
            kind=inspect.Parameter.KEYWORD_ONLY,
            annotation=hints.get(parameter.name, parameter.annotation),
        )
        for parameter in definition.signature.parameters.values()
    ]

    async def call_tool(**arguments: Any) -> ToolResult:
        return to_tool_result(await definition.invoke(client, arguments))

    call_tool.__name__ = definition.name
    call_tool.__qualname__ = definition.name
    call_tool.__doc__ = definition.description
    call_tool.__signature__ = inspect.Signature(parameters, return_annotation=ToolResult)
    call_tool.__annotations__ = {parameter.name: parameter.annotation for parameter in parameters}
    call_tool.__annotations__["return"] = ToolResult
    return call_tool


def build_server(
    client: MusicClient,
    registry: Optional[ToolRegistry] = None,
    name: str = SERVER_NAME,
) -> FastMCP:
    """Create a FastMCP server exposing every tool in `registry`."""
    registry = REGISTRY if registry is None else registry
    mcp = FastMCP(name)
    for definition in registry:
        mcp.tool(
            _bind(definition, client),
            name=definition.name,
            title=definition.title,
            description=definition.description,
        )
    logger.info(f"Registered {len(registry)} tools on {name}")
    return mcp
