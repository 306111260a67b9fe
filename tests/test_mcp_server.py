"""Tests for binding the registry onto a FastMCP server."""

import asyncio

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError
from mcp.types import EmbeddedResource, TextContent

from tools.envelope import CallResponse, ResourceBlock, TextBlock, error_response
from tools.mcp_server import build_server, to_tool_result
from tools.registry import REGISTRY


class TestToToolResult:
    def test_error_raises_tool_error(self):
        with pytest.raises(ToolError, match="Error: Album ID must not be empty"):
            to_tool_result(error_response("Album ID must not be empty"))

    def test_text_block(self):
        result = to_tool_result(CallResponse(content=[TextBlock("Playback paused")]))
        assert isinstance(result.content[0], TextContent)
        assert result.content[0].text == "Playback paused"

    def test_resource_block(self):
        result = to_tool_result(CallResponse(content=[ResourceBlock(uri="spotify:artist:abc", text="{}")]))
        block = result.content[0]
        assert isinstance(block, EmbeddedResource)
        assert str(block.resource.uri) == "spotify:artist:abc"
        assert block.resource.mimeType == "application/json"
        assert block.resource.text == "{}"


class TestBuildServer:
    def test_every_tool_is_published(self, client):
        mcp = build_server(client)
        tools = asyncio.run(mcp.get_tools())
        assert set(tools) == set(REGISTRY.names())

    def test_client_is_not_a_parameter(self, client):
        tools = asyncio.run(build_server(client).get_tools())
        for tool in tools.values():
            assert "client" not in tool.parameters.get("properties", {})

    def test_schema_carries_constraints(self, client):
        tools = asyncio.run(build_server(client).get_tools())
        schema = tools["get_saved_albums"].parameters["properties"]["limit"]
        assert schema["minimum"] == 1
        assert schema["maximum"] == 50
        assert tools["save_albums"].parameters["required"] == ["album_ids"]

    def test_titles_are_published(self, client):
        tools = asyncio.run(build_server(client).get_tools())
        assert tools["save_albums"].title == "Save Albums"


class TestInMemoryClient:
    def _call(self, mcp, name, arguments):
        async def run():
            async with Client(mcp) as session:
                return await session.call_tool_mcp(name, arguments)

        return asyncio.run(run())

    def test_confirmation(self, client):
        client.save_albums.return_value = None
        result = self._call(build_server(client), "save_albums", {"album_ids": ["a", "b"]})
        assert not result.isError
        assert result.content[0].text == "Successfully saved 2 album(s) to library"

    def test_validation_error(self, client):
        result = self._call(build_server(client), "save_albums", {"album_ids": ["a"] * 51})
        assert result.isError
        assert result.content[0].text == "Error: Maximum 50 album IDs allowed"
        client.save_albums.assert_not_awaited()

    def test_resource(self, client, artist_json):
        client.get_artist.return_value = artist_json
        result = self._call(build_server(client), "get_artist", {"artist_id": "0TnOYISbd1XYRBk9myaseg"})
        assert str(result.content[0].resource.uri) == "spotify:artist:0TnOYISbd1XYRBk9myaseg"
