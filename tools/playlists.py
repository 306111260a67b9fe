# =============================================================================
# tools/playlists.py  -  Playlist tools
# =============================================================================
# Reading, creating/editing, item mutations and cover images.  The item
# mutations return JSON text ({snapshot_id, ...}); change_playlist_details
# returns a confirmation sentence.
# =============================================================================

from typing import Annotated, Optional

from pydantic import BaseModel, Field

from core import playlists
from tools.envelope import OutputKind, create_resource_uri
from tools.params import Limit, Market, Offset, SnapshotId
from tools.registry import REGISTRY

PlaylistId = Annotated[str, Field(description="The Spotify ID of the playlist")]
ItemUris = Annotated[
    list[str],
    Field(description="Spotify track or episode URIs, e.g. 'spotify:track:4iV5W9uYEdYUVa79Axb7Rh'"),
]


class TrackPositions(BaseModel):
    """One item to remove, optionally pinned to specific positions."""

    uri: str = Field(description="Spotify URI of the track or episode to remove")
    positions: Optional[list[int]] = Field(
        default=None, description="Zero-based positions of the occurrences to remove"
    )


# =============================================================================
# Reading
# =============================================================================
@REGISTRY.tool(title="Get Playlist")
async def get_playlist(client, playlist_id: PlaylistId, market: Market = None):
    """Get a single playlist by ID from Spotify."""
    return await playlists.get_playlist(client, playlist_id, market)


@REGISTRY.tool(
    title="Get Playlist Items",
    output=OutputKind.RESOURCE,
    resource_uri=lambda args: create_resource_uri("playlist", args["playlist_id"], relation="tracks"),
)
async def get_playlist_items(
    client,
    playlist_id: PlaylistId,
    limit: Limit = 20,
    offset: Offset = 0,
    market: Market = None,
):
    """Get items (tracks) from a playlist."""
    return await playlists.get_playlist_items(client, playlist_id, limit, offset, market)


@REGISTRY.tool(title="Get Current User's Playlists")
async def get_current_user_playlists(client, limit: Limit = 20, offset: Offset = 0):
    """Get a list of the playlists owned or followed by the current Spotify user."""
    return await playlists.get_current_user_playlists(client, limit, offset)


@REGISTRY.tool(title="Get User's Playlists")
async def get_user_playlists(
    client,
    user_id: Annotated[str, Field(description="The user's Spotify user ID")],
    limit: Limit = 20,
    offset: Offset = 0,
):
    """Get a list of the playlists owned or followed by a Spotify user."""
    return await playlists.get_user_playlists(client, user_id, limit, offset)


@REGISTRY.tool(title="Get Playlist Cover Image")
async def get_playlist_cover_image(client, playlist_id: PlaylistId):
    """Get the current cover image renditions of a playlist."""
    return await playlists.get_playlist_cover_image(client, playlist_id)


# =============================================================================
# Creating and editing
# =============================================================================
@REGISTRY.tool(title="Create Playlist")
async def create_playlist(
    client,
    name: Annotated[str, Field(description="The name for the new playlist")],
    public: Annotated[
        Optional[bool], Field(description="Whether the playlist should be public (default: true)")
    ] = None,
    collaborative: Annotated[
        Optional[bool],
        Field(description="Whether the playlist should be collaborative (collaborative playlists must be private)"),
    ] = None,
    description: Annotated[Optional[str], Field(description="Description of the playlist")] = None,
):
    """Create a new playlist for the current user."""
    return await playlists.create_playlist(client, name, public, collaborative, description)


@REGISTRY.tool(
    title="Change Playlist Details",
    confirmation=lambda args: "Playlist details updated successfully",
)
async def change_playlist_details(
    client,
    playlist_id: PlaylistId,
    name: Annotated[Optional[str], Field(description="New name for the playlist")] = None,
    public: Annotated[Optional[bool], Field(description="Whether the playlist should be public")] = None,
    collaborative: Annotated[
        Optional[bool], Field(description="Whether the playlist should be collaborative")
    ] = None,
    description: Annotated[Optional[str], Field(description="New description for the playlist")] = None,
):
    """Change a playlist's name, description and public/collaborative state."""
    return await playlists.change_playlist_details(client, playlist_id, name, public, collaborative, description)


@REGISTRY.tool(title="Add Custom Playlist Cover Image")
async def add_custom_playlist_cover_image(
    client,
    playlist_id: PlaylistId,
    image_base64: Annotated[
        str, Field(description="Base64-encoded JPEG image data (maximum 256 KB decoded)")
    ],
):
    """Replace the image used to represent a playlist."""
    return await playlists.add_custom_playlist_cover_image(client, playlist_id, image_base64)


# =============================================================================
# Item mutations
# =============================================================================
@REGISTRY.tool(title="Add Items to Playlist")
async def add_items_to_playlist(
    client,
    playlist_id: PlaylistId,
    uris: ItemUris,
    position: Annotated[
        Optional[int], Field(description="The position to insert the items, a zero-based index")
    ] = None,
):
    """Add one or more items (tracks or episodes) to a user's playlist."""
    return await playlists.add_items_to_playlist(client, playlist_id, uris, position)


@REGISTRY.tool(title="Update Playlist Items")
async def update_playlist_items(
    client,
    playlist_id: PlaylistId,
    uris: Annotated[
        Optional[list[str]], Field(description="Spotify URIs to replace the playlist's items with")
    ] = None,
    range_start: Annotated[
        Optional[int], Field(description="The position of the first item to be reordered")
    ] = None,
    insert_before: Annotated[
        Optional[int], Field(description="The position where the items should be inserted")
    ] = None,
    range_length: Annotated[
        Optional[int], Field(description="The amount of items to be reordered (default: 1)")
    ] = None,
    snapshot_id: SnapshotId = None,
):
    """Either reorder or replace items in a playlist."""
    return await playlists.update_playlist_items(
        client, playlist_id, uris, range_start, insert_before, range_length, snapshot_id
    )


@REGISTRY.tool(title="Remove Playlist Items")
async def remove_playlist_items(
    client,
    playlist_id: PlaylistId,
    uris: Annotated[
        Optional[list[str]], Field(description="Spotify URIs to remove from the playlist")
    ] = None,
    tracks: Annotated[
        Optional[list[TrackPositions]],
        Field(description="URIs with optional positions, to remove specific occurrences"),
    ] = None,
    snapshot_id: SnapshotId = None,
):
    """Remove one or more items from a user's playlist."""
    if tracks is not None:
        tracks = [
            track.model_dump(exclude_none=True) if isinstance(track, BaseModel) else dict(track)
            for track in tracks
        ]
    return await playlists.remove_playlist_items(client, playlist_id, uris, tracks, snapshot_id)
