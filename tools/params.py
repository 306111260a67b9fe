# =============================================================================
# tools/params.py  -  Shared input-schema fragments
# =============================================================================
# Annotated parameter types reused across the tool families.  The Field
# constraints are the schema-level gate FastMCP enforces before a handler
# runs; the domain rules in core/validation.py still run afterwards.
# =============================================================================

from typing import Annotated, Optional

from pydantic import Field

Market = Annotated[
    Optional[str],
    Field(description="ISO 3166-1 alpha-2 country code, e.g. 'US'"),
]

Limit = Annotated[
    int,
    Field(ge=1, le=50, description="Maximum number of items to return (1-50, default: 20)"),
]

Offset = Annotated[
    int,
    Field(ge=0, description="Index of the first item to return (default: 0)"),
]

DeviceId = Annotated[
    Optional[str],
    Field(description="Target device ID; omit to use the currently active device"),
]

SnapshotId = Annotated[
    Optional[str],
    Field(description="The playlist's snapshot ID against which to make the changes"),
]
