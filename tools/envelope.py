# =============================================================================
# tools/envelope.py  -  Response Envelope Builder
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the Result of a core/ operation into the protocol-level call
#   response.  Every response carries exactly ONE content block:
#
#     Err(message)              -> text "Error: <message>", isError: true
#     Ok(value), TEXT kind      -> text block with the value as JSON
#     Ok(value), confirmation   -> text block with a fixed sentence
#     Ok(value), RESOURCE kind  -> resource block {uri, mimeType, text}
#
#   The error path is the ONLY one that sets isError.
#
# RESOURCE URIS:
#   Resource blocks are addressed by a synthetic, never-dereferenced URI:
#
#     spotify:album:4aawyAB9vmqN3uQ7FjRGTy:tracks
#     spotify:me:albums:check?ids=a%2Cb%2Cc
#     spotify:search:tracks?q=daft%20punk
#
#   Query values are percent-encoded the way JavaScript's
#   encodeURIComponent does it, so commas in batch lookups become %2C.
# =============================================================================

import json
from dataclasses import asdict, dataclass, field, is_dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

from core.result import Err, Ok, Result

RESOURCE_SCHEME = "spotify"
JSON_MIME_TYPE = "application/json"
ERROR_PREFIX = "Error: "

# Characters encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


class OutputKind(str, Enum):
    TEXT = "text"
    RESOURCE = "resource"


# =============================================================================
# Content blocks
# =============================================================================
@dataclass
class TextBlock:
    text: str

    def to_dict(self) -> dict:
        return {"type": "text", "text": self.text}


@dataclass
class ResourceBlock:
    uri: str
    text: str
    mime_type: str = JSON_MIME_TYPE

    def to_dict(self) -> dict:
        return {
            "type": "resource",
            "resource": {"uri": self.uri, "mimeType": self.mime_type, "text": self.text},
        }


ContentBlock = Union[TextBlock, ResourceBlock]


@dataclass
class CallResponse:
    """The envelope handed back for one tool call."""

    content: list[ContentBlock] = field(default_factory=list)
    is_error: bool = False

    def to_dict(self) -> dict:
        body: dict[str, Any] = {"content": [block.to_dict() for block in self.content]}
        if self.is_error:
            body["isError"] = True
        return body


# =============================================================================
# Serialization
# =============================================================================
def _json_default(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Serialize an operation's value (dataclasses included) with indent=2."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=_json_default)


def create_resource_uri(
    resource_type: str,
    id: Optional[str] = None,
    query: Optional[Mapping[str, str]] = None,
    relation: Optional[str] = None,
) -> str:
    """Build a synthetic resource URI.

    Args:
        resource_type: Entity path after the scheme, e.g. "album",
            "me:albums:check", "search:tracks".
        id: Entity ID, appended as ":<id>".
        query: Query parameters; values are percent-encoded.
        relation: Sub-resource, appended after the ID as ":<relation>".

    Returns:
        e.g. create_resource_uri("album", "abc", relation="tracks")
        -> "spotify:album:abc:tracks"
    """
    uri = f"{RESOURCE_SCHEME}:{resource_type}"
    if id:
        uri += f":{id}"
    if relation:
        uri += f":{relation}"
    if query:
        uri += "?" + "&".join(
            f"{key}={quote(str(value), safe=_URI_COMPONENT_SAFE)}" for key, value in query.items()
        )
    return uri


# =============================================================================
# Envelope construction
# =============================================================================
def error_response(message: str) -> CallResponse:
    return CallResponse(content=[TextBlock(ERROR_PREFIX + message)], is_error=True)


def text_response(text: str) -> CallResponse:
    return CallResponse(content=[TextBlock(text)])


def resource_response(uri: str, value: Any) -> CallResponse:
    return CallResponse(content=[ResourceBlock(uri=uri, text=to_json(value))])


def build_response(
    result: Result[Any],
    kind: OutputKind = OutputKind.TEXT,
    uri: Optional[str] = None,
    confirmation: Optional[str] = None,
) -> CallResponse:
    """Render a Result as a CallResponse.

    Args:
        result: The operation's outcome.
        kind: TEXT or RESOURCE; only consulted on success.
        uri: Resource URI, required for RESOURCE kind.
        confirmation: Fixed sentence that replaces the JSON body on success
            (simple mutations report "Successfully saved 2 album(s) ...").
    """
    match result:
        case Err(error=message):
            return error_response(message)
        case Ok(value=value):
            if confirmation is not None:
                return text_response(confirmation)
            if kind is OutputKind.RESOURCE:
                if uri is None:
                    raise ValueError("A resource response needs a URI")
                return resource_response(uri, value)
            return text_response(to_json(value))
        case _:
            raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
