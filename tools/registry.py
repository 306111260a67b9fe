# =============================================================================
# tools/registry.py  -  Tool Definitions and the Registry
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   A ToolDefinition packages everything one MCP tool needs:
#     - name / title / description   (what the client model reads)
#     - handler                      (async fn(client, **arguments) -> Result)
#     - output kind                  (text, resource, or a confirmation)
#
#   The handler's signature IS the input schema.  Parameters after `client`
#   are annotated with pydantic constraints, e.g.
#
#       album_ids: Annotated[list[str], Field(description="...")]
#       limit: Annotated[int, Field(ge=1, le=50)] = 20
#
#   FastMCP reads those annotations to publish the JSON schema and to reject
#   ill-typed input before the handler runs (see tools/mcp_server.py).
#
# HOW A FAMILY MODULE DECLARES A TOOL:
#
#       @REGISTRY.tool(title="Save Albums", confirmation=lambda a: ...)
#       async def save_albums(client, album_ids: Annotated[...]):
#           """Save albums to the user's library."""
#           return await albums.save_albums(client, album_ids)
#
#   The function name is the tool name; its docstring is the description.
# =============================================================================

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterator, Mapping, Optional

from core.client import MusicClient
from core.result import Err, Ok, Result
from tools.envelope import CallResponse, OutputKind, build_response, error_response
from tools.logging_utils import log_request, log_response, log_status

Handler = Callable[..., Awaitable[Result[Any]]]
ArgumentsFn = Callable[[Mapping[str, Any]], str]


@dataclass
class ToolDefinition:
    name: str
    title: str
    description: str
    handler: Handler
    output: OutputKind = OutputKind.TEXT
    resource_uri: Optional[ArgumentsFn] = None     # arguments -> URI, RESOURCE kind only
    confirmation: Optional[ArgumentsFn] = None     # arguments -> sentence

    def __post_init__(self):
        if self.output is OutputKind.RESOURCE and self.resource_uri is None:
            raise ValueError(f"Tool {self.name!r} returns a resource but has no resource_uri")

    @property
    def signature(self) -> inspect.Signature:
        """The handler's signature without the leading `client` parameter."""
        signature = inspect.signature(self.handler)
        parameters = list(signature.parameters.values())[1:]
        return signature.replace(parameters=parameters)

    def bind_arguments(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        """Match call arguments to the handler, filling in declared defaults.

        Raises:
            TypeError: An argument is unknown or a required one is missing.
        """
        bound = self.signature.bind(**arguments)
        bound.apply_defaults()
        return dict(bound.arguments)

    async def invoke(self, client: MusicClient, arguments: Mapping[str, Any]) -> CallResponse:
        """Run the handler and render its Result as a CallResponse."""
        log_request(self.name, **arguments)
        try:
            bound = self.bind_arguments(arguments)
        except TypeError as exc:
            log_status(f"rejected: {exc}")
            response = error_response(f"Invalid arguments for {self.name}: {exc}")
            log_response(self.name, response.to_dict())
            return response
        result = await self.handler(client, **bound)

        match result:
            case Err(error=message):
                log_status(f"rejected: {message}")
                response = build_response(result)
            case Ok():
                response = build_response(
                    result,
                    self.output,
                    uri=self.resource_uri(bound) if self.resource_uri else None,
                    confirmation=self.confirmation(bound) if self.confirmation else None,
                )

        log_response(self.name, response.to_dict())
        return response


class ToolRegistry:
    """Ordered collection of ToolDefinitions, keyed by name."""

    def __init__(self):
        self._tools: dict[str, ToolDefinition] = {}

    def add(self, definition: ToolDefinition) -> ToolDefinition:
        if definition.name in self._tools:
            raise ValueError(f"Tool {definition.name!r} is already registered")
        self._tools[definition.name] = definition
        return definition

    def tool(
        self,
        name: Optional[str] = None,
        *,
        title: str,
        description: Optional[str] = None,
        output: OutputKind = OutputKind.TEXT,
        resource_uri: Optional[ArgumentsFn] = None,
        confirmation: Optional[ArgumentsFn] = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator form of add(); returns the handler unchanged."""

        def decorator(handler: Handler) -> Handler:
            self.add(
                ToolDefinition(
                    name=name or handler.__name__,
                    title=title,
                    description=description or inspect.getdoc(handler) or "",
                    handler=handler,
                    output=output,
                    resource_uri=resource_uri,
                    confirmation=confirmation,
                )
            )
            return handler

        return decorator

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    async def call(
        self, client: MusicClient, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> CallResponse:
        """Dispatch by name.  Unknown names get an error envelope."""
        definition = self._tools.get(name)
        if definition is None:
            log_status(f"unknown tool: {name}")
            return error_response(f"Unknown tool: {name}")
        return await definition.invoke(client, arguments or {})


# Populated when the family modules (tools/albums.py, ...) are imported.
REGISTRY = ToolRegistry()
