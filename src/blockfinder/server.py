"""MCP server entry point.

Run with ``python -m blockfinder.server`` or the ``blockfinder`` script.
Settings and the registry are loaded before the transport starts, so a bad
config or a broken registry exits non-zero without serving anything.
"""

import json
import sys
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, Literal, TypeVar

import structlog
from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, Field

from blockfinder import tools
from blockfinder.config import Settings
from blockfinder.errors import BlockFinderError
from blockfinder.logging_config import setup_logging
from blockfinder.models.tools import (
    FetchComponentInput,
    GenerateComponentInput,
    GetDependencyCodeInput,
    ListComponentsInput,
    SearchComponentsInput,
)
from blockfinder.registry import load_registry
from blockfinder.state import AppState
from blockfinder.tools.common import parse_input

log = structlog.get_logger()

InputT = TypeVar("InputT", bound=BaseModel)
Handler = Callable[[InputT, AppState], Awaitable[Any]]

INSTRUCTIONS = (
    "Look up components in the registry with fetch_component. When a name is not "
    "found, use search_components or list_components to find alternatives, "
    "get_dependency_code to read a registry dependency, and generate_component "
    "to start a new component from existing building blocks."
)


async def call_tool(
    state: AppState,
    tool_name: str,
    handler: Handler[InputT],
    model: type[InputT],
    **arguments: Any,
) -> str:
    """Validate arguments, run ``handler`` and serialise its payload to JSON.

    Invalid input comes back as the structured error envelope instead of an
    MCP-level exception.
    """
    try:
        args = parse_input(model, **arguments)
        payload = await handler(args, state)
    except BlockFinderError as exc:
        log.warning("tool_input_rejected", tool=tool_name, code=exc.code, error=exc.message)
        payload = exc.to_payload()
    return json.dumps(payload)


def create_server(state: AppState) -> FastMCP:
    server_settings = state.settings.server
    mcp = FastMCP(
        "blockfinder",
        instructions=INSTRUCTIONS,
        host=server_settings.host,
        port=server_settings.port,
    )

    @mcp.tool()
    async def fetch_component(
        name: Annotated[str, Field(description="The name of the component to fetch")],
    ) -> str:
        """Fetch the requested component from the registry by its exact name."""
        return await call_tool(
            state, "fetch_component", tools.fetch_component, FetchComponentInput, name=name
        )

    @mcp.tool()
    async def search_components(
        keyword: Annotated[str, Field(description="The keyword to search for")],
    ) -> str:
        """Search for components by keyword."""
        return await call_tool(
            state,
            "search_components",
            tools.search_components,
            SearchComponentsInput,
            keyword=keyword,
        )

    @mcp.tool()
    async def list_components(
        type: Annotated[
            Literal["ui", "block", "hook", "lib", "all"],
            Field(description="The type of components to list: ui, block, hook, lib, or all"),
        ] = "all",
        category: Annotated[
            str | None,
            Field(description="Optional category to filter by (e.g., buttons, loaders, cards)"),
        ] = None,
    ) -> str:
        """List all components by type or category."""
        return await call_tool(
            state,
            "list_components",
            tools.list_components,
            ListComponentsInput,
            type=type,
            category=category,
        )

    @mcp.tool()
    async def get_dependency_code(
        url: Annotated[str, Field(description="The URL of the registry dependency to fetch")],
    ) -> str:
        """Get the code for a registry dependency."""
        return await call_tool(
            state,
            "get_dependency_code",
            tools.get_dependency_code,
            GetDependencyCodeInput,
            url=url,
        )

    @mcp.tool()
    async def generate_component(
        component_name: Annotated[
            str,
            Field(description='Descriptive name of the new component, e.g. "Chatbot UI"'),
        ],
        component_type: Annotated[
            str,
            Field(description='General type or category of the component, e.g. "form"'),
        ],
        building_block_names: Annotated[
            list[str],
            Field(description="Names of existing registry components to build from"),
        ],
        description: Annotated[
            str | None,
            Field(description="What the new component does and how it uses its blocks"),
        ] = None,
    ) -> str:
        """Prepare a template for a new component built from existing ones.

        Returns the imports, placeholder usage of each building block and the
        combined dependencies; the caller fills in the detailed JSX.
        """
        return await call_tool(
            state,
            "generate_component",
            tools.generate_component,
            GenerateComponentInput,
            component_name=component_name,
            component_type=component_type,
            building_block_names=building_block_names,
            description=description,
        )

    return mcp


def main() -> None:
    settings = Settings()
    setup_logging(settings.logging)

    try:
        indexes = load_registry(settings.registry.path)
    except BlockFinderError as exc:
        log.error("registry_load_failed", code=exc.code, error=exc.message)
        sys.exit(1)

    state = AppState(settings=settings, indexes=indexes)
    mcp = create_server(state)

    transport = settings.server.transport
    log.info("server_starting", transport=transport, components=len(indexes.records))
    if transport == "http":
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
