from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from blockfinder.links import name_from_link
from blockfinder.models.tools import ToolFailure

if TYPE_CHECKING:
    from blockfinder.models.tools import GetDependencyCodeInput
    from blockfinder.state import AppState

log = structlog.get_logger()


async def get_dependency_code(args: GetDependencyCodeInput, state: AppState) -> dict[str, Any]:
    """Load the code of a registry dependency given its registry link."""
    try:
        return await _get_dependency_code(args, state)
    except Exception:
        log.exception("dependency_fetch_failed", url=args.url)
        return ToolFailure(
            error="Failed to fetch dependency",
            message="An error occurred while fetching the dependency code",
        ).to_payload()


async def _get_dependency_code(args: GetDependencyCodeInput, state: AppState) -> dict[str, Any]:
    name = name_from_link(args.url)
    if not name:
        return ToolFailure(
            error="Invalid URL format",
            message="Could not extract component name from URL",
        ).to_payload()

    record = state.indexes.get(name)
    if record is None:
        log.info("dependency_not_found", url=args.url, name=name)
        return ToolFailure(
            error="Component not found",
            message=f'Component "{name}" not found in the registry',
        ).to_payload()

    bundle = await state.loader.load_code(
        record,
        include_code=True,
        max_length=state.settings.code.dependency_max_length,
    )
    if bundle is None:
        return ToolFailure(
            error="Code not found",
            message=f'Could not retrieve code for component "{name}"',
        ).to_payload()

    return {
        "component": bundle.to_payload(),
        "message": f'Successfully retrieved code for dependency "{name}"',
    }
