from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from blockfinder.models.tools import NotFoundOutput

if TYPE_CHECKING:
    from blockfinder.models.tools import FetchComponentInput
    from blockfinder.state import AppState

log = structlog.get_logger()


async def fetch_component(args: FetchComponentInput, state: AppState) -> dict[str, Any] | None:
    """Exact lookup by name; suggests similar components when missing."""
    record = state.indexes.get(args.name)
    if record is None:
        log.info("component_not_found", name=args.name)
        similar = state.matcher.find_similar(args.name, state.settings.matcher.max_results)
        return NotFoundOutput(
            message=f'Component "{args.name}" not found.',
            similar_components=similar,
        ).to_payload()

    bundle = await state.loader.load_code(record, include_code=False)
    return bundle.to_payload() if bundle else None
