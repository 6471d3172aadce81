from __future__ import annotations

from typing import TYPE_CHECKING, Any

from blockfinder.models.tools import SearchComponentsOutput

if TYPE_CHECKING:
    from blockfinder.models.tools import SearchComponentsInput
    from blockfinder.state import AppState


async def search_components(args: SearchComponentsInput, state: AppState) -> dict[str, Any]:
    similar = state.matcher.find_similar(args.keyword, state.settings.matcher.max_results)
    if similar is None:
        message = f'No components found matching "{args.keyword}".'
    else:
        message = f'Found {len(similar)} components matching "{args.keyword}".'
    return SearchComponentsOutput(results=similar or [], message=message).to_payload()
