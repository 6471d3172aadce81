"""Tool handlers exposed over MCP.

Each handler takes validated input plus the shared ``AppState`` and returns a
JSON-serialisable payload. Handlers never raise for missing components or
unreadable files; those come back as data.
"""

from __future__ import annotations

from blockfinder.tools.fetch_component import fetch_component
from blockfinder.tools.generate_component import generate_component
from blockfinder.tools.get_dependency_code import get_dependency_code
from blockfinder.tools.list_components import list_components
from blockfinder.tools.search_components import search_components

__all__ = [
    "fetch_component",
    "generate_component",
    "get_dependency_code",
    "list_components",
    "search_components",
]
