"""Fuzzy search and code loading over a UI component registry, served over MCP."""

from __future__ import annotations

__version__ = "0.1.0"
