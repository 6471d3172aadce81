"""Component registry: loading, validation and index building.

The registry is read once at startup and never mutated. Both the shadcn
``registry.json`` layout (``{"items": [...]}``) and a bare JSON list of items
are accepted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import TypeAdapter, ValidationError

from blockfinder.errors import BlockFinderError, ErrorCode
from blockfinder.models.registry import ComponentRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

log = structlog.get_logger()

_records_adapter = TypeAdapter(list[ComponentRecord])


@dataclass(frozen=True)
class RegistryIndexes:
    """In-memory view of the registry built at startup."""

    # registry order is preserved; ranking ties fall back to it
    records: tuple[ComponentRecord, ...] = ()

    # component name → record
    by_name: dict[str, ComponentRecord] = field(default_factory=dict)

    def get(self, name: str) -> ComponentRecord | None:
        return self.by_name.get(name)


def parse_registry(data: Any) -> list[ComponentRecord]:
    """Validate decoded registry JSON into records."""
    items = data.get("items") if isinstance(data, dict) else data
    if not isinstance(items, list):
        raise BlockFinderError(
            code=ErrorCode.REGISTRY_INVALID,
            message="Registry must be a JSON list or an object with an 'items' list",
        )
    try:
        return _records_adapter.validate_python(items)
    except ValidationError as exc:
        raise BlockFinderError(
            code=ErrorCode.REGISTRY_INVALID,
            message=f"Registry failed validation: {exc.error_count()} error(s)",
            suggestion=str(exc),
        ) from exc


def build_indexes(records: Iterable[ComponentRecord]) -> RegistryIndexes:
    records = tuple(records)
    by_name: dict[str, ComponentRecord] = {}
    for record in records:
        if record.name in by_name:
            raise BlockFinderError(
                code=ErrorCode.REGISTRY_INVALID,
                message=f"Duplicate component name in registry: {record.name!r}",
            )
        by_name[record.name] = record
    return RegistryIndexes(records=records, by_name=by_name)


def load_registry(path: str | Path) -> RegistryIndexes:
    """Read, validate and index the registry file at ``path``."""
    path = Path(path).expanduser()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise BlockFinderError(
            code=ErrorCode.REGISTRY_NOT_FOUND,
            message=f"Registry file not found: {path}",
            suggestion="Set registry.path in blockfinder.yaml or BLOCKFINDER__REGISTRY__PATH",
        ) from exc
    except OSError as exc:
        raise BlockFinderError(
            code=ErrorCode.REGISTRY_NOT_FOUND,
            message=f"Registry file could not be read: {path}: {exc}",
        ) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise BlockFinderError(
            code=ErrorCode.REGISTRY_INVALID,
            message=f"Registry file is not valid JSON: {exc}",
        ) from exc

    indexes = build_indexes(parse_registry(data))
    log.info("registry_loaded", path=str(path), components=len(indexes.records))
    return indexes
