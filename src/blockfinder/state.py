from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from blockfinder.config import Settings
from blockfinder.loader import CodeLoader, LocalFileStore
from blockfinder.matcher import ComponentMatcher

if TYPE_CHECKING:
    from blockfinder.loader import FileStore
    from blockfinder.registry import RegistryIndexes


@dataclass
class AppState:
    """Everything a tool handler needs, built once by the server lifespan."""

    settings: Settings
    indexes: RegistryIndexes
    matcher: ComponentMatcher = field(init=False)
    loader: CodeLoader = field(init=False)
    file_store: FileStore | None = None

    def __post_init__(self) -> None:
        host = self.settings.links.host
        if self.file_store is None:
            self.file_store = LocalFileStore(self.settings.registry.source_root)
        self.matcher = ComponentMatcher(self.indexes.records, link_host=host)
        self.loader = CodeLoader(self.file_store, link_host=host)
