"""Component source loading.

``CodeLoader`` never raises on a failed read: the failure is carried on the
returned ``CodeBundle`` as ``read_error`` and only turned into a string in the
``code`` field when the bundle is serialised.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import anyio
import structlog

from blockfinder.errors import ReadError
from blockfinder.links import component_link, install_command
from blockfinder.models.tools import CodeBundle

if TYPE_CHECKING:
    from blockfinder.models.registry import ComponentRecord

log = structlog.get_logger()

TRUNCATION_MARKER = "\n\n// ... code truncated, view full code at link provided above ..."


class FileStore(Protocol):
    async def read(self, path: str) -> str:
        """Return the text at ``path``. Raises ``ReadError`` on failure."""
        ...


class LocalFileStore:
    """Reads component sources from a directory on the local filesystem."""

    def __init__(self, root: str | Path) -> None:
        # resolved once at startup; per-read resolution goes through anyio
        self._root = Path(root).expanduser().resolve()

    async def read(self, path: str) -> str:
        full_path = self._root / path
        try:
            full_path = Path(await anyio.Path(full_path).resolve())
            if not full_path.is_relative_to(self._root):
                raise ReadError(str(full_path), "path escapes the source root")
            return await anyio.Path(full_path).read_text(encoding="utf-8")
        except (OSError, ValueError) as exc:
            # ValueError covers undecodable bytes and NUL characters in the path
            raise ReadError(str(full_path), str(exc)) from exc


def normalize_path(path: str) -> str:
    """Strip the ``@/`` import alias, then a leading slash."""
    return path.removeprefix("@/").removeprefix("/")


def truncate(content: str, max_length: int) -> tuple[str, bool]:
    if len(content) > max_length:
        return content[:max_length] + TRUNCATION_MARKER, True
    return content, False


class CodeLoader:
    def __init__(self, file_store: FileStore, link_host: str) -> None:
        self._file_store = file_store
        self._link_host = link_host

    async def load_code(
        self,
        record: ComponentRecord,
        include_code: bool = False,
        max_length: int = 1500,
    ) -> CodeBundle | None:
        """Build the code bundle for ``record``; None if it has no files."""
        path = record.primary_path
        if path is None:
            return None

        code: str | None = None
        truncated = False
        read_error: str | None = None

        if include_code:
            try:
                content = await self._file_store.read(normalize_path(path))
            except ReadError as exc:
                log.warning(
                    "component_read_error",
                    component=record.name,
                    path=exc.path,
                    reason=exc.reason,
                )
                read_error = f"Error: Could not read code from {exc.path}"
            else:
                code, truncated = truncate(content, max_length)

        return CodeBundle(
            name=record.name,
            type=record.type.value,
            path=path,
            code=code,
            code_is_truncated=truncated,
            read_error=read_error,
            dependencies=list(record.dependencies),
            registry_dependencies=list(record.registry_dependencies),
            link=component_link(self._link_host, record.name),
            install_command=install_command(self._link_host, record.name),
        )
