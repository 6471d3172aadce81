"""Integration test fixtures: a registry and source tree on disk."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

REGISTRY = {
    "name": "test-blocks",
    "items": [
        {
            "name": "button",
            "type": "registry:ui",
            "files": [{"path": "components/ui/button.tsx"}],
            "dependencies": ["@radix-ui/react-slot"],
        },
        {
            "name": "fancy-button",
            "type": "registry:ui",
            "files": [{"path": "components/ui/buttons/fancy-button.tsx"}],
            "registryDependencies": ["button"],
        },
    ],
}


@pytest.fixture()
def registry_dir(tmp_path: Path) -> Path:
    source = tmp_path / "components" / "ui"
    (source / "buttons").mkdir(parents=True)
    (source / "button.tsx").write_text("export function Button() {}\n", encoding="utf-8")
    (source / "buttons" / "fancy-button.tsx").write_text(
        "export function FancyButton() {}\n", encoding="utf-8"
    )
    (tmp_path / "registry.json").write_text(json.dumps(REGISTRY), encoding="utf-8")
    return tmp_path


@pytest.fixture()
def subprocess_env(registry_dir: Path) -> dict[str, str]:
    """Environment for a server subprocess, isolated from the caller's config."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("BLOCKFINDER__")}
    env["BLOCKFINDER__REGISTRY__PATH"] = str(registry_dir / "registry.json")
    env["BLOCKFINDER__REGISTRY__SOURCE_ROOT"] = str(registry_dir)
    env["BLOCKFINDER__LOGGING__LEVEL"] = "WARNING"
    return env
