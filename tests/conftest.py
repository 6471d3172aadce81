"""Shared fixtures: a small synthetic registry and an in-memory file store."""

from __future__ import annotations

import pytest

from blockfinder.config import Settings
from blockfinder.errors import ReadError
from blockfinder.loader import CodeLoader
from blockfinder.matcher import ComponentMatcher
from blockfinder.models.registry import ComponentRecord
from blockfinder.registry import RegistryIndexes, build_indexes, parse_registry
from blockfinder.state import AppState

LINK_HOST = "blocks.example.dev"

SAMPLE_REGISTRY = [
    {
        "name": "fancy-button",
        "type": "registry:ui",
        "files": [{"path": "components/ui/buttons/fancy-button.tsx"}],
        "dependencies": ["framer-motion"],
        "registryDependencies": ["button"],
    },
    {
        "name": "button",
        "type": "registry:ui",
        "files": [{"path": "components/ui/button.tsx"}],
        "dependencies": ["@radix-ui/react-slot"],
    },
    {
        "name": "spinner-loader",
        "type": "registry:ui",
        "files": [{"path": "components/mvpblocks/loaders/spinner-loader.tsx"}],
    },
    {
        "name": "login-form",
        "type": "registry:block",
        "files": [{"path": "components/mvpblocks/forms/login-form.tsx"}],
        "dependencies": ["lucide-react"],
        "registryDependencies": ["button", "input"],
    },
    {
        "name": "input",
        "type": "registry:ui",
        "files": [{"path": "@/components/ui/input.tsx"}],
    },
    {
        "name": "use-mobile",
        "type": "registry:hook",
        "files": [{"path": "hooks/use-mobile.ts"}],
    },
    {
        "name": "utils",
        "type": "registry:lib",
        "files": [{"path": "/lib/utils.ts"}],
        "dependencies": ["clsx", "tailwind-merge"],
    },
    {
        "name": "pricing-card",
        "type": "registry:block",
        "files": [{"path": "components/mvpblocks/cards/pricing-card.tsx"}],
        "categories": ["Pricing"],
    },
    {
        "name": "theme-tokens",
        "type": "registry:lib",
    },
]

# hooks/use-mobile.ts is deliberately absent so reads of it fail
SAMPLE_FILES = {
    "components/ui/buttons/fancy-button.tsx": "export function FancyButton() {}\n",
    "components/ui/button.tsx": "export function Button() {}\n",
    "components/mvpblocks/loaders/spinner-loader.tsx": "export function SpinnerLoader() {}\n",
    "components/mvpblocks/forms/login-form.tsx": "export function LoginForm() {}\n",
    "components/ui/input.tsx": "export function Input() {}\n",
    "lib/utils.ts": "export function cn() {}\n",
    "components/mvpblocks/cards/pricing-card.tsx": "export function PricingCard() {}\n",
}


class InMemoryFileStore:
    """FileStore backed by a dict; records every path it was asked for."""

    def __init__(self, files: dict[str, str]) -> None:
        self.files = dict(files)
        self.reads: list[str] = []

    async def read(self, path: str) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError as exc:
            raise ReadError(path, "no such file") from exc


@pytest.fixture()
def sample_records() -> list[ComponentRecord]:
    return parse_registry(SAMPLE_REGISTRY)


@pytest.fixture()
def indexes(sample_records: list[ComponentRecord]) -> RegistryIndexes:
    return build_indexes(sample_records)


@pytest.fixture()
def settings() -> Settings:
    return Settings(links={"host": LINK_HOST})


@pytest.fixture()
def file_store() -> InMemoryFileStore:
    return InMemoryFileStore(SAMPLE_FILES)


@pytest.fixture()
def matcher(sample_records: list[ComponentRecord]) -> ComponentMatcher:
    return ComponentMatcher(sample_records, link_host=LINK_HOST)


@pytest.fixture()
def loader(file_store: InMemoryFileStore) -> CodeLoader:
    return CodeLoader(file_store, link_host=LINK_HOST)


@pytest.fixture()
def app_state(
    settings: Settings, indexes: RegistryIndexes, file_store: InMemoryFileStore
) -> AppState:
    return AppState(settings=settings, indexes=indexes, file_store=file_store)
