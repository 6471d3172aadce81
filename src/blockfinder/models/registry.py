from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComponentType(StrEnum):
    UI = "registry:ui"
    BLOCK = "registry:block"
    HOOK = "registry:hook"
    LIB = "registry:lib"


TYPE_LABELS: dict[str, str] = {
    ComponentType.BLOCK: "Block Component",
    ComponentType.UI: "UI Component",
    ComponentType.HOOK: "Hook",
    ComponentType.LIB: "Utility Library",
}


class RegistryFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    type: str | None = None


class ComponentRecord(BaseModel):
    """Single item in registry.json."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    type: ComponentType
    title: str | None = None
    description: str | None = None
    files: list[RegistryFile] = []
    dependencies: list[str] = []
    registry_dependencies: list[str] = Field(default=[], alias="registryDependencies")
    categories: list[str] = []

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not re.match(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$", v):
            raise ValueError(f"Invalid component name: {v!r}")
        return v

    @property
    def primary_path(self) -> str | None:
        """Path of the first file, or None for metadata-only records."""
        return self.files[0].path if self.files else None

    @property
    def type_label(self) -> str:
        return TYPE_LABELS.get(self.type, self.type.value)


class MatchResult(BaseModel):
    """One scored registry entry produced by a ranking call."""

    model_config = ConfigDict(frozen=True)

    item: ComponentRecord
    score: float  # relative within one call, not normalised

    @property
    def has_match(self) -> bool:
        return self.score > 0
