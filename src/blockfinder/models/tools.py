from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from blockfinder.models.registry import ComponentType

_MAX_TEXT = 500
_MAX_URL = 2048


def _check_text(v: str, field: str, *, allow_empty: bool = True) -> str:
    v = v.strip()
    if not allow_empty and not v:
        raise ValueError(f"{field} must not be empty")
    if len(v) > _MAX_TEXT:
        raise ValueError(f"{field} must not exceed {_MAX_TEXT} characters")
    return v


class _Payload(BaseModel):
    """Tool output: serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class FetchComponentInput(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_text(v, "name", allow_empty=False)


class SearchComponentsInput(BaseModel):
    keyword: str

    @field_validator("keyword")
    @classmethod
    def validate_keyword(cls, v: str) -> str:
        # Empty keywords are accepted and match every record.
        return _check_text(v, "keyword")


class ListComponentsInput(BaseModel):
    type: Literal["ui", "block", "hook", "lib", "all"] = "all"
    category: str | None = None

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return _check_text(v, "category") or None

    @property
    def type_tag(self) -> ComponentType | None:
        if self.type == "all":
            return None
        return ComponentType(f"registry:{self.type}")


class GetDependencyCodeInput(BaseModel):
    url: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        v = v.strip()
        if len(v) > _MAX_URL:
            raise ValueError(f"url must not exceed {_MAX_URL} characters")
        return v


class GenerateComponentInput(BaseModel):
    component_name: str
    component_type: str
    building_block_names: list[str]
    description: str | None = None

    @field_validator("component_name")
    @classmethod
    def validate_component_name(cls, v: str) -> str:
        return _check_text(v, "component_name", allow_empty=False)

    @field_validator("component_type")
    @classmethod
    def validate_component_type(cls, v: str) -> str:
        return _check_text(v, "component_type")

    @field_validator("building_block_names")
    @classmethod
    def validate_building_block_names(cls, v: list[str]) -> list[str]:
        if len(v) > 50:
            raise ValueError("building_block_names must not exceed 50 entries")
        return [name.strip() for name in v]


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class ComponentSummary(_Payload):
    """Public view of a record returned by searches. Never carries code."""

    name: str
    type: str  # human label, e.g. "UI Component"
    path: str | None
    dependencies: list[str]
    registry_dependencies: list[str]
    link: str


class CodeBundle(_Payload):
    name: str
    type: str
    path: str
    code: str | None = None
    code_is_truncated: bool = False
    read_error: str | None = None
    dependencies: list[str]
    registry_dependencies: list[str]
    link: str
    install_command: str

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True, exclude={"read_error"})
        if self.read_error is not None:
            payload["code"] = self.read_error
        return payload


class ListedComponent(_Payload):
    name: str
    type: str  # raw type tag, e.g. "registry:ui"
    path: str | None
    categories: list[str]
    link: str
    install_command: str
    dependencies: list[str]
    registry_dependencies: list[str]


class RegistryDependencyRef(_Payload):
    name: str
    install_command: str


class NotFoundOutput(_Payload):
    found: Literal[False] = False
    message: str
    similar_components: list[ComponentSummary] | None


class SearchComponentsOutput(_Payload):
    results: list[ComponentSummary]
    message: str


class ListComponentsOutput(_Payload):
    total: int
    components: dict[str, list[ListedComponent]] | list[ListedComponent]
    categorized: dict[str, list[ListedComponent]] | None
    message: str


class ToolFailure(_Payload):
    error: str
    message: str


class GenerateComponentFailure(ToolFailure):
    requested_building_blocks: list[str]


class GenerateComponentError(ToolFailure):
    details: str


class GenerateComponentOutput(_Payload):
    success: Literal[True] = True
    component_name: str
    component_type: str
    description: str | None
    building_blocks_used: list[str]
    npm_dependencies: list[str]
    registry_dependencies: list[RegistryDependencyRef]
    generated_code_template: str
    message: str
