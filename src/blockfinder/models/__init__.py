from __future__ import annotations

from blockfinder.models.registry import (
    TYPE_LABELS,
    ComponentRecord,
    ComponentType,
    MatchResult,
    RegistryFile,
)
from blockfinder.models.tools import (
    CodeBundle,
    ComponentSummary,
    FetchComponentInput,
    GenerateComponentError,
    GenerateComponentFailure,
    GenerateComponentInput,
    GenerateComponentOutput,
    GetDependencyCodeInput,
    ListComponentsInput,
    ListComponentsOutput,
    ListedComponent,
    NotFoundOutput,
    RegistryDependencyRef,
    SearchComponentsInput,
    SearchComponentsOutput,
    ToolFailure,
)

__all__ = [
    # registry
    "ComponentRecord",
    "ComponentType",
    "MatchResult",
    "RegistryFile",
    "TYPE_LABELS",
    # tools
    "CodeBundle",
    "ComponentSummary",
    "FetchComponentInput",
    "GenerateComponentError",
    "GenerateComponentFailure",
    "GenerateComponentInput",
    "GenerateComponentOutput",
    "GetDependencyCodeInput",
    "ListComponentsInput",
    "ListComponentsOutput",
    "ListedComponent",
    "NotFoundOutput",
    "RegistryDependencyRef",
    "SearchComponentsInput",
    "SearchComponentsOutput",
    "ToolFailure",
]
