"""Compose a new component skeleton out of existing registry components."""

from __future__ import annotations

import asyncio
import re
from typing import TYPE_CHECKING, Any

import structlog

from blockfinder.links import install_command
from blockfinder.models.tools import (
    GenerateComponentError,
    GenerateComponentFailure,
    GenerateComponentOutput,
    RegistryDependencyRef,
)

if TYPE_CHECKING:
    from blockfinder.models.tools import CodeBundle, GenerateComponentInput
    from blockfinder.state import AppState

log = structlog.get_logger()

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")

DEFAULT_DESCRIPTION = "This is a new component generated by combining existing MVPBlocks."

_TEMPLATE = """
// components/{component}.tsx
import React from 'react';
{imports}

// Consider adding more specific imports based on component logic, e.g.,
// import {{ Input }} from '@/components/ui/input';
// import {{ Button }} from '@/components/ui/button';

export const {component} = () => {{
\treturn (
\t\t<div className="p-4 border rounded-lg shadow-sm">
\t\t\t<h2 className="text-xl font-semibold mb-4">{title}</h2>
\t\t\t<p className="text-gray-600 mb-6">{description}</p>
\t\t\t{{/* Start of Building Blocks */}}
{usages}
\t\t\t{{/* End of Building Blocks */}}
\t\t\t{{/* Add your custom logic and layout here to arrange the building blocks */}}
\t\t\t{{/* Example: */}}
\t\t\t{{/*
\t\t\t<div className="flex flex-col gap-4">
\t\t\t\t<Input placeholder="Enter your message..." />
\t\t\t\t<Button>Send</Button>
\t\t\t</div>
\t\t\t*/}}
\t\t</div>
\t);
}};
"""


def sanitize_component_name(name: str) -> str:
    """``"Chatbot UI"`` -> ``"ChatbotUI"``."""
    cleaned = _NON_ALNUM.sub("", name)
    return cleaned[:1].upper() + cleaned[1:]


def import_name(component_name: str) -> str:
    """``"fancy-button"`` -> ``"FancyButton"``."""
    return "".join(part[:1].upper() + part[1:] for part in component_name.split("-"))


def render_template(
    component: str, title: str, description: str | None, blocks: list[CodeBundle]
) -> str:
    imports = []
    usages = []
    for block in blocks:
        name = import_name(block.name)
        module = block.path.replace(".tsx", "", 1)
        imports.append(f"import {{ {name} }} from '{module}';")
        usages.append(f"\t\t\t<{name} />")
    return _TEMPLATE.format(
        component=component,
        title=title,
        description=description or DEFAULT_DESCRIPTION,
        imports="\n".join(imports),
        usages="\n".join(usages),
    )


async def _load_blocks(names: list[str], state: AppState) -> list[CodeBundle | None]:
    max_length = state.settings.code.generate_max_length

    async def load(name: str) -> CodeBundle | None:
        record = state.indexes.get(name)
        if record is None:
            log.info("building_block_not_found", name=name)
            return None
        return await state.loader.load_code(record, include_code=True, max_length=max_length)

    async with asyncio.TaskGroup() as tg:
        tasks = [tg.create_task(load(name)) for name in names]
    return [task.result() for task in tasks]


async def generate_component(args: GenerateComponentInput, state: AppState) -> dict[str, Any]:
    try:
        return await _generate_component(args, state)
    except Exception as exc:
        log.exception("component_generation_failed", component=args.component_name)
        return GenerateComponentError(
            error="Failed to generate component",
            message="An error occurred while generating the component",
            details=str(exc),
        ).to_payload()


async def _generate_component(args: GenerateComponentInput, state: AppState) -> dict[str, Any]:
    loaded = await _load_blocks(args.building_block_names, state)
    blocks = [block for block in loaded if block is not None]

    if not blocks:
        return GenerateComponentFailure(
            error="No valid building blocks found",
            message="Could not find any of the specified building blocks in the registry.",
            requested_building_blocks=args.building_block_names,
        ).to_payload()

    # dicts keep first-seen order
    npm_dependencies: dict[str, None] = {}
    registry_dependencies: dict[str, None] = {}
    for block in blocks:
        npm_dependencies.update(dict.fromkeys(block.dependencies))
        registry_dependencies.update(dict.fromkeys(block.registry_dependencies))

    host = state.settings.links.host
    dependency_refs = [
        RegistryDependencyRef(name=name, install_command=install_command(host, name))
        for name in registry_dependencies
        if state.indexes.get(name) is not None
    ]

    component = sanitize_component_name(args.component_name)
    log.info(
        "component_template_generated",
        component=component,
        blocks=[block.name for block in blocks],
        skipped=len(loaded) - len(blocks),
    )
    return GenerateComponentOutput(
        component_name=component,
        component_type=args.component_type,
        description=args.description,
        building_blocks_used=[block.name for block in blocks],
        npm_dependencies=list(npm_dependencies),
        registry_dependencies=dependency_refs,
        generated_code_template=render_template(
            component, args.component_name, args.description, blocks
        ),
        message=(
            f'Prepared a template for "{component}". '
            "You can now provide the full code using this template."
        ),
    ).to_payload()
