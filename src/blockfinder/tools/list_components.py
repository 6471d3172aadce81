from __future__ import annotations

from typing import TYPE_CHECKING, Any

from blockfinder.categories import extract_categories
from blockfinder.links import component_link, install_command
from blockfinder.models.registry import ComponentType
from blockfinder.models.tools import ListComponentsOutput, ListedComponent

if TYPE_CHECKING:
    from blockfinder.models.registry import ComponentRecord
    from blockfinder.models.tools import ListComponentsInput
    from blockfinder.state import AppState


def _by_name(component: ListedComponent) -> tuple[str, str]:
    return component.name.lower(), component.name


def _listed(record: ComponentRecord, host: str) -> ListedComponent:
    return ListedComponent(
        name=record.name,
        type=record.type.value,
        path=record.primary_path,
        categories=sorted(extract_categories(record)),
        link=component_link(host, record.name),
        install_command=install_command(host, record.name),
        dependencies=list(record.dependencies),
        registry_dependencies=list(record.registry_dependencies),
    )


async def list_components(args: ListComponentsInput, state: AppState) -> dict[str, Any]:
    """List components of a type, optionally narrowed to a category.

    With ``type="all"`` the components are grouped per type tag; otherwise a
    flat list is returned. Every group is sorted by name.
    """
    host = state.settings.links.host
    records = state.matcher.filter_components(args.type_tag, args.category)
    listed = sorted((_listed(record, host) for record in records), key=_by_name)

    components: dict[str, list[ListedComponent]] | list[ListedComponent]
    if args.type_tag is None:
        grouped: dict[str, list[ListedComponent]] = {tag.value: [] for tag in ComponentType}
        for component in listed:
            grouped[component.type].append(component)
        components = grouped
    else:
        components = listed

    categorized: dict[str, list[ListedComponent]] | None = None
    if args.category:
        categorized = {}
        for component in listed:
            for category in component.categories:
                categorized.setdefault(category, []).append(component)
        categorized = dict(sorted(categorized.items()))

    message = f"Found {len(listed)} {args.type} components"
    if args.category:
        message += f' in category "{args.category}"'

    return ListComponentsOutput(
        total=len(listed),
        components=components,
        categorized=categorized,
        message=message + ".",
    ).to_payload()
