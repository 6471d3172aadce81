"""Public link and install-command templating. Pure string formatting."""

from __future__ import annotations

_INSTALL_PREFIX = "npx shadcn@latest add"


def component_link(host: str, name: str) -> str:
    return f"https://{host}/r/{name}.json"


def install_command(host: str, name: str) -> str:
    return f"{_INSTALL_PREFIX} {component_link(host, name)}"


def name_from_link(url: str) -> str:
    """Component name from a registry link; empty string if none can be derived.

    ``https://host/r/fancy-button.json`` -> ``fancy-button``.
    """
    return url.split("/")[-1].replace(".json", "")
