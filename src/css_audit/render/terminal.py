"""Plain-text rendering for the terminal."""

from __future__ import annotations

import click

from css_audit.model.usage import UsageIndex

INDENT = "  "


def render_terminal(index: UsageIndex, *, color: bool = False) -> str:
    """Render one block per property, separated by a blank line.

    Returns an empty string for an empty index.
    """
    blocks: list[str] = []
    for entry in index:
        name = click.style(entry.name, bold=True) if color else entry.name
        lines = [name] + [f"{INDENT}{label}" for label in entry.labels]
        blocks.append("\n".join(lines))
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
