"""Renderers for a finalized UsageIndex."""

from __future__ import annotations

import logging
from enum import Enum

from css_audit.config import ANCHOR_PREFIX
from css_audit.model.usage import UsageIndex
from css_audit.render.html import anchor_id, render_html
from css_audit.render.json_output import render_json, to_records
from css_audit.render.terminal import render_terminal

__all__ = [
    "OutputFormat",
    "render",
    "render_terminal",
    "render_json",
    "render_html",
    "to_records",
    "anchor_id",
]

logger = logging.getLogger(__name__)


class OutputFormat(Enum):
    """Output selection for an audit run."""

    TERMINAL = "terminal"
    JSON = "json"
    HTML = "html"
    NONE = "none"

    @classmethod
    def parse(cls, value: str | None) -> OutputFormat:
        """Map a user-supplied value to a format; unknown values mean terminal."""
        if not value:
            return cls.TERMINAL
        try:
            return cls(value.strip().lower())
        except ValueError:
            logger.warning("Unknown output format %r, using terminal", value)
            return cls.TERMINAL


def render(
    index: UsageIndex,
    fmt: OutputFormat,
    *,
    color: bool = False,
    anchor_prefix: str = ANCHOR_PREFIX,
) -> str | None:
    """Render *index* in *fmt*; returns None for :attr:`OutputFormat.NONE`."""
    if fmt is OutputFormat.TERMINAL:
        return render_terminal(index, color=color)
    if fmt is OutputFormat.JSON:
        return render_json(index)
    if fmt is OutputFormat.HTML:
        return render_html(index, anchor_prefix=anchor_prefix)
    return None
