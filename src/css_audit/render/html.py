"""HTML rendering: a static, searchable audit page."""

from __future__ import annotations

import hashlib
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from css_audit.config import ANCHOR_PREFIX
from css_audit.model.usage import UsageIndex

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "audit.html.j2"

_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html", "j2"]),
    keep_trailing_newline=True,
)


def anchor_id(name: str, prefix: str = ANCHOR_PREFIX) -> str:
    """Return a stable anchor id for a property name.

    The id is the 8-byte BLAKE2b digest of the name in lowercase hex, used
    only as a deterministic 64-bit hash.
    Collisions between distinct names are not detected.
    """
    digest = hashlib.blake2b(name.encode("utf-8"), digest_size=8).digest()
    return f"{prefix}{int.from_bytes(digest, 'big'):x}"


def render_html(index: UsageIndex, *, anchor_prefix: str = ANCHOR_PREFIX) -> str:
    sections = [
        {
            "id": anchor_id(entry.name, anchor_prefix),
            "name": entry.name,
            "count": entry.count,
            "labels": entry.labels,
        }
        for entry in index
    ]
    return _env.get_template(TEMPLATE_NAME).render(sections=sections)
