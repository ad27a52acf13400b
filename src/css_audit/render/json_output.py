"""JSON rendering: ``[{"selector": name, "rules": [label, ...]}, ...]``."""

from __future__ import annotations

import json
from typing import Any

from css_audit.model.usage import UsageIndex


def to_records(index: UsageIndex) -> list[dict[str, Any]]:
    return [{"selector": entry.name, "rules": list(entry.labels)} for entry in index]


def render_json(index: UsageIndex) -> str:
    return json.dumps(to_records(index), indent=2, ensure_ascii=False) + "\n"
