from __future__ import annotations

from dataclasses import dataclass

PRIVATE_PREFIX = "--__"
LABEL_SEPARATOR = "\n    "
ANCHOR_PREFIX = "selector-"


@dataclass(frozen=True)
class AuditConfig:
    output_format: str = "terminal"  # terminal, json, html, none
    recursive: bool = False  # descend into grouping rules nested in grouping rules
    custom_properties: bool = False  # count var() inside --name: ... definitions
    private_prefix: str = PRIVATE_PREFIX
    label_separator: str = LABEL_SEPARATOR
    anchor_prefix: str = ANCHOR_PREFIX
