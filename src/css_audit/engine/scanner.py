"""Declaration scanner: map custom property references to context labels."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from css_audit.config import PRIVATE_PREFIX
from css_audit.model.rules import Declaration
from css_audit.model.usage import UsageMap


def scan(
    contexts: Sequence[str],
    declarations: Iterable[Declaration],
    *,
    private_prefix: str = PRIVATE_PREFIX,
    custom_properties: bool = False,
) -> UsageMap:
    """Return the custom properties referenced by *declarations*.

    Every label in *contexts* is appended once per reference, so a value
    that references ``--x`` twice yields each label twice.  Names starting
    with *private_prefix* are skipped.

    Custom property definitions (``--alias: var(--base)``) are skipped
    unless *custom_properties* is true.
    """
    usages: UsageMap = {}
    for declaration in declarations:
        if not declaration.is_unparsed:
            continue
        if declaration.is_custom_property and not custom_properties:
            continue
        for reference in declaration.references:
            if reference.name.startswith(private_prefix):
                continue
            usages.setdefault(reference.name, []).extend(contexts)
    return usages
