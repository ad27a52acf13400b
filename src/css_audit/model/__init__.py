"""Model layer: rule taxonomy, diagnostics, and the usage index."""

from css_audit.model.diagnostic import Diagnostic, Severity
from css_audit.model.rules import (
    ContainerRule,
    Declaration,
    GroupingRule,
    KeyframeStep,
    KeyframesRule,
    LayerBlockRule,
    MediaRule,
    Rule,
    RuleKind,
    StyleRule,
    Stylesheet,
    SupportsRule,
    UnsupportedRule,
    VarReference,
)
from css_audit.model.usage import PropertyUsage, UsageIndex, UsageMap, merge_usages

__all__ = [
    # rules
    "RuleKind",
    "Rule",
    "Stylesheet",
    "StyleRule",
    "KeyframesRule",
    "KeyframeStep",
    "GroupingRule",
    "MediaRule",
    "SupportsRule",
    "ContainerRule",
    "LayerBlockRule",
    "UnsupportedRule",
    "Declaration",
    "VarReference",
    # diagnostic
    "Severity",
    "Diagnostic",
    # usage
    "UsageMap",
    "PropertyUsage",
    "UsageIndex",
    "merge_usages",
]
