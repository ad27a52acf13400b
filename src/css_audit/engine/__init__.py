"""Audit engine: declaration scanner, rule walker, and usage aggregator."""

from css_audit.engine.aggregator import UsageAggregator, aggregate
from css_audit.engine.scanner import scan
from css_audit.engine.walker import RuleWalker, WarningSink, walk

__all__ = [
    "scan",
    "walk",
    "RuleWalker",
    "WarningSink",
    "UsageAggregator",
    "aggregate",
]
