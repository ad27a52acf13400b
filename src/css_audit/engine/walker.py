"""Rule walker: dispatch over the rule taxonomy and collect usages.

Each supported rule kind contributes context labels:

    StyleRule       one label per selector
    KeyframesRule   "@keyframes <name>" for every step
    Media/Supports/
    Container/Layer "<at-rule prefix><separator><selector>" for nested style rules

Unsupported kinds are reported through the warning sink and skipped.

By default only style rules directly inside a grouping rule are scanned, so
``@media X { @supports Y { .a {} } }`` contributes nothing.  With
``recursive=True`` the walker descends through any depth of grouping rules and
joins every enclosing prefix into the label.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Callable

from css_audit.config import LABEL_SEPARATOR, PRIVATE_PREFIX
from css_audit.engine.scanner import scan
from css_audit.model.diagnostic import Diagnostic, Severity
from css_audit.model.rules import (
    GroupingRule,
    KeyframesRule,
    LayerBlockRule,
    Rule,
    RuleKind,
    StyleRule,
    UnsupportedRule,
)
from css_audit.model.usage import UsageMap, merge_usages

logger = logging.getLogger(__name__)

WarningSink = Callable[[Diagnostic], None]

# Every RuleKind must map to a handler method; checked below at import time.
_HANDLERS: dict[RuleKind, str] = {
    RuleKind.STYLE: "_walk_style",
    RuleKind.KEYFRAMES: "_walk_keyframes",
    RuleKind.MEDIA: "_walk_grouping",
    RuleKind.SUPPORTS: "_walk_grouping",
    RuleKind.CONTAINER: "_walk_grouping",
    RuleKind.LAYER_BLOCK: "_walk_grouping",
    RuleKind.CUSTOM_MEDIA: "_report_unsupported",
    RuleKind.SCOPE: "_report_unsupported",
    RuleKind.NESTING: "_report_unsupported",
    RuleKind.STARTING_STYLE: "_report_unsupported",
    RuleKind.PROPERTY: "_report_unsupported",
}


def _log_warning(diagnostic: Diagnostic) -> None:
    logger.warning("%s", diagnostic)


class RuleWalker:
    """Walks the rules of one stylesheet and returns a UsageMap."""

    def __init__(
        self,
        *,
        recursive: bool = False,
        on_warning: WarningSink | None = None,
        source: str | None = None,
        private_prefix: str = PRIVATE_PREFIX,
        separator: str = LABEL_SEPARATOR,
        custom_properties: bool = False,
    ) -> None:
        self.recursive = recursive
        self.on_warning = on_warning or _log_warning
        self.source = source
        self.private_prefix = private_prefix
        self.separator = separator
        self.custom_properties = custom_properties

    def walk(self, rules: Iterable[Rule], prefixes: Sequence[str] = ()) -> UsageMap:
        """Collect usages from *rules*, labelled under the enclosing *prefixes*."""
        usages: UsageMap = {}
        for rule in rules:
            handler = getattr(self, _HANDLERS[rule.kind])
            merge_usages(usages, handler(rule, tuple(prefixes)))
        return usages

    def label(self, prefixes: Sequence[str], text: str) -> str:
        return self.separator.join([*prefixes, text])

    def _scan(self, contexts: Sequence[str], declarations) -> UsageMap:
        return scan(
            contexts,
            declarations,
            private_prefix=self.private_prefix,
            custom_properties=self.custom_properties,
        )

    # -- handlers -------------------------------------------------------------

    def _walk_style(self, rule: StyleRule, prefixes: tuple[str, ...]) -> UsageMap:
        contexts = [self.label(prefixes, selector) for selector in rule.selectors]
        usages = self._scan(contexts, rule.declarations)
        # Rules nested inside a style rule are only reported.
        for nested in rule.rules:
            self._report_unsupported(nested, prefixes)
        return usages

    def _walk_keyframes(self, rule: KeyframesRule, prefixes: tuple[str, ...]) -> UsageMap:
        contexts = [self.label(prefixes, rule.prefix)]
        usages: UsageMap = {}
        for step in rule.steps:
            merge_usages(usages, self._scan(contexts, step.declarations))
        return usages

    def _walk_grouping(
        self, rule: GroupingRule | LayerBlockRule, prefixes: tuple[str, ...]
    ) -> UsageMap:
        inner = (*prefixes, rule.prefix)
        if self.recursive:
            return self.walk(rule.rules, inner)

        usages: UsageMap = {}
        for nested in rule.rules:
            if nested.kind is not RuleKind.STYLE:
                logger.debug(
                    "Not descending into %s rule inside %r", nested.kind.value, rule.prefix
                )
                continue
            merge_usages(usages, self._walk_style(nested, inner))
        return usages

    def _report_unsupported(self, rule: UnsupportedRule, prefixes: tuple[str, ...]) -> UsageMap:
        message = rule.describe()
        if prefixes:
            message = f"{message} (inside {' '.join(prefixes)})"
        self.on_warning(
            Diagnostic(
                rule="unsupported-rule",
                severity=Severity.WARNING,
                message=message,
                source=self.source,
                line=rule.line or None,
                column=rule.column or None,
            )
        )
        return {}


_missing = [kind.value for kind in RuleKind if kind not in _HANDLERS]
if _missing:
    raise RuntimeError(f"RuleWalker has no handler for rule kind(s): {', '.join(_missing)}")
for _name in set(_HANDLERS.values()):
    if not callable(getattr(RuleWalker, _name, None)):
        raise RuntimeError(f"RuleWalker handler {_name!r} is not defined")


def walk(
    rules: Iterable[Rule],
    *,
    recursive: bool = False,
    on_warning: WarningSink | None = None,
    source: str | None = None,
    private_prefix: str = PRIVATE_PREFIX,
    separator: str = LABEL_SEPARATOR,
    custom_properties: bool = False,
) -> UsageMap:
    """Walk *rules* once and return the usages they contain."""
    walker = RuleWalker(
        recursive=recursive,
        on_warning=on_warning,
        source=source,
        private_prefix=private_prefix,
        separator=separator,
        custom_properties=custom_properties,
    )
    return walker.walk(rules)
