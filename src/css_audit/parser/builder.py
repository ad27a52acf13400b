"""Build the rule taxonomy from tinycss2's generic CSS syntax tree."""

from __future__ import annotations

import logging

import tinycss2

from css_audit.errors import ParseError
from css_audit.model.rules import (
    ContainerRule,
    Declaration,
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
)
from css_audit.parser.values import find_var_references, serialize, significant, split_on_commas

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)

_GROUPING_RULES = {
    "media": MediaRule,
    "supports": SupportsRule,
    "container": ContainerRule,
}

_KEYFRAMES_KEYWORDS = frozenset({
    "keyframes",
    "-webkit-keyframes",
    "-moz-keyframes",
    "-o-keyframes",
})

_UNSUPPORTED_RULES: dict[str, RuleKind] = {
    "custom-media": RuleKind.CUSTOM_MEDIA,
    "scope": RuleKind.SCOPE,
    "nest": RuleKind.NESTING,
    "starting-style": RuleKind.STARTING_STYLE,
    "property": RuleKind.PROPERTY,
}


class _Builder:
    """Converts tinycss2 nodes for a single source into Rule objects."""

    def __init__(self, path: str | None) -> None:
        self.path = path

    def fail(self, message: str, node) -> ParseError:
        return ParseError(
            message, line=node.source_line, column=node.source_column, path=self.path
        )

    # -- rule lists -----------------------------------------------------------

    def rules(self, nodes) -> tuple[Rule, ...]:
        built: list[Rule] = []
        for node in nodes:
            if node.type == "error":
                raise self.fail(node.message, node)
            if node.type == "qualified-rule":
                built.append(self.style_rule(node))
            elif node.type == "at-rule":
                rule = self.at_rule(node)
                if rule is not None:
                    built.append(rule)
        return tuple(built)

    def nested_rules(self, node) -> tuple[Rule, ...]:
        if node.content is None:
            raise self.fail(f"Expected a block after @{node.at_keyword}", node)
        return self.rules(
            tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
        )

    # -- individual rules -----------------------------------------------------

    def style_rule(self, node) -> StyleRule:
        selectors = self.selectors(node)
        declarations, nested = self.block(node.content)
        return StyleRule(
            selectors=selectors,
            declarations=declarations,
            rules=tuple(self.nested_placeholder(child) for child in nested),
            line=node.source_line,
            column=node.source_column,
        )

    def nested_placeholder(self, node) -> UnsupportedRule:
        """Record a rule nested inside a style rule without reading its body."""
        prelude = serialize(node.prelude)
        if node.type == "at-rule":
            prelude = f"@{node.at_keyword} {prelude}".rstrip()
        return UnsupportedRule(
            unsupported_kind=RuleKind.NESTING,
            prelude=prelude,
            line=node.source_line,
            column=node.source_column,
        )

    def at_rule(self, node) -> Rule | None:
        keyword = node.lower_at_keyword
        if keyword in _GROUPING_RULES:
            return _GROUPING_RULES[keyword](
                condition=serialize(node.prelude),
                rules=self.nested_rules(node),
                line=node.source_line,
                column=node.source_column,
            )
        if keyword == "layer":
            if node.content is None:
                # "@layer a, b;" only declares layer order
                return None
            return LayerBlockRule(
                name=serialize(node.prelude) or None,
                rules=self.nested_rules(node),
                line=node.source_line,
                column=node.source_column,
            )
        if keyword in _KEYFRAMES_KEYWORDS:
            return self.keyframes_rule(node)
        if keyword in _UNSUPPORTED_RULES:
            return UnsupportedRule(
                unsupported_kind=_UNSUPPORTED_RULES[keyword],
                prelude=serialize(node.prelude),
                line=node.source_line,
                column=node.source_column,
            )
        logger.debug("Skipping @%s rule at %s:%d", keyword, self.path or "<string>", node.source_line)
        return None

    def keyframes_rule(self, node) -> KeyframesRule:
        name_tokens = significant(node.prelude)
        if not name_tokens:
            raise self.fail("Expected a name after @keyframes", node)
        if len(name_tokens) == 1 and name_tokens[0].type in ("ident", "string"):
            name = name_tokens[0].value
        else:
            name = serialize(node.prelude)
        if node.content is None:
            raise self.fail(f"Expected a block after @keyframes {name}", node)

        steps: list[KeyframeStep] = []
        for step in tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True):
            if step.type == "error":
                raise self.fail(step.message, step)
            if step.type != "qualified-rule":
                raise self.fail(f"Unexpected @{step.at_keyword} in @keyframes {name}", step)
            declarations, _ = self.block(step.content)
            steps.append(KeyframeStep(selectors=self.selectors(step), declarations=declarations))
        return KeyframesRule(
            name=name, steps=tuple(steps), line=node.source_line, column=node.source_column
        )

    # -- preludes and blocks --------------------------------------------------

    def selectors(self, node) -> tuple[str, ...]:
        selectors = tuple(serialize(group) for group in split_on_commas(node.prelude))
        if not all(selectors):
            raise self.fail("Expected a selector", node)
        return selectors

    def block(self, content) -> tuple[tuple[Declaration, ...], list]:
        """Split a block into its declarations and any nested rule nodes."""
        declarations: list[Declaration] = []
        nested: list = []
        items = tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)
        for item in items:
            if item.type == "error":
                raise self.fail(item.message, item)
            if item.type == "declaration":
                declarations.append(
                    Declaration(
                        name=item.name,
                        value=serialize(item.value),
                        references=tuple(find_var_references(item.value)),
                        important=item.important,
                    )
                )
            else:
                nested.append(item)
        return tuple(declarations), nested


def parse_stylesheet(source: str, *, path: str | None = None) -> Stylesheet:
    """Parse CSS *source* into a Stylesheet of top-level rules.

    Raises :class:`ParseError` on the first syntax error. At-rules outside
    the rule taxonomy (@import, @font-face, ...) are dropped.
    """
    nodes = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    rules = _Builder(path).rules(nodes)
    logger.debug("Parsed %d top-level rules from %s", len(rules), path or "<string>")
    return Stylesheet(rules=rules, path=path)
