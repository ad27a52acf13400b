"""Helpers over tinycss2 component values: serialization and var() lookup."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import tinycss2
from tinycss2.ast import (
    CurlyBracketsBlock,
    FunctionBlock,
    ParenthesesBlock,
    SquareBracketsBlock,
    WhitespaceToken,
)

from css_audit.model.rules import VarReference

__all__ = ["find_var_references", "serialize", "significant", "split_on_commas"]

_BLOCK_CLASSES = {
    "() block": ParenthesesBlock,
    "[] block": SquareBracketsBlock,
    "{} block": CurlyBracketsBlock,
}
_INSIGNIFICANT = frozenset({"whitespace", "comment"})


def significant(nodes: Iterable) -> list:
    """Return *nodes* without whitespace and comment tokens."""
    return [node for node in nodes if node.type not in _INSIGNIFICANT]


def _collapse_whitespace(nodes: Iterable) -> list:
    """Drop comments and replace each whitespace run with a single space token.

    Functions and blocks are rebuilt with collapsed contents; string tokens
    are left as written.
    """
    collapsed: list = []
    for node in nodes:
        if node.type == "comment":
            continue
        if node.type == "whitespace":
            if not collapsed or collapsed[-1].type != "whitespace":
                collapsed.append(WhitespaceToken(node.source_line, node.source_column, " "))
            continue
        if node.type == "function":
            node = FunctionBlock(
                node.source_line,
                node.source_column,
                node.name,
                _collapse_whitespace(node.arguments),
            )
        elif node.type in _BLOCK_CLASSES:
            node = _BLOCK_CLASSES[node.type](
                node.source_line, node.source_column, _collapse_whitespace(node.content)
            )
        collapsed.append(node)
    return collapsed


def serialize(nodes: Iterable) -> str:
    """Serialize component values to canonical single-line CSS text.

    Comments are dropped, runs of whitespace collapse to one space and
    leading or trailing whitespace is trimmed.
    """
    tokens = _collapse_whitespace(nodes)
    if tokens and tokens[0].type == "whitespace":
        tokens = tokens[1:]
    if tokens and tokens[-1].type == "whitespace":
        tokens = tokens[:-1]
    return tinycss2.serialize(tokens)


def split_on_commas(nodes: Sequence) -> list[list]:
    """Split a component value list at top-level ``,`` tokens."""
    groups: list[list] = [[]]
    for node in nodes:
        if node.type == "literal" and node.value == ",":
            groups.append([])
        else:
            groups[-1].append(node)
    return groups


def _var_reference(function) -> VarReference | None:
    """Build a reference from a ``var()`` function block, if well formed."""
    groups = split_on_commas(function.arguments)
    head = significant(groups[0])
    if len(head) != 1 or head[0].type != "ident" or not head[0].value.startswith("--"):
        return None
    fallback = None
    if len(groups) > 1:
        # The fallback may itself contain commas: var(--font, Arial, sans-serif)
        rest = function.arguments[len(groups[0]) + 1:]
        fallback = serialize(rest)
    return VarReference(name=head[0].value, fallback=fallback)


def find_var_references(nodes: Iterable) -> list[VarReference]:
    """Return every ``var()`` reference in *nodes*, in source order.

    Descends into function arguments and simple blocks, so references inside
    ``calc()`` or inside another reference's fallback are found too.
    """
    references: list[VarReference] = []
    for node in nodes:
        if node.type == "function":
            if node.lower_name == "var":
                reference = _var_reference(node)
                if reference is not None:
                    references.append(reference)
            references.extend(find_var_references(node.arguments))
        elif node.type in _BLOCK_CLASSES:
            references.extend(find_var_references(node.content))
    return references
