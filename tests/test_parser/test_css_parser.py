"""Tests for the tinycss2-backed stylesheet parser."""

import pytest

from css_audit.model.rules import (
    ContainerRule,
    KeyframesRule,
    LayerBlockRule,
    MediaRule,
    RuleKind,
    StyleRule,
    SupportsRule,
    UnsupportedRule,
    VarReference,
)
from css_audit.parser import ParseError, parse_stylesheet


def _only_rule(source: str):
    sheet = parse_stylesheet(source)
    assert len(sheet.rules) == 1
    return sheet.rules[0]


# ---------------------------------------------------------------------------
# Style rules
# ---------------------------------------------------------------------------


class TestStyleRules:
    def test_single_selector(self) -> None:
        rule = _only_rule(".a { color: var(--x); }")
        assert isinstance(rule, StyleRule)
        assert rule.selectors == (".a",)

    def test_selector_list_is_split(self) -> None:
        rule = _only_rule(".a, .b > .c,\n  #d { color: red; }")
        assert rule.selectors == (".a", ".b > .c", "#d")

    def test_selector_whitespace_collapsed(self) -> None:
        rule = _only_rule("ul\n      li   a { color: red; }")
        assert rule.selectors == ("ul li a",)

    def test_quoted_string_in_selector_kept(self) -> None:
        rule = _only_rule('a[title="a  b"],\n  a[data-x="1   2"] { color: red; }')
        assert rule.selectors == ('a[title="a  b"]', 'a[data-x="1   2"]')

    def test_whitespace_collapsed_inside_functions(self) -> None:
        rule = _only_rule(".a:is(.b\n      .c) { color: red; }")
        assert rule.selectors == (".a:is(.b .c)",)

    def test_declaration_fields(self) -> None:
        rule = _only_rule(".a { color: var(--x) !important; }")
        (decl,) = rule.declarations
        assert decl.name == "color"
        assert decl.value == "var(--x)"
        assert decl.important is True
        assert decl.references == (VarReference(name="--x"),)

    def test_declaration_without_references(self) -> None:
        rule = _only_rule(".a { color: red; }")
        (decl,) = rule.declarations
        assert decl.references == ()
        assert decl.is_unparsed is False

    def test_source_position_recorded(self) -> None:
        sheet = parse_stylesheet("\n\n.a { color: red; }")
        assert sheet.rules[0].line == 3

    def test_comments_ignored(self) -> None:
        sheet = parse_stylesheet("/* header */ .a { /* c */ color: var(--x); }")
        assert len(sheet.rules) == 1
        assert sheet.rules[0].declarations[0].references[0].name == "--x"

    def test_path_kept_on_stylesheet(self) -> None:
        sheet = parse_stylesheet(".a { color: red; }", path="site.css")
        assert sheet.path == "site.css"


# ---------------------------------------------------------------------------
# var() references
# ---------------------------------------------------------------------------


class TestVarReferences:
    def _refs(self, value: str) -> list[VarReference]:
        rule = _only_rule(f".a {{ margin: {value}; }}")
        return list(rule.declarations[0].references)

    def test_multiple_references_in_order(self) -> None:
        refs = self._refs("var(--top) var(--side)")
        assert [r.name for r in refs] == ["--top", "--side"]

    def test_reference_inside_calc(self) -> None:
        refs = self._refs("calc(var(--gap) * 2)")
        assert [r.name for r in refs] == ["--gap"]

    def test_reference_inside_fallback(self) -> None:
        refs = self._refs("var(--a, var(--b))")
        assert [r.name for r in refs] == ["--a", "--b"]
        assert refs[0].fallback == "var(--b)"

    def test_fallback_with_commas(self) -> None:
        rule = _only_rule(".a { font-family: var(--font, Arial, sans-serif); }")
        (ref,) = rule.declarations[0].references
        assert ref.fallback == "Arial, sans-serif"

    def test_same_reference_twice(self) -> None:
        refs = self._refs("var(--x) var(--x)")
        assert [r.name for r in refs] == ["--x", "--x"]

    def test_whitespace_inside_var(self) -> None:
        refs = self._refs("var( --spaced )")
        assert [r.name for r in refs] == ["--spaced"]

    def test_malformed_var_ignored(self) -> None:
        assert self._refs("var(notcustom)") == []

    def test_custom_property_definition_keeps_references(self) -> None:
        rule = _only_rule(":root { --accent: var(--brand); }")
        assert [r.name for r in rule.declarations[0].references] == ["--brand"]


# ---------------------------------------------------------------------------
# Grouping rules
# ---------------------------------------------------------------------------


class TestGroupingRules:
    def test_media(self) -> None:
        rule = _only_rule("@media (min-width: 40rem) { .a { width: var(--w); } }")
        assert isinstance(rule, MediaRule)
        assert rule.condition == "(min-width: 40rem)"
        assert rule.prefix == "@media (min-width: 40rem)"
        assert isinstance(rule.rules[0], StyleRule)

    def test_media_query_list(self) -> None:
        rule = _only_rule("@media screen and (max-width: 600px) { .a { color: red; } }")
        assert rule.prefix == "@media screen and (max-width: 600px)"

    def test_supports(self) -> None:
        rule = _only_rule("@supports (display: grid) { .a { color: red; } }")
        assert isinstance(rule, SupportsRule)
        assert rule.prefix == "@supports (display: grid)"

    def test_container(self) -> None:
        rule = _only_rule("@container sidebar (min-width: 400px) { .a { color: red; } }")
        assert isinstance(rule, ContainerRule)
        assert rule.prefix == "@container sidebar (min-width: 400px)"

    def test_named_layer(self) -> None:
        rule = _only_rule("@layer base { .a { color: red; } }")
        assert isinstance(rule, LayerBlockRule)
        assert rule.name == "base"
        assert rule.prefix == "@layer base"

    def test_anonymous_layer(self) -> None:
        rule = _only_rule("@layer { .a { color: red; } }")
        assert rule.name is None
        assert rule.prefix == "@layer"

    def test_layer_statement_produces_no_rule(self) -> None:
        sheet = parse_stylesheet("@layer reset, base;")
        assert sheet.rules == ()

    def test_nested_grouping_kept(self) -> None:
        rule = _only_rule("@media print { @supports (display: grid) { .a { color: red; } } }")
        assert isinstance(rule.rules[0], SupportsRule)


# ---------------------------------------------------------------------------
# Keyframes
# ---------------------------------------------------------------------------


class TestKeyframes:
    def test_ident_name(self) -> None:
        rule = _only_rule(
            "@keyframes spin { from { opacity: var(--o); } to { opacity: 1; } }"
        )
        assert isinstance(rule, KeyframesRule)
        assert rule.name == "spin"
        assert rule.prefix == "@keyframes spin"
        assert [step.selectors for step in rule.steps] == [("from",), ("to",)]

    def test_string_name_unquoted(self) -> None:
        rule = _only_rule('@keyframes "fade in" { 0% { opacity: 0; } }')
        assert rule.prefix == "@keyframes fade in"

    def test_step_selector_list(self) -> None:
        rule = _only_rule("@keyframes pulse { 0%, 100% { opacity: 1; } }")
        assert rule.steps[0].selectors == ("0%", "100%")

    def test_vendor_prefixed(self) -> None:
        rule = _only_rule("@-webkit-keyframes spin { from { opacity: 0; } }")
        assert isinstance(rule, KeyframesRule)
        assert rule.name == "spin"


# ---------------------------------------------------------------------------
# Unsupported and ignored rules
# ---------------------------------------------------------------------------


class TestUnsupportedRules:
    @pytest.mark.parametrize(
        "source, kind",
        [
            ("@scope (.card) { .title { color: var(--x); } }", RuleKind.SCOPE),
            ("@starting-style { .a { opacity: var(--o); } }", RuleKind.STARTING_STYLE),
            (
                "@property --x { syntax: '<length>'; inherits: false; initial-value: 0px; }",
                RuleKind.PROPERTY,
            ),
            ("@custom-media --narrow (max-width: 30em);", RuleKind.CUSTOM_MEDIA),
        ],
    )
    def test_kind(self, source: str, kind: RuleKind) -> None:
        rule = _only_rule(source)
        assert isinstance(rule, UnsupportedRule)
        assert rule.kind is kind

    def test_describe_includes_prelude(self) -> None:
        rule = _only_rule("@scope (.card) { .title { color: red; } }")
        assert rule.describe() == "@scope is not supported: (.card)"

    def test_nested_style_rule_recorded(self) -> None:
        rule = _only_rule(".a { color: var(--x); &:hover { color: var(--y); } }")
        assert [d.name for d in rule.declarations] == ["color"]
        (nested,) = rule.rules
        assert nested.kind is RuleKind.NESTING
        assert nested.prelude == "&:hover"

    def test_nested_at_rule_recorded(self) -> None:
        rule = _only_rule(".a { @media print { color: var(--y); } }")
        (nested,) = rule.rules
        assert nested.kind is RuleKind.NESTING
        assert nested.prelude == "@media print"

    def test_unsupported_kind_validated(self) -> None:
        with pytest.raises(ValueError):
            UnsupportedRule(unsupported_kind=RuleKind.MEDIA)

    def test_other_at_rules_dropped(self) -> None:
        sheet = parse_stylesheet(
            '@charset "utf-8";\n'
            '@import url("base.css");\n'
            '@font-face { font-family: "X"; src: url(x.woff2); }\n'
            ".a { color: red; }"
        )
        assert len(sheet.rules) == 1
        assert isinstance(sheet.rules[0], StyleRule)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_qualified_rule_without_block(self) -> None:
        with pytest.raises(ParseError):
            parse_stylesheet(".a { color: red; }\n.b")

    def test_invalid_declaration(self) -> None:
        with pytest.raises(ParseError):
            parse_stylesheet(".a { color red; }")

    def test_grouping_rule_without_block(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet("@media screen;")
        assert "@media" in str(exc_info.value)

    def test_keyframes_without_name(self) -> None:
        with pytest.raises(ParseError):
            parse_stylesheet("@keyframes { from { opacity: 0; } }")

    def test_error_carries_location(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet("@media screen;", path="bad.css")
        err = exc_info.value
        assert err.path == "bad.css"
        assert err.line == 1
        assert str(err).startswith("bad.css:1:")


class TestEmptyStylesheet:
    def test_empty_string(self) -> None:
        assert parse_stylesheet("").rules == ()

    def test_whitespace_only(self) -> None:
        assert parse_stylesheet("   \n\t  ").rules == ()
