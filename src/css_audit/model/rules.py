"""Rule taxonomy: the parsed form of a stylesheet the walker dispatches over."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class RuleKind(Enum):
    """Closed set of rule variants produced by the parser."""

    STYLE = "style"
    KEYFRAMES = "keyframes"
    MEDIA = "media"
    SUPPORTS = "supports"
    CONTAINER = "container"
    LAYER_BLOCK = "layer-block"
    # Reported and skipped
    CUSTOM_MEDIA = "custom-media"
    SCOPE = "scope"
    NESTING = "nesting"
    STARTING_STYLE = "starting-style"
    PROPERTY = "property"


UNSUPPORTED_KINDS = frozenset({
    RuleKind.CUSTOM_MEDIA,
    RuleKind.SCOPE,
    RuleKind.NESTING,
    RuleKind.STARTING_STYLE,
    RuleKind.PROPERTY,
})

# Display names used in warnings, e.g. "@scope is not supported".
UNSUPPORTED_LABELS: dict[RuleKind, str] = {
    RuleKind.CUSTOM_MEDIA: "@custom-media",
    RuleKind.SCOPE: "@scope",
    RuleKind.NESTING: "nesting",
    RuleKind.STARTING_STYLE: "@starting-style",
    RuleKind.PROPERTY: "@property",
}


@dataclass(frozen=True)
class VarReference:
    """A single ``var()`` reference found in a declaration value."""

    name: str  # "--brand-color"
    fallback: str | None = None


@dataclass(frozen=True)
class Declaration:
    """A property declaration with its raw value text.

    ``references`` holds every ``var()`` reference in the value, in source
    order, including those nested in other functions or in fallbacks.  A
    declaration without references is fully resolved and carries nothing of
    interest to the audit.
    """

    name: str
    value: str
    references: tuple[VarReference, ...] = ()
    important: bool = False

    @property
    def is_unparsed(self) -> bool:
        return bool(self.references)

    @property
    def is_custom_property(self) -> bool:
        """True for a custom property definition such as ``--accent: ...``."""
        return self.name.startswith("--")


@dataclass(frozen=True)
class StyleRule:
    """A plain style rule: ``.a, .b { color: var(--x); }``."""

    kind: ClassVar[RuleKind] = RuleKind.STYLE

    selectors: tuple[str, ...]
    declarations: tuple[Declaration, ...] = ()
    rules: tuple[UnsupportedRule, ...] = ()  # nested rules (CSS nesting)
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class KeyframeStep:
    """One step of a keyframes rule: ``from``, ``50%``, ``to``."""

    selectors: tuple[str, ...]
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True)
class KeyframesRule:
    kind: ClassVar[RuleKind] = RuleKind.KEYFRAMES

    name: str
    steps: tuple[KeyframeStep, ...] = ()
    line: int = 0
    column: int = 0

    @property
    def prefix(self) -> str:
        return f"@keyframes {self.name}"


@dataclass(frozen=True)
class GroupingRule:
    """Base for conditional/grouping rules that wrap other rules."""

    at_keyword: ClassVar[str] = ""

    condition: str
    rules: tuple[Rule, ...] = ()
    line: int = 0
    column: int = 0

    @property
    def prefix(self) -> str:
        if not self.condition:
            return f"@{self.at_keyword}"
        return f"@{self.at_keyword} {self.condition}"


@dataclass(frozen=True)
class MediaRule(GroupingRule):
    kind: ClassVar[RuleKind] = RuleKind.MEDIA
    at_keyword: ClassVar[str] = "media"


@dataclass(frozen=True)
class SupportsRule(GroupingRule):
    kind: ClassVar[RuleKind] = RuleKind.SUPPORTS
    at_keyword: ClassVar[str] = "supports"


@dataclass(frozen=True)
class ContainerRule(GroupingRule):
    kind: ClassVar[RuleKind] = RuleKind.CONTAINER
    at_keyword: ClassVar[str] = "container"


@dataclass(frozen=True)
class LayerBlockRule:
    """``@layer name { ... }``; ``name`` is None for an anonymous layer."""

    kind: ClassVar[RuleKind] = RuleKind.LAYER_BLOCK

    name: str | None
    rules: tuple[Rule, ...] = ()
    line: int = 0
    column: int = 0

    @property
    def prefix(self) -> str:
        return f"@layer {self.name}" if self.name else "@layer"


@dataclass(frozen=True)
class UnsupportedRule:
    """A rule the audit recognises but does not look inside."""

    unsupported_kind: RuleKind
    prelude: str = ""
    line: int = 0
    column: int = 0

    def __post_init__(self) -> None:
        if self.unsupported_kind not in UNSUPPORTED_KINDS:
            raise ValueError(f"{self.unsupported_kind} is not an unsupported rule kind")

    @property
    def kind(self) -> RuleKind:
        return self.unsupported_kind

    def describe(self) -> str:
        """Warning text, e.g. ``@scope is not supported: (.card)``."""
        message = f"{UNSUPPORTED_LABELS[self.unsupported_kind]} is not supported"
        return f"{message}: {self.prelude}" if self.prelude else message


Rule = Union[
    StyleRule,
    KeyframesRule,
    MediaRule,
    SupportsRule,
    ContainerRule,
    LayerBlockRule,
    UnsupportedRule,
]


@dataclass(frozen=True)
class Stylesheet:
    """An ordered sequence of top-level rules parsed from one source."""

    rules: tuple[Rule, ...] = ()
    path: str | None = None
