"""Audit run: read, parse, and walk stylesheets in order, then aggregate."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from css_audit.config import AuditConfig
from css_audit.engine.aggregator import UsageAggregator
from css_audit.engine.walker import RuleWalker, WarningSink
from css_audit.errors import StylesheetReadError
from css_audit.model.rules import Stylesheet
from css_audit.model.usage import UsageIndex
from css_audit.parser import parse_stylesheet

logger = logging.getLogger(__name__)


def load_stylesheet(path: str | Path) -> Stylesheet:
    """Read and parse the stylesheet at *path*.

    Raises :class:`StylesheetReadError` if the file cannot be read and
    :class:`~css_audit.errors.ParseError` if it cannot be parsed.
    """
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StylesheetReadError(str(path), cause=exc) from exc
    return parse_stylesheet(source, path=str(path))


def _walk_all(
    stylesheets: Iterable[Stylesheet],
    config: AuditConfig,
    on_warning: WarningSink | None,
) -> UsageIndex:
    aggregator = UsageAggregator(private_prefix=config.private_prefix)
    for stylesheet in stylesheets:
        walker = RuleWalker(
            recursive=config.recursive,
            on_warning=on_warning,
            source=stylesheet.path,
            private_prefix=config.private_prefix,
            separator=config.label_separator,
            custom_properties=config.custom_properties,
        )
        usages = walker.walk(stylesheet.rules)
        logger.info(
            "Walked %s: %d custom properties referenced",
            stylesheet.path or "<string>",
            len(usages),
        )
        aggregator.add(usages)
    return aggregator.finalize()


def audit_paths(
    paths: Iterable[str | Path],
    config: AuditConfig | None = None,
    on_warning: WarningSink | None = None,
) -> UsageIndex:
    """Audit the stylesheets at *paths*, strictly in the given order.

    The first unreadable or unparsable stylesheet aborts the whole run.
    """
    return _walk_all(
        (load_stylesheet(path) for path in paths), config or AuditConfig(), on_warning
    )


def audit_sources(
    sources: Iterable[str],
    config: AuditConfig | None = None,
    on_warning: WarningSink | None = None,
) -> UsageIndex:
    """Audit CSS source strings instead of files."""
    return _walk_all(
        (parse_stylesheet(source) for source in sources), config or AuditConfig(), on_warning
    )
