"""Usage aggregator: merge per-stylesheet usages into the final index."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from css_audit.config import PRIVATE_PREFIX
from css_audit.model.usage import PropertyUsage, UsageIndex, UsageMap, merge_usages

logger = logging.getLogger(__name__)


class UsageAggregator:
    """Accumulates usages across stylesheets and finalizes them once.

    Nothing is sorted or deduplicated until :meth:`finalize`, after which the
    aggregator rejects further input.
    """

    def __init__(self, *, private_prefix: str = PRIVATE_PREFIX) -> None:
        self.private_prefix = private_prefix
        self._usages: UsageMap = {}
        self._finalized = False

    def add(self, usages: Mapping[str, list[str]]) -> None:
        """Merge one stylesheet's usages into the running index."""
        if self._finalized:
            raise RuntimeError("UsageAggregator has already been finalized")
        merge_usages(self._usages, usages)

    def finalize(self) -> UsageIndex:
        """Sort and deduplicate every label set, then order entries by name."""
        if self._finalized:
            raise RuntimeError("UsageAggregator has already been finalized")
        self._finalized = True
        entries = tuple(
            PropertyUsage(name=name, labels=tuple(sorted(set(labels))))
            for name, labels in sorted(self._usages.items())
            if not name.startswith(self.private_prefix)
        )
        logger.debug("Finalized usage index with %d custom properties", len(entries))
        return UsageIndex(entries=entries)


def aggregate(
    mappings: Iterable[Mapping[str, list[str]]],
    *,
    private_prefix: str = PRIVATE_PREFIX,
) -> UsageIndex:
    """Merge *mappings* (one per stylesheet) and return the finalized index."""
    aggregator = UsageAggregator(private_prefix=private_prefix)
    for usages in mappings:
        aggregator.add(usages)
    return aggregator.finalize()
