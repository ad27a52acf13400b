"""Usage model: custom property name to the context labels that reference it."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

# Working form produced by the scanner and walker: labels may repeat and are
# kept in discovery order until the index is finalized.
UsageMap = dict[str, list[str]]


def merge_usages(target: UsageMap, source: Mapping[str, list[str]]) -> UsageMap:
    """Merge *source* into *target* in place and return *target*.

    New names are inserted; labels for an existing name are appended without
    deduplication.
    """
    for name, labels in source.items():
        if name not in target:
            target[name] = list(labels)
        else:
            target[name].extend(labels)
    return target


@dataclass(frozen=True)
class PropertyUsage:
    """One custom property and the sorted, unique labels that use it."""

    name: str
    labels: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.labels)


@dataclass(frozen=True)
class UsageIndex:
    """The finalized, immutable result of an audit run.

    Entries are ordered by property name; each entry's labels are sorted and
    unique.
    """

    entries: tuple[PropertyUsage, ...] = ()

    def __iter__(self) -> Iterator[PropertyUsage]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def get(self, name: str) -> PropertyUsage | None:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def to_dict(self) -> dict[str, list[str]]:
        return {entry.name: list(entry.labels) for entry in self.entries}
