# Copyright (c) 2024 PantherianCodeX

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Self

from warnsum.core.model_types import ReportSection, TotalPolicy
from warnsum.core.type_aliases import DirectoryKey, FileKey, FlagName, Keyword
from warnsum.keywords import KeywordExtractor
from warnsum.paths import decompose_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from warnsum.core.types import WarningRecord


class CountView[K: str](Protocol):
    """Read-only view of a frequency table, as consumed by the report renderer."""

    def most_common(self) -> list[tuple[K, int]]: ...

    def sum(self) -> int: ...

    def total(self, policy: TotalPolicy) -> int: ...

    def __len__(self) -> int: ...


class FrequencyTable[K: str]:
    """Occurrence counts keyed by string, enumerated by descending count."""

    __slots__ = ("_counts",)

    def __init__(self, items: Iterable[K] = ()) -> None:
        super().__init__()
        self._counts: Counter[K] = Counter(items)

    def add(self, key: K, count: int = 1) -> None:
        if count < 1:
            raise ValueError(f"count must be positive (got {count})")
        self._counts[key] += count

    def update(self, keys: Iterable[K]) -> None:
        for key in keys:
            self.add(key)

    def count(self, key: K) -> int:
        return self._counts.get(key, 0)

    def most_common(self) -> list[tuple[K, int]]:
        # Ties fall back to the key so output is stable across runs.
        return sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))

    def sum(self) -> int:
        return sum(self._counts.values())

    def distinct(self) -> int:
        return len(self._counts)

    def total(self, policy: TotalPolicy) -> int:
        if policy is TotalPolicy.SUM:
            return self.sum()
        return self.distinct()

    def as_dict(self) -> dict[K, int]:
        return dict(self._counts)

    def copy(self) -> FrequencyTable[K]:
        clone: FrequencyTable[K] = FrequencyTable()
        clone._counts = Counter(self._counts)
        return clone

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[K]:
        return iter(self._counts)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FrequencyTable):
            return self._counts == other._counts
        return NotImplemented

    def __repr__(self) -> str:
        return f"FrequencyTable({dict(self.most_common())!r})"


@dataclass(frozen=True, slots=True)
class SummarySnapshot:
    """Point-in-time copy of the aggregated tables, ready for rendering."""

    total: int
    flags: FrequencyTable[FlagName]
    files: FrequencyTable[FileKey]
    directories: FrequencyTable[DirectoryKey]
    keywords: FrequencyTable[Keyword]

    def table(self, section: ReportSection) -> CountView[str]:
        match section:
            case ReportSection.WARNINGS:
                return self.flags
            case ReportSection.FILES:
                return self.files
            case ReportSection.DIRECTORIES:
                return self.directories
            case ReportSection.KEYWORDS:
                return self.keywords

    def section_total(self, section: ReportSection) -> int:
        return self.table(section).total(section.total_policy)


class Aggregator:
    """Fold warning records into the four report tables."""

    __slots__ = ("_directories", "_extractor", "_files", "_flags", "_keywords", "_total")

    def __init__(self, extractor: KeywordExtractor | None = None) -> None:
        super().__init__()
        self._extractor = extractor or KeywordExtractor()
        self._total = 0
        self._flags: FrequencyTable[FlagName] = FrequencyTable()
        self._files: FrequencyTable[FileKey] = FrequencyTable()
        self._directories: FrequencyTable[DirectoryKey] = FrequencyTable()
        self._keywords: FrequencyTable[Keyword] = FrequencyTable()

    @classmethod
    def from_records(
        cls,
        records: Iterable[WarningRecord],
        *,
        extractor: KeywordExtractor | None = None,
    ) -> Self:
        aggregator = cls(extractor)
        for record in records:
            aggregator.record(record)
        return aggregator

    @property
    def total(self) -> int:
        return self._total

    def record(self, record: WarningRecord) -> None:
        directory_key, file_key = decompose_path(record.file_path)
        self._total += 1
        self._flags.add(record.flag_name)
        self._files.add(file_key)
        self._directories.add(directory_key)
        self._keywords.update(self._extractor.extract(record.message))

    def snapshot(self) -> SummarySnapshot:
        return SummarySnapshot(
            total=self._total,
            flags=self._flags.copy(),
            files=self._files.copy(),
            directories=self._directories.copy(),
            keywords=self._keywords.copy(),
        )


__all__ = ["Aggregator", "CountView", "FrequencyTable", "SummarySnapshot"]
