# Copyright (c) 2024 PantherianCodeX
"""Render aggregated warning tables as plain text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from warnsum.core.model_types import REPORT_SECTION_ORDER, TotalPolicy

if TYPE_CHECKING:
    from warnsum.aggregate import CountView, SummarySnapshot


def _count_width(table: CountView[str]) -> int:
    return len(str(table.sum())) if len(table) else 1


def render_table(
    title: str,
    table: CountView[str],
    policy: TotalPolicy,
    *,
    top_n: int = 0,
) -> str:
    """Render one report section.

    Counts are right-aligned to the width of the table's summed count. With a
    positive ``top_n`` the remaining rows collapse into a ``(+N more items)``
    line; the ``Total`` row always covers the whole table.
    """
    rows = table.most_common()
    shown = rows if top_n <= 0 else rows[:top_n]
    width = _count_width(table)
    lines = [f"{title}:"]
    lines.extend(f"{count:>{width}}  {key}" for key, count in shown)
    hidden = len(rows) - len(shown)
    if hidden:
        lines.append(f"{'':>{width}}  (+{hidden} more items)")
    lines.append(f"{table.total(policy):>{width}}  Total")
    return "\n".join(lines)


def render_report(snapshot: SummarySnapshot, *, top_n: int = 0) -> str:
    """Render every section in display order, separated by blank lines."""
    sections = [
        render_table(section.value, snapshot.table(section), section.total_policy, top_n=top_n)
        for section in REPORT_SECTION_ORDER
    ]
    return "\n\n".join(sections)


__all__ = ["render_report", "render_table"]
