# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "flag_names",
    "log_blocks",
    "messages",
    "noise_lines",
    "source_paths",
    "warning_blocks",
]

_SEGMENT = st.from_regex(r"[a-z][a-z0-9_]{0,7}", fullmatch=True)
_WORD = st.from_regex(r"[a-z]{1,10}", fullmatch=True)


def source_paths() -> st.SearchStrategy[str]:
    """Return a strategy that yields POSIX-like source file paths."""
    return st.builds(
        lambda parts, stem, ext: "/".join([*parts, f"{stem}.{ext}"]),
        st.lists(_SEGMENT, min_size=0, max_size=3),
        _SEGMENT,
        st.sampled_from(["c", "cpp", "h", "f90"]),
    )


def flag_names() -> st.SearchStrategy[str]:
    return st.lists(_WORD, min_size=1, max_size=3).map("-".join)


def messages() -> st.SearchStrategy[str]:
    return st.lists(_WORD, min_size=1, max_size=6).map(" ".join)


def noise_lines() -> st.SearchStrategy[str]:
    """Lines a compiler prints around warnings that must never match."""
    return st.one_of(
        source_paths().map(lambda path: f"{path}: In function ‘func’:"),
        st.integers(min_value=1, max_value=9999).map(lambda n: f"{n:>5} |     x = y;"),
        st.just("      |     ^~~~"),
        source_paths().map(lambda path: f"{path}:3:4: error: broken [-Wbroken]"),
        source_paths().map(lambda path: f"{path}:3:4: note: declared here"),
    )


def warning_blocks() -> st.SearchStrategy[list[str]]:
    """A warning line followed by the context lines that accompany it."""
    warning = st.builds(
        lambda path, line, column, message, flag: (
            f"{path}:{line}:{column}: warning: {message} [-W{flag}]"
        ),
        source_paths(),
        st.integers(min_value=1, max_value=99999),
        st.integers(min_value=1, max_value=999),
        messages(),
        flag_names(),
    )
    return st.builds(
        lambda head, tail: [head, *tail],
        warning,
        st.lists(noise_lines(), max_size=3),
    )


def log_blocks(max_size: int = 12) -> st.SearchStrategy[list[list[str]]]:
    return st.lists(warning_blocks(), max_size=max_size)
