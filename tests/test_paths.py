# Copyright (c) 2024 PantherianCodeX

from __future__ import annotations

import pytest

from warnsum.paths import ROOT_DIRECTORY, decompose_path

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("file_path", "directory"),
    [
        ("/path/to/dir1/file1.c", "/path/to/dir1"),
        ("src/module/x.c", "src/module"),
        ("C:\\work\\proj\\main.c", "C:\\work\\proj"),
        ("/main.c", "/"),
        ("main.c", "."),
    ],
)
def test_decompose_path(file_path: str, directory: str) -> None:
    directory_key, file_key = decompose_path(file_path)

    assert directory_key == directory
    assert file_key == file_path


def test_same_basename_in_different_directories_stays_distinct() -> None:
    first = decompose_path("/path/to/dir1/file1.c")
    second = decompose_path("/path/to/dir2/file1.c")

    assert first[1] != second[1]
    assert first[0] != second[0]


def test_bare_file_name_uses_root_directory() -> None:
    assert decompose_path("foo.c")[0] == ROOT_DIRECTORY
