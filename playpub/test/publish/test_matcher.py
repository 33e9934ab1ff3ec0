from __future__ import annotations

from pathlib import Path

import pytest

from playpub.core.result import Err, Ok
from playpub.publish.matcher import find_files, split_patterns


def _touch(root: Path, *rels: str) -> None:
    for rel in rels:
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(b"")


def test_split_patterns_drops_blanks() -> None:
    assert split_patterns(" a/*.apk , ,b/**/*.apk ") == ["a/*.apk", "b/**/*.apk"]
    assert split_patterns(None) == []


def test_find_files_recursive_include(tmp_path: Path) -> None:
    _touch(tmp_path, "app/build/a.apk", "lib/b.apk", "notes.txt")

    result = find_files(tmp_path, "**/*.apk")

    assert isinstance(result, Ok)
    assert result.value == ["app/build/a.apk", "lib/b.apk"]


def test_find_files_applies_exclude(tmp_path: Path) -> None:
    _touch(tmp_path, "out/app-release.apk", "out/app-unaligned.apk")

    result = find_files(tmp_path, "**/*.apk", "**/*-unaligned.apk")

    assert isinstance(result, Ok)
    assert result.value == ["out/app-release.apk"]


def test_find_files_keeps_first_seen_order_across_patterns(tmp_path: Path) -> None:
    _touch(tmp_path, "z/one.apk", "a/two.apk")

    result = find_files(tmp_path, "z/*.apk, **/*.apk")

    assert isinstance(result, Ok)
    assert result.value == ["z/one.apk", "a/two.apk"]


def test_find_files_trailing_slash_means_whole_directory(tmp_path: Path) -> None:
    _touch(tmp_path, "dist/x/a.obb", "dist/b.obb", "other/c.obb")

    result = find_files(tmp_path, "dist/")

    assert isinstance(result, Ok)
    assert result.value == ["dist/b.obb", "dist/x/a.obb"]


def test_find_files_ignores_directories(tmp_path: Path) -> None:
    (tmp_path / "weird.apk").mkdir()
    _touch(tmp_path, "real.apk")

    result = find_files(tmp_path, "*.apk")

    assert isinstance(result, Ok)
    assert result.value == ["real.apk"]


def test_find_files_no_match_is_not_an_error(tmp_path: Path) -> None:
    result = find_files(tmp_path, "**/*.apk")
    assert result == Ok([])


def test_find_files_requires_include(tmp_path: Path) -> None:
    result = find_files(tmp_path, "  ")
    assert isinstance(result, Err)


def test_find_files_rejects_absolute_pattern(tmp_path: Path) -> None:
    result = find_files(tmp_path, "/tmp/*.apk")
    assert isinstance(result, Err)
    assert "inside the working directory" in result.error.message


def test_find_files_double_star_matches_files(tmp_path: Path) -> None:
    _touch(tmp_path, "obb/a/main.1.com.x.obb")

    result = find_files(tmp_path, "obb/**")

    assert isinstance(result, Ok)
    assert result.value == ["obb/a/main.1.com.x.obb"]


@pytest.mark.parametrize("pattern", ["../*.apk", "build/../../*.apk", "..\\*.apk"])
def test_find_files_rejects_parent_directory_patterns(tmp_path: Path, pattern: str) -> None:
    workdir = tmp_path / "ws"
    workdir.mkdir()
    _touch(tmp_path, "outside.apk")

    result = find_files(workdir, pattern)

    assert isinstance(result, Err)
    assert "inside the working directory" in result.error.message


def test_find_files_rejects_parent_directory_in_exclude(tmp_path: Path) -> None:
    result = find_files(tmp_path, "*.apk", "../*.apk")
    assert isinstance(result, Err)
