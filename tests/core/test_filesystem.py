"""
Tests for the series/chapter listing and safe path joining.
"""

import os
from datetime import datetime, timezone

import pytest

from mangashelf.core.errors import PageNotFoundError, PathTraversalError
from mangashelf.core.filesystem import list_chapters, list_series, safe_join
from tests.helpers import T1, T2


def test_list_series_skips_files(library):
    """Only directories at the root are series."""
    series = list_series(library)

    assert [s.name for s in series] == ["OnePiece"]
    assert series[0].last_modified == datetime.fromtimestamp(T1, tz=timezone.utc)


def test_list_series_accepts_str_path(library):
    assert [s.name for s in list_series(str(library))] == ["OnePiece"]


def test_list_series_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_series(tmp_path / "nope")


def test_list_series_root_is_file(tmp_path):
    f = tmp_path / "file"
    f.write_text("x")
    with pytest.raises(NotADirectoryError):
        list_series(f)


def test_list_chapters_includes_files_and_folders(library):
    """Chapters are listed unfiltered: folders and archive files alike."""
    series = library / "OnePiece"
    (series / "notes.txt").write_text("hi")
    os.utime(series / "ch1.cbz", (T2, T2))

    chapters = {c.name: c for c in list_chapters(series)}

    assert set(chapters) == {"ch0", "ch1.cbz", "notes.txt"}
    assert chapters["ch1.cbz"].last_modified == datetime.fromtimestamp(T2, tz=timezone.utc)


def test_list_chapters_missing_series(library):
    with pytest.raises(FileNotFoundError):
        list_chapters(library / "Naruto")


def test_safe_join_inside_root(tmp_path):
    assert safe_join(tmp_path, "a", "b.jpg") == tmp_path / "a" / "b.jpg"
    assert safe_join(tmp_path, "sub/001.jpg") == tmp_path / "sub" / "001.jpg"


@pytest.mark.parametrize("name", ["..", "../../etc/passwd", "a/../../x", "/etc/passwd"])
def test_safe_join_rejects_escape(tmp_path, name):
    root = tmp_path / "root"
    root.mkdir()
    with pytest.raises(PathTraversalError):
        safe_join(root, name)


def test_safe_join_follows_library_symlinks(tmp_path):
    """A series folder linked in from another drive is still reachable."""
    root = tmp_path / "root"
    root.mkdir()
    elsewhere = tmp_path / "other-drive" / "Berserk"
    elsewhere.mkdir(parents=True)
    (elsewhere / "ch1").mkdir()
    (root / "Berserk").symlink_to(elsewhere, target_is_directory=True)

    series_path = safe_join(root, "Berserk")

    assert series_path == root / "Berserk"
    assert [c.name for c in list_chapters(series_path)] == ["ch1"]


def test_safe_join_rejects_dotdot_through_symlink(tmp_path):
    """A ".." after a symlink would land beside the link target."""
    root = tmp_path / "root"
    root.mkdir()
    target = tmp_path / "other-drive" / "Berserk"
    target.mkdir(parents=True)
    (root / "link").symlink_to(target, target_is_directory=True)

    with pytest.raises(PathTraversalError):
        safe_join(root, "link/../secret")
    with pytest.raises(PathTraversalError):
        safe_join(root, "link", "..", "secret")


def test_traversal_error_is_not_found(tmp_path):
    """A traversal attempt looks like any other missing page to callers."""
    with pytest.raises(PageNotFoundError):
        safe_join(tmp_path, "..")
