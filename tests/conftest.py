import os

import pytest

from tests.helpers import T1, make_zip


@pytest.fixture
def library(tmp_path):
    """A library root holding one series with a folder chapter and a cbz chapter."""
    root = tmp_path / "manga"
    series = root / "OnePiece"
    folder_chapter = series / "ch0"
    folder_chapter.mkdir(parents=True)
    (folder_chapter / "001.jpg").write_bytes(b"\xff\xd8page-one")
    (folder_chapter / "002.png").write_bytes(b"\x89PNGpage-two")

    make_zip(series / "ch1.cbz", {"001.jpg": b"zip-one", "002.jpg": b"zip-two" * 100})
    (root / "readme.txt").write_text("not a series")

    os.utime(series, (T1, T1))
    return root
