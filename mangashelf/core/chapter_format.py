import stat
from pathlib import Path

from mangashelf.models import ChapterFormat, ChapterLocation

ZIP_SUFFIXES = {".zip", ".cbz"}
RAR_SUFFIXES = {".rar", ".cbr"}


def detect(chapter_path: Path) -> ChapterFormat:
    # suffix match is case-sensitive; "CH1.CBZ" is unsupported
    p = Path(chapter_path)
    if stat.S_ISDIR(p.stat().st_mode):
        return ChapterFormat.DIRECTORY
    if p.suffix in ZIP_SUFFIXES:
        return ChapterFormat.ZIP
    if p.suffix in RAR_SUFFIXES:
        return ChapterFormat.RAR
    return ChapterFormat.UNSUPPORTED


def locate(chapter_path: Path) -> ChapterLocation:
    p = Path(chapter_path)
    return ChapterLocation(path=p, format=detect(p))
