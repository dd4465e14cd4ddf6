import os
import stat
from datetime import datetime, timezone
from pathlib import Path

from mangashelf.core.errors import PathTraversalError
from mangashelf.models import ChapterEntry, SeriesEntry


def _mtime(st: os.stat_result) -> datetime:
    return datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)


def list_series(root: Path) -> list[SeriesEntry]:
    out = []
    for p in Path(root).iterdir():
        st = p.stat()
        if stat.S_ISDIR(st.st_mode):
            out.append(SeriesEntry(name=p.name, last_modified=_mtime(st)))
    return out


def list_chapters(series_path: Path) -> list[ChapterEntry]:
    return [
        ChapterEntry(name=p.name, last_modified=_mtime(p.stat()))
        for p in Path(series_path).iterdir()
    ]


def safe_join(root: Path, *parts: str) -> Path:
    """Join untrusted name segments onto root.

    Absolute parts and any ``..`` segment raise PathTraversalError, so the
    result always lies below root. Symlinks are not resolved: folders linked
    into the library by its owner stay reachable.
    """
    root = Path(root)
    name = "/".join(parts)
    for part in parts:
        if Path(part).is_absolute() or ".." in part.replace(os.sep, "/").split("/"):
            raise PathTraversalError(root, name)
    return root.joinpath(*parts)

## series are directories only; chapters can be folders or archive files
