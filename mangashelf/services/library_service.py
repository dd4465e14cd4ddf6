from pathlib import Path

from mangashelf.core import config
from mangashelf.core.filesystem import list_chapters, list_series, safe_join
from mangashelf.core.reader import get_page, list_pages
from mangashelf.models import ChapterEntry, SeriesEntry


def get_library_root() -> Path:
    return Path(config.LIBRARY_DIR)


def _series_path(series_name: str) -> Path:
    return safe_join(get_library_root(), series_name)


def _chapter_path(series_name: str, chapter_name: str) -> Path:
    return safe_join(get_library_root(), series_name, chapter_name)


def get_series() -> list[SeriesEntry]:
    return list_series(get_library_root())


def get_chapters(series_name: str) -> list[ChapterEntry]:
    return list_chapters(_series_path(series_name))


def get_pages(series_name: str, chapter_name: str) -> list[str]:
    return list_pages(_chapter_path(series_name, chapter_name))


def get_page_bytes(series_name: str, chapter_name: str, page_name: str) -> bytes:
    return get_page(_chapter_path(series_name, chapter_name), page_name)
