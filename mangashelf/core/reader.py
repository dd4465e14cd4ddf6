import logging
from pathlib import Path

from mangashelf.core.archives import DirectoryBackend, PageBackend, RarBackend, ZipBackend
from mangashelf.core.chapter_format import locate
from mangashelf.core.errors import UnsupportedFormatError
from mangashelf.models import ChapterFormat, ChapterLocation

logger = logging.getLogger(__name__)

BACKENDS: dict[ChapterFormat, PageBackend] = {
    ChapterFormat.DIRECTORY: DirectoryBackend(),
    ChapterFormat.ZIP: ZipBackend(),
    ChapterFormat.RAR: RarBackend(),
}


def _backend(location: ChapterLocation) -> PageBackend:
    backend = BACKENDS.get(location.format)
    if backend is None:
        raise UnsupportedFormatError(location.path)
    return backend


def list_pages(chapter_path: Path) -> list[str]:
    location = locate(chapter_path)
    pages = _backend(location).list_pages(location.path)
    logger.debug("%s (%s): %d pages", location.path, location.format.value, len(pages))
    return pages


def get_page(chapter_path: Path, identifier: str) -> bytes:
    location = locate(chapter_path)
    data = _backend(location).get_page(location.path, identifier)
    logger.debug("%s (%s): read %r, %d bytes", location.path, location.format.value, identifier, len(data))
    return data
