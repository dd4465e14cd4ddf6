"""Page backends for chapters stored as a folder, a zip or a rar archive.

Every backend opens its own handle per call and closes it before returning,
so nothing is shared between requests. Entry names are matched exactly as
stored in the container; no separator or case normalization happens here.
Folders, and folder entries inside archives, are listed like pages but have
no bytes: fetching one raises PageNotFoundError.
"""

import zipfile
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Protocol

import rarfile

from mangashelf.core.errors import ArchiveReadError, PageNotFoundError
from mangashelf.core.filesystem import safe_join


class PageBackend(Protocol):
    def list_pages(self, chapter_path: Path) -> list[str]:
        ...

    def get_page(self, chapter_path: Path, identifier: str) -> bytes:
        ...


class DirectoryBackend:
    def list_pages(self, chapter_path: Path) -> list[str]:
        return [p.name for p in chapter_path.iterdir()]

    def get_page(self, chapter_path: Path, identifier: str) -> bytes:
        if not identifier:
            raise PageNotFoundError(chapter_path, identifier)
        page_path = safe_join(chapter_path, identifier)
        try:
            return page_path.read_bytes()
        except (FileNotFoundError, IsADirectoryError) as e:
            raise PageNotFoundError(chapter_path, identifier) from e


class ZipBackend:
    # zlib.error: damaged deflate stream, RuntimeError: encrypted entry,
    # EOFError: truncated data
    READ_ERRORS = (
        zipfile.BadZipFile,
        zipfile.LargeZipFile,
        NotImplementedError,
        zlib.error,
        RuntimeError,
        EOFError,
    )

    @contextmanager
    def _open(self, chapter_path: Path) -> Iterator[zipfile.ZipFile]:
        try:
            zf = zipfile.ZipFile(chapter_path, mode="r")
        except zipfile.BadZipFile as e:
            raise ArchiveReadError(chapter_path, str(e)) from e
        with zf:
            yield zf

    def list_pages(self, chapter_path: Path) -> list[str]:
        with self._open(chapter_path) as zf:
            return [info.filename for info in zf.infolist()]

    def get_page(self, chapter_path: Path, identifier: str) -> bytes:
        with self._open(chapter_path) as zf:
            try:
                info = zf.getinfo(identifier)
            except KeyError as e:
                raise PageNotFoundError(chapter_path, identifier) from e
            if info.is_dir():
                raise PageNotFoundError(chapter_path, identifier)
            try:
                return zf.read(info)
            except self.READ_ERRORS as e:
                raise ArchiveReadError(chapter_path, str(e)) from e


class RarBackend:
    @contextmanager
    def _open(self, chapter_path: Path) -> Iterator[rarfile.RarFile]:
        try:
            rf = rarfile.RarFile(chapter_path, mode="r")
        except rarfile.Error as e:
            raise ArchiveReadError(chapter_path, str(e)) from e
        with rf:
            yield rf

    def list_pages(self, chapter_path: Path) -> list[str]:
        with self._open(chapter_path) as rf:
            return [info.filename for info in rf.infolist()]

    def get_page(self, chapter_path: Path, identifier: str) -> bytes:
        with self._open(chapter_path) as rf:
            info = next((i for i in rf.infolist() if i.filename == identifier), None)
            if info is None or info.is_dir():
                raise PageNotFoundError(chapter_path, identifier)
            try:
                return rf.read(info)
            except rarfile.Error as e:
                raise ArchiveReadError(chapter_path, str(e)) from e
