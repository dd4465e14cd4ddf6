from pathlib import Path


class LibraryError(Exception):
    pass


class UnsupportedFormatError(LibraryError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Unsupported chapter format: {path}")


class PageNotFoundError(LibraryError, FileNotFoundError):
    def __init__(self, path: Path, identifier: str):
        self.path = path
        self.identifier = identifier
        super().__init__(f"Page {identifier!r} not found in {path}")

    def __str__(self):
        return self.args[0]


class PathTraversalError(PageNotFoundError):
    def __init__(self, root: Path, name: str):
        super().__init__(root, name)
        self.args = (f"{name!r} escapes {root}",)


class ArchiveReadError(LibraryError, OSError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read archive {path}: {reason}")

    def __str__(self):
        return self.args[0]
