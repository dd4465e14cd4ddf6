from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ChapterFormat(Enum):
    DIRECTORY = "directory"
    ZIP = "zip"
    RAR = "rar"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ChapterLocation:
    path: Path
    format: ChapterFormat
