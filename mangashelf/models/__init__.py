from .series import SeriesEntry
from .chapter import ChapterEntry
from .chapter_location import ChapterFormat, ChapterLocation

__all__ = ["SeriesEntry", "ChapterEntry", "ChapterFormat", "ChapterLocation"]
