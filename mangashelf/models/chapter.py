from datetime import datetime
from sqlmodel import SQLModel

class ChapterEntry(SQLModel):
    name: str
    last_modified: datetime
    def __repr__(self):
        return f"ChapterEntry(name={self.name!r}, last_modified={self.last_modified.isoformat()})"
