from datetime import datetime
from sqlmodel import SQLModel


class SeriesEntry(SQLModel):
    name: str
    last_modified: datetime
