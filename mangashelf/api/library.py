import mimetypes

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from mangashelf.api.auth import require_basic_auth
from mangashelf.models import ChapterEntry, SeriesEntry
from mangashelf.services import library_service

router = APIRouter(tags=["library"], dependencies=[Depends(require_basic_auth)])

@router.get("/series", response_model=list[SeriesEntry])
def list_series():
    return library_service.get_series()

@router.get("/chapters/{series_name}", response_model=list[ChapterEntry])
def list_chapters(series_name: str):
    return library_service.get_chapters(series_name)

@router.get("/pages/{series_name}/{chapter_name}", response_model=list[str])
def list_pages(series_name: str, chapter_name: str):
    return library_service.get_pages(series_name, chapter_name)

@router.get("/page/{series_name}/{chapter_name}/{page_name:path}")
def get_page(series_name: str, chapter_name: str, page_name: str):
    data = library_service.get_page_bytes(series_name, chapter_name, page_name)
    media_type, _ = mimetypes.guess_type(page_name)
    return Response(content=data, media_type=media_type or "application/octet-stream")

# page names may contain "/" for pages inside archive folders
