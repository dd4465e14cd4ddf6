import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from mangashelf.api.library import router as library_router
from mangashelf.core.errors import (
    ArchiveReadError,
    PageNotFoundError,
    PathTraversalError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="mangashelf")
app.include_router(library_router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.exception_handler(PathTraversalError)
def traversal_handler(request: Request, exc: PathTraversalError):
    logger.warning("Rejected path outside library: %s %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=404)


@app.exception_handler(PageNotFoundError)
def page_not_found_handler(request: Request, exc: PageNotFoundError):
    return PlainTextResponse(str(exc), status_code=404)


@app.exception_handler(UnsupportedFormatError)
def unsupported_handler(request: Request, exc: UnsupportedFormatError):
    return PlainTextResponse(str(exc), status_code=415)


@app.exception_handler(ArchiveReadError)
def archive_handler(request: Request, exc: ArchiveReadError):
    logger.warning("Broken archive: %s", exc)
    return PlainTextResponse(str(exc), status_code=500)


@app.exception_handler(OSError)
def os_error_handler(request: Request, exc: OSError):
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return PlainTextResponse(f"Not found: {request.url.path}", status_code=404)
    logger.warning("I/O error on %s: %s", request.url.path, exc)
    return PlainTextResponse(f"I/O error: {exc.strerror or exc}", status_code=500)
