import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse, HTMLResponse
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.core.errors import StaticResourceForbidden, StaticResourceMissing, TemplateLoadError
from app.files.static import check_static_file
from app.services.page import render_page

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/", response_class=HTMLResponse)
async def index():
    """
    Render the page from the template and both upstream feeds.

    Always 200 while the template exists, whatever the feeds do.
    """
    try:
        html = await render_page()
    except TemplateLoadError as e:
        logger.error(str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="file not exist"
        )
    return HTMLResponse(content=html, status_code=status.HTTP_200_OK)

@router.get("/{file_path:path}")
async def static_file(file_path: str):
    """Serve a file from the static root"""
    try:
        path = await run_in_threadpool(check_static_file, settings.STATIC_ROOT, file_path)
    except StaticResourceMissing as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except StaticResourceForbidden as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e)
        )
    return FileResponse(path)
