"""
Song library endpoints.

Serves the directory tree under ``settings.songs_path`` at ``/Songs``:
directories come back as an HTML list of links, files are streamed.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, HTMLResponse

from vibetune.api.deps import get_app_settings
from vibetune.core.config import Settings
from vibetune.core.errors import NotFound
from vibetune.core.library import (
    get_library_root,
    get_media_type,
    list_directory,
    render_listing,
    resolve_safe_path,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/Songs", include_in_schema=False)
@router.get("/Songs/{path:path}", include_in_schema=False)
async def browse_library(
    path: str = "",
    settings: Settings = Depends(get_app_settings),
):
    """List a library directory or stream a library file."""
    root = get_library_root(settings)

    try:
        target = resolve_safe_path(root, path)
    except ValueError:
        logger.warning("Rejected library path: %r", path)
        raise NotFound("Not found")

    if target.is_file():
        logger.debug("Serving file: %s", target)
        return FileResponse(target, media_type=get_media_type(target.name))

    if target.is_dir():
        logger.debug("Listing directory: %s", target)
        url_path = "/Songs/" + path.strip("/") if path.strip("/") else "/Songs"
        return HTMLResponse(render_listing(url_path, list_directory(target)))

    logger.info("Library path not found: %s", target)
    raise NotFound("Not found")
