import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, HTMLResponse
from services.pages import SitePages, get_site_pages

logger = logging.getLogger(__name__)

router = APIRouter(tags=["site"])


@router.get("/{path:path}", include_in_schema=False)
def serve(
    path:           str,
    slide:          int = 0,
    reduced_motion: bool = False,
    pages:          SitePages = Depends(get_site_pages)
):
    """
    Static files from the site directory. HTML pages go through
    SitePages.render; anything that isn't a file gets index.html.
    """
    target = pages.resolve(path)
    if target is None:
        logger.debug("No file for /%s, falling back to index.html", path)
        target = pages.resolve("index.html")
        if target is None:
            raise HTTPException(status_code=404, detail="index.html not found")

    if target.suffix.lower() in (".html", ".htm") and target.parent.name != "partials":
        html = pages.render_file(target, slide=slide, reduced_motion=reduced_motion)
        return HTMLResponse(html)
    return FileResponse(target)
