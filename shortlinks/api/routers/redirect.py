"""Redirect router: GET /{code} resolves the short code and counts the access."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse, RedirectResponse

from shortlinks.api.dependencies import get_link_service
from shortlinks.application.link_service import ShortLinkService

router = APIRouter()


@router.get("/{code}")
async def follow_link(
    code: str,
    service: Annotated[ShortLinkService, Depends(get_link_service)],
    referer: Annotated[Optional[str], Header()] = None,
):
    """307 to the long URL; 404 for unknown codes, 410 for expired ones."""
    result = await service.resolve_short_link(code, referrer=referer)
    if result.expired:
        return JSONResponse(status_code=410, content={"detail": "Short link has expired"})
    if not result.found:
        return JSONResponse(status_code=404, content={"detail": "Short link not found"})
    return RedirectResponse(url=result.record.long_url, status_code=307)
