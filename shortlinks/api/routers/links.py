"""Links API router: create, list, stats and delete short links."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from shortlinks.api.dependencies import get_link_service
from shortlinks.application.link_service import ShortLinkService
from shortlinks.config.settings import AppSettings, get_settings
from shortlinks.domain.schemas.link import LinkCreateRequest, LinkResponse

router = APIRouter()


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
async def create_link(
    body: LinkCreateRequest,
    service: Annotated[ShortLinkService, Depends(get_link_service)],
    settings: Annotated[AppSettings, Depends(get_settings)],
):
    """Create a short link. ValidationError -> 422, ConflictError -> 409 (exception handlers in main)."""
    record = await service.create_short_link(
        body.long_url,
        custom_code=body.custom_code,
        validity_mins=body.validity_mins,
    )
    return LinkResponse.from_record(record, settings.base_url)


@router.get("", response_model=List[LinkResponse])
async def list_links(
    service: Annotated[ShortLinkService, Depends(get_link_service)],
    settings: Annotated[AppSettings, Depends(get_settings)],
):
    """All links, newest first. History is truncated for display."""
    records = await service.list_short_links()
    return [
        LinkResponse.from_record(r, settings.base_url, settings.history_display_limit)
        for r in records
    ]


@router.get("/{code}", response_model=LinkResponse)
async def get_link(
    code: str,
    service: Annotated[ShortLinkService, Depends(get_link_service)],
    settings: Annotated[AppSettings, Depends(get_settings)],
):
    """Stats for one link. Reading stats does not count as a click."""
    record = await service.get_short_link(code)
    if record is None:
        return JSONResponse(status_code=404, content={"detail": "Short link not found"})
    return LinkResponse.from_record(record, settings.base_url, settings.history_display_limit)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_link(
    code: str,
    service: Annotated[ShortLinkService, Depends(get_link_service)],
):
    """Delete a link. Idempotent: unknown codes also return 204."""
    await service.delete_short_link(code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
