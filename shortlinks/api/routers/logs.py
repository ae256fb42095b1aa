"""Audit log API router: GET /logs, DELETE /logs."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Response, status

from shortlinks.api.dependencies import get_link_service
from shortlinks.application.link_service import ShortLinkService
from shortlinks.domain.schemas.link import AuditLogEntryResponse

router = APIRouter()


@router.get("", response_model=List[AuditLogEntryResponse])
async def get_logs(service: Annotated[ShortLinkService, Depends(get_link_service)]):
    """Audit entries, newest first."""
    entries = await service.get_audit_log()
    return [AuditLogEntryResponse.from_entry(e) for e in entries]


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_logs(service: Annotated[ShortLinkService, Depends(get_link_service)]):
    await service.clear_audit_log()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
