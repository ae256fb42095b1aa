# shortlinks/main.py

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from shortlinks.api.middleware import CorrelationIdMiddleware, RequestAuditMiddleware
from shortlinks.api.routers import health, links, logs, redirect
from shortlinks.application.exceptions import ApplicationError
from shortlinks.config.logging import configure_logging
from shortlinks.config.settings import get_settings
from shortlinks.domain.exceptions import ConflictError, DomainError, ValidationError

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> RequestAudit.
app.add_middleware(RequestAuditMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(ValidationError)
async def validation_error_handler(request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(ConflictError)
async def conflict_error_handler(request, exc: ConflictError):
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(ApplicationError)
async def application_error_handler(request, exc: ApplicationError):
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    logger.exception("unhandled_error")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /links, /logs, then the catch-all /{code} redirect last
app.include_router(health.router)
app.include_router(links.router, prefix="/links")
app.include_router(logs.router, prefix="/logs")
app.include_router(redirect.router)
