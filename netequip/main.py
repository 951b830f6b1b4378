"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from netequip import __version__
from netequip.api import device_ports, employees, equipment, equipment_types, ip_addresses, maintenance
from netequip.config import get_settings
from netequip.core.errors import NetEquipError, status_for
from netequip.models.base import create_all
from netequip.schemas.errors import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting {settings.app_name} {__version__}...")
    logger.info(f"Debug mode: {settings.debug}")
    if settings.create_tables_on_startup:
        await create_all()
        logger.info("Database tables created")

    yield

    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="Inventory and lifecycle tracking for network equipment",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(equipment_types.router, prefix="/api/equipment-types", tags=["Equipment Types"])
app.include_router(employees.router, prefix="/api/employees", tags=["Employees"])
app.include_router(equipment.router, prefix="/api/equipment", tags=["Equipment"])
app.include_router(device_ports.router, prefix="/api/device-ports", tags=["Device Ports"])
app.include_router(ip_addresses.router, prefix="/api/ip-addresses", tags=["IP Addresses"])
app.include_router(maintenance.router, prefix="/api/maintenance-history", tags=["Maintenance History"])


def _error_body(status: int, message: str, errors: dict[str, str] | None = None) -> dict:
    now = datetime.now(timezone.utc)
    if errors is not None:
        body = ValidationErrorResponse(status=status, message=message, timestamp=now, errors=errors)
    else:
        body = ErrorResponse(status=status, message=message, timestamp=now)
    return body.model_dump(mode="json")


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "request"


@app.exception_handler(NetEquipError)
async def domain_error_handler(request: Request, exc: NetEquipError):
    status = status_for(exc.kind)
    logger.warning(f"{request.method} {request.url.path} -> {status}: {exc.message}")
    return JSONResponse(status_code=status, content=_error_body(status, exc.message))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors: dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(tuple(error.get("loc", ()))), error.get("msg", "Invalid value"))
    logger.warning(f"{request.method} {request.url.path} -> 400: {errors}")
    return JSONResponse(
        status_code=400,
        content=_error_body(400, "Validation failed", errors=errors),
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"{request.method} {request.url.path} -> 409: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content=_error_body(409, "Request conflicts with existing data"),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=_error_body(500, "Internal server error"))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
