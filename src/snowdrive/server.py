import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import CORS_ALLOWED_ORIGINS
from snowdrive import __version__
from snowdrive.api import drive, forecast, health, resorts
from snowdrive.core.logging_setup import configure_logging

logger = logging.getLogger(__name__)


# ============================================================
# Error rendering: every failure is {"error": ...}, category by status
# ============================================================
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="SnowDrive API", version=__version__)

    # ============================================================
    # CORS (front-end origins from config)
    # ============================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ============================================================
    # Routers
    # ============================================================
    app.include_router(forecast.router, prefix="/api", tags=["forecast"])
    app.include_router(drive.router, prefix="/api", tags=["drive"])
    app.include_router(resorts.router, prefix="/api", tags=["resorts"])
    app.include_router(health.router, tags=["health"])

    return app


app = create_app()
