"""FastAPI app for the AstroVogue horoscope gateway."""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from astrovogue.config.settings import Settings, settings as default_settings
from astrovogue.core.errors import ValidationError
from astrovogue.core.logging import get_logger, setup_logging
from astrovogue.core.metrics import metrics
from astrovogue.core.middleware import ObservabilityMiddleware
from astrovogue.core.schemas import (
    DailyReading,
    ErrorResponse,
    PersonalizedReading,
    PersonalizedRequest,
    SignsResponse,
)
from astrovogue.service import HoroscopeService, build_service

logger = get_logger(__name__)

SERVICE_NAME = "astrovogue-gateway"
_BAD_REQUEST = {400: {"model": ErrorResponse}}


def _service(request: Request) -> HoroscopeService:
    return request.app.state.service


def create_app(
    service: Optional[HoroscopeService] = None, settings: Optional[Settings] = None
) -> FastAPI:
    """Build the app; tests pass their own service with fake collaborators."""
    settings = settings or (service.settings if service else default_settings)
    setup_logging(settings.log_level)

    app = FastAPI(title="AstroVogue Gateway", version="1.0.0")
    app.add_middleware(ObservabilityMiddleware)
    app.state.service = service or build_service(settings)

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info(f"rejected {request.url.path}: {exc.field}={exc.value!r}")
        return JSONResponse({"error": exc.message}, status_code=400)

    @app.exception_handler(RequestValidationError)
    async def _bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse({"error": "Invalid request body."}, status_code=400)

    @app.get("/api/daily", response_model=DailyReading, responses=_BAD_REQUEST)
    async def daily(
        request: Request,
        sign: Optional[str] = None,
        day: Optional[str] = None,
        lang: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await _service(request).daily(sign, day, lang)

    @app.post("/api/personalized", response_model=PersonalizedReading, responses=_BAD_REQUEST)
    async def personalized(request: Request, body: PersonalizedRequest) -> Dict[str, Any]:
        return await _service(request).personalized(body.sun, body.rising, body.day, body.lang)

    @app.get("/api/signs", response_model=SignsResponse, responses=_BAD_REQUEST)
    async def signs(request: Request, lang: Optional[str] = None) -> Dict[str, Any]:
        return _service(request).signs(lang)

    @app.get("/healthz")
    async def healthz() -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({"status": "ok", "service": SERVICE_NAME})

    @app.get("/metrics")
    async def get_metrics() -> JSONResponse:
        """Metrics endpoint."""
        return JSONResponse(metrics.snapshot())

    static_dir = Path(settings.static_dir)
    index_file = static_dir / "index.html"
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    @app.get("/", response_model=None)
    async def root() -> Any:
        if index_file.is_file():
            return FileResponse(index_file)
        return JSONResponse(
            {"service": SERVICE_NAME, "endpoints": ["/api/daily", "/api/personalized"]}
        )

    return app


app = create_app()
