import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .clock import ClockSource
from .config import Settings, get_settings
from .engine import ConversionEngine
from .errors import ClockUnavailableError, InvalidTimeError, UnknownCityError
from .formatting import format_iso, format_long, format_time
from .models import ConversionRequest
from .schemas import (
    SCHEMA_VERSION,
    ConvertTimeBody,
    ConvertTimeResponse,
    CurrentTimeResponse,
    ErrorResponse,
)
from .zones import TEHRAN, TORONTO, ZoneRegistry, default_registry

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_engine(request: Request) -> ConversionEngine:
    return request.app.state.engine


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{field}: {message}" if field else message


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(InvalidTimeError)
    async def invalid_time_handler(request: Request, exc: InvalidTimeError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(UnknownCityError)
    async def unknown_city_handler(request: Request, exc: UnknownCityError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(ClockUnavailableError)
    async def clock_unavailable_handler(request: Request, exc: ClockUnavailableError):
        logger.error("clock read failed on %s", request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "internal server error"})

    # Runs in the outermost middleware, so the schema header is not added for us.
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled error on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"error": "internal server error"},
            headers={"X-Schema-Version": SCHEMA_VERSION},
        )


def create_app(
    settings: Optional[Settings] = None,
    *,
    clock: Optional[ClockSource] = None,
    registry: Optional[ZoneRegistry] = None,
) -> FastAPI:
    """Build the HTTP application.

    ``clock`` and ``registry`` default to the system clock and the compiled-in
    Toronto/Tehran table; tests pass a :class:`~cityclock.clock.FixedClock`.
    """
    settings = settings or get_settings()
    registry = registry or default_registry()

    app = FastAPI(title="cityclock", version=SCHEMA_VERSION)
    app.state.engine = ConversionEngine(registry, clock)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def schema_version_header(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Schema-Version"] = SCHEMA_VERSION
        return response

    install_error_handlers(app)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.get("/api/current-time", response_model=CurrentTimeResponse, responses=_ERROR_RESPONSES)
    def current_time(engine: ConversionEngine = Depends(get_engine)):
        """Return the current time in Toronto and Tehran.

        ``*_time`` fields are RFC 3339 strings with the zone's offset;
        ``*_time_str`` fields look like ``"03:45 PM - October 17, 2026"``.
        """
        snapshot = engine.snapshot()
        toronto = snapshot.for_city(TORONTO.name)
        tehran = snapshot.for_city(TEHRAN.name)
        return CurrentTimeResponse(
            toronto_time=format_iso(toronto),
            tehran_time=format_iso(tehran),
            toronto_time_str=format_long(toronto),
            tehran_time_str=format_long(tehran),
        )

    @app.post("/api/convert-time", response_model=ConvertTimeResponse, responses=_ERROR_RESPONSES)
    def convert_time(body: ConvertTimeBody, engine: ConversionEngine = Depends(get_engine)):
        """Convert ``hour:minute`` today in ``city`` to the other city's time."""
        result = engine.convert(
            ConversionRequest(source_city=body.city, hour=body.hour, minute=body.minute)
        )
        return ConvertTimeResponse(
            source_city=result.source_city,
            source_time=format_time(result.source_time),
            target_city=result.target_city,
            target_time=format_time(result.target_time),
        )

    return app


__all__ = ["create_app", "get_engine", "install_error_handlers"]
