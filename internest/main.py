# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from internest.config import build_sqlalchemy_db_url, is_development_mode, settings
from internest.data.internships import load_internships
from internest.database import build_engine, init_schema, make_session_factory
from internest.db.stores import PreferenceStore, SearchLogStore
from internest.errors import InternestError, ValidationError
from internest.routers import health, internships, preferences
from internest.schemas.common import ErrorResponse, FieldError


logger = logging.getLogger(__name__)


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def _handle_internest_error(request: Request, exc: InternestError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        errors = [FieldError.model_validate(e) for e in exc.errors]
        return _error_response(exc.status_code, ErrorResponse(message=exc.message, errors=errors))

    if exc.status_code >= 500:
        logger.error("request failed path=%s error=%s", request.url.path, exc, exc_info=exc)
        # Store details only leave the process in development mode.
        detail = str(exc) if is_development_mode(settings) else "Internal server error"
        return _error_response(exc.status_code, ErrorResponse(message=type(exc).message, error=detail))

    return _error_response(exc.status_code, ErrorResponse(message=exc.message))


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": str(err["loc"][-1]) if err.get("loc") else "request", "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    return await _handle_internest_error(request, ValidationError(errors))


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    response = _error_response(exc.status_code, ErrorResponse(message=message))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error path=%s", request.url.path, exc_info=exc)
    detail = str(exc) if is_development_mode(settings) else "Internal server error"
    return _error_response(500, ErrorResponse(message=InternestError.message, error=detail))


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_url = build_sqlalchemy_db_url(settings)
        engine = build_engine(db_url)

        # Avoid accidental schema changes in shared MySQL databases.
        if db_url.startswith("sqlite"):
            init_schema(engine)

        session_factory = make_session_factory(engine)
        app.state.engine = engine
        app.state.session_factory = session_factory
        app.state.preference_store = PreferenceStore(session_factory)
        app.state.search_log_store = SearchLogStore(session_factory)
        app.state.catalog = load_internships()
        try:
            yield
        finally:
            engine.dispose()
            logger.info("database engine disposed")

    logging.getLogger("internest").setLevel(settings.log_level.upper())

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(InternestError, _handle_internest_error)
    application.add_exception_handler(RequestValidationError, _handle_request_validation)
    application.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    application.add_exception_handler(Exception, _handle_unexpected_error)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health.router)

    application.include_router(internships.router, prefix=settings.api_prefix)
    application.include_router(preferences.router, prefix=settings.api_prefix)
    return application


app = create_app()
