import logging
from typing import List
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from mon_ai.core.exceptions import TranslationError, TranslatorConfigurationError, VocabularyNotFound

# Error types that mean "absent or empty" rather than "present but wrong".
MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def _error(status_code: int, message) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _join(fields: List[str]) -> str:
    return " and ".join(fields)


def _validation_message(exc: RequestValidationError) -> str:
    missing: List[str] = []
    invalid: List[str] = []
    for err in exc.errors():
        loc = err.get("loc", ())
        if len(loc) < 2 or loc[0] != "body" or not isinstance(loc[1], str):
            continue
        target = missing if err.get("type") in MISSING_ERROR_TYPES else invalid
        if loc[1] not in missing and loc[1] not in invalid:
            target.append(loc[1])
    if missing:
        verb = "is" if len(missing) == 1 else "are"
        return f"{_join(missing)} {verb} required"
    if invalid:
        verb = "must be a string" if len(invalid) == 1 else "must be strings"
        return f"{_join(invalid)} {verb}"
    return "request body is required"


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": message}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logging.info(f"Rejected {request.method} {request.url.path}: {message}")
        return _error(400, message)

    @app.exception_handler(VocabularyNotFound)
    async def not_found_handler(request: Request, exc: VocabularyNotFound):
        return _error(404, "Word not found")

    @app.exception_handler(TranslatorConfigurationError)
    async def configuration_error_handler(request: Request, exc: TranslatorConfigurationError):
        return _error(500, str(exc))

    @app.exception_handler(TranslationError)
    async def translation_error_handler(request: Request, exc: TranslationError):
        return _error(500, "Translation failed")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logging.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return _error(500, "Internal server error")
