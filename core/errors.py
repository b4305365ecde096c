import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.config import Settings

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, errors: Optional[List[dict]] = None) -> JSONResponse:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def field_errors(exc: RequestValidationError) -> List[dict]:
    """Flatten pydantic errors to [{field, reason}], naming the innermost field."""
    errors = []
    for err in exc.errors():
        names = [str(part) for part in err.get("loc", ()) if isinstance(part, str)]
        errors.append({"field": names[-1] if names else "body", "reason": err.get("msg", "Invalid value")})
    return errors


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = field_errors(exc)
        logger.info(f"Rejected {request.method} {request.url.path}: {[e['field'] for e in errors]}")
        return error_response(status.HTTP_400_BAD_REQUEST, settings.VALIDATION_ERROR_MESSAGE, errors)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, settings.INTERNAL_ERROR_MESSAGE)
