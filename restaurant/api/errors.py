# restaurant/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DisconnectionError, OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from restaurant.domain.errors import ServiceError, StoreUnavailable
from restaurant.utils.logging import get_logger

logger = get_logger(__name__)


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def service_error_handler(request: Request, exc: ServiceError):
    return _message(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # nieznane sciezki, zla metoda itp.
    return _message(exc.status_code, str(exc.detail))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _message(400, "Invalid request.")

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    field = ".".join(loc) or "request"
    return _message(400, f"Invalid value for {field}: {first.get('msg', 'invalid')}")


async def store_error_handler(request: Request, exc: Exception):
    # baza zniknela po pierwszym polaczeniu
    logger.warning(f"Store error on {request.method} {request.url.path}: {exc}")
    return _message(StoreUnavailable.status_code, StoreUnavailable.default_message)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return _message(500, "Internal Server Error")


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(OperationalError, store_error_handler)
    app.add_exception_handler(DisconnectionError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
