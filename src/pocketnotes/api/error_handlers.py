"""Maps every failure to the response envelope.

Domain errors carry their own kind and message. Request validation errors
become 400 with a field list. Anything else is logged in full and answered
with a generic 500 so internals never reach the client.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import ErrorKind, PocketNotesError, STATUS_BY_KIND
from ..core.logging import get_logger
from ..core.schemas.common import ApiResponse, FieldError

logger = get_logger("errors")

SERVER_ERROR_MESSAGE = "Server error"


def _envelope(status_code: int, body: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def handle_domain_error(request: Request, exc: PocketNotesError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    if exc.kind is ErrorKind.STORE_UNAVAILABLE:
        # details were logged where the store failed
        return _envelope(status_code, ApiResponse.fail(SERVER_ERROR_MESSAGE))

    logger.info(
        "Request rejected",
        extra={"path": request.url.path, "kind": exc.kind.value, "status_code": status_code},
    )
    return _envelope(status_code, ApiResponse.fail(exc.message))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        FieldError(
            field=".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            message=err.get("msg", "Invalid value"),
        )
        for err in exc.errors()
    ]
    logger.info("Validation failed", extra={"path": request.url.path, "error_count": len(errors)})
    return _envelope(400, ApiResponse.fail("Validation failed", errors=errors))


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    response = _envelope(exc.status_code, ApiResponse.fail(message))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        extra={"path": request.url.path, "method": request.method},
        exc_info=exc,
    )
    return _envelope(500, ApiResponse.fail(SERVER_ERROR_MESSAGE))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PocketNotesError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
