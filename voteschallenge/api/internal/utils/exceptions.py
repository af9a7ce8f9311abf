# Third-party imports
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import sentry_sdk

# Local application imports
from voteschallenge.exceptions.voting import VotingError, VotingErrorKind
from voteschallenge.schemas.common import BaseResponse

# Map specific HTTP status codes to custom error codes
ERROR_CODES = {
    400: "bad_request",
    404: "not_found",
    409: "conflict",
    422: "unprocessable_entity",
    500: "internal_server_error",
}

VOTING_ERROR_STATUS = {
    VotingErrorKind.MISSING_INFORMATION: 400,
    VotingErrorKind.INVALID_IDENTITY: 400,
    VotingErrorKind.RULING_NOT_FOUND: 404,
    VotingErrorKind.SESSION_NOT_FOUND: 404,
    VotingErrorKind.ASSOCIATE_NOT_FOUND: 404,
    VotingErrorKind.ALREADY_VOTED: 409,
    VotingErrorKind.ASSOCIATE_ALREADY_EXISTS: 409,
    VotingErrorKind.RULING_ALREADY_TALLIED: 409,
    VotingErrorKind.SESSION_STILL_OPEN: 409,
    VotingErrorKind.SESSION_CLOSED: 422,
}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(VotingError)
    async def voting_error_handler(
        request: Request,  # noqa
        exc: VotingError,
    ) -> JSONResponse:
        status_code = VOTING_ERROR_STATUS.get(exc.kind, 400)
        response = BaseResponse.failure(
            code=ERROR_CODES.get(status_code, "error"),
            message=exc.message,
            kind=exc.kind.value,
        )
        return JSONResponse(status_code=status_code, content=response.model_dump())

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,  # noqa
        exc: HTTPException,
    ) -> JSONResponse:
        error_code = ERROR_CODES.get(exc.status_code, "error")
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        response = BaseResponse.failure(code=error_code, message=detail)
        return JSONResponse(status_code=exc.status_code, content=response.model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,  # noqa
        exc: RequestValidationError,
    ) -> JSONResponse:
        error_details = []
        for error in exc.errors():
            message = error.get("msg", "")

            # Strip pydantic's "Value error, " prefix
            val_error_prefix = "Value error, "
            if message.startswith(val_error_prefix):
                message = message[len(val_error_prefix) :]

            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            error_details.append(f"{location}: {message}" if location else message)

        max_errors = 5
        shown = error_details[:max_errors]

        if len(error_details) > max_errors:
            shown.append("...and more errors")
        detail = "; ".join(shown) if shown else "Invalid request data"

        response = BaseResponse.failure(code="bad_request", message=detail)
        return JSONResponse(status_code=400, content=response.model_dump())

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,  # noqa
        exc: Exception,
    ) -> JSONResponse:
        sentry_sdk.capture_exception(exc)
        response = BaseResponse.failure(
            code="internal_server_error",
            message="An unexpected error occurred. Please try again later.",
        )
        return JSONResponse(status_code=500, content=response.model_dump())
