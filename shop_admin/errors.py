from typing import Callable
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.requests import Request
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class ShopAdminException(Exception):
    """This is the base class for all Shop Admin errors"""
    default_message = "Something went wrong"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(ShopAdminException):
    """The requested entity does not exist (by id, code or other unique key)"""
    default_message = "Resource not found"


class Conflict(ShopAdminException):
    """A uniqueness constraint would be violated by a create or rename"""
    default_message = "Resource already exists"


class BadRequest(ShopAdminException):
    """Malformed input or a business rule rejected the request"""
    default_message = "Bad request"


class Unauthorized(ShopAdminException):
    """User has provided wrong email or password during login"""
    default_message = "Invalid email or password"


class InvalidToken(ShopAdminException):
    """User has provided an invalid, expired or revoked token"""
    default_message = "You provided an invalid or expired token"


class AccessTokenRequired(ShopAdminException):
    """No bearer token was sent with a request that needs one"""
    default_message = "Access token is required"


class InsufficientPermission(ShopAdminException):
    """The authenticated user lacks the role the route requires"""
    default_message = "Access denied. Administrator role required."


def create_exception_handler(status_code: int, error_code: str) -> Callable[[Request, Exception], JSONResponse]:
    async def exception_handler(request: Request, exc: ShopAdminException):
        return JSONResponse(
            content={
                "message": exc.message,
                "error_code": error_code
            },
            status_code=status_code
        )

    return exception_handler


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Invalid request data",
            "error_code": "validation_error",
            "errors": errors
        }
    )


def register_all_errors(app: FastAPI):
    app.add_exception_handler(
        NotFound,
        create_exception_handler(status.HTTP_404_NOT_FOUND, "not_found")
    )

    app.add_exception_handler(
        Conflict,
        create_exception_handler(status.HTTP_409_CONFLICT, "conflict")
    )

    app.add_exception_handler(
        BadRequest,
        create_exception_handler(status.HTTP_400_BAD_REQUEST, "bad_request")
    )

    app.add_exception_handler(
        Unauthorized,
        create_exception_handler(status.HTTP_401_UNAUTHORIZED, "invalid_credentials")
    )

    app.add_exception_handler(
        InvalidToken,
        create_exception_handler(status.HTTP_401_UNAUTHORIZED, "invalid_token")
    )

    app.add_exception_handler(
        AccessTokenRequired,
        create_exception_handler(status.HTTP_401_UNAUTHORIZED, "access_token_required")
    )

    app.add_exception_handler(
        InsufficientPermission,
        create_exception_handler(status.HTTP_403_FORBIDDEN, "insufficient_permission")
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def internal_server_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "An internal server error occurred",
                "error_code": "server_error"
            }
        )
