"""
Exception -> HTTP response mapping.

Domain exceptions become {"error": message} with the status from
EXCEPTION_STATUS_CODES (first matching class in MRO order), validation
errors become 400 {"errors": [...]}, anything else a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from exceptions import (
    ShopException,
    MissingTokenException,
    InvalidTokenException,
    InvalidCredentialsException,
    PermissionDeniedException,
    UserNotFoundException,
    UserAlreadyExistsException,
    UserAlreadySellerException,
    ProductNotFoundException,
    CategoryNotFoundException,
    CategoryAlreadyExistsException,
    EmptyCartException,
    CartItemNotFoundException,
    WishlistItemAlreadyExistsException,
    WishlistItemNotFoundException,
    OrderNotFoundException,
    InsufficientStockException,
)

logger = logging.getLogger(__name__)

EXCEPTION_STATUS_CODES: dict[type[ShopException], int] = {
    MissingTokenException: status.HTTP_401_UNAUTHORIZED,
    InvalidTokenException: status.HTTP_401_UNAUTHORIZED,
    InvalidCredentialsException: status.HTTP_400_BAD_REQUEST,
    PermissionDeniedException: status.HTTP_403_FORBIDDEN,
    UserNotFoundException: status.HTTP_404_NOT_FOUND,
    UserAlreadyExistsException: status.HTTP_400_BAD_REQUEST,
    UserAlreadySellerException: status.HTTP_400_BAD_REQUEST,
    ProductNotFoundException: status.HTTP_404_NOT_FOUND,
    CategoryNotFoundException: status.HTTP_404_NOT_FOUND,
    CategoryAlreadyExistsException: status.HTTP_400_BAD_REQUEST,
    EmptyCartException: status.HTTP_400_BAD_REQUEST,
    CartItemNotFoundException: status.HTTP_404_NOT_FOUND,
    WishlistItemAlreadyExistsException: status.HTTP_400_BAD_REQUEST,
    WishlistItemNotFoundException: status.HTTP_404_NOT_FOUND,
    OrderNotFoundException: status.HTTP_404_NOT_FOUND,
    InsufficientStockException: status.HTTP_400_BAD_REQUEST,
}

SERVER_ERROR_MESSAGE = "Server error"


def get_status_code(exc: ShopException) -> int:
    for exc_class in type(exc).__mro__:
        if exc_class in EXCEPTION_STATUS_CODES:
            return EXCEPTION_STATUS_CODES[exc_class]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def format_validation_errors(exc: RequestValidationError) -> list[dict]:
    """
    Flatten pydantic errors to {msg, path, location}.

    loc comes as ("body", "price") or ("query", "limit"); the first element
    is the location, the rest is joined into a dotted path.
    """
    errors = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        location = str(loc[0]) if loc else ""
        path = ".".join(str(part) for part in loc[1:])
        errors.append({"msg": error.get("msg", "Invalid value"), "path": path, "location": location})
    return errors


async def shop_exception_handler(request: Request, exc: ShopException) -> JSONResponse:
    status_code = get_status_code(exc)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path}: unmapped {exc!r}")
        return JSONResponse(status_code=status_code, content={"error": SERVER_ERROR_MESSAGE})
    logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc!r}")
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": format_validation_errors(exc)}
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": SERVER_ERROR_MESSAGE}
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShopException, shop_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
