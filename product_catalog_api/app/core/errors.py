"""
Catalog exceptions and their HTTP translation.

Services raise these when a request cannot be fulfilled; the handlers
registered by ``register_exception_handlers`` turn them into JSON
responses.  Validation and conflict problems are reported as a list
under ``errors`` so that a client sees every problem at once; the
other failures carry a single ``error`` message.
"""

import logging
from typing import Any, Iterable, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product_catalog_api.app.services.validation import validate_product

logger = logging.getLogger(__name__)

SKU_EXISTS = "SKU already exists"
PRODUCT_NOT_FOUND = "Product not found"
INTERNAL_ERROR = "Internal server error"
INVALID_BODY = "Request body must be a JSON object"

PRODUCT_FIELDS = ("name", "price", "sku")


class CatalogError(Exception):
    """Base class for errors raised by the catalog services."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def to_content(self) -> dict:
        return {"error": INTERNAL_ERROR}


class ValidationError(CatalogError):
    """One or more field values are unacceptable."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors))

    def to_content(self) -> dict:
        return {"errors": self.errors}


class ConflictError(CatalogError):
    """The SKU is already used by another product."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, sku: str) -> None:
        self.sku = sku
        super().__init__(f"SKU {sku!r} already exists")

    def to_content(self) -> dict:
        return {"errors": [SKU_EXISTS]}


class NotFoundError(CatalogError):
    """No product exists with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, product_id) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")

    def to_content(self) -> dict:
        return {"error": PRODUCT_NOT_FOUND}


class InternalError(CatalogError):
    """The store failed unexpectedly.  Details are logged, never returned."""


def _as_number(value: Any) -> Any:
    # Parsing already accepted this value, so numeric strings convert.
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return value


def request_errors_to_messages(errors: Iterable[dict], body: Any) -> List[str]:
    """Turn body parsing errors into the catalog's field messages.

    Fields the parser rejected count as missing; the remaining fields
    of the raw body still go through ``validate_product`` so that every
    problem is reported at once.
    """
    if not isinstance(body, dict):
        return [INVALID_BODY]

    rejected = set()
    unknown = False
    for error in errors:
        loc = error.get("loc") or ()
        field_name = loc[-1] if len(loc) > 1 else None
        if field_name in PRODUCT_FIELDS:
            rejected.add(field_name)
        else:
            unknown = True

    values = {
        field: None if field in rejected else body.get(field)
        for field in PRODUCT_FIELDS
    }
    messages = validate_product(values["name"], _as_number(values["price"]), values["sku"])
    if unknown:
        messages.append(INVALID_BODY)
    return messages


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # A malformed id in the path can never match a product.
    if any((error.get("loc") or ("",))[0] == "path" for error in errors):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": PRODUCT_NOT_FOUND},
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": request_errors_to_messages(errors, exc.body)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the catalog's exception handlers to ``app``."""
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
