"""Product catalog API client and client-side view state.

:class:`ProductCatalogClient` is a thin wrapper around the catalog's REST
API built on ``requests``.  Every method returns a ``(data, error)`` tuple:
on success ``error`` is ``None``; on failure ``data`` is ``None`` (or an
empty list) and ``error`` is a dictionary with the keys ``status_code``,
``message`` and ``errors`` (the list of field messages reported by the
server, possibly empty).

:class:`ProductCatalogView` holds the state behind the catalog UI: the
product list, the in-progress form and the current error messages.  It
mirrors the server's validation before submitting, keeps the local list
sorted by name after each mutation and surfaces server-reported errors.

Example::

    client = ProductCatalogClient(base_url="http://localhost:3001")
    view = ProductCatalogView(client)
    view.load()
    view.update_field("name", "Banana")
    view.update_field("price", "2.5")
    view.update_field("sku", "B1")
    view.submit()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

NAME_REQUIRED = "Name is required"
PRICE_INVALID = "Price must be greater than zero"
SKU_REQUIRED = "SKU is required"
GENERIC_SUBMIT_ERROR = "Failed to add product"

FORM_FIELDS = ("name", "price", "sku")

ApiError = Dict[str, Any]


class ProductCatalogClient:
    """Client for the ``/products`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3001``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the decoded JSON
            body (``None`` for empty bodies); ``error`` describes a
            failed request.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "errors": []}

        if response.status_code >= 400:
            error = self._error_from_response(response)
            logger.error("API request failed (%s): %s", error["status_code"], error["message"])
            return None, error
        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _error_from_response(response: Any) -> ApiError:
        errors: List[str] = []
        message = ""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            if isinstance(body.get("errors"), list):
                errors = [str(item) for item in body["errors"]]
                message = "; ".join(errors)
            else:
                message = str(body.get("error") or body.get("detail") or "")
        if not message:
            message = response.text or f"HTTP {response.status_code}"
        return {"status_code": response.status_code, "message": message, "errors": errors}

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all products sorted by name."""
        data, error = self._request("GET", "/products")
        if error:
            return [], error
        return data or [], None

    def get_product(self, product_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/products/{product_id}")

    def create_product(
        self, name: str, price: float, sku: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request(
            "POST", "/products", json_body={"name": name, "price": price, "sku": sku}
        )

    def update_product(
        self, product_id: int, name: str, price: float, sku: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request(
            "PUT",
            f"/products/{product_id}",
            json_body={"name": name, "price": price, "sku": sku},
        )

    def delete_product(self, product_id: int) -> Tuple[None, Optional[ApiError]]:
        _, error = self._request("DELETE", f"/products/{product_id}")
        return None, error


def _sort_key(product: Dict[str, Any]) -> Tuple[str, int]:
    return (str(product.get("name", "")).casefold(), product.get("id") or 0)


def _empty_form() -> Dict[str, str]:
    return {field: "" for field in FORM_FIELDS}


class ProductCatalogView:
    """Local state of the catalog UI.

    Attributes:
        products: Products currently shown, sorted by name.
        form: The in-progress form values, kept as entered (strings).
        errors: Messages from the last failed submit.
    """

    def __init__(self, client: ProductCatalogClient) -> None:
        self.client = client
        self.products: List[Dict[str, Any]] = []
        self.form: Dict[str, str] = _empty_form()
        self.errors: List[str] = []

    def load(self) -> bool:
        """Fetch the full product list.  Returns ``False`` if the call failed."""
        products, error = self.client.list_products()
        if error:
            logger.error("Failed to load products: %s", error["message"])
            return False
        self.products = sorted(products, key=_sort_key)
        return True

    def update_field(self, field: str, value: str) -> None:
        if field not in self.form:
            raise ValueError(f"Unknown form field: {field}")
        self.form[field] = value

    def validate_form(self) -> List[str]:
        """Check the form with the same rules the server applies."""
        errors: List[str] = []
        if not self.form["name"].strip():
            errors.append(NAME_REQUIRED)
        if self._parse_price() is None:
            errors.append(PRICE_INVALID)
        if not self.form["sku"].strip():
            errors.append(SKU_REQUIRED)
        return errors

    def _parse_price(self) -> Optional[float]:
        try:
            price = float(self.form["price"])
        except (TypeError, ValueError):
            return None
        # NaN fails the comparison as well.
        if not price > 0 or price == float("inf"):
            return None
        return price

    def submit(self) -> Optional[Dict[str, Any]]:
        """Validate and post the form.

        On success the returned product is added to ``products``, the
        form and errors are cleared and the product is returned.  On
        failure ``errors`` is populated and ``None`` is returned.
        """
        validation_errors = self.validate_form()
        if validation_errors:
            self.errors = validation_errors
            return None

        self.errors = []
        product, error = self.client.create_product(
            self.form["name"].strip(), self._parse_price(), self.form["sku"].strip()
        )
        if error:
            self.errors = error["errors"] or [GENERIC_SUBMIT_ERROR]
            return None

        self.products = sorted([*self.products, product], key=_sort_key)
        self.form = _empty_form()
        return product

    def remove(self, product_id: int) -> bool:
        """Delete a product and drop it from the local list on success."""
        _, error = self.client.delete_product(product_id)
        if error:
            logger.error("Failed to remove product %s: %s", product_id, error["message"])
            return False
        self.products = [product for product in self.products if product.get("id") != product_id]
        return True
