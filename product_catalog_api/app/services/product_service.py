"""
Service layer for products.

This module provides the CRUD operations behind the ``/products``
endpoints.  Each operation validates its input, runs a single
parameterized statement against the in‑memory store and returns
``ProductRead`` instances enriched with the derived missing letter.

Failures are raised as catalog errors: ``ValidationError`` for bad
input, ``ConflictError`` for a duplicate SKU, ``NotFoundError`` for an
unknown id and ``InternalError`` for anything the store reports
unexpectedly.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from product_catalog_api.app.core.db import get_cursor
from product_catalog_api.app.core.errors import (
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from product_catalog_api.app.schemas.product import ProductRead, ProductWrite
from product_catalog_api.app.services.missing_letter import find_missing_letter
from product_catalog_api.app.services.validation import validate_product

logger = logging.getLogger(__name__)


class ProductService:
    """Service class for managing products."""

    @classmethod
    async def create_product(cls, data: ProductWrite) -> ProductRead:
        """Insert a new product and return the created record.

        Name and SKU are stored trimmed.
        """
        name, price, sku = cls._clean(data)
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    "INSERT INTO products (name, price, sku) VALUES (?, ?, ?)",
                    (name, price, sku),
                )
                product_id = cursor.lastrowid
                row = cursor.execute(
                    "SELECT * FROM products WHERE id = ?", (product_id,)
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            cls._raise_integrity_error("create", sku, exc)
        except sqlite3.Error as exc:
            cls._raise_store_error("create", exc)
        logger.info("Created product %s (sku=%s)", product_id, sku)
        return cls._row_to_product_read(row)

    @classmethod
    async def list_products(cls) -> List[ProductRead]:
        """Return every product ordered by name (case-insensitive), then id."""
        try:
            with get_cursor() as cursor:
                rows = cursor.execute(
                    "SELECT * FROM products ORDER BY name COLLATE CASEFOLD ASC, id ASC"
                ).fetchall()
        except sqlite3.Error as exc:
            cls._raise_store_error("list", exc)
        return [cls._row_to_product_read(row) for row in rows]

    @classmethod
    async def get_product(cls, product_id: int) -> ProductRead:
        """Retrieve a single product by its ID."""
        try:
            with get_cursor() as cursor:
                row = cursor.execute(
                    "SELECT * FROM products WHERE id = ?", (product_id,)
                ).fetchone()
        except sqlite3.Error as exc:
            cls._raise_store_error("get", exc)
        if row is None:
            raise NotFoundError(product_id)
        return cls._row_to_product_read(row)

    @classmethod
    async def update_product(cls, product_id: int, data: ProductWrite) -> ProductRead:
        """Replace name, price and SKU of an existing product.

        The id never changes.  Keeping the product's own SKU is not a
        conflict; taking another product's SKU is.
        """
        name, price, sku = cls._clean(data)
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    "UPDATE products SET name = ?, price = ?, sku = ? WHERE id = ?",
                    (name, price, sku, product_id),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError(product_id)
                row = cursor.execute(
                    "SELECT * FROM products WHERE id = ?", (product_id,)
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            cls._raise_integrity_error("update", sku, exc)
        except sqlite3.Error as exc:
            cls._raise_store_error("update", exc)
        logger.info("Updated product %s", product_id)
        return cls._row_to_product_read(row)

    @classmethod
    async def delete_product(cls, product_id: int) -> None:
        """Delete a product by ID."""
        try:
            with get_cursor() as cursor:
                cursor.execute("DELETE FROM products WHERE id = ?", (product_id,))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            cls._raise_store_error("delete", exc)
        if not affected:
            raise NotFoundError(product_id)
        logger.info("Deleted product %s", product_id)

    @staticmethod
    def _clean(data: ProductWrite) -> tuple:
        errors = validate_product(data.name, data.price, data.sku)
        if errors:
            raise ValidationError(errors)
        return data.name.strip(), data.price, data.sku.strip()

    @classmethod
    def _raise_integrity_error(cls, action: str, sku: str, exc: sqlite3.IntegrityError):
        if "UNIQUE" in str(exc):
            logger.info("Rejected %s: SKU %s already exists", action, sku)
            raise ConflictError(sku) from exc
        cls._raise_store_error(action, exc)

    @staticmethod
    def _raise_store_error(action: str, exc: sqlite3.Error):
        logger.exception("Product %s failed", action)
        raise InternalError(f"product {action} failed") from exc

    @staticmethod
    def _row_to_product_read(row: sqlite3.Row) -> ProductRead:
        """Convert a database row to a ProductRead schema instance."""
        return ProductRead(
            id=row["id"],
            name=row["name"],
            price=row["price"],
            sku=row["sku"],
            missing_letter=find_missing_letter(row["name"]),
        )
