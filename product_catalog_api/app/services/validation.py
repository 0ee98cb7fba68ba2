"""
Field validation for product payloads.

All three checks always run so that the caller receives every problem
in a single response.
"""

import math
from numbers import Real
from typing import Any, List

NAME_REQUIRED = "Name is required"
PRICE_INVALID = "Price must be greater than zero"
SKU_REQUIRED = "SKU is required"


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value > 0


def validate_product(name: Any, price: Any, sku: Any) -> List[str]:
    """Return the list of error messages for a ``(name, price, sku)`` triple.

    An empty list means the values are acceptable for insert or update.
    """
    errors: List[str] = []
    if _is_blank(name):
        errors.append(NAME_REQUIRED)
    if not _is_positive_number(price):
        errors.append(PRICE_INVALID)
    if _is_blank(sku):
        errors.append(SKU_REQUIRED)
    return errors
