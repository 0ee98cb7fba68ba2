# tests/test_validation.py
import math

import pytest

from product_catalog_api.app.services.validation import validate_product

NAME = "Name is required"
PRICE = "Price must be greater than zero"
SKU = "SKU is required"


def test_valid_triple_has_no_errors():
    assert validate_product("Banana", 2.5, "B1") == []


def test_all_errors_are_reported_in_order():
    assert validate_product(None, None, None) == [NAME, PRICE, SKU]


def test_whitespace_counts_as_blank():
    assert validate_product("   ", 1, "\t") == [NAME, SKU]


@pytest.mark.parametrize("price", [0, -1, -0.01, None, "10", math.nan, math.inf, True])
def test_bad_prices(price):
    assert validate_product("Banana", price, "B1") == [PRICE]


@pytest.mark.parametrize("price", [0.01, 1, 99999.99])
def test_good_prices(price):
    assert validate_product("Banana", price, "B1") == []


def test_non_string_name_is_rejected():
    assert validate_product(123, 1, "B1") == [NAME]
