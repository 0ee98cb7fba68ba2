# tests/test_errors.py
from product_catalog_api.app.core.errors import INVALID_BODY, request_errors_to_messages


def body_error(field, kind="string_type"):
    return {"type": kind, "loc": ("body", field), "msg": "bad"}


def test_rejected_fields_count_as_missing():
    errors = [body_error("price", "float_parsing")]
    body = {"name": "Banana", "price": "abc", "sku": ""}
    assert request_errors_to_messages(errors, body) == [
        "Price must be greater than zero",
        "SKU is required",
    ]


def test_accepted_numeric_string_price_is_not_reported():
    errors = [body_error("name")]
    body = {"name": 1, "price": "2.5", "sku": "B1"}
    assert request_errors_to_messages(errors, body) == ["Name is required"]


def test_unparsable_body():
    errors = [{"type": "json_invalid", "loc": ("body", 0), "msg": "bad"}]
    assert request_errors_to_messages(errors, "not json") == [INVALID_BODY]


def test_error_outside_product_fields_is_reported_last():
    errors = [{"type": "extra", "loc": ("body", "colour"), "msg": "bad"}]
    body = {"name": "", "price": 1, "sku": "B1"}
    assert request_errors_to_messages(errors, body) == ["Name is required", INVALID_BODY]
