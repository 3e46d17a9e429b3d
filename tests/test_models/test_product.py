"""
Tests for the product JSON codec
"""
import pytest
from pydantic import ValidationError

from app.models.product import Product, ProductDeleteRequest


def test_serializes_name_then_quantity():
    product = Product(name="apple", quantity=54)

    assert product.model_dump_json(by_alias=True) == '{"Name":"apple","quantity":54}'


def test_round_trip_preserves_record():
    product = Product(name="pear", quantity=12)

    decoded = Product.model_validate_json(product.model_dump_json(by_alias=True))

    assert decoded == product


def test_accepts_lowercase_name():
    assert Product.model_validate({"name": "kiwi", "quantity": 1}).name == "kiwi"


def test_ignores_unknown_fields():
    product = Product.model_validate_json('{"Name":"kiwi","quantity":1,"price":3}')

    assert product.model_dump(by_alias=True) == {"Name": "kiwi", "quantity": 1}


@pytest.mark.parametrize("payload", [
    '{"Name":"kiwi"}',
    '{"quantity":1}',
    '{"Name":"kiwi","quantity":"1"}',
    '{"Name":"kiwi","quantity":1.5}',
    '{"Name":5,"quantity":1}',
    '[]',
])
def test_rejects_structurally_invalid_payloads(payload):
    with pytest.raises(ValidationError):
        Product.model_validate_json(payload)


def test_delete_request_decodes_like_product():
    request = ProductDeleteRequest.model_validate_json('{"Name":"apple","quantity":3}')

    assert request.name == "apple"


def test_delete_request_quantity_is_optional():
    request = ProductDeleteRequest.model_validate_json('{"Name":"apple"}')

    assert request.name == "apple"
    assert request.quantity is None
