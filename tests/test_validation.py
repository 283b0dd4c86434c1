# tests/test_validation.py
import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.core import ProductIn, validate_product
from product_api.database import ProductStore
from product_api.errors import ErrorKind, ValidationError
from product_api.main import create_app

API_KEY = "test-key"
HEADERS = {"x-api-key": API_KEY}
VALID = {"name": "Mouse", "description": "Wireless", "price": 25, "category": "electronics", "inStock": True}

NAME_MSG = "Name is required and must be a non-empty string"
DESCRIPTION_MSG = "Description is required and must be a non-empty string"
PRICE_MSG = "Price is required and must be a positive number"
CATEGORY_MSG = "Category is required and must be a non-empty string"
IN_STOCK_MSG = "inStock is required and must be a boolean"

MISSING = object()

BAD_FIELDS = [
    ("name", MISSING, NAME_MSG),
    ("name", "", NAME_MSG),
    ("name", "   ", NAME_MSG),
    ("name", 42, NAME_MSG),
    ("name", None, NAME_MSG),
    ("description", MISSING, DESCRIPTION_MSG),
    ("description", "\t", DESCRIPTION_MSG),
    ("description", ["x"], DESCRIPTION_MSG),
    ("price", MISSING, PRICE_MSG),
    ("price", 0, PRICE_MSG),
    ("price", -1.5, PRICE_MSG),
    ("price", "25", PRICE_MSG),
    ("price", True, PRICE_MSG),
    ("price", None, PRICE_MSG),
    ("category", MISSING, CATEGORY_MSG),
    ("category", " ", CATEGORY_MSG),
    ("category", {"a": 1}, CATEGORY_MSG),
    ("inStock", MISSING, IN_STOCK_MSG),
    ("inStock", "true", IN_STOCK_MSG),
    ("inStock", 1, IN_STOCK_MSG),
    ("inStock", None, IN_STOCK_MSG),
]


def with_field(field, value):
    payload = dict(VALID)
    if value is MISSING:
        del payload[field]
    else:
        payload[field] = value
    return payload


@pytest.mark.parametrize("field,value,message", BAD_FIELDS)
def test_validator_names_failing_field(field, value, message):
    with pytest.raises(ValidationError) as exc:
        validate_product(with_field(field, value))
    assert exc.value.message == message
    assert exc.value.kind is ErrorKind.VALIDATION


def test_first_failing_check_wins():
    with pytest.raises(ValidationError) as exc:
        validate_product({})
    assert exc.value.message == NAME_MSG

    with pytest.raises(ValidationError) as exc:
        validate_product({"name": "Mouse", "price": -1, "inStock": "no"})
    assert exc.value.message == DESCRIPTION_MSG

    with pytest.raises(ValidationError) as exc:
        validate_product({"name": "Mouse", "description": "Wireless", "category": "", "inStock": "no"})
    assert exc.value.message == PRICE_MSG


@pytest.mark.parametrize("payload", [None, [], ["Mouse"], "Mouse", 3])
def test_non_object_payload_is_checked_as_empty(payload):
    with pytest.raises(ValidationError) as exc:
        validate_product(payload)
    assert exc.value.message == NAME_MSG


def test_valid_payload_becomes_product_in():
    p = validate_product(dict(VALID, id="client-id", extra="ignored"))
    assert isinstance(p, ProductIn)
    assert p.name == "Mouse"
    assert p.price == 25
    assert isinstance(p.price, int)
    assert p.in_stock is True
    assert not hasattr(p, "id")


def test_strings_are_kept_untrimmed():
    p = validate_product(dict(VALID, name="  Mouse "))
    assert p.name == "  Mouse "


def test_float_price_is_accepted():
    assert validate_product(dict(VALID, price=0.01)).price == 0.01


def test_huge_integer_price_is_accepted():
    assert validate_product(dict(VALID, price=10 ** 400)).price == 10 ** 400


@pytest.mark.parametrize("price", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_price_is_rejected(price):
    with pytest.raises(ValidationError) as exc:
        validate_product(dict(VALID, price=price))
    assert exc.value.message == PRICE_MSG


@pytest.mark.parametrize("raw_price", [b"1e400", b"Infinity", b"-Infinity", b"NaN"])
@pytest.mark.parametrize("method,path", [("POST", "/api/products"), ("PUT", "/api/products/1")])
def test_non_finite_price_in_raw_body(raw_price, method, path):
    # these tokens only reach the validator as raw bytes; json= refuses to encode them
    store = ProductStore()
    client = TestClient(create_app(Settings(api_key=API_KEY), store))
    before = store.all()
    body = b'{"name":"X","description":"d","price":' + raw_price + b',"category":"c","inStock":true}'

    r = client.request(
        method,
        path,
        content=body,
        headers=dict(HEADERS, **{"content-type": "application/json"}),
    )

    assert r.status_code == 400
    assert r.json() == {"error": PRICE_MSG}
    assert store.all() == before


@pytest.mark.parametrize("field,value,message", BAD_FIELDS)
def test_create_rejects_and_leaves_store_alone(field, value, message):
    store = ProductStore()
    client = TestClient(create_app(Settings(api_key=API_KEY), store))

    r = client.post("/api/products", json=with_field(field, value), headers=HEADERS)

    assert r.status_code == 400
    assert r.json() == {"error": message}
    assert len(store) == 3


@pytest.mark.parametrize("field,value,message", BAD_FIELDS)
def test_update_rejects_and_leaves_record_alone(field, value, message):
    store = ProductStore()
    client = TestClient(create_app(Settings(api_key=API_KEY), store))
    before = store.get("1")

    r = client.put("/api/products/1", json=with_field(field, value), headers=HEADERS)

    assert r.status_code == 400
    assert r.json() == {"error": message}
    assert store.get("1") == before


def test_update_validates_before_lookup():
    client = TestClient(create_app(Settings(api_key=API_KEY)))
    r = client.put("/api/products/999", json=with_field("price", 0), headers=HEADERS)
    assert r.status_code == 400
