# product_api/core.py
import math
import uuid
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional, Union

from .errors import ValidationError
from .models import Product


class ProductIn(BaseModel):
    """A create/update payload that has already passed ``validate_product``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(alias="inStock")


def _is_filled_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_positive_number(value: Any) -> bool:
    # bool is an int subclass but not a price; inf and nan have no JSON form
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value > 0


def validate_product(payload: Any) -> ProductIn:
    """Check a decoded JSON body and turn it into a ``ProductIn``.

    The checks run in a fixed order and the first failing one wins, so a
    payload with several problems always reports the same field.  Anything
    that is not a JSON object is checked as an empty one.
    """
    data: Dict[str, Any] = payload if isinstance(payload, dict) else {}

    if not _is_filled_string(data.get("name")):
        raise ValidationError("Name is required and must be a non-empty string")
    if not _is_filled_string(data.get("description")):
        raise ValidationError("Description is required and must be a non-empty string")
    if not _is_positive_number(data.get("price")):
        raise ValidationError("Price is required and must be a positive number")
    if not _is_filled_string(data.get("category")):
        raise ValidationError("Category is required and must be a non-empty string")
    if not isinstance(data.get("inStock"), bool):
        raise ValidationError("inStock is required and must be a boolean")

    return ProductIn(
        name=data["name"],
        description=data["description"],
        price=data["price"],
        category=data["category"],
        in_stock=data["inStock"],
    )


def _make_product(product_id: Optional[str], p: ProductIn) -> Product:
    return Product(
        id=product_id or str(uuid.uuid4()),
        name=p.name,
        description=p.description,
        price=p.price,
        category=p.category,
        in_stock=p.in_stock,
    )
