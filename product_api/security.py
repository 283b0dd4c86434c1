# product_api/security.py
"""
API key gate and request-scoped dependencies.

The product routes carry ``require_api_key`` as a router dependency, so it
runs before any body is read or any handler is called.  The expected key
comes from the ``Settings`` stored on the application at creation time.
"""

import secrets
from typing import Any, Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from .config import Settings
from .core import ProductIn, validate_product
from .database import ProductStore
from .errors import UnauthorizedError, ValidationError

API_KEY_HEADER = "x-api-key"

api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


async def require_api_key(
    api_key: Optional[str] = Depends(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    if not api_key or not secrets.compare_digest(api_key.encode("utf-8"), settings.api_key.encode("utf-8")):
        raise UnauthorizedError()


async def validated_product(request: Request) -> ProductIn:
    """Decode the JSON body and run it through the product validator."""
    body = await request.body()
    payload: Any = {}
    if body.strip():
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationError("Invalid JSON body")
    return validate_product(payload)
