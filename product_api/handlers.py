# product_api/handlers.py
from typing import Any, Optional

from .core import ProductIn
from .database import ProductStore
from .errors import NotFoundError, ValidationError
from .models import CategoryStats, DeleteResult, Product, ProductPage, SearchResult

# This file contains the logic behind every product endpoint.  Functions
# take the store explicitly and raise ApiError subclasses on failure.


def _positive_int(raw: Optional[Any], default: int) -> int:
    # anything that is not a positive integer falls back to the default
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


async def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> ProductPage:
    result = store.filter_by_category(category)

    page_no = _positive_int(page, 1)
    page_size = _positive_int(limit, len(result))
    start = (page_no - 1) * page_size

    return ProductPage(
        total=len(result),
        page=page_no,
        limit=page_size,
        products=result[start:start + page_size],
    )


async def search_products_logic(store: ProductStore, name: Optional[str]) -> SearchResult:
    if not name:
        raise ValidationError("Name query parameter is required")
    results = store.search_by_name(name)
    return SearchResult(total=len(results), products=results)


async def product_stats_logic(store: ProductStore) -> CategoryStats:
    return CategoryStats(countByCategory=store.count_by_category())


async def get_product_logic(store: ProductStore, product_id: str) -> Product:
    p = store.get(product_id)
    if p is None:
        raise NotFoundError("Product not found")
    return p


async def create_product_logic(store: ProductStore, payload: ProductIn) -> Product:
    return store.add(payload)


async def update_product_logic(store: ProductStore, product_id: str, payload: ProductIn) -> Product:
    p = store.replace(product_id, payload)
    if p is None:
        raise NotFoundError("Product not found")
    return p


async def delete_product_logic(store: ProductStore, product_id: str) -> DeleteResult:
    p = store.remove(product_id)
    if p is None:
        raise NotFoundError("Product not found")
    return DeleteResult(message="Product deleted", product=p)
