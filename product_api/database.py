# product_api/database.py
import threading
from collections import Counter
from typing import Dict, Iterable, List, Optional

from .core import ProductIn, _make_product
from .models import Product

# This file holds the in-memory product store.  Nothing is persisted:
# a restart brings back the seed records below.

SEED_PRODUCTS: List[Dict[str, object]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


def seed_products() -> List[Product]:
    return [Product(**p) for p in SEED_PRODUCTS]


class ProductStore:
    """Ordered, in-memory collection of products.

    One lock guards every read and write, so the store stays consistent
    even when requests are served from several worker threads.  Records
    handed out are copies; callers cannot mutate the store behind its back.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._lock = threading.Lock()
        self._products: List[Product] = list(seed_products() if products is None else products)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        return -1

    def all(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    def get(self, product_id: str) -> Optional[Product]:
        with self._lock:
            i = self._index_of(product_id)
            return self._products[i].model_copy() if i >= 0 else None

    def add(self, payload: ProductIn) -> Product:
        product = _make_product(None, payload)
        with self._lock:
            self._products.append(product)
        return product.model_copy()

    def replace(self, product_id: str, payload: ProductIn) -> Optional[Product]:
        product = _make_product(product_id, payload)
        with self._lock:
            i = self._index_of(product_id)
            if i < 0:
                return None
            self._products[i] = product
        return product.model_copy()

    def remove(self, product_id: str) -> Optional[Product]:
        with self._lock:
            i = self._index_of(product_id)
            if i < 0:
                return None
            return self._products.pop(i)

    def filter_by_category(self, category: Optional[str]) -> List[Product]:
        if not category:
            return self.all()
        wanted = category.lower()
        with self._lock:
            return [p.model_copy() for p in self._products if p.category.lower() == wanted]

    def search_by_name(self, term: str) -> List[Product]:
        term = term.lower()
        with self._lock:
            return [p.model_copy() for p in self._products if term in p.name.lower()]

    def count_by_category(self) -> Dict[str, int]:
        with self._lock:
            # Counter keeps first-seen order
            return dict(Counter(p.category.lower() for p in self._products))

    def reset(self) -> None:
        with self._lock:
            self._products = seed_products()
