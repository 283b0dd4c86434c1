# product_api/main.py
"""
Product API application.

``create_app`` wires the pieces together: logging, CORS, the request
logger, the API key gate, the product routes and the error handlers.  An
``app`` instance is built at import time so the service can be started
with::

    uvicorn product_api.main:app --port 3000

or through the ``product-api`` console script, which calls ``run``.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import Settings, settings as default_settings
from .core import ProductIn
from .database import ProductStore
from .errors import register_error_handlers
from .handlers import (
    create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, product_stats_logic, search_products_logic,
    update_product_logic,
)
from .logging_config import log_request, setup_logging
from .models import CategoryStats, DeleteResult, ErrorBody, Product, ProductPage, SearchResult
from .security import get_store, require_api_key, validated_product

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the Product API! Go to /api/products to see all products."

ERROR_RESPONSES = {
    401: {"model": ErrorBody},
    400: {"model": ErrorBody},
    404: {"model": ErrorBody},
}

# ---------------------------
# Product endpoints
# ---------------------------
router = APIRouter(
    prefix="/api/products",
    tags=["products"],
    dependencies=[Depends(require_api_key)],
    responses=ERROR_RESPONSES,
)


@router.get("", response_model=ProductPage)
async def list_products(
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    return await list_products_logic(store, category, page, limit)


# search and stats are declared before /{product_id} so they are not
# captured as ids
@router.get("/search", response_model=SearchResult)
async def search_products(
    name: Optional[str] = Query(None),
    store: ProductStore = Depends(get_store),
):
    return await search_products_logic(store, name)


@router.get("/stats", response_model=CategoryStats)
async def product_stats(store: ProductStore = Depends(get_store)):
    return await product_stats_logic(store)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)


@router.post("", response_model=Product, status_code=201)
async def create_product(
    payload: ProductIn = Depends(validated_product),
    store: ProductStore = Depends(get_store),
):
    product = await create_product_logic(store, payload)
    logger.info("Created product %s", product.id)
    return product


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    payload: ProductIn = Depends(validated_product),
    store: ProductStore = Depends(get_store),
):
    return await update_product_logic(store, product_id, payload)


@router.delete("/{product_id}", response_model=DeleteResult)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    result = await delete_product_logic(store, product_id)
    logger.info("Deleted product %s", product_id)
    return result


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    """Build a configured application.

    Every call gets its own ``ProductStore`` (seeded) unless one is passed
    in, so independent apps never share state.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        log_request(request)
        return await call_next(request)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return WELCOME_MESSAGE

    app.include_router(router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    logger.info("Server is running on http://localhost:%s", default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
