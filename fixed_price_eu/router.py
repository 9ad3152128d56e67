"""FastAPI router for serving fixed-price storefront prices."""

from typing import Optional
from time import perf_counter
import logging
from fastapi import APIRouter, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from .models.pricing_models import PriceContext
from .notices import check_settings
from .storage import BaseCatalog
from .storefront import Storefront
from .telemetry import get_request_duration_histogram

logger = logging.getLogger(__name__)

COUNTRY_PATTERN = r"^[A-Za-z]{2}$"


def get_pricing_router(storefront: Storefront, catalog: BaseCatalog) -> APIRouter:
    """
    Create a FastAPI router for price rendering endpoints.

    Args:
        storefront: Storefront used to render prices
        catalog: Catalog the products are read from

    Returns:
        APIRouter with async endpoints
    """
    router = APIRouter(prefix="/prices", tags=["prices"])
    duration_histogram = get_request_duration_histogram()

    class QuoteRequest(BaseModel):
        price: float = Field(..., ge=0.0)
        tax_class: str = "standard"
        taxable: bool = True
        country: Optional[str] = Field(None, pattern=COUNTRY_PATTERN, description="ISO 3166-1 alpha-2 country code")

    def _record_duration(start: float, endpoint: str) -> None:
        duration_ms = (perf_counter() - start) * 1000
        if duration_histogram:
            duration_histogram.record(duration_ms, attributes={"endpoint": endpoint})
        logger.info("prices_rendered", extra={"endpoint": endpoint, "duration_ms": duration_ms})

    @router.get("/products")
    async def list_products(country: Optional[str] = Query(None, pattern=COUNTRY_PATTERN)):
        """Render every catalog product for a customer country."""
        start = perf_counter()
        context = PriceContext(customer_country=country)
        products = [storefront.render_product(p, context) for p in catalog.all()]
        _record_duration(start, "list_products")
        return [p.model_dump(mode="json") for p in products]

    @router.get("/products/{product_id}")
    async def get_product(product_id: str, country: Optional[str] = Query(None, pattern=COUNTRY_PATTERN)):
        """Render a single product for a customer country."""
        start = perf_counter()
        product = catalog.get(product_id)
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        rendered = storefront.render_product(product, PriceContext(customer_country=country))
        _record_duration(start, "get_product")
        return rendered.model_dump(mode="json")

    @router.post("/quote")
    async def quote(request: QuoteRequest):
        """Evaluate one price for a customer country."""
        start = perf_counter()
        context = PriceContext(customer_country=request.country)
        adjustment = storefront.quote(request.price, request.tax_class, request.taxable, context)
        _record_duration(start, "quote")
        return adjustment.model_dump(mode="json")

    @router.get("/notices")
    async def notices():
        """Advisory notices about the store's tax settings."""
        return [n.model_dump(mode="json") for n in check_settings(storefront.config.tax)]

    return router


def create_pricing_app(storefront: Storefront, catalog: BaseCatalog) -> FastAPI:
    """
    Convenience function to create a pricing app.

    Args:
        storefront: Storefront used to render prices
        catalog: Catalog the products are read from

    Returns:
        FastAPI app ready to run

    Example:
        app = create_pricing_app(Storefront(config), load_catalog("catalog.json"))

        # Run with uvicorn:
        # uvicorn app:app --host 0.0.0.0 --port 8000
    """
    app = FastAPI(title="Fixed Price Across EU")
    app.include_router(get_pricing_router(storefront, catalog))

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
