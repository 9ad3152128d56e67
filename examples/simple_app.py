from fixed_price_eu import StoreConfig, Storefront
from fixed_price_eu.router import create_pricing_app
from fixed_price_eu.storage import InMemoryCatalog
from fixed_price_eu.models import Product

config = StoreConfig(
    store_name="My Store",
    tax={
        "base_country": "DE",
        "rates": [
            {"country": "DE", "rate": 19.0},
            {"country": "FR", "rate": 20.0},
            {"country": "NL", "rate": 21.0},
        ],
    },
)

catalog = InMemoryCatalog([Product(id="hoodie", title="Hoodie", regular_price=50.0)])
app = create_pricing_app(Storefront(config), catalog)

# Run: uvicorn examples.simple_app:app --reload
