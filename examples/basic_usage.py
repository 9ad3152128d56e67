"""Example usage of Fixed Price Across EU."""

import json
from fixed_price_eu import StoreConfig, Storefront
from fixed_price_eu.models import PriceContext
from fixed_price_eu.storage import load_catalog


def main():
    """Example: Render catalog prices for a customer in another country."""

    # Load configuration
    with open('config.json') as f:
        config_data = json.load(f)

    config = StoreConfig(**config_data)
    storefront = Storefront(config)
    catalog = load_catalog('catalog.json')

    context = PriceContext(customer_country="FR")
    for product in catalog.all():
        rendered = storefront.render_product(product, context)
        print(json.dumps(rendered.model_dump(mode='json'), indent=2))


if __name__ == "__main__":
    main()
