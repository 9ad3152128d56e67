"""Example showing the same final price across countries with different VAT rates."""

from fixed_price_eu import StoreConfig, Storefront
from fixed_price_eu.models import PriceContext, Product


def main():
    """Example: Show net and gross prices per country."""

    config = StoreConfig(
        store_name="My Store",
        tax={
            "base_country": "DE",
            "prices_include_tax": False,
            "rates": [
                {"country": "DE", "rate": 19.0},
                {"country": "FR", "rate": 20.0},
                {"country": "LU", "rate": 17.0},
                {"country": "HU", "rate": 27.0},
            ],
        },
    )
    storefront = Storefront(config)
    product = Product(id="tee", title="T-Shirt", regular_price=25.0, sale_price=20.0)

    print(f"Product: {product.title}")
    for country in ("DE", "FR", "LU", "HU"):
        rendered = storefront.render_product(product, PriceContext(customer_country=country))
        print(f"\n  {country}:")
        print(f"    Net: {rendered.price.net} {rendered.currency}")
        print(f"    Final price: {rendered.price.gross} {rendered.currency}")
        print(f"    Regular price: {rendered.regular_price.gross} {rendered.currency}")


if __name__ == "__main__":
    main()
