import pytest
from pydantic import ValidationError

from fixed_price_eu.config import StoreConfig, TaxConfig, TaxRateEntry
from fixed_price_eu.models.pricing_models import PriceContext
from fixed_price_eu.tax_rates import TaxRateTable


def test_country_codes_are_normalized():
    tax = TaxConfig(base_country=" de ", rates=[{"country": "fr", "rate": 20.0}])
    assert tax.base_country == "DE"
    assert tax.rates[0].country == "FR"


@pytest.mark.parametrize("country", ["DEU", "1X", ""])
def test_invalid_country_is_rejected(country):
    with pytest.raises(ValidationError):
        TaxRateEntry(country=country, rate=20.0)


def test_negative_rate_is_rejected():
    with pytest.raises(ValidationError):
        TaxRateEntry(country="FR", rate=-1.0)


def test_unknown_display_mode_is_rejected():
    with pytest.raises(ValidationError):
        TaxConfig(base_country="DE", display_shop="both")


def test_example_config_is_valid():
    example = StoreConfig.model_config["json_schema_extra"]["example"]
    config = StoreConfig(**example)
    assert config.tax.base_country == "DE"
    assert config.currency == "EUR"


def test_rate_table_sums_components_per_country():
    table = TaxRateTable(
        [
            TaxRateEntry(country="ES", rate=21.0),
            TaxRateEntry(country="ES", rate=1.5, label="Surcharge"),
            TaxRateEntry(country="*", rate=2.0, tax_class="eco"),
            TaxRateEntry(country="FR", rate=20.0),
        ],
        base_country="es",
    )
    assert [r.rate for r in table.get_base_rates("standard")] == [21.0, 1.5]
    assert [r.rate for r in table.get_rates("eco", "pt")] == [2.0]
    assert table.get_rates("standard", "JP") == []
    assert table.get_rates("reduced-rate", "FR") == []
    assert table.countries() == ["ES", "FR"]


def test_price_context_normalizes_country():
    assert PriceContext(customer_country=" pt ").customer_country == "PT"
    assert PriceContext(customer_country="").customer_country is None
    assert PriceContext().customer_country is None


@pytest.mark.parametrize("country", ["Germany", "D", "1X"])
def test_price_context_rejects_invalid_country(country):
    with pytest.raises(ValidationError):
        PriceContext(customer_country=country)
