import pytest

from fixed_price_eu.config import TaxConfig
from fixed_price_eu.notices import check_settings


def make_tax(**overrides):
    return TaxConfig(base_country="DE", **overrides)


def test_no_notices_for_recommended_settings():
    assert check_settings(make_tax()) == []


def test_disabled_taxes_raise_an_error_notice():
    notices = check_settings(make_tax(enabled=False))
    assert [n.code for n in notices] == ["taxes_disabled"]
    assert notices[0].level == "error"


@pytest.mark.parametrize(
    "shop,cart",
    [("excl", "incl"), ("incl", "excl"), ("excl", "excl")],
)
def test_excluding_tax_display_raises_a_warning(shop, cart):
    notices = check_settings(make_tax(display_shop=shop, display_cart=cart))
    assert [n.code for n in notices] == ["display_excludes_tax"]
    assert notices[0].level == "warning"


def test_both_conditions_are_reported():
    notices = check_settings(make_tax(enabled=False, display_cart="excl"))
    assert [n.level for n in notices] == ["error", "warning"]


def test_notices_hidden_from_non_managers():
    assert check_settings(make_tax(enabled=False), is_store_manager=False) == []
