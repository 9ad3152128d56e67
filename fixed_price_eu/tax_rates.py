"""Tax rate lookup keyed by tax class and country."""

from typing import Iterable, List

from .config import TaxRateEntry

ANY_COUNTRY = "*"


class TaxRateTable:
    """
    In-memory table of tax rate components.

    A country can carry several components for the same tax class
    (e.g. a national and a regional rate); callers sum them.
    """

    def __init__(self, rates: Iterable[TaxRateEntry], base_country: str):
        self.base_country = base_country.upper()
        self._rates: List[TaxRateEntry] = list(rates)

    def get_rates(self, tax_class: str, country: str) -> List[TaxRateEntry]:
        """
        Return the rate components for a tax class in a country.

        Args:
            tax_class: Product tax class
            country: ISO country code

        Returns:
            Matching rate components, empty when none apply
        """
        country = country.upper()
        return [
            entry
            for entry in self._rates
            if entry.tax_class == tax_class and entry.country in (country, ANY_COUNTRY)
        ]

    def get_base_rates(self, tax_class: str) -> List[TaxRateEntry]:
        """Return the rate components of the store's base country."""
        return self.get_rates(tax_class, self.base_country)

    def countries(self) -> List[str]:
        """List explicitly configured countries, sorted."""
        return sorted({e.country for e in self._rates if e.country != ANY_COUNTRY})
