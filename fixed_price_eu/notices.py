"""Advisory checks on store tax settings."""

import logging
from typing import List

from .config import TaxConfig
from .models.display_models import AdminNotice

logger = logging.getLogger(__name__)

TAXES_DISABLED_MESSAGE = (
    "Fixed Price Across EU: taxes are not enabled. "
    "Please enable taxes in the store settings for fixed prices to work."
)
DISPLAY_EXCLUDES_TAX_MESSAGE = (
    "Fixed Price Across EU: for best results, the store should display prices "
    "including tax in the catalog and cart. Please check your tax settings."
)


def check_settings(tax: TaxConfig, is_store_manager: bool = True) -> List[AdminNotice]:
    """
    Inspect tax settings and return advisory notices.

    The two conditions are independent, so zero, one or two notices are
    returned. Notices never block pricing.

    Args:
        tax: Store tax configuration
        is_store_manager: Whether the viewer may manage store options

    Returns:
        List of notices, most severe first
    """
    if not is_store_manager:
        return []

    notices: List[AdminNotice] = []
    if not tax.enabled:
        notices.append(AdminNotice(level="error", code="taxes_disabled", message=TAXES_DISABLED_MESSAGE))

    if tax.display_shop != "incl" or tax.display_cart != "incl":
        notices.append(
            AdminNotice(level="warning", code="display_excludes_tax", message=DISPLAY_EXCLUDES_TAX_MESSAGE)
        )

    for notice in notices:
        logger.info("settings_notice", extra={"code": notice.code, "level": notice.level})
    return notices
