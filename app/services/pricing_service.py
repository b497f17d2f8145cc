# app/services/pricing_service.py
import logging
from typing import List, Optional

from sqlmodel import Session

from app.config import settings
from app.models.cart import CartItem
from app.models.store_settings import StoreSettings
from app.services.discount_service import resolve_discount
from app.services.store_settings_service import get_or_create_store_settings
from app.utils.pricing import (
    LineItem,
    OrderTotals,
    PricingOptions,
    compute_order_total,
)

logger = logging.getLogger(__name__)


def build_pricing_options(store: StoreSettings, discount_amount: float = 0) -> PricingOptions:
    return PricingOptions(
        discount_amount=discount_amount,
        delivery_fee=store.delivery_fee,
        tax_rate=store.tax_rate,
    )


def price_cart(
    session: Session,
    cart_items: List[CartItem],
    discount_code: Optional[str] = None,
) -> OrderTotals:
    """Resolve the code, read store settings, and run the pricing engine.

    Raises DiscountCodeError when a code is given but can't be used.
    """
    discount_amount = 0.0
    if discount_code:
        discount_amount = resolve_discount(session, discount_code, cart_items).total_discount

    store = get_or_create_store_settings(session)
    options = build_pricing_options(store, discount_amount)

    totals = compute_order_total(
        [LineItem.from_raw(item) for item in cart_items],
        options,
        settings.pricing_config,
    )

    logger.info(
        f"Priced cart: {totals.total_quantity} units, "
        f"subtotal {totals.subtotal}, total {totals.total}"
    )
    return totals
