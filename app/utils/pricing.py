"""
Order pricing engine.

Combines the "buy 5, get the cheapest unit free" promotion, a flat coupon
discount, the free-shipping threshold and tax into one itemized total.
Pure and stateless: no I/O and no logging, safe to call from any request.
"""
import math
from dataclasses import dataclass, asdict
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class PricingConfig:
    default_delivery_fee: float = 10.0
    free_shipping_threshold: float = 125.0
    promotion_min_quantity: int = 5


DEFAULT_PRICING_CONFIG = PricingConfig()


def parse_non_negative_number(value: Any) -> float:
    """Coerce a loose numeric value into a finite, non-negative float.

    Anything that can't be read as a number (None, "abc", NaN, inf, negatives)
    becomes 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _read(raw: Any, name: str) -> Any:
    if isinstance(raw, dict):
        return raw.get(name)
    return getattr(raw, name, None)


@dataclass(frozen=True)
class LineItem:
    unit_price: float
    quantity: int

    def __post_init__(self):
        # same leniency whether built directly or through from_raw
        object.__setattr__(self, "unit_price", parse_non_negative_number(self.unit_price))
        object.__setattr__(self, "quantity", int(parse_non_negative_number(self.quantity)))

    @classmethod
    def from_raw(cls, raw: Any) -> "LineItem":
        """Build from a mapping or an object.

        The price is read from `unit_price`, then `unitPrice`, then `price`
        (the key cart rows use).
        """
        price = None
        for name in ("unit_price", "unitPrice", "price"):
            price = _read(raw, name)
            if price is not None:
                break
        return cls(unit_price=price, quantity=_read(raw, "quantity"))


@dataclass(frozen=True)
class PricingOptions:
    discount_amount: float = 0.0
    delivery_fee: Optional[float] = None  # None -> PricingConfig.default_delivery_fee
    tax_rate: float = 0.0


@dataclass(frozen=True)
class OrderTotals:
    subtotal: float
    total_quantity: int
    promotion_discount: float
    subtotal_after_promotion: float
    coupon_discount: float
    subtotal_after_discounts: float
    shipping_fee: float
    tax: float
    total: float

    @property
    def free_shipping(self) -> bool:
        return self.shipping_fee == 0

    def as_dict(self) -> dict:
        data = asdict(self)
        data["free_shipping"] = self.free_shipping
        return data


def compute_order_total(
    items: Iterable[Any],
    options: Optional[PricingOptions] = None,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> OrderTotals:
    """Price a cart snapshot.

    The steps run in a fixed order: promotion, then coupon, then shipping
    (judged on the promotion-adjusted subtotal, before the coupon), then tax
    on the discounted goods only.
    """
    options = options or PricingOptions()

    subtotal = 0.0
    total_quantity = 0
    min_price: Optional[float] = None

    for raw in items or []:
        item = raw if isinstance(raw, LineItem) else LineItem.from_raw(raw)
        if item.quantity <= 0:
            continue
        subtotal += item.unit_price * item.quantity
        total_quantity += item.quantity
        if min_price is None or item.unit_price < min_price:
            min_price = item.unit_price

    # one free unit per qualifying cart, never scaled by quantity
    promotion_discount = 0.0
    if min_price is not None and total_quantity >= config.promotion_min_quantity:
        promotion_discount = min_price

    subtotal_after_promotion = max(0.0, subtotal - promotion_discount)

    coupon_discount = parse_non_negative_number(options.discount_amount)
    subtotal_after_discounts = max(0.0, subtotal_after_promotion - coupon_discount)

    if options.delivery_fee is None:
        shipping_fee = parse_non_negative_number(config.default_delivery_fee)
    else:
        shipping_fee = parse_non_negative_number(options.delivery_fee)

    if subtotal_after_promotion > config.free_shipping_threshold:
        shipping_fee = 0.0

    tax_rate = parse_non_negative_number(options.tax_rate)
    # an overflowed (inf) subtotal times a zero rate would be NaN
    tax = subtotal_after_discounts * tax_rate if tax_rate else 0.0

    total = subtotal_after_discounts + shipping_fee + tax

    return OrderTotals(
        subtotal=subtotal,
        total_quantity=total_quantity,
        promotion_discount=promotion_discount,
        subtotal_after_promotion=subtotal_after_promotion,
        coupon_discount=coupon_discount,
        subtotal_after_discounts=subtotal_after_discounts,
        shipping_fee=shipping_fee,
        tax=tax,
        total=total,
    )
