# app/services/discount_service.py
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from sqlmodel import Session, select

from app.models.discount_code import DiscountCode
from app.utils.pricing import LineItem

logger = logging.getLogger(__name__)


class DiscountCodeError(Exception):
    """Raised when a code can't be used. `status_code` is what the route returns."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass
class DiscountResolution:
    code: str
    discount_type: str
    discount_value: float
    total_discount: float = 0.0
    eligible: List[dict] = field(default_factory=list)
    ineligible: List[dict] = field(default_factory=list)


def normalize_code(code: str) -> str:
    return (code or "").strip().upper()


def find_code(session: Session, code: str) -> Optional[DiscountCode]:
    return session.exec(
        select(DiscountCode).where(DiscountCode.code == normalize_code(code))
    ).first()


def check_code_usable(discount: DiscountCode, now: Optional[datetime] = None) -> None:
    now = now or datetime.utcnow()

    if discount.status != "active":
        raise DiscountCodeError("Discount code is inactive")

    if discount.max_usage and discount.usage_count >= discount.max_usage:
        raise DiscountCodeError("Discount code usage limit reached")

    if discount.start_date and now < discount.start_date:
        raise DiscountCodeError("Discount code not yet active")

    if discount.end_date and now > discount.end_date:
        raise DiscountCodeError("Discount code has expired")


def resolve_discount(
    session: Session,
    code: str,
    cart_items: list,
    now: Optional[datetime] = None,
) -> DiscountResolution:
    """
    Turn a shopper-entered code into the flat amount the pricing engine takes.

    percentage -> share of each eligible line total
    flat       -> value taken off every eligible unit
    """
    discount = find_code(session, code)
    if not discount:
        raise DiscountCodeError("Invalid discount code", status_code=404)

    check_code_usable(discount, now)

    applicable = {str(p) for p in (discount.applicable_products or [])}
    result = DiscountResolution(
        code=discount.code,
        discount_type=discount.discount_type,
        discount_value=discount.discount_value,
    )

    for item in cart_items:
        if applicable and str(item.product_id) not in applicable:
            result.ineligible.append({
                "product_id": item.product_id,
                "variant_size": item.variant_size,
                "message": "Not eligible for this discount",
            })
            continue

        line = LineItem.from_raw(item)
        line_total = line.unit_price * line.quantity

        if discount.discount_type == "percentage":
            item_discount = line_total * discount.discount_value / 100
        else:
            item_discount = discount.discount_value * line.quantity

        result.total_discount += item_discount
        result.eligible.append({
            "product_id": item.product_id,
            "variant_size": item.variant_size,
            "discount": item_discount,
            "original_price": line_total,
            "final_price": line_total - item_discount,
        })

    logger.info(f"Resolved discount {result.code}: {result.total_discount}")
    return result


def increment_usage(session: Session, code: str) -> None:
    discount = find_code(session, code)
    if not discount:
        logger.warning(f"Usage increment for unknown code {code}")
        return

    discount.usage_count += 1
    discount.updated_at = datetime.utcnow()
    session.add(discount)


# ---------------- admin ----------------

def _validate_value(discount_type: str, discount_value: float) -> None:
    if discount_type == "percentage" and not 0 <= discount_value <= 100:
        raise DiscountCodeError("Percentage discount must be between 0 and 100")


def create_code(session: Session, data: dict) -> DiscountCode:
    data["code"] = normalize_code(data["code"])
    if not data["code"]:
        raise DiscountCodeError("Code is required")

    if find_code(session, data["code"]):
        raise DiscountCodeError("Discount code already exists")

    _validate_value(data["discount_type"], data["discount_value"])

    discount = DiscountCode(**data)
    session.add(discount)
    session.commit()
    session.refresh(discount)

    logger.info(f"Discount code created: {discount.code}")
    return discount


def update_code(session: Session, code_id: int, updates: dict) -> DiscountCode:
    discount = session.get(DiscountCode, code_id)
    if not discount:
        raise DiscountCodeError("Discount code not found", status_code=404)

    if updates.get("code"):
        updates["code"] = normalize_code(updates["code"])
        existing = find_code(session, updates["code"])
        if existing and existing.id != code_id:
            raise DiscountCodeError("Discount code already exists")

    _validate_value(
        updates.get("discount_type", discount.discount_type),
        updates.get("discount_value", discount.discount_value),
    )

    for key, value in updates.items():
        setattr(discount, key, value)
    discount.updated_at = datetime.utcnow()

    session.add(discount)
    session.commit()
    session.refresh(discount)

    logger.info(f"Discount code updated: {discount.code}")
    return discount


def delete_code(session: Session, code_id: int) -> None:
    discount = session.get(DiscountCode, code_id)
    if not discount:
        raise DiscountCodeError("Discount code not found", status_code=404)

    session.delete(discount)
    session.commit()
    logger.info(f"Discount code deleted: {discount.code}")
