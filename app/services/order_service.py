# app/services/order_service.py
import logging
from datetime import datetime
from typing import Optional

from sqlmodel import Session, select

from app.constants.order_status import ALLOWED_TRANSITIONS, USER_CANCELLABLE
from app.models.cart import CartItem
from app.models.order import Order
from app.models.order_item import OrderItem
from app.services.discount_service import increment_usage, normalize_code
from app.services.order_event_service import log_order_event
from app.services.pricing_service import price_cart

logger = logging.getLogger(__name__)


class OrderStatusError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def get_cart_items(session: Session, user_id: int):
    return session.exec(
        select(CartItem).where(CartItem.user_id == user_id)
    ).all()


def clear_cart(session: Session, user_id: int, commit: bool = True):
    for item in get_cart_items(session, user_id):
        session.delete(item)
    if commit:
        session.commit()


def place_order(
    session: Session,
    user_id: int,
    phone: str,
    address: dict,
    payment_method: str,
    discount_code: Optional[str] = None,
) -> Order:
    """Price the user's cart, persist the order with its totals and empty the cart."""
    cart_items = get_cart_items(session, user_id)
    if not cart_items:
        raise OrderStatusError("Cart is empty")

    totals = price_cart(session, cart_items, discount_code)
    code = normalize_code(discount_code) if discount_code else None

    order = Order(
        user_id=user_id,
        phone=phone,
        **address,
        subtotal=totals.subtotal,
        promotion_discount=totals.promotion_discount,
        discount_code=code,
        discount_amount=totals.coupon_discount,
        shipping=totals.shipping_fee,
        tax=totals.tax,
        total=totals.total,
        status="Pending",
        payment_method=payment_method,
        payment=False,
    )
    session.add(order)
    session.flush()

    for c in cart_items:
        session.add(OrderItem(
            order_id=order.id,
            product_id=c.product_id,
            name=c.name,
            variant_size=c.variant_size,
            image=c.image,
            price=c.price,
            quantity=c.quantity,
        ))

    if code:
        increment_usage(session, code)

    log_order_event(
        session,
        order.id,
        event_type="order_placed",
        label="Order placed",
        meta={"total": totals.total, "payment_method": payment_method},
    )

    clear_cart(session, user_id, commit=False)
    session.commit()
    session.refresh(order)

    logger.info(f"Order {order.id} placed by user {user_id}, total {order.total}")
    return order


def change_status(
    session: Session,
    order: Order,
    new_status: str,
    created_by: str = "admin",
) -> Order:
    allowed = ALLOWED_TRANSITIONS.get(order.status)
    if allowed is None:
        raise OrderStatusError("Invalid status value.")
    if new_status not in ALLOWED_TRANSITIONS:
        raise OrderStatusError("Invalid status value.")
    if new_status not in allowed:
        raise OrderStatusError(f"Cannot change status from {order.status} to {new_status}")

    old_status = order.status
    order.status = new_status
    order.updated_at = datetime.utcnow()
    session.add(order)

    log_order_event(
        session,
        order.id,
        event_type="status_changed",
        label=f"{old_status} -> {new_status}",
        created_by=created_by,
        meta={"from": old_status, "to": new_status},
    )
    session.commit()
    session.refresh(order)

    logger.info(f"Order {order.id} status {old_status} -> {new_status}")
    return order


def cancel_by_user(session: Session, order: Order, user_id: int) -> Order:
    if order.user_id != user_id:
        raise OrderStatusError("Not authorized to cancel this order.", status_code=403)
    if order.status not in USER_CANCELLABLE:
        raise OrderStatusError(f"Order cannot be cancelled once {order.status}")

    return change_status(session, order, "Cancelled", created_by="user")
