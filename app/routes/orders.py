from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from app.database import get_session
from app.dependencies.auth import get_current_user_id
from app.models.order import Order
from app.schemas.orders_schemas import OrderOut, PlacedOrderItem
from app.services.order_event_service import get_order_timeline
from app.services.order_service import OrderStatusError, cancel_by_user

router = APIRouter()


def serialize_order(order: Order) -> OrderOut:
    return OrderOut(
        order_id=order.id,
        status=order.status,
        payment_method=order.payment_method,
        payment=order.payment,
        items=[
            PlacedOrderItem(
                product_id=i.product_id,
                name=i.name,
                variant_size=i.variant_size,
                price=i.price,
                quantity=i.quantity,
                line_total=i.price * i.quantity,
            )
            for i in order.items
        ],
        subtotal=order.subtotal,
        promotion_discount=order.promotion_discount,
        discount_code=order.discount_code,
        discount_amount=order.discount_amount,
        shipping=order.shipping,
        tax=order.tax,
        total=order.total,
        created_at=order.created_at,
    )


def get_user_order(session: Session, order_id: int, user_id: int) -> Order:
    order = session.get(Order, order_id)
    if not order or order.user_id != user_id:
        raise HTTPException(404, "Order not found")
    return order


@router.get("/my")
def my_orders(
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    orders = session.exec(
        select(Order)
        .where(Order.user_id == user_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
    ).all()

    return {"orders": [serialize_order(o) for o in orders]}


@router.get("/{order_id}")
def order_details(
    order_id: int,
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    order = get_user_order(session, order_id, user_id)
    return {
        "order": serialize_order(order),
        "timeline": [
            {"event": e.event_type, "label": e.label, "at": e.created_at}
            for e in get_order_timeline(session, order.id)
        ],
    }


@router.post("/{order_id}/cancel")
def cancel_order(
    order_id: int,
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    order = get_user_order(session, order_id, user_id)

    try:
        order = cancel_by_user(session, order, user_id)
    except OrderStatusError as e:
        raise HTTPException(e.status_code, e.message)

    return {"message": "Order cancelled", "order": serialize_order(order)}
