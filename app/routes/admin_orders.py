# -------- ADMIN ORDERS --------
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from app.constants.order_status import ORDER_STATUSES
from app.database import get_session
from app.dependencies.auth import require_admin
from app.models.order import Order
from app.schemas.orders_schemas import OrderStatusUpdate
from app.services.order_service import OrderStatusError, change_status
from app.routes.orders import serialize_order
from app.utils.pagination import paginate

router = APIRouter()


@router.get("")
def list_orders(
    page: int = 1,
    limit: int = 10,
    status: str | None = None,
    session: Session = Depends(get_session),
    _: bool = Depends(require_admin)
):
    query = select(Order)

    if status:
        if status not in ORDER_STATUSES:
            raise HTTPException(400, "Invalid status value.")
        query = query.where(Order.status == status)

    query = query.order_by(Order.created_at.desc(), Order.id.desc())

    data = paginate(session=session, query=query, page=page, limit=limit)

    data["results"] = [
        {
            "order_id": o.id,
            "user_id": o.user_id,
            "date": o.created_at.date(),
            "total_amount": o.total,
            "discount_code": o.discount_code,
            "status": o.status
        }
        for o in data["results"]
    ]

    return data


@router.put("/{order_id}/status")
def update_order_status(
    order_id: int,
    data: OrderStatusUpdate,
    session: Session = Depends(get_session),
    _: bool = Depends(require_admin)
):
    order = session.get(Order, order_id)
    if not order:
        raise HTTPException(404, "Order not found.")

    try:
        order = change_status(session, order, data.status)
    except OrderStatusError as e:
        raise HTTPException(e.status_code, e.message)

    return {"message": "Order status updated successfully.", "order": serialize_order(order)}
