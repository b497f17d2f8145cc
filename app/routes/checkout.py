from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from app.database import get_session
from app.dependencies.auth import get_current_user_id
from app.schemas.checkout_schemas import (
    CartSummary,
    CheckoutSummaryRequest,
    PlaceOrderRequest,
    SummaryItem,
)
from app.services.discount_service import DiscountCodeError
from app.services.order_service import OrderStatusError, get_cart_items, place_order
from app.services.pricing_service import price_cart
from app.routes.orders import serialize_order

router = APIRouter()


@router.post("/summary", response_model=CartSummary)
def checkout_summary(
    data: CheckoutSummaryRequest,
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    cart_items = get_cart_items(session, user_id)

    if not cart_items:
        raise HTTPException(400, "Your cart is empty.")

    try:
        totals = price_cart(session, cart_items, data.discount_code)
    except DiscountCodeError as e:
        raise HTTPException(e.status_code, e.message)

    return CartSummary(
        items=[
            SummaryItem(
                item_id=c.id,
                product_id=c.product_id,
                name=c.name,
                variant_size=c.variant_size,
                quantity=c.quantity,
                price=c.price,
                line_total=c.price * c.quantity,
            )
            for c in cart_items
        ],
        discount_code=data.discount_code,
        totals=totals.as_dict(),
    )


#Order Confirmation Page

@router.post("/place-order", status_code=201)
def place_order_endpoint(
    data: PlaceOrderRequest,
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    try:
        order = place_order(
            session,
            user_id=user_id,
            phone=data.phone,
            address=data.address.model_dump(),
            payment_method=data.payment_method,
            discount_code=data.discount_code,
        )
    except (DiscountCodeError, OrderStatusError) as e:
        raise HTTPException(e.status_code, e.message)

    return {
        "message": "Order placed successfully",
        "order": serialize_order(order),
    }
