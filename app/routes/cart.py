from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from app.database import get_session
from app.dependencies.auth import get_current_user_id
from app.models.cart import CartItem
from app.schemas.cart_schemas import CartAddRequest, CartUpdateRequest
from app.services.order_service import clear_cart, get_cart_items
from app.services.pricing_service import price_cart


router = APIRouter()

# Add to Cart 

@router.post("/add")
def add_to_cart(
    data: CartAddRequest,
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    # Same product + variant -> bump quantity
    existing_item = session.exec(
        select(CartItem).where(
            CartItem.user_id == user_id,
            CartItem.product_id == data.product_id,
            CartItem.variant_size == data.variant_size
        )
    ).first()

    if existing_item:
        existing_item.quantity += data.quantity
        existing_item.price = data.price
        session.add(existing_item)
        session.commit()
        session.refresh(existing_item)
        return {"message": "Cart updated", "item": existing_item}

    new_item = CartItem(user_id=user_id, **data.model_dump())

    session.add(new_item)
    session.commit()
    session.refresh(new_item)

    return {"message": "Added to cart", "item": new_item}


# View Cart 

@router.get("/")
def get_cart(
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    cart_items = get_cart_items(session, user_id)

    totals = price_cart(session, cart_items)

    return {
        "items": [
            {
                "item_id": item.id,
                "product_id": item.product_id,
                "name": item.name,
                "variant_size": item.variant_size,
                "image": item.image,
                "price": item.price,
                "quantity": item.quantity,
                "total": item.price * item.quantity
            }
            for item in cart_items
        ],
        "summary": totals.as_dict()
    }

# Update Cart 
@router.put("/update/{item_id}")
def update_cart_item(
    item_id: int,
    data: CartUpdateRequest,
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    item = session.get(CartItem, item_id)

    if not item or item.user_id != user_id:
        raise HTTPException(404, "Cart item not found")

    if data.quantity <= 0:
        session.delete(item)
        session.commit()
        return {"message": "Item removed"}

    item.quantity = data.quantity
    session.add(item)
    session.commit()
    session.refresh(item)

    return {"message": "Quantity updated", "item": item}

# Remove Cart 

@router.delete("/remove/{item_id}")
def remove_item(
    item_id: int,
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    item = session.get(CartItem, item_id)

    if not item or item.user_id != user_id:
        raise HTTPException(404, "Item not found")

    session.delete(item)
    session.commit()

    return {"message": "Item removed from cart"}

# Clear Cart 

@router.delete("/clear")
def clear_cart_endpoint(
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    clear_cart(session, user_id)
    return {"message": "Cart cleared"}
