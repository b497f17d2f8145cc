from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from app.database import get_session
from app.dependencies.auth import get_current_user_id, require_admin
from app.models.discount_code import DiscountCode
from app.schemas.discount_schemas import (
    DiscountCodeCreate,
    DiscountCodeUpdate,
    DiscountValidateRequest,
)
from app.services import discount_service
from app.services.discount_service import DiscountCodeError
from app.services.order_service import get_cart_items

router = APIRouter()
admin_router = APIRouter()


# -------- SHOPPER --------

@router.post("/validate")
def validate_discount_code(
    data: DiscountValidateRequest,
    session: Session = Depends(get_session),
    user_id: int = Depends(get_current_user_id)
):
    cart_items = get_cart_items(session, user_id)

    try:
        result = discount_service.resolve_discount(session, data.code, cart_items)
    except DiscountCodeError as e:
        raise HTTPException(e.status_code, e.message)

    return {
        "message": "Discount code validated successfully",
        "discount_code": {
            "code": result.code,
            "discount_type": result.discount_type,
            "discount_value": result.discount_value,
        },
        "total_discount": result.total_discount,
        "eligible_products": result.eligible,
        "ineligible_products": result.ineligible,
    }


# -------- ADMIN --------

@admin_router.post("", status_code=201)
def create_discount_code(
    data: DiscountCodeCreate,
    session: Session = Depends(get_session),
    _: bool = Depends(require_admin)
):
    try:
        discount = discount_service.create_code(session, data.model_dump())
    except DiscountCodeError as e:
        raise HTTPException(e.status_code, e.message)

    return {"message": "Discount code created successfully", "discount_code": discount}


@admin_router.get("")
def list_discount_codes(
    session: Session = Depends(get_session),
    _: bool = Depends(require_admin)
):
    codes = session.exec(
        select(DiscountCode).order_by(DiscountCode.created_at.desc())
    ).all()
    return {"discount_codes": codes}


@admin_router.put("/{code_id}")
def update_discount_code(
    code_id: int,
    data: DiscountCodeUpdate,
    session: Session = Depends(get_session),
    _: bool = Depends(require_admin)
):
    try:
        discount = discount_service.update_code(
            session, code_id, data.model_dump(exclude_unset=True)
        )
    except DiscountCodeError as e:
        raise HTTPException(e.status_code, e.message)

    return {"message": "Discount code updated successfully", "discount_code": discount}


@admin_router.delete("/{code_id}")
def delete_discount_code(
    code_id: int,
    session: Session = Depends(get_session),
    _: bool = Depends(require_admin)
):
    try:
        discount_service.delete_code(session, code_id)
    except DiscountCodeError as e:
        raise HTTPException(e.status_code, e.message)

    return {"message": "Discount code deleted successfully"}
