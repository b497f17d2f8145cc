from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.config import settings
from app.database import get_session
from app.dependencies.auth import require_admin
from app.schemas.settings_schemas import PricingSettingsUpdate
from app.services.store_settings_service import (
    get_or_create_store_settings,
    update_store_settings,
)


router = APIRouter()
admin_router = APIRouter()


def _pricing_payload(store):
    return {
        "delivery_fee": store.delivery_fee,
        "effective_delivery_fee": (
            store.delivery_fee
            if store.delivery_fee is not None
            else settings.default_delivery_fee
        ),
        "tax_rate": store.tax_rate,
        "free_shipping_threshold": settings.free_shipping_threshold,
        "promotion_min_quantity": settings.promotion_min_quantity,
        "updated_at": store.updated_at,
    }


@router.get("/pricing")
def get_pricing_settings(session: Session = Depends(get_session)):
    return _pricing_payload(get_or_create_store_settings(session))


@admin_router.put("/pricing")
def update_pricing_settings(
    data: PricingSettingsUpdate,
    session: Session = Depends(get_session),
    _: bool = Depends(require_admin)
):
    store = update_store_settings(session, data.model_dump())
    return {"message": "Settings updated", "settings": _pricing_payload(store)}
