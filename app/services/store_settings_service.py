from datetime import datetime
from sqlmodel import Session

from app.models.store_settings import StoreSettings


def get_or_create_store_settings(session: Session) -> StoreSettings:
    """Single settings row (id=1), created with defaults on first read."""
    store = session.get(StoreSettings, 1)

    if not store:
        store = StoreSettings(id=1, delivery_fee=None, tax_rate=0.0)
        session.add(store)
        session.commit()
        session.refresh(store)

    return store


def update_store_settings(session: Session, updates: dict) -> StoreSettings:
    store = get_or_create_store_settings(session)

    if updates.pop("clear_delivery_fee", False):
        store.delivery_fee = None
    elif updates.get("delivery_fee") is not None:
        store.delivery_fee = updates["delivery_fee"]

    if updates.get("tax_rate") is not None:
        store.tax_rate = updates["tax_rate"]

    store.updated_at = datetime.utcnow()
    session.add(store)
    session.commit()
    session.refresh(store)
    return store
