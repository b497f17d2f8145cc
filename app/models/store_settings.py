from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

class StoreSettings(SQLModel, table=True):
    __tablename__ = "store_settings"
    id: Optional[int] = Field(default=1, primary_key=True)

    delivery_fee: Optional[float] = None   # None -> settings.default_delivery_fee
    tax_rate: float = 0.0

    updated_at: datetime = Field(default_factory=datetime.utcnow)
