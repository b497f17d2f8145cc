from typing import Optional
from pydantic import BaseModel, Field


class PricingSettingsUpdate(BaseModel):
    delivery_fee: Optional[float] = Field(default=None, ge=0)
    tax_rate: Optional[float] = Field(default=None, ge=0, lt=1)
    clear_delivery_fee: bool = False   # fall back to the configured default
