from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class DiscountCodeCreate(BaseModel):
    code: str
    discount_type: Literal["percentage", "flat"] = "percentage"
    discount_value: float = Field(ge=0)
    applicable_products: List[str] = []
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Literal["active", "inactive"] = "active"
    max_usage: Optional[int] = None


class DiscountCodeUpdate(BaseModel):
    code: Optional[str] = None
    discount_type: Optional[Literal["percentage", "flat"]] = None
    discount_value: Optional[float] = Field(default=None, ge=0)
    applicable_products: Optional[List[str]] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[Literal["active", "inactive"]] = None
    max_usage: Optional[int] = None


class DiscountValidateRequest(BaseModel):
    code: str
