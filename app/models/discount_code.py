from datetime import datetime
from typing import List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field


class DiscountCode(SQLModel, table=True):
    __tablename__ = "discount_code"
    id: Optional[int] = Field(default=None, primary_key=True)

    code: str = Field(index=True, unique=True)      # stored upper-case
    discount_type: str = Field(default="percentage")  # percentage | flat
    discount_value: float = 0

    # empty list -> applies to every product
    applicable_products: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: str = Field(default="active", index=True)  # active | inactive

    usage_count: int = 0
    max_usage: Optional[int] = None  # None -> unlimited

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
