from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional
from datetime import datetime

from app.models.order_item import OrderItem

class Order(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True)
    phone: str

    street: str
    city: str
    state: str
    zip: str
    country: str

    subtotal: float
    promotion_discount: float = 0
    discount_code: Optional[str] = None
    discount_amount: float = 0
    shipping: float
    tax: float
    total: float

    status: str = Field(default="Pending")
    payment_method: str
    payment: bool = False

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    items: List["OrderItem"] = Relationship(back_populates="order")
