from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

class PlacedOrderItem(BaseModel):
    product_id: str
    name: str
    variant_size: str
    price: float
    quantity: int
    line_total: float

class OrderOut(BaseModel):
    order_id: int
    status: str
    payment_method: str
    payment: bool
    items: List[PlacedOrderItem]
    subtotal: float
    promotion_discount: float
    discount_code: Optional[str] = None
    discount_amount: float
    shipping: float
    tax: float
    total: float
    created_at: datetime

class OrderStatusUpdate(BaseModel):
    status: str
