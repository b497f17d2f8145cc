from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

class CartItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True)
    product_id: str
    name: str
    variant_size: str = "default"   # e.g. "10ml", "20ml"
    quantity: int = 1
    price: float                    # unit price snapshot at add time
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
