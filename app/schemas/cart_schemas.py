from pydantic import BaseModel, Field
from typing import Optional

class CartAddRequest(BaseModel):
    product_id: str
    name: str
    variant_size: str = "default"
    quantity: int = Field(default=1, ge=1)
    price: float = Field(ge=0)
    image: Optional[str] = None

class CartUpdateRequest(BaseModel):
    quantity: int
