from sqlmodel import SQLModel, Field , Relationship
from typing import Optional , TYPE_CHECKING

if TYPE_CHECKING:
    from app.models.order import Order

class OrderItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="order.id")
    product_id: str

    name: str
    variant_size: str
    image: Optional[str] = None
    price: float
    quantity: int

    order: Optional["Order"] = Relationship(back_populates="items")
