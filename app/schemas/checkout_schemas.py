# app/schemas/checkout_schemas.py
from pydantic import BaseModel
from typing import List, Optional
from app.constants.order_status import PaymentMethod

class SummaryItem(BaseModel):
    item_id: int
    product_id: str
    name: str
    variant_size: str
    quantity: int
    price: float          # unit price snapshot
    line_total: float     # quantity * price

class OrderTotalsOut(BaseModel):
    subtotal: float
    total_quantity: int
    promotion_discount: float       # buy 5, cheapest unit free
    subtotal_after_promotion: float
    coupon_discount: float
    subtotal_after_discounts: float
    shipping_fee: float
    tax: float
    total: float
    free_shipping: bool

class CartSummary(BaseModel):
    items: List[SummaryItem]
    discount_code: Optional[str] = None
    totals: OrderTotalsOut

class CheckoutSummaryRequest(BaseModel):
    discount_code: Optional[str] = None

class AddressIn(BaseModel):
    street: str
    city: str
    state: str
    zip: str
    country: str

class PlaceOrderRequest(BaseModel):
    phone: str
    address: AddressIn
    payment_method: PaymentMethod = "CashOnDelivery"
    discount_code: Optional[str] = None
