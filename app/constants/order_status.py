from typing import Literal

ORDER_STATUSES = ["Pending", "Processing", "Shipped", "Delivered", "Cancelled"]

ALLOWED_TRANSITIONS = {
    "Pending": ["Processing", "Shipped", "Cancelled"],
    "Processing": ["Shipped", "Cancelled"],
    "Shipped": ["Delivered"],
    "Delivered": [],
    "Cancelled": []
}

# a shopper may cancel until the parcel leaves
USER_CANCELLABLE = {"Pending", "Processing"}

PaymentMethod = Literal["CashOnDelivery", "Stripe", "Clover"]
