from app.models.cart import CartItem
from app.models.discount_code import DiscountCode
from app.models.store_settings import StoreSettings
from app.models.order import Order
from app.models.order_item import OrderItem
from app.models.order_event import OrderEvent

# add ALL models here
