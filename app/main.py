from fastapi import FastAPI
from app.database import create_db_and_tables
from app.config import settings
from app.routes import (
    admin_orders,
    cart,
    checkout,
    discount_codes,
    health,
    orders,
    store_settings,
)

from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local
    if settings.ENV == "local":
        create_db_and_tables()
    yield

app = FastAPI(title="Vape Shop Storefront API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/health", tags=["Health"])
app.include_router(cart.router, prefix="/cart", tags=["Cart"])
app.include_router(checkout.router, prefix="/checkout", tags=["Checkout"])
app.include_router(orders.router, prefix="/orders", tags=["Orders"])
app.include_router(discount_codes.router, prefix="/discount-codes", tags=["Discount Codes"])
app.include_router(store_settings.router, prefix="/settings", tags=["Settings"])
app.include_router(admin_orders.router, prefix="/admin/orders", tags=["Admin Orders"])
app.include_router(discount_codes.admin_router, prefix="/admin/discount-codes", tags=["Admin Discount Codes"])
app.include_router(store_settings.admin_router, prefix="/admin/settings", tags=["Admin Settings"])

@app.get("/")
def root():
    return {
        "cart": [
            "/cart", "/cart/add", "/cart/update/{id}",
            "/cart/remove/{id}", "/cart/clear"
        ],
        "checkout": [
            "/checkout/summary", "/checkout/place-order"
        ],
        "orders": [
            "/orders/my", "/orders/{order_id}", "/orders/{order_id}/cancel"
        ],
        "discount_codes": [
            "/discount-codes/validate"
        ],
        "settings": [
            "/settings/pricing"
        ],
        "admin": [
            "/admin/orders", "/admin/orders/{order_id}/status",
            "/admin/discount-codes", "/admin/discount-codes/{code_id}",
            "/admin/settings/pricing"
        ]
    }
