from typing import List, Optional
from pydantic_settings import BaseSettings
from urllib.parse import quote_plus

from app.utils.pricing import PricingConfig

class Settings(BaseSettings):
    ENV: str = "local"

    postgres_user: str = "postgres"
    postgres_password: str = ""
    postgres_db: str = "vapeshop"
    postgres_host: str = "localhost"
    postgres_port: str = "5432"

    # full URL wins over the postgres_* parts (sqlite in tests)
    database_url_override: Optional[str] = None

    admin_api_key: str = "change-me"

    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    # pricing defaults, used when the store settings row leaves them unset
    default_delivery_fee: float = 10.0
    free_shipping_threshold: float = 125.0
    promotion_min_quantity: int = 5

    @property
    def database_url(self):
        if self.database_url_override:
            return self.database_url_override
        encoded_password = quote_plus(self.postgres_password)
        return (
            f"postgresql+psycopg2://{self.postgres_user}:"
            f"{encoded_password}@{self.postgres_host}:"
            f"{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def pricing_config(self) -> PricingConfig:
        return PricingConfig(
            default_delivery_fee=self.default_delivery_fee,
            free_shipping_threshold=self.free_shipping_threshold,
            promotion_min_quantity=self.promotion_min_quantity,
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"

settings = Settings()
