# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./database_storefront.db"

    # Admin session (single shared password, signed cookie)
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ADMIN_PASSWORD: str = "change-me"
    ADMIN_SESSION_HOURS: int = 24
    COOKIE_SECURE: bool = False
    FRONTEND_URL: Optional[str] = None

    # Upload storage: "local" writes under UPLOAD_DIR, "blob" sends to the blob API
    STORAGE_BACKEND: str = "local"
    UPLOAD_DIR: str = "static/uploads"
    BLOB_API_URL: str = "https://blob.vercel-storage.com"
    BLOB_READ_WRITE_TOKEN: Optional[str] = None

    # Cart and pricing
    CART_STORAGE_KEY: str = "eddyshop_cart"
    CURRENCY: str = "THB"
    FREE_SHIPPING_THRESHOLD: float = 1000
    SHIPPING_FEE: float = 50
    ORDER_CHAT_URL: str = "https://line.me/R/oaMessage/@eddyelectronics/"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
