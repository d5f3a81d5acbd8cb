import os
from typing import List
from dotenv import load_dotenv

# grab env vars from .env file
load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    # app settings
    APP_ENV: str = os.getenv("APP_ENV", "dev")
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    MAINTENANCE_MODE: bool = _as_bool(os.getenv("MAINTENANCE_MODE"))

    # CORS stuff
    _origins_raw: str = os.getenv("ALLOWED_ORIGINS", "*")
    ALLOWED_ORIGINS: List[str] = [o.strip() for o in _origins_raw.split(",") if o.strip()] if _origins_raw else ["*"]

    # payments via Razorpay
    # the storefront build exposes the key id as VITE_RAZORPAY_KEY_ID, accept both
    RAZORPAY_KEY_ID: str | None = os.getenv("RAZORPAY_KEY_ID") or os.getenv("VITE_RAZORPAY_KEY_ID")
    RAZORPAY_KEY_SECRET: str | None = os.getenv("RAZORPAY_KEY_SECRET")
    PAYMENTS_PROVIDER: str = os.getenv("PAYMENTS_PROVIDER", "razorpay")
    DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "INR")

    # admin accounts via Firebase
    GOOGLE_APPLICATION_CREDENTIALS: str | None = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    FIREBASE_PROJECT_ID: str | None = os.getenv("FIREBASE_PROJECT_ID")

    # default admin identity, password must come from the environment
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@tickify.com")
    ADMIN_DISPLAY_NAME: str = os.getenv("ADMIN_DISPLAY_NAME", "Super Admin")
    ADMIN_PASSWORD: str | None = os.getenv("ADMIN_PASSWORD")


settings = Settings()
