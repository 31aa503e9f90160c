# backoffice/core/config.py

import os
from functools import lru_cache
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    # Remote back-office API
    API_BASE_URL: str = "http://localhost:8080"
    API_TOKEN: str = ""
    HTTP_TIMEOUT: float = 10.0

    # Remote endpoints
    LOW_STOCK_ALERTS_PATH: str = "/inventory-service/api/v1/inventory/low-stock-alerts"
    SUPPLIERS_PATH: str = "/supplier-service/api/v1/suppliers"
    PURCHASE_ORDER_PATH: str = "/supplier-service/api/purchase-orders/create-manual-purchase-order"

    # Order creation screen the reorder handoff navigates to
    ORDER_CREATION_PATH: str = "/purchases/order-creation"

    # Reorder suggestions table
    SUGGESTIONS_PAGE_SIZE: int = 7

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env') if os.path.exists('.env') else None,
        case_sensitive=True
    )


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every request"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
