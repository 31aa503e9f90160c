# backoffice/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backoffice.core.config import get_settings
from backoffice.core.logging_config import configure_logging
from backoffice.routes import health, reorder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Starting reorder suggestions API ({settings.ENVIRONMENT}) against {settings.API_BASE_URL}")
    yield
    logger.info("Reorder suggestions API stopped")


app = FastAPI(
    title="Back-office Reorder Suggestions",
    lifespan=lifespan
)

app.include_router(reorder.router)
app.include_router(health.router)
