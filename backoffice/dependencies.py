from fastapi import Depends

from backoffice.core.config import Settings, get_settings
from backoffice.services.reorder_service import ReorderSuggestionService


def get_reorder_service(settings: Settings = Depends(get_settings)) -> ReorderSuggestionService:
    """Dependency for getting the reorder suggestion service."""
    return ReorderSuggestionService(settings)
