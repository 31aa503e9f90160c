"""
Utility functions for the application.
"""
from typing import Any, Dict, List, Sequence


def paginate_items(
    items: Sequence[Any],
    page: int = 1,
    page_size: int = 10
) -> Dict[str, Any]:
    """
    Paginate an in-memory sequence.

    Args:
        items: Already filtered and sorted items
        page: Page number (1-indexed)
        page_size: Number of items per page

    Returns:
        Dictionary with pagination information and items
    """
    page = max(page, 1)
    page_size = max(page_size, 1)
    total = len(items)

    offset = (page - 1) * page_size
    page_items = list(items[offset:offset + page_size])

    # Calculate pagination values
    total_pages = (total + page_size - 1) // page_size if total > 0 else 1
    has_next = page < total_pages
    has_prev = page > 1

    return {
        "items": page_items,
        "total": total,
        "page": page,
        "page_size": page_size,
        "total_pages": total_pages,
        "has_next": has_next,
        "has_prev": has_prev,
        "start_item": offset + 1 if page_items else 0,
        "end_item": min(offset + page_size, total) if page_items else 0,
    }


def display_value(value: Any, placeholder: str = "N/A") -> str:
    """Return a display string, falling back to the placeholder for empty values"""
    if value is None or value == "":
        return placeholder
    return str(value)


def join_ids(ids: List[Any]) -> str:
    return ",".join(str(i) for i in ids)
