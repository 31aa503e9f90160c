"""
Shared enums and constants used across the application.
"""

from enum import Enum


class StockStatus(str, Enum):
    """Stock severity tiers, values are the labels shown to operators"""
    OUT_OF_STOCK = "Out of Stock"
    LOW_STOCK = "Low Stock"
    ADEQUATE = "Adequate"


class SelectionState(str, Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    ALL = "all"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Shown wherever a passthrough display field is missing
PLACEHOLDER = "N/A"
