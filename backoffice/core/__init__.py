"""
Core module exports.
"""
from .enums import (
    StockStatus,
    SelectionState,
    SortOrder,
    PLACEHOLDER
)

from .exceptions import (
    BaseServiceError,
    FetchError,
    BackofficeAPIError,
    ReorderError,
    EmptySelectionError,
    SupplierNotFoundError,
    PurchaseOrderError
)

from .utils import (
    paginate_items,
    display_value
)
