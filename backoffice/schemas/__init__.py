"""
Schema exports for the application.
"""

# Base schemas
from .base import BaseSchema

# Reorder suggestion schemas
from .reorder import (
    Category,
    BatchDetail,
    LowStockProduct,
    LowStockGroup,
    SupplierInfo,
    SupplierLowStock,
    SupplierSummary,
    ProductStockRow,
    SupplierDetail,
    ReorderSuggestions,
    ReorderRequest,
    ReorderHandoff,
    ReorderSelection,
    SuggestionsPage
)

# Purchase order schemas
from .purchase_order import (
    PaymentInfo,
    PurchaseOrderProduct,
    CreatePurchaseOrderRequest,
    CreatePurchaseOrderResponse,
    PurchaseOrderSelection
)
