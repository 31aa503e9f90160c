class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class FetchError(BaseServiceError):
    """Raised when remote back-office data cannot be fetched."""
    pass

class BackofficeAPIError(FetchError):
    """Raised when back-office API calls fail."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code

class ReorderError(BaseServiceError):
    """Base exception for reorder suggestion errors."""
    pass

class EmptySelectionError(ReorderError):
    """Raised when a reorder is requested with no products selected."""
    pass

class SupplierNotFoundError(ReorderError):
    """Raised when a supplier has no low-stock group."""
    pass

class PurchaseOrderError(BaseServiceError):
    """Raised when the manual purchase order could not be created."""
    pass
