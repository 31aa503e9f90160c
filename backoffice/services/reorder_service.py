# backoffice/services/reorder_service.py
import asyncio
import logging
from typing import List, Optional

from backoffice.core.config import Settings
from backoffice.core.enums import PLACEHOLDER, SortOrder
from backoffice.core.exceptions import (
    BackofficeAPIError,
    FetchError,
    PurchaseOrderError,
    SupplierNotFoundError,
)
from backoffice.core.utils import display_value, paginate_items
from backoffice.schemas.purchase_order import CreatePurchaseOrderResponse, PaymentInfo
from backoffice.schemas.reorder import (
    ProductStockRow,
    ReorderHandoff,
    ReorderSuggestions,
    SuggestionsPage,
    SupplierDetail,
    SupplierLowStock,
    SupplierSummary,
)
from backoffice.services.backoffice_api.client import BackofficeAPIClient
from backoffice.services.reorder.aggregator import aggregate_low_stock
from backoffice.services.reorder.classifier import classify_stock
from backoffice.services.reorder.handoff import reorder_redirect_url
from backoffice.services.reorder.purchase_order import draft_purchase_order
from backoffice.services.reorder.selection import SelectionController

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    "supplierName": lambda s: s.supplier_name.lower(),
    "totalProducts": lambda s: s.total_products,
    "lowStockCount": lambda s: s.low_stock_count,
    "outOfStockCount": lambda s: s.out_of_stock_count,
    "adequateCount": lambda s: s.adequate_count,
    "contact": lambda s: s.contact.lower(),
}


def _searchable_values(supplier: SupplierLowStock) -> List[str]:
    # Identity and contact fields only, counts and products are not searched
    return [
        str(supplier.supplier_id),
        supplier.supplier_name,
        supplier.contact,
        supplier.email,
    ]


def filter_suppliers(suppliers: List[SupplierLowStock], search: Optional[str]) -> List[SupplierLowStock]:
    """Case-insensitive substring search over the supplier summary fields"""
    if not search:
        return list(suppliers)
    needle = search.strip().lower()
    return [
        s for s in suppliers
        if any(needle in value.lower() for value in _searchable_values(s) if value)
    ]


def sort_suppliers(
    suppliers: List[SupplierLowStock],
    sort_by: Optional[str],
    sort_order: SortOrder = SortOrder.ASC,
) -> List[SupplierLowStock]:
    """Stable sort on a summary column; unknown columns keep source order"""
    key = SORTABLE_COLUMNS.get(sort_by) if sort_by else None
    if key is None:
        return list(suppliers)
    return sorted(suppliers, key=key, reverse=sort_order == SortOrder.DESC)


def build_stock_rows(supplier: SupplierLowStock) -> List[ProductStockRow]:
    return [
        ProductStockRow(
            product_id=product.product_id,
            product_name=product.display_name,
            product_code=display_value(product.product_code, PLACEHOLDER),
            manufacturer=display_value(product.manufacturer, PLACEHOLDER),
            current_stock_level=product.current_stock_level,
            reorder_threshold=product.reorder_threshold,
            reorder_quantity=product.reorder_quantity,
            purchase_price=product.purchase_price,
            status=classify_stock(product.current_stock_level, product.reorder_threshold),
        )
        for product in supplier.products
    ]


class ReorderSuggestionService:
    """
    Service behind the reorder suggestions screen.

    Fetches low-stock alerts and the supplier directory, aggregates them into
    per-supplier view models, and turns an operator's product selection into a
    reorder handoff or a manual purchase order.
    """

    def __init__(self, settings: Settings, client: Optional[BackofficeAPIClient] = None):
        """
        Args:
            settings: Application settings including API location and credentials
            client: Optional pre-built API client (tests)
        """
        self.settings = settings
        self.client = client or BackofficeAPIClient.from_settings(settings)

    async def load_suggestions(self) -> ReorderSuggestions:
        """
        Fetch both sources concurrently and aggregate.

        A stock source failure yields no suppliers and an error message; a
        directory failure only degrades enrichment.
        """
        low_stock_result, directory_result = await asyncio.gather(
            self.client.get_low_stock_alerts(),
            self.client.get_suppliers(),
            return_exceptions=True,
        )

        directory_error = None
        if isinstance(directory_result, BaseException):
            if not isinstance(directory_result, FetchError):
                raise directory_result
            logger.warning(f"Supplier directory unavailable, using fallback names: {directory_result}")
            directory_error = str(directory_result) or "Failed to fetch suppliers"
            directory_result = None

        if isinstance(low_stock_result, BaseException):
            if not isinstance(low_stock_result, FetchError):
                raise low_stock_result
            logger.warning(f"Low-stock alerts unavailable: {low_stock_result}")
            return ReorderSuggestions(
                suppliers=[],
                error=str(low_stock_result) or "Failed to fetch low stock items",
                directory_error=directory_error,
            )

        suppliers = aggregate_low_stock(low_stock_result, directory_result)
        logger.info(f"Aggregated low stock for {len(suppliers)} suppliers")
        return ReorderSuggestions(suppliers=suppliers, directory_error=directory_error)

    async def list_suggestions(
        self,
        search: Optional[str] = None,
        page: int = 1,
        per_page: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: SortOrder = SortOrder.ASC,
    ) -> SuggestionsPage:
        """Search, sort and paginate the supplier summary table"""
        suggestions = await self.load_suggestions()
        suppliers = filter_suppliers(suggestions.suppliers, search)
        suppliers = sort_suppliers(suppliers, sort_by, sort_order)

        pagination = paginate_items(
            [SupplierSummary.from_group(s) for s in suppliers],
            page=page,
            page_size=per_page or self.settings.SUGGESTIONS_PAGE_SIZE,
        )
        return SuggestionsPage.from_pagination(
            pagination,
            error=suggestions.error,
            directory_error=suggestions.directory_error,
        )

    async def get_supplier_group(self, supplier_id: int) -> SupplierLowStock:
        """
        Raises:
            FetchError: If the stock source is unavailable
            SupplierNotFoundError: If the supplier has no low-stock products
        """
        suggestions = await self.load_suggestions()
        if suggestions.error:
            raise FetchError(suggestions.error)

        for supplier in suggestions.suppliers:
            if supplier.supplier_id == supplier_id:
                return supplier
        raise SupplierNotFoundError(f"No low stock items for supplier {supplier_id}")

    async def get_supplier(self, supplier_id: int) -> SupplierDetail:
        supplier = await self.get_supplier_group(supplier_id)
        return SupplierDetail(
            summary=SupplierSummary.from_group(supplier),
            products=build_stock_rows(supplier),
        )

    def select_products(self, supplier: SupplierLowStock, product_ids: List[int]) -> SelectionController:
        """Replay a submitted selection on a fresh controller; repeats count once"""
        selection = SelectionController()
        selection.open_supplier(supplier)
        for product_id in dict.fromkeys(product_ids):
            selection.toggle(product_id)
        return selection

    async def prepare_reorder(self, supplier_id: int, product_ids: List[int]) -> ReorderHandoff:
        """
        Build the handoff to the order creation screen.

        Raises:
            EmptySelectionError: If no valid product is selected
        """
        supplier = await self.get_supplier_group(supplier_id)
        selection = self.select_products(supplier, product_ids)
        request = selection.reorder()

        redirect_url = reorder_redirect_url(request, self.settings.ORDER_CREATION_PATH)
        logger.info(f"Reorder prepared for supplier {supplier_id}: {len(request.product_ids)} products")
        return ReorderHandoff(
            supplier_id=request.supplier_id,
            product_ids=request.product_ids,
            redirect_url=redirect_url,
        )

    async def create_purchase_order(
        self,
        supplier_id: int,
        product_ids: List[int],
        payment_info: Optional[PaymentInfo] = None,
    ) -> CreatePurchaseOrderResponse:
        """
        Create a manual purchase order for the selected products.

        Raises:
            EmptySelectionError: If no valid product is selected
            PurchaseOrderError: If the supplier service rejects or fails the order
        """
        supplier = await self.get_supplier_group(supplier_id)
        selection = self.select_products(supplier, product_ids)
        order = draft_purchase_order(selection.reorder(), supplier, payment_info)

        try:
            response = await self.client.create_manual_purchase_order(order)
        except BackofficeAPIError as e:
            logger.error(f"Purchase order for supplier {supplier_id} failed: {e}")
            raise PurchaseOrderError(str(e) or "Failed to create purchase order")

        if not response.success:
            raise PurchaseOrderError(response.message or "Failed to create purchase order")

        logger.info(f"Created purchase order {response.order_id} for supplier {supplier_id}")
        return response
