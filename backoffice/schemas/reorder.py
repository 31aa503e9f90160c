"""
Schemas for the reorder suggestion engine: low-stock products as reported by
the inventory service, supplier directory entries, the per-supplier view model
and the reorder handoff payload.
"""

from typing import Any, List, Optional

from pydantic import ConfigDict, Field, field_validator

from backoffice.core.enums import PLACEHOLDER, StockStatus
from backoffice.core.utils import display_value
from backoffice.schemas.base import BaseSchema


class Category(BaseSchema):
    cat_id: Optional[int] = None
    cat_name: Optional[str] = None


class BatchDetail(BaseSchema):
    mrp: Optional[float] = None
    batch_no: Optional[str] = None
    mfg: Optional[str] = None
    mfg_date: Optional[str] = None
    exp_date: Optional[str] = None
    packing: Optional[str] = None


class LowStockProduct(BaseSchema):
    """
    One product at or below its reorder threshold.

    Only the stock fields carry invariants; everything else is passed through
    for display. Unknown fields from the remote payload are kept.
    """
    model_config = ConfigDict(extra="allow")

    product_id: int
    current_stock_level: int = 0
    reorder_threshold: int = Field(0, ge=0)
    reorder_quantity: int = Field(0, ge=0)
    purchase_price: float = Field(0.0, ge=0)

    product_name: Optional[str] = None
    item_name: Optional[str] = None
    product_code: Optional[str] = None
    manufacturer: Optional[str] = None
    supplier_id: Optional[int] = None
    category: Optional[Category] = None
    batch_details_dto_list: List[BatchDetail] = Field(default_factory=list)

    @field_validator('current_stock_level', 'reorder_threshold', 'reorder_quantity', mode='before')
    @classmethod
    def validate_quantity(cls, v):
        if v is None or v == '':
            return 0
        return v

    @field_validator('purchase_price', mode='before')
    @classmethod
    def validate_price(cls, v):
        if v is None or v == '':
            return 0.0
        return v

    @property
    def display_name(self) -> str:
        return display_value(self.product_name or self.item_name, PLACEHOLDER)


class LowStockGroup(BaseSchema):
    """Stock source output: the low-stock products of one supplier"""
    supplier_id: int
    products: List[LowStockProduct] = Field(default_factory=list)


class SupplierInfo(BaseSchema):
    """Supplier directory entry"""
    id: int
    name: Optional[str] = None
    contact_details: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    gst_number: Optional[str] = None
    gst_address: Optional[str] = None


class SupplierLowStock(BaseSchema):
    """Per-supplier view model built by the aggregator"""
    supplier_id: int
    supplier_name: str
    contact: str = ""
    email: str = ""
    in_directory: bool = True
    products: List[LowStockProduct] = Field(default_factory=list)
    out_of_stock_count: int = 0
    low_stock_count: int = 0
    adequate_count: int = 0

    @property
    def total_products(self) -> int:
        return len(self.products)

    @property
    def product_ids(self) -> List[int]:
        return [product.product_id for product in self.products]


class SupplierSummary(BaseSchema):
    """Row of the reorder suggestions table"""
    supplier_id: int
    supplier_name: str
    contact: str
    email: str
    total_products: int
    out_of_stock_count: int
    low_stock_count: int
    adequate_count: int

    @classmethod
    def from_group(cls, group: SupplierLowStock) -> "SupplierSummary":
        return cls(
            supplier_id=group.supplier_id,
            supplier_name=group.supplier_name,
            contact=display_value(group.contact, PLACEHOLDER),
            email=display_value(group.email, PLACEHOLDER),
            total_products=group.total_products,
            out_of_stock_count=group.out_of_stock_count,
            low_stock_count=group.low_stock_count,
            adequate_count=group.adequate_count,
        )


class ProductStockRow(BaseSchema):
    """Product line of the supplier detail panel"""
    product_id: int
    product_name: str
    product_code: str
    manufacturer: str
    current_stock_level: int
    reorder_threshold: int
    reorder_quantity: int
    purchase_price: float
    status: StockStatus


class SupplierDetail(BaseSchema):
    summary: SupplierSummary
    products: List[ProductStockRow]


class ReorderSuggestions(BaseSchema):
    """
    Result of one aggregation pass.

    `error` is set when the stock source failed (no groups available);
    `directory_error` when enrichment fell back because the directory failed.
    """
    suppliers: List[SupplierLowStock] = Field(default_factory=list)
    error: Optional[str] = None
    directory_error: Optional[str] = None


class ReorderRequest(BaseSchema):
    """Reorder handed to the order creation workflow"""
    supplier_id: int
    product_ids: List[int] = Field(min_length=1)


class ReorderHandoff(ReorderRequest):
    redirect_url: str


class ReorderSelection(BaseSchema):
    """Request body carrying the operator's selected products"""
    product_ids: List[int] = Field(default_factory=list)


class SuggestionsPage(BaseSchema):
    items: List[SupplierSummary]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_next: bool
    has_prev: bool
    start_item: int
    end_item: int
    error: Optional[str] = None
    directory_error: Optional[str] = None

    @classmethod
    def from_pagination(cls, pagination: dict, **extra: Any) -> "SuggestionsPage":
        return cls(**pagination, **extra)
