# backoffice/services/reorder/aggregator.py
"""
Joins the stock source's per-supplier low-stock lists with the supplier
directory, producing one SupplierLowStock view model per supplier.

Pure derivation over already-fetched data: re-run from scratch whenever either
input changes.
"""

import logging
from typing import Dict, Iterable, List, Optional

from backoffice.core.enums import StockStatus
from backoffice.schemas.reorder import (
    LowStockGroup,
    LowStockProduct,
    SupplierInfo,
    SupplierLowStock,
)
from backoffice.services.reorder.classifier import classify_stock

logger = logging.getLogger(__name__)


def fallback_supplier_name(supplier_id: int) -> str:
    return f"Supplier {supplier_id}"


def build_directory(entries: Optional[Iterable[SupplierInfo]]) -> Dict[int, SupplierInfo]:
    """Index directory entries by supplier id. A missing directory is an empty one."""
    if not entries:
        return {}
    return {entry.id: entry for entry in entries}


def count_stock_tiers(products: List[LowStockProduct]) -> Dict[str, int]:
    """
    Tally out-of-stock and low-stock products.

    adequate_count is derived from the total so the three counts always sum to
    the number of products.
    """
    out_of_stock = 0
    low_stock = 0
    for product in products:
        status = classify_stock(product.current_stock_level, product.reorder_threshold)
        if status == StockStatus.OUT_OF_STOCK:
            out_of_stock += 1
        elif status == StockStatus.LOW_STOCK:
            low_stock += 1

    return {
        "out_of_stock_count": out_of_stock,
        "low_stock_count": low_stock,
        "adequate_count": len(products) - out_of_stock - low_stock,
    }


def build_supplier_group(group: LowStockGroup, directory: Dict[int, SupplierInfo]) -> SupplierLowStock:
    """Enrich one stock-source group with directory metadata and tier counts."""
    info = directory.get(group.supplier_id)
    if info is None:
        logger.debug(f"Supplier {group.supplier_id} not in directory, using fallback enrichment")

    return SupplierLowStock(
        supplier_id=group.supplier_id,
        supplier_name=(info.name if info and info.name else fallback_supplier_name(group.supplier_id)),
        contact=(info.contact_details or "") if info else "",
        email=(info.email or "") if info else "",
        in_directory=info is not None,
        products=list(group.products),
        **count_stock_tiers(group.products),
    )


def aggregate_low_stock(
    groups: Iterable[LowStockGroup],
    directory_entries: Optional[Iterable[SupplierInfo]] = None,
) -> List[SupplierLowStock]:
    """
    Build the supplier view models in stock-source order.

    Args:
        groups: Stock source output, one group per supplier
        directory_entries: Supplier directory, or None when it is unavailable

    Returns:
        List[SupplierLowStock]: One view model per input group
    """
    directory = build_directory(directory_entries)
    return [build_supplier_group(group, directory) for group in groups]
