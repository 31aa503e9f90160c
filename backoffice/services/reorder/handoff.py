# backoffice/services/reorder/handoff.py
"""
Reorder handoff: turns a supplier plus a product selection into the request
consumed by the order creation workflow. Nothing here places an order.
"""

from typing import Iterable, Optional
from urllib.parse import urlencode

from backoffice.core.exceptions import EmptySelectionError
from backoffice.core.utils import join_ids
from backoffice.schemas.reorder import ReorderRequest, SupplierLowStock


def build_reorder_request(
    supplier: Optional[SupplierLowStock],
    selected_product_ids: Iterable[int],
) -> ReorderRequest:
    """
    Build a reorder request for the selected products of a supplier.

    Product ids are returned in the supplier's product order, independent of
    the order they were selected in. Ids that are not among the supplier's
    products are dropped.

    Args:
        supplier: The supplier the selection was made for
        selected_product_ids: Selected product ids

    Returns:
        ReorderRequest: Supplier id and ordered product ids

    Raises:
        EmptySelectionError: If nothing (valid) is selected
    """
    selected = set(selected_product_ids)
    if supplier is None or not selected:
        raise EmptySelectionError("Cannot build a reorder request from an empty selection")

    product_ids = []
    for product_id in supplier.product_ids:
        if product_id in selected and product_id not in product_ids:
            product_ids.append(product_id)

    if not product_ids:
        raise EmptySelectionError(
            f"None of the selected products belong to supplier {supplier.supplier_id}"
        )

    return ReorderRequest(supplier_id=supplier.supplier_id, product_ids=product_ids)


def reorder_redirect_url(request: ReorderRequest, order_creation_path: str) -> str:
    """Navigation target for the order creation screen, e.g. ?supplierId=3&productIds=7,9"""
    query = urlencode(
        {"supplierId": request.supplier_id, "productIds": join_ids(request.product_ids)},
        safe=",",
    )
    return f"{order_creation_path}?{query}"
