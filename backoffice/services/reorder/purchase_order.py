# backoffice/services/reorder/purchase_order.py
"""
Draft a manual purchase order from a reorder request, pre-filling each line
with the product's suggested reorder quantity.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional

from backoffice.schemas.purchase_order import (
    CreatePurchaseOrderRequest,
    PaymentInfo,
    PurchaseOrderProduct,
)
from backoffice.schemas.reorder import LowStockProduct, ReorderRequest, SupplierLowStock


def _money(value: Decimal) -> str:
    return str(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def order_quantity(product: LowStockProduct) -> int:
    # A zero suggestion would produce an empty line
    return product.reorder_quantity or 1


def draft_purchase_order(
    request: ReorderRequest,
    supplier: SupplierLowStock,
    payment_info: Optional[PaymentInfo] = None,
) -> CreatePurchaseOrderRequest:
    """
    Build the create-manual-purchase-order payload for a reorder.

    Args:
        request: Reorder request for the supplier
        supplier: The supplier's low-stock group the request was built from
        payment_info: Payment details; totals are filled in when omitted

    Returns:
        CreatePurchaseOrderRequest
    """
    by_id: Dict[int, LowStockProduct] = {p.product_id: p for p in supplier.products}

    lines = []
    total = Decimal("0")
    for product_id in request.product_ids:
        product = by_id[product_id]
        quantity = order_quantity(product)
        total += Decimal(str(product.purchase_price)) * quantity
        lines.append(
            PurchaseOrderProduct(
                product_id=product.product_id,
                quantity=quantity,
                purchase_price=product.purchase_price,
                product_name=product.product_name,
                product_code=product.product_code,
                supplier_id=supplier.supplier_id,
            )
        )

    if payment_info is None:
        payment_info = PaymentInfo(
            total_amount=_money(total),
            total_amount_with_tax=_money(total),
        )

    return CreatePurchaseOrderRequest(
        supplier_id=request.supplier_id,
        payment_info=payment_info,
        products=lines,
    )
