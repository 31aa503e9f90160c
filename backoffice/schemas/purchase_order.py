"""
Schemas for the manual purchase order created from a reorder.
"""

from typing import List, Optional

from pydantic import ConfigDict

from backoffice.schemas.base import BaseSchema
from backoffice.schemas.reorder import ReorderSelection


class PaymentInfo(BaseSchema):
    payment_type: str = "CASH"
    total_amount: str = "0.00"
    total_amount_with_tax: str = "0.00"
    paid_amount: str = "0"
    link_payment: bool = False
    deductible_wallet_amount: float = 0.0


class PurchaseOrderProduct(BaseSchema):
    model_config = ConfigDict(extra="allow")

    product_id: int
    quantity: int
    purchase_price: Optional[float] = None
    product_name: Optional[str] = None
    product_code: Optional[str] = None
    supplier_id: Optional[int] = None


class CreatePurchaseOrderRequest(BaseSchema):
    supplier_id: int
    order_type: str = "purchase"
    payment_info: PaymentInfo
    products: List[PurchaseOrderProduct]


class CreatePurchaseOrderResponse(BaseSchema):
    success: bool
    message: Optional[str] = None
    order_id: Optional[int] = None


class PurchaseOrderSelection(ReorderSelection):
    """Reorder selection plus optional payment details for the draft order"""
    payment_info: Optional[PaymentInfo] = None
