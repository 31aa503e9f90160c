"""Reorder suggestion routes - low-stock suppliers, detail panel and reorder handoff."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from backoffice.core.enums import SortOrder
from backoffice.core.exceptions import (
    EmptySelectionError,
    FetchError,
    PurchaseOrderError,
    SupplierNotFoundError,
)
from backoffice.dependencies import get_reorder_service
from backoffice.schemas.purchase_order import CreatePurchaseOrderResponse, PurchaseOrderSelection
from backoffice.schemas.reorder import (
    ReorderHandoff,
    ReorderSelection,
    SuggestionsPage,
    SupplierDetail,
)
from backoffice.services.reorder_service import ReorderSuggestionService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/reorder-suggestions", tags=["reorder"])


@router.get("", response_model=SuggestionsPage)
async def list_reorder_suggestions(
    search: Optional[str] = Query(None, description="Search supplier name, contact, email or counts"),
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=1, le=100),
    sort_by: Optional[str] = Query(None, description="Column to sort by"),
    sort_order: SortOrder = Query(SortOrder.ASC, description="Sort order: asc or desc"),
    service: ReorderSuggestionService = Depends(get_reorder_service),
):
    """Suppliers with low-stock products. Fetch failures come back in `error`."""
    return await service.list_suggestions(
        search=search,
        page=page,
        per_page=per_page,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/{supplier_id}", response_model=SupplierDetail)
async def get_supplier_detail(
    supplier_id: int,
    service: ReorderSuggestionService = Depends(get_reorder_service),
):
    """Supplier information, stock summary and product rows with status"""
    try:
        return await service.get_supplier(supplier_id)
    except SupplierNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FetchError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/{supplier_id}/reorder", response_model=ReorderHandoff)
async def reorder_selected(
    supplier_id: int,
    selection: ReorderSelection,
    service: ReorderSuggestionService = Depends(get_reorder_service),
):
    """Turn the selected products into an order creation handoff"""
    try:
        return await service.prepare_reorder(supplier_id, selection.product_ids)
    except EmptySelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SupplierNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FetchError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/{supplier_id}/purchase-order", response_model=CreatePurchaseOrderResponse)
async def create_purchase_order(
    supplier_id: int,
    selection: PurchaseOrderSelection,
    service: ReorderSuggestionService = Depends(get_reorder_service),
):
    """Create a manual purchase order pre-filled with suggested quantities"""
    try:
        return await service.create_purchase_order(
            supplier_id, selection.product_ids, selection.payment_info
        )
    except EmptySelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SupplierNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (FetchError, PurchaseOrderError) as e:
        raise HTTPException(status_code=502, detail=str(e))
