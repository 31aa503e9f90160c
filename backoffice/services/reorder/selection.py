# backoffice/services/reorder/selection.py
"""
Bulk product selection for the supplier detail view.

Selection is scoped to exactly one open supplier. Opening or closing a
supplier always starts over from an empty selection, and dispatching a
reorder discards it.
"""

import logging
from typing import Callable, List, Optional, Set

from backoffice.core.enums import SelectionState
from backoffice.schemas.reorder import ReorderRequest, SupplierLowStock
from backoffice.services.reorder.handoff import build_reorder_request

logger = logging.getLogger(__name__)

OnReorder = Callable[[int, List[int]], None]


class SelectionController:
    """
    State machine over the selected product ids of the open supplier.

    EMPTY -> PARTIAL -> ALL via toggle(); toggle_all() jumps to ALL, or back to
    EMPTY when everything is already selected.
    """

    def __init__(self) -> None:
        self._supplier: Optional[SupplierLowStock] = None
        self._product_ids: List[int] = []
        self._selected: Set[int] = set()

    @property
    def supplier(self) -> Optional[SupplierLowStock]:
        return self._supplier

    def open_supplier(self, supplier: SupplierLowStock) -> None:
        self._supplier = supplier
        self._product_ids = supplier.product_ids
        self._selected = set()

    def close_supplier(self) -> None:
        self._supplier = None
        self._product_ids = []
        self._selected = set()

    def toggle(self, product_id: int) -> bool:
        """
        Flip one product's selection.

        Ids outside the open supplier's products are ignored.

        Returns:
            bool: True if the product is selected afterwards
        """
        if product_id not in self._product_ids:
            logger.debug(f"Ignoring toggle for product {product_id} outside the open supplier")
            return False
        if product_id in self._selected:
            self._selected.discard(product_id)
            return False
        self._selected.add(product_id)
        return True

    def toggle_all(self) -> None:
        if self.state == SelectionState.ALL:
            self._selected = set()
        else:
            self._selected = set(self._product_ids)

    def clear(self) -> None:
        self._selected = set()

    @property
    def state(self) -> SelectionState:
        if not self._selected:
            return SelectionState.EMPTY
        if len(self._selected) == len(set(self._product_ids)):
            return SelectionState.ALL
        return SelectionState.PARTIAL

    def is_selected(self, product_id: int) -> bool:
        return product_id in self._selected

    def selection_count(self) -> int:
        return len(self._selected)

    def can_reorder(self) -> bool:
        return self.selection_count() > 0

    @property
    def selected_product_ids(self) -> List[int]:
        """Selected ids in the supplier's product order"""
        return [pid for pid in self._product_ids if pid in self._selected]

    def reorder(self, on_reorder: Optional[OnReorder] = None) -> ReorderRequest:
        """
        Build the reorder request, hand it to on_reorder and close the supplier.

        Raises:
            EmptySelectionError: If no supplier is open or nothing is selected
        """
        request = build_reorder_request(self._supplier, self._selected)
        if on_reorder is not None:
            on_reorder(request.supplier_id, list(request.product_ids))
        self.close_supplier()
        return request
