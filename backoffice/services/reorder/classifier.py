# backoffice/services/reorder/classifier.py
"""
Stock severity classification.

The reorder threshold is the trigger point and is inclusive: a product sitting
exactly on its threshold is already low.
"""

from backoffice.core.enums import StockStatus


def classify_stock(current_stock_level: int, reorder_threshold: int) -> StockStatus:
    """
    Classify a product's stock against its reorder threshold.

    Args:
        current_stock_level: Available quantity
        reorder_threshold: Level at or below which the product needs reordering

    Returns:
        StockStatus: OUT_OF_STOCK, LOW_STOCK or ADEQUATE
    """
    if current_stock_level <= 0:
        return StockStatus.OUT_OF_STOCK
    if current_stock_level <= reorder_threshold:
        return StockStatus.LOW_STOCK
    return StockStatus.ADEQUATE
