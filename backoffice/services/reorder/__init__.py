from .classifier import classify_stock
from .aggregator import aggregate_low_stock, build_supplier_group, count_stock_tiers
from .handoff import build_reorder_request, reorder_redirect_url
from .selection import SelectionController
from .purchase_order import draft_purchase_order
