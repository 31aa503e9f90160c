from backoffice.schemas.purchase_order import PaymentInfo
from backoffice.schemas.reorder import ReorderRequest, SupplierLowStock
from backoffice.services.reorder.purchase_order import draft_purchase_order


def test_lines_use_reorder_quantity(s1_supplier):
    request = ReorderRequest(supplier_id=1, product_ids=[101, 103])

    order = draft_purchase_order(request, s1_supplier)

    assert order.supplier_id == 1
    assert order.order_type == "purchase"
    assert [line.product_id for line in order.products] == [101, 103]
    assert [line.quantity for line in order.products] == [10, 10]
    assert order.products[0].product_code == "PCM500"
    assert order.products[0].supplier_id == 1


def test_default_payment_totals(s1_supplier):
    request = ReorderRequest(supplier_id=1, product_ids=[101, 102, 103])

    order = draft_purchase_order(request, s1_supplier)

    # 3 lines x 10 units x 12.50
    assert order.payment_info.total_amount == "375.00"
    assert order.payment_info.total_amount_with_tax == "375.00"
    assert order.payment_info.payment_type == "CASH"
    assert order.payment_info.paid_amount == "0"


def test_zero_reorder_quantity_orders_one(product_factory):
    supplier = SupplierLowStock(
        supplier_id=4,
        supplier_name="Supplier 4",
        products=[product_factory(1, 0, 3, reorder_quantity=0, price=2.0)],
    )

    order = draft_purchase_order(ReorderRequest(supplier_id=4, product_ids=[1]), supplier)

    assert order.products[0].quantity == 1
    assert order.payment_info.total_amount == "2.00"


def test_explicit_payment_info_is_kept(s1_supplier):
    payment = PaymentInfo(payment_type="UPI", total_amount="100.00", total_amount_with_tax="105.00", paid_amount="100")

    order = draft_purchase_order(ReorderRequest(supplier_id=1, product_ids=[102]), s1_supplier, payment)

    assert order.payment_info == payment


def test_payload_is_camel_case(s1_supplier):
    order = draft_purchase_order(ReorderRequest(supplier_id=1, product_ids=[102]), s1_supplier)

    payload = order.to_payload()

    assert payload["supplierId"] == 1
    assert payload["orderType"] == "purchase"
    assert payload["paymentInfo"]["totalAmountWithTax"] == "125.00"
    assert payload["products"][0]["productId"] == 102
    assert payload["products"][0]["quantity"] == 10
