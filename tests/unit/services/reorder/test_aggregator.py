import pytest

from backoffice.schemas.reorder import LowStockGroup, SupplierInfo
from backoffice.services.reorder.aggregator import (
    aggregate_low_stock,
    build_directory,
    count_stock_tiers,
)



def test_counts_one_per_tier(s1_group, directory):
    """Supplier with out-of-stock, low and adequate products"""
    [supplier] = aggregate_low_stock([s1_group], directory)

    assert supplier.out_of_stock_count == 1
    assert supplier.low_stock_count == 1
    assert supplier.adequate_count == 1
    assert supplier.total_products == 3


def test_directory_enrichment(s1_group, directory):
    [supplier] = aggregate_low_stock([s1_group], directory)

    assert supplier.supplier_name == "Medline Distributors"
    assert supplier.contact == "9876543210"
    assert supplier.email == "orders@medline.test"
    assert supplier.in_directory is True


def test_unknown_supplier_falls_back(product_factory):
    group = LowStockGroup(supplier_id=99, products=[product_factory(1, 2, 5)])
    directory = [SupplierInfo(id=1, name="Someone Else")]

    [supplier] = aggregate_low_stock([group], directory)

    assert supplier.supplier_name == "Supplier 99"
    assert supplier.contact == ""
    assert supplier.email == ""
    assert supplier.in_directory is False
    assert supplier.low_stock_count == 1


def test_missing_directory_is_empty_directory(s1_group, s2_group):
    suppliers = aggregate_low_stock([s1_group, s2_group], None)

    assert [s.supplier_name for s in suppliers] == ["Supplier 1", "Supplier 2"]


def test_directory_entry_without_name_uses_fallback():
    group = LowStockGroup(supplier_id=7, products=[])
    [supplier] = aggregate_low_stock([group], [SupplierInfo(id=7, email="x@y.test")])

    assert supplier.supplier_name == "Supplier 7"
    assert supplier.email == "x@y.test"
    assert supplier.contact == ""


def test_preserves_source_order(directory, product_factory):
    groups = [
        LowStockGroup(supplier_id=2, products=[product_factory(9, 1, 2), product_factory(3, 0, 2), product_factory(5, 4, 2)]),
        LowStockGroup(supplier_id=1, products=[product_factory(8, 1, 2)]),
    ]

    suppliers = aggregate_low_stock(groups, directory)

    assert [s.supplier_id for s in suppliers] == [2, 1]
    assert suppliers[0].product_ids == [9, 3, 5]


def test_same_product_under_two_suppliers_is_not_deduplicated(product_factory):
    groups = [
        LowStockGroup(supplier_id=1, products=[product_factory(5, 1, 2)]),
        LowStockGroup(supplier_id=2, products=[product_factory(5, 1, 2)]),
    ]

    suppliers = aggregate_low_stock(groups)

    assert suppliers[0].product_ids == [5]
    assert suppliers[1].product_ids == [5]


@pytest.mark.parametrize("levels", [
    [],
    [(0, 0)],
    [(0, 3), (0, 1), (2, 2)],
    [(7, 3), (8, 3), (9, 3)],
    [(1, 10), (11, 10), (0, 10), (10, 10), (-1, 4)],
])
def test_counts_always_sum_to_product_count(levels, product_factory):
    products = [product_factory(i, stock, threshold) for i, (stock, threshold) in enumerate(levels)]
    [supplier] = aggregate_low_stock([LowStockGroup(supplier_id=1, products=products)])

    assert (
        supplier.out_of_stock_count + supplier.low_stock_count + supplier.adequate_count
        == len(products)
    )


def test_count_stock_tiers_low_excludes_out_of_stock(product_factory):
    counts = count_stock_tiers([product_factory(1, 0, 5), product_factory(2, 0, 5), product_factory(3, 5, 5)])

    assert counts == {"out_of_stock_count": 2, "low_stock_count": 1, "adequate_count": 0}


def test_build_directory_indexes_by_id(directory):
    index = build_directory(directory)

    assert set(index) == {1, 2}
    assert index[2].name == "Apex Pharma"
    assert build_directory(None) == {}
