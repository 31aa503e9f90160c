# backoffice/cli/reorder_report.py
import asyncio
import logging
import sys
import click

from backoffice.core.config import get_settings
from backoffice.core.exceptions import FetchError, SupplierNotFoundError
from backoffice.core.logging_config import configure_logging
from backoffice.core.utils import display_value
from backoffice.services.reorder_service import (
    ReorderSuggestionService,
    build_stock_rows,
    filter_suppliers,
)

logger = logging.getLogger(__name__)


@click.command()
@click.option('--search', default=None, help='Only show suppliers matching this text')
@click.option('--supplier', 'supplier_id', type=int, default=None, help='Show product detail for one supplier')
def reorder_report(search, supplier_id):
    """Print reorder suggestions grouped by supplier"""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    service = ReorderSuggestionService(settings)

    if supplier_id is not None:
        ok = asyncio.run(show_supplier(service, supplier_id))
    else:
        ok = asyncio.run(show_summary(service, search))
    if not ok:
        sys.exit(1)


async def show_summary(service: ReorderSuggestionService, search=None) -> bool:
    suggestions = await service.load_suggestions()
    if suggestions.error:
        click.echo(f"Failed to load reorder suggestions: {suggestions.error}")
        return False
    if suggestions.directory_error:
        click.echo(f"Warning: supplier directory unavailable ({suggestions.directory_error})")

    suppliers = filter_suppliers(suggestions.suppliers, search)
    if not suppliers:
        click.echo("No low stock items found.")
        return True

    click.echo(f"{'Supplier':<30} {'Products':>8} {'Low':>5} {'Out':>5} {'Adequate':>8}  Contact")
    for s in suppliers:
        click.echo(
            f"{s.supplier_name[:30]:<30} {s.total_products:>8} {s.low_stock_count:>5} "
            f"{s.out_of_stock_count:>5} {s.adequate_count:>8}  {display_value(s.contact)}"
        )
    click.echo(f"\n{len(suppliers)} supplier(s) with low stock")
    return True


async def show_supplier(service: ReorderSuggestionService, supplier_id: int) -> bool:
    try:
        supplier = await service.get_supplier_group(supplier_id)
    except SupplierNotFoundError as e:
        click.echo(str(e))
        return False
    except FetchError as e:
        click.echo(f"Failed to load reorder suggestions: {e}")
        return False

    click.echo(supplier.supplier_name)
    click.echo(f"Contact: {display_value(supplier.contact)}  Email: {display_value(supplier.email)}")
    click.echo(
        f"Total: {supplier.total_products}  Low: {supplier.low_stock_count}  "
        f"Out of stock: {supplier.out_of_stock_count}\n"
    )
    for row in build_stock_rows(supplier):
        click.echo(
            f"{row.product_id:>6}  {row.product_name[:30]:<30} {row.current_stock_level:>6} / "
            f"{row.reorder_threshold:<6} suggest {row.reorder_quantity:<5} {row.status.value}"
        )
    return True


if __name__ == '__main__':
    reorder_report()
