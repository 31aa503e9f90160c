import pytest
from click.testing import CliRunner

from backoffice.cli import reorder_report as report_module
from backoffice.core.exceptions import BackofficeAPIError


@pytest.fixture
def runner(mocker, reorder_service):
    mocker.patch.object(report_module, "ReorderSuggestionService", return_value=reorder_service)
    mocker.patch.object(report_module, "configure_logging")
    return CliRunner()


def test_summary(runner):
    result = runner.invoke(report_module.reorder_report, [])

    assert result.exit_code == 0
    assert "Medline Distributors" in result.output
    assert "Apex Pharma" in result.output
    assert "2 supplier(s) with low stock" in result.output


def test_summary_search(runner):
    result = runner.invoke(report_module.reorder_report, ["--search", "medline"])

    assert result.exit_code == 0
    assert "Apex Pharma" not in result.output


def test_summary_stock_source_down(runner, mock_api_client):
    mock_api_client.get_low_stock_alerts.side_effect = BackofficeAPIError("Network error: refused")

    result = runner.invoke(report_module.reorder_report, [])

    assert result.exit_code == 1
    assert "Failed to load reorder suggestions" in result.output


def test_supplier_detail(runner):
    result = runner.invoke(report_module.reorder_report, ["--supplier", "1"])

    assert result.exit_code == 0
    assert "Paracetamol 500mg" in result.output
    assert "Out of Stock" in result.output


def test_unknown_supplier(runner):
    result = runner.invoke(report_module.reorder_report, ["--supplier", "42"])

    assert result.exit_code == 1
    assert "No low stock items for supplier 42" in result.output


def test_summary_directory_down_shows_placeholders(runner, mock_api_client):
    mock_api_client.get_suppliers.side_effect = BackofficeAPIError("Network error: refused")

    result = runner.invoke(report_module.reorder_report, [])

    assert result.exit_code == 0
    assert "Warning: supplier directory unavailable" in result.output
    assert "Supplier 1" in result.output
    assert "N/A" in result.output


def test_supplier_detail_directory_down(runner, mock_api_client):
    mock_api_client.get_suppliers.side_effect = BackofficeAPIError("Network error: refused")

    result = runner.invoke(report_module.reorder_report, ["--supplier", "2"])

    assert result.exit_code == 0
    assert "Supplier 2" in result.output
    assert "Contact: N/A  Email: N/A" in result.output
