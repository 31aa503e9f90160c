import json
import logging
import httpx
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from backoffice.core.exceptions import BackofficeAPIError
from backoffice.core.config import Settings
from backoffice.schemas.reorder import LowStockGroup, SupplierInfo
from backoffice.schemas.purchase_order import CreatePurchaseOrderRequest, CreatePurchaseOrderResponse

logger = logging.getLogger(__name__)


def extract_error_message(response: httpx.Response, default: str) -> str:
    """Pull the API's error message out of a failed response"""
    try:
        body = response.json()
    except ValueError:
        return default

    if isinstance(body, dict):
        return body.get("errorMessage") or body.get("message") or default
    if isinstance(body, list):
        return ", ".join(str(item) for item in body) or default
    return str(body) or default


class BackofficeAPIClient:
    """
    Asynchronous client for the pharmacy back-office services (inventory and
    supplier services behind one gateway).

    Provides async methods (httpx) for:
        - Low-stock alerts grouped by supplier (get_low_stock_alerts)
        - The supplier directory (get_suppliers)
        - Manual purchase order creation (create_manual_purchase_order)

    All failures, including malformed bodies, surface as BackofficeAPIError.
    """

    def __init__(
        self,
        base_url: str,
        api_token: str = "",
        timeout: float = 10.0,
        low_stock_path: str = "/inventory-service/api/v1/inventory/low-stock-alerts",
        suppliers_path: str = "/supplier-service/api/v1/suppliers",
        purchase_order_path: str = "/supplier-service/api/purchase-orders/create-manual-purchase-order",
    ):
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.timeout = timeout
        self.low_stock_path = low_stock_path
        self.suppliers_path = suppliers_path
        self.purchase_order_path = purchase_order_path

    @classmethod
    def from_settings(cls, settings: Settings) -> "BackofficeAPIClient":
        return cls(
            base_url=settings.API_BASE_URL,
            api_token=settings.API_TOKEN,
            timeout=settings.HTTP_TIMEOUT,
            low_stock_path=settings.LOW_STOCK_ALERTS_PATH,
            suppliers_path=settings.SUPPLIERS_PATH,
            purchase_order_path=settings.PURCHASE_ORDER_PATH,
        )

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for API requests"""
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None,
        params: Optional[Dict] = None,
    ) -> Any:
        """
        Make a request to the back-office API

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint (without base URL)
            data: Request payload for POST requests
            params: Query parameters

        Returns:
            Decoded JSON response ({} for 204)

        Raises:
            BackofficeAPIError: If the API request fails
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        headers = self._get_headers()

        masked_headers = headers.copy()
        masked_headers["Authorization"] = "Bearer [REDACTED]"
        logger.debug(f"Making {method} request to {url}")
        logger.debug(f"Headers: {masked_headers}")
        if params:
            logger.debug(f"Params: {params}")
        if data:
            logger.debug(f"Data: {json.dumps(data)[:500]}...")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    json=data,
                    params=params
                )
        except httpx.TimeoutException as e:
            logger.error(f"Timeout error: {str(e)}")
            raise BackofficeAPIError(f"Request timed out: {str(e)}")
        except httpx.RequestError as e:
            logger.error(f"Network error: {str(e)}")
            raise BackofficeAPIError(f"Network error: {str(e)}")

        if response.status_code not in (200, 201, 202, 204):
            message = extract_error_message(response, "API request failed")
            logger.error(f"Back-office API error ({response.status_code}): {message}")
            raise BackofficeAPIError(message, status_code=response.status_code)

        if response.status_code == 204:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise BackofficeAPIError(f"Invalid JSON in response: {str(e)}", status_code=response.status_code)

    async def get_low_stock_alerts(self) -> List[LowStockGroup]:
        """
        Get products at or below their reorder threshold, grouped by supplier

        Returns:
            List[LowStockGroup]: One group per supplier, in API order

        Raises:
            BackofficeAPIError: If the request fails or the body is malformed
        """
        body = await self._make_request("GET", self.low_stock_path)
        low_stocks = body.get("lowStocks") if isinstance(body, dict) else None
        if not isinstance(low_stocks, list):
            raise BackofficeAPIError("Invalid response format from server")

        try:
            return [LowStockGroup.from_payload(item) for item in low_stocks]
        except ValidationError as e:
            logger.error(f"Malformed low-stock payload: {e}")
            raise BackofficeAPIError(f"Invalid low-stock data: {e.error_count()} validation error(s)")

    async def get_suppliers(self) -> List[SupplierInfo]:
        """
        Get the supplier directory

        Raises:
            BackofficeAPIError: If the request fails or the body is not a list
        """
        body = await self._make_request("GET", self.suppliers_path)
        if not isinstance(body, list):
            raise BackofficeAPIError("Expected an array of suppliers")

        try:
            return [SupplierInfo.from_payload(item) for item in body]
        except ValidationError as e:
            logger.error(f"Malformed supplier payload: {e}")
            raise BackofficeAPIError(f"Invalid supplier data: {e.error_count()} validation error(s)")

    async def create_manual_purchase_order(
        self, order: CreatePurchaseOrderRequest
    ) -> CreatePurchaseOrderResponse:
        """
        Create a manual purchase order

        Raises:
            BackofficeAPIError: If the request fails
        """
        body = await self._make_request("POST", self.purchase_order_path, data=order.to_payload())
        try:
            return CreatePurchaseOrderResponse.from_payload(body)
        except ValidationError:
            raise BackofficeAPIError("Invalid response format from server")
