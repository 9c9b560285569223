"""
HTTP client for the storefront backend.

Wraps the two remote calls the storefront needs:
- GET  {base_url}/product/  -> product list (the ``items`` field of the body)
- POST {base_url}/order     -> order confirmation ``{id, total}``

Errors are translated into gateway exceptions so callers never deal with
httpx or pydantic errors directly. There is no retry logic here.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from shared.models import OrderResult, OrderSubmission, Product

logger = logging.getLogger("gateway")

DEFAULT_TIMEOUT = 10.0


class GatewayError(Exception):
    """Error reported by the storefront backend or an unreadable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class GatewayUnavailableError(GatewayError):
    """The storefront backend could not be reached."""

    pass


class ApiGateway:
    """
    Async client for fetching products and submitting orders.

    Example:
        async with ApiGateway("http://127.0.0.1:8000") as gateway:
            products = await gateway.fetch_products()
            result = await gateway.submit_order(cart.to_order())
    """

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the gateway.

        Args:
            base_url: Backend base URL, without trailing slash
            client: Pre-configured client (tests pass one with a mock transport).
                    When omitted the gateway creates and owns its own client.
            timeout: Request timeout in seconds for the owned client
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_products(self) -> list[Product]:
        """Fetch the current product list."""
        body = await self._request("GET", "/product/")
        try:
            items = body["items"]
            products = [Product.model_validate(item) for item in items]
        except (KeyError, TypeError) as e:
            raise GatewayError(f"Malformed product list: {e}") from e
        except ValidationError as e:
            raise GatewayError(f"Invalid product in list: {e}") from e

        logger.info(f"Fetched {len(products)} products")
        return products

    async def submit_order(self, order: OrderSubmission) -> OrderResult:
        """Submit an order and return the backend's confirmation."""
        body = await self._request("POST", "/order", json=order.to_payload())
        try:
            result = OrderResult.model_validate(body)
        except ValidationError as e:
            raise GatewayError(f"Malformed order confirmation: {e}") from e

        logger.info(f"Order {result.id} accepted, total {result.total}")
        return result

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Storefront backend unavailable: {e}")
            raise GatewayUnavailableError(f"Storefront backend unavailable: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"{method} {url} could not be sent: {e}")
            raise GatewayError(f"Request could not be sent: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"{method} {path} failed with {response.status_code}: {message}")
            raise GatewayError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise GatewayError(f"Response is not JSON: {e}", status_code=response.status_code) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ApiGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _error_message(response: httpx.Response) -> str:
    """Pull a readable message out of an error response."""
    try:
        data = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(data, dict):
        for key in ("error", "detail"):
            if isinstance(data.get(key), str):
                return data[key]
    return f"HTTP {response.status_code}"
