"""
Storefront backend access.

- ApiGateway: async httpx client for fetching products and submitting orders
- stub_api: FastAPI stand-in for the real backend, used by the demo and tests
"""

from gateway.client import ApiGateway, GatewayError, GatewayUnavailableError

__all__ = [
    "ApiGateway",
    "GatewayError",
    "GatewayUnavailableError",
]
