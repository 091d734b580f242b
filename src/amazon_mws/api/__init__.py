"""Amazon MWS API client modules."""

from .base import BaseAPIClient, RequestExecutor, SignedRequest
from .feeds import FeedsAPIClient
from .inventory import InventoryAPIClient
from .orders import OrdersAPIClient
from .products import ProductsAPIClient
from .reports import ReportsAPIClient
from .sellers import RecommendationsAPIClient, SellersAPIClient

__all__ = [
    "BaseAPIClient",
    "FeedsAPIClient",
    "InventoryAPIClient",
    "OrdersAPIClient",
    "ProductsAPIClient",
    "RecommendationsAPIClient",
    "ReportsAPIClient",
    "RequestExecutor",
    "SellersAPIClient",
    "SignedRequest",
]
