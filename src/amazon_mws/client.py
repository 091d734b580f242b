"""Single entry point combining every MWS API client."""

import logging
from typing import Callable, Optional

import requests

from .api.base import RequestExecutor
from .api.feeds import FeedsAPIClient, random_message_id
from .api.inventory import InventoryAPIClient
from .api.orders import OrdersAPIClient
from .api.products import ProductsAPIClient
from .api.reports import ReportsAPIClient
from .api.sellers import RecommendationsAPIClient, SellersAPIClient
from .config import MWSConfig
from .exceptions import RemoteError

logger = logging.getLogger(__name__)

VALIDATION_ORDER_ID = "validate"


class MWSClient(
    ProductsAPIClient,
    OrdersAPIClient,
    FeedsAPIClient,
    ReportsAPIClient,
    InventoryAPIClient,
    SellersAPIClient,
    RecommendationsAPIClient,
):
    """Amazon MWS client exposing every supported operation.

    Example:
        config = MWSConfig.from_env()
        client = MWSClient(config)
        page = client.list_orders(datetime(2020, 1, 1))
    """

    def __init__(
        self,
        config: MWSConfig,
        session: Optional[requests.Session] = None,
        message_id_factory: Callable[[], int] = random_message_id,
    ) -> None:
        super().__init__(RequestExecutor(config, session), message_id_factory=message_id_factory)

    def validate_credentials(self) -> bool:
        """Check the credentials with a request that is cheap and bound to fail.

        MWS only complains about the order id when the signature and the
        account are accepted.
        """
        try:
            self.list_order_items(VALIDATION_ORDER_ID)
        except RemoteError as e:
            valid = e.message == f"Invalid AmazonOrderId: {VALIDATION_ORDER_ID}"
            if not valid:
                logger.warning(f"Credential check failed: status={e.status_code}, code={e.error_code}")
            return valid
        return True
