"""Orders API client for Amazon MWS (2013-09-01)."""

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..constants import MARKETPLACES
from ..models import OrdersPage
from ..normalize import as_sequence, dig
from ..utils.params import enumerate_param, format_timestamp
from ..utils.validators import validate_fulfillment_channel, validate_order_status
from .base import BaseAPIClient

logger = logging.getLogger(__name__)


class OrdersAPIClient(BaseAPIClient):
    """Client for the MWS Orders section."""

    def list_orders(
        self,
        created_after: datetime,
        all_marketplaces: bool = False,
        states: Sequence[str] = ("Unshipped", "PartiallyShipped"),
        fulfillment_channels: Sequence[str] = ("MFN",),
        created_before: Optional[datetime] = None,
    ) -> OrdersPage:
        """
        Retrieve orders created during a time frame.

        Args:
            created_after: Beginning of the time frame
            all_marketplaces: List orders from every known marketplace, not only the configured one
            states: Order statuses to filter on
            fulfillment_channels: Fulfillment channels to filter on (AFN, MFN)
            created_before: Optional end of the time frame

        Returns:
            OrdersPage with the orders and the token for the next page, if any

        Raises:
            ValueError: If a status or fulfillment channel is unknown
        """
        for state in states:
            if not validate_order_status(state):
                raise ValueError(f"Invalid order status: {state}")
        for channel in fulfillment_channels:
            if not validate_fulfillment_channel(channel):
                raise ValueError(f"Invalid fulfillment channel: {channel}")

        params: dict[str, Any] = {"CreatedAfter": format_timestamp(created_after)}

        if created_before:
            params["CreatedBefore"] = format_timestamp(created_before)

        params.update(enumerate_param("OrderStatus.Status", states))

        if all_marketplaces:
            params.update(enumerate_param("MarketplaceId.Id", MARKETPLACES))

        if fulfillment_channels:
            params.update(enumerate_param("FulfillmentChannel.Channel", fulfillment_channels))

        response = self._make_request("ListOrders", params)
        page = OrdersPage.from_value(response)

        logger.info(f"ListOrders returned {len(page.orders)} orders, more pages: {page.has_more}")
        return page

    def list_orders_by_next_token(self, next_token: str) -> OrdersPage:
        """Retrieve the next page of a ListOrders result."""
        response = self._make_request("ListOrdersByNextToken", {"NextToken": next_token})
        return OrdersPage.from_value(response)

    def get_order(self, amazon_order_id: str) -> Optional[dict[str, Any]]:
        """
        Retrieve a single order.

        Args:
            amazon_order_id: Amazon Order ID

        Returns:
            The order, or None if it was not found
        """
        response = self._make_request("GetOrder", {"AmazonOrderId.Id.1": amazon_order_id})
        orders = as_sequence(dig(response, "Orders", "Order"))
        return orders[0] if orders else None

    def list_order_items(self, amazon_order_id: str) -> list[dict[str, Any]]:
        """Retrieve the items of an order, always as a list."""
        response = self._make_request("ListOrderItems", {"AmazonOrderId": amazon_order_id})
        return as_sequence(dig(response, "OrderItems", "OrderItem"))
