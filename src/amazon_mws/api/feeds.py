"""Feeds API client for Amazon MWS bulk update operations."""

import csv
import io
import logging
import random
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from ..codec import AttributedValue, to_xml
from ..constants import (
    FEED_CONTENT_TYPE,
    FEED_DOCUMENT_VERSION,
    FEED_TYPES,
    FLAT_FILE_CONTENT_TYPE,
    FLAT_FILE_HEADER,
    FLAT_FILE_TEMPLATE,
)
from ..exceptions import MWSError
from ..models import FeedSubmissionInfo, ListingProduct
from ..normalize import as_sequence, dig
from ..utils.params import format_timestamp
from ..utils.validators import (
    validate_fulfillment_latency,
    validate_listing_product,
    validate_quantity,
    validate_seller_sku,
)
from .base import BaseAPIClient, RequestExecutor

logger = logging.getLogger(__name__)

MAX_MESSAGE_ID = 2_147_483_647


def random_message_id() -> int:
    return random.randint(1, MAX_MESSAGE_ID)


def build_flat_file(products: Sequence[ListingProduct]) -> str:
    """Render products as the tab-delimited Offer template.

    The header row appears twice: once as labels, once as attribute names.
    """
    output = io.StringIO()
    writer = csv.writer(output, delimiter="\t", lineterminator="\n")
    writer.writerow(FLAT_FILE_TEMPLATE)
    writer.writerow(FLAT_FILE_HEADER)
    writer.writerow(FLAT_FILE_HEADER)
    for product in products:
        writer.writerow(product.to_row())
    return output.getvalue()


class FeedsAPIClient(BaseAPIClient):
    """Client for MWS feed submission and processing reports.

    Message ids come from ``message_id_factory`` unless the caller supplies
    them per item.
    """

    def __init__(
        self,
        executor: RequestExecutor,
        message_id_factory: Callable[[], int] = random_message_id,
    ) -> None:
        super().__init__(executor)
        self.message_id_factory = message_id_factory
        self.last_feed: Optional[Union[str, bytes]] = None
        self._debug_next_feed = False

    def debug_next_feed(self) -> None:
        """Capture the next feed in ``last_feed`` instead of sending it."""
        self._debug_next_feed = True

    def build_feed(self, content: Mapping[str, Any]) -> str:
        """Wrap feed messages in the AmazonEnvelope with its Header."""
        envelope: dict[str, Any] = {
            "Header": {
                "DocumentVersion": FEED_DOCUMENT_VERSION,
                "MerchantIdentifier": self.config.seller_id,
            },
        }
        envelope.update(content)
        return to_xml(envelope)

    def submit_feed(
        self,
        feed_type: str,
        content: Union[Mapping[str, Any], str, bytes],
        purge_and_replace: bool = False,
        debug: bool = False,
        content_type: str = FEED_CONTENT_TYPE,
    ) -> Optional[FeedSubmissionInfo]:
        """Upload a feed for processing.

        Args:
            feed_type: MWS feed type, e.g. ``_POST_INVENTORY_AVAILABILITY_DATA_``
            content: Message mapping (wrapped and encoded as XML) or a ready document
            purge_and_replace: Replace all existing data of this feed type
            debug: Build the document into ``last_feed`` without sending it
            content_type: Content-Type of a ready document

        Returns:
            FeedSubmissionInfo, or None when the feed was only captured

        Raises:
            MWSError: If MWS acknowledged the upload without a submission id
        """
        if isinstance(content, Mapping):
            content = self.build_feed(content)
            content_type = FEED_CONTENT_TYPE

        self.last_feed = content

        if debug or self._debug_next_feed:
            self._debug_next_feed = False
            logger.info(f"Captured {feed_type} feed of {len(content)} characters without sending it")
            return None

        params = {
            "FeedType": feed_type,
            "PurgeAndReplace": "true" if purge_and_replace else "false",
            "Merchant": self.config.seller_id,
        }

        response = self._make_request("SubmitFeed", params, body=content, content_type=content_type)
        info = FeedSubmissionInfo.from_value(response)

        if info is None:
            raise MWSError(f"SubmitFeed for {feed_type} returned no FeedSubmissionId")

        logger.info(f"Submitted {feed_type} feed, submission id {info.feed_submission_id}")
        return info

    def update_stock(self, quantities: Mapping[str, int]) -> Optional[FeedSubmissionInfo]:
        """Set stock quantities, given as a mapping of SKU -> quantity."""
        messages = []
        for sku, quantity in quantities.items():
            self._check_item(sku, quantity)
            messages.append(
                {
                    "MessageID": self.message_id_factory(),
                    "OperationType": "Update",
                    "Inventory": {"SKU": sku, "Quantity": int(quantity)},
                }
            )

        return self.submit_feed(FEED_TYPES["INVENTORY"], {"MessageType": "Inventory", "Message": messages})

    def update_stock_with_fulfillment_latency(
        self, items: Sequence[Mapping[str, Any]]
    ) -> Optional[FeedSubmissionInfo]:
        """Set stock quantities together with the days needed to ship.

        Args:
            items: Dicts with ``sku``, ``quantity``, ``latency`` and an optional ``message_id``
        """
        messages = []
        for item in items:
            self._check_item(item.get("sku"), item.get("quantity"))
            if not validate_fulfillment_latency(item.get("latency")):
                raise ValueError(f"Invalid fulfillment latency for {item.get('sku')}: {item.get('latency')}")

            messages.append(
                {
                    "MessageID": item.get("message_id") or self.message_id_factory(),
                    "OperationType": "Update",
                    "Inventory": {
                        "SKU": item["sku"],
                        "Quantity": int(item["quantity"]),
                        "FulfillmentLatency": item["latency"],
                    },
                }
            )

        return self.submit_feed(FEED_TYPES["INVENTORY"], {"MessageType": "Inventory", "Message": messages})

    def update_price(
        self,
        prices: Mapping[str, Any],
        sale_prices: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> Optional[FeedSubmissionInfo]:
        """Set standard prices and, optionally, time-boxed sale prices.

        Args:
            prices: SKU -> price, formatted as an XSD decimal
            sale_prices: SKU -> {"SalePrice": ..., "StartDate": datetime, "EndDate": datetime}
        """
        sale_prices = sale_prices or {}
        messages = []

        for sku, price in prices.items():
            if not validate_seller_sku(sku):
                raise ValueError(f"Invalid SKU: {sku!r}")

            price_node: dict[str, Any] = {
                "SKU": sku,
                "StandardPrice": AttributedValue(str(price), {"currency": "DEFAULT"}),
            }

            sale = sale_prices.get(sku)
            if isinstance(sale, Mapping):
                price_node["Sale"] = {
                    "StartDate": self._feed_date(sale["StartDate"]),
                    "EndDate": self._feed_date(sale["EndDate"]),
                    "SalePrice": AttributedValue(str(sale["SalePrice"]), {"currency": "DEFAULT"}),
                }

            messages.append({"MessageID": self.message_id_factory(), "Price": price_node})

        return self.submit_feed(FEED_TYPES["PRICING"], {"MessageType": "Price", "Message": messages})

    def delete_product_by_sku(self, skus: Sequence[str]) -> Optional[FeedSubmissionInfo]:
        """Delete products from the catalog by SKU."""
        messages = []
        for sku in skus:
            if not validate_seller_sku(sku):
                raise ValueError(f"Invalid SKU: {sku!r}")
            messages.append(
                {
                    "MessageID": self.message_id_factory(),
                    "OperationType": "Delete",
                    "Product": {"SKU": sku},
                }
            )

        return self.submit_feed(FEED_TYPES["PRODUCT"], {"MessageType": "Product", "Message": messages})

    def post_product(
        self, products: Union[ListingProduct, Sequence[ListingProduct]]
    ) -> Optional[FeedSubmissionInfo]:
        """Create or update offers through the flat-file listings feed.

        Args:
            products: One ListingProduct or a sequence of them

        Raises:
            ValueError: If a product fails validation; nothing is sent
        """
        if isinstance(products, ListingProduct):
            products = [products]

        for product in products:
            is_valid, errors = validate_listing_product(product)
            if not is_valid:
                raise ValueError(f"Invalid product {product.sku!r}: {'; '.join(errors)}")

        return self.submit_feed(
            FEED_TYPES["FLAT_FILE_LISTINGS"],
            build_flat_file(products),
            content_type=FLAT_FILE_CONTENT_TYPE,
        )

    def get_feed_submission_result(self, feed_submission_id: str) -> Any:
        """Return the processing report of a submitted feed."""
        response = self._make_request("GetFeedSubmissionResult", {"FeedSubmissionId": feed_submission_id})
        report = dig(response, "Message", "ProcessingReport")
        return report if report is not None else response

    def get_feed_submission_list(self) -> list[dict[str, Any]]:
        """Return the feed submissions of the previous 90 days."""
        response = self._make_request("GetFeedSubmissionList")
        return as_sequence(dig(response, "FeedSubmissionInfo"))

    @staticmethod
    def _check_item(sku: Any, quantity: Any) -> None:
        if not validate_seller_sku(sku):
            raise ValueError(f"Invalid SKU: {sku!r}")
        if not validate_quantity(quantity):
            raise ValueError(f"Invalid quantity for {sku}: {quantity!r}")

    @staticmethod
    def _feed_date(value: Union[datetime, str]) -> str:
        return format_timestamp(value) if isinstance(value, datetime) else value
