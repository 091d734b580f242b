#!/usr/bin/env python3
"""MCP Server for Amazon Marketplace Web Service using FastMCP.

Exposes the most common MWS operations (orders, pricing, stock, reports and
fulfillment inventory) as tools. Credentials are read from the environment
or a ``.env`` file, see :meth:`amazon_mws.config.MWSConfig.from_env`.
"""

import dataclasses
import json
import logging
import uuid
from datetime import datetime
from typing import Annotated, Any, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from .client import MWSClient
from .config import MWSConfig
from .utils.decorators import handle_mws_errors

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

mcp: FastMCP = FastMCP(
    "amazon-mws",
    instructions="Tools for Amazon Marketplace Web Service: orders, prices, stock feeds, reports and FBA inventory.",
)

_client: Optional[MWSClient] = None


def get_client() -> MWSClient:
    """Return the process-wide client, creating it from the environment on first use."""
    global _client
    if _client is None:
        _client = MWSClient(MWSConfig.from_env())
    return _client


def _parse_date(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def success_response(data: Any) -> str:
    """Format a tool result as the JSON success envelope."""
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        data = dataclasses.asdict(data)

    return json.dumps(
        {
            "success": True,
            "data": data,
            "metadata": {
                "timestamp": datetime.now().isoformat() + "Z",
                "request_id": str(uuid.uuid4()),
            },
        },
        indent=2,
        default=str,
    )


@handle_mws_errors
def list_orders(
    created_after: Annotated[str, "ISO 8601 date, orders created after it (e.g. '2025-01-01T00:00:00Z')"],
    created_before: Annotated[str, "ISO 8601 date, orders created before it (optional)"] = "",
    order_statuses: Annotated[str, "Comma-separated order statuses"] = "Unshipped,PartiallyShipped",
    fulfillment_channels: Annotated[str, "Comma-separated fulfillment channels (AFN, MFN)"] = "MFN",
    all_marketplaces: Annotated[bool, "List orders from every marketplace"] = False,
) -> str:
    """List orders created in a time frame. Returns one page plus its next_token."""
    page = get_client().list_orders(
        _parse_date(created_after),
        all_marketplaces=all_marketplaces,
        states=_split(order_statuses),
        fulfillment_channels=_split(fulfillment_channels),
        created_before=_parse_date(created_before) if created_before else None,
    )
    return success_response(page)


@handle_mws_errors
def list_orders_by_next_token(
    next_token: Annotated[str, "NextToken returned by list_orders"],
) -> str:
    """Fetch the next page of a list_orders result."""
    return success_response(get_client().list_orders_by_next_token(next_token))


@handle_mws_errors
def get_order(
    amazon_order_id: Annotated[str, "Amazon order id (e.g. '123-1234567-1234567')"],
) -> str:
    """Retrieve a single order. ``data`` is null when the order does not exist."""
    return success_response(get_client().get_order(amazon_order_id))


@handle_mws_errors
def list_order_items(
    amazon_order_id: Annotated[str, "Amazon order id"],
) -> str:
    """Retrieve the items of an order."""
    return success_response(get_client().list_order_items(amazon_order_id))


@handle_mws_errors
def get_my_price_for_sku(
    skus: Annotated[str, "Comma-separated seller SKUs (at most 20)"],
    item_condition: Annotated[str, "Item condition filter (optional)"] = "",
) -> str:
    """Return your own offers per SKU; false marks SKUs MWS could not price."""
    return success_response(get_client().get_my_price_for_sku(_split(skus), item_condition))


@handle_mws_errors
def get_competitive_pricing_for_asin(
    asins: Annotated[str, "Comma-separated ASINs (at most 20)"],
) -> str:
    """Return the competitive price of each ASIN."""
    return success_response(get_client().get_competitive_pricing_for_asin(_split(asins)))


@handle_mws_errors
def update_stock(
    quantities: Annotated[str, "JSON object of SKU -> quantity, e.g. '{\"SKU-1\": 5}'"],
) -> str:
    """Submit an inventory feed setting the stock of each SKU."""
    parsed = json.loads(quantities)
    if not isinstance(parsed, dict):
        raise ValueError("quantities must be a JSON object of SKU -> quantity")
    return success_response(get_client().update_stock(parsed))


@handle_mws_errors
def update_price(
    prices: Annotated[str, "JSON object of SKU -> price, e.g. '{\"SKU-1\": \"19.99\"}'"],
) -> str:
    """Submit a pricing feed setting the standard price of each SKU."""
    parsed = json.loads(prices)
    if not isinstance(parsed, dict):
        raise ValueError("prices must be a JSON object of SKU -> price")
    return success_response(get_client().update_price(parsed))


@handle_mws_errors
def get_feed_submission_result(
    feed_submission_id: Annotated[str, "FeedSubmissionId returned by a feed tool"],
) -> str:
    """Return the processing report of a submitted feed."""
    return success_response(get_client().get_feed_submission_result(feed_submission_id))


@handle_mws_errors
def request_report(
    report_type: Annotated[str, "MWS report type (e.g. '_GET_MERCHANT_LISTINGS_DATA_')"],
    start_date: Annotated[str, "ISO 8601 start of the reported period (optional)"] = "",
    end_date: Annotated[str, "ISO 8601 end of the reported period (optional)"] = "",
) -> str:
    """Request a report and return its ReportRequestId."""
    report_request_id = get_client().request_report(
        report_type,
        start_date=_parse_date(start_date) if start_date else None,
        end_date=_parse_date(end_date) if end_date else None,
    )
    return success_response({"report_request_id": report_request_id})


@handle_mws_errors
def get_report(
    report_request_id: Annotated[str, "ReportRequestId returned by request_report"],
) -> str:
    """Download a finished report. ``data`` is null while it is still processing."""
    return success_response(get_client().get_report(report_request_id))


@handle_mws_errors
def list_inventory_supply(
    skus: Annotated[str, "Comma-separated seller SKUs (at most 50)"],
) -> str:
    """Return the Amazon-fulfilled inventory supply of each SKU."""
    return success_response(get_client().list_inventory_supply(_split(skus)))


TOOLS = (
    list_orders,
    list_orders_by_next_token,
    get_order,
    list_order_items,
    get_my_price_for_sku,
    get_competitive_pricing_for_asin,
    update_stock,
    update_price,
    get_feed_submission_result,
    request_report,
    get_report,
    list_inventory_supply,
)

for _tool in TOOLS:
    mcp.tool()(_tool)


def main() -> None:
    """Entry point for the MCP server."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    mcp.run()


if __name__ == "__main__":
    main()
