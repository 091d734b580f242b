"""Utility modules for MWS operations."""

from .decorators import handle_mws_errors
from .params import enumerate_param, format_timestamp, is_omitted
from .validators import (
    check_max_items,
    validate_fulfillment_channel,
    validate_fulfillment_latency,
    validate_item_condition,
    validate_listing_product,
    validate_marketplace_id,
    validate_order_status,
    validate_quantity,
    validate_recommendation_category,
    validate_seller_sku,
)

__all__ = [
    "check_max_items",
    "enumerate_param",
    "format_timestamp",
    "handle_mws_errors",
    "is_omitted",
    "validate_fulfillment_channel",
    "validate_fulfillment_latency",
    "validate_item_condition",
    "validate_listing_product",
    "validate_marketplace_id",
    "validate_order_status",
    "validate_quantity",
    "validate_recommendation_category",
    "validate_seller_sku",
]
