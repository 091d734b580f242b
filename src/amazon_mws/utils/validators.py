"""Input validation utilities for MWS call parameters."""

from typing import Any, Sequence

from ..constants import (
    FLAT_FILE_ENCODING,
    FULFILLMENT_CHANNELS,
    ITEM_CONDITIONS,
    LISTING_CONDITIONS,
    MARKETPLACES,
    MAX_CONDITION_NOTE_LENGTH,
    ORDER_STATUSES,
    PRODUCT_ID_LENGTHS,
    RECOMMENDATION_CATEGORIES,
)
from ..exceptions import CallConstraintViolation


def check_max_items(items: Sequence[Any], limit: int, label: str) -> None:
    """Enforce a per-call cardinality limit before any request is made.

    Args:
        items: Identifiers supplied by the caller
        limit: Maximum number the operation accepts
        label: Human readable name of the identifiers, e.g. "ASIN's"

    Raises:
        CallConstraintViolation: If more than ``limit`` items were given
    """
    if len(items) > limit:
        raise CallConstraintViolation(
            f"Maximum amount of {label} for this call is {limit}, got {len(items)}",
            limit=limit,
            given=len(items),
        )


def validate_marketplace_id(marketplace_id: str) -> bool:
    """Validate marketplace ID existence.

    Args:
        marketplace_id: The marketplace ID to validate

    Returns:
        True if marketplace ID is valid
    """
    return marketplace_id in MARKETPLACES


def validate_seller_sku(sku: str) -> bool:
    """Validate seller SKU format.

    Args:
        sku: The seller SKU to validate

    Returns:
        True if SKU format is valid
    """
    if not isinstance(sku, str) or len(sku.strip()) == 0:
        return False

    return len(sku) <= 40


def validate_item_condition(condition: str) -> bool:
    """Validate the item condition filter of the pricing calls.

    An empty string means "all conditions" and is accepted.
    """
    return condition == "" or condition in ITEM_CONDITIONS


def validate_recommendation_category(category: str) -> bool:
    return category in RECOMMENDATION_CATEGORIES


def validate_fulfillment_latency(latency: Any) -> bool:
    """Validate a fulfillment latency (days to ship) for inventory feeds."""
    return isinstance(latency, int) and not isinstance(latency, bool) and 1 <= latency <= 30


def validate_quantity(quantity: Any) -> bool:
    return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity >= 0


def validate_order_status(status: str) -> bool:
    return status in ORDER_STATUSES


def validate_fulfillment_channel(channel: str) -> bool:
    """Validate a fulfillment channel (AFN = Amazon, MFN = merchant)."""
    return channel in FULFILLMENT_CHANNELS


def validate_listing_product(product: Any) -> tuple[bool, list[str]]:
    """Validate a flat-file listing row.

    Args:
        product: ListingProduct to check

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []

    if not validate_seller_sku(product.sku):
        errors.append("sku: should be between 1 and 40 characters")

    whole, dot, decimals = product.normalized_price.partition(".")
    if not dot or "." in decimals or not whole.isdigit() or not decimals.isdigit():
        errors.append("price: looks wrong")
    elif len(whole) > 18:
        errors.append("price: too high")
    elif len(decimals) > 2:
        errors.append("price: too many decimals")

    expected_length = PRODUCT_ID_LENGTHS.get(product.product_id_type)
    if expected_length is None:
        errors.append(f"product_id_type: not one of {','.join(PRODUCT_ID_LENGTHS)}")
    elif len(str(product.product_id)) != expected_length:
        errors.append(f"product_id: {product.product_id_type} should be {expected_length} characters long")

    if product.condition_type not in LISTING_CONDITIONS:
        errors.append(f"condition_type: not one of {','.join(LISTING_CONDITIONS)}")
    elif product.condition_type != "New":
        note_length = len(product.condition_note or "")
        if note_length < 1:
            errors.append("condition_note: required when condition_type is not New")
        elif note_length > MAX_CONDITION_NOTE_LENGTH:
            errors.append(f"condition_note: should not exceed {MAX_CONDITION_NOTE_LENGTH} characters")

    for field_name in ("sku", "price", "product_id", "condition_note"):
        if not _encodable(getattr(product, field_name)):
            errors.append(f"{field_name}: contains characters outside {FLAT_FILE_ENCODING.upper()}")

    return len(errors) == 0, errors


def _encodable(value: Any) -> bool:
    try:
        str(value).encode(FLAT_FILE_ENCODING)
    except UnicodeEncodeError:
        return False
    return True
