"""Fulfillment Inventory API client for Amazon MWS."""

from typing import Any, Sequence

from ..constants import MAX_INVENTORY_SKUS
from ..normalize import as_sequence, dig
from ..utils.params import enumerate_param
from ..utils.validators import check_max_items
from .base import BaseAPIClient


class InventoryAPIClient(BaseAPIClient):
    """Client for Amazon-fulfilled inventory supply."""

    def list_inventory_supply(self, skus: Sequence[str]) -> list[dict[str, Any]]:
        """Return the fulfillment inventory supply of up to 50 SKUs.

        Raises:
            CallConstraintViolation: If more than 50 SKUs are given
        """
        check_max_items(skus, MAX_INVENTORY_SKUS, "SKU's")

        response = self._make_request("ListInventorySupply", enumerate_param("SellerSkus.member", skus))
        return as_sequence(dig(response, "InventorySupplyList", "member"))
