"""Sellers and Recommendations API clients for Amazon MWS."""

from typing import Any, Optional

from ..normalize import as_sequence, dig
from ..utils.validators import validate_recommendation_category
from .base import BaseAPIClient


class SellersAPIClient(BaseAPIClient):
    """Client for seller account information."""

    def list_marketplace_participations(self) -> dict[str, list[Any]]:
        """Return the marketplaces the seller can sell in and its participations."""
        response = self._make_request("ListMarketplaceParticipations")
        return {
            "Participations": as_sequence(dig(response, "ListParticipations", "Participation")),
            "Marketplaces": as_sequence(dig(response, "ListMarketplaces", "Marketplace")),
        }


class RecommendationsAPIClient(BaseAPIClient):
    """Client for selling recommendations."""

    def list_recommendations(self, category: Optional[str] = None) -> Any:
        """Return active recommendations, for one category or all of them.

        Args:
            category: One of Inventory, Selection, Pricing, Fulfillment,
                ListingQuality, GlobalSelling, Advertising
        """
        params = {}
        if category:
            if not validate_recommendation_category(category):
                raise ValueError(f"Invalid recommendation category: {category}")
            params["RecommendationCategory"] = category

        response = self._make_request("ListRecommendations", params)
        return response or None
