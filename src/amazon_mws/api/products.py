"""Products API client for Amazon MWS pricing and catalog lookups."""

import logging
from typing import Any, Optional, Sequence, Union

from ..codec import from_xml, strip_namespaces
from ..constants import MAX_MATCHING_PRODUCT_IDS, MAX_PRICING_IDS
from ..exceptions import XMLDecodeError
from ..models import MatchingProducts
from ..normalize import as_sequence, dig, text_of
from ..utils.params import enumerate_param
from ..utils.validators import check_max_items, validate_item_condition
from .base import BaseAPIClient

logger = logging.getLogger(__name__)


def _require_condition(item_condition: str) -> None:
    if not validate_item_condition(item_condition):
        raise ValueError(f"Invalid item condition: {item_condition}")


def _first(value: Any) -> Any:
    items = as_sequence(value)
    return items[0] if items else None


class ProductsAPIClient(BaseAPIClient):
    """Client for the MWS Products section (2011-10-01)."""

    def get_competitive_pricing_for_asin(self, asins: Sequence[str]) -> dict[str, Any]:
        """Return the current competitive price of up to 20 products, by ASIN.

        Args:
            asins: ASIN values

        Returns:
            Dict of ASIN -> Price structure; products without a price are left out

        Raises:
            CallConstraintViolation: If more than 20 ASINs are given
        """
        check_max_items(asins, MAX_PRICING_IDS, "ASIN's")

        response = self._make_request(
            "GetCompetitivePricingForASIN", enumerate_param("ASINList.ASIN", asins)
        )

        prices = {}
        for result in as_sequence(response or None):
            product = dig(result, "Product")
            competitive_price = _first(dig(product, "CompetitivePricing", "CompetitivePrices", "CompetitivePrice"))
            price = dig(competitive_price, "Price")
            if price:
                prices[dig(product, "Identifiers", "MarketplaceASIN", "ASIN")] = price

        return prices

    def get_competitive_pricing_for_sku(self, skus: Sequence[str]) -> dict[str, dict[str, Any]]:
        """Return the current competitive price and sales ranks of up to 20 SKUs.

        Returns:
            Dict of SKU -> {"Price": ..., "Rank": [sales ranks]}

        Raises:
            CallConstraintViolation: If more than 20 SKUs are given
        """
        check_max_items(skus, MAX_PRICING_IDS, "SKU's")

        response = self._make_request(
            "GetCompetitivePricingForSKU", enumerate_param("SellerSKUList.SellerSKU", skus)
        )

        prices = {}
        for result in as_sequence(response or None):
            product = dig(result, "Product")
            competitive_price = _first(dig(product, "CompetitivePricing", "CompetitivePrices", "CompetitivePrice"))
            price = dig(competitive_price, "Price")
            if not price:
                continue

            sku = dig(product, "Identifiers", "SKUIdentifier", "SellerSKU")
            prices[sku] = {
                "Price": price,
                "Rank": as_sequence(dig(product, "SalesRankings", "SalesRank")),
            }

        return prices

    def get_lowest_priced_offers_for_asin(self, asin: str, item_condition: str = "New") -> Any:
        """Return the lowest priced offers for a single product, by ASIN.

        Args:
            asin: ASIN value
            item_condition: One of New, Used, Collectible, Refurbished, Club
        """
        _require_condition(item_condition)
        return self._make_request(
            "GetLowestPricedOffersForASIN",
            {"ASIN": asin, "ItemCondition": item_condition},
        )

    def get_my_price_for_sku(
        self, skus: Sequence[str], item_condition: str = ""
    ) -> dict[str, Union[list[Any], bool]]:
        """Return pricing information for your own offers, by SKU.

        Returns:
            Dict of SKU -> list of offers, or False when the lookup failed

        Raises:
            CallConstraintViolation: If more than 20 SKUs are given
        """
        check_max_items(skus, MAX_PRICING_IDS, "SKU's")
        _require_condition(item_condition)

        params: dict[str, Any] = {"ItemCondition": item_condition}
        params.update(enumerate_param("SellerSKUList.SellerSKU", skus))

        response = self._make_request("GetMyPriceForSKU", params)
        return self._offers_by(response, "SellerSKU")

    def get_my_price_for_asin(
        self, asins: Sequence[str], item_condition: str = ""
    ) -> dict[str, Union[list[Any], bool]]:
        """Return pricing information for your own offers, by ASIN.

        Returns:
            Dict of ASIN -> list of offers, or False when the lookup failed

        Raises:
            CallConstraintViolation: If more than 20 ASINs are given
        """
        check_max_items(asins, MAX_PRICING_IDS, "ASIN's")
        _require_condition(item_condition)

        params: dict[str, Any] = {"ItemCondition": item_condition}
        params.update(enumerate_param("ASINList.ASIN", asins))

        response = self._make_request("GetMyPriceForASIN", params)
        return self._offers_by(response, "ASIN")

    @staticmethod
    def _offers_by(response: Any, id_attribute: str) -> dict[str, Union[list[Any], bool]]:
        offers: dict[str, Union[list[Any], bool]] = {}
        for result in as_sequence(response or None):
            attributes = dig(result, "@attributes") or {}
            identifier = attributes.get(id_attribute)
            if attributes.get("status") != "Success":
                offers[identifier] = False
            else:
                offers[identifier] = as_sequence(dig(result, "Product", "Offers", "Offer"))
        return offers

    def get_lowest_offer_listings_for_asin(
        self, asins: Sequence[str], item_condition: str = ""
    ) -> dict[str, Union[list[Any], bool]]:
        """Return the lowest-price active offer listings for up to 20 products.

        Returns:
            Dict of ASIN -> list of listings, or False when none were returned

        Raises:
            CallConstraintViolation: If more than 20 ASINs are given
        """
        check_max_items(asins, MAX_PRICING_IDS, "ASIN's")
        _require_condition(item_condition)

        params: dict[str, Any] = {"ItemCondition": item_condition}
        params.update(enumerate_param("ASINList.ASIN", asins))

        response = self._make_request("GetLowestOfferListingsForASIN", params)

        listings: dict[str, Union[list[Any], bool]] = {}
        for result in as_sequence(response or None):
            product = dig(result, "Product")
            asin = dig(product, "Identifiers", "MarketplaceASIN", "ASIN")
            found = as_sequence(dig(product, "LowestOfferListings", "LowestOfferListing"))
            listings[asin] = found or False

        return listings

    def get_product_categories_for_sku(self, sku: str) -> Optional[list[Any]]:
        """Return the parent categories of a product by SKU, None when not found."""
        response = self._make_request("GetProductCategoriesForSKU", {"SellerSKU": sku})
        return as_sequence(dig(response, "Self")) or None

    def get_product_categories_for_asin(self, asin: str) -> Optional[list[Any]]:
        """Return the parent categories of a product by ASIN, None when not found."""
        response = self._make_request("GetProductCategoriesForASIN", {"ASIN": asin})
        return as_sequence(dig(response, "Self")) or None

    def get_matching_product_for_id(self, ids: Sequence[str], id_type: str = "ASIN") -> MatchingProducts:
        """Return products and their attributes for up to 5 identifiers.

        Args:
            ids: ASIN, GCID, SellerSKU, UPC, EAN, ISBN or JAN values; duplicates are dropped
            id_type: Name of the identifier type

        Raises:
            CallConstraintViolation: If more than 5 distinct identifiers are given
        """
        unique_ids = list(dict.fromkeys(ids))
        check_max_items(unique_ids, MAX_MATCHING_PRODUCT_IDS, "id's")

        params: dict[str, Any] = {"IdType": id_type}
        params.update(enumerate_param("IdList.Id", unique_ids))

        raw = self._make_raw_request("GetMatchingProductForId", params)
        result = MatchingProducts()

        try:
            decoded = from_xml(strip_namespaces(raw))
        except XMLDecodeError:
            logger.warning("GetMatchingProductForId returned a payload that is not XML")
            return result

        for item in as_sequence(dig(decoded, "GetMatchingProductForIdResult")):
            attributes = dig(item, "@attributes") or {}
            identifier = attributes.get("Id")

            if attributes.get("status") != "Success":
                result.not_found.append(identifier)
                continue

            for product in as_sequence(dig(item, "Products", "Product")):
                result.found.setdefault(identifier, []).append(self._summarize_product(product))

        return result

    @staticmethod
    def _summarize_product(product: dict[str, Any]) -> dict[str, Any]:
        summary: dict[str, Any] = {}

        asin = dig(product, "Identifiers", "MarketplaceASIN", "ASIN")
        if asin:
            summary["ASIN"] = asin

        attributes = _first(dig(product, "AttributeSets", "ItemAttributes")) or {}

        for key, value in attributes.items():
            if isinstance(value, str):
                summary[key] = value

        if "Feature" in attributes:
            summary["Feature"] = as_sequence(attributes["Feature"])

        if isinstance(attributes.get("PackageDimensions"), dict):
            dimensions = {}
            for name, value in attributes["PackageDimensions"].items():
                try:
                    dimensions[name] = float(text_of(value))
                except (TypeError, ValueError):
                    continue
            summary["PackageDimensions"] = dimensions

        if "ListPrice" in attributes:
            summary["ListPrice"] = attributes["ListPrice"]

        image = dig(attributes, "SmallImage", "URL")
        if image:
            summary["medium_image"] = image
            summary["small_image"] = image.replace("._SL75_", "._SL50_")
            summary["large_image"] = image.replace("._SL75_", "")

        parent_asin = dig(product, "Relationships", "VariationParent", "Identifiers", "MarketplaceASIN", "ASIN")
        if parent_asin:
            summary["Parentage"] = "child"
            summary["Relationships"] = parent_asin

        if dig(product, "Relationships", "VariationChild") is not None:
            summary["Parentage"] = "parent"

        sales_rank = dig(product, "SalesRankings", "SalesRank")
        if sales_rank is not None:
            summary["SalesRank"] = as_sequence(sales_rank)

        return summary

    def list_matching_products(self, query: str, query_context_id: str = "") -> list[Any]:
        """Search products by free text, ordered by relevancy.

        Args:
            query: The open text query
            query_context_id: Optional search context, e.g. "Books"

        Returns:
            List of matching products

        Raises:
            ValueError: If the query is empty
        """
        if not query or not query.strip():
            raise ValueError("Missing query")

        raw = self._make_raw_request(
            "ListMatchingProducts",
            {"Query": query, "QueryContextId": query_context_id},
        )

        try:
            decoded = from_xml(strip_namespaces(raw))
        except XMLDecodeError:
            logger.warning("ListMatchingProducts returned a payload that is not XML")
            return []

        return as_sequence(dig(decoded, "ListMatchingProductsResult", "Products", "Product"))
