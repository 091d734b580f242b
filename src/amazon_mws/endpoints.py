"""Endpoint catalog binding MWS operation names to method, path and version."""

from dataclasses import dataclass
from typing import Optional

from .exceptions import UnknownOperation

# Marketplace query keys injected by default
DEFAULT_MARKETPLACE_PARAMS = ("MarketplaceId", "MarketplaceId.Id.1")


@dataclass(frozen=True)
class EndpointDescriptor:
    """One remote operation.

    ``envelope_key`` is the key under which the decoded response carries the
    operation payload; ``None`` means the decoded root is the payload.
    ``marketplace_params`` lists the query keys that receive the configured
    marketplace id.
    """

    name: str
    method: str
    path: str
    version: str
    envelope_key: Optional[str]
    marketplace_params: tuple[str, ...] = DEFAULT_MARKETPLACE_PARAMS


def _endpoint(
    name: str,
    path: str,
    version: str,
    envelope_key: Optional[str],
    marketplace_params: tuple[str, ...] = DEFAULT_MARKETPLACE_PARAMS,
    method: str = "POST",
) -> EndpointDescriptor:
    return EndpointDescriptor(name, method, path, version, envelope_key, marketplace_params)


PRODUCTS_PATH, PRODUCTS_VERSION = "/Products/2011-10-01", "2011-10-01"
ORDERS_PATH, ORDERS_VERSION = "/Orders/2013-09-01", "2013-09-01"
INVENTORY_PATH, INVENTORY_VERSION = "/FulfillmentInventory/2010-10-01", "2010-10-01"
SELLERS_PATH, SELLERS_VERSION = "/Sellers/2011-07-01", "2011-07-01"
RECOMMENDATIONS_PATH, RECOMMENDATIONS_VERSION = "/Recommendations/2013-04-01", "2013-04-01"
FEEDS_PATH, FEEDS_VERSION = "/", "2009-01-01"
REPORTS_PATH, REPORTS_VERSION = "/", "2009-01-01"

_PRODUCTS_MARKETPLACE = ("MarketplaceId",)

ENDPOINTS: dict[str, EndpointDescriptor] = {
    endpoint.name: endpoint
    for endpoint in (
        # Products
        _endpoint("GetCompetitivePricingForASIN", PRODUCTS_PATH, PRODUCTS_VERSION, "GetCompetitivePricingForASINResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        _endpoint("GetCompetitivePricingForSKU", PRODUCTS_PATH, PRODUCTS_VERSION, "GetCompetitivePricingForSKUResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        _endpoint("GetLowestPricedOffersForASIN", PRODUCTS_PATH, PRODUCTS_VERSION, "GetLowestPricedOffersForASINResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        _endpoint("GetLowestOfferListingsForASIN", PRODUCTS_PATH, PRODUCTS_VERSION, "GetLowestOfferListingsForASINResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        _endpoint("GetMyPriceForSKU", PRODUCTS_PATH, PRODUCTS_VERSION, "GetMyPriceForSKUResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        _endpoint("GetMyPriceForASIN", PRODUCTS_PATH, PRODUCTS_VERSION, "GetMyPriceForASINResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        _endpoint("GetProductCategoriesForSKU", PRODUCTS_PATH, PRODUCTS_VERSION, "GetProductCategoriesForSKUResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        _endpoint("GetProductCategoriesForASIN", PRODUCTS_PATH, PRODUCTS_VERSION, "GetProductCategoriesForASINResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        _endpoint("GetMatchingProductForId", PRODUCTS_PATH, PRODUCTS_VERSION, "GetMatchingProductForIdResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        _endpoint("ListMatchingProducts", PRODUCTS_PATH, PRODUCTS_VERSION, "ListMatchingProductsResult",
                  marketplace_params=_PRODUCTS_MARKETPLACE),
        # Orders
        _endpoint("ListOrders", ORDERS_PATH, ORDERS_VERSION, "ListOrdersResult",
                  marketplace_params=("MarketplaceId.Id.1",)),
        _endpoint("ListOrdersByNextToken", ORDERS_PATH, ORDERS_VERSION, "ListOrdersByNextTokenResult"),
        _endpoint("GetOrder", ORDERS_PATH, ORDERS_VERSION, "GetOrderResult"),
        _endpoint("ListOrderItems", ORDERS_PATH, ORDERS_VERSION, "ListOrderItemsResult"),
        # Feeds
        _endpoint("SubmitFeed", FEEDS_PATH, FEEDS_VERSION, "SubmitFeedResult",
                  marketplace_params=("MarketplaceIdList.Id.1",)),
        _endpoint("GetFeedSubmissionList", FEEDS_PATH, FEEDS_VERSION, "GetFeedSubmissionListResult"),
        # The processing report is an AmazonEnvelope, not a *Result wrapper
        _endpoint("GetFeedSubmissionResult", FEEDS_PATH, FEEDS_VERSION, None),
        # Reports
        _endpoint("RequestReport", REPORTS_PATH, REPORTS_VERSION, "RequestReportResult",
                  marketplace_params=("MarketplaceIdList.Id.1",)),
        _endpoint("GetReportRequestList", REPORTS_PATH, REPORTS_VERSION, "GetReportRequestListResult"),
        _endpoint("GetReport", REPORTS_PATH, REPORTS_VERSION, None),
        _endpoint("GetReportList", REPORTS_PATH, REPORTS_VERSION, "GetReportListResult"),
        # Fulfillment inventory
        _endpoint("ListInventorySupply", INVENTORY_PATH, INVENTORY_VERSION, "ListInventorySupplyResult"),
        # Sellers
        _endpoint("ListMarketplaceParticipations", SELLERS_PATH, SELLERS_VERSION, "ListMarketplaceParticipationsResult"),
        # Recommendations
        _endpoint("ListRecommendations", RECOMMENDATIONS_PATH, RECOMMENDATIONS_VERSION, "ListRecommendationsResult"),
    )
}


def lookup(operation: str) -> EndpointDescriptor:
    """Return the descriptor for ``operation``.

    Raises:
        UnknownOperation: If the operation is not in the catalog
    """
    try:
        return ENDPOINTS[operation]
    except KeyError:
        raise UnknownOperation(operation) from None
