"""Tests for the endpoint catalog."""

import pytest

from amazon_mws.endpoints import ENDPOINTS, EndpointDescriptor, lookup
from amazon_mws.exceptions import UnknownOperation


class TestEndpointCatalog:
    """Test operation lookups."""

    def test_list_orders(self):
        endpoint = lookup("ListOrders")

        assert isinstance(endpoint, EndpointDescriptor)
        assert endpoint.method == "POST"
        assert endpoint.path == "/Orders/2013-09-01"
        assert endpoint.version == "2013-09-01"
        assert endpoint.envelope_key == "ListOrdersResult"

    @pytest.mark.parametrize(
        "operation, path, version",
        [
            ("GetMyPriceForSKU", "/Products/2011-10-01", "2011-10-01"),
            ("SubmitFeed", "/", "2009-01-01"),
            ("GetReport", "/", "2009-01-01"),
            ("ListInventorySupply", "/FulfillmentInventory/2010-10-01", "2010-10-01"),
            ("ListMarketplaceParticipations", "/Sellers/2011-07-01", "2011-07-01"),
            ("ListRecommendations", "/Recommendations/2013-04-01", "2013-04-01"),
        ],
    )
    def test_paths_and_versions(self, operation, path, version):
        endpoint = lookup(operation)
        assert (endpoint.path, endpoint.version) == (path, version)

    @pytest.mark.parametrize(
        "operation, envelope_key",
        [
            ("GetMyPriceForSKU", "GetMyPriceForSKUResult"),
            ("SubmitFeed", "SubmitFeedResult"),
            ("ListInventorySupply", "ListInventorySupplyResult"),
            ("ListRecommendations", "ListRecommendationsResult"),
        ],
    )
    def test_envelope_keys(self, operation, envelope_key):
        assert lookup(operation).envelope_key == envelope_key

    def test_envelope_key_is_required(self):
        with pytest.raises(TypeError):
            EndpointDescriptor("Custom", "POST", "/", "2009-01-01")

    def test_raw_payload_operations_have_no_envelope(self):
        assert lookup("GetReport").envelope_key is None
        assert lookup("GetFeedSubmissionResult").envelope_key is None

    def test_marketplace_parameter_shapes(self):
        assert lookup("GetCompetitivePricingForASIN").marketplace_params == ("MarketplaceId",)
        assert lookup("ListOrders").marketplace_params == ("MarketplaceId.Id.1",)
        assert lookup("SubmitFeed").marketplace_params == ("MarketplaceIdList.Id.1",)
        assert lookup("GetOrder").marketplace_params == ("MarketplaceId", "MarketplaceId.Id.1")

    def test_every_descriptor_is_keyed_by_name(self):
        for name, endpoint in ENDPOINTS.items():
            assert endpoint.name == name
            assert endpoint.method == "POST"

    def test_unknown_operation(self):
        with pytest.raises(UnknownOperation) as exc_info:
            lookup("DoesNotExist")

        assert exc_info.value.operation == "DoesNotExist"
        assert str(exc_info.value) == "Unknown MWS operation: DoesNotExist"

    def test_unknown_operation_is_a_key_error(self):
        with pytest.raises(KeyError):
            lookup("DoesNotExist")
