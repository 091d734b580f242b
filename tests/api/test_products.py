"""Tests for the Products API client."""

import pytest

from amazon_mws.exceptions import CallConstraintViolation
from conftest import make_response, mws_response

NS = 'xmlns="http://mws.amazonservices.com/schema/Products/2011-10-01"'


def response(operation, *results):
    """Several ``<operation>Result`` siblings, as MWS returns for batch calls."""
    return f'<?xml version="1.0"?><{operation}Response {NS}>{"".join(results)}</{operation}Response>'


def competitive_price_result(asin, amount):
    return (
        f'<GetCompetitivePricingForASINResult ASIN="{asin}" status="Success"><Product>'
        f"<Identifiers><MarketplaceASIN><MarketplaceId>A1F83G8C2ARO7P</MarketplaceId><ASIN>{asin}</ASIN>"
        "</MarketplaceASIN></Identifiers><CompetitivePricing><CompetitivePrices>"
        '<CompetitivePrice belongsToRequester="false" condition="New" subcondition="New">'
        f"<CompetitivePriceId>1</CompetitivePriceId><Price><LandedPrice><CurrencyCode>GBP</CurrencyCode>"
        f"<Amount>{amount}</Amount></LandedPrice></Price></CompetitivePrice>"
        "</CompetitivePrices></CompetitivePricing></Product></GetCompetitivePricingForASINResult>"
    )


class TestCompetitivePricing:
    """Test competitive pricing lookups."""

    def test_by_asin(self, client, session):
        session.queue(
            make_response(
                response(
                    "GetCompetitivePricingForASIN",
                    competitive_price_result("B001", "10.00"),
                    competitive_price_result("B002", "12.50"),
                )
            )
        )

        prices = client.get_competitive_pricing_for_asin(["B001", "B002"])

        assert prices["B001"]["LandedPrice"]["Amount"] == "10.00"
        assert prices["B002"]["LandedPrice"]["Amount"] == "12.50"

        query = session.query()
        assert query["ASINList.ASIN.1"] == "B001"
        assert query["ASINList.ASIN.2"] == "B002"
        assert query["MarketplaceId"] == "A1F83G8C2ARO7P"
        assert "MarketplaceId.Id.1" not in query

    def test_single_result(self, client, session):
        session.queue(
            make_response(response("GetCompetitivePricingForASIN", competitive_price_result("B001", "10.00")))
        )

        assert list(client.get_competitive_pricing_for_asin(["B001"])) == ["B001"]

    def test_too_many_asins(self, client, session):
        asins = [f"B{n:09d}" for n in range(21)]

        with pytest.raises(CallConstraintViolation) as exc_info:
            client.get_competitive_pricing_for_asin(asins)

        assert exc_info.value.limit == 20
        assert exc_info.value.given == 21
        assert "Maximum amount of ASIN's for this call is 20" in str(exc_info.value)
        assert session.calls == []

    def test_by_sku_includes_ranks(self, client, session):
        result = (
            '<GetCompetitivePricingForSKUResult SellerSKU="SKU-1" status="Success"><Product>'
            "<Identifiers><SKUIdentifier><SellerSKU>SKU-1</SellerSKU></SKUIdentifier></Identifiers>"
            "<CompetitivePricing><CompetitivePrices><CompetitivePrice><Price>"
            "<ListingPrice><Amount>9.99</Amount></ListingPrice></Price></CompetitivePrice>"
            "</CompetitivePrices></CompetitivePricing>"
            "<SalesRankings><SalesRank><ProductCategoryId>toys</ProductCategoryId><Rank>7</Rank></SalesRank>"
            "</SalesRankings></Product></GetCompetitivePricingForSKUResult>"
        )
        session.queue(make_response(response("GetCompetitivePricingForSKU", result)))

        prices = client.get_competitive_pricing_for_sku(["SKU-1"])

        assert prices["SKU-1"]["Price"] == {"ListingPrice": {"Amount": "9.99"}}
        assert prices["SKU-1"]["Rank"] == [{"ProductCategoryId": "toys", "Rank": "7"}]


class TestMyPrice:
    """Test GetMyPriceForSKU."""

    def test_success_and_failure(self, client, session):
        ok = (
            '<GetMyPriceForSKUResult SellerSKU="SKU-1" status="Success"><Product><Offers>'
            "<Offer><BuyingPrice><LandedPrice><Amount>5.00</Amount></LandedPrice></BuyingPrice></Offer>"
            "</Offers></Product></GetMyPriceForSKUResult>"
        )
        failed = (
            '<GetMyPriceForSKUResult SellerSKU="SKU-2" status="ClientError">'
            "<Error><Code>InvalidParameterValue</Code></Error></GetMyPriceForSKUResult>"
        )
        session.queue(make_response(response("GetMyPriceForSKU", ok, failed)))

        offers = client.get_my_price_for_sku(["SKU-1", "SKU-2"])

        assert offers["SKU-1"] == [{"BuyingPrice": {"LandedPrice": {"Amount": "5.00"}}}]
        assert offers["SKU-2"] is False
        assert "ItemCondition" not in session.query()

    def test_item_condition(self, client, session):
        session.queue(make_response(response("GetMyPriceForSKU")))

        client.get_my_price_for_sku(["SKU-1"], item_condition="Used")

        assert session.query()["ItemCondition"] == "Used"

    def test_invalid_item_condition(self, client, session):
        with pytest.raises(ValueError, match="Invalid item condition"):
            client.get_my_price_for_sku(["SKU-1"], item_condition="Broken")
        assert session.calls == []


class TestCategories:
    def test_categories_for_sku(self, client, session):
        result = (
            "<GetProductCategoriesForSKUResult><Self><ProductCategoryId>1</ProductCategoryId>"
            "<ProductCategoryName>Toys</ProductCategoryName></Self></GetProductCategoriesForSKUResult>"
        )
        session.queue(make_response(response("GetProductCategoriesForSKU", result)))

        assert client.get_product_categories_for_sku("SKU-1") == [
            {"ProductCategoryId": "1", "ProductCategoryName": "Toys"}
        ]

    def test_no_categories(self, client, session):
        session.queue(make_response(response("GetProductCategoriesForASIN", "<GetProductCategoriesForASINResult/>")))

        assert client.get_product_categories_for_asin("B001") is None


MATCHING_PRODUCT = (
    '<GetMatchingProductForIdResult Id="B001" IdType="ASIN" status="Success">'
    '<Products xmlns:ns2="http://mws.amazonservices.com/schema/Products/2011-10-01/default.xsd"><Product>'
    "<Identifiers><MarketplaceASIN><MarketplaceId>A1F83G8C2ARO7P</MarketplaceId><ASIN>B001</ASIN>"
    "</MarketplaceASIN></Identifiers><AttributeSets>"
    '<ns2:ItemAttributes xml:lang="en-GB"><ns2:Title>Wooden Train</ns2:Title>'
    "<ns2:Feature>Painted</ns2:Feature><ns2:Feature>Ages 3+</ns2:Feature>"
    '<ns2:PackageDimensions><ns2:Height Units="inches">1.5</ns2:Height>'
    '<ns2:Weight Units="pounds">0.75</ns2:Weight></ns2:PackageDimensions>'
    "<ns2:SmallImage><ns2:URL>http://images.example/train._SL75_.jpg</ns2:URL></ns2:SmallImage>"
    "</ns2:ItemAttributes></AttributeSets>"
    "<Relationships><VariationParent><Identifiers><MarketplaceASIN><ASIN>B000</ASIN></MarketplaceASIN>"
    "</Identifiers></VariationParent></Relationships>"
    "<SalesRankings><SalesRank><ProductCategoryId>toys</ProductCategoryId><Rank>3</Rank></SalesRank>"
    "</SalesRankings></Product></Products></GetMatchingProductForIdResult>"
)

UNMATCHED_PRODUCT = (
    '<GetMatchingProductForIdResult Id="B999" IdType="ASIN" status="ClientError">'
    "<Error><Code>InvalidParameterValue</Code><Message>Invalid ASIN</Message></Error>"
    "</GetMatchingProductForIdResult>"
)


class TestMatchingProducts:
    """Test GetMatchingProductForId and ListMatchingProducts."""

    def test_found_and_not_found(self, client, session):
        session.queue(make_response(response("GetMatchingProductForId", MATCHING_PRODUCT, UNMATCHED_PRODUCT)))

        result = client.get_matching_product_for_id(["B001", "B999", "B001"])

        assert result.not_found == ["B999"]
        [product] = result.found["B001"]
        assert product["ASIN"] == "B001"
        assert product["Title"] == "Wooden Train"
        assert product["Language"] == "en-GB"
        assert product["Feature"] == ["Painted", "Ages 3+"]
        assert product["PackageDimensions"] == {"Height": 1.5, "Weight": 0.75}
        assert product["medium_image"] == "http://images.example/train._SL75_.jpg"
        assert product["small_image"] == "http://images.example/train._SL50_.jpg"
        assert product["large_image"] == "http://images.example/train.jpg"
        assert product["Parentage"] == "child"
        assert product["Relationships"] == "B000"
        assert product["SalesRank"] == [{"ProductCategoryId": "toys", "Rank": "3"}]

        query = session.query()
        assert query["IdType"] == "ASIN"
        assert query["IdList.Id.1"] == "B001"
        assert query["IdList.Id.2"] == "B999"
        assert "IdList.Id.3" not in query

    def test_too_many_ids(self, client, session):
        with pytest.raises(CallConstraintViolation):
            client.get_matching_product_for_id(["1", "2", "3", "4", "5", "6"])
        assert session.calls == []

    def test_duplicates_count_once(self, client, session):
        session.queue(make_response(response("GetMatchingProductForId", UNMATCHED_PRODUCT)))

        client.get_matching_product_for_id(["B999"] * 8)

        assert len(session.calls) == 1

    def test_list_matching_products(self, client, session):
        result = (
            "<ListMatchingProductsResult><Products><Product><Identifiers><MarketplaceASIN><ASIN>B001</ASIN>"
            "</MarketplaceASIN></Identifiers></Product></Products></ListMatchingProductsResult>"
        )
        session.queue(make_response(response("ListMatchingProducts", result)))

        products = client.list_matching_products("wooden train", query_context_id="Toys")

        assert len(products) == 1
        query = session.query()
        assert query["Query"] == "wooden train"
        assert query["QueryContextId"] == "Toys"
        assert "%20" in session.calls[0]["url"]

    def test_missing_query(self, client, session):
        with pytest.raises(ValueError, match="Missing query"):
            client.list_matching_products("  ")
        assert session.calls == []
