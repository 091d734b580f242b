"""Tests for AWS signature version 2 signing."""

import pytest

from amazon_mws.exceptions import ConfigurationError
from amazon_mws.signing import (
    RequestSigner,
    canonical_query,
    canonical_string,
    content_md5,
    rfc3986_encode,
)


class TestEncoding:
    """Test RFC 3986 percent-encoding."""

    def test_unreserved_characters_are_kept(self):
        assert rfc3986_encode("AZaz09-_.~") == "AZaz09-_.~"

    def test_reserved_characters_are_encoded(self):
        assert rfc3986_encode("a b") == "a%20b"
        assert rfc3986_encode("*") == "%2A"
        assert rfc3986_encode("+/=") == "%2B%2F%3D"
        assert rfc3986_encode("2020-01-01T00:00:00.000Z") == "2020-01-01T00%3A00%3A00.000Z"

    def test_non_ascii_is_utf8_encoded(self):
        assert rfc3986_encode("é") == "%C3%A9"

    def test_canonical_query_is_sorted_by_key(self):
        query = canonical_query({"b": "2", "A": "1", "a": "3"})
        assert query == "A=1&a=3&b=2"

    def test_canonical_string(self):
        text = canonical_string("post", "MWS.AmazonServices.com", "/Orders/2013-09-01", {"Action": "ListOrders"})
        assert text == "POST\nmws.amazonservices.com\n/Orders/2013-09-01\nAction=ListOrders"


class TestRequestSigner:
    """Test HmacSHA256 signatures."""

    @pytest.fixture
    def signer(self):
        return RequestSigner("secret")

    def test_known_signature(self, signer):
        signature = signer.sign(
            "GET",
            "mws.amazonservices.com",
            "/Orders/2013-09-01",
            {"Action": "ListOrders", "Version": "2013-09-01"},
        )
        assert signature == "ItcgEm/mP7C9suAryW/Je3477BM/KgeUNRXPH0JbSJI="

    def test_encoded_values_are_signed(self, signer):
        signature = signer.sign("POST", "mws-eu.amazonservices.com", "/", {"B": "*~", "A": "a b"})
        assert signature == "KGwwD0kjM6nO3P+ELTHjwZRnL6ZJMstX1Y6B+JyRAf0="

    def test_parameter_order_does_not_matter(self, signer):
        first = signer.sign("POST", "host", "/", {"A": "1", "B": "2", "C": "3"})
        second = signer.sign("POST", "host", "/", {"C": "3", "A": "1", "B": "2"})
        assert first == second

    def test_any_change_changes_the_signature(self, signer):
        base = signer.sign("POST", "host", "/", {"A": "1"})
        assert signer.sign("POST", "host", "/", {"A": "2"}) != base
        assert signer.sign("GET", "host", "/", {"A": "1"}) != base
        assert signer.sign("POST", "other", "/", {"A": "1"}) != base
        assert signer.sign("POST", "host", "/x", {"A": "1"}) != base
        assert RequestSigner("other").sign("POST", "host", "/", {"A": "1"}) != base

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ConfigurationError):
            RequestSigner("")


def test_content_md5():
    assert content_md5(b"<a/>") == "8BnumgOXiv+fm3jQ3fPttw=="
    assert content_md5("<a/>") == content_md5(b"<a/>")
