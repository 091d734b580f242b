"""AWS signature version 2 request signing for MWS."""

import base64
import hashlib
import hmac
from typing import Any, Mapping, Union
from urllib.parse import quote

from .exceptions import ConfigurationError

# RFC 3986 unreserved characters besides alphanumerics
_SAFE_CHARS = "-_.~"


def rfc3986_encode(value: Any) -> str:
    """Percent-encode everything outside ``A-Za-z0-9-_.~`` (space -> %20)."""
    return quote(str(value), safe=_SAFE_CHARS)


def canonical_query(params: Mapping[str, Any]) -> str:
    """Sort parameters by key and join them as an encoded query string."""
    return "&".join(
        f"{rfc3986_encode(key)}={rfc3986_encode(params[key])}"
        for key in sorted(params, key=lambda k: str(k).encode("utf-8"))
    )


def canonical_string(method: str, host: str, path: str, params: Mapping[str, Any]) -> str:
    """Return the newline-joined text the signature is computed over."""
    return "\n".join([method.upper(), host.lower(), path, canonical_query(params)])


def content_md5(body: Union[str, bytes], encoding: str = "utf-8") -> str:
    """Base64 MD5 digest used for the Content-MD5 header of feed uploads."""
    if isinstance(body, str):
        body = body.encode(encoding)
    return base64.b64encode(hashlib.md5(body).digest()).decode("ascii")


class RequestSigner:
    """Computes HmacSHA256 signatures keyed with the secret access key."""

    def __init__(self, secret_key: str) -> None:
        if not secret_key:
            raise ConfigurationError("Secret access key is required for signing")
        self._key = secret_key.encode("utf-8")

    def sign(self, method: str, host: str, path: str, params: Mapping[str, Any]) -> str:
        """Sign a request.

        Args:
            method: HTTP method
            host: Region host, without scheme
            path: Versioned endpoint path
            params: Query parameters, ``Signature`` excluded

        Returns:
            Base64 encoded HMAC-SHA256 digest of the canonical string
        """
        message = canonical_string(method, host, path, params).encode("utf-8")
        digest = hmac.new(self._key, message, hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")
