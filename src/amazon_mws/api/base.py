"""Request execution shared by every MWS API client."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union

import requests

from ..codec import from_xml
from ..config import MWSConfig
from ..constants import FEED_CONTENT_TYPE, SIGNATURE_METHOD, SIGNATURE_VERSION
from ..endpoints import EndpointDescriptor, lookup
from ..exceptions import RemoteError, TransportError, XMLDecodeError
from ..normalize import as_sequence
from ..signing import RequestSigner, canonical_query, content_md5, rfc3986_encode
from ..utils.params import format_timestamp, is_omitted

logger = logging.getLogger(__name__)

# Feed uploads authenticate as Merchant and carry MarketplaceIdList instead
FEED_EXCLUDED_PARAMS = ("MarketplaceId.Id.1", "SellerId")


@dataclass(frozen=True)
class SignedRequest:
    """A fully signed request, ready to hand to the transport."""

    method: str
    host: str
    path: str
    params: dict[str, Any]
    headers: dict[str, str]
    body: Optional[bytes]
    signature: str

    @property
    def query_string(self) -> str:
        return f"{canonical_query(self.params)}&Signature={rfc3986_encode(self.signature)}"

    @property
    def url(self) -> str:
        return f"https://{self.host}{self.path}?{self.query_string}"


def _charset(content_type: str) -> str:
    for part in content_type.split(";"):
        name, _, value = part.strip().partition("=")
        if name.lower() == "charset" and value:
            return value.strip('"')
    return "utf-8"


class RequestExecutor:
    """Signs, sends and decodes MWS requests.

    The HTTP transport is any object with a ``requests.Session``-compatible
    ``request`` method; a fresh session is created when none is given.
    """

    def __init__(self, config: MWSConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.signer = RequestSigner(config.secret_access_key)
        self.session = session if session is not None else requests.Session()

        # Common headers
        self.headers = {
            "Accept": "application/xml",
            "x-amazon-user-agent": config.user_agent,
        }

    def build_params(self, endpoint: EndpointDescriptor, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Merge caller parameters with the authentication fields.

        Caller values win over defaults. ``False``, ``None`` and ``""`` remove a
        parameter, which is how call sites opt out of the default marketplace
        scoping.
        """
        query = dict(params or {})

        defaults = {
            "Timestamp": format_timestamp(),
            "AWSAccessKeyId": self.config.access_key_id,
            "Action": endpoint.name,
            "SellerId": self.config.seller_id,
            "SignatureMethod": SIGNATURE_METHOD,
            "SignatureVersion": SIGNATURE_VERSION,
            "Version": endpoint.version,
        }
        for key in endpoint.marketplace_params:
            defaults[key] = self.config.marketplace_id
        if self.config.auth_token:
            defaults["MWSAuthToken"] = self.config.auth_token

        for key, value in defaults.items():
            query.setdefault(key, value)

        return {key: value for key, value in query.items() if not is_omitted(value)}

    def prepare(
        self,
        operation: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[Union[str, bytes]] = None,
        content_type: str = FEED_CONTENT_TYPE,
    ) -> SignedRequest:
        """Build and sign the request for ``operation``.

        Raises:
            UnknownOperation: If the operation is not in the catalog
        """
        endpoint = lookup(operation)
        query = self.build_params(endpoint, params)
        headers = dict(self.headers)

        payload = body.encode(_charset(content_type)) if isinstance(body, str) else body

        if endpoint.name == "SubmitFeed":
            payload = payload or b""
            headers["Content-MD5"] = content_md5(payload)
            headers["Content-Type"] = content_type
            for key in FEED_EXCLUDED_PARAMS:
                query.pop(key, None)

        query = dict(sorted(query.items(), key=lambda item: item[0].encode("utf-8")))
        host = self.config.region_host
        signature = self.signer.sign(endpoint.method, host, endpoint.path, query)

        return SignedRequest(
            method=endpoint.method,
            host=host,
            path=endpoint.path,
            params=query,
            headers=headers,
            body=payload,
            signature=signature,
        )

    def send(self, request: SignedRequest) -> requests.Response:
        """Perform the HTTP call.

        Raises:
            RemoteError: For non-2xx responses
            TransportError: When the transport fails before a response arrives
        """
        request_id = str(uuid.uuid4())
        start_time = datetime.now()
        action = request.params.get("Action")

        logger.info(f"Request {request_id}: Starting {request.method} {request.path} Action={action}")

        try:
            response = self.session.request(
                method=request.method,
                url=request.url,
                data=request.body,
                headers=request.headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.error(f"Request {request_id}: Transport error in {duration_ms}ms: {e}")
            raise TransportError(f"{action} request failed: {e}") from e

        duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)

        if not 200 <= response.status_code < 300:
            error = self._remote_error(response)
            logger.error(
                f"Request {request_id}: HTTP error in {duration_ms}ms, "
                f"status={response.status_code}, code={error.error_code}"
            )
            raise error

        logger.info(f"Request {request_id}: Success in {duration_ms}ms, status={response.status_code}")
        return response

    def execute_raw(
        self,
        operation: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[Union[str, bytes]] = None,
        content_type: str = FEED_CONTENT_TYPE,
    ) -> str:
        """Execute ``operation`` and return the response body untouched."""
        return self.send(self.prepare(operation, params, body, content_type)).text

    def execute_decoded(
        self,
        operation: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[Union[str, bytes]] = None,
        content_type: str = FEED_CONTENT_TYPE,
    ) -> Any:
        """Execute ``operation`` and unwrap its response envelope.

        XML responses are decoded and the value under the operation's envelope
        key is returned (the decoded root when the operation has none). Other
        content types, such as tab-delimited reports, come back as text.
        """
        endpoint = lookup(operation)
        response = self.send(self.prepare(operation, params, body, content_type))

        if "xml" not in response.headers.get("Content-Type", "").lower():
            return response.text

        try:
            decoded = from_xml(response.content)
        except XMLDecodeError:
            logger.warning(f"{operation}: response is not well-formed XML, treating it as empty")
            return {}

        if endpoint.envelope_key is None:
            return decoded if decoded is not None else {}

        if not isinstance(decoded, dict):
            return {}

        payload = decoded.get(endpoint.envelope_key)
        return payload if payload is not None else {}

    @staticmethod
    def _remote_error(response: requests.Response) -> RemoteError:
        body = response.text
        message = body
        error_code = None

        if "<ErrorResponse" in body:
            try:
                decoded = from_xml(response.content)
            except XMLDecodeError:
                decoded = None
            errors = as_sequence(decoded.get("Error")) if isinstance(decoded, dict) else []
            if errors and isinstance(errors[0], dict):
                message = errors[0].get("Message") or body
                error_code = errors[0].get("Code")

        return RemoteError(message, response.status_code, error_code=error_code, body=body)


class BaseAPIClient:
    """Base class for the per-section MWS clients."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor
        self.config = executor.config

    def _make_request(
        self,
        operation: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[Union[str, bytes]] = None,
        content_type: str = FEED_CONTENT_TYPE,
    ) -> Any:
        return self.executor.execute_decoded(operation, params, body, content_type)

    def _make_raw_request(self, operation: str, params: Optional[dict[str, Any]] = None) -> str:
        return self.executor.execute_raw(operation, params)
