"""Amazon Marketplace Web Service client."""

from .client import MWSClient
from .codec import AttributedValue, from_xml, to_xml
from .config import MWSConfig
from .endpoints import EndpointDescriptor, lookup
from .exceptions import (
    CallConstraintViolation,
    ConfigurationError,
    MWSError,
    RemoteError,
    TransportError,
    UnknownOperation,
    XMLDecodeError,
)
from .models import FeedSubmissionInfo, ListingProduct, MatchingProducts, OrdersPage, ReportRequestInfo
from .normalize import as_sequence
from .signing import RequestSigner

__version__ = "1.0.0"

__all__ = [
    "AttributedValue",
    "CallConstraintViolation",
    "ConfigurationError",
    "EndpointDescriptor",
    "FeedSubmissionInfo",
    "ListingProduct",
    "MWSClient",
    "MWSConfig",
    "MWSError",
    "MatchingProducts",
    "OrdersPage",
    "RemoteError",
    "ReportRequestInfo",
    "RequestSigner",
    "TransportError",
    "UnknownOperation",
    "XMLDecodeError",
    "as_sequence",
    "from_xml",
    "lookup",
    "to_xml",
]
