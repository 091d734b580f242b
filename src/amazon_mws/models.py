"""Typed results for the operations whose shape callers depend on.

Each model maps its fields explicitly from the decoded response. Fields that
XML may deliver as either one element or several are passed through
:func:`as_sequence` here, once, instead of at every call site.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .normalize import as_sequence, dig


@dataclass
class OrdersPage:
    """One page of ListOrders / ListOrdersByNextToken results."""

    orders: list[dict[str, Any]] = field(default_factory=list)
    next_token: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return bool(self.next_token)

    @classmethod
    def from_value(cls, value: Any) -> "OrdersPage":
        return cls(
            orders=as_sequence(dig(value, "Orders", "Order")),
            next_token=dig(value, "NextToken") or None,
        )


@dataclass
class FeedSubmissionInfo:
    """Acknowledgement returned by SubmitFeed."""

    feed_submission_id: str
    feed_type: Optional[str] = None
    submitted_date: Optional[str] = None
    processing_status: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> Optional["FeedSubmissionInfo"]:
        info = dig(value, "FeedSubmissionInfo")
        if not isinstance(info, dict) or not info.get("FeedSubmissionId"):
            return None
        return cls(
            feed_submission_id=info["FeedSubmissionId"],
            feed_type=info.get("FeedType"),
            submitted_date=info.get("SubmittedDate"),
            processing_status=info.get("FeedProcessingStatus"),
        )


@dataclass
class ReportRequestInfo:
    """Status of a report request as reported by GetReportRequestList."""

    report_request_id: str
    report_type: Optional[str] = None
    processing_status: Optional[str] = None
    generated_report_id: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    submitted_date: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> Optional["ReportRequestInfo"]:
        if not isinstance(value, dict) or not value.get("ReportRequestId"):
            return None
        return cls(
            report_request_id=value["ReportRequestId"],
            report_type=value.get("ReportType"),
            processing_status=value.get("ReportProcessingStatus"),
            generated_report_id=value.get("GeneratedReportId"),
            start_date=value.get("StartDate"),
            end_date=value.get("EndDate"),
            submitted_date=value.get("SubmittedDate"),
        )


@dataclass
class MatchingProducts:
    """GetMatchingProductForId outcome, grouped by requested identifier."""

    found: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    not_found: list[str] = field(default_factory=list)


@dataclass
class ListingProduct:
    """One offer row of the flat-file listings feed."""

    sku: str
    price: str
    quantity: int = 0
    product_id: str = ""
    product_id_type: str = ""
    condition_type: str = "New"
    condition_note: str = ""

    @property
    def normalized_price(self) -> str:
        return str(self.price).replace(",", ".")

    def to_row(self) -> list[Any]:
        """Values in flat-file header order."""
        return [
            self.sku,
            self.normalized_price,
            int(self.quantity),
            str(self.product_id),
            self.product_id_type,
            self.condition_type,
            self.condition_note,
        ]
