"""Reports API client for Amazon MWS."""

import csv
import io
import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..constants import REPORT_DONE, REPORT_DONE_NO_DATA
from ..exceptions import MWSError
from ..models import ReportRequestInfo
from ..normalize import as_sequence, dig
from ..utils.params import enumerate_param, format_timestamp
from .base import BaseAPIClient

logger = logging.getLogger(__name__)


def parse_report(content: str) -> list[dict[str, str]]:
    """Parse a tab-delimited report into one dict per row, keyed by header."""
    reader = csv.DictReader(io.StringIO(content), delimiter="\t")
    return [dict(row) for row in reader]


class ReportsAPIClient(BaseAPIClient):
    """Client for MWS report requests and downloads."""

    def request_report(
        self,
        report_type: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> str:
        """Create a report request.

        Args:
            report_type: MWS report type, e.g. ``_GET_MERCHANT_LISTINGS_DATA_``
            start_date: Optional start of the reported period
            end_date: Optional end of the reported period

        Returns:
            The ReportRequestId

        Raises:
            MWSError: If MWS did not return a request id
        """
        params: dict[str, Any] = {"ReportType": report_type}

        if start_date:
            params["StartDate"] = format_timestamp(start_date)
        if end_date:
            params["EndDate"] = format_timestamp(end_date)

        response = self._make_request("RequestReport", params)
        report_request_id = dig(response, "ReportRequestInfo", "ReportRequestId")

        if not report_request_id:
            raise MWSError("Error trying to request report")

        logger.info(f"Requested {report_type} report, request id {report_request_id}")
        return report_request_id

    def get_report_request_status(self, report_request_id: str) -> Optional[ReportRequestInfo]:
        """Return the processing status of a report request, None if unknown."""
        response = self._make_request(
            "GetReportRequestList", {"ReportRequestIdList.Id.1": report_request_id}
        )
        infos = as_sequence(dig(response, "ReportRequestInfo"))
        return ReportRequestInfo.from_value(infos[0]) if infos else None

    def get_report(self, report_request_id: str) -> Optional[list[dict[str, Any]]]:
        """Download a report once it has been generated.

        Returns:
            List of rows; an empty list when the report finished without data;
            None when the request is unknown or still processing
        """
        status = self.get_report_request_status(report_request_id)

        if status is None:
            return None

        if status.processing_status == REPORT_DONE_NO_DATA:
            return []

        if status.processing_status != REPORT_DONE or not status.generated_report_id:
            logger.info(f"Report {report_request_id} not ready: {status.processing_status}")
            return None

        result = self._make_request("GetReport", {"ReportId": status.generated_report_id})

        if isinstance(result, str):
            return parse_report(result)

        return as_sequence(result or None)

    def get_report_list(self, report_types: Sequence[str] = ()) -> list[dict[str, Any]]:
        """Return the reports created in the previous 90 days."""
        response = self._make_request("GetReportList", enumerate_param("ReportTypeList.Type", report_types))
        return as_sequence(dig(response, "ReportInfo"))
