import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from ..api.exceptions import ValidationError
from ..api.models import CostHistoryReport
from ..api.pipeline import decode
from .base import Resource

logger = logging.getLogger(__name__)

SERVICE_CATEGORY_DIMENSION = "AWS-Service-Category"


@dataclass(frozen=True)
class CostHistoryRequestOptions:
    """
    Options for the AWS cost history report.

    ``measures``, ``interval`` and ``time`` are required. ``time`` is the
    time-window filter value, e.g. ``2023-01`` or ``current``.
    """

    measures: str
    interval: str
    time: str
    client_api_id: Optional[str] = None
    selected_dimensions: Optional[str] = None
    rejected_dimensions: Optional[str] = None
    target_aws_account_id: Optional[str] = None


def _is_blank(value):
    return value is None or not str(value).strip()


class CostHistoryReports(Resource):
    path = "olap_reports/cost/history"

    def build_path(self, options):
        """
        Build the report path and query for the given options.

        Raises:
            ValidationError: If a required option is blank
        """
        for name in ("measures", "interval", "time"):
            if _is_blank(getattr(options, name)):
                raise ValidationError(f"the `{name}` property is required and cannot be blank")

        query = [
            ("dimensions[]", SERVICE_CATEGORY_DIMENSION),
            ("measures[]", options.measures),
            ("interval", options.interval),
            ("filters[]", f"time:select:{options.time}"),
        ]
        if not _is_blank(options.client_api_id):
            query.append(("client_api_id", options.client_api_id))
        if not _is_blank(options.selected_dimensions):
            query.append(("filters[]", f"{SERVICE_CATEGORY_DIMENSION}:select:{options.selected_dimensions}"))
        if not _is_blank(options.rejected_dimensions):
            query.append(("filters[]", f"{SERVICE_CATEGORY_DIMENSION}:reject:{options.rejected_dimensions}"))
        if not _is_blank(options.target_aws_account_id):
            query.append(("filters[]", f"AWS-Account:select:{options.target_aws_account_id}"))

        return f"{self.path}?{urlencode(query, safe='[]:,')}"

    def get(self, options):
        """
        Get the AWS cost history report grouped by service category.

        Args:
            options (CostHistoryRequestOptions): Report parameters

        Returns:
            CostHistoryReport: The decoded report

        Raises:
            ValidationError: Before any request, if a required option is blank
        """
        path = self.build_path(options)
        logger.info(f"Requesting cost history report ({options.measures}, {options.interval}, {options.time})")
        body = self._request("GET", path)
        report = decode(body, CostHistoryReport)
        logger.debug(f"Cost history report has {len(report.data)} rows")
        return report
