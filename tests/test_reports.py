import unittest
from unittest.mock import patch
from urllib.parse import parse_qsl, urlsplit

from cloudhealth.api.client import CloudHealthClient
from cloudhealth.api.exceptions import ValidationError
from cloudhealth.resources.reports import CostHistoryRequestOptions
from tests.helpers import API_KEY, BASE_URL, COST_REPORT, REQUEST_PATCH, make_response


class TestCostHistoryReports(unittest.TestCase):
    """Test case for the cost history report."""

    def setUp(self):
        self.client = CloudHealthClient(API_KEY, BASE_URL)

    @patch(REQUEST_PATCH)
    def test_blank_required_options_fail_before_request(self, mock_request):
        cases = [
            CostHistoryRequestOptions(measures="", interval="monthly", time="2023-01"),
            CostHistoryRequestOptions(measures="cost", interval="  ", time="2023-01"),
            CostHistoryRequestOptions(measures="cost", interval="monthly", time=""),
            CostHistoryRequestOptions(measures=None, interval="monthly", time="2023-01"),
        ]
        for options in cases:
            with self.subTest(options=options):
                with self.assertRaises(ValidationError):
                    self.client.reports.get(options)
        mock_request.assert_not_called()

    def test_error_names_missing_option(self):
        with self.assertRaises(ValidationError) as ctx:
            self.client.reports.build_path(CostHistoryRequestOptions(measures="", interval="monthly", time="current"))
        self.assertIn("measures", str(ctx.exception))

    def test_query_parameters(self):
        options = CostHistoryRequestOptions(
            measures="cost",
            interval="monthly",
            time="2023-01",
            client_api_id="9",
            selected_dimensions="ec2_compute",
            rejected_dimensions="s3",
            target_aws_account_id="123456789012",
        )

        path = self.client.reports.build_path(options)

        parts = urlsplit(path)
        self.assertEqual(parts.path, "olap_reports/cost/history")
        self.assertEqual(parse_qsl(parts.query), [
            ("dimensions[]", "AWS-Service-Category"),
            ("measures[]", "cost"),
            ("interval", "monthly"),
            ("filters[]", "time:select:2023-01"),
            ("client_api_id", "9"),
            ("filters[]", "AWS-Service-Category:select:ec2_compute"),
            ("filters[]", "AWS-Service-Category:reject:s3"),
            ("filters[]", "AWS-Account:select:123456789012"),
        ])
        self.assertIn("filters[]=time:select:2023-01", path)

    def test_optional_filters_omitted(self):
        path = self.client.reports.build_path(
            CostHistoryRequestOptions(measures="cost", interval="daily", time="current"))

        self.assertNotIn("client_api_id", path)
        self.assertNotIn("AWS-Account", path)
        self.assertEqual(path.count("filters[]"), 1)

    @patch(REQUEST_PATCH)
    def test_get(self, mock_request):
        mock_request.return_value = make_response(200, COST_REPORT)

        report = self.client.reports.get(
            CostHistoryRequestOptions(measures="cost", interval="monthly", time="2023-01"))

        self.assertEqual(report.interval, "monthly")
        self.assertEqual(report.data, [[120.5], [30.25]])
        self.assertEqual(report.measures[0].metadata.units, "$")
        members = report.dimensions[0]["AWS-Service-Category"]
        self.assertEqual([m.label for m in members], ["EC2 - Compute", "S3"])
        self.assertTrue(mock_request.call_args.kwargs['url'].startswith(
            "https://api.example.test/olap_reports/cost/history?dimensions[]=AWS-Service-Category"))
        self.assertEqual(mock_request.call_args.kwargs['headers']['Authorization'], "Bearer key1")


if __name__ == "__main__":
    unittest.main()
