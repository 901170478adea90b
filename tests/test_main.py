import os
import tempfile
import unittest
from unittest.mock import patch

from cloudhealth import main
from tests.helpers import API_KEY, BASE_URL, COST_REPORT, REQUEST_PATCH, make_response


class TestMain(unittest.TestCase):

    def setUp(self):
        # configure_logging replaces the root handlers
        self.addCleanup(patch.stopall)
        patch('cloudhealth.main.configure_logging').start()

    def test_requires_api_key(self):
        with self.assertRaises(SystemExit):
            main.parse_arguments(['accounts', '--api-key', '', '--endpoint-url', BASE_URL])

    def test_cost_report_requires_time(self):
        with self.assertRaises(SystemExit):
            main.parse_arguments(['cost-report', '--api-key', API_KEY])

    def test_invalid_endpoint(self):
        self.assertEqual(main.main(['accounts', '--api-key', API_KEY, '--endpoint-url', 'nope']), 1)

    @patch(REQUEST_PATCH)
    def test_list_accounts(self, mock_request):
        mock_request.return_value = make_response(200, {"aws_accounts": [{"id": 1, "name": "prod"}]})

        with patch('builtins.print') as mock_print:
            code = main.main(['accounts', '--api-key', API_KEY, '--endpoint-url', BASE_URL])

        self.assertEqual(code, 0)
        self.assertIn('"name": "prod"', mock_print.call_args.args[0])

    @patch(REQUEST_PATCH)
    def test_api_error_exit_code(self, mock_request):
        mock_request.return_value = make_response(401)

        code = main.main(['customers', '--api-key', API_KEY, '--endpoint-url', BASE_URL])

        self.assertEqual(code, 1)

    @patch(REQUEST_PATCH)
    def test_cost_report_export(self, mock_request):
        mock_request.return_value = make_response(200, COST_REPORT)

        with tempfile.TemporaryDirectory() as tmp_dir:
            output = os.path.join(tmp_dir, "report.csv")
            code = main.main(['cost-report', '--api-key', API_KEY, '--endpoint-url', BASE_URL,
                              '--time', '2023-01', '--output', output])

            self.assertEqual(code, 0)
            self.assertTrue(os.path.exists(output))


if __name__ == "__main__":
    unittest.main()
