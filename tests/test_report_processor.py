import unittest

from cloudhealth.api.models import CostHistoryReport
from cloudhealth.core.report_processor import CATEGORY_COLUMN, CostReportProcessor
from tests.helpers import COST_REPORT


class TestCostReportProcessor(unittest.TestCase):

    def setUp(self):
        self.processor = CostReportProcessor()

    def test_to_dataframe(self):
        report = CostHistoryReport.model_validate(COST_REPORT)

        df = self.processor.to_dataframe(report)

        self.assertEqual(list(df.columns), [CATEGORY_COLUMN, "Cost ($)"])
        self.assertEqual(df[CATEGORY_COLUMN].tolist(), ["EC2 - Compute", "S3"])
        self.assertEqual(df["Cost ($)"].tolist(), [120.5, 30.25])

    def test_missing_values_become_zero(self):
        report = CostHistoryReport.model_validate(dict(COST_REPORT, data=[[None], [30.25]]))

        df = self.processor.to_dataframe(report)

        self.assertEqual(df["Cost ($)"].tolist(), [0.0, 30.25])

    def test_mismatched_rows_give_empty_frame(self):
        report = CostHistoryReport.model_validate(dict(COST_REPORT, data=[[120.5]]))

        df = self.processor.to_dataframe(report)

        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), [CATEGORY_COLUMN, "Cost ($)"])

    def test_malformed_row_is_skipped(self):
        report = CostHistoryReport.model_validate(dict(COST_REPORT, data=[[120.5, 1.0], [30.25]]))

        df = self.processor.to_dataframe(report)

        self.assertEqual(df[CATEGORY_COLUMN].tolist(), ["S3"])

    def test_empty_report(self):
        report = CostHistoryReport.model_validate(dict(COST_REPORT, data=[], dimensions=[]))

        self.assertTrue(self.processor.to_dataframe(report).empty)


if __name__ == "__main__":
    unittest.main()
