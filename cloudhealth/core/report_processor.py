import logging
import pandas as pd

logger = logging.getLogger(__name__)

CATEGORY_COLUMN = "ServiceCategory"


class CostReportProcessor:
    """Process and transform CloudHealth cost history reports."""

    def category_members(self, report):
        """
        Return the members of the report's first dimension.

        Args:
            report (CostHistoryReport): Decoded report

        Returns:
            list: ReportDimensionMember entries, in the order of ``report.data``
        """
        if not report.dimensions:
            return []
        # Each dimension entry maps its name to its members
        return list(next(iter(report.dimensions[0].values()), []))

    def to_dataframe(self, report):
        """
        Flatten a cost history report into a DataFrame.

        Rows are service categories, columns are the report's measures.

        Args:
            report (CostHistoryReport): Decoded report

        Returns:
            pd.DataFrame: One row per category; empty if the report has no usable data
        """
        measure_labels = [measure.label or measure.name for measure in report.measures]
        columns = [CATEGORY_COLUMN] + measure_labels
        members = self.category_members(report)

        if not report.data or not members:
            logger.warning("No cost data found in report")
            return pd.DataFrame(columns=columns)

        if len(report.data) != len(members):
            logger.error(f"Report has {len(report.data)} data rows for {len(members)} categories")
            return pd.DataFrame(columns=columns)

        rows = []
        skipped = 0
        for member, values in zip(members, report.data):
            if len(values) != len(measure_labels):
                logger.warning(f"Category {member.label}: expected {len(measure_labels)} values, got {len(values)}")
                skipped += 1
                continue
            row = {CATEGORY_COLUMN: member.label}
            for label, value in zip(measure_labels, values):
                row[label] = float(value) if value is not None else 0.0
            rows.append(row)

        if skipped:
            logger.warning(f"{skipped} categories were skipped because of malformed data")

        logger.info(f"Processed {len(rows)} cost report categories")
        return pd.DataFrame(rows, columns=columns)
