import logging
import os
from ..config.settings import CSV_DELIMITER, DECIMAL_SEPARATOR, DEFAULT_EXPORT_PATH
from ..utils.path_utils import ensure_dir_exists
from .report_processor import CATEGORY_COLUMN

logger = logging.getLogger(__name__)


class CostDataExporter:
    """Export cost data to CSV."""

    def __init__(self, output_path=None):
        """
        Initialize the data exporter.

        Args:
            output_path (str, optional): Path to save the exported file
        """
        self.output_path = output_path or DEFAULT_EXPORT_PATH

    def to_csv(self, df, output_path=None):
        """
        Export the data to a CSV file.

        Numeric columns are written with two decimals and the configured
        decimal separator.

        Args:
            df (pd.DataFrame): Data to export
            output_path (str, optional): Path to save the CSV file

        Returns:
            str: Path to the exported CSV file, or None if there was nothing to export
        """
        if df.empty:
            logger.warning("No data to export")
            return None

        output_path = output_path or self.output_path
        ensure_dir_exists(os.path.dirname(output_path))

        logger.info(f"Exporting data to CSV: {output_path}")

        csv_df = df.copy()
        for column in csv_df.columns:
            if column == CATEGORY_COLUMN:
                continue
            csv_df[column] = csv_df[column].apply(lambda x: f"{x:.2f}".replace('.', DECIMAL_SEPARATOR))

        try:
            csv_df.to_csv(output_path, sep=CSV_DELIMITER, index=False)
        except OSError as e:
            logger.error(f"Error exporting data to CSV: {str(e)}")
            raise

        logger.info(f"Exported {len(csv_df)} rows to {output_path}")
        return output_path
