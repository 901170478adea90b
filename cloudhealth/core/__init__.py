"""
Core functionality module for report processing and exporting.
"""

from .report_processor import CostReportProcessor
from .export import CostDataExporter

__all__ = ['CostReportProcessor', 'CostDataExporter']
