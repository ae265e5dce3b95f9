"""
Report generation module.

Provides the report generator, the report builder and the formatters for
outputting item reports as CSV or HTML.
"""

from itemreport.reports.builder import build_report
from itemreport.reports.formatters import (
    CSVFormatter,
    Formatter,
    HTMLFormatter,
    format_number,
)
from itemreport.reports.generator import ReportGenerator

__all__ = [
    "ReportGenerator",
    "build_report",
    "Formatter",
    "CSVFormatter",
    "HTMLFormatter",
    "format_number",
]
