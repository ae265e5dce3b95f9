"""
Command-line interface for itemreport.

Provides Click-based CLI commands for rendering and previewing reports.
"""

from itemreport.cli.main import cli

__all__ = ["cli"]
