"""
Tests for the report builder, the report generator and the public API.
"""

import logging

import pytest

from itemreport import generate_report
from itemreport.core.exceptions import ItemReportError, UnsupportedFormatError
from itemreport.core.models import Item, ReportFormat, User
from itemreport.reports.builder import build_report
from itemreport.reports.formatters import CSVFormatter, Formatter, HTMLFormatter
from itemreport.reports.generator import ReportGenerator


class RecordingFormatter(Formatter):
    """Formatter that records every call it receives."""

    def __init__(self):
        self.calls = []

    def header(self, user_name):
        self.calls.append(("header", user_name))
        return "  H\n"

    def row(self, item, user_name, is_priority):
        self.calls.append(("row", item.id, user_name, is_priority))
        return f"R{item.id}\n"

    def footer(self, total):
        self.calls.append(("footer", total))
        return f"F{total}\n\n"


class TestBuildReport:
    """Tests for build_report."""

    def test_call_sequence(self, admin_user):
        """Test header, rows in order, then footer."""
        formatter = RecordingFormatter()
        items = [Item(1, "A", 1500, priority=True), Item(2, "B", 200)]

        build_report(formatter, admin_user, items, 1700)

        assert formatter.calls == [
            ("header", "Bob"),
            ("row", 1, "Bob", True),
            ("row", 2, "Bob", False),
            ("footer", 1700),
        ]

    def test_concatenates_and_strips(self, admin_user):
        """Test that fragments are joined and outer whitespace removed."""
        report = build_report(RecordingFormatter(), admin_user, [Item(7, "G", 1)], 1)
        assert report == "H\nR7\nF1"

    def test_no_items(self, admin_user):
        """Test a report without rows."""
        report = build_report(CSVFormatter(), admin_user, [], 0)
        assert report == "ID,NOME,VALOR,USUARIO\n\nTotal,,\n0,,"


class TestReportGenerator:
    """Tests for ReportGenerator."""

    def test_builtin_formats(self, generator):
        """Test the formats registered by default."""
        assert generator.available_formats() == ["CSV", "HTML"]
        assert isinstance(generator.get_formatter("CSV"), CSVFormatter)
        assert isinstance(generator.get_formatter(ReportFormat.HTML), HTMLFormatter)

    def test_format_lookup_ignores_case(self, generator):
        """Test that lower-case keys resolve."""
        assert isinstance(generator.get_formatter("html"), HTMLFormatter)

    def test_csv_admin(self, generator, admin_user, sample_items):
        """Test the CSV report for an ADMIN."""
        report = generator.generate_report("CSV", admin_user, sample_items)

        assert report == (
            "ID,NOME,VALOR,USUARIO\n"
            "1,A,1500,Bob\n"
            "2,B,200,Bob\n"
            "\n"
            "Total,,\n"
            "1700,,"
        )

    def test_csv_user(self, generator, regular_user, sample_items):
        """Test the CSV report for a USER."""
        report = generator.generate_report("CSV", regular_user, sample_items)

        assert report == "ID,NOME,VALOR,USUARIO\n2,B,200,Carol\n\nTotal,,\n200,,"
        assert "1,A" not in report

    def test_html_admin(self, generator, admin_user, sample_items):
        """Test the HTML report for an ADMIN."""
        report = generator.generate_report("HTML", admin_user, sample_items)

        assert report == (
            "<html><body>\n"
            "<h1>Relatório</h1>\n"
            "<h2>Usuário: Bob</h2>\n"
            "<table>\n"
            "<tr><th>ID</th><th>Nome</th><th>Valor</th></tr>\n"
            '<tr style="font-weight:bold;"><td>1</td><td>A</td><td>1500</td></tr>\n'
            "<tr><td>2</td><td>B</td><td>200</td></tr>\n"
            "</table>\n"
            "<h3>Total: 1700</h3>\n"
            "</body></html>"
        )

    def test_unknown_role_renders_empty_report(self, generator, guest_user, sample_items):
        """Test that an unrecognized role gives a report with no rows."""
        report = generator.generate_report("CSV", guest_user, sample_items)
        assert report == "ID,NOME,VALOR,USUARIO\n\nTotal,,\n0,,"

    def test_unsupported_format(self, generator, admin_user, sample_items):
        """Test that unknown formats fail before anything is rendered."""
        with pytest.raises(UnsupportedFormatError) as exc_info:
            generator.generate_report("PDF", admin_user, sample_items)

        error = exc_info.value
        assert error.report_type == "PDF"
        assert error.available == ["CSV", "HTML"]
        assert str(error) == "Unsupported format: PDF: Available formats: CSV, HTML"

    def test_unsupported_format_is_value_error(self, generator, admin_user):
        """Test that callers catching ValueError or the base error both work."""
        with pytest.raises(ValueError):
            generator.generate_report("PDF", admin_user, [])
        with pytest.raises(ItemReportError):
            generator.generate_report("XML", admin_user, [])

    def test_unsupported_format_does_not_consume_items(self, generator, admin_user):
        """Test that the items iterable is left alone on a bad format."""
        consumed = []

        def items():
            consumed.append(True)
            yield Item(1, "A", 1)

        with pytest.raises(UnsupportedFormatError):
            generator.generate_report("PDF", admin_user, items())
        assert consumed == []

    def test_idempotent(self, generator, admin_user, sample_items):
        """Test that identical inputs give byte-identical output."""
        first = generator.generate_report("HTML", admin_user, sample_items)
        second = generator.generate_report("HTML", admin_user, sample_items)
        assert first == second

    def test_does_not_mutate_items(self, generator, admin_user, sample_items):
        """Test that the caller's items keep their original state."""
        before = list(sample_items)
        generator.generate_report("HTML", admin_user, sample_items)

        assert sample_items == before
        assert all(item.priority is False for item in sample_items)

    def test_add_formatter(self, admin_user, sample_items):
        """Test registering an extra format."""
        generator = ReportGenerator()
        recorder = RecordingFormatter()
        generator.add_formatter("trace", recorder)

        assert generator.available_formats() == ["CSV", "HTML", "TRACE"]
        report = generator.generate_report("TRACE", admin_user, sample_items)

        assert report == "H\nR1\nR2\nF1700"
        assert ("row", 1, "Bob", True) in recorder.calls

    def test_constructor_formatters_override_builtins(self, regular_user, sample_items):
        """Test that formatters passed at construction replace built-ins."""
        recorder = RecordingFormatter()
        generator = ReportGenerator(formatters={ReportFormat.CSV: recorder})

        assert generator.available_formats() == ["CSV", "HTML"]
        assert generator.generate_report("csv", regular_user, sample_items) == "H\nR2\nF200"

    def test_logs_visibility(self, generator, regular_user, sample_items, caplog):
        """Test that item counts are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="itemreport"):
            generator.generate_report("CSV", regular_user, sample_items)

        assert "1 of 2 items visible" in caplog.text


class TestGenerateReportAPI:
    """Tests for the module-level generate_report function."""

    def test_scenario_csv_admin(self, admin_user, sample_items):
        """Test the ADMIN CSV scenario."""
        report = generate_report("CSV", admin_user, sample_items)

        lines = report.splitlines()
        assert lines[1] == "1,A,1500,Bob"
        assert lines[2] == "2,B,200,Bob"
        assert lines[-1] == "1700,,"

    def test_scenario_html_admin(self, admin_user, sample_items):
        """Test the ADMIN HTML scenario."""
        report = generate_report("HTML", admin_user, sample_items)

        assert '<tr style="font-weight:bold;"><td>1</td>' in report
        assert "<tr><td>2</td>" in report
        assert "<h2>Usuário: Bob</h2>" in report
        assert "<h3>Total: 1700</h3>" in report

    def test_accepts_mappings(self, regular_user):
        """Test that plain mappings are converted to items."""
        report = generate_report(
            "CSV",
            regular_user,
            [{"id": 1, "name": "A", "value": 1500}, {"id": 2, "name": "B", "value": 200}],
        )
        assert report == "ID,NOME,VALOR,USUARIO\n2,B,200,Carol\n\nTotal,,\n200,,"

    def test_mapping_priority_is_not_rendered(self, regular_user, admin_user):
        """Test that a priority key in the input never styles a row."""
        records = [{"id": 2, "name": "B", "value": 200, "priority": True}]

        assert "font-weight:bold" not in generate_report("HTML", regular_user, records)
        assert "font-weight:bold" not in generate_report("HTML", admin_user, records)

    def test_item_priority_is_not_rendered(self, regular_user):
        """Test that a pre-flagged Item is rendered without emphasis."""
        report = generate_report("HTML", regular_user, [Item(2, "B", 200, priority=True)])

        assert "<tr><td>2</td><td>B</td><td>200</td></tr>" in report
        assert "font-weight:bold" not in report

    def test_float_total(self):
        """Test that float totals render like the values."""
        report = generate_report(
            "CSV",
            User("Bob", "ADMIN"),
            [Item(1, "A", 0.5), Item(2, "B", 1.5)],
        )
        assert report.endswith("Total,,\n2,,")

    def test_unsupported_format(self, admin_user, sample_items):
        """Test the unsupported format scenario."""
        with pytest.raises(UnsupportedFormatError, match="Unsupported format: PDF"):
            generate_report("PDF", admin_user, sample_items)
