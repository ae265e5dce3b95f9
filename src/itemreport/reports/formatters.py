"""
Output formatters for item reports.

Each formatter produces the three text fragments a report is assembled
from: a header, one row per visible item, and a footer carrying the total.
Formatters hold no state, so a single instance can serve any number of
reports concurrently.
"""

from abc import ABC, abstractmethod
from html import escape

from itemreport.core.models import Item, Number


def format_number(value: Number) -> str:
    """Render a number the way it is shown in reports.

    Integral floats drop their fractional part (1700.0 -> "1700").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Formatter(ABC):
    """Base class for report formatters."""

    @abstractmethod
    def header(self, user_name: str) -> str:
        """Return the text that opens the report."""

    @abstractmethod
    def row(self, item: Item, user_name: str, is_priority: bool) -> str:
        """Return the text for a single item."""

    @abstractmethod
    def footer(self, total: Number) -> str:
        """Return the text that closes the report."""


class CSVFormatter(Formatter):
    """Comma-separated output.

    Priority items are rendered like any other row.
    """

    COLUMNS = ("ID", "NOME", "VALOR", "USUARIO")

    def header(self, user_name: str) -> str:
        return ",".join(self.COLUMNS) + "\n"

    def row(self, item: Item, user_name: str, is_priority: bool) -> str:
        return f"{item.id},{item.name},{format_number(item.value)},{user_name}\n"

    def footer(self, total: Number) -> str:
        return f"\nTotal,,\n{format_number(total)},,\n"


class HTMLFormatter(Formatter):
    """HTML document with a table of items.

    Priority items are rendered in bold.
    """

    TITLE = "Relatório"
    PRIORITY_STYLE = ' style="font-weight:bold;"'

    def header(self, user_name: str) -> str:
        return (
            "<html><body>\n"
            f"<h1>{self.TITLE}</h1>\n"
            f"<h2>Usuário: {escape(user_name)}</h2>\n"
            "<table>\n"
            "<tr><th>ID</th><th>Nome</th><th>Valor</th></tr>\n"
        )

    def row(self, item: Item, user_name: str, is_priority: bool) -> str:
        style = self.PRIORITY_STYLE if is_priority else ""
        return (
            f"<tr{style}>"
            f"<td>{escape(str(item.id))}</td>"
            f"<td>{escape(item.name)}</td>"
            f"<td>{format_number(item.value)}</td>"
            "</tr>\n"
        )

    def footer(self, total: Number) -> str:
        return (
            "</table>\n"
            f"<h3>Total: {format_number(total)}</h3>\n"
            "</body></html>\n"
        )
