"""
Plain text tables for the command line.

Used by ``listview columns`` to describe the resolved columns of a
manifest in a terminal.
"""

from __future__ import annotations

from collections.abc import Sequence


class TextTable:
    """Render headers and rows as a box-drawing text table.

    Example output:
        +------+--------------------------------+-------+
        | Id   | Column                         | Title |
        +------+--------------------------------+-------+
        | name | listview.column:ListViewColumn | Name  |
        +------+--------------------------------+-------+
    """

    def render(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        """Render headers and rows, left-aligned.

        Cells beyond the number of headers are dropped, missing cells are
        rendered empty.

        Returns:
            The table, or an empty string when there are no headers
        """
        if not headers:
            return ""

        count = len(headers)
        normalized_rows = [
            [str(row[i]) if i < len(row) else "" for i in range(count)] for row in rows
        ]

        widths = [len(header) for header in headers]
        for row in normalized_rows:
            widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

        separator = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

        def line(cells: Sequence[str]) -> str:
            return "| " + " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)) + " |"

        lines = [separator, line(headers), separator]
        lines.extend(line(row) for row in normalized_rows)
        lines.append(separator)

        return "\n".join(lines)
