"""
List view widgets.

A list view renders a collection of records as an HTML table. Rendering is
a pipeline of overridable steps:

1. Columns are resolved from their definitions (``resolve_columns``)
2. Headers and cells are rendered as strings (``render_headers``,
   ``render_cells``), then altered (``alter_headers``, ``alter_cells``)
3. Headers and cells are decorated with ``th`` and ``td`` elements
   (``decorate_headers``, ``decorate_cells``), then altered
   (``alter_decorated_headers``, ``alter_decorated_cells``)
4. Cells are transposed into ``tr`` rows (``render_rows``), then altered
   (``alter_rows``)
5. The table is assembled (``render_table``)

Example:
    >>> from listview import ListView, ListViewColumn
    >>> view = ListView({
    ...     ListView.COLUMNS: {"name": (ListViewColumn, {"title": "Name"})},
    ...     ListView.RECORDS: [{"name": "Alice"}],
    ... })
    >>> html = view.render()
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping, Sequence
from functools import cached_property
from typing import Any

from .column import ListViewColumn, load_column_class
from .config import ListViewOptions
from .element import Alert, Element, render_child
from .exceptions import ColumnDefinitionError, ValidationError
from .naming import join_class_names, normalize, split_class_names
from .rendering import render_exception

logger = logging.getLogger(__name__)


class ListView(Element):
    """A list view rendering records as a table.

    Columns are defined with the ``#listview-columns`` attribute, a mapping
    of column identifiers to definitions. A definition is one of:

    - a column class, or the dotted path of one (``"myapp.columns:Email"``)
    - a ``(class, options)`` pair, the class possibly given as a dotted path

    Records are given with the ``#listview-records`` attribute. Records can
    be mappings, objects or sequences (with integer column identifiers).

    Args:
        attributes: Attributes of the wrapping ``div`` element
        options: Rendering options. Defaults to ``ListViewOptions.from_env()``.
    """

    COLUMNS = "#listview-columns"
    RECORDS = "#listview-records"

    def __init__(
        self,
        attributes: Mapping[str, Any] | None = None,
        *,
        options: ListViewOptions | None = None,
    ) -> None:
        super().__init__("div", attributes)
        self.options = options if options is not None else ListViewOptions.from_env()

    def alter_class_names(self, class_names: dict[str, bool]) -> dict[str, bool]:
        """Adds the ``listview`` class name."""
        class_names = super().alter_class_names(class_names)
        class_names.setdefault("listview", True)
        return class_names

    # -----------------------------------------------------------------------
    # Columns and records
    # -----------------------------------------------------------------------

    @cached_property
    def columns(self) -> dict[Hashable, ListViewColumn]:
        """Columns used to display the data of the records, resolved once."""
        return self.resolve_columns(self.get(self.COLUMNS) or {})

    def resolve_columns(
        self, definitions: Mapping[Hashable, Any]
    ) -> dict[Hashable, ListViewColumn]:
        """
        Resolve column definitions into column instances.

        Args:
            definitions: Mapping of column identifier to definition

        Returns:
            Mapping of column identifier to column, in definition order

        Raises:
            ValidationError: If ``definitions`` is not a mapping
            ColumnDefinitionError: If a definition has an unexpected form
            ColumnClassNotFoundError: If a dotted path cannot be loaded
        """
        if not isinstance(definitions, Mapping):
            raise ValidationError(
                "columns",
                definitions,
                "Must be a mapping of column identifiers to definitions",
            )

        columns = {
            column_id: self.resolve_column(column_id, definition)
            for column_id, definition in definitions.items()
        }

        logger.debug("Resolved %d column(s): %s", len(columns), ", ".join(map(str, columns)))

        return columns

    def resolve_column(self, column_id: Hashable, definition: Any) -> ListViewColumn:
        """Resolve a single column definition, see ``resolve_columns``."""
        if isinstance(definition, (str, type)):
            definition = (definition, {})

        if not isinstance(definition, (tuple, list)) or len(definition) != 2:
            raise ColumnDefinitionError(column_id, definition)

        construct, options = definition

        if isinstance(construct, str):
            construct = load_column_class(construct)

        if not (isinstance(construct, type) and issubclass(construct, ListViewColumn)):
            raise ColumnDefinitionError(column_id, definition)

        if options is not None and not isinstance(options, Mapping):
            raise ColumnDefinitionError(column_id, definition)

        return construct(self, column_id, options or {})

    @property
    def records(self) -> Sequence[Any]:
        """Records to display. One-shot iterables are materialized on first access."""
        records = self.get(self.RECORDS)
        if records is None:
            return []
        if not isinstance(records, Sequence):
            records = list(records)
            self[self.RECORDS] = records
        return records

    # -----------------------------------------------------------------------
    # Pipeline
    # -----------------------------------------------------------------------

    def render_inner_html(self) -> Element:
        if not self.records:
            return self.render_no_records()

        return self.render_listview()

    def render_listview(self) -> Element:
        """Run the rendering pipeline and return the ``table`` element."""
        headers = self.render_headers()
        cells = self.render_cells()

        self.alter_headers(headers)
        self.alter_cells(cells)

        columns_classes = self.resolve_columns_classes()

        decorated_headers = self.decorate_headers(headers, columns_classes)
        decorated_cells = self.decorate_cells(cells, columns_classes)

        self.alter_decorated_headers(decorated_headers)
        self.alter_decorated_cells(decorated_cells)

        rows = self.render_rows(decorated_cells)
        self.alter_rows(rows)

        return self.render_table(decorated_headers, rows)

    def resolve_columns_classes(self) -> dict[Hashable, str]:
        """Class names of each column: ``cell--<id>`` and the column ``class`` option."""
        return {
            column_id: join_class_names(
                {f"cell--{normalize(column_id)}": True, **split_class_names(column.class_name)}
            )
            for column_id, column in self.columns.items()
        }

    def render_headers(self) -> dict[Hashable, str | None]:
        """Render the column headers."""
        return {column_id: column.render_header() for column_id, column in self.columns.items()}

    def render_cells(self) -> dict[Hashable, list[str]]:
        """
        Render the cells of the columns.

        The returned mapping has the following layout::

            {<column_id>: [<cell_content>, ...]}

        A cell failing to render is replaced by the rendered exception.
        """
        records = self.records
        cells: dict[Hashable, list[str]] = {}

        for column_id, column in self.columns.items():
            column_cells: list[str] = []
            cells[column_id] = column_cells

            for record in records:
                try:
                    content = render_child(column.render_cell(record))
                except Exception as e:
                    logger.warning("Failed to render cell of column %s: %s", column_id, e)
                    content = render_exception(e)

                column_cells.append(content)

        return cells

    def alter_headers(self, headers: dict[Hashable, str | None]) -> None:
        """Alter headers content in place."""

    def alter_cells(self, cells: dict[Hashable, list[str]]) -> None:
        """Alter cells content in place."""

    def decorate_headers(
        self,
        headers: Mapping[Hashable, str | None],
        columns_classes: Mapping[Hashable, str],
    ) -> dict[Hashable, Element]:
        """Decorate headers content with ``th`` elements carrying the column classes."""
        decorated_headers: dict[Hashable, Element] = {}

        for column_id, content in headers.items():
            header = self.decorate_header(content, column_id)
            header.add_class(columns_classes.get(column_id))
            decorated_headers[column_id] = header

        return decorated_headers

    def decorate_header(self, content: str | None, column_id: Hashable) -> Element:
        """
        Decorate a header content with a ``th`` element.

        Args:
            content: Rendered header, the placeholder is used when empty
            column_id: Identifier of the column

        Returns:
            A ``th`` element with the class ``header--<column_id>``
        """
        return Element(
            "th",
            {
                Element.INNER_HTML: content or self.options.placeholder,
                "class": f"header--{normalize(column_id)}",
            },
        )

    def decorate_cells(
        self,
        cells: Mapping[Hashable, list[str]],
        columns_classes: Mapping[Hashable, str],
    ) -> dict[Hashable, list[Element]]:
        """Decorate cells content with ``td`` elements carrying the column classes."""
        return {
            column_id: [
                self.decorate_cell(content, column_id, columns_classes.get(column_id))
                for content in column_cells
            ]
            for column_id, column_cells in cells.items()
        }

    def decorate_cell(self, content: str, column_id: Hashable, class_name: str | None) -> Element:
        """Decorate a cell content with a ``td`` element."""
        return Element(
            "td",
            {
                Element.INNER_HTML: content or self.options.placeholder,
                "class": class_name,
            },
        )

    def alter_decorated_headers(self, decorated_headers: dict[Hashable, Element]) -> None:
        """Alter decorated headers in place."""

    def alter_decorated_cells(self, decorated_cells: dict[Hashable, list[Element]]) -> None:
        """Alter decorated cells in place."""

    def render_rows(self, decorated_cells: Mapping[Hashable, list[Element]]) -> list[Element]:
        """Render the rows as ``tr`` elements."""
        return [
            Element("tr", {Element.CHILDREN: cells})
            for cells in self.columns_to_rows(decorated_cells)
        ]

    def columns_to_rows(
        self, cells: Mapping[Hashable, Sequence[Any]]
    ) -> list[dict[Hashable, Any]]:
        """
        Convert per-column cells to per-row cells.

        Row ``i`` maps each column identifier to the ``i``-th cell of that
        column, in column order. Columns shorter than others leave the
        trailing rows without a cell for that column.
        """
        rows: dict[int, dict[Hashable, Any]] = {}

        for column_id, column_cells in cells.items():
            for i, cell in enumerate(column_cells):
                rows.setdefault(i, {})[column_id] = cell

        return [rows[i] for i in sorted(rows)]

    def alter_rows(self, rows: list[Element]) -> None:
        """Alter rendered rows in place."""

    def render_table(
        self,
        decorated_headers: Mapping[Hashable, Element],
        rows: list[Element],
    ) -> Element:
        """Render the ``table`` element from its head, foot and body."""
        return Element(
            "table",
            {
                Element.CHILDREN: [
                    self.render_head(decorated_headers),
                    self.render_foot(),
                    self.render_body(rows),
                ],
            },
        )

    def render_head(self, decorated_headers: Mapping[Hashable, Element]) -> Element:
        """Render the ``thead`` element, a single row of headers."""
        return Element(
            "thead",
            {Element.CHILDREN: [Element("tr", {Element.CHILDREN: decorated_headers})]},
        )

    def render_foot(self) -> Element | None:
        """Render the ``tfoot`` element. There is none by default."""
        return None

    def render_body(self, rows: list[Element]) -> Element:
        """Render the ``tbody`` element, its children are the rendered rows."""
        return Element("tbody", {Element.CHILDREN: rows})

    def render_no_records(self) -> Alert:
        """Render a notice when there is no record to render."""
        return Alert(
            self.options.empty_message,
            {
                Alert.CONTEXT: self.options.alert_context,
                "class": self.options.alert_class,
            },
        )


class RowListView(ListView):
    """A list view rendering rows.

    Rows are given with the ``#listview-rows`` attribute. Unlike
    ``ListView``, an empty collection renders a table with an empty body,
    and empty headers and cells are left empty.
    """

    ROWS = "#listview-rows"
    RECORDS = ROWS

    @property
    def rows(self) -> Sequence[Any]:
        """Rows to display."""
        return self.records

    def render_inner_html(self) -> Element:
        return self.render_listview()

    def decorate_header(self, content: str | None, column_id: Hashable) -> Element:
        return Element("th", {Element.INNER_HTML: content})

    def decorate_cell(self, content: str, column_id: Hashable, class_name: str | None) -> Element:
        return Element("td", {Element.INNER_HTML: content, "class": class_name})


Listview = RowListView
"""Alias of ``RowListView``."""
