"""List view columns.

A column knows how to render its header and the cell of each record.
Columns are created by the list view from column definitions; subclass
``ListViewColumn`` to customize how a field is presented:

    class EmailColumn(ListViewColumn):
        def render_cell(self, record):
            email = escape(record["email"])
            return f'<a href="mailto:{email}">{email}</a>'
"""

from __future__ import annotations

import importlib
from collections.abc import Hashable, Mapping, Sequence
from html import escape
from typing import TYPE_CHECKING, Any

from .exceptions import ColumnClassNotFoundError

if TYPE_CHECKING:
    from .listview import ListView


class ListViewColumn:
    """Representation of a list view column.

    Args:
        listview: The list view the column belongs to
        column_id: Identifier of the column, also the field read from records
        options: Column options, merged over ``DEFAULT_OPTIONS``.
            ``class`` holds extra class names for the column cells,
            ``title`` the header content.

    The default column escapes both the title and the field value, so
    markup returned by ``get_value`` renders as text. Columns that produce
    markup override ``render_header`` or ``render_cell`` and return an
    ``Element`` or an already escaped string.
    """

    DEFAULT_OPTIONS: dict[str, Any] = {"class": None, "title": None}

    def __init__(
        self,
        listview: ListView,
        column_id: Hashable,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self._id = column_id
        self._listview = listview
        self._options = {**self.DEFAULT_OPTIONS, **(options or {})}

    @property
    def id(self) -> Hashable:
        return self._id

    @property
    def listview(self) -> ListView:
        return self._listview

    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    @property
    def class_name(self) -> str | None:
        """Extra class names of the column (the ``class`` option)."""
        return self._options["class"]

    @property
    def title(self) -> str | None:
        return self._options["title"]

    def render_header(self) -> str | None:
        """Render the header of the column, the escaped title."""
        title = self.title
        if title is None:
            return None
        return escape(str(title))

    def render_cell(self, record: Any) -> Any:
        """
        Render a cell of the column.

        Args:
            record: The record to render the cell for

        Returns:
            The escaped value of the field, an empty string for ``None``

        Raises:
            KeyError: If a mapping record has no such field
            AttributeError: If an object record has no such attribute
        """
        value = self.get_value(record)
        if value is None:
            return ""
        return escape(str(value))

    def get_value(self, record: Any) -> Any:
        """Read the field of the column from a mapping, sequence or object record."""
        if isinstance(record, Mapping):
            return record[self._id]
        # Positional rows, e.g. CSV lines, with integer column ids
        if isinstance(self._id, int) and isinstance(record, Sequence):
            if not isinstance(record, (str, bytes)):
                return record[self._id]
        return getattr(record, str(self._id))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._id!r}>"


def load_column_class(path: str) -> type[ListViewColumn]:
    """
    Load a column class from a dotted path.

    Both ``"package.module:Class"`` and ``"package.module.Class"`` are
    accepted.

    Args:
        path: Dotted path of the class

    Returns:
        The column class

    Raises:
        ColumnClassNotFoundError: If the module or class cannot be found, or
            if the object found is not a ``ListViewColumn`` subclass
    """
    if ":" in path:
        module_name, _, class_name = path.partition(":")
    else:
        module_name, _, class_name = path.rpartition(".")

    if not module_name or not class_name:
        raise ColumnClassNotFoundError(path, "Expected 'module:Class' or 'module.Class'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ColumnClassNotFoundError(path, f"Cannot import module '{module_name}': {e}") from e

    column_class = getattr(module, class_name, None)
    if column_class is None:
        raise ColumnClassNotFoundError(path, f"Module '{module_name}' has no '{class_name}'")

    if not (isinstance(column_class, type) and issubclass(column_class, ListViewColumn)):
        raise ColumnClassNotFoundError(path, "Not a ListViewColumn subclass")

    return column_class
