"""
listview: HTML list views rendered from column definitions and records.

This library renders collections of records as HTML tables with:
- Column definitions resolved into column objects (classes or dotted paths)
- CSS class decoration per column (``cell--<id>``, ``header--<id>``)
- Override points at every rendering stage (``alter_*``, ``decorate_*``)
- A notice instead of a table when there is no record
- YAML manifests and a ``listview`` command line

Example:
    from listview import ListView, ListViewColumn

    class EmailColumn(ListViewColumn):
        def render_cell(self, record):
            email = super().render_cell(record)
            return f'<a href="mailto:{email}">{email}</a>'

    view = ListView({
        ListView.COLUMNS: {
            "name": (ListViewColumn, {"title": "Name"}),
            "email": (EmailColumn, {"title": "E-mail", "class": "is-email"}),
        },
        ListView.RECORDS: [
            {"name": "Alice", "email": "alice@example.com"},
        ],
    })

    html = view.render()
"""

from importlib.metadata import PackageNotFoundError, version

from .column import ListViewColumn, load_column_class
from .config import ListViewOptions
from .element import Alert, Element
from .exceptions import (
    ColumnClassNotFoundError,
    ColumnDefinitionError,
    ColumnError,
    InvalidTagError,
    ListViewError,
    MarkupError,
    ValidationError,
)
from .listview import Listview, ListView, RowListView
from .manifest import ColumnDecl, ListViewManifest
from .naming import normalize
from .rendering import render_exception

try:
    __version__ = version("listview")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Widgets
    "ListView",
    "RowListView",
    "Listview",
    "ListViewColumn",
    "ListViewOptions",
    # Markup
    "Element",
    "Alert",
    # Manifests
    "ListViewManifest",
    "ColumnDecl",
    # Helpers
    "load_column_class",
    "normalize",
    "render_exception",
    # Exceptions - Base
    "ListViewError",
    # Exceptions - Categories
    "ColumnError",
    "MarkupError",
    # Exceptions - Column
    "ColumnDefinitionError",
    "ColumnClassNotFoundError",
    # Exceptions - Markup
    "InvalidTagError",
    # Exceptions - Validation
    "ValidationError",
]
