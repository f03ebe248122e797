"""YAML manifest parsing and validation for list views.

A manifest describes the columns and records of a list view. JSON is
accepted too, being a subset of YAML:

    kind: records
    class: people
    columns:
      name: Name
      email:
        title: E-mail
        class: is-email
      score:
        column: myapp.columns:ScoreColumn
        title: Score
    records:
      - {name: Alice, email: alice@example.com, score: 3}
"""

from __future__ import annotations

import dataclasses
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .column import ListViewColumn
from .config import ListViewOptions
from .exceptions import ValidationError
from .listview import ListView, RowListView

KIND_RECORDS = "records"
KIND_ROWS = "rows"

VIEW_CLASSES: dict[str, type[ListView]] = {
    KIND_RECORDS: ListView,
    KIND_ROWS: RowListView,
}

# Keys of a column mapping that are not passed through as column options
_COLUMN_KEYS = ("column", "title", "class")


def _parse_class(field_name: str, value: Any) -> str | None:
    """Validate a ``class`` value, a string or a list of strings."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return " ".join(value)
    raise ValidationError(field_name, value, "Must be a string or a list of strings")


@dataclass(frozen=True)
class ColumnDecl:
    """A single column declaration.

    ``column`` is the dotted path of the column class, ``ListViewColumn``
    when omitted. Keys other than ``column``, ``title`` and ``class`` are
    kept in ``options`` and handed to the column.
    """

    id: Hashable
    title: str | None = None
    class_name: str | None = None
    column: str | None = None
    options: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_value(cls, column_id: Hashable, value: Any) -> ColumnDecl:
        if value is None:
            return cls(id=column_id)

        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return cls(id=column_id, title=str(value))

        if isinstance(value, Mapping):
            column = value.get("column")
            if column is not None and not isinstance(column, str):
                raise ValidationError(
                    f"columns.{column_id}.column",
                    column,
                    "Must be a dotted path such as 'package.module:Class'",
                )
            title = value.get("title")
            return cls(
                id=column_id,
                title=str(title) if title is not None else None,
                class_name=_parse_class(f"columns.{column_id}.class", value.get("class")),
                column=column,
                options={k: v for k, v in value.items() if k not in _COLUMN_KEYS},
            )

        raise ValidationError(
            f"columns.{column_id}",
            value,
            "Must be a title, a mapping of column options or null",
        )

    def to_definition(self) -> tuple[type[ListViewColumn] | str, dict[str, Any]]:
        """Column definition as understood by ``ListView.resolve_columns``."""
        options = {**self.options, "title": self.title, "class": self.class_name}
        return (self.column or ListViewColumn, options)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = dict(self.options)
        if self.column is not None:
            result["column"] = self.column
        if self.title is not None:
            result["title"] = self.title
        if self.class_name is not None:
            result["class"] = self.class_name
        return result


@dataclass(frozen=True)
class ListViewManifest:
    """Parsed manifest describing a list view."""

    columns: dict[Hashable, ColumnDecl]
    records: list[Any] = field(default_factory=list)
    kind: str = KIND_RECORDS
    class_name: str | None = None
    empty_message: str | None = None

    @classmethod
    def from_dict(cls, d: Any) -> ListViewManifest:
        if not isinstance(d, Mapping):
            raise ValidationError("manifest", d, "Must be a mapping")

        kind = d.get("kind", KIND_RECORDS)
        if kind not in VIEW_CLASSES:
            raise ValidationError(
                "kind",
                kind,
                f"Must be one of: {', '.join(sorted(VIEW_CLASSES))}",
            )

        columns_data = d.get("columns")
        if not isinstance(columns_data, Mapping) or not columns_data:
            raise ValidationError(
                "columns",
                columns_data,
                "'columns' is required and must be a non-empty mapping",
            )

        records = d.get("records")
        if records is None:
            records = []
        if not isinstance(records, list):
            raise ValidationError("records", records, "Must be a list")

        empty_message = d.get("empty_message")
        if empty_message is not None and not isinstance(empty_message, str):
            raise ValidationError("empty_message", empty_message, "Must be a string")

        return cls(
            columns={
                column_id: ColumnDecl.from_value(column_id, value)
                for column_id, value in columns_data.items()
            },
            records=records,
            kind=kind,
            class_name=_parse_class("class", d.get("class")),
            empty_message=empty_message,
        )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> ListViewManifest:
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ValidationError("manifest", None, f"Invalid YAML: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: str | Path) -> ListViewManifest:
        """Load a manifest from a YAML or JSON file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError("manifest", str(path), f"Not valid UTF-8: {e}") from e
        return cls.from_yaml(text)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"kind": self.kind}
        if self.class_name is not None:
            result["class"] = self.class_name
        if self.empty_message is not None:
            result["empty_message"] = self.empty_message
        result["columns"] = {column_id: decl.to_dict() for column_id, decl in self.columns.items()}
        result["records"] = list(self.records)
        return result

    def build(self, options: ListViewOptions | None = None) -> ListView:
        """
        Build the list view described by the manifest.

        Args:
            options: Rendering options, ``ListViewOptions.from_env()`` by
                default. The manifest ``empty_message`` takes precedence.

        Returns:
            A ``ListView``, or a ``RowListView`` for the ``rows`` kind
        """
        if options is None:
            options = ListViewOptions.from_env()
        if self.empty_message:
            options = dataclasses.replace(options, empty_message=self.empty_message)

        view_class = VIEW_CLASSES[self.kind]
        attributes: dict[str, Any] = {
            view_class.COLUMNS: {
                column_id: decl.to_definition() for column_id, decl in self.columns.items()
            },
            view_class.RECORDS: list(self.records),
        }
        if self.class_name:
            attributes["class"] = self.class_name

        return view_class(attributes, options=options)
