"""Tests for list view manifests."""

import pytest

from listview import ListView, ListViewColumn, ListViewOptions, RowListView
from listview.exceptions import ValidationError
from listview.manifest import KIND_ROWS, ColumnDecl, ListViewManifest


class TestColumnDecl:
    """Tests for ColumnDecl."""

    def test_null(self) -> None:
        """Null declares a column without title."""
        decl = ColumnDecl.from_value("notes", None)
        assert decl == ColumnDecl(id="notes")

    def test_title(self) -> None:
        """A scalar is the title."""
        assert ColumnDecl.from_value("name", "Name").title == "Name"
        assert ColumnDecl.from_value("year", 2024).title == "2024"

    def test_mapping(self) -> None:
        """A mapping declares options, unknown keys are kept."""
        decl = ColumnDecl.from_value(
            "score",
            {
                "title": "Score",
                "class": "is-number",
                "column": "listview.column:ListViewColumn",
                "precision": 2,
            },
        )
        assert decl.title == "Score"
        assert decl.class_name == "is-number"
        assert decl.column == "listview.column:ListViewColumn"
        assert decl.options == {"precision": 2}

    @pytest.mark.parametrize("value", [["Name"], True])
    def test_invalid_value_raises(self, value) -> None:
        """Other values are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ColumnDecl.from_value("name", value)
        assert exc_info.value.field == "columns.name"

    def test_class_list(self) -> None:
        """A list of class names is joined."""
        decl = ColumnDecl.from_value("name", {"class": ["strong", "is-name"]})
        assert decl.class_name == "strong is-name"

    @pytest.mark.parametrize("value", [42, ["strong", 1], {"strong": True}])
    def test_invalid_class_raises(self, value) -> None:
        """Column classes must be a string or a list of strings."""
        with pytest.raises(ValidationError) as exc_info:
            ColumnDecl.from_value("name", {"class": value})
        assert exc_info.value.field == "columns.name.class"

    def test_invalid_column_path_raises(self) -> None:
        """The column class must be given as a dotted path."""
        with pytest.raises(ValidationError, match="dotted path"):
            ColumnDecl.from_value("name", {"column": 42})

    def test_to_definition(self) -> None:
        """Declarations become (class, options) definitions."""
        decl = ColumnDecl.from_value("name", {"title": "Name", "precision": 2})
        assert decl.to_definition() == (
            ListViewColumn,
            {"precision": 2, "title": "Name", "class": None},
        )

    def test_to_dict(self) -> None:
        """Only declared keys are serialized."""
        decl = ColumnDecl.from_value("name", {"title": "Name", "class": "strong"})
        assert decl.to_dict() == {"title": "Name", "class": "strong"}


class TestListViewManifest:
    """Tests for ListViewManifest parsing."""

    def test_from_dict(self) -> None:
        """A minimal manifest declares columns and records."""
        manifest = ListViewManifest.from_dict(
            {"columns": {"name": "Name"}, "records": [{"name": "Alice"}]}
        )
        assert manifest.kind == "records"
        assert list(manifest.columns) == ["name"]
        assert manifest.records == [{"name": "Alice"}]
        assert manifest.class_name is None
        assert manifest.empty_message is None

    def test_records_default_to_empty(self) -> None:
        """Records are optional."""
        manifest = ListViewManifest.from_dict({"columns": {"name": "Name"}})
        assert manifest.records == []

    def test_not_a_mapping_raises(self) -> None:
        """The document must be a mapping."""
        with pytest.raises(ValidationError, match="manifest"):
            ListViewManifest.from_dict(["columns"])

    @pytest.mark.parametrize("columns", [None, {}, ["name"]])
    def test_columns_required(self, columns) -> None:
        """Columns must be a non-empty mapping."""
        with pytest.raises(ValidationError, match="'columns' is required"):
            ListViewManifest.from_dict({"columns": columns})

    def test_records_must_be_list(self) -> None:
        """Records must be a list."""
        with pytest.raises(ValidationError) as exc_info:
            ListViewManifest.from_dict({"columns": {"name": "Name"}, "records": {"a": 1}})
        assert exc_info.value.field == "records"

    def test_unknown_kind_raises(self) -> None:
        """Only records and rows kinds are supported."""
        with pytest.raises(ValidationError, match="Must be one of: records, rows"):
            ListViewManifest.from_dict({"kind": "cards", "columns": {"name": "Name"}})

    def test_class_list(self) -> None:
        """The view class accepts a list of class names."""
        manifest = ListViewManifest.from_dict(
            {"class": ["people", "compact"], "columns": {"name": "Name"}}
        )
        assert manifest.class_name == "people compact"

    @pytest.mark.parametrize("value", [42, True, ["people", None]])
    def test_invalid_class_raises(self, value) -> None:
        """The view class must be a string or a list of strings."""
        with pytest.raises(ValidationError) as exc_info:
            ListViewManifest.from_dict({"class": value, "columns": {"name": "Name"}})
        assert exc_info.value.field == "class"

    def test_empty_message_must_be_string(self) -> None:
        """The empty message must be a string."""
        with pytest.raises(ValidationError):
            ListViewManifest.from_dict({"columns": {"name": "Name"}, "empty_message": 3})

    def test_from_yaml(self) -> None:
        """YAML documents are parsed."""
        manifest = ListViewManifest.from_yaml(
            """
kind: rows
class: people
columns:
  name: Name
  email:
    title: E-mail
    class: is-email
records:
  - {name: Alice, email: alice@example.com}
"""
        )
        assert manifest.kind == KIND_ROWS
        assert manifest.class_name == "people"
        assert manifest.columns["email"].class_name == "is-email"

    def test_from_json(self) -> None:
        """JSON documents are accepted."""
        manifest = ListViewManifest.from_yaml(
            '{"columns": {"name": "Name"}, "records": [{"name": "Alice"}]}'
        )
        assert manifest.records == [{"name": "Alice"}]

    def test_invalid_yaml_raises(self) -> None:
        """Malformed YAML is reported as a validation error."""
        with pytest.raises(ValidationError, match="Invalid YAML"):
            ListViewManifest.from_yaml("columns: [name")

    def test_load(self, write_manifest) -> None:
        """Manifests are loaded from files."""
        path = write_manifest({"columns": {"name": "Name"}, "records": [{"name": "Alice"}]})
        manifest = ListViewManifest.load(path)
        assert manifest.records == [{"name": "Alice"}]

    def test_load_invalid_encoding(self, tmp_path) -> None:
        """Files that are not UTF-8 are reported as validation errors."""
        path = tmp_path / "listview.yaml"
        path.write_bytes(b"columns:\n  name: \xff\xfe\n")
        with pytest.raises(ValidationError, match="Not valid UTF-8"):
            ListViewManifest.load(path)

    def test_to_dict(self) -> None:
        """Manifests serialize back to their document form."""
        data = {
            "kind": "records",
            "class": "people",
            "columns": {"name": {"title": "Name"}},
            "records": [{"name": "Alice"}],
        }
        assert ListViewManifest.from_dict(data).to_dict() == data


class TestBuild:
    """Tests for ListViewManifest.build."""

    def test_build_records_view(self) -> None:
        """The records kind builds a ListView."""
        manifest = ListViewManifest.from_dict(
            {
                "class": "people",
                "columns": {"name": "Name", "email": {"title": "E-mail", "class": "is-email"}},
                "records": [{"name": "Alice", "email": "alice@example.com"}],
            }
        )

        view = manifest.build(ListViewOptions())

        assert type(view) is ListView
        assert view.class_name == "people listview"
        assert view.columns["email"].class_name == "is-email"
        assert '<td class="cell--email is-email">alice@example.com</td>' in view.render()

    def test_build_rows_view(self) -> None:
        """The rows kind builds a RowListView."""
        manifest = ListViewManifest.from_dict({"kind": "rows", "columns": {"name": "Name"}})

        view = manifest.build(ListViewOptions())

        assert type(view) is RowListView
        assert "<tbody></tbody>" in view.render()

    def test_build_column_class_path(self) -> None:
        """Declared column classes are loaded."""
        manifest = ListViewManifest.from_dict(
            {"columns": {"name": {"column": "listview.column.ListViewColumn"}}}
        )
        view = manifest.build(ListViewOptions())
        assert type(view.columns["name"]) is ListViewColumn

    def test_empty_message_overrides_options(self) -> None:
        """The manifest empty message replaces the one of the options."""
        manifest = ListViewManifest.from_dict(
            {"columns": {"name": "Name"}, "empty_message": "Nobody yet."}
        )

        view = manifest.build(ListViewOptions(placeholder="-"))

        assert view.options.empty_message == "Nobody yet."
        assert view.options.placeholder == "-"
        assert "Nobody yet." in view.render()

    def test_default_options_from_env(self, monkeypatch) -> None:
        """Without options the environment is read."""
        monkeypatch.setenv("LISTVIEW_EMPTY_MESSAGE", "Empty.")
        manifest = ListViewManifest.from_dict({"columns": {"name": "Name"}})
        assert manifest.build().options.empty_message == "Empty."
