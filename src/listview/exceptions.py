"""Exceptions for listview."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class ListViewError(Exception):
    """
    Base exception for all listview errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ColumnError(ListViewError):
    """
    Base exception for column-related errors.

    This includes malformed column definitions and column classes that
    cannot be located.
    """

    pass


class MarkupError(ListViewError):
    """
    Base exception for markup-related errors.

    This includes invalid tag names given to elements.
    """

    pass


# ---------------------------------------------------------------------------
# Column Exceptions
# ---------------------------------------------------------------------------


class ColumnDefinitionError(ColumnError):
    """
    Raised when a column definition cannot be resolved.

    A definition must be a column class, a dotted path to one, or a
    ``(class, options)`` pair.

    Attributes:
        column_id: Identifier of the offending column
        definition: The definition as given
    """

    def __init__(self, column_id: Any, definition: Any) -> None:
        self.column_id = column_id
        self.definition = definition
        super().__init__(
            f"Expected column definition for {column_id!r} to be a string, "
            f"a column class or a (class, options) pair, "
            f"got {type(definition).__name__}"
        )


class ColumnClassNotFoundError(ColumnError):
    """Raised when a dotted path does not lead to a column class."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to load column class '{path}': {reason}")


# ---------------------------------------------------------------------------
# Markup Exceptions
# ---------------------------------------------------------------------------


class InvalidTagError(MarkupError):
    """Raised when an element is created with an invalid tag name."""

    def __init__(self, tag: Any) -> None:
        self.tag = tag
        super().__init__(f"Invalid tag name: {tag!r}")


# ---------------------------------------------------------------------------
# Validation Exceptions
# ---------------------------------------------------------------------------


class ValidationError(ListViewError):
    """
    Raised when user input fails validation.

    Attributes:
        field: Name of the field that failed validation
        value: The invalid value
        reason: Human readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
