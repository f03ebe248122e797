"""CSS class name utilities.

Column identifiers end up in class names such as ``cell--<id>`` and
``header--<id>``. This module turns arbitrary identifiers into safe class
name fragments and manipulates the ordered class name sets carried by
elements:

- ``normalize`` transliterates to ASCII, lowercases and hyphenates
- ``split_class_names`` parses the accepted ``class`` attribute forms
- ``join_class_names`` renders the enabled names as an attribute value
"""

import re
import unicodedata
from collections.abc import Iterable, Mapping
from typing import Any

DEFAULT_SEPARATOR = "-"
"""Separator inserted in place of non-alphanumeric runs by ``normalize``."""

# Runs of characters that cannot appear in a normalized name
_NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9]+")


def normalize(text: Any, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Normalize a string so it can be used in a class name or identifier.

    Accents are dropped, the text is lowercased and every run of
    non-alphanumeric characters is replaced by ``separator``.

    Args:
        text: Text to normalize, non-string values are converted with ``str()``
        separator: Replacement for non-alphanumeric runs

    Returns:
        Normalized text, without leading or trailing separators

    Example:
        >>> normalize("Créé le")
        'cree-le'
        >>> normalize("first_name", separator="_")
        'first_name'
    """
    if not isinstance(text, str):
        text = str(text)

    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    normalized = _NON_ALNUM_PATTERN.sub(separator, ascii_text.lower())

    if separator:
        normalized = normalized.strip(separator)

    return normalized


def split_class_names(value: Any) -> dict[str, bool]:
    """
    Parse a ``class`` attribute value into an ordered name mapping.

    Accepts ``None``, a space-separated string, an iterable of strings or
    a mapping of names to flags.

    Args:
        value: Class names in any of the accepted forms

    Returns:
        Mapping of class name to enabled flag, in first occurrence order

    Raises:
        TypeError: If the value is of an unsupported type
    """
    class_names: dict[str, bool] = {}

    if value is None:
        return class_names

    if isinstance(value, str):
        for name in value.split():
            class_names.setdefault(name, True)
        return class_names

    if isinstance(value, Mapping):
        for names, enabled in value.items():
            for name in str(names).split():
                class_names[name] = bool(enabled)
        return class_names

    if isinstance(value, Iterable):
        for item in value:
            if item is None:
                continue
            for name in str(item).split():
                class_names.setdefault(name, True)
        return class_names

    raise TypeError(f"Unsupported class names value: {type(value).__name__}")


def join_class_names(class_names: Mapping[str, bool]) -> str:
    """Render the enabled class names as a space-separated string."""
    return " ".join(name for name, enabled in class_names.items() if enabled)
