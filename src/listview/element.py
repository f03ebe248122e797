"""
Markup elements.

This module provides the ``Element`` node used to build the list view
markup, and the ``Alert`` element used for notices.

Attributes are set with a mapping. Keys starting with ``#`` are private:
they configure the element and are never rendered as HTML attributes.

Example:
    >>> from listview.element import Element
    >>> cell = Element("td", {Element.INNER_HTML: "42", "class": "cell--age"})
    >>> cell.render()
    '<td class="cell--age">42</td>'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from html import escape
from typing import Any

from .exceptions import InvalidTagError, ValidationError
from .naming import join_class_names, split_class_names

TAG_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)
"""Tags rendered without inner HTML or closing tag."""


class Element:
    """A markup element.

    Args:
        tag: Tag name of the element (e.g. ``"td"``)
        attributes: Initial attributes. ``class`` accepts a string, an
            iterable of names or a mapping of names to flags.

    Raises:
        InvalidTagError: If ``tag`` is not a valid tag name
    """

    INNER_HTML = "#inner-html"
    """Raw HTML rendered as the content of the element."""

    CHILDREN = "#children"
    """Child elements, a list or a mapping. ``None`` children are skipped."""

    def __init__(self, tag: str, attributes: Mapping[str, Any] | None = None) -> None:
        if not isinstance(tag, str) or not TAG_PATTERN.match(tag):
            raise InvalidTagError(tag)

        self.tag = tag
        self._attributes: dict[str, Any] = {}
        self._class_names: dict[str, bool] = {}

        for key, value in (attributes or {}).items():
            self[key] = value

    # -----------------------------------------------------------------------
    # Attributes
    # -----------------------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        if key == "class":
            return self.class_name
        return self._attributes[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key == "class":
            self._class_names = split_class_names(value)
            return
        self._attributes[key] = value

    def __delitem__(self, key: str) -> None:
        if key == "class":
            self._class_names = {}
            return
        del self._attributes[key]

    def __contains__(self, key: object) -> bool:
        if key == "class":
            return bool(self._class_names)
        return key in self._attributes

    def get(self, key: str, default: Any = None) -> Any:
        """Return the attribute ``key``, or ``default`` if it is not set."""
        if key == "class":
            return self.class_name or default
        return self._attributes.get(key, default)

    @property
    def attributes(self) -> dict[str, Any]:
        """Copy of the attributes, private ones included."""
        return dict(self._attributes)

    # -----------------------------------------------------------------------
    # Class names
    # -----------------------------------------------------------------------

    def alter_class_names(self, class_names: dict[str, bool]) -> dict[str, bool]:
        """
        Alter the class names of the element before they are rendered.

        Subclasses extend the mapping with their own class names.

        Args:
            class_names: Class names assigned to the element

        Returns:
            The class names to render
        """
        return class_names

    @property
    def class_names(self) -> dict[str, bool]:
        """Class names of the element, as altered by ``alter_class_names``."""
        return self.alter_class_names(dict(self._class_names))

    @property
    def class_name(self) -> str:
        """Value of the ``class`` attribute."""
        return join_class_names(self.class_names)

    def add_class(self, names: Any) -> None:
        """Add one or more class names (space-separated string or iterable)."""
        for name in split_class_names(names):
            self._class_names[name] = True

    def remove_class(self, names: Any) -> None:
        """Remove one or more class names."""
        for name in split_class_names(names):
            self._class_names.pop(name, None)

    def has_class(self, name: str) -> bool:
        """Check whether the element renders with the class ``name``."""
        return self.class_names.get(name, False)

    # -----------------------------------------------------------------------
    # Children
    # -----------------------------------------------------------------------

    @property
    def children(self) -> list[Any]:
        """Children of the element in render order, ``None`` entries excluded."""
        children = self.get(self.CHILDREN)
        if children is None:
            return []
        if isinstance(children, Mapping):
            children = children.values()
        return [child for child in children if child is not None]

    # -----------------------------------------------------------------------
    # Rendering
    # -----------------------------------------------------------------------

    def render_attributes(self) -> str:
        """Render the public attributes, ``class`` first."""
        parts: list[str] = []

        class_name = self.class_name
        if class_name:
            parts.append(f'class="{escape(class_name, quote=True)}"')

        for name, value in self._attributes.items():
            if name.startswith("#") or value is None or value is False:
                continue
            if value is True:
                parts.append(name)
                continue
            parts.append(f'{name}="{escape(str(value), quote=True)}"')

        return " ".join(parts)

    def render_children(self) -> str:
        """Render the children of the element."""
        return "".join(render_child(child) for child in self.children)

    def render_inner_html(self) -> str | Element | None:
        """
        Render the content of the element.

        The ``#inner-html`` attribute wins over ``#children``.

        Returns:
            Raw HTML, an element to render, or ``None`` for no content
        """
        inner_html = self.get(self.INNER_HTML)
        if inner_html is not None:
            return inner_html
        if self.get(self.CHILDREN) is None:
            return None
        return self.render_children()

    def render(self) -> str:
        """Render the element as HTML."""
        attributes = self.render_attributes()
        opening = f"<{self.tag} {attributes}>" if attributes else f"<{self.tag}>"

        if self.tag.lower() in VOID_TAGS:
            return opening

        inner_html = self.render_inner_html()
        return f"{opening}{render_child(inner_html)}</{self.tag}>"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        class_name = self.class_name
        if class_name:
            return f"<{type(self).__name__} {self.tag}.{class_name.replace(' ', '.')}>"
        return f"<{type(self).__name__} {self.tag}>"


def render_child(child: Any) -> str:
    """Render a child: elements are rendered, ``None`` is empty, the rest is raw HTML."""
    if child is None:
        return ""
    if isinstance(child, Element):
        return child.render()
    return str(child)


class Alert(Element):
    """An alert notice.

    Example output:
        <div class="alert alert-info" role="alert">There is nothing here.</div>

    Args:
        message: Message of the alert. Strings are escaped, elements are
            rendered, a list renders one paragraph per message.
        attributes: Attributes of the ``div`` element

    Raises:
        ValidationError: If the ``#alert-context`` attribute is unknown
    """

    CONTEXT = "#alert-context"
    HEADING = "#alert-heading"

    CONTEXT_INFO = "info"
    CONTEXT_SUCCESS = "success"
    CONTEXT_WARNING = "warning"
    CONTEXT_DANGER = "danger"

    CONTEXTS = frozenset({CONTEXT_INFO, CONTEXT_SUCCESS, CONTEXT_WARNING, CONTEXT_DANGER})

    def __init__(self, message: Any, attributes: Mapping[str, Any] | None = None) -> None:
        self.message = message
        super().__init__("div", {"role": "alert", **(attributes or {})})

        context = self.get(self.CONTEXT)
        if context is not None and context not in self.CONTEXTS:
            raise ValidationError(
                "alert context",
                context,
                f"Must be one of: {', '.join(sorted(self.CONTEXTS))}",
            )

    def alter_class_names(self, class_names: dict[str, bool]) -> dict[str, bool]:
        class_names = super().alter_class_names(class_names)
        class_names.setdefault("alert", True)

        context = self.get(self.CONTEXT)
        if context:
            class_names.setdefault(f"alert-{context}", True)

        return class_names

    def render_inner_html(self) -> str:
        html = ""

        heading = self.get(self.HEADING)
        if heading:
            html += f'<h4 class="alert-heading">{escape(str(heading))}</h4>'

        message = self.message
        if isinstance(message, Element):
            html += message.render()
        elif isinstance(message, (list, tuple)):
            html += "".join(f"<p>{render_message(m)}</p>" for m in message)
        elif message is not None:
            html += escape(str(message))

        return html


def render_message(message: Any) -> str:
    """Render one alert message, escaping anything that is not an element."""
    if isinstance(message, Element):
        return message.render()
    return escape(str(message))
