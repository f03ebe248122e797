"""Rendering options for list views.

Options resolve from an explicit argument, then an environment variable,
then the built-in default:

- ``LISTVIEW_PLACEHOLDER``: content of empty headers and cells
- ``LISTVIEW_EMPTY_MESSAGE``: notice rendered when there is no record
- ``LISTVIEW_ALERT_CONTEXT``: context of that notice (info, warning, ...)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .element import Alert
from .exceptions import ValidationError

PLACEHOLDER_ENV_VAR = "LISTVIEW_PLACEHOLDER"
EMPTY_MESSAGE_ENV_VAR = "LISTVIEW_EMPTY_MESSAGE"
ALERT_CONTEXT_ENV_VAR = "LISTVIEW_ALERT_CONTEXT"

DEFAULT_PLACEHOLDER = "&nbsp;"
DEFAULT_EMPTY_MESSAGE = "There is no record to display."
DEFAULT_ALERT_CONTEXT = Alert.CONTEXT_INFO
DEFAULT_ALERT_CLASS = "alert alert-block listview-alert"


@dataclass(frozen=True)
class ListViewOptions:
    """
    Options controlling how a list view renders.

    Attributes:
        placeholder: Raw HTML used for headers and cells with empty content
        empty_message: Message of the notice rendered when there is no record
        alert_context: Context of the notice (see ``Alert.CONTEXTS``)
        alert_class: Class names of the notice
    """

    placeholder: str = DEFAULT_PLACEHOLDER
    empty_message: str = DEFAULT_EMPTY_MESSAGE
    alert_context: str = DEFAULT_ALERT_CONTEXT
    alert_class: str = DEFAULT_ALERT_CLASS

    def __post_init__(self) -> None:
        if self.alert_context not in Alert.CONTEXTS:
            raise ValidationError(
                "alert_context",
                self.alert_context,
                f"Must be one of: {', '.join(sorted(Alert.CONTEXTS))}",
            )
        if not self.empty_message:
            raise ValidationError("empty_message", self.empty_message, "Cannot be empty")

    @classmethod
    def from_env(
        cls,
        placeholder: str | None = None,
        empty_message: str | None = None,
        alert_context: str | None = None,
        alert_class: str | None = None,
    ) -> ListViewOptions:
        """Create options, falling back to ``LISTVIEW_*`` environment variables.

        Resolution order: explicit argument, then environment variable, then
        default. Empty environment variables count as unset, while an empty
        string is a valid explicit placeholder.
        """
        return cls(
            placeholder=_resolve(placeholder, PLACEHOLDER_ENV_VAR, DEFAULT_PLACEHOLDER),
            empty_message=_resolve(empty_message, EMPTY_MESSAGE_ENV_VAR, DEFAULT_EMPTY_MESSAGE),
            alert_context=_resolve(alert_context, ALERT_CONTEXT_ENV_VAR, DEFAULT_ALERT_CONTEXT),
            alert_class=alert_class if alert_class is not None else DEFAULT_ALERT_CLASS,
        )


def _resolve(value: str | None, env_var: str, default: str) -> str:
    if value is not None:
        return value
    return os.environ.get(env_var) or default
