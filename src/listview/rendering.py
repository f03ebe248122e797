"""Inline rendering of errors raised while rendering content."""

from html import escape


def render_exception(exc: BaseException) -> str:
    """
    Render an exception as inline HTML.

    Used in place of content that failed to render, so that a single bad
    value does not prevent the rest of the markup from being produced.

    Args:
        exc: The exception to render

    Returns:
        Escaped HTML fragment, e.g.
        ``<code class="exception">KeyError: &#x27;email&#x27;</code>``
    """
    message = str(exc)
    label = type(exc).__name__
    text = f"{label}: {message}" if message else label
    return f'<code class="exception">{escape(text)}</code>'
