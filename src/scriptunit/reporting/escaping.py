"""String escaping for hand-built JSON/YAML and XML fragments."""

from __future__ import annotations

_JSON_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)

_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_json(value: str) -> str:
    """Escape backslash, double quote, newline, carriage return and tab."""
    for raw, escaped in _JSON_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def escape_xml(value: str) -> str:
    """Escape the five XML special characters; ``&`` goes first."""
    for raw, escaped in _XML_ESCAPES:
        value = value.replace(raw, escaped)
    return value
