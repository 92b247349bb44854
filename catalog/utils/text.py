"""Text sanitizers shared by the catalog forms."""

from typing import Any

# Same characters (and entities) an HTML form sanitizer escapes; "&" must
# be replaced first.
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("/", "&#x2F;"),
    ("\\", "&#x5C;"),
    ("`", "&#96;"),
)


def escape(value: str) -> str:
    """Replace HTML-significant characters with their entities."""
    for char, entity in _HTML_ESCAPES:
        value = value.replace(char, entity)
    return value


def to_text(value: Any) -> str:
    """Coerce a raw form value to a string; missing values become ""."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        # Repeated scalar fields keep their first submitted value
        return to_text(value[0]) if value else ""
    return str(value)


def clean_text(value: Any) -> str:
    """Trim and escape a raw form value."""
    return escape(to_text(value).strip())


def is_alphanumeric(value: str) -> bool:
    """Check that a value is non-empty and only has ASCII letters/digits."""
    return value.isascii() and value.isalnum()


def normalize_selection(value: Any) -> list[str]:
    """
    Normalize a multi-select form value to a list of sanitized strings.

    A missing value becomes an empty selection and a single scalar becomes
    a one-element selection. Blank elements are dropped.
    """
    if value is None:
        return []
    if not isinstance(value, (list, tuple, set, frozenset)):
        value = [value]
    return [item for item in map(clean_text, value) if item]
