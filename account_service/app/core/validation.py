"""Small input validation helpers."""

from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """Return ``True`` if ``value`` is ``None`` or only whitespace."""
    return value is None or not value.strip()
