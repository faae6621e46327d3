"""Input checks shared by the domain services."""

from typing import Optional

from core.exceptions import InvalidRequestError


def require_text(value: Optional[str]) -> str:
    """Trim a required text field; blank values are rejected."""
    cleaned = value.strip() if value is not None else ""
    if not cleaned:
        raise InvalidRequestError()
    return cleaned
