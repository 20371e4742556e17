"""
Field checks shared by the authentication request schemas.
"""

from typing import Optional

from email_validator import EmailNotValidError, validate_email


def require_text(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value


def require_email(value: Optional[str]) -> str:
    """Accept a syntactically valid address; no deliverability lookup."""
    if not value:
        raise ValueError("Please include a valid email")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError("Please include a valid email") from exc
    return value
