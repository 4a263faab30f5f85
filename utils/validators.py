import re

EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def validate_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def normalize_email(email: str) -> str:
    """Trim and lowercase; uniqueness is checked against this form."""
    if email is None:
        return None
    return email.strip().lower()


def clean_text(value):
    """Trim a string field; blank becomes None, non-strings are returned unchanged."""
    if not isinstance(value, str):
        return value
    return value.strip() or None
