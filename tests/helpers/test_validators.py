import pytest

from utils.validators import clean_text, normalize_email, validate_email


@pytest.mark.parametrize("raw, expected", [
    ("  Smoke  ", "Smoke"),
    ("   ", None),
    ("", None),
    (None, None),
    (12, 12),
])
def test_clean_text(raw, expected):
    assert clean_text(raw) == expected


def test_email_helpers():
    assert normalize_email("  Bob@Example.COM ") == "bob@example.com"
    assert validate_email("bob@example.com")
    assert not validate_email("bob@")
