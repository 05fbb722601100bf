import pytest

from taobei_auth.application.phone import is_valid_phone, normalize_phone


@pytest.mark.parametrize("phone", ["13800138000", "19912345678", "10000000000", "  13800138000  ", "13800138000\n"])
def test_accepts_eleven_digits_starting_with_one(phone):
    assert is_valid_phone(phone) is True


@pytest.mark.parametrize("phone", [
    "",
    "123",
    "23800138000",       # wrong leading digit
    "1380013800",        # 10 digits
    "138001380001",      # 12 digits
    "1380013800a",
    "+8613800138000",
    "138 0013 8000",
    "1\uff13\uff18\uff10\uff10\uff11\uff13\uff18\uff10\uff10\uff10",  # fullwidth digits
    "1\u0663\u0668\u0660\u0660\u0661\u0663\u0668\u0660\u0660\u0660",  # Arabic-Indic digits
    "\u0661\u0663\u0668\u0660\u0660\u0661\u0663\u0668\u0660\u0660\u0660",
    None,
    13800138000,
])
def test_rejects_malformed(phone):
    assert is_valid_phone(phone) is False


def test_normalize_strips_whitespace():
    assert normalize_phone(" 13800138000 ") == "13800138000"
