import pytest

from app.utils.validation_helpers import (
    canonicalize_email,
    coerce_to_str,
    is_email,
    is_mobile_phone
)


@pytest.mark.parametrize("email", [
    "user@example.com",
    "User@Example.COM",
    "john.doe+tasks@googlemail.com",
])
def test_is_email_accepts_valid_addresses(email):
    assert is_email(email)


@pytest.mark.parametrize("email", [
    "",
    "not-an-email",
    "user@",
    "@example.com",
    "user@localhost",
    "two@@example.com",
    " a@b.com ",
    "a@b.com\n",
    "\tjane@example.com",
])
def test_is_email_rejects_invalid_addresses(email):
    assert not is_email(email)


@pytest.mark.parametrize("email, expected", [
    ("User@Example.COM", "user@example.com"),
    ("John.Doe+tasks@GoogleMail.com", "johndoe@gmail.com"),
    ("jane+work@outlook.com", "jane@outlook.com"),
    ("Bob-news@yahoo.com", "bob@yahoo.com"),
    ("amy+x@icloud.com", "amy@icloud.com"),
    ("first.last+keep@example.org", "first.last+keep@example.org"),
])
def test_canonicalize_email(email, expected):
    assert canonicalize_email(email) == expected


def test_canonicalize_email_is_idempotent():
    once = canonicalize_email("John.Doe+tasks@GoogleMail.com")
    assert canonicalize_email(once) == once


def test_is_mobile_phone_accepts_international_numbers():
    assert is_mobile_phone("+2348021234567")
    assert is_mobile_phone("+447400123456")


def test_is_mobile_phone_uses_regions_for_national_numbers():
    assert not is_mobile_phone("07400123456")
    assert is_mobile_phone("07400123456", regions=("GB",))


@pytest.mark.parametrize("value", ["", "12345", "phone-number", "+"])
def test_is_mobile_phone_rejects_garbage(value):
    assert not is_mobile_phone(value, regions=("NG", "GB"))


def test_coerce_to_str():
    assert coerce_to_str(None) == ""
    assert coerce_to_str("abc") == "abc"
    assert coerce_to_str(123456) == "123456"
    assert coerce_to_str(True) is None
    assert coerce_to_str({"$ne": ""}) is None
    assert coerce_to_str(["a"]) is None
