"""Required Field Enforcement — presence checks only, no sanitization.

Invariants:
    - None, "" and whitespace-only strings are missing
    - False and 0 are present
    - Every missing field is named in the message, in order
"""

import pytest

from forum.core.enforce_fields import check_required, is_missing, missing_fields
from forum.core.errors import ValidationError


@pytest.mark.parametrize("value", [None, "", "   ", "\n\t"])
def test_blank_values_are_missing(value):
    assert is_missing(value)


@pytest.mark.parametrize("value", ["x", " padded ", False, 0, -1])
def test_real_values_are_present(value):
    assert not is_missing(value)


def test_missing_fields_preserves_order():
    assert missing_fields({"a": None, "b": "ok", "c": ""}) == ["a", "c"]


def test_check_required_passes_when_all_present():
    check_required("Question", {"title": "T", "description": "D"})


def test_check_required_names_every_missing_field():
    with pytest.raises(ValidationError) as exc_info:
        check_required("User", {"firstName": "", "lastName": "L", "email": None})
    err = exc_info.value
    assert err.fields == ["firstName", "email"]
    assert err.message == (
        "User validation failed: firstName is required, email is required"
    )


def test_check_required_does_not_alter_values():
    values = {"title": "  spaced  "}
    check_required("Question", values)
    assert values["title"] == "  spaced  "
