import pytest

from campusconnect.utils.validation_utils import (
    STUDENT_ID_VALIDATOR,
    Validator,
    filter_catalog,
    min_length_validator,
    parse_choices,
    parse_index,
)

CATALOG = ["Sports", "Coding", "Music", "Debate"]
UNIVERSITIES = ["IBA Karachi", "LUMS Lahore", "NED University", "Sukkur IBA"]


def test_parse_choices_keeps_input_order():
    assert parse_choices("1,2", CATALOG) == ["Sports", "Coding"]
    assert parse_choices("3,1", CATALOG) == ["Music", "Sports"]


def test_parse_choices_drops_malformed_tokens():
    assert parse_choices("1,abc,99,2", CATALOG) == ["Sports", "Coding"]
    assert parse_choices("0,-1,5", CATALOG) == []


def test_parse_choices_keeps_duplicates():
    assert parse_choices("2,2", CATALOG) == ["Coding", "Coding"]


def test_parse_choices_tolerates_spaces_and_empty_input():
    assert parse_choices(" 1 , 4", CATALOG) == ["Sports", "Debate"]
    assert parse_choices("", CATALOG) == []
    assert parse_choices(",,", CATALOG) == []


def test_parse_index():
    assert parse_index("1", 2) == 0
    assert parse_index(" 2 ", 2) == 1
    assert parse_index("3", 2) is None
    assert parse_index("0", 2) is None
    assert parse_index("x", 2) is None
    assert parse_index("", 2) is None


@pytest.mark.parametrize("query", ["iba", "IBA", "Iba"])
def test_filter_catalog_is_case_insensitive(query):
    assert filter_catalog(query, UNIVERSITIES) == ["IBA Karachi", "Sukkur IBA"]


def test_filter_catalog_empty_query_returns_everything_in_order():
    assert filter_catalog("", UNIVERSITIES) == UNIVERSITIES


def test_filter_catalog_no_match():
    assert filter_catalog("oxford", UNIVERSITIES) == []


@pytest.mark.parametrize("value", ["", "ab"])
def test_student_id_validator_rejects_short_ids(value):
    assert not STUDENT_ID_VALIDATOR.is_valid(value)
    assert STUDENT_ID_VALIDATOR.message() == "ID too short. Try again."


@pytest.mark.parametrize("value", ["abc", "student42"])
def test_student_id_validator_accepts_long_enough_ids(value):
    assert STUDENT_ID_VALIDATOR.is_valid(value)


def test_min_length_validator_default_message():
    validator = min_length_validator(5)
    assert not validator.is_valid("abcd")
    assert validator.is_valid("abcde")
    assert validator.message() == "Must be at least 5 characters."


def test_custom_validator():
    digits_only = Validator(str.isdigit, "Digits only.")
    assert digits_only.is_valid("123")
    assert not digits_only.is_valid("12a")


def test_parse_choices_accepts_plain_digits_only():
    options = [f"o{i}" for i in range(1, 13)]
    assert parse_choices("1_0,+2,٣,3", options) == ["o3"]


@pytest.mark.parametrize("text", ["+1", "1_0", "١", "1.0", "-1"])
def test_parse_index_rejects_non_ascii_digit_forms(text):
    assert parse_index(text, 12) is None
