import pytest

from keysmith.validator import class_presence, is_password_valid


def test_alphanumeric_password():
    assert is_password_valid(True, True, True, False, False, "abcDEF123456")


def test_missing_required_special():
    assert not is_password_valid(True, True, True, True, False, "abcDEF123456")


def test_disabled_class_present():
    # digits present but numeric disabled
    assert not is_password_valid(True, True, False, False, False, "abcDEF123456")


def test_space_presence():
    assert is_password_valid(True, False, False, False, True, "abc defghijk")
    assert not is_password_valid(True, False, False, False, False, "abc defghijk")
    assert not is_password_valid(True, False, False, False, True, "abcdefghijkl")


def test_any_whitespace_counts_as_space():
    assert is_password_valid(True, False, False, False, True, "abc\tdefghijk")


def test_every_class():
    assert is_password_valid(True, True, True, True, True, "aB3 !xyzxyzx")


def test_all_disabled_only_accepts_unclassified():
    assert is_password_valid(False, False, False, False, False, "")
    assert not is_password_valid(False, False, False, False, False, "a")


@pytest.mark.parametrize("char", list("-~`!@#$%^&*_+=|:;',.?"))
def test_each_special_character_detected(char):
    presence = class_presence("abc" + char)
    assert presence["special"]
    assert presence["lowercase"]
    assert not presence["uppercase"]


def test_characters_outside_special_set():
    presence = class_presence("()[]{}<>/\"")
    assert presence == {
        "lowercase": False,
        "uppercase": False,
        "numeric": False,
        "special": False,
        "space": False,
    }


def test_non_ascii_digit_counts_as_numeric():
    # ARABIC-INDIC DIGIT ONE
    assert is_password_valid(True, False, True, False, False, "abcdefghijk١")
    assert not is_password_valid(True, False, False, False, False, "abcdefghijk١")
