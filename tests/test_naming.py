"""Tests for name grammars and the reserved-word validator."""

from __future__ import annotations

import pytest

from classforge.core.errors import InvalidArgumentError
from classforge.core.naming import (
    VALID_CLASS_NAME_REGEX,
    VALID_ENUM_CONSTANT_NAME_REGEX,
    VALID_PACKAGE_NAME_REGEX,
    NameValidator,
    is_valid_class_name,
    is_valid_enum_constant_name,
    is_valid_package_name,
)
from classforge.languages.java.naming import JAVA_RESERVED_KEYWORDS, create_java_validator


@pytest.mark.parametrize("name", ["Foo", "F", "Foo_Bar9", "FOO"])
def test_valid_class_names(name):
    assert is_valid_class_name(name)


@pytest.mark.parametrize("name", [None, "", "foo", "_Foo", "9Foo", "Foo-Bar", "Foo\n", 42])
def test_invalid_class_names(name):
    assert not is_valid_class_name(name)


@pytest.mark.parametrize("name", [None, "", "  ", "a", "a.b", "com.example_1.v2"])
def test_valid_package_names(name):
    assert is_valid_package_name(name)


@pytest.mark.parametrize("name", [".a", "a.", "a..b", "a-b", "a.b\n"])
def test_invalid_package_names(name):
    assert not is_valid_package_name(name)


@pytest.mark.parametrize("name", ["A", "a", "VALUE_1", "_1", "__x", "camelCase"])
def test_valid_enum_constant_names(name):
    assert is_valid_enum_constant_name(name)


@pytest.mark.parametrize("name", [None, "", "_", "__", "1A", "A-B"])
def test_invalid_enum_constant_names(name):
    assert not is_valid_enum_constant_name(name)


def test_validator_messages_carry_key_and_regex():
    validator = create_java_validator()

    with pytest.raises(InvalidArgumentError) as excinfo:
        validator.validate_class_name("lower")
    assert str(excinfo.value) == f"`simple_name` MUST match the RegEx `{VALID_CLASS_NAME_REGEX}`"
    assert excinfo.value.key == "simple_name"

    with pytest.raises(InvalidArgumentError, match="namespace"):
        validator.validate_package_name("a..b")

    with pytest.raises(InvalidArgumentError, match="enum_constant_name"):
        validator.validate_enum_constant_name("1A")


def test_output_root_must_not_be_none():
    with pytest.raises(InvalidArgumentError, match="`output_root` MUST NOT be `None`"):
        create_java_validator().validate_output_root(None)


@pytest.mark.parametrize("keyword", sorted(JAVA_RESERVED_KEYWORDS))
def test_java_keywords_rejected_as_constant_names(keyword):
    with pytest.raises(InvalidArgumentError, match="reserved Java keyword"):
        create_java_validator().validate_enum_constant_name(keyword)


def test_injected_keyword_table_applies_to_class_names():
    validator = NameValidator({"Object"}, "Custom")

    with pytest.raises(InvalidArgumentError, match="reserved Custom keyword"):
        validator.validate_class_name("Object")
    validator.validate_class_name("Thing")


def test_regex_constants_are_exposed():
    assert VALID_PACKAGE_NAME_REGEX == r"^[A-Za-z_0-9]+(\.[A-Za-z_0-9]+)*$"
    assert VALID_ENUM_CONSTANT_NAME_REGEX == r"^([A-Za-z]|(_+[A-Za-z0-9]))[A-Z_a-z0-9]*$"
