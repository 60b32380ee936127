"""Tests for enum generation and constant management."""

from __future__ import annotations

from pathlib import Path

import pytest

from classforge import (
    ClassType,
    ConflictError,
    DeserializingMethod,
    EnumBuilder,
    InvalidArgumentError,
    MatchingStrategy,
    NoMatchStrategy,
    NullStrategy,
    new_enum_builder,
)


# ----- add_constants -----


def test_add_constants_preserves_order(enum_builder):
    enum_builder.add_constants("B", "A").add_constants("C")
    assert enum_builder.constants == ("B", "A", "C")


@pytest.mark.parametrize("names", [(), (None,), ("A", None)])
def test_add_constants_requires_names(enum_builder, names):
    with pytest.raises(InvalidArgumentError, match="`enum_constant_names` MUST NOT be `None` or empty"):
        enum_builder.add_constants(*names)


def test_add_constants_rejects_duplicates_in_call(enum_builder):
    with pytest.raises(InvalidArgumentError, match="duplicates"):
        enum_builder.add_constants("A", "A")
    assert enum_builder.constants == ()


def test_add_constants_is_atomic(enum_builder):
    enum_builder.add_constants("A")

    with pytest.raises(InvalidArgumentError):
        enum_builder.add_constants("B", "1bad", "C")
    with pytest.raises(InvalidArgumentError, match="reserved Java keyword"):
        enum_builder.add_constants("D", "class")

    assert enum_builder.constants == ("A",)


def test_add_existing_constant_conflicts(enum_builder):
    enum_builder.add_constants("A")

    with pytest.raises(ConflictError, match="`enum constant` named `A` already exists"):
        enum_builder.add_constants("B", "A")
    assert enum_builder.constants == ("A",)


# ----- remove_constants -----


def test_remove_constants(enum_builder):
    enum_builder.add_constants("A", "B", "C", "D")
    enum_builder.remove_constants("D", "B")
    assert enum_builder.constants == ("A", "C")


@pytest.mark.parametrize("names", [(), (None,)])
def test_remove_constants_requires_names(enum_builder, names):
    with pytest.raises(InvalidArgumentError, match="enum_constant_names"):
        enum_builder.remove_constants(*names)


def test_remove_absent_constant_is_atomic(enum_builder):
    enum_builder.add_constants("A", "B")

    with pytest.raises(ConflictError, match="`enum constant` named `X` does not exist"):
        enum_builder.remove_constants("A", "X")
    assert enum_builder.constants == ("A", "B")


# ----- update_constant -----


def test_update_constant_keeps_position(enum_builder):
    enum_builder.add_constants("A", "B").add_constants("C")
    enum_builder.update_constant("B", "Z")
    assert enum_builder.constants == ("A", "Z", "C")


def test_update_constant_violations(enum_builder):
    enum_builder.add_constants("A", "B")

    with pytest.raises(InvalidArgumentError, match="old_enum_constant"):
        enum_builder.update_constant(None, "C")
    with pytest.raises(ConflictError, match="does not exist"):
        enum_builder.update_constant("X", "C")
    with pytest.raises(InvalidArgumentError, match="new_enum_constant"):
        enum_builder.update_constant("A", None)
    with pytest.raises(InvalidArgumentError, match="RegEx"):
        enum_builder.update_constant("A", "_")
    with pytest.raises(InvalidArgumentError, match="reserved"):
        enum_builder.update_constant("A", "null")
    with pytest.raises(ConflictError, match="already exists"):
        enum_builder.update_constant("A", "B")

    assert enum_builder.constants == ("A", "B")


# ----- content -----


def test_enum_content(enum_builder, output_root):
    enum_builder.set_namespace("com.example").set_simple_name("Color")
    enum_builder.add_constants("RED", "GREEN", "BLUE").commit()

    content = Path(output_root, "com", "example", "Color.java").read_text(encoding="utf-8")
    assert content == (
        "package com.example;\n"
        "\n"
        "public enum Color {\n"
        "  RED,\n"
        "  GREEN,\n"
        "  BLUE;\n"
        "}\n"
    )


def test_emission_follows_updated_order(enum_builder, output_root):
    enum_builder.set_simple_name("Letters").add_constants("A", "B").add_constants("C")
    enum_builder.update_constant("B", "Z").commit()

    content = Path(output_root, "Letters.java").read_text(encoding="utf-8")
    assert content == "public enum Letters {\n  A,\n  Z,\n  C;\n}\n"


def test_empty_enum_cannot_be_committed(enum_builder):
    enum_builder.set_simple_name("Empty")

    with pytest.raises(InvalidArgumentError, match="`enum_constants` MUST NOT be `None` or empty"):
        enum_builder.commit()
    assert enum_builder.registry == frozenset()


def test_enum_with_from_value_method(enum_builder, output_root):
    method = DeserializingMethod(
        MatchingStrategy.CASE_INSENSITIVE_NAME, NoMatchStrategy.NULL, NullStrategy.FALLBACK
    )
    enum_builder.set_simple_name("Mode").add_constants("ON", "OFF")
    enum_builder.set_deserializing_method(method, "OFF").commit()

    content = Path(output_root, "Mode.java").read_text(encoding="utf-8")
    expected_method = method.generate_method_code("Mode", "OFF")
    assert content == (
        "public enum Mode {\n"
        "  ON,\n"
        "  OFF;\n"
        "\n"
        + expected_method
        + "}\n"
    )


def test_fallback_requires_default_constant(enum_builder):
    enum_builder.set_simple_name("Mode").add_constants("ON")
    enum_builder.set_deserializing_method(
        DeserializingMethod(no_match_strategy=NoMatchStrategy.FALLBACK)
    )

    with pytest.raises(InvalidArgumentError, match="default_constant"):
        enum_builder.commit()

    enum_builder.set_deserializing_method(
        DeserializingMethod(no_match_strategy=NoMatchStrategy.FALLBACK), "MISSING"
    )
    with pytest.raises(ConflictError, match="MISSING"):
        enum_builder.commit()


def test_renaming_default_constant_follows(enum_builder):
    enum_builder.set_simple_name("Mode").add_constants("ON", "OFF")
    enum_builder.set_deserializing_method(
        DeserializingMethod(null_strategy=NullStrategy.FALLBACK), "OFF"
    )
    enum_builder.update_constant("OFF", "DISABLED")

    assert enum_builder.default_constant == "DISABLED"
    enum_builder.commit()
    assert "return DISABLED;" in enum_builder.committed_artifacts[0].content


def test_factory_creates_enum_builder(output_root):
    builder = new_enum_builder().set_output_root(str(output_root))

    assert builder.class_type is ClassType.ENUM
    builder.set_simple_name("Made").add_constants("ONE").commit()
    assert builder.registry == {"Made"}


def test_from_value_method_uses_builder_generator(recording_generator, output_root):
    builder = EnumBuilder(generator=recording_generator).set_output_root(str(output_root))
    builder.set_simple_name("Mode").add_constants("ON")
    builder.set_deserializing_method(DeserializingMethod()).commit()

    assert recording_generator.rendered == ["from_value.java.j2", "enum.java.j2"]
    assert "fromValue(final String value)" in builder.committed_artifacts[0].content
