"""Tests for the artifact registry and the generator registry."""

from __future__ import annotations

import pytest

from classforge.core.errors import ArtifactExistsError, InvalidArgumentError
from classforge.core.registry import ArtifactRegistry
from classforge.languages.java import JavaGenerator
from classforge.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    is_language_supported,
    list_supported_languages,
    new_builder,
)
from classforge import ClassBuilder, ClassType, EnumBuilder, ForgeConfig


# ----- ArtifactRegistry -----


def test_artifact_registry_add_and_contains():
    registry = ArtifactRegistry()
    registry.add("a.b.Foo")
    registry.add("Bar")

    assert registry.contains("a.b.Foo")
    assert "Bar" in registry
    assert not registry.contains("Foo")
    assert len(registry) == 2
    assert list(registry) == ["a.b.Foo", "Bar"]
    assert registry.names() == {"a.b.Foo", "Bar"}


def test_artifact_registry_never_accepts_duplicates():
    registry = ArtifactRegistry()
    registry.add("Foo")

    with pytest.raises(ArtifactExistsError):
        registry.add("Foo")
    assert len(registry) == 1


def test_artifact_registry_rejects_none():
    with pytest.raises(InvalidArgumentError):
        ArtifactRegistry().add(None)


def test_artifact_registry_has_no_removal():
    assert not hasattr(ArtifactRegistry, "remove")
    assert not hasattr(ArtifactRegistry, "discard")


# ----- GeneratorRegistry -----


def test_java_is_registered_globally():
    assert "java" in list_supported_languages()
    assert is_language_supported("JAVA")
    assert not is_language_supported("jdk")
    assert isinstance(get_generator("Java"), JavaGenerator)


def test_unknown_language():
    with pytest.raises(RegistryError, match="No generator registered for language: cobol"):
        get_generator("cobol")


def test_register_rejects_non_generators():
    with pytest.raises(RegistryError):
        GeneratorRegistry().register("text", str)


def test_existing_registration_is_kept_unless_replaced():
    class OtherJavaGenerator(JavaGenerator):
        pass

    registry = GeneratorRegistry()
    registry.register("java", JavaGenerator)
    registry.register("java", OtherJavaGenerator)
    assert registry.get_generator_class("java") is JavaGenerator

    registry.register("JAVA", OtherJavaGenerator, replace=True)
    assert registry.get_generator_class("java") is OtherJavaGenerator
    assert registry.list_languages() == ["java"]


@pytest.mark.parametrize("class_type,builder_class", [
    (ClassType.CLASS, ClassBuilder),
    (ClassType.ENUM, EnumBuilder),
])
def test_new_builder(tmp_path, class_type, builder_class):
    builder = new_builder(class_type, ForgeConfig(output_root=str(tmp_path)))

    assert isinstance(builder, builder_class)
    assert builder.output_root == str(tmp_path)


def test_new_builder_requires_class_type():
    with pytest.raises(InvalidArgumentError, match="class_type"):
        new_builder(None)


def test_new_builders_are_independent(tmp_path):
    config = ForgeConfig(output_root=str(tmp_path))
    first = new_builder(ClassType.CLASS, config).set_simple_name("Foo")
    second = new_builder(ClassType.CLASS, config).set_simple_name("Foo")

    first.commit()

    assert first.registry == {"Foo"}
    assert second.registry == frozenset()
    assert second.semver != first.semver
