"""Shared fixtures for classforge tests."""

from __future__ import annotations

import pytest

from classforge import ClassBuilder, EnumBuilder
from classforge.languages.java import JavaGenerator


class RecordingGenerator(JavaGenerator):
    """JavaGenerator remembering which templates it rendered."""

    def __init__(self):
        super().__init__()
        self.rendered = []

    def render_template(self, template_name, context):
        self.rendered.append(template_name)
        return super().render_template(template_name, context)


@pytest.fixture
def output_root(tmp_path):
    return tmp_path / "generated-sources"


@pytest.fixture
def class_builder(output_root) -> ClassBuilder:
    return ClassBuilder().set_output_root(str(output_root))


@pytest.fixture
def enum_builder(output_root) -> EnumBuilder:
    return EnumBuilder().set_output_root(str(output_root))


@pytest.fixture(params=[ClassBuilder, EnumBuilder], ids=["class", "enum"])
def builder(request, output_root):
    """A ready-to-commit builder of either kind (enums get one constant)."""
    instance = request.param().set_output_root(str(output_root))
    if isinstance(instance, EnumBuilder):
        instance.add_constants("VALUE")
    return instance


@pytest.fixture
def recording_generator() -> RecordingGenerator:
    return RecordingGenerator()
