"""
Java source generator implementation.

Generates Java classes and enums using templates.
"""

from pathlib import Path
from typing import FrozenSet, Optional, Sequence

from ...core.generator import SourceGenerator
from ...logging_config import get_logger
from .naming import JAVA_RESERVED_KEYWORDS

logger = get_logger(__name__)


class JavaGenerator(SourceGenerator):
    """Source generator for Java classes and enums."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    @property
    def reserved_words(self) -> FrozenSet[str]:
        return JAVA_RESERVED_KEYWORDS

    def get_template_directory(self) -> Path:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    def render_class(self, class_name: str, package_name: Optional[str]) -> str:
        """Render ``public class Name {}`` with an optional package line."""
        context = {
            "class_name": class_name,
            "package_name": self._package_or_none(package_name),
        }
        return self.render_template("class.java.j2", context)

    def render_enum(
        self,
        class_name: str,
        package_name: Optional[str],
        constants: Sequence[str],
        from_value_method: Optional[str] = None,
    ) -> str:
        """Render ``public enum Name`` listing ``constants`` in order."""
        context = {
            "class_name": class_name,
            "package_name": self._package_or_none(package_name),
            "constants": list(constants),
            "from_value_method": from_value_method,
        }
        logger.debug("Rendering enum %s with %d constants", class_name, len(constants))
        return self.render_template("enum.java.j2", context)

    def render_from_value(
        self, method, class_name: str, default_value: Optional[str] = None
    ) -> str:
        """Render the ``fromValue`` method described by a DeserializingMethod."""
        context = method.template_context(class_name, default_value)
        return self.render_template("from_value.java.j2", context)

    @staticmethod
    def _package_or_none(package_name: Optional[str]) -> Optional[str]:
        if package_name is None or not package_name.strip():
            return None
        return package_name


def create_java_generator() -> JavaGenerator:
    """Create a Java source generator."""
    return JavaGenerator()
