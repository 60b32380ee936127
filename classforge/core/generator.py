"""
Base generator interface for all output languages.

Defines the contract the builders use to turn a validated draft into
source text.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Sequence

from .templates import TemplateEngine, create_template_engine


class SourceGenerator(ABC):
    """Abstract base class for all source generators."""

    def __init__(self):
        """Initialize generator and its template engine."""
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Fallback to in-memory templates
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @property
    @abstractmethod
    def reserved_words(self) -> FrozenSet[str]:
        """Return the keywords that must not be used as names."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def render_class(self, class_name: str, package_name: Optional[str]) -> str:
        """
        Generate the source of a plain class with an empty body.

        Args:
            class_name: Validated simple name
            package_name: Effective namespace, None or blank for none

        Returns:
            Complete file content
        """
        pass

    @abstractmethod
    def render_enum(
        self,
        class_name: str,
        package_name: Optional[str],
        constants: Sequence[str],
        from_value_method: Optional[str] = None,
    ) -> str:
        """
        Generate the source of an enumeration.

        Args:
            class_name: Validated simple name
            package_name: Effective namespace, None or blank for none
            constants: Constant names in emission order
            from_value_method: Pre-rendered deserializing method, if any

        Returns:
            Complete file content
        """
        pass

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)
