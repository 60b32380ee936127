"""
Generator registry system for managing available output languages.

Provides registration of source generators and creation of builders for them.
"""

from typing import Dict, List, Optional, Type

from .builders import ClassBuilder, EnumBuilder
from .core.builder import AbstractBuilder, ClassType
from .core.config import ForgeConfig, load_config
from .core.errors import ForgeError, null_violation
from .core.generator import SourceGenerator
from .logging_config import get_logger

logger = get_logger(__name__)

_BUILDER_CLASSES: Dict[ClassType, Type[AbstractBuilder]] = {
    ClassType.CLASS: ClassBuilder,
    ClassType.ENUM: EnumBuilder,
}


class RegistryError(ForgeError):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry for managing available source generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[SourceGenerator]] = {}

    def register(
        self,
        language: str,
        generator_class: Type[SourceGenerator],
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        Args:
            language: Language name (e.g., 'java')
            generator_class: Class implementing SourceGenerator
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, SourceGenerator)
        ):
            raise RegistryError("Generator class must inherit from SourceGenerator")

        language_key = language.lower()

        if language_key in self._generators and not replace:
            logger.debug("Generator for %s already registered", language_key)
            return

        self._generators[language_key] = generator_class
        logger.debug(
            "Registered %s generator %s", language_key, generator_class.__name__
        )

    def get_generator_class(self, language: str) -> Type[SourceGenerator]:
        """
        Get generator class for language.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()

        if language_key in self._generators:
            return self._generators[language_key]

        available = self.list_languages()
        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(available)}"
        )

    def create_generator(self, language: str) -> SourceGenerator:
        """Create generator instance for language."""
        return self.get_generator_class(language)()

    def list_languages(self) -> List[str]:
        """Get list of registered language names."""
        return sorted(self._generators.keys())

    def is_supported(self, language: str) -> bool:
        """Check if a generator is registered for language."""
        return language.lower() in self._generators


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generators."""
    from .languages.java import JavaGenerator

    registry.register("java", JavaGenerator)


# Public API functions using the global registry


def get_generator(language: str = "java") -> SourceGenerator:
    """Create a generator from the global registry."""
    return get_registry().create_generator(language)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def new_builder(
    class_type: ClassType,
    config: Optional[ForgeConfig] = None,
    language: Optional[str] = None,
) -> AbstractBuilder:
    """
    Create a builder for ``class_type``.

    Args:
        class_type: Kind of artifact to generate
        config: Builder settings; defaults from load_config()
        language: Output language; defaults to the config's language

    Returns:
        A new builder owning its own registry and version
    """
    if class_type is None:
        raise null_violation("class_type")
    if language is None:
        language = config.language if config is not None else "java"
    if config is None:
        config = load_config(language)

    builder_class = _BUILDER_CLASSES[class_type]
    return builder_class(config=config, generator=get_generator(language))


def new_class_builder(
    config: Optional[ForgeConfig] = None, language: Optional[str] = None
) -> ClassBuilder:
    """Create a builder for plain classes."""
    return new_builder(ClassType.CLASS, config, language)


def new_enum_builder(
    config: Optional[ForgeConfig] = None, language: Optional[str] = None
) -> EnumBuilder:
    """Create a builder for enums."""
    return new_builder(ClassType.ENUM, config, language)
