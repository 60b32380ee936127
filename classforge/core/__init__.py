"""
Core generation components.

Provides the builder state machine and the language-agnostic utilities
used by all output languages.
"""

from .builder import AbstractBuilder, ClassType, CommittedArtifact
from .config import ConfigError, ConfigManager, ForgeConfig, load_config
from .errors import (
    ArtifactExistsError,
    ConflictError,
    ForgeError,
    InvalidArgumentError,
    PersistenceError,
)
from .generator import SourceGenerator
from .naming import (
    VALID_CLASS_NAME_REGEX,
    VALID_ENUM_CONSTANT_NAME_REGEX,
    VALID_PACKAGE_NAME_REGEX,
    NameValidator,
)
from .placement import (
    VersionPlacement,
    resolve_effective_namespace,
    resolve_fully_qualified_name,
)
from .registry import ArtifactRegistry
from .semver import Change, SemVer
from .templates import TemplateEngine, TemplateError, create_template_engine
from .writer import FileWriter

__all__ = [
    # Builder state machine
    "AbstractBuilder",
    "ClassType",
    "CommittedArtifact",
    # Versioning
    "Change",
    "SemVer",
    "VersionPlacement",
    "resolve_effective_namespace",
    "resolve_fully_qualified_name",
    "ArtifactRegistry",
    # Naming
    "NameValidator",
    "VALID_CLASS_NAME_REGEX",
    "VALID_PACKAGE_NAME_REGEX",
    "VALID_ENUM_CONSTANT_NAME_REGEX",
    # Errors
    "ForgeError",
    "InvalidArgumentError",
    "ConflictError",
    "ArtifactExistsError",
    "PersistenceError",
    # Configuration
    "ForgeConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Generation
    "SourceGenerator",
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    "FileWriter",
]
