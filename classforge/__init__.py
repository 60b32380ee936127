"""
classforge

Generates versioned Java classes and enums, keeping track of every
artifact a builder has emitted.
"""

from .builders import ClassBuilder, EnumBuilder
from .core import (
    ArtifactExistsError,
    Change,
    ClassType,
    CommittedArtifact,
    ConflictError,
    ForgeConfig,
    ForgeError,
    InvalidArgumentError,
    PersistenceError,
    SemVer,
    VersionPlacement,
    load_config,
)
from .languages.java import (
    DeserializingMethod,
    MatchingStrategy,
    NoMatchStrategy,
    NullStrategy,
)
from .registry import (
    get_generator,
    list_supported_languages,
    new_builder,
    new_class_builder,
    new_enum_builder,
)

# Version info
__version__ = "0.1.0"

__all__ = [
    # Entry points
    "new_builder",
    "new_class_builder",
    "new_enum_builder",
    "get_generator",
    "list_supported_languages",
    # Builders
    "ClassBuilder",
    "EnumBuilder",
    "ClassType",
    "CommittedArtifact",
    # Versioning
    "SemVer",
    "Change",
    "VersionPlacement",
    # Enum deserialization
    "DeserializingMethod",
    "MatchingStrategy",
    "NoMatchStrategy",
    "NullStrategy",
    # Configuration
    "ForgeConfig",
    "load_config",
    # Errors
    "ForgeError",
    "InvalidArgumentError",
    "ConflictError",
    "ArtifactExistsError",
    "PersistenceError",
]
