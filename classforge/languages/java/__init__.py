"""
Java source generator module.

Generates Java classes and enums, including enum deserializing methods.
"""

from .generator import JavaGenerator, create_java_generator
from .naming import JAVA_RESERVED_KEYWORDS, create_java_validator
from .deserializing import (
    DeserializingMethod,
    MatchingStrategy,
    NoMatchStrategy,
    NullStrategy,
)

__all__ = [
    # Generator
    "JavaGenerator",
    "create_java_generator",
    # Naming
    "JAVA_RESERVED_KEYWORDS",
    "create_java_validator",
    # Deserializing method
    "DeserializingMethod",
    "MatchingStrategy",
    "NoMatchStrategy",
    "NullStrategy",
]
