"""
Deserializing method for generated Java enums.

Renders ``public static T fromValue(final String value)`` from three
independent strategies:

* ``NullStrategy`` - evaluated first, decides what a ``null`` value yields
* ``MatchingStrategy`` - how a value is matched against the constants,
  scanning ``values()`` in declaration order and returning the first match
* ``NoMatchStrategy`` - what a non-matching value yields

Every combination is rendered by the same template, so the output only
depends on the strategies, the class name and the default value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ...core.errors import null_violation, unsupported_type_violation
from .generator import JavaGenerator


class MatchingStrategy(Enum):
    """How a value is matched to the name of an enum constant."""

    CASE_INSENSITIVE_NAME = "case_insensitive_name"  # "ExAmPlE" matches EXAMPLE
    EXACT_NAME = "exact_name"


class NoMatchStrategy(Enum):
    """What a non-null, non-matching value yields."""

    FALLBACK = "fallback"
    NULL = "null"
    THROW = "throw"  # IllegalArgumentException


class NullStrategy(Enum):
    """What a null value yields."""

    FALLBACK = "fallback"
    NULL = "null"
    THROW = "throw"  # NullPointerException


@dataclass(frozen=True)
class DeserializingMethod:
    """Strategies for the ``fromValue`` method of a generated enum."""

    matching_strategy: MatchingStrategy = MatchingStrategy.EXACT_NAME
    no_match_strategy: NoMatchStrategy = NoMatchStrategy.THROW
    null_strategy: NullStrategy = NullStrategy.THROW

    def __post_init__(self):
        for key, strategy_type in (
            ("matching_strategy", MatchingStrategy),
            ("no_match_strategy", NoMatchStrategy),
            ("null_strategy", NullStrategy),
        ):
            value = getattr(self, key)
            if value is None:
                raise null_violation(key)
            if not isinstance(value, strategy_type):
                raise unsupported_type_violation(key, value)

    @property
    def uses_fallback(self) -> bool:
        """True if any strategy returns the default value."""
        return (
            self.null_strategy is NullStrategy.FALLBACK
            or self.no_match_strategy is NoMatchStrategy.FALLBACK
        )

    def generate_method_code(
        self,
        class_name: str,
        default_value: Optional[str] = None,
        generator: Optional[JavaGenerator] = None,
    ) -> str:
        """
        Generate the Java source of ``fromValue(String)``.

        Args:
            class_name: Return type of the method
            default_value: Expression returned by FALLBACK strategies
            generator: Generator whose templates render the method;
                a new JavaGenerator when omitted

        Returns:
            Method source, indented for an enum body and ending in a newline
        """
        generator = generator or JavaGenerator()
        return generator.render_from_value(self, class_name, default_value)

    def template_context(
        self, class_name: str, default_value: Optional[str] = None
    ) -> Dict[str, Any]:
        """Validated variables for the ``fromValue`` template."""
        if class_name is None:
            raise null_violation("class_name")
        if self.uses_fallback and default_value is None:
            raise null_violation("default_value")

        return {
            "class_name": class_name,
            "default_value": default_value,
            "matching_strategy": self.matching_strategy.name,
            "no_match_strategy": self.no_match_strategy.name,
            "null_strategy": self.null_strategy.name,
        }
