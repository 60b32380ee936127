"""
Naming rules for generated artifacts.

Holds the identifier grammars and a validator bound to the reserved words of
one output language. The reserved words are passed in at construction, so
alternative keyword tables can be used without touching global state.
"""

import os
import re
from typing import FrozenSet, Iterable, Optional

from ..logging_config import get_logger
from .errors import (
    null_violation,
    regex_violation,
    reserved_keyword_violation,
)

logger = get_logger(__name__)

VALID_CLASS_NAME_REGEX = r"^[A-Z][A-Za-z_0-9]*$"
VALID_PACKAGE_NAME_REGEX = r"^[A-Za-z_0-9]+(\.[A-Za-z_0-9]+)*$"
VALID_ENUM_CONSTANT_NAME_REGEX = r"^([A-Za-z]|(_+[A-Za-z0-9]))[A-Z_a-z0-9]*$"

_CLASS_NAME_PATTERN = re.compile(VALID_CLASS_NAME_REGEX)
_PACKAGE_NAME_PATTERN = re.compile(VALID_PACKAGE_NAME_REGEX)
_ENUM_CONSTANT_NAME_PATTERN = re.compile(VALID_ENUM_CONSTANT_NAME_REGEX)


def _matches(pattern: re.Pattern, value: object) -> bool:
    # fullmatch, since `$` alone accepts a trailing newline
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_valid_class_name(name: object) -> bool:
    return _matches(_CLASS_NAME_PATTERN, name)


def is_valid_package_name(name: object) -> bool:
    """Blank or None is valid and means "no package"."""
    if name is None:
        return True
    if isinstance(name, str) and not name.strip():
        return True
    return _matches(_PACKAGE_NAME_PATTERN, name)


def is_valid_enum_constant_name(name: object) -> bool:
    return _matches(_ENUM_CONSTANT_NAME_PATTERN, name)


class NameValidator:
    """Validates draft fields against the grammars and a reserved-word table."""

    def __init__(self, reserved_words: Optional[Iterable[str]] = None,
                 language_name: str = "Java"):
        """
        Initialize name validator.

        Args:
            reserved_words: Keywords of the output language
            language_name: Used in violation messages
        """
        self.reserved_words: FrozenSet[str] = frozenset(reserved_words or ())
        self.language_name = language_name

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words

    def validate_output_root(self, output_root, key: str = "output_root"):
        if output_root is None:
            raise null_violation(key)
        if not isinstance(output_root, (str, os.PathLike)):
            raise regex_violation(key, "path-like")

    def validate_package_name(self, package_name: Optional[str],
                              key: str = "namespace"):
        if not is_valid_package_name(package_name):
            raise regex_violation(key, VALID_PACKAGE_NAME_REGEX)

    def validate_class_name(self, class_name: str, key: str = "simple_name"):
        if not is_valid_class_name(class_name):
            raise regex_violation(key, VALID_CLASS_NAME_REGEX)
        if self.is_reserved(class_name):
            raise reserved_keyword_violation(key, self.language_name)

    def validate_enum_constant_name(self, constant_name: str,
                                    key: str = "enum_constant_name"):
        if not is_valid_enum_constant_name(constant_name):
            raise regex_violation(key, VALID_ENUM_CONSTANT_NAME_REGEX)
        if self.is_reserved(constant_name):
            logger.debug("Rejected reserved constant name: %s", constant_name)
            raise reserved_keyword_violation(key, self.language_name)
