"""
Exception hierarchy and message presets for classforge.

Every violation raised by the builders is created through one of the
factory functions below so that messages stay consistent.
"""

from typing import Iterable, Optional


class ForgeError(Exception):
    """Base exception for all classforge errors."""

    pass


class InvalidArgumentError(ForgeError, ValueError):
    """Raised when caller-supplied data fails a null, grammar or keyword check."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class ConflictError(ForgeError):
    """Raised when a structurally valid operation violates a runtime invariant."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class ArtifactExistsError(ConflictError):
    """Raised when a commit resolves to an already emitted identifier."""

    pass


class PersistenceError(ForgeError):
    """Raised when generated content cannot be written."""

    pass


# Message presets


def null_violation(key: str) -> InvalidArgumentError:
    return InvalidArgumentError(f"`{key}` MUST NOT be `None`", key)


def null_or_empty_violation(key: str) -> InvalidArgumentError:
    return InvalidArgumentError(f"`{key}` MUST NOT be `None` or empty", key)


def less_than_zero_violation(key: str) -> InvalidArgumentError:
    return InvalidArgumentError(f"`{key}` MUST NOT be less than `0`", key)


def not_an_integer_violation(key: str) -> InvalidArgumentError:
    return InvalidArgumentError(f"`{key}` MUST be an integer", key)


def regex_violation(key: str, regex: str) -> InvalidArgumentError:
    return InvalidArgumentError(f"`{key}` MUST match the RegEx `{regex}`", key)


def reserved_keyword_violation(key: str, language: str = "Java") -> InvalidArgumentError:
    return InvalidArgumentError(
        f"`{key}` MUST NOT be a reserved {language} keyword", key
    )


def duplicate_arguments_violation(key: str) -> InvalidArgumentError:
    return InvalidArgumentError(f"`{key}` MUST NOT contain duplicates", key)


def unsupported_type_violation(key: str, value: object) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"`{key}` has unsupported type `{type(value).__name__}`", key
    )


def unsupported_value_violation(
    key: str, value: object, allowed: Iterable[object]
) -> InvalidArgumentError:
    choices = ", ".join(str(a) for a in allowed)
    return InvalidArgumentError(
        f"`{key}` MUST be one of `{choices}`, got `{value}`", key
    )


def already_exists_violation(kind: str, name: str) -> ConflictError:
    return ConflictError(f"`{kind}` named `{name}` already exists", kind)


def does_not_exist_violation(kind: str, name: str) -> ConflictError:
    return ConflictError(f"`{kind}` named `{name}` does not exist", kind)


def artifact_exists_violation(fully_qualified_name: str) -> ArtifactExistsError:
    return ArtifactExistsError(
        f"`{fully_qualified_name}` has already been generated", "fully_qualified_name"
    )
