"""
Semantic versions of generated artifacts.

A builder starts at ``0.0.0`` and replaces its :class:`SemVer` on every
commit; values are never mutated.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import (
    InvalidArgumentError,
    less_than_zero_violation,
    not_an_integer_violation,
    null_violation,
)

_VERSION_PATTERN = re.compile(r"v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")


class Change(Enum):
    """The type of change being committed."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


@dataclass(frozen=True, order=True)
class SemVer:
    """Immutable ``major.minor.patch`` version."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self):
        for key in ("major", "minor", "patch"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int):
                raise not_an_integer_violation(key)
            if value < 0:
                raise less_than_zero_violation(key)

    @classmethod
    def parse(cls, text: str) -> "SemVer":
        """
        Parse ``"1.2.3"``, ``"v1.2"`` or ``"1"`` into a SemVer.

        Missing minor/patch components default to zero.
        """
        if text is None:
            raise null_violation("text")
        match = _VERSION_PATTERN.fullmatch(str(text).strip())
        if not match:
            raise InvalidArgumentError(f"`{text}` is not a valid version", "text")
        major, minor, patch = (int(part) if part else 0 for part in match.groups())
        return cls(major, minor, patch)

    def increment(self, change: Change) -> "SemVer":
        """Return a new SemVer with the component selected by ``change`` incremented."""
        if change is None:
            raise null_violation("change")
        if change is Change.MAJOR:
            return self.increment_major()
        if change is Change.MINOR:
            return self.increment_minor()
        if change is Change.PATCH:
            return self.increment_patch()
        raise InvalidArgumentError(f"Unsupported change: {change!r}", "change")

    def increment_major(self) -> "SemVer":
        return SemVer(self.major + 1, 0, 0)

    def increment_minor(self) -> "SemVer":
        return SemVer(self.major, self.minor + 1, 0)

    def increment_patch(self) -> "SemVer":
        return SemVer(self.major, self.minor, self.patch + 1)

    def to_complete_string(self) -> str:
        """Format as ``v{major}.{minor}.{patch}``."""
        return f"v{self.major}.{self.minor}.{self.patch}"

    def to_short_string(self) -> str:
        """
        Format with trailing zero components omitted.

        ``1.0.0`` -> ``v1``, ``1.2.0`` -> ``v1.2``, ``1.2.3`` -> ``v1.2.3``.
        """
        if self.patch > 0:
            return f"v{self.major}.{self.minor}.{self.patch}"
        if self.minor > 0:
            return f"v{self.major}.{self.minor}"
        return f"v{self.major}"

    def __str__(self) -> str:
        return self.to_complete_string()
