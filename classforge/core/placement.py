"""
Placement of version information in generated artifacts.

Resolution is recomputed from the version being committed every time, since
the builder's version changes between commits.
"""

from enum import Enum
from typing import Optional

from .errors import null_violation
from .semver import SemVer

NAMESPACE_SEPARATOR = "."


class VersionPlacement(Enum):
    """How the version is folded into the effective namespace."""

    NONE = "none"  # com.example
    NAMESPACE_SUFFIX_COMPLETE = "complete"  # com.example.v1_2_0
    NAMESPACE_SUFFIX_SHORT = "short"  # com.example.v1_2


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def version_suffix(semver: SemVer, placement: VersionPlacement) -> Optional[str]:
    """Namespace segment for ``semver`` under ``placement``, or None for NONE."""
    if placement is VersionPlacement.NAMESPACE_SUFFIX_COMPLETE:
        rendered = semver.to_complete_string()
    elif placement is VersionPlacement.NAMESPACE_SUFFIX_SHORT:
        rendered = semver.to_short_string()
    else:
        return None
    return rendered.replace(NAMESPACE_SEPARATOR, "_")


def resolve_effective_namespace(
    semver: SemVer,
    namespace: Optional[str],
    placement: Optional[VersionPlacement],
) -> Optional[str]:
    """
    Resolve the namespace an artifact is emitted under.

    Args:
        semver: Version of the artifact being resolved
        namespace: Raw namespace; None or blank means no namespace
        placement: Placement policy; None behaves like NONE

    Returns:
        Effective namespace, or the raw namespace for NONE
    """
    if semver is None:
        raise null_violation("semver")

    suffix = version_suffix(semver, placement or VersionPlacement.NONE)
    if suffix is None:
        return namespace
    if _is_blank(namespace):
        return suffix
    return NAMESPACE_SEPARATOR.join((namespace, suffix))


def resolve_fully_qualified_name(
    effective_namespace: Optional[str], simple_name: str
) -> str:
    """Join namespace and simple name, or return the simple name alone."""
    if _is_blank(effective_namespace):
        return simple_name
    return NAMESPACE_SEPARATOR.join((effective_namespace, simple_name))
