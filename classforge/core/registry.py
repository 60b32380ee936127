"""
Registry of emitted artifacts.

Each builder owns one registry. Names are only ever added, so an identifier
emitted once can never be emitted again by the same builder.
"""

from typing import Dict, FrozenSet, Iterator

from ..logging_config import get_logger
from .errors import artifact_exists_violation, null_violation

logger = get_logger(__name__)


class ArtifactRegistry:
    """Append-only set of fully-qualified names."""

    def __init__(self):
        """Initialize empty registry."""
        # dict keeps insertion order for iteration
        self._names: Dict[str, None] = {}

    def contains(self, fully_qualified_name: str) -> bool:
        """Check whether a name has already been emitted."""
        return fully_qualified_name in self._names

    def add(self, fully_qualified_name: str):
        """
        Record an emitted name.

        Raises:
            InvalidArgumentError: If the name is None
            ArtifactExistsError: If the name has already been recorded
        """
        if fully_qualified_name is None:
            raise null_violation("fully_qualified_name")
        if fully_qualified_name in self._names:
            raise artifact_exists_violation(fully_qualified_name)
        self._names[fully_qualified_name] = None
        logger.debug(
            "Registered %s (%d total)", fully_qualified_name, len(self._names)
        )

    def names(self) -> FrozenSet[str]:
        """Snapshot of all recorded names."""
        return frozenset(self._names)

    def __contains__(self, fully_qualified_name: object) -> bool:
        return fully_qualified_name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __repr__(self) -> str:
        return f"ArtifactRegistry({list(self._names)!r})"
