"""
Builder state machine shared by all artifact kinds.

A builder holds a mutable draft of the next artifact. ``commit`` validates
the draft, resolves its fully-qualified name for the version being
committed, refuses names that were already emitted, writes the generated
file and only then records the name and advances the version. Failures
before the write leave the builder untouched.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple, TypeVar, Union

from ..logging_config import get_logger
from .config import ForgeConfig, load_config
from .errors import (
    artifact_exists_violation,
    null_violation,
    unsupported_type_violation,
    unsupported_value_violation,
)
from .generator import SourceGenerator
from .naming import NameValidator
from .placement import (
    VersionPlacement,
    resolve_effective_namespace,
    resolve_fully_qualified_name,
)
from .registry import ArtifactRegistry
from .semver import Change, SemVer
from .writer import FileWriter

logger = get_logger(__name__)

B = TypeVar("B", bound="AbstractBuilder")


class ClassType(Enum):
    """The kinds of artifact that can be generated."""

    CLASS = "class"
    ENUM = "enum"


@dataclass(frozen=True)
class CommittedArtifact:
    """Snapshot of one successful commit."""

    class_type: ClassType
    fully_qualified_name: str
    namespace: Optional[str]
    simple_name: str
    semver: SemVer
    content: str
    path: Path


class AbstractBuilder(ABC):
    """Base class for artifact builders.

    Instances are not thread-safe; callers sharing one builder across
    threads must serialize access themselves.
    """

    class_type: ClassType

    def __init__(
        self,
        generator: SourceGenerator,
        config: Optional[ForgeConfig] = None,
        validator: Optional[NameValidator] = None,
        writer: Optional[FileWriter] = None,
    ):
        """
        Initialize builder.

        Args:
            generator: Renders file content for the output language
            config: Builder settings, defaults from load_config()
            validator: Name validator, defaults to the generator's keywords
            writer: Persistence sink, defaults to a FileWriter for the
                generator's file extension
        """
        self.config = config or load_config(generator.language_name)
        self.generator = generator
        self.validator = validator or NameValidator(
            generator.reserved_words, generator.language_name.capitalize()
        )
        self.writer = writer or FileWriter(
            self.config.file_extension or generator.file_extension,
            self.config.encoding,
        )

        self._registry = ArtifactRegistry()
        self._history: List[CommittedArtifact] = []
        self._semver = SemVer(0, 0, 0)
        self._default_change = self.config.get_default_change()
        self._version_placement = self.config.get_version_placement()
        self._output_root: Optional[Union[str, PathLike]] = None
        self._namespace: Optional[str] = None
        self._simple_name: Optional[str] = None

        if self.config.output_root is not None:
            self.set_output_root(self.config.output_root)

    # Draft accessors

    @property
    def semver(self) -> SemVer:
        """Version of the previously committed artifact."""
        return self._semver

    @property
    def version_placement(self) -> VersionPlacement:
        return self._version_placement

    @property
    def output_root(self) -> Optional[Union[str, PathLike]]:
        return self._output_root

    @property
    def namespace(self) -> Optional[str]:
        return self._namespace

    @property
    def simple_name(self) -> Optional[str]:
        return self._simple_name

    @property
    def registry(self) -> FrozenSet[str]:
        """Fully-qualified names emitted by this builder."""
        return self._registry.names()

    @property
    def committed_artifacts(self) -> Tuple[CommittedArtifact, ...]:
        return tuple(self._history)

    # Draft setters

    def set_semver(self: B, semver: SemVer) -> B:
        """Replace the stored version, bypassing automatic increments."""
        if semver is None:
            raise null_violation("semver")
        if not isinstance(semver, SemVer):
            raise unsupported_type_violation("semver", semver)
        self._semver = semver
        return self

    def set_version_placement(
        self: B, version_placement: Union[VersionPlacement, str, None]
    ) -> B:
        """Set the placement policy; None means NONE, strings use the config names."""
        if version_placement is None:
            version_placement = VersionPlacement.NONE
        elif isinstance(version_placement, str):
            try:
                version_placement = VersionPlacement(version_placement.lower())
            except ValueError as e:
                raise unsupported_value_violation(
                    "version_placement",
                    version_placement,
                    [p.value for p in VersionPlacement],
                ) from e
        elif not isinstance(version_placement, VersionPlacement):
            raise unsupported_type_violation("version_placement", version_placement)
        self._version_placement = version_placement
        return self

    def set_output_root(self: B, output_root: Union[str, PathLike]) -> B:
        self.validator.validate_output_root(output_root)
        self._output_root = output_root
        return self

    def set_namespace(self: B, namespace: Optional[str]) -> B:
        self.validator.validate_package_name(namespace)
        self._namespace = namespace
        return self

    def set_simple_name(self: B, simple_name: str) -> B:
        self.validator.validate_class_name(simple_name)
        self._simple_name = simple_name
        return self

    # Name resolution

    def resolve_effective_namespace(self, semver: Optional[SemVer] = None) -> Optional[str]:
        """Effective namespace for ``semver``, or for the current version."""
        return resolve_effective_namespace(
            semver if semver is not None else self._semver,
            self._namespace,
            self._version_placement,
        )

    def resolve_fully_qualified_name(self, semver: Optional[SemVer] = None) -> str:
        """Fully-qualified name for ``semver``, or for the current version."""
        return resolve_fully_qualified_name(
            self.resolve_effective_namespace(semver), self._simple_name
        )

    # Commit

    def determine_change(self) -> Change:
        """Change applied by a commit without an explicit change or version."""
        return self._default_change

    def commit(self: B, target: Union[Change, SemVer, None] = None) -> B:
        """
        Commit the draft as a new artifact.

        Args:
            target: None for the default change, a Change to increment the
                current version, or an explicit SemVer

        Returns:
            This builder
        """
        if target is None:
            return self.commit_change(self.determine_change())
        if isinstance(target, Change):
            return self.commit_change(target)
        if isinstance(target, SemVer):
            return self.commit_version(target)
        raise unsupported_type_violation("target", target)

    def commit_change(self: B, change: Change) -> B:
        """Commit with the current version incremented by ``change``."""
        if change is None:
            raise null_violation("change")
        return self.commit_version(self._semver.increment(change))

    def commit_version(self: B, semver: SemVer) -> B:
        """Commit the draft as ``semver``.

        Raises:
            InvalidArgumentError: If the draft or ``semver`` is invalid
            ArtifactExistsError: If the resolved name was already emitted
            PersistenceError: If the file cannot be written
        """
        if semver is None:
            raise null_violation("semver")
        if not isinstance(semver, SemVer):
            raise unsupported_type_violation("semver", semver)

        self._validate_draft()

        effective_namespace = self.resolve_effective_namespace(semver)
        fully_qualified_name = resolve_fully_qualified_name(
            effective_namespace, self._simple_name
        )
        if self._registry.contains(fully_qualified_name):
            logger.warning("Rejected duplicate commit of %s", fully_qualified_name)
            raise artifact_exists_violation(fully_qualified_name)

        content = self.generate_file_content(effective_namespace, semver)
        path = self.writer.write(self._output_root, fully_qualified_name, content)

        self._registry.add(fully_qualified_name)
        self._semver = semver
        self._history.append(
            CommittedArtifact(
                class_type=self.class_type,
                fully_qualified_name=fully_qualified_name,
                namespace=effective_namespace,
                simple_name=self._simple_name,
                semver=semver,
                content=content,
                path=path,
            )
        )
        logger.info(
            "Committed %s %s as %s", self.class_type.value, fully_qualified_name, semver
        )
        return self

    def _validate_draft(self):
        self.validator.validate_output_root(self._output_root)
        self.validator.validate_package_name(self._namespace)
        self.validator.validate_class_name(self._simple_name)
        self.validate_additional_predicates()

    # Kind-specific hooks

    def validate_additional_predicates(self):
        """Validate kind-specific parts of the draft before committing."""
        pass

    @abstractmethod
    def generate_file_content(
        self, effective_namespace: Optional[str], semver: SemVer
    ) -> str:
        """Generate the complete file content for the draft."""
        pass
