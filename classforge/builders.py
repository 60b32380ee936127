"""
Concrete builders for plain classes and enums.

Both share the commit state machine of :class:`AbstractBuilder` and only
differ in their extra validation and in how content is rendered.
"""

from typing import List, Optional, Tuple

from .core.builder import AbstractBuilder, ClassType
from .core.config import ForgeConfig
from .core.errors import (
    already_exists_violation,
    does_not_exist_violation,
    duplicate_arguments_violation,
    null_or_empty_violation,
    null_violation,
    unsupported_type_violation,
)
from .core.generator import SourceGenerator
from .core.naming import NameValidator
from .core.semver import SemVer
from .core.writer import FileWriter
from .languages.java import DeserializingMethod, JavaGenerator
from .logging_config import get_logger

logger = get_logger(__name__)

ENUM_CONSTANT = "enum constant"


class ClassBuilder(AbstractBuilder):
    """Builder of plain classes."""

    class_type = ClassType.CLASS

    def __init__(
        self,
        config: Optional[ForgeConfig] = None,
        generator: Optional[SourceGenerator] = None,
        validator: Optional[NameValidator] = None,
        writer: Optional[FileWriter] = None,
    ):
        super().__init__(generator or JavaGenerator(), config, validator, writer)

    def generate_file_content(
        self, effective_namespace: Optional[str], semver: SemVer
    ) -> str:
        return self.generator.render_class(self.simple_name, effective_namespace)


class EnumBuilder(AbstractBuilder):
    """Builder of enums.

    Constants keep their insertion order, which is also the order they are
    declared in the generated source. ``update_constant`` keeps the
    position of the replaced constant.
    """

    class_type = ClassType.ENUM

    def __init__(
        self,
        config: Optional[ForgeConfig] = None,
        generator: Optional[SourceGenerator] = None,
        validator: Optional[NameValidator] = None,
        writer: Optional[FileWriter] = None,
    ):
        super().__init__(generator or JavaGenerator(), config, validator, writer)
        self._constants: List[str] = []
        self._deserializing_method: Optional[DeserializingMethod] = None
        self._default_constant: Optional[str] = None

    @property
    def constants(self) -> Tuple[str, ...]:
        return tuple(self._constants)

    @property
    def deserializing_method(self) -> Optional[DeserializingMethod]:
        return self._deserializing_method

    @property
    def default_constant(self) -> Optional[str]:
        return self._default_constant

    def add_constants(self, *names: str) -> "EnumBuilder":
        """
        Append constants in the given order.

        Either all names are added or, if any of them is invalid, none.

        Raises:
            InvalidArgumentError: If no names are given, one is None, a name
                is repeated, or a name is not a valid constant name
            ConflictError: If a name is already a constant
        """
        self._require_names(names)
        if len(set(names)) < len(names):
            raise duplicate_arguments_violation("enum_constant_names")

        for name in names:
            self.validator.validate_enum_constant_name(name)
            if name in self._constants:
                raise already_exists_violation(ENUM_CONSTANT, name)

        self._constants.extend(names)
        logger.debug("Added constants %s to %s", names, self.simple_name)
        return self

    def remove_constants(self, *names: str) -> "EnumBuilder":
        """
        Remove the named constants; all of them must exist.

        Raises:
            InvalidArgumentError: If no names are given or one is None
            ConflictError: If a name is not a constant
        """
        self._require_names(names)
        for name in names:
            if name not in self._constants:
                raise does_not_exist_violation(ENUM_CONSTANT, name)

        removed = set(names)
        self._constants = [c for c in self._constants if c not in removed]
        logger.debug("Removed constants %s from %s", names, self.simple_name)
        return self

    def update_constant(self, old_name: str, new_name: str) -> "EnumBuilder":
        """
        Rename a constant in place.

        Raises:
            InvalidArgumentError: If a name is None or ``new_name`` is invalid
            ConflictError: If ``old_name`` is absent or ``new_name`` present
        """
        if old_name is None:
            raise null_violation("old_enum_constant")
        if old_name not in self._constants:
            raise does_not_exist_violation(ENUM_CONSTANT, old_name)
        if new_name is None:
            raise null_violation("new_enum_constant")
        self.validator.validate_enum_constant_name(new_name)
        if new_name in self._constants:
            raise already_exists_violation(ENUM_CONSTANT, new_name)

        self._constants[self._constants.index(old_name)] = new_name
        if self._default_constant == old_name:
            self._default_constant = new_name
        return self

    def set_deserializing_method(
        self,
        deserializing_method: Optional[DeserializingMethod],
        default_constant: Optional[str] = None,
    ) -> "EnumBuilder":
        """
        Emit a ``fromValue`` method with the given strategies.

        Args:
            deserializing_method: Strategies, or None to emit no method
            default_constant: Constant returned by FALLBACK strategies;
                checked against the constants on commit
        """
        if deserializing_method is not None and not isinstance(
            deserializing_method, DeserializingMethod
        ):
            raise unsupported_type_violation(
                "deserializing_method", deserializing_method
            )
        if default_constant is not None:
            self.validator.validate_enum_constant_name(
                default_constant, key="default_constant"
            )
        self._deserializing_method = deserializing_method
        self._default_constant = default_constant
        return self

    def validate_additional_predicates(self):
        if not self._constants:
            raise null_or_empty_violation("enum_constants")

        method = self._deserializing_method
        if method is not None and method.uses_fallback:
            if self._default_constant is None:
                raise null_violation("default_constant")
            if self._default_constant not in self._constants:
                raise does_not_exist_violation(ENUM_CONSTANT, self._default_constant)

    def generate_file_content(
        self, effective_namespace: Optional[str], semver: SemVer
    ) -> str:
        from_value_method = None
        if self._deserializing_method is not None:
            from_value_method = self._deserializing_method.generate_method_code(
                self.simple_name, self._default_constant, self.generator
            )
        return self.generator.render_enum(
            self.simple_name, effective_namespace, self._constants, from_value_method
        )

    @staticmethod
    def _require_names(names: Tuple[str, ...]):
        if not names or any(name is None for name in names):
            raise null_or_empty_violation("enum_constant_names")
