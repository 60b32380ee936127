"""Persistence of generated source files."""

from os import PathLike
from pathlib import Path
from typing import Union

from ..logging_config import get_logger
from .errors import PersistenceError

logger = get_logger(__name__)


class FileWriter:
    """Writes generated content below an output root.

    The fully-qualified name is mapped onto nested directories, so
    ``com.example.Foo`` becomes ``<root>/com/example/Foo<extension>``.
    Missing directories are created and existing files are overwritten.
    """

    def __init__(self, file_extension: str = ".java", encoding: str = "utf-8"):
        self.file_extension = file_extension
        self.encoding = encoding

    def resolve_path(
        self, output_root: Union[str, PathLike], fully_qualified_name: str
    ) -> Path:
        """Return the file path a fully-qualified name is written to."""
        *packages, leaf = fully_qualified_name.split(".")
        return Path(output_root).joinpath(*packages, f"{leaf}{self.file_extension}")

    def write(
        self,
        output_root: Union[str, PathLike],
        fully_qualified_name: str,
        content: str,
    ) -> Path:
        """Write ``content`` for ``fully_qualified_name`` and return the file path.

        Raises:
            PersistenceError: If the directories or the file cannot be written.
        """
        file_path = self.resolve_path(output_root, fully_qualified_name)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with file_path.open("w", encoding=self.encoding, newline="\n") as f:
                f.write(content)
        except OSError as e:
            logger.error("Error writing %s: %s", file_path, e, exc_info=True)
            raise PersistenceError(f"Failed to write {file_path}: {e}") from e

        logger.info("Wrote %s to %s", fully_qualified_name, file_path)
        return file_path
