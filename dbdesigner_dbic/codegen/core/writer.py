"""
Persist generated modules to disk.

Maps fully qualified module names to file paths below an optional
output directory and writes the generated sources.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from ...logging_config import get_logger
from .naming import MODULE_SEPARATOR, split_module_name

logger = get_logger(__name__)


class WriteError(Exception):
    """Exception raised when a generated file cannot be written."""

    pass


class FileWriter:
    """Writes generated modules, one file per module."""

    def __init__(
        self,
        output_path: Optional[Union[str, Path]] = None,
        file_extension: str = ".pm",
        separator: str = MODULE_SEPARATOR,
    ):
        """
        Initialize file writer.

        Args:
            output_path: Root directory (current directory if None)
            file_extension: Suffix of generated files
            separator: Module path separator used in module names
        """
        self.output_path = Path(output_path) if output_path else None
        self.file_extension = file_extension
        self.separator = separator

    def module_path(self, module_name: str) -> Path:
        """
        Convert a module name to its file path.

        ``MyApp::DB::Book`` becomes ``<output_path>/MyApp/DB/Book.pm``.
        """
        segments = split_module_name(module_name, self.separator)
        if not segments:
            raise WriteError(f"Cannot derive a file name from module {module_name!r}")

        *directories, file_name = segments
        directory = self.output_path.joinpath(*directories) if self.output_path else Path(*directories)
        return directory / f"{file_name}{self.file_extension}"

    def write_file(self, module_name: str, source: str) -> Path:
        """
        Write one module, creating intermediate directories.

        Raises:
            WriteError: If the directory or the file cannot be created
        """
        path = self.module_path(module_name)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        except OSError as e:
            logger.error("Couldn't create %s: %s", path, e)
            raise WriteError(f"Couldn't create {path}: {e}") from e

        logger.debug("Wrote %s", path)
        return path

    def write_files(self, files: Dict[str, str]) -> List[Path]:
        """
        Write all modules; stops at the first failure.

        Args:
            files: Sources keyed by fully qualified module name

        Returns:
            Paths of the written files, in the order given

        Raises:
            WriteError: On the first file that cannot be written
        """
        written = []
        for module_name, source in files.items():
            written.append(self.write_file(module_name, source))

        logger.info("Wrote %d files", len(written))
        return written
