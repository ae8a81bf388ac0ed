"""Per-package registry of Go source files and the types declared in them."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from godefs.exceptions import (
    PackageDirectoryError,
    PackageInvariantError,
    SourceParseError,
    SourceSyntaxError,
)
from godefs.languages import GO, TreeSitterLanguage
from godefs.models import FileInfo, SourceFile, TypeSpecDef
from godefs.parsing import parse_source_file


@dataclass
class _FileSlot:
    name: str
    file: SourceFile | None = None


class PackageDefinitions:
    """
    Source files and type definitions of one package directory.

    The file list is fixed when the registry is built. Each file is parsed
    at most once, on first access, unless a caller injects a tree it already
    parsed. ``type_definitions`` is filled by whoever walks the files; the
    registry itself never writes to it.

    A registry is not thread-safe: two threads loading the same slot may
    both parse the file. Confine an instance to one thread or guard it with
    a lock held across ``load_file_by_index``.

    Usage:
        pkg = PackageDefinitions("models", "example.com/app/models", "app/models")
        for idx in range(pkg.file_count()):
            file, fresh = pkg.load_file_by_index(idx)
    """

    def __init__(
        self,
        import_name: str,
        import_path: str,
        directory: str | Path,
        *,
        language: TreeSitterLanguage = GO,
        logger: logging.Logger | None = None,
    ):
        """
        Scan a package directory.

        Args:
            import_name: Package name used when importing it.
            import_path: Full import path of the package.
            directory: Directory holding the package's files.
            language: Decides which files are package sources.
            logger: Logger for scan messages. Defaults to this module's logger.

        Raises:
            PackageDirectoryError: If the directory cannot be listed.
        """
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._language = language

        directory = str(directory)
        directory = directory.rstrip("/\\") or directory
        try:
            with os.scandir(directory) as entries:
                filenames = [
                    entry.name
                    for entry in entries
                    if entry.is_file(follow_symlinks=False)
                    and language.includes(entry.name)
                ]
        except OSError as exc:
            raise PackageDirectoryError(directory, exc) from exc

        self.dir = directory
        self.import_name = import_name
        self.import_path = import_path
        self.type_definitions: dict[str, TypeSpecDef] = {}
        self._slots = [_FileSlot(name) for name in filenames]

        self._logger.info("load package - %s %s", self.dir, filenames)

    def __repr__(self) -> str:
        return (
            f"PackageDefinitions(import_path={self.import_path!r}, "
            f"dir={self.dir!r}, files={self.file_count()})"
        )

    @property
    def filenames(self) -> tuple[str, ...]:
        return tuple(slot.name for slot in self._slots)

    def _simple_filename(self, filename: str | Path) -> str:
        filename = str(filename)
        if filename.startswith(self.dir):
            filename = filename[len(self.dir):]
        return filename.lstrip("/\\")

    def _slot_for(self, filename: str | Path) -> _FileSlot | None:
        simple = self._simple_filename(filename)
        for slot in self._slots:
            if slot.name == simple:
                return slot
        return None

    def must_add(self, filename: str | Path, file: SourceFile) -> None:
        """
        Store a file that was already parsed elsewhere.

        Any tree already held for that file is replaced.

        Args:
            filename: Path of the file, either bare or prefixed with this
                package's directory.
            file: The parsed file.

        Raises:
            PackageInvariantError: If the file is not one of this package's
                files. This means the caller's bookkeeping is wrong.
        """
        slot = self._slot_for(filename)
        if slot is None:
            raise PackageInvariantError(
                f"{filename} does not exist in {self.dir} "
                f"(known files: {', '.join(self.filenames) or 'none'})"
            )
        slot.file = file

    def find_file(self, filename: str | Path) -> SourceFile | None:
        """Return the parsed file for a path, or None if unknown or not loaded yet."""
        slot = self._slot_for(filename)
        if slot is None:
            return None
        return slot.file

    def file_count(self) -> int:
        return len(self._slots)

    def load_file_by_index(self, idx: int) -> tuple[SourceFile, bool]:
        """
        Return the parsed file at ``idx``, parsing it on first use.

        Args:
            idx: Position in ``filenames``.

        Returns:
            Tuple of (file, fresh) where fresh is True only when this call
            parsed the file.

        Raises:
            SourceParseError: If the file cannot be read or parsed. Nothing
                is cached, so a later call tries again.
        """
        slot = self._slots[idx]
        if slot.file is not None:
            return slot.file, False

        path = Path(self.dir) / slot.name
        try:
            file = parse_source_file(path, self._language)
        except (OSError, SourceSyntaxError) as exc:
            raise SourceParseError(path, exc) from exc

        slot.file = file
        return file, True

    def file_infos(self) -> Iterator[FileInfo]:
        """Yield every file of the package in order, loading as needed."""
        for idx in range(self.file_count()):
            file, _ = self.load_file_by_index(idx)
            yield FileInfo(file=file, path=file.path, package_path=self.import_path)

    def find_type_spec(self, full_name: str) -> TypeSpecDef | None:
        return self.type_definitions.get(full_name)
