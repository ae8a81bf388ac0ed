"""Build package registries for a module and fill in their type definitions."""

from __future__ import annotations

import logging
from pathlib import Path

from godefs.discovery import discover_packages
from godefs.languages import GO, TreeSitterLanguage
from godefs.models import TypeSpecDef
from godefs.packages import PackageDefinitions
from godefs.parsing import extract_type_specs

logger = logging.getLogger(__name__)


def parse_types(package: PackageDefinitions) -> int:
    """Load every file of a package and register the types it declares.

    Definitions are keyed by ``full_name()``; a later declaration with the
    same full name replaces an earlier one.

    Args:
        package: The registry to fill.

    Returns:
        Number of type declarations found.

    Raises:
        SourceParseError: If any file of the package fails to parse.
    """
    count = 0
    for file_info in package.file_infos():
        for type_spec in extract_type_specs(file_info):
            package.type_definitions[type_spec.full_name()] = type_spec
            count += 1
    return count


def collect_packages(
    root: Path,
    *,
    module_path: str | None = None,
    extra_ignores: list[str] | None = None,
    language: TreeSitterLanguage = GO,
    logger: logging.Logger | None = None,
) -> list[PackageDefinitions]:
    """Discover every package under root and collect its type definitions.

    Args:
        root: Module root directory.
        module_path: Import path of root (see ``discover_packages``).
        extra_ignores: Additional gitignore-style patterns to exclude.
        language: Language whose files make up a package.
        logger: Logger handed to each registry.

    Returns:
        One PackageDefinitions per package, ordered by directory.

    Raises:
        PackageDirectoryError: If a package directory cannot be listed.
        SourceParseError: If a source file fails to parse.
    """
    packages: list[PackageDefinitions] = []
    for rel_dir, import_path in discover_packages(
        root,
        module_path=module_path,
        extra_ignores=extra_ignores,
        language=language,
    ):
        package = PackageDefinitions(
            import_path.rsplit("/", 1)[-1],
            import_path,
            root / rel_dir,
            language=language,
            logger=logger,
        )
        parse_types(package)
        packages.append(package)
    return packages


def unique_definitions(
    packages: list[PackageDefinitions],
) -> dict[str, TypeSpecDef]:
    """Index all definitions of several packages by ``full_path()``.

    Function-scoped types do not get a distinct full path, so when two
    definitions share one the first is kept and the clash is logged.
    """
    definitions: dict[str, TypeSpecDef] = {}
    for package in packages:
        for type_spec in package.type_definitions.values():
            key = type_spec.full_path()
            if key in definitions:
                logger.warning(
                    "duplicate definition %s (%s shadowed by %s)",
                    key,
                    type_spec.full_name(),
                    definitions[key].full_name(),
                )
                continue
            definitions[key] = type_spec
    return definitions
