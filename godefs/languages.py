"""Language registry for tree-sitter grammars and source file filters."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from pathlib import PurePath
from typing import TYPE_CHECKING

from tree_sitter_language_pack import get_language, get_parser

if TYPE_CHECKING:
    from tree_sitter import Language, Parser


EXTENSION_MAP: dict[str, str] = {
    ".go": "go",
}


@functools.cache
def _cached_parser(name: str) -> Parser:
    """Return a cached tree-sitter Parser for the given language."""
    return get_parser(name)


@dataclass(frozen=True)
class TreeSitterLanguage:
    """A tree-sitter language and the rules for which of its files belong to a package."""

    name: str
    extensions: tuple[str, ...]
    test_suffix: str = ""
    generated_suffix: str = ""

    def get_language(self) -> Language:
        """Get the tree-sitter Language object."""
        return get_language(self.name)

    def get_parser(self) -> Parser:
        """Get a configured tree-sitter Parser (cached).

        The parser is shared process-wide and is not safe to use from
        several threads at once.
        """
        return _cached_parser(self.name)

    def includes(self, filename: str) -> bool:
        """Check whether a file name is a package source file.

        The extension is compared case-insensitively. Test files and
        generated files are excluded by suffix.

        Args:
            filename: Bare file name (no directory).

        Returns:
            True if the file belongs to the package's sources.
        """
        if PurePath(filename).suffix.lower() not in self.extensions:
            return False
        if self.test_suffix and filename.endswith(self.test_suffix):
            return False
        if self.generated_suffix and filename.endswith(self.generated_suffix):
            return False
        return True


LANGUAGES: dict[str, TreeSitterLanguage] = {
    "go": TreeSitterLanguage(
        name="go",
        extensions=(".go",),
        test_suffix="_test.go",
        generated_suffix="-gen.go",
    ),
}

GO = LANGUAGES["go"]


def language_for_extension(ext: str) -> TreeSitterLanguage | None:
    """Look up a language config by file extension.

    Args:
        ext: File extension including the dot (e.g., ".go"), any case.

    Returns:
        The TreeSitterLanguage config, or None if unsupported.
    """
    lang_name = EXTENSION_MAP.get(ext.lower())
    if lang_name is None:
        return None
    return LANGUAGES.get(lang_name)
