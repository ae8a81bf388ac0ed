"""TOON (Token-Oriented Object Notation) encoder."""

from __future__ import annotations

import os
import re
from pathlib import Path

from godefs.packages import PackageDefinitions

_NEEDS_QUOTING = re.compile(r'[,:"\\{}\[\]]')
_LOOKS_NUMERIC = re.compile(r"^-?(?:0|[1-9]\d*)(?:\.\d+)?$")
_KEYWORDS = frozenset({"true", "false", "null"})


def encode(root: Path, packages: list[PackageDefinitions]) -> str:
    """Encode collected packages and their types into TOON format.

    Args:
        root: Module root; directories and files are shown relative to it.
        packages: Registries with type definitions filled in.

    Returns:
        TOON-formatted string (no trailing newline).
    """
    parts: list[str] = [f"root: {_encode_value(root.name)}"]

    package_rows = [
        [pkg.import_path, _relative(root, pkg.dir), str(pkg.file_count())]
        for pkg in packages
    ]
    parts.append(
        _format_tabular("packages", ["import_path", "dir", "files"], package_rows)
    )

    type_rows: list[list[str]] = []
    for pkg in packages:
        for full_name, type_spec in pkg.type_definitions.items():
            type_rows.append(
                [
                    full_name,
                    type_spec.full_path(),
                    _relative(root, type_spec.file.path),
                    str(type_spec.line),
                ]
            )
    parts.append(
        _format_tabular(
            "types",
            ["full_name", "full_path", "file", "line"],
            type_rows,
        )
    )

    return "\n".join(parts)


def _relative(root: Path, path: str | Path) -> str:
    rel = os.path.relpath(path, root)
    return Path(rel).as_posix()


def _format_tabular(
    name: str,
    columns: list[str],
    rows: list[list[str]],
) -> str:
    """Format a tabular array in TOON notation.

    Args:
        name: The array field name.
        columns: Column header names.
        rows: List of row data (each row is list of strings).

    Returns:
        TOON tabular array string.
    """
    header = f"{name}[{len(rows)}]{{{','.join(columns)}}}:"
    lines = [header]
    for row in rows:
        encoded = [_encode_value(cell) for cell in row]
        lines.append(f"  {','.join(encoded)}")
    return "\n".join(lines)


def _encode_value(value: str) -> str:
    """Encode a single value, quoting if necessary per TOON rules."""
    if not value:
        return '""'

    if value != value.strip():
        return _quote(value)

    if any(c in value for c in "\n\r\t"):
        return _quote(value)

    if value.lower() in _KEYWORDS:
        return _quote(value)

    if _LOOKS_NUMERIC.match(value):
        return value

    if _NEEDS_QUOTING.search(value):
        return _quote(value)

    if value.startswith("-"):
        return _quote(value)

    return value


def _quote(value: str) -> str:
    """Double-quote a string with TOON escape rules."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    return f'"{escaped}"'
