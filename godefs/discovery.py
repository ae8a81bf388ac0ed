"""Go package discovery with gitignore support."""

from __future__ import annotations

import os
import re
import subprocess
from pathlib import Path, PurePosixPath

import pathspec

from godefs.languages import GO, TreeSitterLanguage

SKIP_DIRS: frozenset[str] = frozenset(
    {
        "vendor",
        "testdata",
        "node_modules",
        ".git",
        ".hg",
        ".svn",
        "build",
        "dist",
    }
)

_MODULE_LINE = re.compile(r"^\s*module\s+\"?([^\s\"]+)\"?\s*(?://.*)?$")


def _git_ls_files(root: Path) -> set[str] | None:
    """Return the set of git-tracked and untracked-but-not-ignored files.

    Uses ``git ls-files --cached --others --exclude-standard`` to respect
    all gitignore files (root, subdirectory, and global).

    Returns:
        Set of repo-relative file paths, or None if git is unavailable
        or the directory is not a git repository.
    """
    if not (root / ".git").exists():
        return None
    try:
        result = subprocess.run(
            ["git", "ls-files", "--cached", "--others", "--exclude-standard"],
            cwd=root,
            capture_output=True,
            text=True,
            timeout=10,
            check=False,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return set(result.stdout.splitlines())


def read_module_path(root: Path) -> str | None:
    """Return the module path declared in ``root/go.mod``, if any."""
    go_mod = root / "go.mod"
    if not go_mod.is_file():
        return None
    for line in go_mod.read_text(encoding="utf-8").splitlines():
        match = _MODULE_LINE.match(line)
        if match:
            return match.group(1)
    return None


def import_path_for(module_path: str, rel_dir: Path) -> str:
    """Join a module path and a module-relative directory into an import path."""
    parts = [p for p in PurePosixPath(rel_dir.as_posix()).parts if p != "."]
    return "/".join([module_path, *parts])


def discover_packages(
    root: Path,
    *,
    module_path: str | None = None,
    extra_ignores: list[str] | None = None,
    language: TreeSitterLanguage = GO,
) -> list[tuple[Path, str]]:
    """Walk root and return (relative_dir, import_path) for every package.

    A directory is a package when it directly holds at least one source
    file accepted by ``language.includes``.

    Args:
        root: Module root directory.
        module_path: Import path of root. Defaults to the go.mod module
            line, then to the root directory's name.
        extra_ignores: Additional gitignore-style patterns to exclude.
        language: Language whose files make up a package.

    Returns:
        List of (relative_dir, import_path) tuples, sorted by directory.
    """
    if module_path is None:
        module_path = read_module_path(root) or root.name

    git_files = _git_ls_files(root)
    gitignore = _load_gitignore(root) if git_files is None else None

    extra_spec = None
    if extra_ignores:
        extra_spec = pathspec.PathSpec.from_lines("gitignore", extra_ignores)

    results: list[tuple[Path, str]] = []

    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        # Prune skip dirs plus the hidden and underscore dirs the go tool ignores
        dirnames[:] = sorted(
            d
            for d in dirnames
            if d not in SKIP_DIRS and not d.startswith((".", "_"))
        )

        rel_dir = Path(dirpath).relative_to(root)

        for fname in sorted(filenames):
            if fname.startswith(".") or not language.includes(fname):
                continue

            if (Path(dirpath) / fname).is_symlink():
                continue

            rel = (rel_dir / fname).as_posix()

            if git_files is not None:
                if rel not in git_files:
                    continue
            elif gitignore and gitignore.match_file(rel):
                continue

            if extra_spec and extra_spec.match_file(rel):
                continue

            results.append((rel_dir, import_path_for(module_path, rel_dir)))
            break

    results.sort()
    return results


def _load_gitignore(root: Path) -> pathspec.PathSpec:
    """Load .gitignore from root, returning a PathSpec matcher."""
    gitignore_path = root / ".gitignore"
    if gitignore_path.is_file():
        lines = gitignore_path.read_text(encoding="utf-8").splitlines()
        return pathspec.PathSpec.from_lines("gitignore", lines)
    return pathspec.PathSpec.from_lines("gitignore", [])
