"""Shared test fixtures for godefs."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def go_package(tmp_path: Path) -> Path:
    """Create a package directory with source, test, generated and other files."""
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    (pkg / "models.go").write_text(
        """\
// Package pkg holds models.
package pkg

// Foo is declared at package scope.
type Foo struct {
\tName string
}

func Baz() {
\ttype Bar struct{ X int }
\t_ = Bar{}
}
""",
        encoding="utf-8",
    )
    (pkg / "util.go").write_text(
        """\
package pkg

type Bar int

func Qux() {
\ttype Bar string
\t_ = Bar("")
}
""",
        encoding="utf-8",
    )
    (pkg / "UPPER.GO").write_text("package pkg\n\ntype Upper bool\n", encoding="utf-8")
    (pkg / "models_test.go").write_text("package pkg\n", encoding="utf-8")
    (pkg / "types-gen.go").write_text("package pkg\n", encoding="utf-8")
    (pkg / "README.md").write_text("# pkg\n", encoding="utf-8")
    (pkg / "notes.txt").write_text("hello", encoding="utf-8")
    (pkg / "nested.go").mkdir()
    return pkg


@pytest.fixture()
def go_module(tmp_path: Path) -> Path:
    """Create a small Go module with a root package and one nested package."""
    root = tmp_path / "app"
    root.mkdir()
    (root / "go.mod").write_text(
        "module example.com/app\n\ngo 1.22\n", encoding="utf-8"
    )
    (root / "main.go").write_text(
        """\
package main

type Config struct {
\tAddr string
}

func main() {}
""",
        encoding="utf-8",
    )
    store = root / "internal" / "store"
    store.mkdir(parents=True)
    (store / "store.go").write_text(
        """\
package store

// Store keeps records.
type Store struct{}

func New() *Store {
\ttype options struct{ size int }
\t_ = options{}
\treturn &Store{}
}
""",
        encoding="utf-8",
    )
    (store / "store_test.go").write_text(
        "package store\n\ntype fixture struct{}\n", encoding="utf-8"
    )
    return root
