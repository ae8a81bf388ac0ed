"""Per-package registry of Go source files and type declarations."""
