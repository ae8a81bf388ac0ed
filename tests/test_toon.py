"""Tests for the TOON encoder."""

from __future__ import annotations

from pathlib import Path

from godefs.collect import collect_packages
from godefs.toon import _encode_value, encode


class TestEncode:
    """Tests for encode."""

    def test_sections(self, go_module: Path) -> None:
        output = encode(go_module, collect_packages(go_module))
        lines = output.splitlines()
        assert lines[0] == "root: app"
        assert "packages[2]{import_path,dir,files}:" in lines
        assert "  example.com/app,.,1" in lines
        assert "  example.com/app/internal/store,internal/store,1" in lines
        assert "types[3]{full_name,full_path,file,line}:" in lines

    def test_type_rows(self, go_module: Path) -> None:
        output = encode(go_module, collect_packages(go_module))
        assert "  main.Config,example.com/app.Config,main.go,3" in output
        assert (
            "  store.New.options,example.com/app/internal/store.options,"
            "internal/store/store.go,7" in output
        )

    def test_no_trailing_newline(self, go_module: Path) -> None:
        assert not encode(go_module, []).endswith("\n")

    def test_empty(self, tmp_path: Path) -> None:
        output = encode(tmp_path, [])
        assert "packages[0]{import_path,dir,files}:" in output
        assert "types[0]{full_name,full_path,file,line}:" in output


class TestEncodeValue:
    """Tests for value quoting."""

    def test_plain(self) -> None:
        assert _encode_value("example.com/app") == "example.com/app"

    def test_empty(self) -> None:
        assert _encode_value("") == '""'

    def test_needs_quoting(self) -> None:
        assert _encode_value("a,b") == '"a,b"'
        assert _encode_value("x:y") == '"x:y"'

    def test_keywords_quoted(self) -> None:
        assert _encode_value("true") == '"true"'

    def test_numbers_unquoted(self) -> None:
        assert _encode_value("42") == "42"

    def test_leading_dash_quoted(self) -> None:
        assert _encode_value("-gen") == '"-gen"'
