"""Tests for cpub.core.properties module."""

from __future__ import annotations

from pathlib import Path

from cpub.core.properties import LOCAL_PROPERTIES, load_properties, parse_properties


class TestParseProperties:
    """Tests for parse_properties()."""

    def test_separators(self) -> None:
        text = "REPO_USER=alice\nREPO_PASSWORD: secret\nREPO_RELEASE_URL https://repo.example.com/releases\n"
        props = parse_properties(text)
        assert props == {
            "REPO_USER": "alice",
            "REPO_PASSWORD": "secret",
            "REPO_RELEASE_URL": "https://repo.example.com/releases",
        }

    def test_comments_and_blank_lines_skipped(self) -> None:
        text = "# generated by Android Studio\n\n! legacy comment\nsdk.dir=/opt/android\n"
        assert parse_properties(text) == {"sdk.dir": "/opt/android"}

    def test_whitespace_around_separator(self) -> None:
        assert parse_properties("  key   =   value") == {"key": "value"}

    def test_empty_value(self) -> None:
        assert parse_properties("REPO_USER=") == {"REPO_USER": ""}

    def test_line_continuation(self) -> None:
        text = "REPO_RELEASE_URL=https://repo.example.com/\\\n    releases\n"
        assert parse_properties(text) == {"REPO_RELEASE_URL": "https://repo.example.com/releases"}

    def test_escaped_backslash_does_not_continue(self) -> None:
        text = "dir=C:\\\\tools\\\\\nnext=1\n"
        assert parse_properties(text) == {"dir": "C:\\tools\\", "next": "1"}

    def test_escapes(self) -> None:
        text = "sdk.dir=C\\:\\\\Android\nname=caf\\u00e9\ntabbed=a\\tb\n"
        props = parse_properties(text)
        assert props["sdk.dir"] == "C:\\Android"
        assert props["name"] == "café"
        assert props["tabbed"] == "a\tb"

    def test_escaped_separator_in_key(self) -> None:
        assert parse_properties("a\\=b=c") == {"a=b": "c"}

    def test_later_key_wins(self) -> None:
        assert parse_properties("REPO_USER=a\nREPO_USER=b\n") == {"REPO_USER": "b"}

    def test_value_keeps_inner_separators(self) -> None:
        props = parse_properties("REPO_SNAPSHOT_URL=https://host:8081/repo?a=b")
        assert props["REPO_SNAPSHOT_URL"] == "https://host:8081/repo?a=b"


class TestLoadProperties:
    """Tests for load_properties()."""

    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / LOCAL_PROPERTIES
        path.write_text("REPO_USER=alice\n", encoding="utf-8")
        assert load_properties(path) == {"REPO_USER": "alice"}

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load_properties(tmp_path / LOCAL_PROPERTIES) == {}

    def test_directory_is_empty(self, tmp_path: Path) -> None:
        assert load_properties(tmp_path) == {}

    def test_undecodable_file_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / LOCAL_PROPERTIES
        path.write_bytes(b"REPO_USER=\xff\xfe\n")
        assert load_properties(path) == {}
