"""Tests for candidate file loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from closestmatch.infrastructure.candidates import (
    CandidateFileError,
    load_candidates,
    parse_candidates_text,
    parse_candidates_yaml,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestParseCandidatesText:
    """Tests for parse_candidates_text function."""

    def test_one_candidate_per_line(self) -> None:
        """Each line is a candidate."""
        assert parse_candidates_text("Goku\nVegeta\nGohan\n") == [
            "Goku",
            "Vegeta",
            "Gohan",
        ]

    def test_skips_blank_lines(self) -> None:
        """Empty and whitespace-only lines are dropped."""
        assert parse_candidates_text("a\n\n   \nb") == ["a", "b"]

    def test_keeps_inner_whitespace(self) -> None:
        """Candidates are not trimmed."""
        assert parse_candidates_text("  Master Roshi\n") == ["  Master Roshi"]

    def test_handles_crlf(self) -> None:
        """Windows line endings are stripped."""
        assert parse_candidates_text("a\r\nb\r\n") == ["a", "b"]

    def test_only_line_feeds_separate(self) -> None:
        """Form feeds and Unicode separators stay inside a candidate."""
        content = "Goku\u2028Black\nVegeta\x0cSSJ\nTrunks\x85Mirai\n"
        assert parse_candidates_text(content) == [
            "Goku\u2028Black",
            "Vegeta\x0cSSJ",
            "Trunks\x85Mirai",
        ]

    def test_empty_content(self) -> None:
        """Empty file means no candidates."""
        assert parse_candidates_text("") == []


class TestParseCandidatesYaml:
    """Tests for parse_candidates_yaml function."""

    def test_sequence(self) -> None:
        """A top-level list is the candidate list."""
        assert parse_candidates_yaml("- Goku\n- Vegeta\n") == ["Goku", "Vegeta"]

    def test_mapping_with_candidates_key(self) -> None:
        """A mapping must hold the list under 'candidates'."""
        content = "name: fighters\ncandidates:\n  - Piccolo\n  - Krillin\n"
        assert parse_candidates_yaml(content) == ["Piccolo", "Krillin"]

    def test_scalars_are_coerced(self) -> None:
        """Numbers and nulls become text."""
        assert parse_candidates_yaml("- 9000\n- null\n- yes\n") == ["9000", "", "True"]

    def test_empty_document(self) -> None:
        """An empty document means no candidates."""
        assert parse_candidates_yaml("") == []
        assert parse_candidates_yaml("candidates:\n") == []

    def test_invalid_yaml(self) -> None:
        """Malformed YAML is reported."""
        with pytest.raises(CandidateFileError, match="Invalid YAML"):
            parse_candidates_yaml("- [unclosed\n")

    def test_mapping_without_candidates(self) -> None:
        """A mapping without the key is rejected."""
        with pytest.raises(CandidateFileError, match="'candidates' key"):
            parse_candidates_yaml("names:\n  - a\n")

    def test_scalar_document(self) -> None:
        """A lone scalar is not a list."""
        with pytest.raises(CandidateFileError, match="must be a YAML sequence"):
            parse_candidates_yaml("just text")

    def test_nested_items(self) -> None:
        """Nested mappings are not candidates."""
        with pytest.raises(CandidateFileError, match="must be scalars"):
            parse_candidates_yaml("- name: Goku\n")


class TestLoadCandidates:
    """Tests for load_candidates function."""

    def test_loads_text_file(self, tmp_path: Path) -> None:
        """Non-YAML files are read line by line."""
        path = tmp_path / "names.txt"
        path.write_text("dog\npumpkin\n", encoding="utf-8")

        assert load_candidates(path) == ["dog", "pumpkin"]

    def test_text_file_keeps_unicode_separators(self, tmp_path: Path) -> None:
        """A line with a line separator character is one candidate."""
        path = tmp_path / "names.txt"
        path.write_text("Goku\u2028Black\nVegeta\x0cSSJ\n", encoding="utf-8")

        assert load_candidates(path) == ["Goku\u2028Black", "Vegeta\x0cSSJ"]

    def test_loads_yaml_file(self, tmp_path: Path) -> None:
        """.yaml and .yml files are parsed as YAML."""
        for name in ("names.yaml", "names.YML"):
            path = tmp_path / name
            path.write_text("- jello\n- bello\n", encoding="utf-8")
            assert load_candidates(path) == ["jello", "bello"]

    def test_yaml_looking_text_file_is_text(self, tmp_path: Path) -> None:
        """Only the extension decides the format."""
        path = tmp_path / "names.txt"
        path.write_text("- jello\n", encoding="utf-8")

        assert load_candidates(path) == ["- jello"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files raise CandidateFileError."""
        with pytest.raises(CandidateFileError, match="Failed to read"):
            load_candidates(tmp_path / "missing.txt")

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Non UTF-8 content is rejected."""
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9\n")

        with pytest.raises(CandidateFileError, match="not valid UTF-8"):
            load_candidates(path)

    def test_rejects_oversized_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Files over the size cap are rejected before reading."""
        monkeypatch.setattr(
            "closestmatch.infrastructure.candidates.MAX_CANDIDATES_SIZE", 10
        )
        path = tmp_path / "big.txt"
        path.write_text("x" * 11, encoding="utf-8")

        with pytest.raises(CandidateFileError, match="too large"):
            load_candidates(path)
