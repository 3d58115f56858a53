"""Tests for header deduplication."""

from pathlib import Path

import pytest

from jiraport.jira.headers import dedupe_header_names, dedupe_headers, deduped_file_path
from jiraport.jira.models import ImportFileError


class TestDedupeHeaderNames:
    """Tests for the pure renaming step."""

    def test_unique_headers_unchanged(self):
        """Test headers that appear once keep their names."""
        entries = dedupe_header_names(["Issue key", "Summary", "Status"])

        assert [(e.deduped, e.original) for e in entries] == [
            ("Issue key", "Issue key"),
            ("Summary", "Summary"),
            ("Status", "Status"),
        ]

    def test_duplicates_numbered_from_zero(self):
        """Test the i-th occurrence of a repeated header becomes header_i."""
        entries = dedupe_header_names(["A", "B", "A", "C", "A"])

        assert [e.deduped for e in entries] == ["A_0", "B", "A_1", "C", "A_2"]
        assert [e.original for e in entries] == ["A", "B", "A", "C", "A"]

    def test_deduped_names_are_unique(self):
        """Test every deduped name is distinct."""
        headers = ["Watchers", "Labels", "Watchers", "Labels", "Watchers", "Summary"]
        entries = dedupe_header_names(headers)

        names = [e.deduped for e in entries]
        assert len(names) == len(set(names))
        assert len(entries) == len(headers)


class TestDedupedFilePath:
    """Tests for the sanitized copy path."""

    def test_simple_name(self):
        """Test the segment goes before the extension."""
        assert deduped_file_path("foo.csv") == Path("foo.deduped.csv")

    def test_dotted_directory(self):
        """Test dots in directory names are ignored."""
        path = deduped_file_path("./exports.v2/jira.csv")
        assert path == Path("exports.v2/jira.deduped.csv")

    def test_multi_dot_name(self):
        """Test only the last extension is kept after the segment."""
        assert deduped_file_path("jira.2024.csv") == Path("jira.2024.deduped.csv")

    def test_no_extension(self):
        """Test a name without extension gets the segment appended."""
        assert deduped_file_path("export") == Path("export.deduped")


class TestDedupeHeaders:
    """Tests for rewriting an export."""

    def test_rewrites_header_and_copies_data(self, write_csv):
        """Test only the header line changes."""
        source = write_csv(
            "Summary,Watchers,Watchers\n"
            "First,alice,bob\n"
            'Second,"carol, jr",\n'
        )

        deduped = dedupe_headers(source)

        assert deduped.file_path == source.parent / "export.deduped.csv"
        original_lines = source.read_text(encoding="utf-8").split("\n")
        new_lines = deduped.file_path.read_text(encoding="utf-8").split("\n")
        assert len(new_lines) == len(original_lines)
        assert new_lines[0] == "Summary,Watchers_0,Watchers_1"
        assert new_lines[1:] == original_lines[1:]

    def test_header_map_order(self, write_csv):
        """Test the header map follows the original column order."""
        source = write_csv("Labels,Summary,Labels\nx,y,z\n")

        deduped = dedupe_headers(source)

        assert [(e.deduped, e.original) for e in deduped.header_map] == [
            ("Labels_0", "Labels"),
            ("Summary", "Summary"),
            ("Labels_1", "Labels"),
        ]

    def test_quoted_comma_in_header(self, write_csv):
        """Test a quoted header containing a comma is a single column."""
        source = write_csv('"Custom field (Team, Squad)",Summary\nCore,Thing\n')

        deduped = dedupe_headers(source)

        assert [e.original for e in deduped.header_map] == [
            "Custom field (Team, Squad)",
            "Summary",
        ]
        text = deduped.file_path.read_text(encoding="utf-8")
        assert text == '"Custom field (Team, Squad)",Summary\nCore,Thing\n'

    def test_quoted_newline_in_header(self, write_csv):
        """Test a header spanning two physical lines keeps the line count."""
        source = write_csv('"Two\nLines",Two\nx,y\n')

        deduped = dedupe_headers(source)

        assert [e.original for e in deduped.header_map] == ["Two\nLines", "Two"]
        assert deduped.file_path.read_text(encoding="utf-8") == '"Two\nLines",Two\nx,y\n'

    def test_crlf_line_endings_preserved(self, write_csv):
        """Test CRLF exports keep their line endings."""
        source = write_csv("A,A\r\n1,2\r\n")

        deduped = dedupe_headers(source)

        assert deduped.file_path.read_bytes() == b"A_0,A_1\r\n1,2\r\n"

    def test_bom_is_stripped(self, tmp_path):
        """Test a UTF-8 BOM does not leak into the first header."""
        source = tmp_path / "bom.csv"
        source.write_bytes("\ufeffIssue key,Summary\nP-1,S\n".encode("utf-8"))

        deduped = dedupe_headers(source)

        assert deduped.header_map[0].original == "Issue key"

    def test_header_only_file(self, write_csv):
        """Test a file without data lines or trailing newline."""
        source = write_csv("A,B,A")

        deduped = dedupe_headers(source)

        assert deduped.file_path.read_text(encoding="utf-8") == "A_0,B,A_1"

    def test_overwrites_existing_copy(self, write_csv, tmp_path):
        """Test a stale deduped file is truncated."""
        (tmp_path / "export.deduped.csv").write_text("stale\n" * 10, encoding="utf-8")
        source = write_csv("A\n1\n")

        deduped = dedupe_headers(source)

        assert deduped.file_path.read_text(encoding="utf-8") == "A\n1\n"

    def test_missing_file_raises(self, tmp_path):
        """Test a missing export is reported instead of ignored."""
        with pytest.raises(ImportFileError):
            dedupe_headers(tmp_path / "missing.csv")

    def test_empty_file_raises(self, write_csv):
        """Test an export without a header row fails."""
        with pytest.raises(ImportFileError, match="no header row"):
            dedupe_headers(write_csv(""))

    def test_unwritable_target_raises(self, write_csv, tmp_path):
        """Test a failed write of the copy is reported."""
        source = write_csv("A\n1\n")
        # A directory in the way of the output file makes the open fail
        (tmp_path / "export.deduped.csv").mkdir()

        with pytest.raises(ImportFileError, match="Could not write"):
            dedupe_headers(source)
