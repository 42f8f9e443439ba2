"""Tests for porcelain status line classification."""

import pytest

from promptline.status import (
    StatusCategory,
    StatusEntry,
    classify_entry,
    is_header,
    parse_status_line,
)


class TestParseStatusLine:
    def test_splits_codes_and_payload(self) -> None:
        entry = parse_status_line("M  src/app.py")
        assert entry == StatusEntry(index="M", worktree=" ", payload=" src/app.py")

    def test_keeps_leading_space_as_index_code(self) -> None:
        entry = parse_status_line(" M src/app.py")
        assert entry is not None
        assert entry.index == " "
        assert entry.worktree == "M"

    def test_strips_trailing_whitespace(self) -> None:
        entry = parse_status_line("?? notes.txt  \r")
        assert entry is not None
        assert entry.payload == " notes.txt"

    @pytest.mark.parametrize("line", ["", "M", "??", "M ", "  \t"])
    def test_short_lines_are_ignored(self, line: str) -> None:
        assert parse_status_line(line) is None

    def test_three_characters_is_enough(self) -> None:
        entry = parse_status_line("A x")
        assert entry == StatusEntry(index="A", worktree=" ", payload="x")

    def test_header_line(self) -> None:
        entry = parse_status_line("## main...origin/main")
        assert entry is not None
        assert is_header(entry)
        assert entry.payload == " main...origin/main"


class TestIsHeader:
    def test_single_hash_is_not_header(self) -> None:
        assert not is_header(StatusEntry(index="#", worktree=" ", payload="x"))


class TestClassifyEntry:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("?? new.txt", StatusCategory.UNTRACKED),
            (" M file.py", StatusCategory.CHANGED),
            ("MM file.py", StatusCategory.CHANGED),
            ("AM file.py", StatusCategory.CHANGED),
            (" D gone.py", StatusCategory.DELETED),
            ("AD gone.py", StatusCategory.DELETED),
            ("MD gone.py", StatusCategory.DELETED),
            ("UU both.py", StatusCategory.CONFLICTED),
            ("UA both.py", StatusCategory.CONFLICTED),
            ("M  staged.py", StatusCategory.STAGED),
            ("A  added.py", StatusCategory.STAGED),
            ("D  removed.py", StatusCategory.STAGED),
            ("R  old.py -> new.py", StatusCategory.STAGED),
            ("C  a.py -> b.py", StatusCategory.STAGED),
            ("AA both.py", StatusCategory.STAGED),
            ("DU both.py", StatusCategory.STAGED),
        ],
    )
    def test_categories(self, line: str, expected: StatusCategory) -> None:
        entry = parse_status_line(line)
        assert entry is not None
        assert classify_entry(entry) is expected

    def test_worktree_deletion_outranks_index_conflict(self) -> None:
        entry = parse_status_line("UD both.py")
        assert entry is not None
        assert classify_entry(entry) is StatusCategory.DELETED

    def test_header_is_not_classified(self) -> None:
        entry = parse_status_line("## main")
        assert entry is not None
        assert classify_entry(entry) is None

    def test_clean_codes_are_dropped(self) -> None:
        entry = StatusEntry(index=" ", worktree=" ", payload="file.py")
        assert classify_entry(entry) is None

    def test_ignored_marker_is_staged(self) -> None:
        # "!!" only appears with --ignored; it falls through to the index rule
        entry = parse_status_line("!! build/")
        assert entry is not None
        assert classify_entry(entry) is StatusCategory.STAGED
