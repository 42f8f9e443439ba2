"""Property-based tests for status classification and summaries."""

from hypothesis import given, strategies as st

from promptline.status import (
    RunSummary,
    StatusCategory,
    build_summary,
    classify_entry,
    parse_divergence,
    parse_status_line,
)

# =============================================================================
# Strategies
# =============================================================================

status_code = st.sampled_from(" MADRCU?!T")

# Paths never end in whitespace, so stripping the line leaves them intact
path = st.text(
    alphabet=st.characters(whitelist_categories=["L", "N"], whitelist_characters="._-/"),
    min_size=1,
    max_size=40,
)

status_line = st.builds(lambda i, w, p: f"{i}{w} {p}", status_code, status_code, path)

branch_name = st.text(
    alphabet=st.characters(whitelist_categories=["L", "N"], whitelist_characters="._-/"),
    min_size=1,
    max_size=30,
).filter(lambda name: "..." not in name)

counts = st.integers(min_value=0, max_value=10_000)

run_summary = st.builds(
    RunSummary,
    branch=st.none() | branch_name,
    ahead=counts,
    behind=counts,
    staged=counts,
    conflicts=counts,
    changed=counts,
    untracked=counts,
    stashes=counts,
    clean=st.booleans(),
    deleted=counts,
)


def _summarize(lines: list[str], header: str = "## main") -> RunSummary:
    output = "\n".join([header, *lines]) + "\n"
    return build_summary(output, resolve_detached=lambda: None, count_stashes=lambda: 0)


# =============================================================================
# Classification Properties
# =============================================================================


@given(index=status_code, payload=path)
def test_worktree_modified_is_always_changed(index: str, payload: str) -> None:
    """Property: a worktree M classifies as changed whatever the index code."""
    entry = parse_status_line(f"{index}M {payload}")
    assert entry is not None
    assert classify_entry(entry) is StatusCategory.CHANGED


@given(index=status_code, payload=path)
def test_worktree_deleted_is_always_deleted(index: str, payload: str) -> None:
    """Property: a worktree D classifies as deleted whatever the index code."""
    entry = parse_status_line(f"{index}D {payload}")
    assert entry is not None
    assert classify_entry(entry) is StatusCategory.DELETED


@given(payload=path)
def test_double_question_mark_is_untracked(payload: str) -> None:
    entry = parse_status_line(f"?? {payload}")
    assert entry is not None
    assert classify_entry(entry) is StatusCategory.UNTRACKED


@given(worktree=st.sampled_from(" AURCT?!"), payload=path)
def test_index_unmerged_is_conflicted(worktree: str, payload: str) -> None:
    """Property: index U is a conflict unless the worktree reports M or D."""
    entry = parse_status_line(f"U{worktree} {payload}")
    assert entry is not None
    assert classify_entry(entry) is StatusCategory.CONFLICTED


@given(line=status_line)
def test_classification_ignores_trailing_whitespace(line: str) -> None:
    plain = parse_status_line(line)
    padded = parse_status_line(line + "  \t")
    assert plain is not None
    assert padded is not None
    assert classify_entry(plain) == classify_entry(padded)


# =============================================================================
# Summary Properties
# =============================================================================


@given(lines=st.lists(status_line, max_size=30))
def test_clean_iff_no_classified_entries(lines: list[str]) -> None:
    """Property: clean is set exactly when every category count is zero."""
    summary = _summarize(lines)
    total = (
        summary.staged
        + summary.conflicts
        + summary.changed
        + summary.untracked
        + summary.deleted
    )
    assert summary.clean is (total == 0)


@given(lines=st.lists(status_line, max_size=30))
def test_counts_match_classified_lines(lines: list[str]) -> None:
    """Property: each line is counted at most once."""
    summary = _summarize(lines)
    classified = 0
    for line in lines:
        entry = parse_status_line(line)
        if entry is not None and classify_entry(entry) is not None:
            classified += 1
    total = (
        summary.staged
        + summary.conflicts
        + summary.changed
        + summary.untracked
        + summary.deleted
    )
    assert total == classified


@given(name=branch_name, lines=st.lists(status_line, max_size=10))
def test_branch_name_survives_entries(name: str, lines: list[str]) -> None:
    summary = _summarize(lines, header=f"## {name}")
    assert summary.branch == name


@given(ahead=counts, behind=counts)
def test_divergence_round_trip(ahead: int, behind: int) -> None:
    assert parse_divergence(f"[ahead {ahead}, behind {behind}]") == (ahead, behind)


@given(summary=run_summary)
def test_line_always_has_ten_fields(summary: RunSummary) -> None:
    """Property: the rendered line splits into exactly ten fields."""
    fields = summary.to_line().split(" ")
    assert len(fields) == 10
    assert fields[0] == (summary.branch or "")
    assert fields[8] == ("1" if summary.clean else "0")


@given(summary=run_summary)
def test_line_has_no_newline(summary: RunSummary) -> None:
    assert "\n" not in summary.to_line()
