import shutil
from pathlib import Path

import pytest
from dulwich.porcelain import add, commit
from dulwich.repo import Repo


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    skip_no_git = pytest.mark.skip(reason="git executable not found")
    has_git = shutil.which("git") is not None
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            if not has_git:
                item.add_marker(skip_no_git)


@pytest.fixture(autouse=True)
def _git_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop git from reading user config or discovering repositories above tmp_path."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    """Create a repository on branch main with no commits."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    repo = Repo.init(str(repo_path))
    repo.refs.set_symbolic_ref(b"HEAD", b"refs/heads/main")
    repo.close()
    return repo_path


@pytest.fixture
def git_repo(empty_repo: Path) -> Path:
    """Create a repository on branch main with one commit."""
    readme = empty_repo / "README.md"
    _ = readme.write_text("# Test Repository\n")
    add(str(empty_repo), paths=[str(readme)])
    _ = commit(
        str(empty_repo),
        message=b"Initial commit",
        author=b"Test <test@test.com>",
        committer=b"Test <test@test.com>",
        sign=False,
    )
    return empty_repo
