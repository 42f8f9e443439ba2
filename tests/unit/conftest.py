"""Shared fixtures for unit tests."""

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

STATUS_ARGS = ("status", "--porcelain", "--branch")
TAGS_ARGS = (
    "for-each-ref",
    "--points-at=HEAD",
    "--count=2",
    "--sort=-version:refname",
    "--format=%(refname:short)",
    "refs/tags",
)
SHORT_HASH_ARGS = ("rev-parse", "--short", "HEAD")
GIT_DIR_ARGS = ("rev-parse", "--git-dir")


@dataclass(slots=True)
class FakeGit:
    """Stand-in for subprocess.run that answers git queries from a table.

    Unregistered commands succeed with empty output.
    """

    responses: dict[tuple[str, ...], subprocess.CompletedProcess[str]] = field(
        default_factory=dict
    )
    calls: list[list[str]] = field(default_factory=list)
    cwds: list[str | None] = field(default_factory=list)

    def respond(self, args: tuple[str, ...], stdout: str = "", returncode: int = 0) -> None:
        self.responses[args] = subprocess.CompletedProcess(
            ["git", *args], returncode, stdout=stdout, stderr=""
        )

    def status(self, stdout: str, returncode: int = 0) -> None:
        self.respond(STATUS_ARGS, stdout, returncode)

    def tags(self, *names: str) -> None:
        self.respond(TAGS_ARGS, "".join(f"{name}\n" for name in names))

    def short_hash(self, value: str) -> None:
        self.respond(SHORT_HASH_ARGS, f"{value}\n" if value else "")

    def git_dir(self, path: Path | str) -> None:
        self.respond(GIT_DIR_ARGS, f"{path}\n")

    def called(self, args: tuple[str, ...]) -> bool:
        return any(tuple(cmd[1:]) == args for cmd in self.calls)

    def __call__(self, cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(cmd))
        cwd = kwargs.get("cwd")
        self.cwds.append(cwd if isinstance(cwd, str) else None)
        return self.responses.get(
            tuple(cmd[1:]),
            subprocess.CompletedProcess(list(cmd), 0, stdout="", stderr=""),
        )


@pytest.fixture
def fake_git(mocker: "MockerFixture") -> FakeGit:
    fake = FakeGit()
    mocker.patch("subprocess.run", side_effect=fake)
    return fake
