"""Pytest configuration and fixtures for analyse-branch tests."""

import subprocess
from pathlib import Path

import pytest

from tests.mocks import MockGitRepository


def _run_git(*args: str, cwd: Path) -> str:
    """Run git command safely without shell=True."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        check=True,
        text=True,
    )
    return result.stdout.strip()


class GitRepoBuilder:
    """Builds throwaway histories in a real repository."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._counter = 0

    def git(self, *args: str) -> str:
        return _run_git(*args, cwd=self.path)

    def commit(self, message: str = "") -> str:
        self._counter += 1
        name = message or f"commit {self._counter}"
        (self.path / f"file_{self._counter}.txt").write_text(name)
        self.git("add", "-A")
        self.git("commit", "-q", "-m", name)
        return self.git("rev-parse", "HEAD")

    def commits(self, count: int) -> str:
        sha = ""
        for _ in range(count):
            sha = self.commit()
        return sha

    def branch(self, name: str, start: str = "HEAD") -> None:
        self.git("branch", name, start)

    def checkout(self, name: str) -> None:
        self.git("checkout", "-q", name)

    def merge(self, name: str) -> str:
        self.git("merge", "-q", "--no-ff", "-m", f"Merge {name}", name)
        return self.git("rev-parse", "HEAD")

    def orphan(self, name: str) -> None:
        self.git("checkout", "-q", "--orphan", name)
        self.git("rm", "-rfq", "--ignore-unmatch", ".")


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> GitRepoBuilder:
    """Create a temporary git repository on branch master with one commit.

    Returns:
        Builder for the repository
    """
    # keep user and system config (signing, default branch) out of the way
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.delenv("ANALYSE_BRANCH_UPSTREAMS", raising=False)

    path = tmp_path / "repo"
    path.mkdir()
    repo = GitRepoBuilder(path)
    repo.git("init", "-q")
    repo.git("symbolic-ref", "HEAD", "refs/heads/master")
    repo.git("config", "user.email", "test@test.com")
    repo.git("config", "user.name", "Test")
    repo.git("config", "commit.gpgsign", "false")
    repo.commit("Initial commit")

    return repo


@pytest.fixture
def mock_repo() -> MockGitRepository:
    """History shared by analyzer tests.

    master: a0 .. a7, qa forked at a0 with q1, feature forked at a7 with f1 f2 f3.
    So feature is 3 commits past its master fork and 10 past its qa fork.
    """
    repo = MockGitRepository(current_branch="feature")
    repo.branches["master"] = repo.chain(None, *[f"a{i}" for i in range(8)])
    repo.branches["qa"] = repo.chain("a0", "q1")
    repo.branches["feature"] = repo.chain("a7", "f1", "f2", "f3")
    return repo
