"""Shared fixtures: real git repositories under tmp_path."""

import os
import subprocess
from pathlib import Path

import pytest

GIT_ENV = {
    "GIT_AUTHOR_NAME": "Test User",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "Test User",
    "GIT_COMMITTER_EMAIL": "test@example.com",
    "GIT_CONFIG_NOSYSTEM": "1",
}


@pytest.fixture(autouse=True)
def isolated_git_env(monkeypatch, tmp_path):
    """Keep the user's global git config out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    for key, value in GIT_ENV.items():
        monkeypatch.setenv(key, value)


def git(cwd: Path, *args: str) -> str:
    """Run git in cwd, fail the test on error, return stdout."""
    result = subprocess.run(
        ["git", "-C", str(cwd), *args],
        capture_output=True,
        text=True,
        env=os.environ.copy(),
    )
    assert result.returncode == 0, f"git {' '.join(args)} failed: {result.stderr}"
    return result.stdout


def commit(repo: Path, filename: str, content: str = "x\n") -> None:
    (repo / filename).write_text(content)
    git(repo, "add", filename)
    git(repo, "commit", "-q", "-m", f"add {filename}")


def init_repo(path: Path, commits: int = 1, branch: str = "main") -> Path:
    """Create a working repo on `branch` with `commits` commits."""
    path.mkdir(parents=True, exist_ok=True)
    git(path, "init", "-q")
    git(path, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
    for i in range(commits):
        commit(path, f"file{i}.txt", f"{i}\n")
    return path


def init_bare(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    git(path, "init", "-q", "--bare")
    git(path, "symbolic-ref", "HEAD", "refs/heads/main")
    return path


@pytest.fixture
def projects(tmp_path) -> Path:
    """Base directory that scans run against."""
    base = tmp_path / "projects"
    base.mkdir()
    return base


@pytest.fixture
def remotes(tmp_path) -> Path:
    """Directory for bare remotes, outside the scanned base directory."""
    base = tmp_path / "remotes"
    base.mkdir()
    return base


@pytest.fixture
def published_repo(projects, remotes) -> Path:
    """Repo 'app' with origin, upstream set and everything pushed."""
    bare = init_bare(remotes / "app.git")
    repo = init_repo(projects / "app", commits=1)
    git(repo, "remote", "add", "origin", str(bare))
    git(repo, "push", "-q", "-u", "origin", "main")
    return repo
