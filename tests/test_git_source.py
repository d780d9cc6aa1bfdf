"""Tests for reading titles from commits."""
import pytest

from prtitlecheck.git_source import read_commit_title


def test_read_head_commit_title(git_repo):
    assert read_commit_title(git_repo) == "fix(core): handle empty input"


def test_read_older_commit_title(git_repo):
    assert read_commit_title(git_repo, "HEAD~1") == "chore: initial commit"


def test_read_from_subdirectory(git_repo):
    subdir = git_repo / "nested"
    subdir.mkdir()
    assert read_commit_title(subdir) == "fix(core): handle empty input"


def test_unknown_revision(git_repo):
    with pytest.raises(ValueError, match="Unknown revision"):
        read_commit_title(git_repo, "does-not-exist")


def test_not_a_repository(tmp_path):
    with pytest.raises(ValueError, match="Not a git repository"):
        read_commit_title(tmp_path / "missing")
