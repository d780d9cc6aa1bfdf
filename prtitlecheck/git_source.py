"""Read titles from git commits."""
from pathlib import Path
from typing import Union

import git
from git import Repo


def read_commit_title(repo_path: Union[str, Path], rev: str = "HEAD") -> str:
    """Return the summary line of a commit.

    Args:
        repo_path: Path to the git repository
        rev: Any revision git understands (sha, branch, tag, HEAD~1, ...)

    Raises:
        ValueError: If the path is not a repository or the revision doesn't exist
    """
    try:
        repo = Repo(str(repo_path), search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
        raise ValueError(f"Not a git repository: {repo_path}") from e

    try:
        commit = repo.commit(rev)
    except (git.exc.BadName, git.exc.BadObject, ValueError) as e:
        raise ValueError(f"Unknown revision: {rev}") from e

    summary = commit.summary
    if isinstance(summary, bytes):
        summary = summary.decode("utf-8", errors="replace")
    return summary
