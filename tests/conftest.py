import pytest
from pathlib import Path
from git import Repo

pytest_plugins = ('pytest_asyncio',)


@pytest.fixture
def git_repo(tmp_path):
    """Create a temporary git repository with a conventional commit."""
    repo = Repo.init(tmp_path)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")

    test_file = tmp_path / "test.txt"
    test_file.write_text("Initial content")
    repo.index.add(["test.txt"])
    repo.index.commit("chore: initial commit")

    test_file.write_text("Changed content")
    repo.index.add(["test.txt"])
    repo.index.commit("fix(core): handle empty input\n\nLonger description of the fix.")

    return tmp_path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration environment variables."""
    for name in [
        "PR_TITLE_CHECK_TYPES",
        "PR_TITLE_CHECK_SCOPES",
        "PR_TITLE_CHECK_SUBJECT_PATTERN",
        "PR_TITLE_CHECK_SUBJECT_PATTERN_ERROR",
        "PR_TITLE_CHECK_ACTION",
        "PR_TITLE_CHECK_ALWAYS_LOG",
        "PR_TITLE_CHECK_LOG_FILE",
    ]:
        monkeypatch.delenv(name, raising=False)
    yield
