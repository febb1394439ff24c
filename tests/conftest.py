import pytest
from git import Repo

from mdwiki.core.wiki import Wiki


@pytest.fixture
def wiki(tmp_path):
    w = Wiki(str(tmp_path / "wiki"))
    w.initialize()
    return w


@pytest.fixture
def commit_messages():
    def _messages(w: Wiki) -> list[str]:
        repo = Repo(w.root)
        if not repo.head.is_valid():
            return []
        return [c.message.strip() for c in repo.iter_commits()]

    return _messages
