import logging

import pytest

from segtrie import SortedTrie, Trie
from segtrie.util import logger


@pytest.fixture(params=[Trie, SortedTrie], ids=["hashed", "sorted"])
def trie_cls(request):
    return request.param


@pytest.fixture
def prefixes(trie_cls):
    """A = [a] and B = [a, b], both inserted."""
    t = trie_cls()
    t.insert(["a"], True)
    t.insert(["a", "b"], True)
    return t


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point global and local configuration at a scratch directory."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return work


class _Recorder(logging.Handler):
    def __init__(self):
        super().__init__(logging.INFO)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture
def log_messages():
    """Messages sent to the package logger while the test runs."""
    recorder = _Recorder()
    logger.addHandler(recorder)
    yield recorder.messages
    logger.removeHandler(recorder)


@pytest.fixture(autouse=True)
def restore_log_level():
    level = logger.level
    yield
    logger.setLevel(level)
