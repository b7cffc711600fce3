"""Shared pytest fixtures.

Provides noisy-text builders that wrap a structured payload in the kind of
prose an LLM tends to put around it.
"""

import pytest


@pytest.fixture
def wrap_in_prose():
    """Factory fixture that surrounds a payload with leading and trailing chatter.

    Returns:
        Callable: Function taking a payload string and returning noisy text.
    """

    def _wrap(payload: str) -> str:
        return f"Sure, here is what you asked for:\n\n{payload}\n\nLet me know if you need anything else."

    return _wrap


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove snipsmart variables from the environment and run from an empty directory.

    Keeps a developer's own .env file or exported variables from leaking
    into configuration and CLI tests.
    """
    for var in ("SNIPSMART_FORMAT", "SNIPSMART_CASE_SENSITIVE", "SNIPSMART_LOG_LEVEL"):
        # setenv first so teardown also removes values a .env file loads
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    return tmp_path
