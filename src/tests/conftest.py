import pytest


@pytest.fixture(autouse=True)
def typextra_env(monkeypatch):
    monkeypatch.setenv("TYPEXTRA_THREAD_SAFE", "true")
    monkeypatch.setenv("TYPEXTRA_SERIALIZATION_ENCODING", "utf-8")
