import pytest


class FakeParameterStore:
    """In-memory stand-in for the parameter store that records every lookup."""

    def __init__(self):
        self.values = {}
        self.failures = {}
        self.calls = []

    def __call__(self, name, with_decryption):
        self.calls.append((name, with_decryption))
        if name in self.failures:
            raise self.failures[name]
        if name not in self.values:
            raise KeyError(f"ParameterNotFound: {name}")
        return self.values[name]

    @property
    def fetched(self):
        return [name for name, _ in self.calls]


@pytest.fixture()
def store():
    return FakeParameterStore()


@pytest.fixture()
def base_path():
    return "/Env/Application/"


@pytest.fixture(autouse=True)
def _clean_loader_env(monkeypatch):
    # Keep a developer's shell or .env from leaking into config tests
    for name in ("SSM_PATH", "AWS_PROFILE", "AWS_REGION", "ENVIRONMENT", "LOCAL_PARAMETERS_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
