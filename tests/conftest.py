import pytest

import status_logger.config as config_module
from status_logger import StatusSchemaRegistry, reset_default_registry


class DummySSM:
    def __init__(self):
        self.params = {}
        self.calls = []

    def get_parameter(self, Name, WithDecryption=False):
        self.calls.append(Name)
        if Name not in self.params:
            raise self.exceptions.ParameterNotFound(Name)
        return {"Parameter": {"Name": Name, "Value": self.params[Name]}}

    class exceptions:
        class ParameterNotFound(Exception):
            pass


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_JSON", "STATUS_SILENT_MODE", "STATUS_SSM_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    config_module._SSM_CACHE.clear()
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def ssm_stub(monkeypatch):
    stub = DummySSM()
    monkeypatch.setattr(config_module, "_ssm_client", stub)
    return stub


@pytest.fixture
def registry():
    return StatusSchemaRegistry()
