import pytest

import status_logger.config as config_module
from status_logger import get_config, get_values_from_ssm
from status_logger.config import get_bool_config


def test_env_wins_over_ssm(monkeypatch, ssm_stub):
    monkeypatch.setenv("STATUS_SSM_PREFIX", "/parameters/status")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    ssm_stub.params["/parameters/status/LOG_LEVEL"] = "DEBUG"
    assert get_config("LOG_LEVEL") == "ERROR"
    assert ssm_stub.calls == []


def test_ssm_not_consulted_without_prefix(ssm_stub):
    ssm_stub.params["/LOG_LEVEL"] = "DEBUG"
    assert get_config("LOG_LEVEL") is None
    assert ssm_stub.calls == []


def test_ssm_lookup_uses_prefix(monkeypatch, ssm_stub):
    monkeypatch.setenv("STATUS_SSM_PREFIX", "/parameters/status/")
    ssm_stub.params["/parameters/status/LOG_JSON"] = "true"
    assert get_config("LOG_JSON") == "true"


def test_ssm_values_cached(ssm_stub):
    ssm_stub.params["/a/b"] = "1"
    assert get_values_from_ssm("/a/b") == "1"
    assert get_values_from_ssm("/a/b") == "1"
    assert ssm_stub.calls == ["/a/b"]


def test_ssm_errors_propagate(ssm_stub):
    with pytest.raises(ssm_stub.exceptions.ParameterNotFound):
        get_values_from_ssm("/missing")


def test_missing_ssm_parameter_is_none(monkeypatch, ssm_stub):
    monkeypatch.setenv("STATUS_SSM_PREFIX", "/parameters/status")
    assert get_config("STATUS_SILENT_MODE") is None


def test_client_created_lazily(monkeypatch):
    created = []

    def fake_client(name):
        created.append(name)
        return object()

    monkeypatch.setattr(config_module, "_ssm_client", None)
    monkeypatch.setattr(config_module.boto3, "client", fake_client)
    assert get_config("LOG_LEVEL") is None
    assert created == []
    config_module._get_ssm_client()
    config_module._get_ssm_client()
    assert created == ["ssm"]


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("true", True), ("Yes", True), (" on ", True), ("0", False), ("off", False)],
)
def test_bool_config(monkeypatch, raw, expected):
    monkeypatch.setenv("STATUS_SILENT_MODE", raw)
    assert get_bool_config("STATUS_SILENT_MODE") is expected


def test_bool_config_default():
    assert get_bool_config("STATUS_SILENT_MODE") is False
    assert get_bool_config("STATUS_SILENT_MODE", True) is True
