import pytest
from pydantic import ValidationError

from hello_api.settings import get_settings


def test_port_defaults_to_3000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert get_settings(_env_file=None).PORT == 3000


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    settings = get_settings(_env_file=None)
    assert settings.PORT == 8080
    assert isinstance(settings.PORT, int)


@pytest.mark.parametrize("value", ["abc", "0", "70000"])
def test_invalid_port_fails_fast(monkeypatch, value):
    monkeypatch.setenv("PORT", value)
    with pytest.raises(ValidationError):
        get_settings(_env_file=None)


def test_log_format_defaults_to_console(monkeypatch):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    assert get_settings(_env_file=None).LOG_FORMAT == "console"
