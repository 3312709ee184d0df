import pytest

from src.pontos.errors import ConfigError
from src.utils.config import DEFAULT_PONTOS_URL, load_config

ENV_VARS = ("PONTOS_TOKEN", "PONTOS_URL", "PONTOS_TIMEOUT", "PONTOS_OUTPUT_FOLDER",
            "PONTOS_NEST_OUTPUT", "LOG_LEVEL", "PONTOS_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    clean_env.setenv("PONTOS_TOKEN", "abc")

    config = load_config()

    assert config.pontos_token == "abc"
    assert config.pontos_url == DEFAULT_PONTOS_URL
    assert config.request_timeout == 60.0
    assert config.output_folder == "."
    assert config.nest_output is True
    assert config.log_level == "INFO"
    assert config.auth_header == {"Authorization": "Bearer abc"}


def test_overrides(clean_env):
    clean_env.setenv("PONTOS_TOKEN", "'abc'")
    clean_env.setenv("PONTOS_URL", "http://localhost:3000/")
    clean_env.setenv("PONTOS_TIMEOUT", "2.5")
    clean_env.setenv("PONTOS_OUTPUT_FOLDER", "/tmp/pontos")
    clean_env.setenv("PONTOS_NEST_OUTPUT", "no")
    clean_env.setenv("LOG_LEVEL", "debug")

    config = load_config()

    assert config.pontos_token == "abc"
    assert config.pontos_url == "http://localhost:3000"
    assert config.request_timeout == 2.5
    assert config.output_folder == "/tmp/pontos"
    assert config.nest_output is False
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("token", [None, "", "  "])
def test_missing_token_is_a_config_error(clean_env, token):
    if token is not None:
        clean_env.setenv("PONTOS_TOKEN", token)

    with pytest.raises(ConfigError, match="PONTOS_TOKEN"):
        load_config()


@pytest.mark.parametrize("name, value", [
    ("PONTOS_TIMEOUT", "soon"),
    ("PONTOS_TIMEOUT", "0"),
    ("PONTOS_NEST_OUTPUT", "maybe"),
    ("LOG_LEVEL", "LOUD"),
])
def test_malformed_values_are_config_errors(clean_env, name, value):
    clean_env.setenv("PONTOS_TOKEN", "abc")
    clean_env.setenv(name, value)

    with pytest.raises(ConfigError):
        load_config()


def test_config_error_is_a_runtime_error():
    assert issubclass(ConfigError, RuntimeError)


def test_token_is_hidden_from_repr(clean_env):
    clean_env.setenv("PONTOS_TOKEN", "very-secret")
    assert "very-secret" not in repr(load_config())


@pytest.mark.parametrize("pontos_level, level, expected", [
    ("warning", None, "WARNING"),
    (None, "error", "ERROR"),
    ("debug", "error", "DEBUG"),
])
def test_pontos_log_level_takes_precedence(clean_env, pontos_level, level, expected):
    clean_env.setenv("PONTOS_TOKEN", "abc")
    if pontos_level is not None:
        clean_env.setenv("PONTOS_LOG_LEVEL", pontos_level)
    if level is not None:
        clean_env.setenv("LOG_LEVEL", level)

    assert load_config().log_level == expected
