import pytest

from keyclaim import ClientConfig, KeyClaimClient, KeyClaimConfigError
from keyclaim.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

from .helpers import API_KEY


def test_new_client():
    client = KeyClaimClient(API_KEY)
    assert client is not None
    assert client.config.secret == API_KEY
    assert client.base_url == DEFAULT_BASE_URL
    client.close()


def test_default_base_url_is_public_endpoint():
    assert DEFAULT_BASE_URL == "https://keyclaim.org"


@pytest.mark.parametrize("api_key", ["invalid-key", "", "KC_upper", " kc_leading-space"])
def test_invalid_api_key(api_key):
    with pytest.raises(KeyClaimConfigError, match='must start with "kc_"'):
        KeyClaimClient(api_key)


def test_explicit_secret():
    client = KeyClaimClient(API_KEY, "test-secret")
    assert client.config.secret == "test-secret"
    client.close()


def test_empty_secret_falls_back_to_api_key():
    assert ClientConfig(api_key=API_KEY, secret="").secret == API_KEY


def test_config_is_immutable():
    config = ClientConfig(api_key=API_KEY)
    with pytest.raises(AttributeError):
        config.api_key = "kc_other"


def test_base_url_trailing_slash_stripped():
    config = ClientConfig(api_key=API_KEY, base_url="http://localhost:8080/")
    assert config.base_url == "http://localhost:8080"


def test_timeout_must_be_positive():
    with pytest.raises(KeyClaimConfigError):
        ClientConfig(api_key=API_KEY, timeout=0)


def test_repr_hides_credentials():
    config = ClientConfig(api_key=API_KEY, secret="hunter2")
    assert API_KEY not in repr(config)
    assert "hunter2" not in repr(config)


def test_from_config():
    config = ClientConfig(api_key=API_KEY, secret="s", base_url="http://x", timeout=5)
    with KeyClaimClient.from_config(config) as client:
        assert client.config == config


def test_from_env(monkeypatch):
    monkeypatch.setenv("KEYCLAIM_API_KEY", API_KEY)
    monkeypatch.setenv("KEYCLAIM_SECRET", "env-secret")
    monkeypatch.setenv("KEYCLAIM_BASE_URL", "http://localhost:9000/")
    monkeypatch.setenv("KEYCLAIM_TIMEOUT", "2.5")

    with KeyClaimClient.from_env() as client:
        assert client.config.secret == "env-secret"
        assert client.base_url == "http://localhost:9000"
        assert client.config.timeout == 2.5


def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv("KEYCLAIM_API_KEY", API_KEY)
    for name in ("KEYCLAIM_SECRET", "KEYCLAIM_BASE_URL", "KEYCLAIM_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    config = ClientConfig.from_env()
    assert config.secret == API_KEY
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == DEFAULT_TIMEOUT


def test_from_env_missing_key(monkeypatch):
    monkeypatch.delenv("KEYCLAIM_API_KEY", raising=False)
    with pytest.raises(KeyClaimConfigError):
        ClientConfig.from_env()


def test_from_env_bad_timeout(monkeypatch):
    monkeypatch.setenv("KEYCLAIM_API_KEY", API_KEY)
    monkeypatch.setenv("KEYCLAIM_TIMEOUT", "soon")
    with pytest.raises(KeyClaimConfigError, match="KEYCLAIM_TIMEOUT"):
        ClientConfig.from_env()


def test_none_timeout_uses_default():
    with KeyClaimClient(API_KEY, timeout=None) as client:
        assert client.config.timeout == DEFAULT_TIMEOUT
    assert ClientConfig(api_key=API_KEY, timeout=None).timeout == DEFAULT_TIMEOUT


@pytest.mark.parametrize("timeout", ["5", True, -1, float("nan"), [5]])
def test_invalid_timeout_type_or_value(timeout):
    with pytest.raises(KeyClaimConfigError, match="timeout must be a positive number"):
        KeyClaimClient(API_KEY, timeout=timeout)


def test_integer_timeout_accepted():
    assert ClientConfig(api_key=API_KEY, timeout=5).timeout == 5
