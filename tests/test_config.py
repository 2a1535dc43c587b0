import pytest

from laposte_sdk.config import (
    DIGIPOSTE_API_BASE_URL,
    LAPOSTE_API_BASE_URL,
    ClientConfig,
    Env,
    SdkSettings,
)


def test_settings_are_unset_without_environment():
    settings = SdkSettings.from_env({})

    assert settings.laposte_base_url is None
    assert settings.consumer_key is None
    assert settings.strict_ssl is True
    assert settings.base_url_for("laposte") == LAPOSTE_API_BASE_URL
    assert settings.base_url_for("digiposte") == DIGIPOSTE_API_BASE_URL


def test_settings_read_each_variable_independently():
    settings = SdkSettings.from_env(
        {
            Env.LAPOSTE_API_CONSUMER_KEY: "key",
            Env.DIGIPOSTE_API_ACCESS_TOKEN: "dgp-token",
            "UNRELATED": "ignored",
        }
    )

    assert settings.consumer_key == "key"
    assert settings.consumer_secret is None
    assert settings.access_token_for("digiposte") == "dgp-token"
    assert settings.access_token_for("laposte") is None


@pytest.mark.parametrize(("flag", "strict"), [("false", False), ("False", True), ("0", True), ("true", True)])
def test_strict_ssl_is_disabled_only_by_literal_false(flag, strict):
    settings = SdkSettings.from_env({Env.LAPOSTE_API_STRICT_SSL: flag})
    assert settings.strict_ssl is strict


def test_base_url_override_wins_over_default():
    settings = SdkSettings.from_env({Env.DIGIPOSTE_API_BASE_URL: "https://sandbox.example/dgp"})

    assert settings.base_url_for("digiposte") == "https://sandbox.example/dgp"
    assert settings.base_url_for("laposte") == LAPOSTE_API_BASE_URL


def test_settings_read_process_environment(monkeypatch):
    monkeypatch.setenv(Env.LAPOSTE_API_USERNAME, "alice")

    assert SdkSettings.from_env().laposte_username == "alice"


def test_unknown_family_is_rejected():
    with pytest.raises(ValueError):
        SdkSettings().base_url_for("colissimo")


def test_masked_hides_secrets_only():
    settings = SdkSettings.from_env(
        {
            Env.LAPOSTE_API_USERNAME: "alice",
            Env.LAPOSTE_API_PASSWORD: "hunter2",
            Env.LAPOSTE_API_ACCESS_TOKEN: "abc",
        }
    )

    shown = settings.masked()

    assert shown[Env.LAPOSTE_API_USERNAME] == "alice"
    assert shown[Env.LAPOSTE_API_PASSWORD] == "********"
    assert shown[Env.LAPOSTE_API_ACCESS_TOKEN] == "********"
    assert shown[Env.DIGIPOSTE_API_PASSWORD] is None
    assert len(shown) == 13


def test_client_config_headers_include_user_agent(monkeypatch):
    monkeypatch.setattr("laposte_sdk.config.user_agent", lambda: "laposte-sdk/9.9.9")
    config = ClientConfig(base_url=LAPOSTE_API_BASE_URL, default_headers={"Accept": "text/plain"})

    headers = config.resolved_headers()

    assert headers["User-Agent"] == "laposte-sdk/9.9.9"
    assert headers["Accept"] == "text/plain"
