import pytest

from shared.config import (
    DEFAULT_OAUTH_TOKEN_URL,
    MissingConfiguration,
    load_settings,
)

BASE_ENV = {
    "SHIFT4SHOP_STORE_URL": "https://store.example.com/",
    "SHIFT4SHOP_PRIVATE_KEY": "pk-secret",
    "SHIFT4SHOP_TOKEN": "tok-secret",
}


class TestLoadSettings:
    """Environment to ProxySettings."""

    def test_key_mode_defaults(self) -> None:
        settings = load_settings(BASE_ENV)

        creds = settings.credentials
        assert creds.store_url == "https://store.example.com"
        assert creds.secure_url == "https://store.example.com"
        assert creds.auth_mode == "key"
        assert creds.private_key.get_secret_value() == "pk-secret"
        assert creds.token.get_secret_value() == "tok-secret"
        assert settings.products_page_limit == 50
        assert settings.products_max_pages == 100
        assert settings.test_order_prefix == "test-"
        assert settings.payment_tokens_upstream is False

    def test_secrets_not_rendered_in_repr(self) -> None:
        settings = load_settings(BASE_ENV)

        assert "pk-secret" not in repr(settings)
        assert "tok-secret" not in str(settings.credentials)

    def test_overrides_from_env(self) -> None:
        env = {
            **BASE_ENV,
            "SHIFT4SHOP_SECURE_URL": "https://secure.example.com",
            "PRODUCTS_PAGE_LIMIT": "25",
            "PRODUCTS_MAX_PAGES": "3",
            "TEST_ORDER_PREFIX": "qa-",
            "PAYMENT_TOKENS_UPSTREAM": "TRUE",
        }
        settings = load_settings(env)

        assert settings.credentials.secure_url == "https://secure.example.com"
        assert settings.products_page_limit == 25
        assert settings.products_max_pages == 3
        assert settings.test_order_prefix == "qa-"
        assert settings.payment_tokens_upstream is True

    @pytest.mark.parametrize("missing", ["SHIFT4SHOP_STORE_URL", "SHIFT4SHOP_PRIVATE_KEY", "SHIFT4SHOP_TOKEN"])
    def test_missing_required_value_raises(self, missing: str) -> None:
        env = {k: v for k, v in BASE_ENV.items() if k != missing}

        with pytest.raises(MissingConfiguration) as exc_info:
            load_settings(env)
        assert missing in str(exc_info.value)

    def test_blank_value_counts_as_missing(self) -> None:
        with pytest.raises(MissingConfiguration):
            load_settings({**BASE_ENV, "SHIFT4SHOP_TOKEN": "   "})

    def test_invalid_page_limit_raises(self) -> None:
        with pytest.raises(MissingConfiguration):
            load_settings({**BASE_ENV, "PRODUCTS_PAGE_LIMIT": "0"})

    def test_oauth_mode_requires_client_credentials(self) -> None:
        env = {"SHIFT4SHOP_STORE_URL": "https://store.example.com", "SHIFT4SHOP_AUTH_MODE": "oauth"}

        with pytest.raises(MissingConfiguration) as exc_info:
            load_settings(env)
        assert "SHIFT4SHOP_CLIENT_ID" in str(exc_info.value)

    def test_oauth_mode_does_not_need_private_key(self) -> None:
        env = {
            "SHIFT4SHOP_STORE_URL": "https://store.example.com",
            "SHIFT4SHOP_AUTH_MODE": "oauth",
            "SHIFT4SHOP_CLIENT_ID": "client",
            "SHIFT4SHOP_CLIENT_SECRET": "shh",
        }
        settings = load_settings(env)

        assert settings.credentials.auth_mode == "oauth"
        assert settings.credentials.private_key is None
        assert settings.credentials.oauth_token_url == DEFAULT_OAUTH_TOKEN_URL
