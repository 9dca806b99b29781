"""
Runtime configuration for the storefront proxy.

Expects env: SHIFT4SHOP_STORE_URL and, depending on SHIFT4SHOP_AUTH_MODE,
SHIFT4SHOP_PRIVATE_KEY + SHIFT4SHOP_TOKEN ("key", default) or
SHIFT4SHOP_CLIENT_ID + SHIFT4SHOP_CLIENT_SECRET ("oauth").
Optional: SHIFT4SHOP_SECURE_URL, SHIFT4SHOP_MERCHANT_NUMBER,
SHIFT4SHOP_OAUTH_TOKEN_URL, PRODUCTS_PAGE_LIMIT, PRODUCTS_MAX_PAGES,
TEST_ORDER_PREFIX, PAYMENT_TOKENS_UPSTREAM.
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

DEFAULT_OAUTH_TOKEN_URL = "https://api.shift4shop.com/oauth/token"
DEFAULT_PAGE_LIMIT = 50
DEFAULT_MAX_PAGES = 100
DEFAULT_TEST_ORDER_PREFIX = "test-"


class MissingConfiguration(Exception):
    """Raised when a required setting is absent or invalid."""

    pass


class UpstreamCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    store_url: str
    private_key: Optional[SecretStr] = None
    token: Optional[SecretStr] = None
    secure_url: str
    merchant_number: Optional[str] = None
    auth_mode: Literal["key", "oauth"] = "key"
    client_id: Optional[str] = None
    client_secret: Optional[SecretStr] = None
    oauth_token_url: str = DEFAULT_OAUTH_TOKEN_URL


class ProxySettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    credentials: UpstreamCredentials
    products_page_limit: int = Field(default=DEFAULT_PAGE_LIMIT, gt=0)
    products_max_pages: int = Field(default=DEFAULT_MAX_PAGES, gt=0)
    test_order_prefix: str = Field(default=DEFAULT_TEST_ORDER_PREFIX, min_length=1)
    payment_tokens_upstream: bool = False


def _get(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = (environ.get(key) or "").strip()
    return value or None


def _require(environ: Mapping[str, str], key: str) -> str:
    value = _get(environ, key)
    if not value:
        raise MissingConfiguration(f"Required environment variable not set: {key}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ProxySettings:
    """
    Build settings from the environment. Called once per invocation.

    Raises:
        MissingConfiguration: On a missing credential or an invalid value.
    """
    env = os.environ if environ is None else environ

    store_url = _require(env, "SHIFT4SHOP_STORE_URL").rstrip("/")
    auth_mode = (_get(env, "SHIFT4SHOP_AUTH_MODE") or "key").lower()

    if auth_mode == "oauth":
        secrets = {
            "client_id": _require(env, "SHIFT4SHOP_CLIENT_ID"),
            "client_secret": _require(env, "SHIFT4SHOP_CLIENT_SECRET"),
        }
    else:
        secrets = {
            "private_key": _require(env, "SHIFT4SHOP_PRIVATE_KEY"),
            "token": _require(env, "SHIFT4SHOP_TOKEN"),
        }

    raw = {
        "credentials": {
            "store_url": store_url,
            "secure_url": _get(env, "SHIFT4SHOP_SECURE_URL") or store_url,
            "merchant_number": _get(env, "SHIFT4SHOP_MERCHANT_NUMBER"),
            "auth_mode": auth_mode,
            "oauth_token_url": _get(env, "SHIFT4SHOP_OAUTH_TOKEN_URL") or DEFAULT_OAUTH_TOKEN_URL,
            **secrets,
        },
        "products_page_limit": _get(env, "PRODUCTS_PAGE_LIMIT") or DEFAULT_PAGE_LIMIT,
        "products_max_pages": _get(env, "PRODUCTS_MAX_PAGES") or DEFAULT_MAX_PAGES,
        "test_order_prefix": _get(env, "TEST_ORDER_PREFIX") or DEFAULT_TEST_ORDER_PREFIX,
        "payment_tokens_upstream": (_get(env, "PAYMENT_TOKENS_UPSTREAM") or "false").lower() == "true",
    }
    try:
        return ProxySettings.model_validate(raw)
    except ValidationError as e:
        raise MissingConfiguration(f"Invalid configuration: {e.errors()[0].get('msg')}") from e
