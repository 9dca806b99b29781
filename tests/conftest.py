import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Lambda layout: shared/ sits next to the function's sibling modules
_root = Path(__file__).resolve().parents[1]
for path in [str(_root / "src" / "proxy"), str(_root / "src")]:
    if path in sys.path:
        sys.path.remove(path)
    sys.path.insert(0, path)


STORE_ENV = {
    "SHIFT4SHOP_STORE_URL": "https://store.example.com",
    "SHIFT4SHOP_PRIVATE_KEY": "pk-secret",
    "SHIFT4SHOP_TOKEN": "tok-secret",
}


@dataclass
class FakeLambdaContext:
    function_name: str = "storefront-proxy"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:storefront-proxy"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def store_env(monkeypatch) -> dict:
    for key in list(STORE_ENV) + ["SHIFT4SHOP_AUTH_MODE", "PRODUCTS_PAGE_LIMIT", "PRODUCTS_MAX_PAGES",
                                  "TEST_ORDER_PREFIX", "PAYMENT_TOKENS_UPSTREAM", "SHIFT4SHOP_SECURE_URL"]:
        monkeypatch.delenv(key, raising=False)
    for key, value in STORE_ENV.items():
        monkeypatch.setenv(key, value)
    return dict(STORE_ENV)
