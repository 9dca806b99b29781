"""Repository over the Shift4Shop REST API: one method per upstream resource the proxy uses."""

from typing import Any, Mapping, Optional

from aws_lambda_powertools import Logger

from shared.config import ProxySettings
from shared.shift4shop import Shift4ShopClient, build_query_params

logger = Logger(service="storefront-proxy")

PRODUCTS_TIMEOUT_SEC = 30
ORDER_STATUS_TIMEOUT_SEC = 10
PAYMENT_METHODS_TIMEOUT_SEC = 5
ORDER_TIMEOUT_SEC = 15
ORDER_CREATE_TIMEOUT_SEC = 45
PAYMENT_TOKEN_TIMEOUT_SEC = 20
PASSTHROUGH_TIMEOUT_SEC = 30


class StorefrontRepository:
    def __init__(self, settings: ProxySettings, client: Optional[Shift4ShopClient] = None) -> None:
        self.settings = settings
        self.api = client or Shift4ShopClient(settings.credentials)

    def list_all_products(
        self,
        params: Optional[Mapping[str, str]] = None,
        limit: int = 50,
        offset: int = 0,
        max_pages: int = 100,
    ) -> Optional[list[Any]]:
        """
        Walk /Products page by page, strictly sequentially.

        Stops on an empty page, a page shorter than limit, a non-list answer or
        after max_pages calls. params must not carry pagination keys.

        Returns:
            All items in upstream order, or None when the first answer was not a list.

        Raises:
            UpstreamFailure: On the first page that fails; nothing partial is returned.
        """
        products: list[Any] = []
        for page in range(max_pages):
            query = build_query_params(params, {"limit": limit, "offset": offset})
            batch = self.api.get("/Products", params=query, timeout=PRODUCTS_TIMEOUT_SEC)
            if not isinstance(batch, list):
                if page == 0:
                    return None
                break
            products.extend(batch)
            if len(batch) < limit:
                break
            offset += limit
        else:
            logger.warning(
                f"Product pagination stopped after {max_pages} pages",
                extra={"items": len(products), "offset": offset},
            )
        return products

    def get_order_statuses(self) -> Any:
        return self.api.get("/OrderStatus", timeout=ORDER_STATUS_TIMEOUT_SEC)

    def get_payment_methods(self) -> Any:
        return self.api.get("/PaymentMethods", timeout=PAYMENT_METHODS_TIMEOUT_SEC)

    def get_order(self, order_id: str) -> Any:
        return self.api.get(f"/Orders/{order_id}", timeout=ORDER_TIMEOUT_SEC)

    def update_order(self, order_id: str, body: Any, params: Optional[Mapping[str, str]] = None) -> Any:
        return self.api.put(f"/Orders/{order_id}", body=body, params=params, timeout=ORDER_TIMEOUT_SEC)

    def create_order(self, body: Any, params: Optional[Mapping[str, str]] = None) -> Any:
        return self.api.post("/Orders", body=body, params=params, timeout=ORDER_CREATE_TIMEOUT_SEC)

    def create_payment_token(self, body: Any) -> Any:
        return self.api.post("/PaymentTokens", body=body, timeout=PAYMENT_TOKEN_TIMEOUT_SEC)

    def forward(self, method: str, resource_path: str, params: Optional[Mapping[str, str]] = None, body: Any = None) -> Any:
        """Generic passthrough: same method, path, query and body."""
        if method in ("GET", "DELETE"):
            body = None
        return self.api.request(method, resource_path, params=params, body=body, timeout=PASSTHROUGH_TIMEOUT_SEC)
