import base64
import json

import pytest
from pydantic import ValidationError

from schemas import (
    PLACEHOLDER_IMAGE,
    InboundRequest,
    InvalidRequestBody,
    MalformedEvent,
    OrderStatus,
    Product,
    event_method,
    event_origin,
    normalize_event,
)


def _event(
    method: str = "GET",
    path_params: dict | None = None,
    query_params: dict | None = None,
    body=None,
    raw_path: str | None = None,
    headers: dict | None = None,
) -> dict:
    e = {
        "requestContext": {"http": {"method": method}},
        "pathParameters": path_params,
        "queryStringParameters": query_params,
        "headers": headers,
    }
    if body is not None:
        e["body"] = body
    if raw_path is not None:
        e["rawPath"] = raw_path
    return e


class TestResourcePath:
    """Precedence: proxy > order id > raw path."""

    def test_proxy_parameter_wins(self) -> None:
        req = normalize_event(_event(path_params={"proxy": "Products/12", "id": "99"}, raw_path="/x/y"))

        assert req.resource_path == "/Products/12"

    def test_order_id_parameter_maps_to_orders(self) -> None:
        req = normalize_event(_event(path_params={"orderId": "555"}, raw_path="/prod/whatever"))

        assert req.resource_path == "/Orders/555"

    def test_raw_path_keeps_last_segment(self) -> None:
        req = normalize_event(_event(raw_path="/prod/api/products"))

        assert req.resource_path == "/products"

    def test_raw_path_keeps_orders_and_id(self) -> None:
        req = normalize_event(_event(raw_path="/prod/api/orders/test-123"))

        assert req.resource_path == "/orders/test-123"

    def test_rest_api_v1_event(self) -> None:
        req = normalize_event({"httpMethod": "post", "path": "/stage/orders", "body": "{}"})

        assert req.method == "POST"
        assert req.resource_path == "/orders"
        assert req.body == {}

    def test_root_path(self) -> None:
        req = normalize_event(_event(raw_path="/"))

        assert req.resource_path == "/"


class TestQueryAndBody:
    def test_query_copied_verbatim(self) -> None:
        req = normalize_event(_event(raw_path="/products", query_params={"limit": "10", "category": "hats"}))

        assert req.query_params == {"limit": "10", "category": "hats"}

    def test_json_body_parsed(self) -> None:
        req = normalize_event(_event("POST", raw_path="/orders", body='{"OrderItemList": [{"CatalogID": 12}]}'))

        assert req.body == {"OrderItemList": [{"CatalogID": 12}]}

    def test_blank_body_is_none(self) -> None:
        req = normalize_event(_event("POST", raw_path="/orders", body="   "))

        assert req.body is None

    def test_base64_body_decoded(self) -> None:
        encoded = base64.b64encode(json.dumps({"a": 1}).encode()).decode()
        event = _event("POST", raw_path="/orders", body=encoded)
        event["isBase64Encoded"] = True

        assert normalize_event(event).body == {"a": 1}

    def test_invalid_json_body_raises(self) -> None:
        with pytest.raises(InvalidRequestBody):
            normalize_event(_event("POST", raw_path="/orders", body="{not json"))

    def test_request_is_immutable(self) -> None:
        req = normalize_event(_event(raw_path="/products"))

        with pytest.raises(ValidationError):
            req.method = "POST"
        assert isinstance(req, InboundRequest)

    def test_origin_header_captured(self) -> None:
        req = normalize_event(_event(raw_path="/products", headers={"Origin": "https://shop.example"}))

        assert req.origin == "https://shop.example"


class TestMalformedEvents:
    def test_non_dict_path_parameters_rejected(self) -> None:
        event = _event(raw_path="/products")
        event["pathParameters"] = ["proxy"]

        with pytest.raises(MalformedEvent):
            normalize_event(event)

    def test_missing_method_rejected(self) -> None:
        with pytest.raises(MalformedEvent):
            normalize_event({"rawPath": "/products"})

    def test_event_helpers_tolerate_garbage(self) -> None:
        assert event_method(None) == ""
        assert event_origin("x") is None
        assert event_method({"httpMethod": "options"}) == "OPTIONS"


class TestProduct:
    """Mapping of upstream items to the storefront product shape."""

    def test_lowercase_shape_with_coercion(self) -> None:
        product = Product.from_upstream({
            "catalogid": 7,
            "name": "Hoodie",
            "price": "65.50",
            "list_price": "80",
            "thumbnail": "t.png",
            "image1": "m.png",
            "stock": "12",
            "featured": True,
            "categoryid": "APPAREL",
        })

        assert product.catalog_id == 7
        assert product.price == 65.5
        assert product.list_price == 80.0
        assert product.thumbnail_url == "t.png"
        assert product.main_image_file == "m.png"
        assert product.stock == 12
        assert product.featured is True
        assert product.category_id == "APPAREL"

    def test_native_3dcart_shape(self) -> None:
        product = Product.from_upstream({
            "SKUInfo": {"CatalogID": 21, "Name": "GA Ticket", "Price": 22, "RetailPrice": 0, "Stock": 918},
            "MainImageFile": "assets/images/1.png",
            "CategoryList": [{"CategoryID": 4, "CategoryName": "TICKETS"}],
        })

        assert product.catalog_id == 21
        assert product.name == "GA Ticket"
        assert product.price == 22.0
        assert product.stock == 918
        assert product.thumbnail_url == "assets/images/1.png"
        assert product.category_id == 4

    def test_unparseable_numbers_default_to_zero_and_images_to_placeholder(self) -> None:
        product = Product.from_upstream({"id": 3, "name": "Broken", "price": "n/a", "stock": None})

        assert product.price == 0
        assert product.stock == 0
        assert product.thumbnail_url == PLACEHOLDER_IMAGE
        assert product.main_image_file == PLACEHOLDER_IMAGE
        assert product.category_id == "shift4shop"
        assert product.list_price is None

    def test_dump_uses_storefront_keys_and_omits_absent_list_price(self) -> None:
        dumped = Product.from_upstream({"catalogid": 1, "name": "A", "price": 1}).model_dump(
            by_alias=True, exclude_none=True
        )

        assert "listprice" not in dumped
        assert set(dumped) == {
            "catalogid", "name", "price", "thumbnailurl", "mainimagefile",
            "description", "stock", "featured", "categoryid",
        }


def test_order_status_aliases() -> None:
    status = OrderStatus.model_validate(
        {"OrderStatusID": 1, "Sorting": 1, "StatusDefinition": "New", "StatusText": "New", "Visible": True}
    )

    assert status.model_dump(by_alias=True)["OrderStatusID"] == 1


class TestProductCoercionEdges:
    """Odd upstream values still produce a renderable product."""

    def test_non_finite_numbers_become_zero(self) -> None:
        product = Product.from_upstream({"catalogid": 1, "price": float("inf"), "stock": float("inf")})

        assert product.price == 0
        assert product.stock == 0

    def test_infinite_strings_and_huge_ints_become_zero(self) -> None:
        product = Product.from_upstream({"catalogid": 1, "price": "-Infinity", "stock": 10 ** 400})

        assert product.price == 0
        assert product.stock == 0

    def test_non_finite_list_price_is_dropped(self) -> None:
        product = Product.from_upstream({"catalogid": 1, "price": 5, "list_price": float("nan")})

        assert product.list_price is None

    def test_non_finite_product_serializes_as_valid_json(self) -> None:
        product = Product.from_upstream({"catalogid": 1, "price": float("inf")})

        dumped = json.dumps(product.model_dump(by_alias=True, exclude_none=True), allow_nan=False)

        assert json.loads(dumped)["price"] == 0

    def test_unusable_category_falls_back_to_default(self) -> None:
        assert Product.from_upstream({"catalogid": 1, "categories": {"id": 3}}).category_id == "shift4shop"
        assert Product.from_upstream({"catalogid": 1, "categoryid": True}).category_id == "shift4shop"

    def test_list_category_kept(self) -> None:
        assert Product.from_upstream({"catalogid": 1, "categories": [3, 4]}).category_id == [3, 4]

    def test_string_booleans_for_featured(self) -> None:
        assert Product.from_upstream({"catalogid": 1, "featured": "false"}).featured is False
        assert Product.from_upstream({"catalogid": 1, "featured": "True"}).featured is True
        assert Product.from_upstream({"catalogid": 1, "FeaturedProduct": 1}).featured is True
        assert Product.from_upstream({"catalogid": 1}).featured is False


class TestEventHelperShapes:
    def test_non_dict_headers_give_no_origin(self) -> None:
        assert event_origin({"headers": ["x"]}) is None
        assert event_origin({"headers": {"Origin": 5}}) is None

    def test_non_dict_request_context_falls_back_to_http_method(self) -> None:
        assert event_method({"requestContext": "x", "httpMethod": "get"}) == "GET"
        assert event_method({"requestContext": {"http": "x"}}) == ""

    def test_non_dict_headers_rejected_by_normalizer(self) -> None:
        with pytest.raises(MalformedEvent):
            normalize_event({"httpMethod": "GET", "path": "/products", "headers": ["x"]})

    def test_non_dict_request_context_rejected_by_normalizer(self) -> None:
        with pytest.raises(MalformedEvent):
            normalize_event({"httpMethod": "GET", "path": "/products", "requestContext": "x"})
