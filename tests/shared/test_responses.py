import json
from datetime import datetime, timezone

from shared.responses import (
    SERIALIZATION_FAILURE_BODY,
    cors_headers,
    error_response,
    http_response,
    options_response,
)
from schemas import OrderSubmissionResult


class TestHttpResponse:
    """http_response: statusCode, CORS headers and JSON body."""

    def test_basic_structure(self) -> None:
        response = http_response(200, {"message": "Success", "data": [1, 2]})

        assert response["statusCode"] == 200
        assert response["headers"]["Content-Type"] == "application/json"
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"
        assert response["headers"]["Access-Control-Allow-Methods"] == "GET,POST,PUT,DELETE,OPTIONS"
        assert isinstance(response["body"], str)
        assert json.loads(response["body"]) == {"message": "Success", "data": [1, 2]}

    def test_echoes_origin(self) -> None:
        response = http_response(200, {}, origin="https://shop.example.com")

        assert response["headers"]["Access-Control-Allow-Origin"] == "https://shop.example.com"
        assert response["headers"]["Vary"] == "Origin"

    def test_serializes_models_by_alias_without_none(self) -> None:
        result = OrderSubmissionResult(value="42", status="201", message="Created")

        body = json.loads(http_response(200, [result])["body"])

        assert body == [{"Key": "OrderID", "Value": "42", "Status": "201", "Message": "Created"}]

    def test_serializes_datetime(self) -> None:
        stamp = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)

        body = json.loads(http_response(200, {"at": stamp})["body"])

        assert body["at"] == "2025-01-15T12:00:00+00:00"

    def test_circular_reference_becomes_generic_500(self) -> None:
        data: dict = {}
        data["self"] = data

        response = http_response(200, data)

        assert response["statusCode"] == 500
        assert response["body"] == SERIALIZATION_FAILURE_BODY
        assert json.loads(response["body"])["error"] == "SerializationFailure"


class TestOtherResponses:
    def test_error_response_shape(self) -> None:
        response = error_response(502, "UpstreamFailure", "boom")

        assert response["statusCode"] == 502
        assert json.loads(response["body"]) == {"error": "UpstreamFailure", "message": "boom"}

    def test_options_response(self) -> None:
        response = options_response("https://a.example")

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {"message": "CORS preflight successful"}
        assert response["headers"]["Access-Control-Allow-Origin"] == "https://a.example"

    def test_cors_headers_wildcard_without_origin(self) -> None:
        headers = cors_headers(None)

        assert headers["Access-Control-Allow-Origin"] == "*"
        assert "Vary" not in headers
