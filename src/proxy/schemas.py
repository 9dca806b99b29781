"""DTOs, inbound event validation and request normalization for the storefront proxy."""

import base64
import binascii
import json
import math
from typing import Any, Dict, List, Optional, Union

from aws_lambda_powertools.utilities.parser import parse
from pydantic import BaseModel, ConfigDict, Field, field_validator

PLACEHOLDER_IMAGE = "/assets/logo-placeholder.png"
DEFAULT_CATEGORY = "shift4shop"
ORDERS_SEGMENT = "orders"


class MalformedEvent(Exception):
    """Raised when the inbound event does not have the API Gateway proxy shape."""

    pass


class InvalidRequestBody(Exception):
    """Raised when a request body is present but is not valid JSON."""

    pass


# --- Inbound event (API Gateway REST v1 and HTTP API v2) ---

class HttpDescription(BaseModel):
    method: Optional[str] = None
    path: Optional[str] = None


class RequestContext(BaseModel):
    http: Optional[HttpDescription] = None
    httpMethod: Optional[str] = None


class ProxyEvent(BaseModel):
    httpMethod: Optional[str] = None
    path: Optional[str] = None
    rawPath: Optional[str] = None
    pathParameters: Optional[Dict[str, Optional[str]]] = None
    queryStringParameters: Optional[Dict[str, Optional[str]]] = None
    headers: Optional[Dict[str, Optional[str]]] = None
    body: Optional[Union[str, Dict[str, Any], List[Any]]] = None
    isBase64Encoded: bool = False
    requestContext: Optional[RequestContext] = None

    @property
    def method(self) -> str:
        ctx = self.requestContext
        method = (
            (ctx.http.method if ctx and ctx.http else None)
            or self.httpMethod
            or (ctx.httpMethod if ctx else None)
        )
        return (method or "").upper()


class InboundRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str
    resource_path: str
    query_params: Dict[str, str] = Field(default_factory=dict)
    body: Any = None
    origin: Optional[str] = None


def event_method(event: Any) -> str:
    """Best-effort method lookup, usable before the event is validated."""
    if not isinstance(event, dict):
        return ""
    ctx = event.get("requestContext")
    http = ctx.get("http") if isinstance(ctx, dict) else None
    method = http.get("method") if isinstance(http, dict) else None
    return str(method or event.get("httpMethod") or "").upper()


def event_origin(event: Any) -> Optional[str]:
    if not isinstance(event, dict):
        return None
    headers = event.get("headers")
    if not isinstance(headers, dict):
        return None
    for key, value in headers.items():
        if str(key).lower() == "origin" and isinstance(value, str) and value:
            return value
    return None


def resolve_resource_path(evt: ProxyEvent) -> str:
    """
    Precedence: proxy path parameter > order id path parameter > raw path.

    From the raw path only the last segment is kept, or the last two when the
    one before last is "Orders".
    """
    params = evt.pathParameters or {}
    proxy = params.get("proxy")
    if proxy:
        return "/" + proxy.strip("/")

    order_id = params.get("orderId") or params.get("order_id") or params.get("id")
    if order_id:
        return f"/Orders/{order_id}"

    http = evt.requestContext.http if evt.requestContext else None
    raw = evt.rawPath or evt.path or (http.path if http else None) or "/"
    segments = [s for s in raw.split("/") if s]
    if not segments:
        return "/"
    if len(segments) >= 2 and segments[-2].lower() == ORDERS_SEGMENT:
        return f"/{segments[-2]}/{segments[-1]}"
    return f"/{segments[-1]}"


def parse_body(evt: ProxyEvent) -> Any:
    raw = evt.body
    if raw is None:
        return None
    if isinstance(raw, (dict, list)):
        return raw
    if evt.isBase64Encoded:
        try:
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise InvalidRequestBody("Request body is not valid base64 JSON") from e
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidRequestBody(f"Request body is not valid JSON: {e.msg}") from e


def normalize_event(event: Any) -> InboundRequest:
    """
    Validate the raw Lambda event and reduce it to an InboundRequest.

    Raises:
        MalformedEvent: Event is not a proxy event or carries no method.
        InvalidRequestBody: Body present but not parseable as JSON.
    """
    try:
        evt: ProxyEvent = parse(event=event, model=ProxyEvent)
    except ValueError as e:
        raise MalformedEvent(f"Malformed request event: {e}") from e

    if not evt.method:
        raise MalformedEvent("Malformed request event: HTTP method missing")

    query = {k: v for k, v in (evt.queryStringParameters or {}).items() if v is not None}
    return InboundRequest(
        method=evt.method,
        resource_path=resolve_resource_path(evt),
        query_params=query,
        body=parse_body(evt),
        origin=event_origin(event),
    )


# --- Output shapes ---

def _finite_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "y")
    return bool(value)


def _first_category(raw: dict) -> Any:
    categories = raw.get("CategoryList")
    if isinstance(categories, list) and categories:
        first = categories[0]
        if isinstance(first, dict):
            return first.get("CategoryID") or first.get("CategoryName")
    return None


class Product(BaseModel):
    """Catalog item in the shape the storefront renders."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    catalog_id: Union[int, str, None] = Field(default=None, alias="catalogid")
    name: str = ""
    price: float = 0.0
    list_price: Optional[float] = Field(default=None, alias="listprice")
    thumbnail_url: str = Field(default=PLACEHOLDER_IMAGE, alias="thumbnailurl")
    main_image_file: str = Field(default=PLACEHOLDER_IMAGE, alias="mainimagefile")
    description: str = ""
    stock: int = 0
    featured: bool = False
    category_id: Union[str, int, List[Any]] = Field(default=DEFAULT_CATEGORY, alias="categoryid")

    @field_validator("price", "stock", mode="before")
    @classmethod
    def coerce_number(cls, v, info):
        number = _finite_float(v)
        if number is None:
            return 0
        return int(number) if info.field_name == "stock" else number

    @field_validator("list_price", mode="before")
    @classmethod
    def coerce_list_price(cls, v):
        return _finite_float(v)

    @field_validator("thumbnail_url", "main_image_file", mode="before")
    @classmethod
    def default_image(cls, v):
        return v or PLACEHOLDER_IMAGE

    @field_validator("name", "description", mode="before")
    @classmethod
    def default_text(cls, v):
        return "" if v is None else str(v)

    @field_validator("category_id", mode="before")
    @classmethod
    def default_category(cls, v):
        if isinstance(v, bool) or not isinstance(v, (str, int, list)) or v in ("", []):
            return DEFAULT_CATEGORY
        return v

    @classmethod
    def from_upstream(cls, raw: dict) -> "Product":
        """Accepts the lowercase storefront shape or the native 3dcart shape (SKUInfo, ...)."""
        sku = raw.get("SKUInfo") if isinstance(raw.get("SKUInfo"), dict) else {}
        thumbnail = (
            raw.get("thumbnail")
            or raw.get("thumbnailurl")
            or raw.get("ThumbnailFile")
            or raw.get("image1")
            or raw.get("MainImageFile")
        )
        main_image = (
            raw.get("image1")
            or raw.get("mainimagefile")
            or raw.get("MainImageFile")
            or raw.get("thumbnail")
            or raw.get("ThumbnailFile")
        )
        return cls(
            catalogid=raw.get("catalogid") or raw.get("id") or raw.get("CatalogID") or sku.get("CatalogID"),
            name=raw.get("name") or sku.get("Name"),
            price=raw.get("price", sku.get("Price")),
            listprice=raw.get("list_price") or raw.get("listprice") or sku.get("RetailPrice"),
            thumbnailurl=thumbnail,
            mainimagefile=main_image,
            description=raw.get("description") or raw.get("Description"),
            stock=raw.get("stock", sku.get("Stock")),
            featured=_as_bool(raw.get("featured", raw.get("FeaturedProduct"))),
            categoryid=raw.get("categories") or raw.get("categoryid") or _first_category(raw),
        )


class OrderStatus(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    order_status_id: int = Field(alias="OrderStatusID")
    sorting: int = Field(alias="Sorting")
    status_definition: str = Field(alias="StatusDefinition")
    status_text: str = Field(alias="StatusText")
    visible: bool = Field(default=True, alias="Visible")


class OrderSubmissionResult(BaseModel):
    """One entry of the [{Key, Value, Status, Message}] list 3dcart answers order writes with."""

    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(default="OrderID", alias="Key")
    value: str = Field(alias="Value")
    status: str = Field(alias="Status")
    message: str = Field(alias="Message")
    transaction_id: Optional[str] = Field(default=None, alias="TransactionID")
    payment_info: Optional[Dict[str, Any]] = Field(default=None, alias="PaymentInfo")
    api_error: Optional[str] = Field(default=None, alias="ApiError")
    note: Optional[str] = Field(default=None, alias="Note")
