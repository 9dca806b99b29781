"""
Shift4Shop (3dcart) REST API client.

Every call goes to {store_url}/3dCartWebAPI/v1{resource_path} with the merchant
credentials attached, either as the PrivateKey/Token/SecureURL header set or,
in oauth mode, as a Bearer token obtained with client credentials.
"""

from typing import Any, Iterable, Mapping, Optional

import requests
from aws_lambda_powertools import Logger

from shared.config import UpstreamCredentials
from shared.masking import mask_sensitive

logger = Logger(service="shift4shop")

API_PREFIX = "/3dCartWebAPI/v1"
DEFAULT_TIMEOUT_SEC = 30
OAUTH_TIMEOUT_SEC = 10


class UpstreamFailure(Exception):
    """Raised when the commerce API errors, times out or is unreachable."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


def build_query_params(
    *sources: Optional[Mapping[str, Any]],
    exclude: Iterable[str] = (),
) -> dict[str, str]:
    """
    Merge query parameter mappings into one flat dict.

    Later sources override earlier ones; keys are deduplicated and excluded
    case-insensitively, keeping the spelling of the last writer. None values
    are dropped and booleans become "true"/"false". Encoding is left to
    requests.
    """
    excluded = {k.lower() for k in exclude}
    merged: dict[str, tuple[str, str]] = {}
    for source in sources:
        for key, value in (source or {}).items():
            if value is None or key.lower() in excluded:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            merged[key.lower()] = (key, str(value))
    return dict(merged.values())


def _decode(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamFailure("Invalid response from Shift4Shop API") from e


def _error_payload(resp: requests.Response) -> Any:
    try:
        return resp.json() if resp.content else None
    except ValueError:
        return resp.text[:500]


class Shift4ShopClient:
    def __init__(self, credentials: UpstreamCredentials, session: Optional[requests.Session] = None) -> None:
        self.credentials = credentials
        self.session = session or requests.Session()
        self._access_token: Optional[str] = None

    def _get_access_token(self) -> str:
        if self._access_token:
            return self._access_token
        creds = self.credentials
        data = {
            "grant_type": "client_credentials",
            "client_id": creds.client_id,
            "client_secret": creds.client_secret.get_secret_value() if creds.client_secret else "",
        }
        if creds.merchant_number:
            data["store_id"] = creds.merchant_number
        try:
            resp = self.session.post(creds.oauth_token_url, data=data, timeout=OAUTH_TIMEOUT_SEC)
        except requests.RequestException as e:
            raise UpstreamFailure("Failed to authenticate with Shift4Shop API") from e
        if not resp.ok:
            logger.error(
                "OAuth token request rejected",
                extra={"status": resp.status_code, "payload": mask_sensitive(_error_payload(resp))},
            )
            raise UpstreamFailure("Failed to authenticate with Shift4Shop API", status_code=resp.status_code)
        token = (_decode(resp) or {}).get("access_token")
        if not token:
            raise UpstreamFailure("Shift4Shop OAuth response carried no access_token")
        self._access_token = token
        logger.info("Obtained Shift4Shop OAuth access token")
        return token

    def _headers(self) -> dict[str, str]:
        creds = self.credentials
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if creds.auth_mode == "oauth":
            headers["Authorization"] = f"Bearer {self._get_access_token()}"
            return headers
        headers["PrivateKey"] = creds.private_key.get_secret_value() if creds.private_key else ""
        headers["Token"] = creds.token.get_secret_value() if creds.token else ""
        headers["SecureURL"] = creds.secure_url
        return headers

    def url_for(self, resource_path: str) -> str:
        return f"{self.credentials.store_url.rstrip('/')}{API_PREFIX}/{resource_path.lstrip('/')}"

    def request(
        self,
        method: str,
        resource_path: str,
        params: Optional[Mapping[str, str]] = None,
        body: Any = None,
        timeout: float = DEFAULT_TIMEOUT_SEC,
    ) -> Any:
        """
        Issue one call to the commerce API.

        Returns:
            Parsed JSON response, or None for an empty body.

        Raises:
            UpstreamFailure: On connection error, timeout, non-2xx status or invalid JSON.
        """
        url = self.url_for(resource_path)
        headers = self._headers()
        logger.debug(f"Shift4Shop {method} {resource_path}", extra={"params": dict(params or {})})
        try:
            resp = self.session.request(
                method,
                url,
                params=params or None,
                json=body,
                headers=headers,
                timeout=timeout,
            )
        except requests.Timeout as e:
            raise UpstreamFailure(f"Timeout calling Shift4Shop {method} {resource_path}") from e
        except requests.RequestException as e:
            raise UpstreamFailure(f"Connection failure calling Shift4Shop {method} {resource_path}") from e

        if not resp.ok:
            payload = _error_payload(resp)
            logger.warning(
                f"Shift4Shop {method} {resource_path} returned HTTP {resp.status_code}",
                extra={"payload": mask_sensitive(payload)},
            )
            raise UpstreamFailure(
                f"Shift4Shop API returned HTTP {resp.status_code}",
                status_code=resp.status_code,
                payload=payload,
            )
        return _decode(resp)

    def get(self, resource_path: str, params: Optional[Mapping[str, str]] = None, **kwargs) -> Any:
        return self.request("GET", resource_path, params=params, **kwargs)

    def post(self, resource_path: str, body: Any = None, params: Optional[Mapping[str, str]] = None, **kwargs) -> Any:
        return self.request("POST", resource_path, params=params, body=body, **kwargs)

    def put(self, resource_path: str, body: Any = None, params: Optional[Mapping[str, str]] = None, **kwargs) -> Any:
        return self.request("PUT", resource_path, params=params, body=body, **kwargs)

    def delete(self, resource_path: str, params: Optional[Mapping[str, str]] = None, **kwargs) -> Any:
        return self.request("DELETE", resource_path, params=params, **kwargs)
