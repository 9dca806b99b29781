"""
Handler for the storefront proxy to the Shift4Shop REST API.

Routes (any stage prefix before the last path segments is ignored):
- OPTIONS *                       CORS preflight, no upstream call
- GET /products                   all catalog pages; fallback list on failure
- GET /orderstatus                order statuses; fallback list on failure or empty
- GET /paymentmethods             payment methods; [] on failure
- GET|PUT /Orders/{id}            single order; test-prefixed ids served locally
- POST /orders                    order creation; synthesized result on failure
- POST /create-payment-token      local payment token (or /PaymentTokens upstream)
- anything else                   forwarded as-is to /3dCartWebAPI/v1{path}
"""

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from shared.config import MissingConfiguration, load_settings
from shared.masking import mask_sensitive
from shared.responses import error_response, http_response, options_response
from shared.shift4shop import UpstreamFailure
from schemas import InvalidRequestBody, MalformedEvent, event_method, event_origin, normalize_event
from service import ProxyService, UnsupportedMethod

logger = Logger(service="storefront-proxy")


@logger.inject_lambda_context(clear_state=True)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    logger.info("Event received", extra={"event": mask_sensitive(event)})
    origin = event_origin(event)

    if event_method(event) == "OPTIONS":
        return options_response(origin)

    try:
        request = normalize_event(event)
        settings = load_settings()
        service = ProxyService(settings)
        logger.append_keys(method=request.method, resource_path=request.resource_path)
        result = service.handle(request)
        return http_response(result.status_code, result.body, origin=origin)

    except (MalformedEvent, InvalidRequestBody) as e:
        logger.warning(f"Invalid request: {e}")
        return error_response(400, type(e).__name__, str(e), origin=origin)
    except UnsupportedMethod as e:
        logger.warning(str(e))
        return error_response(400, "UnsupportedMethod", str(e), origin=origin)
    except MissingConfiguration as e:
        logger.error(f"Configuration: {e}")
        return error_response(500, "MissingConfiguration", "Server configuration error", origin=origin)
    except UpstreamFailure as e:
        logger.warning(
            f"Upstream failure surfaced: {e}",
            extra={"upstream_status": e.status_code, "payload": mask_sensitive(e.payload)},
        )
        return error_response(e.status_code or 500, "UpstreamFailure", str(e), origin=origin)
    except Exception as e:
        logger.exception("Unhandled error in storefront proxy")
        return error_response(500, "InternalError", str(e), origin=origin)
