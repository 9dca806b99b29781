"""Redaction of credentials and card numbers before anything reaches the logs."""

import json
import re
from typing import Any

MASK = "***"

SENSITIVE_KEYS = frozenset({
    "privatekey",
    "private_key",
    "token",
    "accesstoken",
    "access_token",
    "authorization",
    "secureurl",
    "clientsecret",
    "client_secret",
    "password",
    "cvv",
    "cardcvv",
    "cardcvv2",
    "x-api-key",
})

# 13 to 19 digits, optionally grouped by spaces or dashes
CARD_NUMBER_RE = re.compile(r"(?<!\d)(?:\d[ -]?){12,18}\d(?!\d)")


def _mask_card_number(match: re.Match) -> str:
    digits = re.sub(r"\D", "", match.group(0))
    return "*" * (len(digits) - 4) + digits[-4:]


def mask_text(value: str) -> str:
    return CARD_NUMBER_RE.sub(_mask_card_number, value)


def mask_sensitive(data: Any) -> Any:
    """
    Returns a copy of data safe for logging.

    Values under credential keys become "***" (keys compared case-insensitively),
    card-number-like digit runs keep only their last four digits and JSON
    documents embedded in strings (e.g. an event body) are masked recursively.
    """
    if isinstance(data, dict):
        out = {}
        for key, value in data.items():
            if str(key).lower() in SENSITIVE_KEYS and value is not None:
                out[key] = MASK
            else:
                out[key] = mask_sensitive(value)
        return out
    if isinstance(data, (list, tuple)):
        return [mask_sensitive(v) for v in data]
    if isinstance(data, str):
        stripped = data.strip()
        if stripped[:1] in ("{", "["):
            try:
                return json.dumps(mask_sensitive(json.loads(stripped)))
            except json.JSONDecodeError:
                pass
        return mask_text(data)
    if isinstance(data, int) and not isinstance(data, bool) and len(str(abs(data))) >= 13:
        return mask_text(str(data))
    return data
