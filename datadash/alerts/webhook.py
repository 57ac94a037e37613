"""Single-shot delivery of alert payloads to a user supplied https webhook."""
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlparse

import requests

from datadash.config import WEBHOOK_TIMEOUT
from datadash.constants import DEFAULT_ALERT_TEXT
from datadash.utils import setup_logger, utc_timestamp

logger = setup_logger(__name__)

INVALID_URL_ERROR = "Webhook URL must be a valid https URL"
UNREACHABLE_ERROR = "Webhook request failed to reach destination"


def is_valid_https_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme == "https" and bool(parsed.netloc)


def deliver_webhook(
    url: Any,
    payload: Optional[Dict[str, Any]] = None,
    message: Optional[str] = None,
) -> Tuple[Dict[str, Any], int]:
    """
    POST an alert payload to a webhook, once.

    Args:
        url: Destination; anything but an https URL is rejected up front
        payload: JSON body to send; built from `message` when omitted
        message: Alert text for the default payload

    Returns:
        (response body, HTTP status for the caller). Never raises.
    """
    url = url.strip() if isinstance(url, str) else ""
    if not url or not is_valid_https_url(url):
        logger.warning(f"Rejected webhook URL: {url!r}")
        return {"ok": False, "error": INVALID_URL_ERROR}, 400

    if payload is None:
        payload = {
            "text": message or DEFAULT_ALERT_TEXT,
            "timestamp": utc_timestamp(),
        }

    try:
        r = requests.post(url, json=payload, timeout=WEBHOOK_TIMEOUT)
    except requests.exceptions.RequestException as e:
        logger.error(f"Webhook delivery to {url} failed: {e}")
        return {"ok": False, "error": UNREACHABLE_ERROR}, 502

    logger.info(f"Webhook delivered to {url} - Status: {r.status_code}")
    return {"ok": r.ok, "status": r.status_code}, 200
