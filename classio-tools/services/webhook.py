"""n8n webhook client used for the calendar automation."""

import json
from typing import Any

import httpx
from loguru import logger

from utils.config import ServiceNotConfiguredError, get_settings

DEFAULT_HTTP_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "*/*",
    "User-Agent": "classio-tools/0.1",
}


def send_webhook_request(payload: Any) -> Any:
    """
    Forward a payload to the n8n webhook.

    The webhook is called with GET and a JSON body ``{"chatInput": payload}``,
    which is what the n8n chat trigger expects.

    Args:
        payload: Data to forward (usually the user's prompt)

    Returns:
        Decoded JSON response, or the raw text if it isn't JSON

    Raises:
        ServiceNotConfiguredError: If N8N_WEBHOOK_URL is not set
        httpx.HTTPStatusError: On a non-2xx response
    """
    settings = get_settings()
    if not settings.n8n_webhook_url:
        raise ServiceNotConfiguredError("N8N_WEBHOOK_URL is not set")

    with httpx.Client(timeout=settings.http_timeout) as client:
        r = client.request(
            "GET",
            settings.n8n_webhook_url,
            headers=DEFAULT_HTTP_HEADERS,
            content=json.dumps({"chatInput": payload}),
        )
        r.raise_for_status()

    logger.debug("Webhook responded with HTTP {}", r.status_code)
    try:
        return r.json()
    except ValueError:
        return r.text
