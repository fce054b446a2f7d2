"""Google Calendar tool, backed by an n8n webhook."""

from typing import Any, Dict

import httpx
from loguru import logger

from services.webhook import send_webhook_request
from utils.config import ServiceNotConfiguredError


def google_calendar(prompt: str) -> Dict[str, Any]:
    """
    Forward a calendar request to the n8n automation.

    Args:
        prompt: The user's request, passed through unchanged

    Returns:
        On success: success=True and the webhook response.
        On failure: error message and hint.
    """
    if not prompt or not prompt.strip():
        return {
            "success": False,
            "error": "Prompt cannot be empty",
            "hint": "Describe the meeting to add"
        }

    try:
        response = send_webhook_request(prompt)
    except ServiceNotConfiguredError as e:
        logger.error("Google Calendar tool: {}", e)
        return {
            "success": False,
            "error": str(e),
            "hint": "Set N8N_WEBHOOK_URL in your environment"
        }
    except httpx.HTTPError as e:
        logger.exception("Error in Google Calendar tool")
        return {
            "success": False,
            "error": f"Failed to interact with Google Calendar: {e}",
            "hint": "Check that the n8n workflow is active"
        }

    return {
        "success": True,
        "response": response
    }
