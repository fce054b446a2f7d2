"""Outbound integrations for ClassIO Tools."""

from .notion import search_pages, search_page_id_by_title, create_page
from .webhook import send_webhook_request

__all__ = [
    "search_pages",
    "search_page_id_by_title",
    "create_page",
    "send_webhook_request",
]
