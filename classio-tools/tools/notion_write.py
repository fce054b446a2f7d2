"""Notion writing tool: create a page under a parent found by title."""

from typing import Any, Dict

import httpx
from loguru import logger

from services.notion import create_page, search_page_id_by_title
from utils.config import get_settings


def notion_write(parent_title: str, title: str, page_content: str, exact: bool = True) -> Dict[str, Any]:
    """
    Create a Notion page with text content under an existing page.

    The parent is looked up by title. With ``exact`` an exact
    (case-insensitive) title match is preferred; otherwise the most
    recently edited search result is used. When ``parent_title`` is empty
    the configured DEFAULT_BLOCK_ID is used as the parent instead.

    Args:
        parent_title: Title of the parent page
        title: Title of the page to create
        page_content: Plain-text content of the new page
        exact: Prefer an exact title match for the parent

    Returns:
        On success: success=True, parent_id and the created page.
        If no parent was found: error and the candidate pages seen.
        On failure: error message and hint.
    """
    settings = get_settings()
    if not settings.notion_token:
        logger.error("notion_write called without NOTION_TOKEN")
        return {
            "success": False,
            "error": "NOTION_TOKEN is not set",
            "hint": "Export NOTION_TOKEN in your environment"
        }

    try:
        if parent_title and parent_title.strip():
            match = search_page_id_by_title(parent_title, prefer_exact=exact)
            if match.id is None:
                return {
                    "success": False,
                    "error": f'No page found with title "{parent_title}"',
                    "candidates": [{"title": c.name, "id": c.ref} for c in match.candidates],
                    "hint": "Share the parent page with the Notion integration"
                }
            parent_id = match.id
        elif settings.default_block_id:
            parent_id = settings.default_block_id
        else:
            return {
                "success": False,
                "error": "parent_title is required",
                "hint": "Give the title of the page to write under, or set DEFAULT_BLOCK_ID"
            }

        page = create_page(parent_id, title, page_content)
    except (httpx.HTTPError, ValueError) as e:
        # ValueError: a response body that is not JSON
        logger.exception("Error in notion_write tool")
        return {
            "success": False,
            "error": f"Failed to execute notion_write: {e}",
            "hint": "Check the logs and the Notion integration's permissions"
        }

    return {
        "success": True,
        "parent_id": parent_id,
        "page": page
    }
