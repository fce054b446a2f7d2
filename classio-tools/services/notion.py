"""Notion API client for page search and creation."""

from typing import Any, Dict, List

import httpx
from loguru import logger

from utils.config import NOTION_API_URL, ServiceNotConfiguredError, get_settings
from utils.fuzzy import Candidate, TitleMatch, select_by_title


def _headers() -> Dict[str, str]:
    settings = get_settings()
    if not settings.notion_token:
        raise ServiceNotConfiguredError("NOTION_TOKEN is not set")
    return {
        "Authorization": f"Bearer {settings.notion_token}",
        "Notion-Version": settings.notion_version,
        "Content-Type": "application/json",
    }


def text_from_rich(items: Any) -> str:
    """Join the plain text of a Notion rich-text array."""
    parts = []
    for item in items or []:
        text = item.get("plain_text")
        if text is None:
            text = (item.get("text") or {}).get("content", "")
        parts.append(text)
    return "".join(parts)


def page_title(page: Dict[str, Any]) -> str:
    """Extract a page's title from its title-type property."""
    for prop in (page.get("properties") or {}).values():
        if isinstance(prop, dict) and prop.get("type") == "title":
            return text_from_rich(prop.get("title"))
    return text_from_rich(page.get("title"))


def search_pages(query: str) -> List[Candidate]:
    """
    Search Notion for pages matching a query.

    Results come back most recently edited first, at most 10.

    Args:
        query: Search text

    Returns:
        List of Candidate objects with the page title as name and page ID as ref
    """
    payload = {
        "query": query,
        "filter": {"value": "page", "property": "object"},
        "sort": {"direction": "descending", "timestamp": "last_edited_time"},
        "page_size": 10,
    }
    with httpx.Client(timeout=get_settings().http_timeout) as client:
        r = client.post(f"{NOTION_API_URL}/search", json=payload, headers=_headers())
        r.raise_for_status()
        data = r.json()

    results = data.get("results") if isinstance(data, dict) else None
    pages = [p for p in results or [] if isinstance(p, dict) and p.get("object") == "page"]
    logger.debug("Notion search {!r}: {} page(s)", query, len(pages))
    return [Candidate(name=page_title(p), ref=p["id"]) for p in pages]


def search_page_id_by_title(query: str, prefer_exact: bool = True) -> TitleMatch:
    """Search pages, then pick one by title (exact match first if requested)."""
    return select_by_title(query, search_pages(query), prefer_exact=prefer_exact)


def create_page(parent_id: str, title: str, content: str) -> Dict[str, Any]:
    """
    Create a child page holding a single paragraph of text.

    Args:
        parent_id: ID of the parent page
        title: Title for the new page
        content: Plain-text body

    Returns:
        The page object returned by the Notion API
    """
    payload = {
        "parent": {"page_id": parent_id},
        "properties": {"title": [{"text": {"content": title}}]},
        "children": [
            {
                "object": "block",
                "type": "paragraph",
                "paragraph": {"rich_text": [{"type": "text", "text": {"content": content}}]},
            }
        ],
    }
    with httpx.Client(timeout=get_settings().http_timeout) as client:
        r = client.post(f"{NOTION_API_URL}/pages", json=payload, headers=_headers())
        r.raise_for_status()
        page = r.json()

    logger.info("Created Notion page {!r} under {}", title, parent_id)
    return page
