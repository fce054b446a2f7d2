"""Announcement lookup tool."""

import json
from typing import Any, Dict

from loguru import logger

from utils.state import get_announcement_path, read_announcements
from tools.courses import course_not_found

RECENT_ANNOUNCEMENT_COUNT = 5


def latest_announcement_check(class_id: str, query: str) -> Dict[str, Any]:
    """
    Check the latest announcements of a class.

    Only the five most recent announcements are considered. A "general"
    query returns all of them; any other query returns the newest
    announcement text filed under that category.

    Args:
        class_id: Class ID (e.g., "csc160")
        query: Category such as "office hour", "lab hour", "exam revision",
               "curve", or "general"

    Returns:
        Dictionary with:
        - found: True
        - announcements: List of recent announcements (general query), or
        - text: The matching announcement text (specific query)

        Or if nothing matched:
        - found: False
        - message: "No relevant updates found."
    """
    error = course_not_found(class_id)
    if error:
        return error

    if not get_announcement_path(class_id).exists():
        return {
            "found": False,
            "class_id": class_id,
            "message": "Announcement file not found."
        }

    try:
        announcements = read_announcements(class_id) or []
    except (OSError, json.JSONDecodeError) as e:
        logger.exception("Failed to read announcements for {}", class_id)
        return {
            "success": False,
            "error": f"Failed to fetch announcements: {e}",
            "hint": "Check the class's announcements/announcement.json"
        }

    if not isinstance(announcements, list):
        logger.warning("announcement.json for {} is not a list", class_id)
        return {
            "success": False,
            "error": f"Invalid announcement format for class: {class_id}",
            "hint": "announcement.json must contain a list of announcements"
        }

    # file is oldest first
    recent = [a for a in reversed(announcements[-RECENT_ANNOUNCEMENT_COUNT:]) if isinstance(a, dict)]
    category = query.strip().lower()

    if category == "general":
        return {
            "found": True,
            "class_id": class_id,
            "announcements": recent
        }

    for entry in recent:
        content = entry.get("announcement")
        if not isinstance(content, dict):
            continue
        fields = {str(k).strip().lower(): v for k, v in content.items()}
        text = fields.get(category)
        if text:
            return {
                "found": True,
                "class_id": class_id,
                "query": query,
                "date": entry.get("date"),
                "text": text
            }

    return {
        "found": False,
        "class_id": class_id,
        "query": query,
        "message": "No relevant updates found."
    }
