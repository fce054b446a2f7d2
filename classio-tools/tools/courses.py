"""Shared course lookup used by the schedule, lecture and announcement tools."""

from typing import Any, Dict, Optional

from utils.fuzzy import find_similar
from utils.state import course_exists, list_course_ids, normalize_course_id


def course_not_found(course_id: str) -> Optional[Dict[str, Any]]:
    """
    Check that a course directory exists.

    Returns:
        None if the course exists, otherwise an error response with
        suggestions for similar course IDs
    """
    if course_exists(course_id):
        return None

    available = list_course_ids()
    return {
        "success": False,
        "error": f"Course '{course_id}' not found",
        "suggestions": find_similar(normalize_course_id(course_id), available),
        "available_courses": available,
        "hint": "Use a course ID like 'csc254' (spaces and dashes are ignored)",
    }
