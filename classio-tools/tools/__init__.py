"""Tool implementations for ClassIO Tools MCP Server."""

from .exams import get_next_course_exam, get_all_course_next_exam
from .lectures import find_closest_lectures, summarize_lecture
from .announcements import latest_announcement_check
from .notion_write import notion_write
from .google_calendar import google_calendar

__all__ = [
    "get_next_course_exam",
    "get_all_course_next_exam",
    "find_closest_lectures",
    "summarize_lecture",
    "latest_announcement_check",
    "notion_write",
    "google_calendar",
]
