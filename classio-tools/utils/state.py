"""File I/O helpers and path management for course data."""

import json
import re
from pathlib import Path
from typing import Any, List, Optional

from .config import get_settings


def get_static_path() -> Path:
    """Get the path to the static course data directory."""
    return get_settings().static_dir


def normalize_course_id(course_id: str) -> str:
    """
    Turn a user-supplied course ID into its directory name.

    "CSC 254", "CSC-254" and "csc254" all become "csc254".
    """
    return re.sub(r"[^a-z0-9]", "", course_id.lower())


def read_json(path: Path) -> Optional[Any]:
    """
    Read and parse a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed JSON data, or None if file doesn't exist
    """
    if not path.exists():
        return None
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def get_course_path(course_id: str) -> Path:
    return get_static_path() / normalize_course_id(course_id)


def course_exists(course_id: str) -> bool:
    # an empty ID would resolve to the static root itself
    if not normalize_course_id(course_id):
        return False
    return get_course_path(course_id).is_dir()


def list_course_ids() -> List[str]:
    """
    List every course directory in the static folder.

    Returns:
        Sorted list of course IDs (empty if the static folder is missing)
    """
    static = get_static_path()
    if not static.is_dir():
        return []
    return sorted(p.name for p in static.iterdir() if p.is_dir())


def get_schedule_path(course_id: str) -> Path:
    return get_course_path(course_id) / "schedule.json"


def read_schedule(course_id: str) -> Optional[dict]:
    """
    Read a course's schedule.json.

    Returns:
        Dictionary with course_code and schedule list, or None if missing
    """
    return read_json(get_schedule_path(course_id))


def schedule_items(schedule_data: Any) -> Optional[List[dict]]:
    """
    Pull the schedule items out of parsed schedule.json data.

    Returns:
        The items that are JSON objects, or None if the data is not a
        {"schedule": [...]} object
    """
    if not isinstance(schedule_data, dict) or not isinstance(schedule_data.get("schedule"), list):
        return None
    return [item for item in schedule_data["schedule"] if isinstance(item, dict)]


def get_announcement_path(course_id: str) -> Path:
    return get_course_path(course_id) / "announcements" / "announcement.json"


def read_announcements(course_id: str) -> Optional[list]:
    """
    Read a course's announcements, oldest first.

    Returns:
        List of announcement records, or None if the file is missing
    """
    return read_json(get_announcement_path(course_id))


def get_lectures_dir(course_id: str) -> Path:
    return get_course_path(course_id) / "lectures"


def list_lecture_files(course_id: str) -> List[Path]:
    """
    List the plain-text lecture files for a course.

    Returns:
        Sorted list of .txt paths (empty if the lectures folder is missing)
    """
    lectures_dir = get_lectures_dir(course_id)
    if not lectures_dir.is_dir():
        return []
    return sorted(p for p in lectures_dir.iterdir() if p.is_file() and p.suffix == ".txt")


def read_lecture(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
