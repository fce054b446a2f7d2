"""Exam lookup tools (read-only access to course schedules)."""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from loguru import logger

from utils.dates import parse_datetime, resolve_as_of
from utils.state import list_course_ids, read_schedule, schedule_items
from tools.courses import course_not_found


def upcoming_exams(
    schedule: List[Dict[str, Any]],
    now: datetime,
    class_name: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Filter a schedule down to exams strictly after ``now``, soonest first.

    Items with a missing or unparseable date are skipped.

    Args:
        schedule: List of schedule items
        now: Reference time
        class_name: Optional case-insensitive substring filter on className
    """
    exams = []
    for item in schedule:
        if item.get("type") != "exam":
            continue
        if class_name:
            item_class = str(item.get("className") or "")
            if class_name.lower() not in item_class.lower():
                continue
        try:
            when = parse_datetime(item.get("date", ""))
        except (AttributeError, ValueError):
            logger.warning("Skipping schedule item with bad date: {!r}", item.get("date"))
            continue
        if when > now:
            exams.append((when, item))

    exams.sort(key=lambda pair: pair[0])
    return [item for _, item in exams]


def get_next_course_exam(
    course_id: str,
    class_name: Optional[str] = None,
    as_of: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Find the next exam for a course.

    Args:
        course_id: Course ID (e.g., "csc254", "CSC 254", "CSC-254")
        class_name: Optional topic/class filter matched against className
        as_of: Optional ISO date for "now" (defaults to the current time)

    Returns:
        Dictionary with:
        - found: True if an upcoming exam exists
        - course_id: The course searched
        - exam: The schedule item for the next exam

        Or if none:
        - found: False
        - message: "No upcoming exams found."
    """
    error = course_not_found(course_id)
    if error:
        return error

    try:
        now = resolve_as_of(as_of)
    except ValueError:
        return {
            "success": False,
            "error": f"Invalid date: '{as_of}'",
            "hint": "Use an ISO date such as '2025-03-14' or '2025-03-14T09:00:00Z'"
        }

    try:
        schedule_data = read_schedule(course_id)
    except (OSError, json.JSONDecodeError) as e:
        logger.exception("Failed to read schedule for {}", course_id)
        return {
            "success": False,
            "error": f"Failed to fetch upcoming exam: {e}",
            "hint": "Check the course's schedule.json"
        }

    items = schedule_items(schedule_data)
    if items is None:
        return {
            "success": False,
            "error": f"Invalid schedule format for course: {course_id}",
            "hint": "schedule.json must contain a 'schedule' list"
        }

    exams = upcoming_exams(items, now, class_name)
    if not exams:
        return {
            "found": False,
            "course_id": course_id,
            "message": "No upcoming exams found."
        }

    return {
        "found": True,
        "course_id": course_id,
        "exam": exams[0]
    }


def get_all_course_next_exam(as_of: Optional[str] = None) -> Dict[str, Any]:
    """
    Find the next exam in every course.

    Courses with a missing or unreadable schedule are skipped.

    Args:
        as_of: Optional ISO date for "now" (defaults to the current time)

    Returns:
        Dictionary with:
        - found: True if at least one course has an upcoming exam
        - exams: List of exam items, each tagged with its "course" code

        Or if none:
        - found: False
        - message: "No upcoming exams found for any course."
    """
    try:
        now = resolve_as_of(as_of)
    except ValueError:
        return {
            "success": False,
            "error": f"Invalid date: '{as_of}'",
            "hint": "Use an ISO date such as '2025-03-14' or '2025-03-14T09:00:00Z'"
        }

    next_exams = []
    for course in list_course_ids():
        try:
            schedule_data = read_schedule(course)
            items = schedule_items(schedule_data)
            if items is None:
                logger.warning("Skipping course {}: schedule.json is missing or malformed", course)
                continue

            exams = upcoming_exams(items, now)
            if exams:
                next_exams.append({"course": schedule_data.get("course_code", course), **exams[0]})
        except Exception as e:
            logger.warning("Failed to process schedule for course {}: {}", course, e)

    if not next_exams:
        return {
            "found": False,
            "message": "No upcoming exams found for any course."
        }

    return {
        "found": True,
        "exams": next_exams
    }
