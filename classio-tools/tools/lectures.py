"""Lecture tools: recent lecture topics and fuzzy lecture lookup."""

import json
import re
from typing import Any, Dict

from loguru import logger

from utils.dates import parse_datetime, resolve_as_of
from utils.fuzzy import Candidate, rank_candidates
from utils.state import list_lecture_files, read_lecture, read_schedule, schedule_items
from tools.courses import course_not_found

RECENT_LECTURE_COUNT = 3


def lecture_display_name(stem: str) -> str:
    """Turn a lecture file stem like "intro_to_recursion" into "intro to recursion"."""
    return re.sub(r"[_\-]+", " ", stem).strip()


def find_closest_lectures(course_id: str, as_of: str) -> Dict[str, Any]:
    """
    Find the most recent lectures on or before a given date.

    Args:
        course_id: Course ID (e.g., "csc254", "CSC 254")
        as_of: ISO date string for "now"

    Returns:
        Dictionary with:
        - found: True if any lecture precedes as_of
        - course_id: The course searched
        - lectures: Up to three {"topic": ...} entries, newest first
        - follow_up: Suggested next question for the user

        Or if none:
        - found: False
        - message: "No lectures found before the given date."
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
            "error": f"Failed to fetch the closest lectures: {e}",
            "hint": "Check the course's schedule.json"
        }

    items = schedule_items(schedule_data)
    if items is None:
        return {
            "success": False,
            "error": f"Invalid schedule format for course: {course_id}",
            "hint": "schedule.json must contain a 'schedule' list"
        }

    past = []
    for item in items:
        if item.get("type") != "lecture":
            continue
        try:
            when = parse_datetime(item.get("date", ""))
        except (AttributeError, ValueError):
            logger.warning("Skipping schedule item with bad date: {!r}", item.get("date"))
            continue
        if when <= now:
            past.append((when, item))

    past.sort(key=lambda pair: pair[0], reverse=True)
    closest = [{"topic": item.get("topic")} for _, item in past[:RECENT_LECTURE_COUNT]]

    if not closest:
        return {
            "found": False,
            "course_id": course_id,
            "message": "No lectures found before the given date."
        }

    return {
        "found": True,
        "course_id": course_id,
        "lectures": closest,
        "follow_up": "Do you want me to give you a quick summary of any of these topics?"
    }


def summarize_lecture(course_id: str, lecture_name: str) -> Dict[str, Any]:
    """
    Fetch the content of the lecture whose name best matches ``lecture_name``.

    File names are compared without their .txt suffix and with underscores
    and dashes read as spaces, so "recursion intro" finds
    "intro_to_recursion.txt".

    Args:
        course_id: Course ID (e.g., "csc254")
        lecture_name: Approximate lecture name

    Returns:
        Dictionary with:
        - found: True
        - lecture: Display name of the matched lecture (not the file stem;
          use "file" to refer to the file itself)
        - file: The lecture file name
        - score: Similarity score of the match
        - other_matches: Next best lecture names
        - content: Full lecture text

        Or if the course has no lectures:
        - found: False
        - message: explanation
    """
    error = course_not_found(course_id)
    if error:
        return error

    files = list_lecture_files(course_id)
    candidates = [Candidate(name=lecture_display_name(p.stem), ref=p.name) for p in files]

    ranked = rank_candidates(lecture_name, candidates)
    if not ranked:
        return {
            "found": False,
            "course_id": course_id,
            "message": f"No lecture found matching the name: {lecture_name}"
        }

    best = ranked[0]
    by_name = {p.name: p for p in files}
    try:
        content = read_lecture(by_name[best.candidate.ref])
    except OSError as e:
        logger.exception("Failed to read lecture {}", best.candidate.ref)
        return {
            "success": False,
            "error": f"Failed to summarize the lecture: {e}",
            "hint": "Check file permissions"
        }

    logger.debug("Lecture {!r} matched {} (score {:.3f})", lecture_name, best.candidate.ref, best.score)
    return {
        "found": True,
        "course_id": course_id,
        "lecture": best.candidate.name,
        "file": best.candidate.ref,
        "score": round(best.score, 4),
        "other_matches": [s.candidate.name for s in ranked[1:RECENT_LECTURE_COUNT]],
        "content": content
    }
