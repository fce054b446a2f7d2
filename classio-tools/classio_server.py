#!/usr/bin/env python3
"""
ClassIO Tools MCP Server

A FastMCP server providing tools for students' course questions.
Includes exam schedules, recent lecture topics, fuzzy lecture lookup,
announcements, Notion page writing and Google Calendar automation.

Usage:
    python classio_server.py --port 8000

The server runs as HTTP and provides MCP tools for AI assistants.
"""

import argparse
from typing import Dict, Any, Optional

from fastmcp import FastMCP
from loguru import logger

# Import tool implementations
from tools.exams import (
    get_next_course_exam as _get_next_course_exam,
    get_all_course_next_exam as _get_all_course_next_exam,
)
from tools.lectures import (
    find_closest_lectures as _find_closest_lectures,
    summarize_lecture as _summarize_lecture,
)
from tools.announcements import latest_announcement_check as _latest_announcement_check
from tools.notion_write import notion_write as _notion_write
from tools.google_calendar import google_calendar as _google_calendar
from utils.config import configure_logging, get_settings, is_notion_configured, is_webhook_configured

# Create the FastMCP server
mcp = FastMCP(
    name="classio-tools",
    instructions="""
    ClassIO Tools answers questions about a student's courses.

    Course data:
    1. Use get_next_course_exam() or get_all_course_next_exam() for exams, tests, midterms and finals
    2. Use find_closest_lectures() to see what was covered recently
    3. Use summarize_lecture() with an approximate lecture name to get its notes
    4. Use latest_announcement_check() whenever announcements are mentioned

    Integrations:
    5. Use notion_write() to save content to a Notion page
    6. Use google_calendar() only when Google Calendar is explicitly mentioned

    Course IDs are forgiving: 'csc254', 'CSC 254' and 'CSC-254' are the same course.
    """,
)


# ============================================================================
# Schedule Tools (Read-Only)
# ============================================================================


@mcp.tool()
def get_next_course_exam(
    course_id: str,
    class_name: Optional[str] = None,
    as_of: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Get the next exam for a specific course.

    Use this whenever the user asks about exams, tests, midterms, or finals
    for a specific course, e.g. "When is my next exam in CSC254?" or
    "What is the date of my next midterm for course csc254?".

    Args:
        course_id: The course ID the user mentions, e.g. 'csc254', 'CSC 254', or 'CSC-254'
        class_name: Optional topic or class name filter if the user names one
        as_of: Optional ISO date string representing 'now' (defaults to the current date)

    Returns:
        If found: the exam's date, type, className and description.
        If not found: a message saying there are no upcoming exams.
    """
    return _get_next_course_exam(course_id, class_name, as_of)


@mcp.tool()
def get_all_course_next_exam(as_of: Optional[str] = None) -> Dict[str, Any]:
    """
    Get the next upcoming exam in every course.

    Checks the schedule of each course and returns the soonest exam for
    each, tagged with the course code.

    Args:
        as_of: Optional ISO date string representing 'now' (defaults to the current date)

    Returns:
        List of exams, one per course that has an upcoming exam.
    """
    return _get_all_course_next_exam(as_of)


# ============================================================================
# Lecture Tools (Read-Only)
# ============================================================================


@mcp.tool()
def find_closest_lectures(course_id: str, as_of: str) -> Dict[str, Any]:
    """
    Find the 3 lectures closest to (but before) the given date for a course.

    Use this to tell the user what was covered recently. Returns the
    lecture topics, newest first.

    Args:
        course_id: The course ID the user mentions, e.g. 'csc254', 'CSC 254', or 'CSC-254'
        as_of: ISO date string representing the current date and time

    Returns:
        List of lecture topics, or a message if no lecture precedes the date.
    """
    return _find_closest_lectures(course_id, as_of)


@mcp.tool()
def summarize_lecture(course_id: str, lecture_name: str) -> Dict[str, Any]:
    """
    Get the notes of a lecture so they can be summarized.

    The lecture name doesn't need to be exact: the closest matching lecture
    file is chosen, and other close matches are listed.

    Args:
        course_id: The course ID the user mentions, e.g. 'csc254', 'CSC 254', or 'CSC-254'
        lecture_name: The approximate name of the lecture

    Returns:
        The matched lecture name, match score, other matches and the lecture content.
    """
    return _summarize_lecture(course_id, lecture_name)


# ============================================================================
# Announcement Tools (Read-Only)
# ============================================================================


@mcp.tool()
def latest_announcement_check(class_id: str, query: str) -> Dict[str, Any]:
    """
    Check the latest announcements for a class.

    Whenever the user mentions announcements, use this tool. Examples:
    "Any updates about the curve in the past 5 announcements?" or
    "What are the latest announcements for CSC160?".

    Args:
        class_id: The ID of the class (e.g., 'csc160')
        query: The type of information requested: 'office hour', 'lab hour',
               'exam revision', 'curve', or 'general'

    Returns:
        The matching announcement text, or the 5 latest announcements for 'general'.
    """
    return _latest_announcement_check(class_id, query)


# ============================================================================
# Integration Tools
# ============================================================================


@mcp.tool()
def notion_write(parent_title: str, title: str, page_content: str, exact: bool = True) -> Dict[str, Any]:
    """
    Create a Notion page with text content under an existing page.

    Args:
        parent_title: Title of the parent page, where the child page will be created
        title: Title of the page that needs to be created
        page_content: Content inside the page
        exact: Prefer an exact (case-insensitive) title match for the parent

    Returns:
        On success: the created page.
        If the parent isn't found: the candidate pages that were seen.
    """
    return _notion_write(parent_title, title, page_content, exact)


@mcp.tool()
def google_calendar(prompt: str) -> Dict[str, Any]:
    """
    Add a meeting to Google Calendar.

    Only use this when 'Google Calendar' is explicitly mentioned in the prompt.

    Args:
        prompt: The user's prompt, sent as the payload to the calendar automation

    Returns:
        The automation's response.
    """
    return _google_calendar(prompt)


# ============================================================================
# Server Entry Point
# ============================================================================


def main():
    """Run the MCP server."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="ClassIO Tools MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python classio_server.py --port 8000
    python classio_server.py --host 127.0.0.1 --port 8001
        """,
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to run the server on (default: {settings.port})",
    )

    args = parser.parse_args()

    configure_logging(settings.log_level)
    if not is_notion_configured():
        logger.warning("NOTION_TOKEN is not set; notion_write will be unavailable")
    if not is_webhook_configured():
        logger.warning("N8N_WEBHOOK_URL is not set; google_calendar will be unavailable")

    logger.info("Serving course data from {}", settings.static_dir)
    logger.info("ClassIO Tools MCP Server running on http://localhost:{}/mcp", args.port)
    mcp.run(transport="http", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
