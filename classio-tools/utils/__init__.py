"""Utility modules for ClassIO Tools MCP Server."""

from .state import (
    get_static_path,
    normalize_course_id,
    read_json,
    list_course_ids,
    read_schedule,
    read_announcements,
    list_lecture_files,
    read_lecture,
)
from .fuzzy import (
    Candidate,
    ScoredCandidate,
    TitleMatch,
    levenshtein_distance,
    similarity_score,
    rank_candidates,
    best_match,
    find_similar,
    select_by_title,
)
from .dates import parse_datetime, resolve_as_of
from .config import Settings, get_settings, configure_logging

__all__ = [
    "get_static_path",
    "normalize_course_id",
    "read_json",
    "list_course_ids",
    "read_schedule",
    "read_announcements",
    "list_lecture_files",
    "read_lecture",
    "Candidate",
    "ScoredCandidate",
    "TitleMatch",
    "levenshtein_distance",
    "similarity_score",
    "rank_candidates",
    "best_match",
    "find_similar",
    "select_by_title",
    "parse_datetime",
    "resolve_as_of",
    "Settings",
    "get_settings",
    "configure_logging",
]
