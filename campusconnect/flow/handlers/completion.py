"""
campusconnect/flow/handlers/completion.py

Handles: Final summary

- Renders every profile field, one per line
- Lists are comma-joined, empty lists shown as "-"
"""

from typing import List, Optional

from campusconnect.schemas.profile import UserProfile
from campusconnect.utils.console_utils import format_section_header
from campusconnect.utils.constants import EMPTY_LIST_PLACEHOLDER


def format_list(values: List[str]) -> str:
    return ", ".join(values) if values else EMPTY_LIST_PLACEHOLDER


def _text(value: Optional[str]) -> str:
    return value if value is not None else EMPTY_LIST_PLACEHOLDER


def render_summary(profile: UserProfile) -> str:
    """
    Builds the summary block shown after the last step.

    Args:
        profile: Completed profile

    Returns:
        Multi-line summary text
    """
    lines = [
        format_section_header("Summary"),
        f"University: {_text(profile.university)}",
        f"Student ID: {_text(profile.student_id)}",
        f"Major: {_text(profile.major)}",
        f"Routine: {_text(profile.routine.value if profile.routine else None)}",
        f"Study Habits: {format_list(profile.study_habits)}",
        f"Interests: {format_list(profile.interests)}",
        f"Lifestyle: {format_list(profile.lifestyle)}",
        f"Premium: {'Yes' if profile.premium else 'No'}",
    ]
    return "\n".join(lines)
