import io

import pytest

from campusconnect.core.config import Settings
from campusconnect.utils.console_utils import ConsoleIO


def scripted_io(*answers: str) -> ConsoleIO:
    """ConsoleIO fed with one answer per line; input ends after the last one."""
    stdin = io.StringIO("".join(f"{answer}\n" for answer in answers))
    return ConsoleIO(stdin=stdin, stdout=io.StringIO())


@pytest.fixture
def make_io():
    return scripted_io


@pytest.fixture
def small_settings():
    """Small catalogs with the extra profile menus switched off."""
    return Settings(
        UNIVERSITIES=["IBA Karachi", "LUMS Lahore"],
        INTEREST_OPTIONS=["Sports", "Coding", "Music", "Debate"],
        STUDY_HABIT_OPTIONS=[],
        LIFESTYLE_OPTIONS=[],
    )
