"""
campusconnect/flow/handlers/university.py

Handles: STEP 1 – University selection

- Case-insensitive search over the configured catalog
- Numbered list of matches
- 'r' goes back to the search prompt
- Invalid numbers re-prompt; an empty match set fails the step
"""

from typing import Optional, Sequence

from campusconnect.core.exceptions import NoMatchesError
from campusconnect.core.logging import get_logger
from campusconnect.flow.handlers.base import Step
from campusconnect.flow.states import OnboardingState
from campusconnect.schemas.profile import UserProfile
from campusconnect.utils.console_utils import ConsoleIO
from campusconnect.utils.constants import (
    ASK_UNIVERSITY_SEARCH_MESSAGE,
    UNIVERSITY_SEARCH_PROMPT,
    UNIVERSITY_CHOICE_PROMPT,
    SEARCH_AGAIN_COMMAND,
    NO_UNIVERSITY_MATCHES_MESSAGE,
    UNIVERSITY_SELECTED_MESSAGE,
    INVALID_CHOICE_MESSAGE,
)
from campusconnect.utils.validation_utils import filter_catalog, parse_index

logger = get_logger(__name__)

_SEARCH_AGAIN = object()


class UniversityStep(Step):
    """Picks one university from the catalog."""

    state = OnboardingState.UNIVERSITY

    def __init__(
        self,
        io: ConsoleIO,
        universities: Sequence[str],
        max_attempts: Optional[int] = None,
    ) -> None:
        super().__init__(io, max_attempts)
        self.universities = list(universities)

    def collect(self, profile: UserProfile) -> None:
        self.io.show(ASK_UNIVERSITY_SEARCH_MESSAGE)

        while True:
            query = self.io.prompt(UNIVERSITY_SEARCH_PROMPT)
            matches = filter_catalog(query, self.universities)
            logger.info(f"Search '{query}' matched {len(matches)} of {len(self.universities)}")

            if not matches:
                raise NoMatchesError(
                    NO_UNIVERSITY_MATCHES_MESSAGE.format(query=query),
                    details={"query": query},
                )

            self.io.show_menu(matches)

            def accept(answer: str):
                if answer.strip().lower() == SEARCH_AGAIN_COMMAND:
                    return _SEARCH_AGAIN
                index = parse_index(answer, len(matches))
                return None if index is None else matches[index]

            choice = self.ask_until(UNIVERSITY_CHOICE_PROMPT, accept, INVALID_CHOICE_MESSAGE)
            if choice is _SEARCH_AGAIN:
                continue

            profile.record(university=choice)
            self.io.show(UNIVERSITY_SELECTED_MESSAGE.format(university=choice))
            return
