"""
campusconnect/flow/handlers/profile_details.py

Handles: STEP 3 – Profile details

- Free-text major
- Routine: "1" is Early Bird, any other answer is Night Owl
- Multi-select menus for study habits, interests and lifestyle
  (a menu whose catalog is empty is skipped)

Nothing here is validated, so the step always succeeds.
"""

from typing import List, Optional, Sequence

from campusconnect.core.logging import get_logger
from campusconnect.flow.handlers.base import Step
from campusconnect.flow.states import OnboardingState
from campusconnect.schemas.profile import Routine, UserProfile
from campusconnect.utils.console_utils import ConsoleIO
from campusconnect.utils.constants import (
    MAJOR_PROMPT,
    ROUTINE_HEADER,
    BINARY_CHOICE_PROMPT,
    MULTI_CHOICE_HEADER,
    MULTI_CHOICE_PROMPT,
    AFFIRMATIVE_CHOICE,
)
from campusconnect.utils.validation_utils import parse_choices

logger = get_logger(__name__)


def parse_routine(answer: str) -> Routine:
    """Maps a routine answer to a Routine; anything but "1" means Night Owl."""
    return Routine.EARLY_BIRD if answer == AFFIRMATIVE_CHOICE else Routine.NIGHT_OWL


class ProfileDetailsStep(Step):
    state = OnboardingState.PROFILE_DETAILS

    def __init__(
        self,
        io: ConsoleIO,
        interest_options: Sequence[str],
        study_habit_options: Sequence[str] = (),
        lifestyle_options: Sequence[str] = (),
        max_attempts: Optional[int] = None,
    ) -> None:
        super().__init__(io, max_attempts)
        self.interest_options = list(interest_options)
        self.study_habit_options = list(study_habit_options)
        self.lifestyle_options = list(lifestyle_options)

    def collect(self, profile: UserProfile) -> None:
        profile.record(major=self.io.prompt(MAJOR_PROMPT))

        self.io.show(ROUTINE_HEADER)
        self.io.show_menu([routine.value for routine in Routine])
        profile.record(routine=parse_routine(self.io.prompt(BINARY_CHOICE_PROMPT)))

        profile.record(
            study_habits=self._ask_multi_choice("Study Habits", self.study_habit_options),
            interests=self._ask_multi_choice("Interests", self.interest_options),
            lifestyle=self._ask_multi_choice("Lifestyle", self.lifestyle_options),
        )
        logger.info(f"Profile details collected (routine={profile.routine.value})")

    def _ask_multi_choice(self, label: str, options: List[str]) -> List[str]:
        if not options:
            return []

        self.io.show(MULTI_CHOICE_HEADER.format(label=label))
        self.io.show_menu(options)
        return parse_choices(self.io.prompt(MULTI_CHOICE_PROMPT), options)
