"""
campusconnect/flow/handlers/student_id.py

Handles: STEP 2 – Student ID

- Accepts the ID verbatim
- Validates minimum length
- Re-prompts until valid (bounded only by MAX_RETRY_ATTEMPTS / end of input)
"""

from typing import Optional

from campusconnect.flow.handlers.base import Step
from campusconnect.flow.states import OnboardingState
from campusconnect.schemas.profile import UserProfile
from campusconnect.utils.console_utils import ConsoleIO
from campusconnect.utils.constants import STUDENT_ID_PROMPT, STUDENT_ID_TOO_SHORT_MESSAGE
from campusconnect.utils.validation_utils import Validator, min_length_validator, STUDENT_ID_VALIDATOR


class StudentIdStep(Step):
    state = OnboardingState.STUDENT_ID

    def __init__(
        self,
        io: ConsoleIO,
        min_length: int = 3,
        max_attempts: Optional[int] = None,
        validator: Optional[Validator] = None,
    ) -> None:
        super().__init__(io, max_attempts)
        self.min_length = min_length
        if validator is None:
            validator = (
                STUDENT_ID_VALIDATOR if min_length == 3
                else min_length_validator(min_length, STUDENT_ID_TOO_SHORT_MESSAGE)
            )
        self.validator = validator

    def collect(self, profile: UserProfile) -> None:
        student_id = self.ask_until(
            STUDENT_ID_PROMPT.format(min_length=self.min_length),
            lambda answer: answer if self.validator.is_valid(answer) else None,
            self.validator.message(),
        )
        profile.record(student_id=student_id)
