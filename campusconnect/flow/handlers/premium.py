"""
campusconnect/flow/handlers/premium.py

Handles: STEP 4 – Premium offer

- Shows the premium benefits
- "1" enables premium, any other answer keeps the free account
- Notifies the completion callback with the finished profile
"""

from typing import Callable, Optional

from campusconnect.core.logging import get_logger
from campusconnect.flow.handlers.base import Step
from campusconnect.flow.states import OnboardingState
from campusconnect.schemas.profile import UserProfile
from campusconnect.utils.console_utils import ConsoleIO
from campusconnect.utils.constants import (
    PREMIUM_OFFER_MESSAGE,
    PREMIUM_OPTIONS,
    PREMIUM_ENABLED_MESSAGE,
    PREMIUM_DECLINED_MESSAGE,
    BINARY_CHOICE_PROMPT,
    AFFIRMATIVE_CHOICE,
)

logger = get_logger(__name__)

CompletionCallback = Callable[[UserProfile], None]


def log_completion(profile: UserProfile) -> None:
    """Default completion callback: one confirmation line in the log."""
    logger.info(
        f"✅ Onboarding complete for {profile.student_id} "
        f"({profile.university}, premium={'yes' if profile.premium else 'no'})"
    )


class PremiumOfferStep(Step):
    state = OnboardingState.PREMIUM_OFFER

    def __init__(
        self,
        io: ConsoleIO,
        on_complete: Optional[CompletionCallback] = None,
        max_attempts: Optional[int] = None,
    ) -> None:
        super().__init__(io, max_attempts)
        self.on_complete = on_complete or log_completion

    def collect(self, profile: UserProfile) -> None:
        self.io.show(PREMIUM_OFFER_MESSAGE)
        self.io.show_menu(PREMIUM_OPTIONS)

        premium = self.io.prompt(BINARY_CHOICE_PROMPT) == AFFIRMATIVE_CHOICE
        profile.record(premium=premium)
        self.io.show(PREMIUM_ENABLED_MESSAGE if premium else PREMIUM_DECLINED_MESSAGE)

        self.on_complete(profile)
