"""
campusconnect/flow/dispatcher.py

Purpose: Onboarding flow orchestrator

- Holds the ordered steps and the profile being built
- Runs steps in order, enforcing state transitions
- Stops at the first failed step with a cancellation notice
- Prints the summary when every step succeeded
"""

from typing import Optional, Sequence

from campusconnect.core.config import Settings, settings as default_settings
from campusconnect.core.logging import get_logger
from campusconnect.flow.handlers.base import Step
from campusconnect.flow.handlers.completion import render_summary
from campusconnect.flow.handlers.premium import CompletionCallback, PremiumOfferStep
from campusconnect.flow.handlers.profile_details import ProfileDetailsStep
from campusconnect.flow.handlers.student_id import StudentIdStep
from campusconnect.flow.handlers.university import UniversityStep
from campusconnect.flow.states import OnboardingState, is_valid_transition
from campusconnect.schemas.profile import UserProfile
from campusconnect.utils.console_utils import ConsoleIO
from campusconnect.utils.constants import (
    WELCOME_MESSAGE,
    CLOSING_MESSAGE,
    CANCELLED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    INCOMPLETE_PROFILE_MESSAGE,
)

logger = get_logger(__name__)


class OnboardingFlow:
    """
    Linear state machine over a fixed sequence of steps.

    Errors never escape run(): a failed or crashing step cancels the flow.
    """

    def __init__(
        self,
        steps: Sequence[Step],
        io: ConsoleIO,
        profile: Optional[UserProfile] = None,
        app_name: str = "CampusConnect",
    ) -> None:
        states = [OnboardingState.START] + [step.state for step in steps] + [OnboardingState.SUMMARY]
        for from_state, to_state in zip(states, states[1:]):
            if not is_valid_transition(from_state, to_state):
                raise ValueError(f"Invalid step order: {from_state.value} -> {to_state.value}")

        self.steps = list(steps)
        self.io = io
        self.profile = profile if profile is not None else UserProfile()
        self.app_name = app_name
        self.state = OnboardingState.START

    def _transition(self, new_state: OnboardingState) -> None:
        if not is_valid_transition(self.state, new_state):
            raise ValueError(f"Invalid state transition: {self.state.value} -> {new_state.value}")
        logger.debug(f"🔄 {self.state.value} -> {new_state.value}")
        self.state = new_state

    def _cancel(self, at_state: OnboardingState) -> bool:
        self._transition(OnboardingState.CANCELLED)
        self.io.show(CANCELLED_MESSAGE)
        logger.info(f"Onboarding cancelled at {at_state.value}")
        return False

    def run(self) -> bool:
        """
        Runs the whole flow.

        Returns:
            True if every step succeeded and the summary was shown
        """
        if self.state is not OnboardingState.START:
            logger.warning(f"Flow already ran (state={self.state.value}), ignoring run()")
            return False

        logger.info("🚀 Onboarding started")
        self.io.show(WELCOME_MESSAGE.format(app_name=self.app_name))

        for step in self.steps:
            self._transition(step.state)

            try:
                succeeded = step.execute(self.profile)
            except Exception as e:
                logger.error(f"❌ Step {step.state.value} crashed: {e}", exc_info=True)
                self.io.show(UNEXPECTED_ERROR_MESSAGE.format(error=e))
                succeeded = False

            if not succeeded:
                return self._cancel(step.state)

        if not self.profile.is_complete:
            logger.error("Every step succeeded but the profile is incomplete")
            self.io.show(INCOMPLETE_PROFILE_MESSAGE)
            return self._cancel(self.state)

        self._transition(OnboardingState.SUMMARY)
        self.io.show(render_summary(self.profile))
        self.io.show(CLOSING_MESSAGE.format(app_name=self.app_name))
        logger.info("🎉 Onboarding finished")
        return True


def build_onboarding_flow(
    io: ConsoleIO,
    config: Optional[Settings] = None,
    on_complete: Optional[CompletionCallback] = None,
) -> OnboardingFlow:
    """
    Wires the four onboarding steps from configuration.

    Args:
        io: Console channel shared by all steps
        config: Settings (defaults to the global instance)
        on_complete: Called with the finished profile by the premium step

    Returns:
        Ready-to-run flow
    """
    config = config or default_settings
    max_attempts = config.MAX_RETRY_ATTEMPTS

    steps = [
        UniversityStep(io, config.UNIVERSITIES, max_attempts=max_attempts),
        StudentIdStep(io, min_length=config.STUDENT_ID_MIN_LENGTH, max_attempts=max_attempts),
        ProfileDetailsStep(
            io,
            interest_options=config.INTEREST_OPTIONS,
            study_habit_options=config.STUDY_HABIT_OPTIONS,
            lifestyle_options=config.LIFESTYLE_OPTIONS,
            max_attempts=max_attempts,
        ),
        PremiumOfferStep(io, on_complete=on_complete, max_attempts=max_attempts),
    ]
    return OnboardingFlow(steps, io, app_name=config.APP_NAME)
