"""
campusconnect/flow/handlers/base.py

Purpose: Common contract for onboarding steps

- Title + state of each step
- execute(profile) -> success, the only thing the orchestrator calls
- Converts flow errors into a shown message and a failed step
- Bounded re-prompting shared by all steps
"""

from typing import Callable, Optional, TypeVar

from campusconnect.core.exceptions import (
    CampusConnectError,
    InputClosedError,
    RetryLimitExceededError,
)
from campusconnect.core.logging import get_logger, LogContext
from campusconnect.flow.states import OnboardingState, get_progress_message, get_state_metadata
from campusconnect.schemas.profile import UserProfile
from campusconnect.utils.console_utils import ConsoleIO

logger = get_logger(__name__)

T = TypeVar("T")


class Step:
    """
    One state of the linear onboarding flow.

    Subclasses set `state` and implement collect(); they record their own
    profile fields and may raise CampusConnectError to abort.
    """

    state: OnboardingState

    def __init__(self, io: ConsoleIO, max_attempts: Optional[int] = None) -> None:
        self.io = io
        self.max_attempts = max_attempts

    @property
    def title(self) -> str:
        return get_state_metadata(self.state).display_name

    def execute(self, profile: UserProfile) -> bool:
        """
        Runs the step against the shared profile.

        Returns:
            True if the step completed, False if the flow should stop
        """
        with LogContext(step=self.state.value):
            self.io.show_header(self.title)
            progress = get_progress_message(self.state)
            if progress:
                self.io.show(progress)

            logger.info(f"Starting step: {self.title}")
            try:
                self.collect(profile)
            except CampusConnectError as e:
                logger.warning(f"Step failed ({e.code}): {e.message}")
                self.io.show(e.message)
                return False

            logger.info(f"Step completed: {self.title}")
            return True

    def collect(self, profile: UserProfile) -> None:
        raise NotImplementedError

    def ask_until(
        self,
        prompt: str,
        accept: Callable[[str], Optional[T]],
        rejection_message: str,
    ) -> T:
        """
        Re-prompts until `accept` returns something other than None.

        Args:
            prompt: Prompt text
            accept: Maps an answer to a value, or None to reject it
            rejection_message: Shown after each rejected answer

        Returns:
            The accepted value

        Raises:
            InputClosedError: Input ended with no valid answer
            RetryLimitExceededError: More than max_attempts rejected answers
        """
        attempt = 0
        while True:
            attempt += 1
            answer = self.io.prompt(prompt)
            value = accept(answer)
            if value is not None:
                return value

            with LogContext(attempt=attempt):
                logger.debug("Answer rejected")
            if self.io.closed:
                raise InputClosedError(details={"attempts": attempt})

            self.io.show(rejection_message)
            if self.max_attempts is not None and attempt >= self.max_attempts:
                raise RetryLimitExceededError(
                    f"Too many invalid attempts ({attempt}).",
                    details={"attempts": attempt},
                )
