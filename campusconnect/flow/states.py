"""
campusconnect/flow/states.py

Purpose: Defines all onboarding states

- Enum for each step in the flow
  (UNIVERSITY, STUDENT_ID, PROFILE_DETAILS, PREMIUM_OFFER, SUMMARY)
- Single source of truth for flow stages
- State transition validation
- Metadata for each state (display name, step number)
"""

from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass


class OnboardingState(str, Enum):
    """
    Defines all possible states in the onboarding flow.
    The happy path is strictly linear; CANCELLED is reachable from any step.
    """

    START = "START"

    UNIVERSITY = "UNIVERSITY"
    STUDENT_ID = "STUDENT_ID"
    PROFILE_DETAILS = "PROFILE_DETAILS"
    PREMIUM_OFFER = "PREMIUM_OFFER"

    # Terminal states
    SUMMARY = "SUMMARY"
    CANCELLED = "CANCELLED"


@dataclass
class StateMetadata:
    """
    Metadata associated with each onboarding state.
    """
    name: OnboardingState
    display_name: str
    step_number: Optional[int] = None  # For progress tracking
    total_steps: int = 4  # Steps that collect input


STATE_METADATA: Dict[OnboardingState, StateMetadata] = {
    OnboardingState.START: StateMetadata(
        name=OnboardingState.START,
        display_name="Welcome"
    ),
    OnboardingState.UNIVERSITY: StateMetadata(
        name=OnboardingState.UNIVERSITY,
        display_name="Select University",
        step_number=1
    ),
    OnboardingState.STUDENT_ID: StateMetadata(
        name=OnboardingState.STUDENT_ID,
        display_name="Enter Student ID",
        step_number=2
    ),
    OnboardingState.PROFILE_DETAILS: StateMetadata(
        name=OnboardingState.PROFILE_DETAILS,
        display_name="Profile Details",
        step_number=3
    ),
    OnboardingState.PREMIUM_OFFER: StateMetadata(
        name=OnboardingState.PREMIUM_OFFER,
        display_name="Premium Subscription",
        step_number=4
    ),
    OnboardingState.SUMMARY: StateMetadata(
        name=OnboardingState.SUMMARY,
        display_name="Summary"
    ),
    OnboardingState.CANCELLED: StateMetadata(
        name=OnboardingState.CANCELLED,
        display_name="Cancelled"
    ),
}


# Valid state transitions - no skipping and no going back
STATE_TRANSITIONS: Dict[OnboardingState, List[OnboardingState]] = {
    OnboardingState.START: [
        OnboardingState.UNIVERSITY,
    ],
    OnboardingState.UNIVERSITY: [
        OnboardingState.STUDENT_ID,
        OnboardingState.CANCELLED,
    ],
    OnboardingState.STUDENT_ID: [
        OnboardingState.PROFILE_DETAILS,
        OnboardingState.CANCELLED,
    ],
    OnboardingState.PROFILE_DETAILS: [
        OnboardingState.PREMIUM_OFFER,
        OnboardingState.CANCELLED,
    ],
    OnboardingState.PREMIUM_OFFER: [
        OnboardingState.SUMMARY,
        OnboardingState.CANCELLED,
    ],
    OnboardingState.SUMMARY: [],
    OnboardingState.CANCELLED: [],
}


def is_valid_transition(from_state: OnboardingState, to_state: OnboardingState) -> bool:
    """
    Checks if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Target state

    Returns:
        True if transition is allowed, False otherwise
    """
    return to_state in STATE_TRANSITIONS.get(from_state, [])


def get_state_metadata(state: OnboardingState) -> StateMetadata:
    """
    Retrieves metadata for a given state.
    """
    return STATE_METADATA.get(state, StateMetadata(
        name=state,
        display_name=state.value
    ))


def get_progress_message(state: OnboardingState) -> str:
    """
    Generates a progress message for the current state.

    Returns:
        Progress message (e.g., "Step 2 of 4"), empty for non-step states
    """
    metadata = get_state_metadata(state)
    if metadata.step_number:
        return f"Step {metadata.step_number} of {metadata.total_steps}"
    return ""
