from campusconnect.flow.states import (
    OnboardingState,
    get_progress_message,
    get_state_metadata,
    is_valid_transition,
)

LINEAR_ORDER = [
    OnboardingState.START,
    OnboardingState.UNIVERSITY,
    OnboardingState.STUDENT_ID,
    OnboardingState.PROFILE_DETAILS,
    OnboardingState.PREMIUM_OFFER,
    OnboardingState.SUMMARY,
]


def test_linear_transitions_are_valid():
    for from_state, to_state in zip(LINEAR_ORDER, LINEAR_ORDER[1:]):
        assert is_valid_transition(from_state, to_state)


def test_no_skipping_or_going_back():
    assert not is_valid_transition(OnboardingState.UNIVERSITY, OnboardingState.PROFILE_DETAILS)
    assert not is_valid_transition(OnboardingState.STUDENT_ID, OnboardingState.UNIVERSITY)
    assert not is_valid_transition(OnboardingState.START, OnboardingState.SUMMARY)


def test_any_step_can_be_cancelled():
    for state in LINEAR_ORDER[1:-1]:
        assert is_valid_transition(state, OnboardingState.CANCELLED)
    assert not is_valid_transition(OnboardingState.START, OnboardingState.CANCELLED)


def test_terminal_states_have_no_exit():
    for state in (OnboardingState.SUMMARY, OnboardingState.CANCELLED):
        for target in OnboardingState:
            assert not is_valid_transition(state, target)


def test_progress_message():
    assert get_progress_message(OnboardingState.STUDENT_ID) == "Step 2 of 4"
    assert get_progress_message(OnboardingState.SUMMARY) == ""


def test_metadata_display_names():
    assert get_state_metadata(OnboardingState.UNIVERSITY).display_name == "Select University"
    assert get_state_metadata(OnboardingState.PREMIUM_OFFER).display_name == "Premium Subscription"
