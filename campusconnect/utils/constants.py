"""
campusconnect/utils/constants.py

Purpose: Centralized static content

- All user-facing messages
- Default option catalogs
- Menu labels

(Prevents hardcoding across the codebase)
"""

# ============================================================
# DEFAULT CATALOGS
# ============================================================

DEFAULT_UNIVERSITIES = (
    "IBA Karachi",
    "LUMS Lahore",
    "NED University",
    "UET Lahore",
    "University of Karachi",
    "Sukkur IBA",
    "Quaid-e-Azam University",
    "FAST-NU Lahore",
)

DEFAULT_STUDY_HABIT_OPTIONS = (
    "Group Study",
    "Solo Study",
    "Pomodoro",
    "Last-minute cramming",
    "Regular review",
)

DEFAULT_INTEREST_OPTIONS = (
    "Sports",
    "Coding",
    "Volunteering",
    "Music",
    "Debate",
    "Entrepreneurship",
)

DEFAULT_LIFESTYLE_OPTIONS = (
    "Non-smoker",
    "Vegan/Vegetarian",
    "Fitness Enthusiast",
    "Gamer",
    "Night-social",
)

# ============================================================
# BANNERS
# ============================================================

WELCOME_MESSAGE = "Welcome to {app_name} Onboarding"

CLOSING_MESSAGE = "\nThank you for joining {app_name}!"

CANCELLED_MESSAGE = "\nOnboarding cancelled."

UNEXPECTED_ERROR_MESSAGE = "Something went wrong: {error}"

INCOMPLETE_PROFILE_MESSAGE = "Some profile details are missing."

# ============================================================
# STEP 1 - UNIVERSITY
# ============================================================

ASK_UNIVERSITY_SEARCH_MESSAGE = "Search or press Enter to list all:"
UNIVERSITY_SEARCH_PROMPT = "Search: "
UNIVERSITY_CHOICE_PROMPT = "Enter number (or 'r' to search again): "
SEARCH_AGAIN_COMMAND = "r"
NO_UNIVERSITY_MATCHES_MESSAGE = "No universities match '{query}'."
UNIVERSITY_SELECTED_MESSAGE = "Selected: {university}"
INVALID_CHOICE_MESSAGE = "Invalid choice."

# ============================================================
# STEP 2 - STUDENT ID
# ============================================================

STUDENT_ID_PROMPT = "Student ID (at least {min_length} characters): "
STUDENT_ID_TOO_SHORT_MESSAGE = "ID too short. Try again."

# ============================================================
# STEP 3 - PROFILE DETAILS
# ============================================================

MAJOR_PROMPT = "Major/Department: "
ROUTINE_HEADER = "\nDaily Routine:"
BINARY_CHOICE_PROMPT = "Choose 1 or 2: "
MULTI_CHOICE_PROMPT = "Your choices: "
MULTI_CHOICE_HEADER = "\n{label} (enter numbers separated by commas):"

# ============================================================
# STEP 4 - PREMIUM
# ============================================================

PREMIUM_OFFER_MESSAGE = """Upgrade to Premium (optional):
 - Enhanced profile visibility
 - Unlimited peer connections
 - Premium badge
"""

PREMIUM_OPTIONS = ("Yes - Enable Premium", "Not now")
PREMIUM_ENABLED_MESSAGE = "Premium enabled!"
PREMIUM_DECLINED_MESSAGE = "Continuing with free account."

# ============================================================
# MISC
# ============================================================

AFFIRMATIVE_CHOICE = "1"
EMPTY_LIST_PLACEHOLDER = "-"
