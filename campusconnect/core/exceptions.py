from typing import Optional, Any


class CampusConnectError(Exception):
    """
    Base exception for the onboarding flow.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)


class NoMatchesError(CampusConnectError):
    """
    Raised when a catalog search returns nothing to choose from.
    """
    def __init__(self, message: str = "No matches found", details: Optional[Any] = None):
        super().__init__(message, code="NO_MATCHES", details=details)


class RetryLimitExceededError(CampusConnectError):
    """
    Raised when a question was answered incorrectly too many times.
    """
    def __init__(self, message: str = "Too many invalid attempts", details: Optional[Any] = None):
        super().__init__(message, code="RETRY_LIMIT_EXCEEDED", details=details)


class InputClosedError(CampusConnectError):
    """
    Raised when input ends while a question still has no valid answer.
    """
    def __init__(self, message: str = "Input closed before a valid answer was given", details: Optional[Any] = None):
        super().__init__(message, code="INPUT_CLOSED", details=details)


class ProfileFieldAlreadySetError(CampusConnectError):
    """
    Raised when a step tries to record a profile field a second time.
    """
    def __init__(self, message: str = "Profile field already set", details: Optional[Any] = None):
        super().__init__(message, code="FIELD_ALREADY_SET", details=details)
