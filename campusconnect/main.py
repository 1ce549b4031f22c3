"""
campusconnect/main.py

Purpose: Application entry point

- Loads configuration and logging
- Builds the onboarding flow on stdin/stdout
- Maps the outcome to an exit status
- No business logic should be written here
"""

import sys
from typing import Optional

from campusconnect.core.config import Settings, settings, validate_settings
from campusconnect.core.logging import setup_logging, get_logger
from campusconnect.flow.dispatcher import build_onboarding_flow
from campusconnect.utils.console_utils import ConsoleIO

logger = get_logger(__name__)

EXIT_COMPLETED = 0
EXIT_CANCELLED = 1
EXIT_INTERRUPTED = 130


def run(io: Optional[ConsoleIO] = None, config: Optional[Settings] = None) -> int:
    """
    Runs one onboarding session.

    Returns:
        Process exit status
    """
    config = config or settings
    io = io or ConsoleIO()

    try:
        validate_settings(config)
    except ValueError as e:
        logger.critical(str(e))
        io.show(f"ERROR: {e}")
        return EXIT_CANCELLED

    try:
        completed = build_onboarding_flow(io, config).run()
    except KeyboardInterrupt:
        io.show("\nOnboarding interrupted.")
        return EXIT_INTERRUPTED

    return EXIT_COMPLETED if completed else EXIT_CANCELLED


def main() -> None:
    setup_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
