"""
campusconnect/utils/validation_utils.py

Purpose: Input validation

- Reusable predicate + message validators
- Comma-separated menu choice parsing
- Numbered menu selection parsing
- Case-insensitive catalog search
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from campusconnect.utils.constants import STUDENT_ID_TOO_SHORT_MESSAGE


@dataclass(frozen=True)
class Validator:
    """
    A named predicate over a single answer plus the message shown on rejection.
    Stateless and reusable across calls.
    """
    predicate: Callable[[str], bool]
    rejection_message: str

    def is_valid(self, value: str) -> bool:
        return bool(self.predicate(value))

    def message(self) -> str:
        return self.rejection_message


def min_length_validator(length: int, message: Optional[str] = None) -> Validator:
    """
    Builds a validator accepting strings of at least `length` characters.

    The value is checked verbatim; surrounding whitespace counts.

    Args:
        length: Minimum number of characters
        message: Rejection message (defaults to a generic one)

    Returns:
        Validator instance
    """
    return Validator(
        predicate=lambda value: value is not None and len(value) >= length,
        rejection_message=message or f"Must be at least {length} characters.",
    )


STUDENT_ID_VALIDATOR = min_length_validator(3, STUDENT_ID_TOO_SHORT_MESSAGE)


def parse_index(text: str, size: int) -> Optional[int]:
    """
    Parses a 1-based menu selection.

    Args:
        text: Raw answer
        size: Number of options in the menu

    Returns:
        Zero-based index, or None if the answer is not a number in [1, size]
    """
    if text is None:
        return None

    token = text.strip()
    # Plain ASCII digits only; int() would also take "+2", "1_0" or "٣"
    if not (token.isascii() and token.isdigit()):
        return None

    choice = int(token)
    if 1 <= choice <= size:
        return choice - 1
    return None


def parse_choices(text: str, options: Sequence[str]) -> List[str]:
    """
    Parses comma-separated 1-based indices into the selected option labels.

    Non-numeric and out-of-range tokens are dropped without complaint.
    Order follows the input and duplicates are kept.

    Example:
        parse_choices("1,abc,99,2", ["A", "B", "C", "D"]) -> ["A", "B"]

    Args:
        text: User answer, e.g. "1,3"
        options: Ordered option catalog

    Returns:
        Selected labels
    """
    if not text:
        return []

    selected = []
    for token in text.split(","):
        index = parse_index(token, len(options))
        if index is not None:
            selected.append(options[index])
    return selected


def filter_catalog(query: str, catalog: Sequence[str]) -> List[str]:
    """
    Case-insensitive substring search. An empty query matches everything.

    Args:
        query: Search text
        catalog: Ordered catalog entries

    Returns:
        Matching entries in catalog order
    """
    needle = (query or "").lower()
    return [entry for entry in catalog if needle in entry.lower()]
