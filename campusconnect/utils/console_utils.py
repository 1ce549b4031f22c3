"""
campusconnect/utils/console_utils.py

Purpose: Console prompt/response helpers

- Reads one line per prompt
- Builds numbered menus and section headers
- Tracks end-of-input so callers can stop re-prompting
"""

import sys
from typing import Iterable, Optional, TextIO


def format_section_header(title: str) -> str:
    """Section banner, e.g. "\\n===== Student ID =====". """
    return f"\n===== {title} ====="


def format_numbered_list(options: Iterable[str]) -> str:
    """
    Renders options as a 1-based numbered menu.

    Args:
        options: Option labels

    Returns:
        One "n) label" line per option
    """
    return "\n".join(f"{i}) {label}" for i, label in enumerate(options, 1))


class ConsoleIO:
    """
    Line-oriented prompt/response channel over a pair of text streams.

    End-of-input is not an error: prompt() returns "" and sets `closed`.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self.closed = False

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def prompt(self, text: str) -> str:
        """
        Shows a prompt and blocks until one line is available.

        Args:
            text: Prompt text (no newline is added)

        Returns:
            The line without its trailing newline, or "" at end-of-input
        """
        self.stdout.write(text)
        self.stdout.flush()

        line = self.stdin.readline()
        if not line:
            self.closed = True
            # End the dangling prompt line
            self.stdout.write("\n")
            return ""

        return line.rstrip("\r\n")

    def show(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")

    def show_header(self, title: str) -> None:
        self.show(format_section_header(title))

    def show_menu(self, options: Iterable[str]) -> None:
        menu = format_numbered_list(options)
        if menu:
            self.show(menu)
