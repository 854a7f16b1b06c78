"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from toolupdate.core.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Functions call ctx.feedback methods instead of threading a 'json' or
    'quiet' boolean through every signature.

    Two modes:
    - Interactive: Show all diagnostics
    - Suppressed (--json): only warnings and errors, so stdout stays parseable
      and stderr stays short
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in JSON mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in JSON mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message (always shown)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for JSON mode: info and success are dropped."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))

