"""Fake UserFeedback that records messages for assertions."""

from toolupdate.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Captures every message as a (level, text) pair instead of printing.

    Examples:
        >>> feedback = FakeUserFeedback()
        >>> feedback.info("Checking toolA for updates...")
        >>> feedback.texts("info")
        ['Checking toolA for updates...']
    """

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def texts(self, level: str | None = None) -> list[str]:
        """Message texts, optionally filtered to one level."""
        return [text for lvl, text in self.messages if level is None or lvl == level]

    def joined(self) -> str:
        return "\n".join(self.texts())
