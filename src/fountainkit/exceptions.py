"""Exceptions raised by FountainKit.

Every error carries a message, an optional hint telling the user what to do
next and optional details for debugging. ``str(error)`` renders all three.
"""

from __future__ import annotations

from typing import Any

MISSPELLED_CONFIG_KEYS = {
    "merge_action": "merge_actions",
    "merge_dialog": "merge_dialogue",
    "merge_dialogues": "merge_dialogue",
    "loglevel": "log_level",
}


class FountainKitError(Exception):
    """Base class for FountainKit errors."""

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Render message, hint and details as one multi-line string."""
        lines = [f"Error: {self.message}"]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        if self.details:
            lines.append("Details:")
            lines.extend(f"  {key}: {value}" for key, value in self.details.items())
        return "\n".join(lines)


class ConfigurationError(FountainKitError):
    """Invalid settings or an unusable configuration file."""


class ParseError(FountainKitError):
    """Unreadable screenplay input, or a parser used after finalize()."""


class FountainFileNotFoundError(FountainKitError):
    """A screenplay path that does not point to a file."""


def check_config_keys(config: dict[str, Any]) -> None:
    """Reject configuration keys that are common misspellings.

    Raises:
        ConfigurationError: Naming the key that should have been used
    """
    wrong = next((key for key in MISSPELLED_CONFIG_KEYS if key in config), None)
    if wrong is None:
        return

    correct = MISSPELLED_CONFIG_KEYS[wrong]
    raise ConfigurationError(
        message=f"Invalid configuration key '{wrong}'",
        hint=f"Use '{correct}' instead of '{wrong}'",
        details={
            "found_keys": list(config),
            "invalid_key": wrong,
            "correct_key": correct,
        },
    )
