"""Data models for custom prompts."""
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

PLACEHOLDER_PATTERN = re.compile(r"\$(ARGUMENTS|[1-9][0-9]*)")


class PromptSource(str, Enum):
    """Directory a prompt was discovered in."""

    PROJECT = "project"
    PERSONAL = "personal"


@dataclass(frozen=True)
class PromptEntry:
    """A custom prompt loaded from a .md file."""

    name: str
    source: PromptSource
    template: str
    path: Path | None = None
    description: str = ""

    @property
    def needs_args(self) -> bool:
        """Whether the template references any argument placeholder."""
        return PLACEHOLDER_PATTERN.search(self.template) is not None


@dataclass(frozen=True)
class ArgumentTokens:
    """Raw argument string split for placeholder substitution."""

    all: str = ""
    positional: tuple[str, ...] = field(default_factory=tuple)

    def get(self, index: int) -> str:
        """Return the 1-based positional argument, or "" if absent."""
        if 1 <= index <= len(self.positional):
            return self.positional[index - 1]
        return ""
