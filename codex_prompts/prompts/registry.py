"""Built-in command registry and slash input resolution."""
import logging
from collections.abc import Iterable
from pathlib import Path

from .catalog import PromptCatalog, build_catalog
from .discovery import default_prompts_dir, project_prompts_dir
from .expansion import expand

logger = logging.getLogger(__name__)


def parse_slash_input(text: str) -> tuple[str, str] | None:
    """Split "/name rest of line" into (name, rest).

    Returns None if the text is not a slash command.
    """
    text = text.lstrip()
    if not text.startswith("/"):
        return None

    parts = text[1:].split(maxsplit=1)
    if not parts:
        return None

    name = parts[0]
    args = parts[1] if len(parts) > 1 else ""
    return name, args


class CommandRegistry:
    """Built-in slash commands and the custom prompts that sit beside them."""

    # Built-in commands (cannot be overridden by prompts)
    BUILTIN_COMMANDS = [
        ("model", "Choose what model and reasoning effort to use"),
        ("approvals", "Choose what the assistant can do without approval"),
        ("new", "Start a new chat"),
        ("init", "Create an AGENTS.md file with instructions"),
        ("compact", "Summarize conversation to prevent hitting the context limit"),
        ("diff", "Show git diff (including untracked files)"),
        ("mention", "Mention a file"),
        ("status", "Show current session configuration and token usage"),
        ("mcp", "List configured MCP tools"),
        ("prompts", "Show example prompts"),
        ("logout", "Log out"),
        ("quit", "Exit"),
    ]

    def __init__(self, extra_reserved: Iterable[str] = ()):
        self._extra_reserved = set(extra_reserved)

    @property
    def builtin_names(self) -> set[str]:
        """Get set of built-in command names."""
        return {name for name, _ in self.BUILTIN_COMMANDS}

    @property
    def reserved_names(self) -> set[str]:
        """Names custom prompts may not use."""
        return self.builtin_names | self._extra_reserved

    def is_builtin(self, name: str) -> bool:
        """Check a typed name against the reserved set, ignoring case."""
        lowered = name.lower()
        return any(lowered == reserved.lower() for reserved in self.reserved_names)

    def load_catalog(
        self,
        project_root: Path | str,
        personal_dir: Path | str | None = None,
    ) -> PromptCatalog:
        """Scan prompt directories for a new session.

        Args:
            project_root: Project directory; prompts live in .codex/prompts.
            personal_dir: Personal prompts directory. Defaults to
                <codex-home>/prompts.

        Returns:
            Catalog for the session.
        """
        personal = Path(personal_dir) if personal_dir else default_prompts_dir()
        return build_catalog(
            project_prompts_dir(project_root),
            personal,
            reserved=self.reserved_names,
        )

    def render(self, catalog: PromptCatalog, text: str) -> str | None:
        """Resolve typed input to the message for the assistant.

        Args:
            catalog: Session prompt catalog.
            text: Line typed by the user, e.g. "/review main.py".

        Returns:
            Expanded prompt text, or None if the input is not a custom
            prompt invocation.
        """
        parsed = parse_slash_input(text)
        if parsed is None:
            return None

        name, args = parsed
        if self.is_builtin(name):
            return None

        entry = catalog.get(name)
        if entry is None:
            logger.debug(f"Unknown prompt: /{name}")
            return None

        return expand(entry.template, args)
