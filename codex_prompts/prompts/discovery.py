"""Discover and parse custom prompt files."""
import logging
from pathlib import Path

import yaml

from codex_prompts.config.settings import find_codex_home
from codex_prompts.exceptions import PromptDirectoryError

from .models import PromptEntry, PromptSource

logger = logging.getLogger(__name__)

PROMPT_SUFFIX = ".md"
MAX_DESCRIPTION_LENGTH = 100


def project_prompts_dir(root: Path | str) -> Path:
    """Return the project prompts directory: <root>/.codex/prompts."""
    return Path(root) / ".codex" / "prompts"


def default_prompts_dir() -> Path:
    """Return the personal prompts directory: <codex-home>/prompts."""
    return find_codex_home() / "prompts"


def prompt_name(filename: str) -> str | None:
    """Derive a prompt name from a filename.

    Returns None for files without the .md suffix and for a file named
    just ".md".
    """
    if not filename.endswith(PROMPT_SUFFIX):
        return None
    name = filename[: -len(PROMPT_SUFFIX)]
    return name or None


def describe(template: str, name: str) -> str:
    """Build a one-line description for listings.

    Uses a ``description`` key from leading YAML frontmatter, else the first
    non-empty line of the body, else the prompt name.
    """
    body = template
    description = ""

    if template.startswith("---"):
        parts = template.split("---", 2)
        if len(parts) >= 3:
            try:
                frontmatter = yaml.safe_load(parts[1]) or {}
            except yaml.YAMLError:
                frontmatter = {}  # Invalid YAML, treat as body text
            if isinstance(frontmatter, dict):
                description = str(frontmatter.get("description") or "")
                body = parts[2]

    if not description:
        for line in body.splitlines():
            line = line.strip().lstrip("#").strip()
            if line:
                description = line
                break

    if not description:
        description = name

    if len(description) > MAX_DESCRIPTION_LENGTH:
        description = description[: MAX_DESCRIPTION_LENGTH - 3] + "..."

    return description


def parse_prompt_file(path: Path, source: PromptSource) -> PromptEntry:
    """Read a .md file into a PromptEntry.

    Args:
        path: Path to the .md file.
        source: Directory kind the file came from.

    Returns:
        Parsed PromptEntry with the raw file text as template.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        ValueError: If the filename is not a valid prompt name.
    """
    name = prompt_name(path.name)
    if name is None:
        raise ValueError(f"Not a prompt file: {path}")

    template = path.read_text(encoding="utf-8")

    return PromptEntry(
        name=name,
        source=source,
        template=template,
        path=path,
        description=describe(template, name),
    )


def find_prompts(directory: Path | None, source: PromptSource) -> list[PromptEntry] | None:
    """Scan one directory for prompt files, reporting a missing directory.

    Listing the directory is the existence check, so a directory that cannot
    be reached at all is an error rather than silently empty.

    Args:
        directory: Directory to scan, or None.
        source: Directory kind, recorded on each entry.

    Returns:
        Entries sorted by name, or None if the directory does not exist.

    Raises:
        PromptDirectoryError: If the directory exists but cannot be listed.
    """
    if directory is None:
        return None
    directory = Path(directory)

    try:
        children = list(directory.iterdir())
    except FileNotFoundError:
        return None
    except NotADirectoryError as e:
        # ENOTDIR from a parent component means the directory is absent
        if not directory.is_file():
            return None
        raise PromptDirectoryError(directory, str(e)) from e
    except OSError as e:
        raise PromptDirectoryError(directory, str(e)) from e

    entries: list[PromptEntry] = []
    for path in children:
        if path.name == PROMPT_SUFFIX:
            logger.debug(f"Skipping {path}: empty prompt name")
            continue
        if prompt_name(path.name) is None:
            continue
        try:
            if not path.is_file():
                continue
            entries.append(parse_prompt_file(path, source))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read prompt {path}: {e}")

    entries.sort(key=lambda entry: entry.name)
    return entries


def scan_prompt_dir(directory: Path | None, source: PromptSource) -> list[PromptEntry]:
    """Scan one directory for prompt files.

    A missing directory yields no entries. Files that cannot be read are
    logged and skipped.

    Raises:
        PromptDirectoryError: If the directory exists but cannot be listed.
    """
    return find_prompts(directory, source) or []
