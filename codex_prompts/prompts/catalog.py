"""Per-session catalog of custom prompts."""
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from types import MappingProxyType

from codex_prompts.exceptions import IOUnavailableError, PromptDirectoryError

from .discovery import find_prompts
from .models import PromptEntry, PromptSource

logger = logging.getLogger(__name__)


class PromptCatalog:
    """Immutable name-keyed collection of prompt entries.

    Built once per session by build_catalog() and passed to whoever needs
    it. ``error`` holds an IOUnavailableError when no prompt directory could
    be listed.
    """

    def __init__(
        self,
        entries: Iterable[PromptEntry] = (),
        error: IOUnavailableError | None = None,
    ):
        by_name = {entry.name: entry for entry in entries}
        self._entries = MappingProxyType(dict(sorted(by_name.items())))
        self.error = error

    def get(self, name: str) -> PromptEntry | None:
        """Get prompt by exact name."""
        return self._entries.get(name)

    def __getitem__(self, name: str) -> PromptEntry:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[PromptEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PromptCatalog({list(self._entries)!r})"

    @property
    def names(self) -> list[str]:
        """Prompt names, sorted."""
        return list(self._entries)

    @property
    def entries(self) -> list[PromptEntry]:
        """All entries, sorted by name."""
        return list(self._entries.values())

    def search(self, query: str) -> list[PromptEntry]:
        """Entries whose name contains the query, case-insensitively."""
        needle = query.strip().lower()
        if not needle:
            return self.entries
        return [entry for entry in self if needle in entry.name.lower()]


def build_catalog(
    project_dir: Path | None,
    personal_dir: Path | None,
    reserved: Iterable[str] = (),
) -> PromptCatalog:
    """Scan the project and personal prompt directories.

    Loading order (later overrides earlier):
    1. Personal prompts from personal_dir
    2. Project prompts from project_dir

    Args:
        project_dir: Project prompts directory, or None.
        personal_dir: Personal prompts directory, or None.
        reserved: Built-in command names that prompts may not shadow.

    Returns:
        PromptCatalog with project prompts taking priority and reserved
        names removed.
    """
    reserved_lower = {name.lower() for name in reserved}
    scanned: dict[PromptSource, list[PromptEntry]] = {}
    failures: list[PromptDirectoryError] = []
    listed = False

    for source, directory in (
        (PromptSource.PROJECT, project_dir),
        (PromptSource.PERSONAL, personal_dir),
    ):
        try:
            entries = find_prompts(directory, source)
        except PromptDirectoryError as e:
            logger.warning(str(e))
            failures.append(e)
            continue
        if entries is None:
            logger.debug(f"No {source.value} prompts directory at {directory}")
            continue
        scanned[source] = entries
        listed = True

    if failures and not listed:
        error = IOUnavailableError(failures)
        logger.warning(f"{error}; continuing without custom prompts")
        return PromptCatalog(error=error)

    prompts: dict[str, PromptEntry] = {}
    for source in (PromptSource.PERSONAL, PromptSource.PROJECT):
        for entry in scanned.get(source, []):
            prompts[entry.name] = entry

    for name in list(prompts):
        if name.lower() in reserved_lower:
            logger.warning(
                f"Skipping prompt '{name}' - conflicts with built-in command"
            )
            del prompts[name]

    logger.info(f"Loaded {len(prompts)} custom prompts")
    return PromptCatalog(prompts.values())
