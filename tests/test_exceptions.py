"""Test custom exceptions."""
import pytest
from pathlib import Path

from codex_prompts.exceptions import (
    CodexPromptsError,
    ConfigError,
    IOUnavailableError,
    PromptDirectoryError,
)


def test_base_exception():
    """CodexPromptsError is base for all custom exceptions."""
    with pytest.raises(CodexPromptsError):
        raise CodexPromptsError("test")


def test_config_error_inherits():
    """ConfigError inherits from CodexPromptsError."""
    err = ConfigError("bad yaml")
    assert isinstance(err, CodexPromptsError)
    assert str(err) == "bad yaml"


def test_prompt_directory_error_message():
    """PromptDirectoryError names the directory and reason."""
    err = PromptDirectoryError(Path("/tmp/prompts"), "Permission denied")

    assert isinstance(err, CodexPromptsError)
    assert err.directory == Path("/tmp/prompts")
    assert str(err) == "Cannot list prompt directory /tmp/prompts: Permission denied"


def test_io_unavailable_error_lists_failures():
    """IOUnavailableError keeps every directory failure."""
    failures = [
        PromptDirectoryError(Path("/a")),
        PromptDirectoryError(Path("/b")),
    ]
    err = IOUnavailableError(failures)

    assert isinstance(err, CodexPromptsError)
    assert err.failures == failures
    assert "/a, /b" in str(err)
