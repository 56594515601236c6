"""Custom exceptions for codex-prompts."""


class CodexPromptsError(Exception):
    """Base exception for codex-prompts."""

    pass


class ConfigError(CodexPromptsError):
    """Configuration file could not be parsed."""

    pass


class PromptDirectoryError(CodexPromptsError):
    """A prompt directory exists but cannot be listed."""

    def __init__(self, directory, reason: str = ""):
        self.directory = directory
        self.reason = reason
        message = f"Cannot list prompt directory {directory}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class IOUnavailableError(CodexPromptsError):
    """No prompt directory could be listed."""

    def __init__(self, failures: list[PromptDirectoryError]):
        self.failures = failures
        dirs = ", ".join(str(f.directory) for f in failures)
        super().__init__(f"No prompt directory could be read ({dirs})")
