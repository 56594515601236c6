"""Custom prompt discovery and expansion."""
from .models import ArgumentTokens, PromptEntry, PromptSource
from .discovery import (
    default_prompts_dir,
    find_prompts,
    parse_prompt_file,
    project_prompts_dir,
    scan_prompt_dir,
)
from .catalog import PromptCatalog, build_catalog
from .expansion import expand, has_placeholders, parse_arguments, tokenize_arguments
from .registry import CommandRegistry, parse_slash_input

__all__ = [
    "ArgumentTokens",
    "PromptEntry",
    "PromptSource",
    "default_prompts_dir",
    "find_prompts",
    "parse_prompt_file",
    "project_prompts_dir",
    "scan_prompt_dir",
    "PromptCatalog",
    "build_catalog",
    "expand",
    "has_placeholders",
    "parse_arguments",
    "tokenize_arguments",
    "CommandRegistry",
    "parse_slash_input",
]
