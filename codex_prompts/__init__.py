"""Custom prompts: Markdown files exposed as slash commands."""
