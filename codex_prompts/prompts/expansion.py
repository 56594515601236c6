"""Argument interpolation for prompt templates.

Templates may reference ``$ARGUMENTS`` (the whole trimmed argument string)
and ``$1``, ``$2``, ... (individual arguments). Quoted spans count as one
argument. Substituted values are never re-scanned, and missing arguments
render as empty text.
"""
from .models import PLACEHOLDER_PATTERN, ArgumentTokens

QUOTE_CHARS = "\"'"


def tokenize_arguments(raw_args: str) -> list[str]:
    """Split an argument string into positional tokens.

    A token that starts with a single or double quote runs to the matching
    closing quote, which is dropped along with the opening one. An
    unterminated quote runs to the end of the input. Any other token runs to
    the next whitespace; quotes inside it are kept as literal characters.
    There are no escape sequences.

    Args:
        raw_args: Text typed after the prompt name.

    Returns:
        List of tokens in order.
    """
    tokens: list[str] = []
    pos = 0
    length = len(raw_args)

    while pos < length:
        char = raw_args[pos]
        if char.isspace():
            pos += 1
            continue

        if char in QUOTE_CHARS:
            end = raw_args.find(char, pos + 1)
            if end == -1:
                tokens.append(raw_args[pos + 1:])
                break
            tokens.append(raw_args[pos + 1:end])
            pos = end + 1
            continue

        end = pos
        while end < length and not raw_args[end].isspace():
            end += 1
        tokens.append(raw_args[pos:end])
        pos = end

    return tokens


def parse_arguments(raw_args: str) -> ArgumentTokens:
    """Parse a raw argument string into ArgumentTokens."""
    return ArgumentTokens(
        all=raw_args.strip(),
        positional=tuple(tokenize_arguments(raw_args)),
    )


def has_placeholders(template: str) -> bool:
    """Check whether a template references $ARGUMENTS or $N."""
    return PLACEHOLDER_PATTERN.search(template) is not None


def expand(template: str, raw_args: str) -> str:
    """Substitute arguments into a prompt template.

    Args:
        template: Raw prompt text.
        raw_args: User-provided argument string.

    Returns:
        Template with $ARGUMENTS and $1..$N replaced.
    """
    args = parse_arguments(raw_args)

    def _replace(match) -> str:
        key = match.group(1)
        if key == "ARGUMENTS":
            return args.all
        return args.get(int(key))

    return PLACEHOLDER_PATTERN.sub(_replace, template)
