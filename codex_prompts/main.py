"""codex-prompts entry point."""
import logging
import sys

from dotenv import load_dotenv

from codex_prompts.config.settings import load_config
from codex_prompts.exceptions import ConfigError
from codex_prompts.prompts.catalog import PromptCatalog
from codex_prompts.prompts.registry import CommandRegistry

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def init_catalog() -> tuple[CommandRegistry, PromptCatalog] | None:
    """Load configuration and scan prompts for this session."""
    load_dotenv()

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(str(e))
        return None

    logging.getLogger().setLevel(config.log_level)

    registry = CommandRegistry(extra_reserved=config.reserved_commands)
    catalog = registry.load_catalog(config.project_root, config.prompts_dir)
    return registry, catalog


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    With no arguments, lists available prompts. Otherwise treats the
    arguments as a typed prompt invocation and prints the expanded message.
    """
    if argv is None:
        argv = sys.argv[1:]

    loaded = init_catalog()
    if loaded is None:
        return 1
    registry, catalog = loaded

    if not argv:
        for entry in catalog:
            print(f"/{entry.name} - {entry.description}")
        return 0

    # Re-quote shell words that contain whitespace so they stay one argument
    words = [
        f'"{word}"' if any(c.isspace() for c in word) and '"' not in word else word
        for word in argv
    ]
    text = " ".join(words)
    if not text.startswith("/"):
        text = f"/{text}"

    message = registry.render(catalog, text)
    if message is None:
        logger.error(f"Unknown prompt: {argv[0]}")
        return 1

    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
