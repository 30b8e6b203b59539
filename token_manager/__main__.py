"""
Token Manager Entry Point

Allows running the tool via `python -m token_manager` or the
`token-manager` console script. Configures logging to stderr (to keep
stdout for the operator) and starts the menu loop.
"""

import logging
import sys

from .cli.menu import TokenManagerApp
from .core.constants import EXIT_EOF, EXIT_INTERRUPTED


def setup_logging(level: int = logging.WARNING):
    """Configure logging to stderr"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def main() -> int:
    """Main entry point"""
    setup_logging()
    logger = logging.getLogger("main")

    app = TokenManagerApp()
    try:
        return app.run()
    except EOFError:
        logger.warning("Input closed, leaving")
        app.console.write()
        return EXIT_EOF
    except KeyboardInterrupt:
        app.console.write()
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
