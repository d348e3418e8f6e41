"""CLI entry point."""

import shlex
import sys
import os

from common.logging_config import setup_logging
from cli.parser import ParseError, parse_command
from cli.repl import dispatch_command, repl_loop


def main() -> None:
    """
    Entry point for CLI.

    With arguments, runs them as a single command and exits
    (e.g. ``redcloud-share share sha224-...``); without, starts the REPL.
    """
    log_level = 'DEBUG' if '--debug' in sys.argv else os.getenv('LOG_LEVEL', 'INFO')

    logger = setup_logging('cli', log_level=log_level)

    if '--debug' in sys.argv:
        logger.info("Debug logging enabled")
        sys.argv.remove('--debug')

    logger.info("CLI starting...")
    try:
        if len(sys.argv) > 1:
            try:
                cmd_obj = parse_command(shlex.join(sys.argv[1:]))
            except ParseError as e:
                print(f"Error: {e}")
                sys.exit(2)
            result = dispatch_command(cmd_obj)
            print(result)
            if result.startswith("Error:"):
                sys.exit(1)
        else:
            repl_loop()
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        logger.info("CLI exiting")


if __name__ == "__main__":
    main()
