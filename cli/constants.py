"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["share", "set-token", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#F45935 bold",
        "command": "#0088ff bold",
    }
)

RED_ORANGE = "\033[38;2;244;89;53m"
GREEN = "\033[32m"
RESET = "\033[0m"

LOGO = f"""{RED_ORANGE}
 ██████╗ ███████╗██████╗  ██████╗██╗      ██████╗ ██╗   ██╗██████╗
 ██╔══██╗██╔════╝██╔══██╗██╔════╝██║     ██╔═══██╗██║   ██║██╔══██╗
 ██████╔╝█████╗  ██║  ██║██║     ██║     ██║   ██║██║   ██║██║  ██║
 ██╔══██╗██╔══╝  ██║  ██║██║     ██║     ██║   ██║██║   ██║██║  ██║
 ██║  ██║███████╗██████╔╝╚██████╗███████╗╚██████╔╝╚██████╔╝██████╔╝
 ╚═╝  ╚═╝╚══════╝╚═════╝  ╚═════╝╚══════╝ ╚═════╝  ╚═════╝ ╚═════╝  share
{RESET}"""

WELCOME_TITLE = "RedCloud Share - share blobs through signed claims"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "share> "

DIR_MARKER = "/"

HELP_TEXT = """Available commands:
  share <blobref>[/] ...              Share blobs; a trailing '/' marks a directory
  set-token <token>                   Save the auth token for the blob server
  clear                               Clear screen and redisplay welcome message
  help                                Show this help
  exit                                Exit REPL

Sharing several blobs creates a new directory 'shared-<timestamp>' holding
them, and shares that directory instead.
Examples:
  set-token s3cr3t
  share sha224-9b1d...
  share sha224-9b1d... sha224-0c5e.../"""
