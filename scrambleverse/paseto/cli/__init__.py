from ._options import ParsedOptions, parse_options
from ._commands import Command, select_command
from ._help import general_help, command_help
from ._dispatcher import Dispatcher

__all__ = [
    "ParsedOptions",
    "parse_options",
    "Command",
    "select_command",
    "general_help",
    "command_help",
    "Dispatcher",
]
