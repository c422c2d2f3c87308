from enum import StrEnum
from .._config import SUPPORTED_VERSION
from .._errors import UnsupportedVersionError, InvalidKeyTypeError, UnknownCommandError
from ._options import ParsedOptions

__all__ = ["Command", "TOKEN_COMMANDS", "select_command"]


class Command(StrEnum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"
    SIGN = "sign"
    VERIFY = "verify"
    GENERATE_LOCAL_KEY = "generateKey-local"
    GENERATE_PUBLIC_KEY = "generateKey-public"
    HELP = "help-general"
    COMMAND_HELP = "help-command"


TOKEN_COMMANDS = {
    command.value: command
    for command in (Command.ENCRYPT, Command.DECRYPT, Command.SIGN, Command.VERIFY)
}

_KEY_TYPES = {
    "local": Command.GENERATE_LOCAL_KEY,
    "public": Command.GENERATE_PUBLIC_KEY,
}


def select_command(options: ParsedOptions) -> Command:
    if options.help:
        return Command.COMMAND_HELP if options.command else Command.HELP

    if not options.command and not options.generate_key:
        return Command.HELP

    if options.version != SUPPORTED_VERSION:
        raise UnsupportedVersionError(options.version)

    if options.generate_key:
        try:
            return _KEY_TYPES[options.generate_key]
        except KeyError:
            raise InvalidKeyTypeError(options.generate_key) from None

    try:
        return TOKEN_COMMANDS[options.command]
    except KeyError:
        raise UnknownCommandError(options.command) from None
