from textwrap import dedent
from .._config import PROGRAM_NAME, program_version
from .._errors import UnknownCommandError

__all__ = ["general_help", "command_help"]


def general_help(version: str | None = None) -> str:
    return dedent(
        f"""
        PASETO CLI ({version or program_version()})

        Usage:
          {PROGRAM_NAME} -c <command> [options]
          {PROGRAM_NAME} -c <command> --help     Show help for a specific command

        Commands:
          encrypt    Encrypt a payload with a local key
          decrypt    Decrypt a token with a local key
          sign       Sign a payload with a secret key
          verify     Verify a token with a public key

        Options:
          -v, --version <version>    PASETO version (default: v4)
          -h, --help                 Show this help message
          -c, --command <command>    Command to run
          -k, --key <key>            Key in PASERK format
          -p, --payload <payload>    JSON payload as string
          -f, --file <path>          Read payload or token from file
          -t, --token <token>        PASETO token string
          -F, --footer <footer>      Footer data
          -a, --assertion <data>     Additional assertion data
          -g, --generateKey <type>   Generate keys (local or public)
          -j, --json                 Output results in JSON format (default: off)

        Examples:
          {PROGRAM_NAME} -g local                     # Generate a local key
          {PROGRAM_NAME} -g public                    # Generate a key pair
          {PROGRAM_NAME} -c encrypt -k k4.local.xxx -p '{{"data":"test"}}'
          {PROGRAM_NAME} -c decrypt -k k4.local.xxx -t v4.local.xxx
          {PROGRAM_NAME} -c sign -k k4.secret.xxx -p '{{"data":"test"}}'
          {PROGRAM_NAME} -c verify -k k4.public.xxx -t v4.public.xxx
        """
    )


def _payload_command_help(
    name: str, description: str, key_type: str, key_name: str, payload_verb: str
) -> str:
    return dedent(
        f"""
        Command: {name}
        Description: {description}

        Usage:
          {PROGRAM_NAME} -c {name} -k <key> -p <payload> [options]

        Required Arguments:
          -k, --key <key>            {key_name} key in PASERK format ({key_type}.*)
          -p, --payload <payload>    JSON payload to {payload_verb}

        Optional Arguments:
          -f, --file <path>          Read payload from file instead of command line
          -F, --footer <footer>      Add footer data to the token
          -a, --assertion <data>     Add additional assertion data (implicit assertions)
          -j, --json                 Output result in JSON format

        Examples:
          {PROGRAM_NAME} -c {name} -k {key_type}.xxx -p '{{"data":"test"}}'
          {PROGRAM_NAME} -c {name} -k {key_type}.xxx -f payload.json -F '{{"kid":"key1"}}'
        """
    )


def _token_command_help(
    name: str, description: str, key_type: str, key_name: str, token_type: str
) -> str:
    return dedent(
        f"""
        Command: {name}
        Description: {description}

        Usage:
          {PROGRAM_NAME} -c {name} -k <key> -t <token> [options]

        Required Arguments:
          -k, --key <key>            {key_name} key in PASERK format ({key_type}.*)
          -t, --token <token>        PASETO token to {name}

        Optional Arguments:
          -f, --file <path>          Read token from file instead of command line
          -a, --assertion <data>     Additional assertion data to verify (implicit assertions)
          -j, --json                 Output result in JSON format

        Examples:
          {PROGRAM_NAME} -c {name} -k {key_type}.xxx -t {token_type}.xxx
          {PROGRAM_NAME} -c {name} -k {key_type}.xxx -f token.txt -a '{{"aud":"example"}}'
        """
    )


_COMMAND_HELP = {
    "encrypt": _payload_command_help(
        "encrypt",
        "Encrypt a payload with a local key to create a PASETO v4.local token",
        "k4.local",
        "Local",
        "encrypt",
    ),
    "decrypt": _token_command_help(
        "decrypt",
        "Decrypt a v4.local PASETO token using a local key",
        "k4.local",
        "Local",
        "v4.local",
    ),
    "sign": _payload_command_help(
        "sign",
        "Sign a payload with a secret key to create a PASETO v4.public token",
        "k4.secret",
        "Secret",
        "sign",
    ),
    "verify": _token_command_help(
        "verify",
        "Verify a v4.public PASETO token using a public key",
        "k4.public",
        "Public",
        "v4.public",
    ),
}


def command_help(command: str) -> str:
    try:
        return _COMMAND_HELP[command]
    except KeyError:
        raise UnknownCommandError(command) from None
