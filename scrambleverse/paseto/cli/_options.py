from argparse import ArgumentError
from dataclasses import dataclass
from typing import Sequence
from scrambleverse.cli.arguments import ArgumentParserBuilder
from .._config import PROGRAM_NAME, SUPPORTED_VERSION
from .._errors import ArgumentParseError
from .._output import OutputMode

__all__ = ["ParsedOptions", "parse_options", "options_schema", "wants_json"]


@dataclass(frozen=True)
class ParsedOptions:
    version: str = SUPPORTED_VERSION
    help: bool = False
    command: str | None = None
    key: str | None = None
    payload: str | None = None
    file: str | None = None
    token: str | None = None
    footer: str | None = None
    assertion: str | None = None
    generate_key: str | None = None
    json: bool = False

    @property
    def output_mode(self) -> OutputMode:
        return OutputMode.JSON if self.json else OutputMode.TEXT

    def token_options(self, *, footer: bool) -> dict[str, str]:
        options = {}
        if footer and self.footer is not None:
            options["footer"] = self.footer
        if self.assertion is not None:
            options["assertion"] = self.assertion
        return options


options_schema = (
    ArgumentParserBuilder(prog=PROGRAM_NAME)
    .option("version", "v", default=SUPPORTED_VERSION, metavar="<version>")
    .option("help", "h", type=bool, default=False)
    .option("command", "c", metavar="<command>")
    .option("key", "k", metavar="<key>")
    .option("payload", "p", metavar="<payload>")
    .option("file", "f", metavar="<path>")
    .option("token", "t", metavar="<token>")
    .option("footer", "F", metavar="<footer>")
    .option("assertion", "a", metavar="<data>")
    .option("generateKey", "g", dest="generate_key", metavar="<type>")
    .option("json", "j", type=bool, default=False)
)


def wants_json(args: Sequence[str]) -> bool:
    """Best-effort check for the JSON flag on a command line that failed to parse."""
    return any(arg in ("-j", "--json") for arg in args)


def parse_options(args: Sequence[str] | None = None) -> ParsedOptions:
    try:
        namespace = options_schema(args)
    except ArgumentError as err:
        raise ArgumentParseError(str(err)) from err

    return ParsedOptions(
        **{option.dest: getattr(namespace, option.dest) for option in options_schema.options}
    )
