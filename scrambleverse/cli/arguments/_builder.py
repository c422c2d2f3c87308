from argparse import Namespace, SUPPRESS
from typing import Sequence, Any
from ._option import OptionSpec
from ._parser import RaisingArgumentParser

__all__ = ["ArgumentParserBuilder"]


class ArgumentParserBuilder:
    """Declarative schema of flag-style options.

    Every option has a long and a short form. Positional arguments are
    accepted anywhere on the command line and collected under
    ``positionals_dest``; unknown flags and options missing their value raise
    ``argparse.ArgumentError``.
    """

    def __init__(self, prog: str | None = None, positionals_dest: str = "positionals"):
        self.__prog = prog
        self.__positionals_dest = positionals_dest
        self.__options: list[OptionSpec] = []

    def option(
        self,
        name: str,
        short: str,
        /,
        type: type = str,
        default: Any = None,
        dest: str | None = None,
        metavar: str | None = None,
        help: str | None = None,
    ):
        self.__options.append(
            OptionSpec(
                name,
                short,
                type=type,
                default=default,
                dest=dest,
                metavar=metavar,
                help=help,
            )
        )
        return self

    @property
    def options(self) -> tuple[OptionSpec, ...]:
        return tuple(self.__options)

    def build(self) -> RaisingArgumentParser:
        parser = RaisingArgumentParser(
            prog=self.__prog, add_help=False, allow_abbrev=False
        )
        for option in self.__options:
            option.register(parser)
        parser.add_argument(self.__positionals_dest, nargs="*", help=SUPPRESS)
        return parser

    def __call__(self, args: Sequence[str] | None = None) -> Namespace:
        return self.build().parse_intermixed_args(args)
