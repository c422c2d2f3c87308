from argparse import ArgumentParser
from typing import Any

__all__ = ["OptionSpec"]


class OptionSpec:
    def __init__(
        self,
        name: str,
        short: str,
        *,
        type: type = str,
        default: Any = None,
        dest: str | None = None,
        metavar: str | None = None,
        help: str | None = None,
    ):
        self.__name = name
        self.__short = short
        self.__type = type
        self.__default = default
        self.__dest = dest or name
        self.__metavar = metavar
        self.__help = help

    @property
    def name(self) -> str:
        return self.__name

    @property
    def short(self) -> str:
        return self.__short

    @property
    def dest(self) -> str:
        return self.__dest

    @property
    def default(self) -> Any:
        return self.__default

    @property
    def is_flag(self) -> bool:
        return self.__type is bool

    @property
    def flags(self) -> tuple[str, str]:
        return f"-{self.__short}", f"--{self.__name}"

    def register(self, parser: ArgumentParser):
        if self.is_flag:
            parser.add_argument(
                *self.flags,
                dest=self.__dest,
                action="store_true",
                default=bool(self.__default),
                help=self.__help,
            )
        else:
            parser.add_argument(
                *self.flags,
                dest=self.__dest,
                type=self.__type,
                default=self.__default,
                metavar=self.__metavar,
                help=self.__help,
            )
