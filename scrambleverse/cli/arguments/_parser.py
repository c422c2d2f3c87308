from argparse import ArgumentParser, ArgumentError
from typing import NoReturn

__all__ = ["RaisingArgumentParser"]


class RaisingArgumentParser(ArgumentParser):
    """An ``ArgumentParser`` that raises ``ArgumentError`` instead of exiting.

    The caller decides how a malformed command line is reported and which
    status the process ends with.
    """

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(None, message)
