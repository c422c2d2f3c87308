import sys
from typing import NoReturn, Sequence, TextIO
from scrambleverse.paseto import (
    ArgumentParseError,
    Failure,
    OutputMode,
    PysetoCodec,
    TokenCodec,
    configure_logging,
)
from ._dispatcher import Dispatcher
from ._options import parse_options, wants_json

__all__ = ["main", "run"]


def run(
    args: Sequence[str] | None = None,
    *,
    codec: TokenCodec | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    dispatcher = Dispatcher(
        codec if codec is not None else PysetoCodec(),
        stdout if stdout is not None else sys.stdout,
        stderr if stderr is not None else sys.stderr,
    )
    try:
        options = parse_options(args)
    except ArgumentParseError as err:
        raw = sys.argv[1:] if args is None else args
        mode = OutputMode.JSON if wants_json(raw) else OutputMode.TEXT
        return dispatcher.finish(Failure(str(err)), mode)

    return dispatcher.run(options)


def main(args: Sequence[str] | None = None) -> NoReturn:
    configure_logging()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
