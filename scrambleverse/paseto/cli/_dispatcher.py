import json
import logging
from typing import Any, Callable, TextIO
from .._codec import TokenCodec
from .._errors import MissingInputError, InvalidPayloadError, UnknownCommandError
from .._input import resolve_input
from .._output import OutputMode, OutputRenderer
from .._result import (
    Success,
    Failure,
    InvocationResult,
    ResultValue,
    HelpText,
    IssuedToken,
    DecodedClaims,
    LocalKey,
)
from ._commands import Command, select_command
from ._help import general_help, command_help
from ._options import ParsedOptions

__all__ = ["Dispatcher"]

logger = logging.getLogger(__name__)


def _require_key(key: str | None, kind: str) -> str:
    if not key:
        raise MissingInputError(f"{kind} key is required")
    return key


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _parse_payload(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        raise InvalidPayloadError() from None


class Dispatcher:
    """Runs one parsed command line against a token codec.

    Results go to ``stdout``. Errors go to ``stderr`` prefixed with
    ``Error:`` in text mode, or to ``stdout`` as ``{"error": ...}`` in JSON
    mode. ``run`` returns the process status: 0 on success, 1 on any failure.
    """

    def __init__(
        self,
        codec: TokenCodec,
        stdout: TextIO,
        stderr: TextIO,
        *,
        program_version: str | None = None,
    ):
        self.__codec = codec
        self.__stdout = stdout
        self.__stderr = stderr
        self.__program_version = program_version
        self.__handlers: dict[Command, Callable[[ParsedOptions], ResultValue]] = {
            Command.HELP: self._general_help,
            Command.COMMAND_HELP: self._command_help,
            Command.GENERATE_LOCAL_KEY: self._generate_local_key,
            Command.GENERATE_PUBLIC_KEY: self._generate_public_key,
            Command.ENCRYPT: self._encrypt,
            Command.DECRYPT: self._decrypt,
            Command.SIGN: self._sign,
            Command.VERIFY: self._verify,
        }

    def renderer(self, mode: OutputMode) -> OutputRenderer:
        return OutputRenderer(mode, self.__stdout, self.__stderr)

    def run(self, options: ParsedOptions) -> int:
        result = self.dispatch(options)
        return self.finish(result, options.output_mode)

    def finish(self, result: InvocationResult, mode: OutputMode) -> int:
        renderer = self.renderer(mode)
        renderer.render(result)
        if isinstance(result, Failure):
            if result.show_help and mode is OutputMode.TEXT:
                renderer.render_help(general_help(self.__program_version))
            return 1
        return 0

    def dispatch(self, options: ParsedOptions) -> InvocationResult:
        try:
            command = select_command(options)
            logger.debug("Dispatching %s", command)
            return Success(self.__handlers[command](options))
        except UnknownCommandError as err:
            return Failure(str(err), show_help=True)
        except Exception as err:
            logger.debug("Command failed", exc_info=True)
            return Failure(str(err) or type(err).__name__)

    def _general_help(self, options: ParsedOptions) -> HelpText:
        return HelpText(general_help(self.__program_version))

    def _command_help(self, options: ParsedOptions) -> HelpText:
        return HelpText(command_help(options.command))

    def _generate_local_key(self, options: ParsedOptions) -> LocalKey:
        return LocalKey(self.__codec.generate_local_key())

    def _generate_public_key(self, options: ParsedOptions):
        return self.__codec.generate_public_key_pair()

    def _encrypt(self, options: ParsedOptions) -> IssuedToken:
        key = _require_key(options.key, "Local")
        payload = _parse_payload(
            resolve_input(options.payload, options.file, field="Payload")
        )
        return IssuedToken(
            self.__codec.encrypt(key, payload, **options.token_options(footer=True))
        )

    def _decrypt(self, options: ParsedOptions) -> DecodedClaims:
        key = _require_key(options.key, "Local")
        token = resolve_input(options.token, options.file, field="Token")
        return DecodedClaims(
            self.__codec.decrypt(key, token, **options.token_options(footer=False))
        )

    def _sign(self, options: ParsedOptions) -> IssuedToken:
        key = _require_key(options.key, "Secret")
        payload = _parse_payload(
            resolve_input(options.payload, options.file, field="Payload")
        )
        return IssuedToken(
            self.__codec.sign(key, payload, **options.token_options(footer=True))
        )

    def _verify(self, options: ParsedOptions) -> DecodedClaims:
        key = _require_key(options.key, "Public")
        token = resolve_input(options.token, options.file, field="Token")
        return DecodedClaims(
            self.__codec.verify(key, token, **options.token_options(footer=False))
        )
