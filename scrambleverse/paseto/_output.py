import json
from enum import StrEnum
from typing import Any, TextIO
from ._result import (
    Success,
    Failure,
    InvocationResult,
    HelpText,
    IssuedToken,
    DecodedClaims,
    LocalKey,
    KeyPair,
)

__all__ = ["OutputMode", "OutputRenderer"]


class OutputMode(StrEnum):
    TEXT = "text"
    JSON = "json"


def _compact(value: Any) -> str:
    return json.dumps(
        value, ensure_ascii=False, allow_nan=False, separators=(",", ":")
    )


class OutputRenderer:
    """Writes a result to the result sink, or an error to the channel the
    output mode dictates."""

    def __init__(self, mode: OutputMode, stdout: TextIO, stderr: TextIO):
        self.__mode = mode
        self.__stdout = stdout
        self.__stderr = stderr

    @property
    def mode(self) -> OutputMode:
        return self.__mode

    def render(self, result: InvocationResult):
        match result:
            case Success(value=value):
                self._render_value(value)
            case Failure(message=message):
                self.render_error(message)
            case _:
                raise TypeError(f"Cannot render {type(result).__name__}")

    def render_error(self, message: str):
        if self.__mode is OutputMode.JSON:
            self._emit(_compact({"error": message}))
        else:
            print("Error:", message, file=self.__stderr)

    def render_help(self, text: str):
        self._emit(text)

    def _render_value(self, value):
        as_json = self.__mode is OutputMode.JSON
        match value:
            case HelpText(text=text):
                self.render_help(text)
            case IssuedToken(token=token):
                self._emit(_compact({"token": token}) if as_json else token)
            case DecodedClaims(claims=claims):
                self._emit(
                    _compact(claims)
                    if as_json
                    else json.dumps(claims, ensure_ascii=False, allow_nan=False, indent=2)
                )
            case LocalKey(key=key):
                self._emit(_compact({"key": key}) if as_json else key)
            case KeyPair(secret_key=secret_key, public_key=public_key):
                if as_json:
                    self._emit(
                        _compact({"secretKey": secret_key, "publicKey": public_key})
                    )
                else:
                    self._emit(secret_key)
                    self._emit(public_key)
            case _:
                raise TypeError(f"Cannot render {type(value).__name__}")

    def _emit(self, line: str):
        print(line, file=self.__stdout)
