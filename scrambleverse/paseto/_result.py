from dataclasses import dataclass
from typing import Any, TypeAlias
from ._codec import KeyPair

__all__ = [
    "Success",
    "Failure",
    "InvocationResult",
    "HelpText",
    "IssuedToken",
    "DecodedClaims",
    "LocalKey",
    "KeyPair",
]


@dataclass(frozen=True)
class HelpText:
    text: str


@dataclass(frozen=True)
class IssuedToken:
    token: str


@dataclass(frozen=True)
class DecodedClaims:
    claims: Any


@dataclass(frozen=True)
class LocalKey:
    key: str


ResultValue: TypeAlias = HelpText | IssuedToken | DecodedClaims | LocalKey | KeyPair


@dataclass(frozen=True)
class Success:
    value: ResultValue


@dataclass(frozen=True)
class Failure:
    """An error message, optionally followed by the general help text in
    text mode."""

    message: str
    show_help: bool = False


InvocationResult: TypeAlias = Success | Failure
