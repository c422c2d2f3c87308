import json
from typing import Any, NamedTuple, Protocol
import pyseto
from pyseto import Key, PysetoError
from nacl import utils
from nacl.signing import SigningKey as NaClSigningKey
from ._errors import TokenCodecError

__all__ = ["KeyPair", "TokenCodec", "PysetoCodec"]


class KeyPair(NamedTuple):
    secret_key: str
    public_key: str


class TokenCodec(Protocol):
    def generate_local_key(self) -> str: ...

    def generate_public_key_pair(self) -> KeyPair: ...

    def encrypt(self, key: str, payload: Any, **options: str) -> str: ...

    def decrypt(self, key: str, token: str, **options: str) -> Any: ...

    def sign(self, key: str, payload: Any, **options: str) -> str: ...

    def verify(self, key: str, token: str, **options: str) -> Any: ...


class PysetoCodec:
    """PASETO v4 tokens and PASERK keys, backed by pyseto.

    Key material is drawn with PyNaCl. Payloads are any JSON value; they are
    stored as compact UTF-8 JSON and parsed back on decrypt/verify.
    """

    VERSION = 4
    LOCAL_KEY_SIZE = 32

    LOCAL_PREFIX = "k4.local."
    SECRET_PREFIX = "k4.secret."
    PUBLIC_PREFIX = "k4.public."

    def generate_local_key(self) -> str:
        try:
            key = Key.new(self.VERSION, "local", utils.random(self.LOCAL_KEY_SIZE))
            return key.to_paserk()
        except (PysetoError, ValueError) as err:
            raise TokenCodecError(f"Failed to generate local key: {err}") from err

    def generate_public_key_pair(self) -> KeyPair:
        signing_key = NaClSigningKey.generate()
        try:
            secret_key = Key.from_asymmetric_key_params(
                self.VERSION, d=signing_key.encode()
            )
            public_key = Key.from_asymmetric_key_params(
                self.VERSION, x=signing_key.verify_key.encode()
            )
            return KeyPair(secret_key.to_paserk(), public_key.to_paserk())
        except (PysetoError, ValueError) as err:
            raise TokenCodecError(f"Failed to generate key pair: {err}") from err

    def encrypt(
        self,
        key: str,
        payload: Any,
        *,
        footer: str | None = None,
        assertion: str | None = None,
    ) -> str:
        return self._encode(self.LOCAL_PREFIX, key, payload, footer, assertion)

    def decrypt(self, key: str, token: str, *, assertion: str | None = None) -> Any:
        return self._decode(self.LOCAL_PREFIX, key, token, assertion)

    def sign(
        self,
        key: str,
        payload: Any,
        *,
        footer: str | None = None,
        assertion: str | None = None,
    ) -> str:
        return self._encode(self.SECRET_PREFIX, key, payload, footer, assertion)

    def verify(self, key: str, token: str, *, assertion: str | None = None) -> Any:
        return self._decode(self.PUBLIC_PREFIX, key, token, assertion)

    def _load_key(self, prefix: str, paserk: str):
        if not paserk.startswith(prefix):
            raise TokenCodecError(f"Invalid key: expected a {prefix}* PASERK key")
        try:
            return Key.from_paserk(paserk)
        except (PysetoError, ValueError) as err:
            raise TokenCodecError(f"Invalid key: {err}") from err

    def _encode(
        self,
        prefix: str,
        key: str,
        payload: Any,
        footer: str | None,
        assertion: str | None,
    ) -> str:
        loaded = self._load_key(prefix, key)
        try:
            token = pyseto.encode(
                loaded,
                json.dumps(
                    payload, ensure_ascii=False, allow_nan=False, separators=(",", ":")
                ).encode("utf-8"),
                footer=_to_bytes(footer),
                implicit_assertion=_to_bytes(assertion),
            )
        except (PysetoError, ValueError) as err:
            raise TokenCodecError(str(err)) from err
        return token.decode("ascii")

    def _decode(self, prefix: str, key: str, token: str, assertion: str | None) -> Any:
        loaded = self._load_key(prefix, key)
        try:
            decoded = pyseto.decode(
                loaded, token, implicit_assertion=_to_bytes(assertion)
            )
        except (PysetoError, ValueError) as err:
            raise TokenCodecError(str(err)) from err

        try:
            return json.loads(decoded.payload, parse_constant=_reject_constant)
        except ValueError as err:
            raise TokenCodecError("Token payload is not valid JSON") from err


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _to_bytes(value: str | None) -> bytes:
    return value.encode("utf-8") if value is not None else b""
