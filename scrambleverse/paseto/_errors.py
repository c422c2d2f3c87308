__all__ = [
    "PasetoCLIError",
    "ArgumentParseError",
    "MissingInputError",
    "InvalidPayloadError",
    "UnsupportedVersionError",
    "InvalidKeyTypeError",
    "UnknownCommandError",
    "InputFileError",
    "TokenCodecError",
]


class PasetoCLIError(Exception):
    """Base class of every failure the command line reports with status 1."""


class ArgumentParseError(PasetoCLIError):
    pass


class MissingInputError(PasetoCLIError):
    pass


class InvalidPayloadError(PasetoCLIError):
    def __init__(self, message: str = "Invalid JSON payload"):
        super().__init__(message)


class UnsupportedVersionError(PasetoCLIError):
    def __init__(self, version: str):
        super().__init__(
            f"Unsupported version: {version}. Currently, only 'v4' is supported."
        )
        self.version = version


class InvalidKeyTypeError(PasetoCLIError):
    def __init__(self, key_type: str):
        super().__init__('Key type must be "local" or "public"')
        self.key_type = key_type


class UnknownCommandError(PasetoCLIError):
    def __init__(self, command: str):
        super().__init__(f"Unknown command: {command}")
        self.command = command


class InputFileError(PasetoCLIError):
    pass


class TokenCodecError(PasetoCLIError):
    pass
