from importlib.metadata import version, PackageNotFoundError

__all__ = [
    "DISTRIBUTION_NAME",
    "LOG_LEVEL_ENV",
    "PROGRAM_NAME",
    "SUPPORTED_VERSION",
    "program_version",
]

DISTRIBUTION_NAME = "scrambleverse-paseto"
PROGRAM_NAME = "paseto-cli"
SUPPORTED_VERSION = "v4"
LOG_LEVEL_ENV = "PASETO_CLI_LOG_LEVEL"


def program_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "dev"
