import logging
from ._errors import MissingInputError, InputFileError

__all__ = ["resolve_input", "read_text_file"]

logger = logging.getLogger(__name__)


def read_text_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as err:
        raise InputFileError(
            f"Cannot read file '{path}': {err.strerror or err}"
        ) from err
    except UnicodeDecodeError as err:
        raise InputFileError(f"File '{path}' is not valid UTF-8 text") from err


def resolve_input(value: str | None, file: str | None, *, field: str) -> str:
    """Return the text a command works on.

    A file, when given, always wins over the inline value; its contents are
    used exactly as read. Absent and empty sources both raise
    ``MissingInputError("<field> is required")``.
    """
    if file:
        if value:
            logger.debug(
                "%s given inline and by file, using file %s", field, file
            )
        else:
            logger.debug("Reading %s from file %s", field.lower(), file)
        text = read_text_file(file)
    else:
        text = value

    if not text:
        raise MissingInputError(f"{field} is required")
    return text
