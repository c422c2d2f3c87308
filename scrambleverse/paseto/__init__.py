from ._errors import *
from ._codec import *
from ._input import *
from ._result import *
from ._output import *
from ._config import SUPPORTED_VERSION, program_version
from ._logging import configure_logging
