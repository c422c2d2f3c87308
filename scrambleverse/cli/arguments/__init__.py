from ._builder import ArgumentParserBuilder
from ._option import OptionSpec
from ._parser import RaisingArgumentParser

__all__ = ["ArgumentParserBuilder", "OptionSpec", "RaisingArgumentParser"]
