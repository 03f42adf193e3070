"""phonecode - Encode phone numbers as sequences of dictionary words."""

__version__ = "0.1.0"

from .config import Config
from .dictionary import DictionaryIndex
from .encoding import encode, extract_digits
from .exceptions import InputUnavailableError, OutputWriteError, PhoneCodeError
from .expansion import expand, odometer
from .models import LiteralDigit, Parse, PipelineStats, Segment, WordSpan
from .pipeline import PhoneCodePipeline
from .search import segment

__all__ = [
    "Config",
    "DictionaryIndex",
    "encode",
    "extract_digits",
    "InputUnavailableError",
    "OutputWriteError",
    "PhoneCodeError",
    "expand",
    "odometer",
    "LiteralDigit",
    "Parse",
    "PipelineStats",
    "Segment",
    "WordSpan",
    "PhoneCodePipeline",
    "segment",
]
