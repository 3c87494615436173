"""AFINN sentiment rating: sum of per-word polarity scores over a text."""

from .errors import ConfigurationError, LexiconFormatError, ResourceLoadError, SentimentError
from .function import EXTENSION, AttributeType, GetRate, validate_arguments
from .lexicon_model import Lexicon, load_lexicon, parse_records, tokens

__version__ = "1.0.0"
