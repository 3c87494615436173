"""Exception types raised by the scorer and its function extension."""


class SentimentError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SentimentError, ValueError):
    """Bad argument count/type for getRate(), or an executor used before init()."""


class ResourceLoadError(SentimentError, OSError):
    """The lexicon resource is missing or cannot be read."""


class LexiconFormatError(ResourceLoadError):
    """A lexicon record whose trailing field is not an integer."""

    def __init__(self, record: str, index: int):
        self.record = record
        self.index = index
        super().__init__(f"Malformed lexicon record #{index}: {record!r}")
