"""Exceptions raised while learning from text and generating phrases."""


class RandomWriterError(Exception):
    """Base class for every failure the command line reports."""


class InvalidArgumentError(RandomWriterError, ValueError):
    """A sample size or length that is not a positive integer."""


class FileUnreadableError(RandomWriterError):
    """A named training file could not be opened."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to open '{path}': {reason}")


class StreamReadError(RandomWriterError):
    """An input stream failed part way through being read."""


class EmptyTableError(RandomWriterError):
    """Generation was requested from a table holding no contexts."""
