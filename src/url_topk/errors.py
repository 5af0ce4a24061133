"""Error types raised by the pipeline."""


class UrlTopKError(Exception):
    """Base class for every fatal pipeline error."""


class InvalidInputError(UrlTopKError):
    """The input violates a precondition (missing, empty, or malformed)."""


class ShardTooLargeError(InvalidInputError):
    """A shard exceeded the configured size limit after partitioning."""


class PipelineIOError(UrlTopKError):
    """Opening, reading, writing or closing a file failed."""
