"""Streaming record reader shared by the input file and shard files."""

from collections.abc import Iterable, Iterator

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# Arbitrary input bytes survive a decode/encode round trip unchanged.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def decode_record(raw_line: bytes) -> str:
    """Strip the line terminator and decode one raw line into a record."""
    return raw_line.rstrip(b"\n\r").decode(ENCODING, ENCODING_ERRORS)


def encode_record(record: str) -> bytes:
    """Encode a record as one newline-terminated line."""
    return record.encode(ENCODING, ENCODING_ERRORS) + b"\n"


def iter_records(lines: Iterable[bytes]) -> Iterator[str]:
    """Yield decoded records from raw lines, including empty ones."""
    for raw_line in lines:
        yield decode_record(raw_line)


def stream_records(path: str) -> Iterator[str]:
    """Lazily read records from a file, one per line."""
    with open(path, "rb", buffering=BUFFER_SIZE) as handle:
        yield from iter_records(handle)
