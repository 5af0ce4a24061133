"""Rendering of the final top-K list."""

from collections.abc import Iterable

from url_topk.errors import PipelineIOError
from url_topk.reader import ENCODING, ENCODING_ERRORS
from url_topk.reduce.types import TopKEntry


def format_entry(entry: TopKEntry) -> str:
    return f"url = {entry.record}, count = {entry.count}"


def write_results(entries: Iterable[TopKEntry], output_path: str) -> None:
    """Write one line per entry, in the given order."""
    try:
        with open(output_path, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n") as handle:
            for entry in entries:
                handle.write(format_entry(entry))
                handle.write("\n")
    except OSError as exc:
        raise PipelineIOError(f"cannot write results to {output_path}: {exc}") from exc
