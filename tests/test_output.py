"""Tests for result rendering."""

import pytest

from url_topk.errors import PipelineIOError
from url_topk.output import format_entry, write_results
from url_topk.reduce import TopKEntry


def test_format_entry() -> None:
    entry = TopKEntry("http://example.com/a", 42)
    assert format_entry(entry) == "url = http://example.com/a, count = 42"


def test_write_results_one_line_per_entry(tmp_path) -> None:
    output = tmp_path / "res.txt"

    write_results([TopKEntry("aa1", 3), TopKEntry("ac3", 2)], str(output))

    assert output.read_text() == "url = aa1, count = 3\nurl = ac3, count = 2\n"


def test_write_results_empty_list(tmp_path) -> None:
    output = tmp_path / "res.txt"
    write_results([], str(output))
    assert output.read_bytes() == b""


def test_write_results_unwritable_path(tmp_path) -> None:
    with pytest.raises(PipelineIOError):
        write_results([TopKEntry("aa1", 1)], str(tmp_path / "missing" / "res.txt"))
