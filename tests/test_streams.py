from __future__ import annotations

import io
import os
import sys

import pytest

from domain_dedup.errors import InputSourceError, OutputSinkError, PipelineError
from domain_dedup.streams import LineSource, open_output, read_hostnames


def test_read_hostnames_yields_raw_lines(tmp_path) -> None:
    path = tmp_path / "hosts.txt"
    path.write_text("a.com\n b.org \nlast.net")
    assert list(read_hostnames(path)) == ["a.com\n", " b.org \n", "last.net"]


def test_read_hostnames_is_single_use(tmp_path) -> None:
    path = tmp_path / "hosts.txt"
    path.write_text("a.com\n")
    lines = read_hostnames(path)
    assert list(lines) == ["a.com\n"]
    assert list(lines) == []


def test_read_hostnames_missing_file_fails_eagerly(tmp_path) -> None:
    with pytest.raises(InputSourceError):
        read_hostnames(tmp_path / "missing.txt")


def test_read_hostnames_directory_is_rejected(tmp_path) -> None:
    with pytest.raises(InputSourceError):
        read_hostnames(tmp_path)


def test_undecodable_bytes_are_replaced(tmp_path) -> None:
    path = tmp_path / "hosts.txt"
    path.write_bytes(b"a.com\n\xff\xfe.com\n")
    lines = list(read_hostnames(path))
    assert lines[0] == "a.com\n"
    assert lines[1].endswith(".com\n")


def test_read_hostnames_from_stdin(monkeypatch) -> None:
    stdin = io.StringIO("a.com\nb.org\n")
    monkeypatch.setattr(sys, "stdin", stdin)
    with read_hostnames("-") as lines:
        assert list(lines) == ["a.com\n", "b.org\n"]
    assert not stdin.closed


def test_line_source_close_closes_owned_handle() -> None:
    handle = io.StringIO("a.com\n")
    source = LineSource(handle)
    source.close()
    assert handle.closed
    assert list(source) == []


def test_open_output_truncates(tmp_path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("stale\n")
    with open_output(path) as sink:
        sink.write("a.com\n")
    assert path.read_text() == "a.com\n"


def test_open_output_unwritable(tmp_path) -> None:
    with pytest.raises(OutputSinkError):
        with open_output(tmp_path / "no" / "such" / "dir" / "out.txt"):
            pass


def test_open_output_stdout(capsys) -> None:
    with open_output("-") as sink:
        sink.write("a.com\n")
    assert capsys.readouterr().out == "a.com\n"


def test_stdin_undecodable_bytes_are_replaced(monkeypatch) -> None:
    stdin = io.TextIOWrapper(io.BytesIO(b"a.com\n\xff.com\n"), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", stdin)
    lines = list(read_hostnames("-"))
    assert lines == ["a.com\n", "\ufffd.com\n"]


def test_lines_split_on_newline_only(tmp_path) -> None:
    path = tmp_path / "hosts.txt"
    path.write_bytes(b"x.a.com\rb.org\nc.net\r\n")
    assert list(read_hostnames(path)) == ["x.a.com\rb.org\n", "c.net\r\n"]


class _FullStdout:
    def write(self, s: str) -> int:
        return len(s)

    def flush(self) -> None:
        raise OSError(28, "No space left on device")


def test_open_output_stdout_flush_failure(monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdout", _FullStdout())
    with pytest.raises(PipelineError):
        with open_output("-") as sink:
            sink.write("a.com\n")


@pytest.mark.skipif(not os.path.exists("/dev/full"), reason="needs /dev/full")
def test_open_output_close_failure() -> None:
    with pytest.raises(PipelineError):
        with open_output("/dev/full") as sink:
            sink.write("a.com\n")
