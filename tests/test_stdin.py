"""Tests for the bounded stdin reader."""

import io
import threading
import time

from statusline.core.stdin import read_stdin


class BlockingStream:
    """Stream whose read() blocks until released."""

    def __init__(self):
        self.release = threading.Event()

    def read(self):
        self.release.wait(5)
        return "late"


class FailingStream:
    def __init__(self, error):
        self.error = error

    def read(self):
        raise self.error


class TestReadStdin:
    def test_reads_everything(self):
        stream = io.StringIO('{"cwd": "/tmp"}\n')
        assert read_stdin(timeout=1.0, stream=stream) == '{"cwd": "/tmp"}\n'

    def test_empty_stream(self):
        assert read_stdin(timeout=1.0, stream=io.StringIO("")) == ""

    def test_timeout_returns_empty(self):
        stream = BlockingStream()
        start = time.monotonic()
        try:
            assert read_stdin(timeout=0.05, stream=stream) == ""
        finally:
            stream.release.set()
        assert time.monotonic() - start < 2.0

    def test_os_error_returns_empty(self):
        assert read_stdin(timeout=1.0, stream=FailingStream(OSError("bad fd"))) == ""

    def test_closed_stream_returns_empty(self):
        stream = io.StringIO("data")
        stream.close()
        assert read_stdin(timeout=1.0, stream=stream) == ""

    def test_decode_error_returns_empty(self):
        error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        assert read_stdin(timeout=1.0, stream=FailingStream(error)) == ""
