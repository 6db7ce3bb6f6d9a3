"""Tests for HeadService — the per-source processing loop."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from headr.config.models import HeadConfig
from headr.errors import ReadError
from headr.infrastructure.sources import OpenedSource
from headr.services.head import HeadService
from headr.services.result import RunReport


def _run(config: HeadConfig) -> tuple[bytes, str, RunReport]:
    out = io.BytesIO()
    err = io.StringIO()
    report = HeadService(config).run(stdout=out, stderr=err)
    return out.getvalue(), err.getvalue(), report


class _FailingStream(io.BytesIO):
    def readline(self, size: int | None = -1) -> bytes:
        raise OSError(5, "Input/output error")

    def read(self, size: int | None = -1) -> bytes:
        raise OSError(5, "Input/output error")


@pytest.mark.usefixtures("workdir")
class TestHeadService:
    def test_single_file_no_header(self, workdir: Path) -> None:
        (workdir / "a.txt").write_bytes(b"1\n2\n3\n")
        out, err, report = _run(HeadConfig.build(["a.txt"]))
        assert out == b"1\n2\n3\n"
        assert err == ""
        assert report.results[0].ok
        assert report.results[0].written == 6

    def test_two_files_headers_in_order(self, workdir: Path) -> None:
        (workdir / "a.txt").write_bytes(b"alpha\n")
        (workdir / "b.txt").write_bytes(b"beta\n")
        out, _, report = _run(HeadConfig.build(["a.txt", "b.txt"]))
        assert out == b"==> a.txt <==\nalpha\n\n==> b.txt <==\nbeta\n"
        assert [r.identifier for r in report.results] == ["a.txt", "b.txt"]

    def test_missing_file_is_reported_and_skipped(self, workdir: Path) -> None:
        (workdir / "a.txt").write_bytes(b"alpha\n")
        out, err, report = _run(HeadConfig.build(["a.txt", "missing.txt"]))
        assert out == b"==> a.txt <==\nalpha\n"
        assert err == "headr: missing.txt: No such file or directory\n"
        assert len(report.failed) == 1
        failed = report.failed[0]
        assert failed.index == 1
        assert failed.error == "No such file or directory"

    def test_header_position_counts_failed_sources(self, workdir: Path) -> None:
        (workdir / "b.txt").write_bytes(b"beta\n")
        out, _, _ = _run(HeadConfig.build(["missing.txt", "b.txt"]))
        assert out == b"\n==> b.txt <==\nbeta\n"

    def test_byte_mode(self, workdir: Path) -> None:
        (workdir / "a.txt").write_bytes(b"hello world\n")
        out, _, report = _run(HeadConfig.build(["a.txt"], bytes_=5))
        assert out == b"hello"
        assert report.written == 5

    def test_byte_mode_with_headers(self, workdir: Path) -> None:
        (workdir / "a.txt").write_bytes(b"abc")
        (workdir / "b.txt").write_bytes(b"xyz")
        out, _, _ = _run(HeadConfig.build(["a.txt", "b.txt"], bytes_=2))
        assert out == b"==> a.txt <==\nab\n==> b.txt <==\nxy"

    def test_files_are_closed(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (workdir / "a.txt").write_bytes(b"alpha\n")
        opened: list[OpenedSource] = []

        from headr.services import head as head_module

        real_open = head_module.open_source

        def tracking_open(identifier: str) -> OpenedSource:
            result = real_open(identifier)
            opened.append(result)
            return result

        monkeypatch.setattr(head_module, "open_source", tracking_open)
        _run(HeadConfig.build(["a.txt"]))
        assert opened[0].stream is not None
        assert opened[0].stream.closed

    def test_read_error_aborts_run(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from headr.services import head as head_module

        monkeypatch.setattr(
            head_module,
            "open_source",
            lambda identifier: OpenedSource(identifier, stream=_FailingStream()),
        )
        with pytest.raises(ReadError) as excinfo:
            _run(HeadConfig.build(["bad.txt", "never.txt"]))
        assert excinfo.value.identifier == "bad.txt"
        assert excinfo.value.format_message() == "bad.txt: Input/output error"

    def test_stdin_sentinel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"piped\nmore\n")))
        out, _, _ = _run(HeadConfig.build([], lines=1))
        assert out == b"piped\n"

    def test_stdout_failure_is_not_blamed_on_source(self, workdir: Path) -> None:
        (workdir / "a.txt").write_bytes(b"alpha\nbeta\n")

        class ClosedPipe(io.BytesIO):
            def write(self, data: bytes) -> int:  # type: ignore[override]
                raise BrokenPipeError(32, "Broken pipe")

        err = io.StringIO()
        with pytest.raises(BrokenPipeError):
            HeadService(HeadConfig.build(["a.txt"])).run(stdout=ClosedPipe(), stderr=err)
        assert err.getvalue() == ""
