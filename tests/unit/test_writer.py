"""Unit tests for the page file writer."""

import stat
import threading

import pytest

from gopages.errors import PageWriteError
from gopages.pages.writer import FileWriter


@pytest.mark.asyncio
class TestFileWriter:
    async def test_creates_parent_directories(self, tmp_path):
        writer = FileWriter(tmp_path)
        await writer.save_file("pages/m/pkg/index.html", "<html></html>")

        target = tmp_path / "pages" / "m" / "pkg" / "index.html"
        assert target.read_text(encoding="utf-8") == "<html></html>"
        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    async def test_overwrites(self, tmp_path):
        writer = FileWriter(tmp_path)
        await writer.save_file("index.html", "old")
        await writer.save_file("index.html", "new")
        assert (tmp_path / "index.html").read_text(encoding="utf-8") == "new"

    async def test_absolute_path_ignores_root(self, tmp_path):
        writer = FileWriter(tmp_path / "unused")
        target = tmp_path / "abs" / "index.html"
        await writer.save_file(str(target), "x")
        assert target.exists()

    async def test_writes_off_the_event_loop_thread(self, tmp_path, monkeypatch):
        loop_thread = threading.get_ident()
        write_threads = []
        original = FileWriter._write

        def recording_write(path, content):
            write_threads.append(threading.get_ident())
            original(path, content)

        monkeypatch.setattr(FileWriter, "_write", staticmethod(recording_write))
        await FileWriter(tmp_path).save_file("m/index.html", "x")

        assert (tmp_path / "m" / "index.html").exists()
        assert write_threads and write_threads[0] != loop_thread

    async def test_failure_wrapped(self, tmp_path):
        (tmp_path / "blocker").write_text("a file, not a directory")
        writer = FileWriter(tmp_path)
        with pytest.raises(PageWriteError) as exc_info:
            await writer.save_file("blocker/index.html", "x")
        assert exc_info.value.code == "PAGE_WRITE_FAILED"
        assert "blocker/index.html" in exc_info.value.message
