"""Tests for the file-system backends (agentic_engine.scaffolder.filesystem)."""

from __future__ import annotations

from pathlib import Path

import pytest

from agentic_engine.errors import FileSystemError
from agentic_engine.scaffolder import LocalFileSystem, MemoryFileSystem


pytestmark = pytest.mark.unit


class TestLocalFileSystem:
    def test_mkdir_creates_parents(self, tmp_path: Path):
        fs = LocalFileSystem()
        target = tmp_path / "a" / "b" / "c"
        fs.mkdir(target)
        assert fs.is_dir(target)

    def test_mkdir_is_idempotent(self, tmp_path: Path):
        fs = LocalFileSystem()
        fs.mkdir(tmp_path / "x")
        fs.mkdir(tmp_path / "x")
        assert fs.is_dir(tmp_path / "x")

    def test_mkdir_over_file_raises(self, tmp_path: Path):
        occupied = tmp_path / "file"
        occupied.write_text("x", encoding="utf-8")
        with pytest.raises(FileSystemError) as exc_info:
            LocalFileSystem().mkdir(occupied)
        assert exc_info.value.path == occupied

    def test_mkdir_under_file_raises(self, tmp_path: Path):
        occupied = tmp_path / "file"
        occupied.write_text("x", encoding="utf-8")
        with pytest.raises(FileSystemError):
            LocalFileSystem().mkdir(occupied / "child")

    def test_write_and_read_utf8(self, tmp_path: Path):
        fs = LocalFileSystem()
        target = tmp_path / "doc.md"
        fs.write_text(target, "✅ done\n")
        assert fs.read_text(target) == "✅ done\n"
        assert target.read_bytes() == "✅ done\n".encode("utf-8")

    def test_write_overwrites(self, tmp_path: Path):
        fs = LocalFileSystem()
        target = tmp_path / "doc.md"
        fs.write_text(target, "first")
        fs.write_text(target, "second")
        assert fs.read_text(target) == "second"

    def test_write_into_missing_dir_raises(self, tmp_path: Path):
        target = tmp_path / "missing" / "doc.md"
        with pytest.raises(FileSystemError) as exc_info:
            LocalFileSystem().write_text(target, "x")
        assert str(target) in str(exc_info.value)

    def test_exists(self, tmp_path: Path):
        fs = LocalFileSystem()
        assert fs.exists(tmp_path)
        assert not fs.exists(tmp_path / "nope")


class TestMemoryFileSystem:
    def test_mkdir_registers_ancestors(self, memory_fs: MemoryFileSystem):
        memory_fs.mkdir(Path("/root/a/b"))
        assert memory_fs.is_dir(Path("/root"))
        assert memory_fs.is_dir(Path("/root/a"))
        assert memory_fs.is_dir(Path("/root/a/b"))

    def test_write_requires_parent(self, memory_fs: MemoryFileSystem):
        with pytest.raises(FileSystemError, match="No such file or directory"):
            memory_fs.write_text(Path("/nowhere/file.md"), "x")

    def test_write_then_read(self, memory_fs: MemoryFileSystem):
        memory_fs.mkdir(Path("/p"))
        memory_fs.write_text(Path("/p/file.md"), "hello")
        assert memory_fs.exists(Path("/p/file.md"))
        assert not memory_fs.is_dir(Path("/p/file.md"))
        assert memory_fs.read_text(Path("/p/file.md")) == "hello"

    def test_read_missing_raises(self, memory_fs: MemoryFileSystem):
        with pytest.raises(FileNotFoundError):
            memory_fs.read_text(Path("/p/missing.md"))

    def test_write_over_directory_raises(self, memory_fs: MemoryFileSystem):
        memory_fs.mkdir(Path("/p/dir"))
        with pytest.raises(FileSystemError, match="Is a directory"):
            memory_fs.write_text(Path("/p/dir"), "x")

    def test_mkdir_over_file_raises(self, memory_fs: MemoryFileSystem):
        memory_fs.mkdir(Path("/p"))
        memory_fs.write_text(Path("/p/file"), "x")
        with pytest.raises(FileSystemError, match="not a directory"):
            memory_fs.mkdir(Path("/p/file/child"))

    def test_read_only_blocks_new_children(self, memory_fs: MemoryFileSystem):
        memory_fs.mkdir(Path("/p/locked"))
        memory_fs.read_only.add("/p/locked")
        with pytest.raises(FileSystemError, match="Permission denied"):
            memory_fs.write_text(Path("/p/locked/file.md"), "x")
        with pytest.raises(FileSystemError, match="Permission denied"):
            memory_fs.mkdir(Path("/p/locked/sub"))

    def test_read_only_existing_dir_can_be_revisited(self, memory_fs: MemoryFileSystem):
        memory_fs.mkdir(Path("/p/locked"))
        memory_fs.read_only.add("/p/locked")
        memory_fs.mkdir(Path("/p/locked"))
        assert memory_fs.is_dir(Path("/p/locked"))
