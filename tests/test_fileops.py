"""
Tests for the FileOps implementations.

Most tests use the ``fs`` fixture and run against both MemoryFileOps and
RealFileOps so the two stay interchangeable.
"""

from pathlib import PurePosixPath

import pytest

from slugpm.core.fileops import FileOps, MemoryFileOps, RealFileOps


class TestProtocol:
    """Both implementations satisfy the FileOps protocol."""

    def test_real_is_fileops(self) -> None:
        assert isinstance(RealFileOps(), FileOps)

    def test_memory_is_fileops(self) -> None:
        assert isinstance(MemoryFileOps(), FileOps)


class TestExists:
    def test_missing_path(self, fs) -> None:
        assert not fs.ops.exists(fs.path("nope"))
        assert not fs.ops.is_dir(fs.path("nope"))

    def test_file(self, fs) -> None:
        path = fs.add_file("a.txt", b"x")
        assert fs.ops.exists(path)
        assert not fs.ops.is_dir(path)

    def test_directory(self, fs) -> None:
        path = fs.add_dir("d")
        assert fs.ops.exists(path)
        assert fs.ops.is_dir(path)


class TestCreateDirAll:
    def test_creates_intermediate_directories(self, fs) -> None:
        fs.ops.create_dir_all(fs.path("a/b/c"))
        assert fs.ops.is_dir(fs.path("a"))
        assert fs.ops.is_dir(fs.path("a/b"))
        assert fs.ops.is_dir(fs.path("a/b/c"))

    def test_existing_directory_is_noop(self, fs) -> None:
        fs.add_file("a/keep.txt", b"keep")
        fs.ops.create_dir_all(fs.path("a"))
        assert fs.read(fs.path("a/keep.txt")) == b"keep"

    def test_onto_existing_file_fails(self, fs) -> None:
        fs.add_file("a")
        with pytest.raises(FileExistsError):
            fs.ops.create_dir_all(fs.path("a"))

    def test_through_file_fails(self, fs) -> None:
        fs.add_file("a")
        with pytest.raises(NotADirectoryError):
            fs.ops.create_dir_all(fs.path("a/b"))


class TestMove:
    def test_move_file(self, fs) -> None:
        src = fs.add_file("a.txt", b"data")
        fs.add_dir("dest")
        dst = fs.path("dest/a.txt")

        fs.ops.move(src, dst)

        assert not fs.ops.exists(src)
        assert fs.read(dst) == b"data"

    def test_move_directory_with_contents(self, fs) -> None:
        fs.add_file("src/one.txt", b"1")
        fs.add_file("src/sub/two.txt", b"2")
        fs.add_dir("dest")

        fs.ops.move(fs.path("src"), fs.path("dest/moved"))

        assert not fs.ops.exists(fs.path("src"))
        assert fs.read(fs.path("dest/moved/one.txt")) == b"1"
        assert fs.read(fs.path("dest/moved/sub/two.txt")) == b"2"
        assert fs.ops.is_dir(fs.path("dest/moved/sub"))

    def test_missing_source(self, fs) -> None:
        with pytest.raises(FileNotFoundError):
            fs.ops.move(fs.path("nope"), fs.path("dest"))

    def test_existing_destination_is_not_overwritten(self, fs) -> None:
        src = fs.add_file("a.txt", b"new")
        dst = fs.add_file("b.txt", b"old")

        with pytest.raises(FileExistsError):
            fs.ops.move(src, dst)

        assert fs.read(src) == b"new"
        assert fs.read(dst) == b"old"

    def test_missing_destination_parent(self, fs) -> None:
        src = fs.add_file("a.txt")
        with pytest.raises(FileNotFoundError):
            fs.ops.move(src, fs.path("missing/a.txt"))
        assert fs.ops.exists(src)

    def test_directory_into_itself(self, fs) -> None:
        src = fs.add_dir("d")
        with pytest.raises(OSError):
            fs.ops.move(src, fs.path("d/inner"))
        assert fs.ops.is_dir(src)


class TestAppendBytes:
    def test_creates_missing_file(self, fs) -> None:
        fs.add_dir("d")
        path = fs.path("d/log.txt")

        fs.ops.append_bytes(path, b"line\n")

        assert fs.read(path) == b"line\n"

    def test_appends_to_existing_file(self, fs) -> None:
        path = fs.add_file("log.txt", b"one\n")

        fs.ops.append_bytes(path, b"two\n")
        fs.ops.append_bytes(path, b"three\n")

        assert fs.read(path) == b"one\ntwo\nthree\n"

    def test_empty_data_creates_empty_file(self, fs) -> None:
        fs.add_dir("d")
        path = fs.path("d/empty.txt")
        fs.ops.append_bytes(path, b"")
        assert fs.read(path) == b""

    def test_missing_parent(self, fs) -> None:
        with pytest.raises(FileNotFoundError):
            fs.ops.append_bytes(fs.path("missing/log.txt"), b"x")

    def test_onto_directory(self, fs) -> None:
        path = fs.add_dir("d")
        with pytest.raises(IsADirectoryError):
            fs.ops.append_bytes(path, b"x")

    def test_parent_is_file(self, fs) -> None:
        fs.add_file("f")
        with pytest.raises(NotADirectoryError):
            fs.ops.append_bytes(fs.path("f/log.txt"), b"x")


class TestMemoryFileOps:
    """Behaviour specific to the in-memory implementation."""

    def test_root_and_cwd_always_exist(self, memfs: MemoryFileOps) -> None:
        assert memfs.is_dir(PurePosixPath("/"))
        assert memfs.is_dir(PurePosixPath("."))

    def test_relative_paths(self, memfs: MemoryFileOps) -> None:
        memfs.create_dir_all(PurePosixPath("a/b"))
        assert memfs.paths() == [PurePosixPath("a"), PurePosixPath("a/b")]

    def test_dot_components_normalized(self, memfs: MemoryFileOps) -> None:
        memfs.add_file(PurePosixPath("./a/./f.txt"), b"x")
        assert memfs.read_bytes(PurePosixPath("a/f.txt")) == b"x"

    def test_read_bytes_errors(self, memfs: MemoryFileOps) -> None:
        memfs.create_dir_all(PurePosixPath("d"))
        with pytest.raises(FileNotFoundError):
            memfs.read_bytes(PurePosixPath("nope"))
        with pytest.raises(IsADirectoryError):
            memfs.read_bytes(PurePosixPath("d"))

    def test_move_leaves_similarly_named_siblings(self, memfs: MemoryFileOps) -> None:
        memfs.add_file(PurePosixPath("a/x"), b"1")
        memfs.add_file(PurePosixPath("ab/y"), b"2")
        memfs.move(PurePosixPath("a"), PurePosixPath("c"))
        assert memfs.read_bytes(PurePosixPath("c/x")) == b"1"
        assert memfs.read_bytes(PurePosixPath("ab/y")) == b"2"

    def test_move_root_fails(self, memfs: MemoryFileOps) -> None:
        with pytest.raises(OSError):
            memfs.move(PurePosixPath("/"), PurePosixPath("/elsewhere"))
