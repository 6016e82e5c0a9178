"""
Pytest configuration and shared fixtures.

Provides filesystem fixtures that run the same test against the in-memory
FileOps and the real filesystem under tmp_path.
"""

from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath

import pytest

from slugpm.core.fileops import FileOps, MemoryFileOps, RealFileOps

# ==============================================================================
# Filesystem Fixtures
# ==============================================================================


@dataclass
class FsHarness:
    """A FileOps implementation plus helpers to seed and inspect it."""

    ops: FileOps
    root: PurePath

    def path(self, rel: str) -> PurePath:
        return self.root / rel

    def add_file(self, rel: str, data: bytes = b"") -> PurePath:
        path = self.path(rel)
        if isinstance(self.ops, MemoryFileOps):
            self.ops.add_file(path, data)
        else:
            real = Path(path)
            real.parent.mkdir(parents=True, exist_ok=True)
            real.write_bytes(data)
        return path

    def add_dir(self, rel: str) -> PurePath:
        path = self.path(rel)
        self.ops.create_dir_all(path)
        return path

    def read(self, path: PurePath) -> bytes:
        if isinstance(self.ops, MemoryFileOps):
            return self.ops.read_bytes(path)
        return Path(path).read_bytes()


@pytest.fixture
def memfs() -> MemoryFileOps:
    """Provide an empty in-memory filesystem."""
    return MemoryFileOps()


@pytest.fixture(params=["memory", "real"])
def fs(request, tmp_path) -> FsHarness:
    """
    Provide a filesystem harness, once in memory and once on disk.

    Tests using this fixture check that both FileOps implementations agree.
    """
    if request.param == "memory":
        return FsHarness(ops=MemoryFileOps(), root=PurePosixPath("/work"))
    return FsHarness(ops=RealFileOps(), root=tmp_path)


# ==============================================================================
# CLI Fixtures
# ==============================================================================


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work.resolve()
