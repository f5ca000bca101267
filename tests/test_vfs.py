from pathlib import Path

import pytest

from srcfix.vfs import LocalFileSystemResolver, LocalVirtualFile, VirtualFile


@pytest.fixture
def resolver() -> LocalFileSystemResolver:
    return LocalFileSystemResolver()


def test_local_virtual_file_is_a_virtual_file():
    """Test LocalVirtualFile satisfies the VirtualFile protocol."""
    assert isinstance(LocalVirtualFile(path='/a'), VirtualFile)


def test_from_path_describes_directory(tmp_path: Path):
    """Test from_path records existence and directory state."""
    handle = LocalVirtualFile.from_path(tmp_path)
    assert handle == LocalVirtualFile(path=str(tmp_path), exists=True, is_directory=True)


def test_resolve_existing_file(resolver: LocalFileSystemResolver, tmp_path: Path):
    """Test an existing file resolves to an existing handle."""
    target = tmp_path / 'file.txt'
    target.write_text('content')

    handle = resolver.resolve(str(target), tolerate_missing_parents=False)

    assert handle == LocalVirtualFile(path=str(target), exists=True, is_directory=False)


def test_resolve_missing_path_strict(resolver: LocalFileSystemResolver, tmp_path: Path):
    """Test a missing path does not resolve without tolerance."""
    assert resolver.resolve(str(tmp_path / 'missing'), tolerate_missing_parents=False) is None


def test_resolve_missing_parents_tolerated(resolver: LocalFileSystemResolver, tmp_path: Path):
    """Test missing intermediate directories are tolerated when requested."""
    target = tmp_path / 'a' / 'b' / 'c.txt'

    handle = resolver.resolve(str(target), tolerate_missing_parents=True)

    assert handle == LocalVirtualFile(path=str(target), exists=False)
    assert not (tmp_path / 'a').exists()


def test_resolve_blocked_by_regular_file(resolver: LocalFileSystemResolver, tmp_path: Path):
    """Test a path below a regular file cannot be resolved."""
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory')

    assert resolver.resolve(str(blocker / 'child' / 'x'), tolerate_missing_parents=True) is None


@pytest.mark.parametrize('path', ['', 'relative/path', 'X/data'])
def test_resolve_relative_path(resolver: LocalFileSystemResolver, path: str):
    """Test relative and empty paths never resolve."""
    assert resolver.resolve(path, tolerate_missing_parents=True) is None
