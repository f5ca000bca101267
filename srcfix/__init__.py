from .config.models import FixerSettings
from .fixer import PathFixer, fix_file, fix_text, fix_virtual_file
from .vfs import (
    LocalFileSystemResolver,
    LocalVirtualFile,
    VirtualFile,
    VirtualFileResolver,
)

__all__ = [
    'FixerSettings',
    'LocalFileSystemResolver',
    'LocalVirtualFile',
    'PathFixer',
    'VirtualFile',
    'VirtualFileResolver',
    'fix_file',
    'fix_text',
    'fix_virtual_file',
]
