"""
Core Utilities Package

Chua cac utility modules:
- file_scanner: Liet ke text files trong thu muc (pathspec)
"""

from core.utils.file_scanner import (
    ScanConfig,
    build_pathspec,
    find_text_files,
    resolve_directory,
)

__all__ = [
    "ScanConfig",
    "build_pathspec",
    "find_text_files",
    "resolve_directory",
]
