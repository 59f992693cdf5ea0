"""
Error classes cho wordfreq.

Core (tokenize/count/merge) khong raise loi trong dieu kien binh thuong.
Tat ca loi duoi day den tu loader va duoc raise TRUOC khi pipeline chay,
nen pipeline khong bao gio nhan input thieu hoac hong.
"""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


# ============================================
# Error Classes
# ============================================


class WordFreqError(Exception):
    """Base error cho tat ca loi cua wordfreq."""

    pass


class DocumentLoadError(WordFreqError):
    """Base error cho loader (doc thu muc / doc file)."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class DirectoryNotFoundError(DocumentLoadError):
    """Thu muc khong ton tai hoac khong phai directory."""

    def __init__(self, path: PathLike):
        super().__init__(f"Directory {path} not found.", path)


class NoMatchingFilesError(DocumentLoadError):
    """Thu muc ton tai nhung khong co file nao khop pattern."""

    def __init__(self, path: PathLike, pattern: str):
        super().__init__(
            f"No files matching '{pattern}' found in the directory {path}.", path
        )
        self.pattern = pattern


class FileReadError(DocumentLoadError):
    """Khong doc hoac decode duoc mot file."""

    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"Error reading file {path}: {reason}", path)
        self.reason = reason
